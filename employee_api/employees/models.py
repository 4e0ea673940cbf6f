"""Employee ORM model.

SQLAlchemy 2.0 async-compatible model with Mapped[] annotations.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship

from employee_api.database import Base

if TYPE_CHECKING:
    from employee_api.benefits.models import EmployeeBenefit


class Employee(Base):
    """Employee master record."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)

    # ── Personal info ───────────────────────────────────────────────
    first_name: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    social_security_number: Mapped[Optional[str]] = mapped_column(sa.String(20))

    # ── Address / contact ───────────────────────────────────────────
    address1: Mapped[Optional[str]] = mapped_column(sa.String(200))
    address2: Mapped[Optional[str]] = mapped_column(sa.String(200))
    city: Mapped[Optional[str]] = mapped_column(sa.String(100))
    state: Mapped[Optional[str]] = mapped_column(sa.String(100))
    zip_code: Mapped[Optional[str]] = mapped_column(sa.String(20))
    phone_number: Mapped[Optional[str]] = mapped_column(sa.String(30))
    email: Mapped[Optional[str]] = mapped_column(sa.String(255))

    # ── Timestamps ──────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # ── Relationships ───────────────────────────────────────────────
    benefits: Mapped[list["EmployeeBenefit"]] = relationship(
        back_populates="employee",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="EmployeeBenefit.id",
    )

    __table_args__ = (
        sa.Index("ix_employees_first_name", "first_name"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __repr__(self) -> str:
        return f"<Employee {self.id} {self.full_name!r}>"
