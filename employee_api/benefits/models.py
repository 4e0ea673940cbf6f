"""Benefit ORM model: EmployeeBenefit."""

from __future__ import annotations

import enum
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship

from employee_api.database import Base

if TYPE_CHECKING:
    from employee_api.employees.models import Employee


class BenefitType(str, enum.Enum):
    Health = "Health"
    Dental = "Dental"
    Vision = "Vision"


class EmployeeBenefit(Base):
    """A benefit enrolment owned by exactly one employee."""

    __tablename__ = "employee_benefits"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        sa.Integer,
        sa.ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    benefit_type: Mapped[BenefitType] = mapped_column(
        sa.Enum(BenefitType, name="benefit_type", native_enum=False, length=20),
        nullable=False,
    )
    description: Mapped[Optional[str]] = mapped_column(sa.String(255))
    cost: Mapped[Decimal] = mapped_column(sa.Numeric(10, 2), default=Decimal("0"))

    employee: Mapped["Employee"] = relationship(back_populates="benefits")

    __table_args__ = (
        sa.UniqueConstraint("employee_id", "benefit_type", name="uq_employee_benefit_type"),
    )

    def __repr__(self) -> str:
        return f"<EmployeeBenefit {self.benefit_type.value} for employee {self.employee_id}>"
