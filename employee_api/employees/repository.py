"""Employee store — async persistence over a SQLAlchemy session."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.employees.models import Employee


class EmployeeRepository:
    """CRUD access to ``employees``.

    Writes are flushed, not committed; the request-scoped session owns the
    transaction (see ``employee_api.database.get_db``).
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list(self, *, first_name_contains: Optional[str] = None) -> Sequence[Employee]:
        """Return employees in insertion order, optionally filtered by first name."""
        query = select(Employee).order_by(Employee.id)
        if first_name_contains:
            query = query.where(
                Employee.first_name.icontains(first_name_contains, autoescape=True),
            )
        result = await self._session.execute(query)
        return result.scalars().all()

    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return await self._session.get(Employee, employee_id)

    async def exists(self, employee_id: int) -> bool:
        result = await self._session.execute(
            select(Employee.id).where(Employee.id == employee_id),
        )
        return result.scalar_one_or_none() is not None

    async def create(self, employee: Employee) -> Employee:
        self._session.add(employee)
        await self._session.flush()
        await self._session.refresh(employee)
        return employee

    async def update(self, employee: Employee, changes: dict[str, Any]) -> Employee:
        for field, value in changes.items():
            setattr(employee, field, value)
        employee.updated_at = datetime.now(timezone.utc)
        await self._session.flush()
        await self._session.refresh(employee)
        return employee

    async def delete(self, employee: Employee) -> None:
        await self._session.delete(employee)
        await self._session.flush()
