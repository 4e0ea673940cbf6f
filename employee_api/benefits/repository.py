"""Benefit store — read access to ``employee_benefits``."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.benefits.models import EmployeeBenefit


class BenefitRepository:

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_employee(self, employee_id: int) -> Sequence[EmployeeBenefit]:
        result = await self._session.execute(
            select(EmployeeBenefit)
            .where(EmployeeBenefit.employee_id == employee_id)
            .order_by(EmployeeBenefit.id)
        )
        return result.scalars().all()
