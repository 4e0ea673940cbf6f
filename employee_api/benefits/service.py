"""Benefit service — lists the benefits owned by an employee."""

from __future__ import annotations

from typing import Sequence

from employee_api.benefits.models import EmployeeBenefit
from employee_api.benefits.repository import BenefitRepository
from employee_api.common.exceptions import NotFoundException
from employee_api.employees.repository import EmployeeRepository


class BenefitService:

    def __init__(
        self,
        benefits: BenefitRepository,
        employees: EmployeeRepository,
    ) -> None:
        self._benefits = benefits
        self._employees = employees

    async def get_benefits_for_employee(self, employee_id: int) -> Sequence[EmployeeBenefit]:
        """Return the employee's benefits; 404 if the employee is unknown."""
        if not await self._employees.exists(employee_id):
            raise NotFoundException("Employee", employee_id)
        return await self._benefits.list_for_employee(employee_id)
