"""Employee service layer — validation, persistence and not-found handling.

The service is built per request from an explicit store and validators
(see ``employee_api.dependencies``); it raises ``ValidationException`` and
``NotFoundException`` which the exception handlers turn into 400 / 404.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from employee_api.common.exceptions import NotFoundException
from employee_api.employees.models import Employee
from employee_api.employees.repository import EmployeeRepository
from employee_api.employees.schemas import CreateEmployeeRequest, UpdateEmployeeRequest
from employee_api.employees.validators import RequestValidator

logger = logging.getLogger(__name__)


class EmployeeService:
    """Async CRUD operations for employees."""

    def __init__(
        self,
        repository: EmployeeRepository,
        create_validator: RequestValidator,
        update_validator: RequestValidator,
    ) -> None:
        self._repository = repository
        self._create_validator = create_validator
        self._update_validator = update_validator

    # ── List ────────────────────────────────────────────────────────

    async def list_employees(
        self,
        *,
        first_name_contains: Optional[str] = None,
    ) -> Sequence[Employee]:
        return await self._repository.list(first_name_contains=first_name_contains)

    # ── Get single ──────────────────────────────────────────────────

    async def get_employee(self, employee_id: int) -> Employee:
        employee = await self._repository.get_by_id(employee_id)
        if employee is None:
            raise NotFoundException("Employee", employee_id)
        return employee

    # ── Create ──────────────────────────────────────────────────────

    async def create_employee(self, data: CreateEmployeeRequest) -> Employee:
        """Validate *data* and persist a new employee."""
        self._create_validator.ensure_valid(data)

        employee = Employee(**data.model_dump())
        employee.first_name = employee.first_name.strip()
        employee.last_name = employee.last_name.strip()

        await self._repository.create(employee)
        logger.info("Created employee %d (%s)", employee.id, employee.full_name)
        return employee

    # ── Update ──────────────────────────────────────────────────────

    async def update_employee(
        self,
        employee_id: int,
        data: UpdateEmployeeRequest,
    ) -> Employee:
        """Replace the address / contact fields of an existing employee.

        Validation runs before the existence check, so an invalid payload
        is rejected with 400 even when *employee_id* is unknown.
        """
        self._update_validator.ensure_valid(data)

        employee = await self.get_employee(employee_id)
        await self._repository.update(employee, data.model_dump())
        logger.info("Updated employee %d", employee.id)
        return employee

    # ── Delete ──────────────────────────────────────────────────────

    async def delete_employee(self, employee_id: int) -> None:
        employee = await self.get_employee(employee_id)
        await self._repository.delete(employee)
        logger.info("Deleted employee %d", employee_id)
