"""Shared FastAPI dependencies — per-request service composition."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.benefits.repository import BenefitRepository
from employee_api.benefits.service import BenefitService
from employee_api.database import get_db
from employee_api.employees.repository import EmployeeRepository
from employee_api.employees.service import EmployeeService
from employee_api.employees.validators import (
    CreateEmployeeRequestValidator,
    UpdateEmployeeRequestValidator,
)

_create_validator = CreateEmployeeRequestValidator()
_update_validator = UpdateEmployeeRequestValidator()


async def get_employee_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    return EmployeeService(
        EmployeeRepository(db),
        create_validator=_create_validator,
        update_validator=_update_validator,
    )


async def get_benefit_service(db: AsyncSession = Depends(get_db)) -> BenefitService:
    return BenefitService(BenefitRepository(db), EmployeeRepository(db))
