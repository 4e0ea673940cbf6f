"""Employees router — Employee CRUD endpoints.

Routes:
    /employees       — List (optionally filtered), create employees
    /employees/{id}  — Get, update, delete an employee
"""


from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from employee_api.common.rate_limit import api_limit
from employee_api.dependencies import get_employee_service
from employee_api.employees.schemas import (
    CreateEmployeeRequest,
    EmployeeId,
    EmployeeResponse,
    UpdateEmployeeRequest,
)
from employee_api.employees.service import EmployeeService

router = APIRouter(prefix="", tags=["employees"])


# ── GET /employees — List employees ─────────────────────────────────

@router.get("", response_model=list[EmployeeResponse])
@api_limit
async def list_employees(
    request: Request,
    first_name_contains: Optional[str] = Query(
        None,
        alias="FirstNameContains",
        description="Case-insensitive substring of the first name",
    ),
    service: EmployeeService = Depends(get_employee_service),
):
    """List all employees, optionally filtered by first name."""
    return await service.list_employees(first_name_contains=first_name_contains)


# ── GET /employees/{id} — Single employee ──────────────────────────

@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={404: {"description": "Employee not found"}},
)
@api_limit
async def get_employee(
    request: Request,
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.get_employee(employee_id)


# ── POST /employees — Create employee ──────────────────────────────

@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Validation failed"}},
)
@api_limit
async def create_employee(
    request: Request,
    body: CreateEmployeeRequest,
    response: Response,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create a new employee record.

    Requires non-empty ``firstName`` and ``lastName``. The ``Location``
    header points at the new resource.
    """
    employee = await service.create_employee(body)
    response.headers["Location"] = f"/employees/{employee.id}"
    return employee


# ── PUT /employees/{id} — Update employee ──────────────────────────

@router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={
        400: {"description": "Validation failed"},
        404: {"description": "Employee not found"},
    },
)
@api_limit
async def update_employee(
    request: Request,
    employee_id: EmployeeId,
    body: UpdateEmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    """Replace address and contact details. Requires non-empty ``address1``."""
    return await service.update_employee(employee_id, body)


# ── DELETE /employees/{id} — Delete employee ───────────────────────

@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Employee not found"}},
)
@api_limit
async def delete_employee(
    request: Request,
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    """Delete an employee together with its benefits."""
    await service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
