"""Benefits router — read-only benefits listing nested under an employee.

Routes:
    /employees/{id}/benefits — Benefits owned by an employee
"""


from fastapi import APIRouter, Depends, Request

from employee_api.benefits.schemas import EmployeeBenefitResponse
from employee_api.benefits.service import BenefitService
from employee_api.common.rate_limit import api_limit
from employee_api.dependencies import get_benefit_service
from employee_api.employees.schemas import EmployeeId

router = APIRouter(prefix="", tags=["benefits"])


@router.get(
    "/{employee_id}/benefits",
    response_model=list[EmployeeBenefitResponse],
    responses={404: {"description": "Employee not found"}},
)
@api_limit
async def get_benefits_for_employee(
    request: Request,
    employee_id: EmployeeId,
    service: BenefitService = Depends(get_benefit_service),
):
    """List the employee's benefits (empty list when none are enrolled)."""
    return await service.get_benefits_for_employee(employee_id)
