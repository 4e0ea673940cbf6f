"""Benefit response schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from employee_api.benefits.models import BenefitType


class EmployeeBenefitResponse(BaseModel):
    """One benefit enrolment as listed under an employee."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    employee_id: int
    benefit_type: BenefitType
    description: Optional[str] = None
    cost: float = 0.0
