"""Benefits module — read-only benefit records owned by an employee."""

from employee_api.benefits.models import BenefitType, EmployeeBenefit

__all__ = ["BenefitType", "EmployeeBenefit"]
