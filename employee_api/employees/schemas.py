"""Employee Pydantic v2 schemas — request / response shapes.

Naming conventions:
  - *Request  → request bodies (write); every field optional so that
                missing values reach the validators as field errors
  - *Response → response bodies (read)

Wire names are camelCase; requests also accept the snake_case names.
"""


from datetime import datetime
from typing import Annotated, Optional

from fastapi import Path
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ═════════════════════════════════════════════════════════════════════
# Write schemas
# ═════════════════════════════════════════════════════════════════════


class CreateEmployeeRequest(_CamelModel):
    """Payload for creating a new employee."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    social_security_number: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None


class UpdateEmployeeRequest(_CamelModel):
    """Replaces the address and contact fields of an employee."""

    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None


# ═════════════════════════════════════════════════════════════════════
# Read schemas
# ═════════════════════════════════════════════════════════════════════


class EmployeeResponse(_CamelModel):
    """Full employee representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    social_security_number: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ═════════════════════════════════════════════════════════════════════
# Path parameters
# ═════════════════════════════════════════════════════════════════════

# Largest value a signed 64-bit INTEGER column can hold
MAX_EMPLOYEE_ID = 2**63 - 1

EmployeeId = Annotated[
    int,
    Path(ge=1, le=MAX_EMPLOYEE_ID, description="Employee id"),
]
