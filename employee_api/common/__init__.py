"""Common module — shared utilities for the Employee API."""

from employee_api.common.exceptions import (
    AppException,
    NotFoundException,
    ValidationException,
    register_exception_handlers,
)
from employee_api.common.log_config import configure_logging
from employee_api.common.rate_limit import api_limit, limiter

__all__ = [
    # Exceptions
    "AppException",
    "NotFoundException",
    "ValidationException",
    "register_exception_handlers",
    # Logging
    "configure_logging",
    # Rate limiting
    "api_limit",
    "limiter",
]
