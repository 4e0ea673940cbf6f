"""Rule-based validation for employee write requests.

Each validator declares an ordered tuple of ``FieldRule`` entries.  A rule
names the request attribute it reads, the key it reports under in the
field-error map, a human label used in messages, and the checks to run.
Every failing check contributes one message, in declaration order::

    errors = CreateEmployeeRequestValidator().validate(request)
    # {"FirstName": ["'First Name' must not be empty."], ...}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from email_validator import EmailNotValidError, validate_email

from employee_api.common.exceptions import ValidationException

# (label, value) -> message, or None when the value passes
Check = Callable[[str, Any], Optional[str]]
FieldErrors = dict[str, list[str]]


# ── Checks ──────────────────────────────────────────────────────────

def not_empty(label: str, value: Any) -> Optional[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return f"'{label}' must not be empty."
    return None


def max_length(limit: int) -> Check:
    def _check(label: str, value: Any) -> Optional[str]:
        if isinstance(value, str) and len(value) > limit:
            return f"'{label}' must be {limit} characters or fewer."
        return None

    return _check


def email_address(label: str, value: Any) -> Optional[str]:
    if not value:
        return None
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return f"'{label}' is not a valid email address."
    return None


# ── Rule containers ─────────────────────────────────────────────────

@dataclass(frozen=True)
class FieldRule:
    attribute: str
    field: str
    label: str
    checks: tuple[Check, ...]


class RequestValidator:
    """Runs ``rules`` against a request object and collects field errors."""

    rules: tuple[FieldRule, ...] = ()

    def validate(self, request: Any) -> FieldErrors:
        errors: FieldErrors = {}
        for rule in self.rules:
            value = getattr(request, rule.attribute, None)
            for check in rule.checks:
                message = check(rule.label, value)
                if message is not None:
                    errors.setdefault(rule.field, []).append(message)
        return errors

    def ensure_valid(self, request: Any) -> None:
        """Raise ``ValidationException`` when any rule fails."""
        errors = self.validate(request)
        if errors:
            raise ValidationException(errors)


_CONTACT_RULES: tuple[FieldRule, ...] = (
    FieldRule("address2", "Address2", "Address2", (max_length(200),)),
    FieldRule("city", "City", "City", (max_length(100),)),
    FieldRule("state", "State", "State", (max_length(100),)),
    FieldRule("zip_code", "ZipCode", "Zip Code", (max_length(20),)),
    FieldRule("phone_number", "PhoneNumber", "Phone Number", (max_length(30),)),
    FieldRule("email", "Email", "Email", (max_length(255), email_address)),
)


class CreateEmployeeRequestValidator(RequestValidator):
    rules = (
        FieldRule("first_name", "FirstName", "First Name", (not_empty, max_length(100))),
        FieldRule("last_name", "LastName", "Last Name", (not_empty, max_length(100))),
        FieldRule(
            "social_security_number",
            "SocialSecurityNumber",
            "Social Security Number",
            (max_length(20),),
        ),
        FieldRule("address1", "Address1", "Address1", (max_length(200),)),
    ) + _CONTACT_RULES


class UpdateEmployeeRequestValidator(RequestValidator):
    rules = (
        FieldRule("address1", "Address1", "Address1", (not_empty, max_length(200))),
    ) + _CONTACT_RULES
