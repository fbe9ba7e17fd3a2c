"""Shared validators package for the account forms.

This package contains the field validators used by the sign up, sign in and
guest forms. Validators never raise: they return a ValidationResult that the
caller turns into a form error, a pydantic ValueError or an API response.

Available validators:
- email.py: Email format validation, and the required email check used by forms
- password.py: Required password validation
- display_name.py: Display name trimming (optional field, never rejected)
"""

from collections.abc import Callable

from .display_name import normalize_display_name
from .email import EMAIL_REQUIRED_MESSAGE, INVALID_EMAIL_MESSAGE, validate_email, validate_required_email
from .password import PASSWORD_REQUIRED_MESSAGE, validate_password
from .result import ValidationResult

FieldValidator = Callable[[str], ValidationResult]

FIELD_VALIDATORS: dict[str, FieldValidator] = {
    "email": validate_required_email,
    "password": validate_password,
}


def validate_field(field: str, value: str) -> ValidationResult:
    """Run the validator registered for a form field.

    Required fields reject an empty value with their "is required" message.

    Raises:
        KeyError: If no validator is registered for the field

    """
    return FIELD_VALIDATORS[field](value)


__all__ = [
    "EMAIL_REQUIRED_MESSAGE",
    "FIELD_VALIDATORS",
    "INVALID_EMAIL_MESSAGE",
    "PASSWORD_REQUIRED_MESSAGE",
    "FieldValidator",
    "ValidationResult",
    "normalize_display_name",
    "validate_email",
    "validate_field",
    "validate_password",
    "validate_required_email",
]
