"""Email format validation."""

import re

from .result import ValidationResult
from .whitespace import WHITESPACE_CLASS

# Deliberately permissive: no dot required in the domain, dots allowed anywhere.
EMAIL_PATTERN = re.compile(rf"[^{WHITESPACE_CLASS}@]+@[^{WHITESPACE_CLASS}@]+")

INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
EMAIL_REQUIRED_MESSAGE = "Email is required"


def validate_email(email: str) -> ValidationResult:
    """Validate that an email has exactly one '@' with non-blank text on both sides.

    The value is matched as given: no trimming and no case folding.

    Args:
        email: Email address as typed into the form

    Returns:
        A successful result, or an error carrying INVALID_EMAIL_MESSAGE

    Examples:
        >>> validate_email("a@b").is_valid
        True
        >>> validate_email("user@@example.com").message
        'Please enter a valid email address'

    """
    if EMAIL_PATTERN.fullmatch(email):
        return ValidationResult.ok()
    return ValidationResult.error(INVALID_EMAIL_MESSAGE)


def validate_required_email(email: str) -> ValidationResult:
    """Validate a required email field: presence first, then format.

    Examples:
        >>> validate_required_email("").message
        'Email is required'
        >>> validate_required_email("user").message
        'Please enter a valid email address'

    """
    if not email:
        return ValidationResult.error(EMAIL_REQUIRED_MESSAGE)
    return validate_email(email)
