"""Password validation functions."""

from .result import ValidationResult

PASSWORD_REQUIRED_MESSAGE = "Password is required"


def validate_password(password: str) -> ValidationResult:
    """Validate that a password was entered.

    Whitespace is significant, so a password of only spaces passes.

    Examples:
        >>> validate_password("   ").is_valid
        True
        >>> validate_password("").message
        'Password is required'

    """
    if len(password) > 0:
        return ValidationResult.ok()
    return ValidationResult.error(PASSWORD_REQUIRED_MESSAGE)
