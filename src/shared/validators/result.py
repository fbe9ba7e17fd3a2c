"""Tagged result returned by the shared field validators."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a single form field.

    A failed result always carries the human-readable message that the form
    layer shows next to the field.
    """

    is_valid: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def error(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, message=message)

    def __bool__(self) -> bool:
        return self.is_valid

    def as_form_value(self) -> Literal[True] | str:
        """Return ``True`` or the rejection message, as form validate callbacks expect.

        Library-level adapter for callers that plug the validators straight into a
        form library. The HTTP layer reports results as FieldValidationResponse instead.

        Examples:
            >>> ValidationResult.ok().as_form_value()
            True
            >>> ValidationResult.error("Password is required").as_form_value()
            'Password is required'

        """
        if self.is_valid:
            return True
        return self.message or ""
