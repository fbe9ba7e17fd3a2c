"""Account form schemas (DTOs)."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from src.shared.validators import normalize_display_name, validate_field


class FormField(StrEnum):
    """Fields that can be validated one at a time."""

    EMAIL = "email"
    PASSWORD = "password"
    DISPLAY_NAME = "display_name"


def _check(field: FormField, value: str) -> str:
    result = validate_field(field.value, value)
    if not result:
        raise ValueError(result.message)
    return value


# Request schemas
class SignupRequest(BaseModel):
    """Sign up form: email and password required, display name optional."""

    email: str = Field(..., description="Email address (any text with a single '@' and no spaces)")
    password: str = Field(..., description="Password (any non-empty value)")
    display_name: str | None = Field(None, description="Display name, the email is used when left blank")

    @field_validator("email")
    @classmethod
    def email_format(cls, value: str) -> str:
        """Validate email presence and format using shared validator."""
        return _check(FormField.EMAIL, value)

    @field_validator("password")
    @classmethod
    def password_required(cls, value: str) -> str:
        """Validate password presence using shared validator."""
        return _check(FormField.PASSWORD, value)

    @field_validator("display_name")
    @classmethod
    def trim_display_name(cls, value: str | None) -> str | None:
        """Trim the display name, blank becomes None."""
        return normalize_display_name(value)

    @property
    def resolved_display_name(self) -> str:
        """Return the display name to show, falling back to the email."""
        return self.display_name or self.email


class LoginRequest(BaseModel):
    """Sign in form."""

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def email_format(cls, value: str) -> str:
        """Validate email presence and format using shared validator."""
        return _check(FormField.EMAIL, value)

    @field_validator("password")
    @classmethod
    def password_required(cls, value: str) -> str:
        """Validate password presence using shared validator."""
        return _check(FormField.PASSWORD, value)


class GuestLoginRequest(BaseModel):
    """Guest sign in form, only an optional display name."""

    display_name: str | None = None

    @field_validator("display_name")
    @classmethod
    def trim_display_name(cls, value: str | None) -> str | None:
        return normalize_display_name(value)


class FieldValidationRequest(BaseModel):
    """Validate the current value of a single form field."""

    field: FormField
    value: str | None = None


# Response schemas
class FieldValidationResponse(BaseModel):
    """Result of a single field validation."""

    field: FormField
    valid: bool
    message: str | None = None
    value: str | None = Field(None, description="Normalized value, only set for display names")


class SignupValidationResponse(BaseModel):
    """Validated sign up form."""

    valid: bool = True
    email: str
    display_name: str


class LoginValidationResponse(BaseModel):
    """Validated sign in form."""

    valid: bool = True
    email: str


class GuestValidationResponse(BaseModel):
    """Validated guest form."""

    valid: bool = True
    display_name: str | None = None
