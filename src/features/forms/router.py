"""Account form validation router (API endpoints)."""

import logging

from fastapi import APIRouter

from src.shared.validators import normalize_display_name, validate_field

from .exceptions import UnknownFormFieldException
from .schemas import (
    FieldValidationRequest,
    FieldValidationResponse,
    FormField,
    GuestLoginRequest,
    GuestValidationResponse,
    LoginRequest,
    LoginValidationResponse,
    SignupRequest,
    SignupValidationResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/forms", tags=["Forms"])


@router.post("/validate", response_model=FieldValidationResponse)
async def validate_form_field(data: FieldValidationRequest):
    """Validate one field as the user types.

    A rejected value is a normal response carrying the message to display.
    """
    if data.field == FormField.DISPLAY_NAME:
        return FieldValidationResponse(field=data.field, valid=True, value=normalize_display_name(data.value))

    try:
        result = validate_field(data.field.value, data.value or "")
    except KeyError as exc:
        raise UnknownFormFieldException(data.field.value) from exc

    if not result:
        logger.debug(f"Field rejected: {data.field.value} ({result.message})")
    return FieldValidationResponse(field=data.field, valid=result.is_valid, message=result.message)


@router.post("/signup/validate", response_model=SignupValidationResponse)
async def validate_signup_form(data: SignupRequest):
    """Validate the sign up form and resolve the display name."""
    logger.debug("Sign up form valid")
    return SignupValidationResponse(email=data.email, display_name=data.resolved_display_name)


@router.post("/login/validate", response_model=LoginValidationResponse)
async def validate_login_form(data: LoginRequest):
    """Validate the sign in form."""
    return LoginValidationResponse(email=data.email)


@router.post("/guest/validate", response_model=GuestValidationResponse)
async def validate_guest_form(data: GuestLoginRequest):
    """Validate the guest form."""
    return GuestValidationResponse(display_name=data.display_name)
