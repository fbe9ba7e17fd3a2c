"""Form validation exceptions."""

from fastapi import HTTPException, status


class UnknownFormFieldException(HTTPException):
    """Raised when a field has no validator registered."""

    def __init__(self, field: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=f"No validator for field: {field}")
