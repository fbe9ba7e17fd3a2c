"""Display name normalization."""

from .whitespace import strip_whitespace


def normalize_display_name(display_name: str | None = None) -> str | None:
    """Trim a display name, mapping blank or missing input to None."""
    if display_name is None:
        return None
    return strip_whitespace(display_name) or None
