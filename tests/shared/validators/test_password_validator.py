"""Tests for the password validator."""

import pytest

from src.shared.validators.password import PASSWORD_REQUIRED_MESSAGE, validate_password


class TestPasswordValidation:
    """Test required password validation."""

    @pytest.mark.parametrize(
        "password",
        [
            "password",
            "123",
            "a",
            "!@#$%^&*()",
            "very long password with spaces",
            "MixedCasePassword123!",
            "   spaces   ",
        ],
    )
    def test_any_non_empty_password_passes(self, password):
        """Test any non-empty password passes validation."""
        assert validate_password(password).is_valid is True

    def test_whitespace_only_password_passes(self):
        """Test whitespace is not trimmed before the length check."""
        assert validate_password(" ").is_valid
        assert validate_password("\t\n").is_valid

    def test_very_long_password(self):
        """Test very long password passes validation."""
        assert validate_password("x" * 10_000).is_valid

    def test_empty_password_fails(self):
        """Test empty password returns the required message."""
        result = validate_password("")
        assert result.is_valid is False
        assert result.message == PASSWORD_REQUIRED_MESSAGE
        assert result.message == "Password is required"
