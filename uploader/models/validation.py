"""
Validation Helpers

Shared checks for the value records in uploader.models.
"""

from typing import Any


class ValidationError(ValueError):
    """
    Raised when a value record is constructed with invalid data.

    Attributes:
        field: Name of the offending field (e.g. "title", "privacy_status")
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


def require_text(field: str, value: Any, label: str) -> str:
    """
    Ensure value is a non-blank string.

    Args:
        field: Field name reported on failure
        value: Value to check
        label: Human-readable name used in the error message

    Returns:
        The value, unchanged

    Raises:
        ValidationError: If value is None, not a string, or blank
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, f"{label} cannot be blank. Got: {value!r}")
    return value
