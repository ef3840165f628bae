"""
Core Validators

Shared validation functions for all modules.
"""

from typing import Optional

from .exceptions import BadRequest


def validate_required_fields(*values: Optional[str], message: str) -> None:
    """
    Validate that every value is present, with one error for all of them.

    Only absent (None) or empty values are rejected; whitespace is
    passed on to the providers as-is.

    Raises:
        BadRequest: With `message` if any value is None or empty
    """
    if any(not value for value in values):
        raise BadRequest(message)
