"""
Parameter Errors
"""
from typing import Any, Optional


class InvalidParameter(ValueError):
    """Raised when a layout is configured with an out-of-range parameter."""

    def __init__(self, name: str, value: Any, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name}={value!r}: {reason}")


def require_int(name: str, value: Any, minimum: Optional[int] = None) -> int:
    """Validate that ``value`` is a plain integer not below ``minimum``."""
    # bool is an int subclass; True/False are never meaningful sizes here
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(name, value, "must be an integer")
    if minimum is not None and value < minimum:
        raise InvalidParameter(name, value, f"must be >= {minimum}")
    return value
