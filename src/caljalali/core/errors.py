from __future__ import annotations

from typing import Any, Optional


class CaljalaliError(Exception):
    """Base error."""


class ValidationError(CaljalaliError, ValueError):
    """A field is outside its allowed range."""

    def __init__(self, field: str, value: Any, bound: str):
        self.field = field
        self.value = value
        self.bound = bound
        super().__init__(f"invalid {field} {value!r} (must be {bound})")


class ParseError(CaljalaliError, ValueError):
    """Raised when a value does not match a layout or is not a valid Jalali date."""

    def __init__(self, message: str, *, value: Any = None, layout: Optional[str] = None):
        self.value = value
        self.layout = layout
        super().__init__(message)
