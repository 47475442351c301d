"""Validation exceptions.

These describe caller mistakes. They are never wrapped by the repository or
the paginator, so callers can tell a bad filter from a store failure.
"""

from typing import Any, Optional

from .base import DocstoreError


class ValidationError(DocstoreError):
    """Base class for input validation errors."""
    pass


class InvalidFilterValueError(ValidationError):
    """Raised when a filter condition fails operator-specific validation."""

    def __init__(self, message: str, key: Optional[str] = None, operator: Optional[str] = None, value: Any = None):
        self.key = key
        self.operator = operator
        self.value = value
        super().__init__(
            f"Invalid filter value: {message}",
            details={"key": key, "operator": operator},
        )


class UnsupportedFilterError(ValidationError):
    """Raised when a filter composition is not supported by the target store."""

    def __init__(self, message: str, store: Optional[str] = None):
        self.store = store
        super().__init__(message, details={"store": store})


class InvalidCursorError(ValidationError):
    """Raised when a ``lastVisible`` cursor cannot be decoded or resolved."""

    def __init__(self, cursor: str, reason: str = ""):
        self.cursor = cursor
        self.reason = reason
        message = "Invalid cursor"
        if reason:
            message += f": {reason}"
        super().__init__(message, details={"reason": reason})


class InvalidPaginationError(ValidationError):
    """Raised when page or limit values are out of range."""

    def __init__(self, field: str, value: Any, requirement: str):
        self.field = field
        self.value = value
        self.requirement = requirement
        super().__init__(
            f"Invalid {field}: '{value}'. {requirement}",
            details={"field": field, "value": str(value), "requirement": requirement},
        )
