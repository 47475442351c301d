"""Base exceptions for neo-docstore.

All exceptions inherit from DocstoreError and carry an error code and a
details mapping. Mapping error kinds to HTTP status codes is left to the
service that mounts the controllers.
"""

from typing import Any, Dict, Optional


class DocstoreError(Exception):
    """Base exception for all neo-docstore errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: DocstoreError) -> Dict[str, Any]:
    """Create a neutral error payload from an exception.

    Args:
        exception: The neo-docstore exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
