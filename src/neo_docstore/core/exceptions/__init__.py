"""Exception hierarchy for neo-docstore."""

from .base import DocstoreError, create_error_response
from .validation import (
    ValidationError,
    InvalidFilterValueError,
    UnsupportedFilterError,
    InvalidCursorError,
    InvalidPaginationError,
)
from .database import (
    DatabaseError,
    DocumentMissingError,
    QueryExecutionError,
    PaginationError,
    RepositoryError,
    EntityNotFoundError,
    EntityDeletedError,
    EntityAlreadyExistsError,
    CreationError,
    UpdateError,
    DeletionError,
)
from .api import (
    ApiError,
    BadRequestError,
    ResourceNotFoundError,
    CreationFailedError,
)

__all__ = [
    "DocstoreError",
    "create_error_response",
    # Validation
    "ValidationError",
    "InvalidFilterValueError",
    "UnsupportedFilterError",
    "InvalidCursorError",
    "InvalidPaginationError",
    # Database
    "DatabaseError",
    "DocumentMissingError",
    "QueryExecutionError",
    "PaginationError",
    "RepositoryError",
    "EntityNotFoundError",
    "EntityDeletedError",
    "EntityAlreadyExistsError",
    "CreationError",
    "UpdateError",
    "DeletionError",
    # API signals
    "ApiError",
    "BadRequestError",
    "ResourceNotFoundError",
    "CreationFailedError",
]
