"""Store and repository exceptions for neo-docstore."""

from typing import Optional

from .base import DocstoreError


class DatabaseError(DocstoreError):
    """Base class for document store errors."""
    pass


class DocumentMissingError(DatabaseError):
    """Raised by a document store when updating or removing an absent document."""

    def __init__(self, collection: str, document_id: str):
        self.collection = collection
        self.document_id = document_id
        super().__init__(
            f"Document '{document_id}' does not exist in '{collection}'",
            details={"collection": collection, "document_id": document_id},
        )


class QueryExecutionError(DatabaseError):
    """Raised when the store rejects or fails a query."""

    def __init__(self, message: str, collection: Optional[str] = None):
        self.collection = collection
        super().__init__(message, details={"collection": collection})


class PaginationError(QueryExecutionError):
    """Raised when a paginate call fails for a reason other than validation."""
    pass


class RepositoryError(DatabaseError):
    """Base class for repository errors."""
    pass


class EntityNotFoundError(RepositoryError):
    """Raised when no document exists for the requested identifier."""

    def __init__(self, entity_type: str, identifier: str):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(
            f"{entity_type} with ID {identifier} not found",
            details={"entity_type": entity_type, "identifier": identifier},
        )


class EntityDeletedError(RepositoryError):
    """Raised when the requested document exists but has been soft-deleted."""

    def __init__(self, entity_type: str, identifier: str):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(
            f"{entity_type} with ID {identifier} has been deleted",
            details={"entity_type": entity_type, "identifier": identifier},
        )


class EntityAlreadyExistsError(RepositoryError):
    """Raised when trying to create a document that already exists."""

    def __init__(self, entity_type: str, identifier: str):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(
            f"{entity_type} with ID {identifier} already exists",
            details={"entity_type": entity_type, "identifier": identifier},
        )


class CreationError(RepositoryError):
    """Raised when the store fails while creating a document."""
    pass


class UpdateError(RepositoryError):
    """Raised when the store fails while updating a document."""
    pass


class DeletionError(RepositoryError):
    """Raised when the store fails while deleting a document."""
    pass
