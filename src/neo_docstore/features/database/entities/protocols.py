"""Protocol interface for document stores.

Repositories and paginators depend only on this contract, so the Firestore
adapter and the in-memory adapter are interchangeable.
"""

from abc import abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from .document import StoredDocument
from .query import StoreQuery


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for document persistence and querying."""

    @property
    def supports_or_queries(self) -> bool:
        """Whether the store can evaluate disjunctive predicates natively."""
        ...

    @abstractmethod
    async def insert(
        self,
        collection: str,
        data: Mapping[str, Any],
        document_id: Optional[str] = None,
    ) -> StoredDocument:
        """Insert a document, generating an identifier unless one is supplied."""
        ...

    @abstractmethod
    async def get(self, collection: str, document_id: str) -> Optional[StoredDocument]:
        """Fetch a document by identifier, or None when absent."""
        ...

    @abstractmethod
    async def update(self, collection: str, document_id: str, partial: Mapping[str, Any]) -> None:
        """Merge fields into an existing document.

        Raises:
            DocumentMissingError: If the document does not exist
        """
        ...

    @abstractmethod
    async def remove(self, collection: str, document_id: str) -> None:
        """Physically delete a document.

        Raises:
            DocumentMissingError: If the document does not exist
        """
        ...

    @abstractmethod
    async def query(self, query: StoreQuery) -> List[StoredDocument]:
        """Run a query and return matching documents in order."""
        ...

    @abstractmethod
    async def count(self, query: StoreQuery) -> int:
        """Count documents matching the query predicates."""
        ...

    @abstractmethod
    def to_native_datetime(self, value: datetime) -> Any:
        """Convert a portable datetime to the store's temporal type."""
        ...

    @abstractmethod
    def normalize_value(self, value: Any) -> Any:
        """Convert store-native temporal values to aware ``datetime``.

        Non-temporal values are returned unchanged.
        """
        ...


def normalize_document_data(store: DocumentStore, data: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize every top-level field of a document through the store."""
    return {key: store.normalize_value(value) for key, value in data.items()}
