"""Document store feature: store protocol, query vocabulary and adapters."""

from .entities import (
    DOCUMENT_ID,
    DocumentStore,
    FieldPredicate,
    AnyOfPredicate,
    FilterOperator,
    SortField,
    SortOrder,
    StoredDocument,
    StoreQuery,
)
from .adapters import InMemoryDocumentStore, FirestoreDocumentStore, create_firestore_client

__all__ = [
    "DOCUMENT_ID",
    "DocumentStore",
    "FieldPredicate",
    "AnyOfPredicate",
    "FilterOperator",
    "SortField",
    "SortOrder",
    "StoredDocument",
    "StoreQuery",
    "InMemoryDocumentStore",
    "FirestoreDocumentStore",
    "create_firestore_client",
]
