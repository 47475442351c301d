"""Document store entities and protocols."""

from .document import StoredDocument
from .query import (
    DOCUMENT_ID,
    MEMBERSHIP_OPERATORS,
    FilterOperator,
    SortOrder,
    SortField,
    FieldPredicate,
    AnyOfPredicate,
    Predicate,
    StoreQuery,
)
from .protocols import DocumentStore, normalize_document_data

__all__ = [
    "StoredDocument",
    "DOCUMENT_ID",
    "MEMBERSHIP_OPERATORS",
    "FilterOperator",
    "SortOrder",
    "SortField",
    "FieldPredicate",
    "AnyOfPredicate",
    "Predicate",
    "StoreQuery",
    "DocumentStore",
    "normalize_document_data",
]
