"""Document store adapters."""

from .memory_store import InMemoryDocumentStore, generate_document_id
from .firestore_store import FirestoreDocumentStore, create_firestore_client

__all__ = [
    "InMemoryDocumentStore",
    "generate_document_id",
    "FirestoreDocumentStore",
    "create_firestore_client",
]
