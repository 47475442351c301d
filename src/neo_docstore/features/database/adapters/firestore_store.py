"""Firestore implementation of the DocumentStore protocol.

Wraps ``google.cloud.firestore.AsyncClient``. Store queries are translated to
native queries with ``FieldFilter`` / ``Or`` filters, ``start_after`` on a
document snapshot and the server-side ``count()`` aggregation.
"""

import logging
import os
from datetime import date, datetime, timezone
from typing import Any, List, Mapping, Optional

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter, Or
from google.oauth2 import service_account

from ....config.settings import DocstoreSettings, get_settings
from ....core.exceptions import DocumentMissingError, InvalidCursorError
from ....utils.datetime import to_datetime
from ..entities.document import StoredDocument
from ..entities.query import (
    DOCUMENT_ID,
    AnyOfPredicate,
    FieldPredicate,
    FilterOperator,
    Predicate,
    SortOrder,
    StoreQuery,
)

logger = logging.getLogger(__name__)

# The Python SDK spells the array operators with underscores
_NATIVE_OPERATORS = {
    FilterOperator.EQUAL: "==",
    FilterOperator.NOT_EQUAL: "!=",
    FilterOperator.LESS_THAN: "<",
    FilterOperator.LESS_THAN_OR_EQUAL: "<=",
    FilterOperator.GREATER_THAN: ">",
    FilterOperator.GREATER_THAN_OR_EQUAL: ">=",
    FilterOperator.ARRAY_CONTAINS: "array_contains",
    FilterOperator.ARRAY_CONTAINS_ANY: "array_contains_any",
    FilterOperator.IN: "in",
    FilterOperator.NOT_IN: "not-in",
}


def create_firestore_client(settings: Optional[DocstoreSettings] = None) -> firestore.AsyncClient:
    """Create an async Firestore client from settings.

    When an emulator host is configured it is exported as
    ``FIRESTORE_EMULATOR_HOST`` (read by the SDK) and no credentials are loaded.
    """
    settings = settings or get_settings()

    credentials = None
    if settings.uses_emulator:
        os.environ["FIRESTORE_EMULATOR_HOST"] = settings.firestore_emulator_host
        logger.info(f"Using Firestore emulator at {settings.firestore_emulator_host}")
    elif settings.google_application_credentials:
        credentials = service_account.Credentials.from_service_account_file(
            settings.google_application_credentials
        )

    return firestore.AsyncClient(
        project=settings.firestore_project_id,
        credentials=credentials,
        database=settings.firestore_database,
    )


class FirestoreDocumentStore:
    """Document store backed by Cloud Firestore."""

    def __init__(self, client: firestore.AsyncClient):
        self._client = client

    @property
    def supports_or_queries(self) -> bool:
        return True

    # ------------------------------------------------------------------
    # Temporal conversion
    # ------------------------------------------------------------------

    def to_native_datetime(self, value: datetime) -> datetime:
        return to_datetime(value)

    def normalize_value(self, value: Any) -> Any:
        if isinstance(value, datetime):
            # DatetimeWithNanoseconds -> plain aware datetime
            return datetime(
                value.year, value.month, value.day,
                value.hour, value.minute, value.second, value.microsecond,
                tzinfo=value.tzinfo or timezone.utc,
            )
        if isinstance(value, date):
            return to_datetime(value)
        if isinstance(value, dict):
            return {k: self.normalize_value(v) for k, v in value.items()}
        if isinstance(value, list):
            return [self.normalize_value(v) for v in value]
        return value

    # ------------------------------------------------------------------
    # Document operations
    # ------------------------------------------------------------------

    async def insert(
        self,
        collection: str,
        data: Mapping[str, Any],
        document_id: Optional[str] = None,
    ) -> StoredDocument:
        collection_ref = self._client.collection(collection)
        if document_id is None:
            _, doc_ref = await collection_ref.add(dict(data))
        else:
            doc_ref = collection_ref.document(document_id)
            await doc_ref.set(dict(data))
        snapshot = await doc_ref.get()
        return StoredDocument(snapshot.id, snapshot.to_dict() or {})

    async def get(self, collection: str, document_id: str) -> Optional[StoredDocument]:
        snapshot = await self._client.collection(collection).document(document_id).get()
        if not snapshot.exists:
            return None
        return StoredDocument(snapshot.id, snapshot.to_dict() or {})

    async def update(self, collection: str, document_id: str, partial: Mapping[str, Any]) -> None:
        doc_ref = self._client.collection(collection).document(document_id)
        try:
            await doc_ref.update(dict(partial))
        except google_exceptions.NotFound as e:
            raise DocumentMissingError(collection, document_id) from e

    async def remove(self, collection: str, document_id: str) -> None:
        doc_ref = self._client.collection(collection).document(document_id)
        snapshot = await doc_ref.get()
        if not snapshot.exists:
            raise DocumentMissingError(collection, document_id)
        await doc_ref.delete()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def query(self, query: StoreQuery) -> List[StoredDocument]:
        native = self._apply_predicates(query)

        for sort in query.ordering:
            direction = (
                firestore.Query.DESCENDING if sort.order == SortOrder.DESC else firestore.Query.ASCENDING
            )
            native = native.order_by(sort.field, direction=direction)

        if query.start_after_id is not None:
            cursor = await self._client.collection(query.collection).document(query.start_after_id).get()
            if not cursor.exists:
                raise InvalidCursorError(query.start_after_id, "cursor document no longer exists")
            native = native.start_after(cursor)

        if query.row_offset:
            native = native.offset(query.row_offset)
        if query.row_limit is not None:
            native = native.limit(query.row_limit)

        snapshots = await native.get()
        logger.debug(f"Fetched {len(snapshots)} documents from {query.collection}")
        return [StoredDocument(snap.id, snap.to_dict() or {}) for snap in snapshots]

    async def count(self, query: StoreQuery) -> int:
        aggregation = self._apply_predicates(query).count(alias="total")
        results = await aggregation.get()
        return int(results[0][0].value) if results else 0

    def _apply_predicates(self, query: StoreQuery):
        native = self._client.collection(query.collection)
        for predicate in query.predicates:
            native = native.where(filter=self._to_filter(query.collection, predicate))
        return native

    def _to_filter(self, collection: str, predicate: Predicate):
        if isinstance(predicate, AnyOfPredicate):
            return Or(filters=[self._to_filter(collection, p) for p in predicate.predicates])
        return FieldFilter(
            predicate.field,
            _NATIVE_OPERATORS[predicate.operator],
            self._native_value(collection, predicate),
        )

    def _native_value(self, collection: str, predicate: FieldPredicate) -> Any:
        if predicate.field != DOCUMENT_ID:
            return predicate.value
        # Document id filters compare against references, not strings
        collection_ref = self._client.collection(collection)
        if isinstance(predicate.value, (list, tuple)):
            return [collection_ref.document(str(v)) for v in predicate.value]
        return collection_ref.document(str(predicate.value))
