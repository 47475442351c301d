"""In-memory document store with Firestore query semantics.

Used for local development and the test suite. It follows the Firestore rules
the pagination engine relies on:

- comparison filters never match documents that lack the field
- ``!=`` and ``not-in`` also skip documents whose field is null
- ordering on a field drops documents that lack it
- results are tie-broken on the document id in the last sort direction
- values of different types never compare equal (``True`` is not ``1``)
"""

import copy
import logging
import secrets
import string
from datetime import date, datetime
from functools import cmp_to_key
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ....core.exceptions import DocumentMissingError, InvalidCursorError
from ....utils.datetime import to_datetime
from ..entities.document import StoredDocument
from ..entities.query import (
    DOCUMENT_ID,
    AnyOfPredicate,
    FieldPredicate,
    FilterOperator,
    Predicate,
    SortField,
    SortOrder,
    StoreQuery,
)

logger = logging.getLogger(__name__)

_MISSING = object()
_AUTO_ID_ALPHABET = string.ascii_letters + string.digits
_AUTO_ID_LENGTH = 20


def generate_document_id() -> str:
    """Generate a 20 character id in the same shape as Firestore auto ids."""
    return "".join(secrets.choice(_AUTO_ID_ALPHABET) for _ in range(_AUTO_ID_LENGTH))


def _type_rank(value: Any) -> int:
    # Firestore cross-type ordering: null < bool < number < timestamp < string < bytes < array < map
    if value is None:
        return 0
    if isinstance(value, bool):
        return 1
    if isinstance(value, (int, float)):
        return 2
    if isinstance(value, datetime):
        return 3
    if isinstance(value, str):
        return 4
    if isinstance(value, bytes):
        return 5
    if isinstance(value, (list, tuple)):
        return 8
    if isinstance(value, dict):
        return 9
    return 10


def _sort_key(value: Any) -> Tuple[int, Any]:
    rank = _type_rank(value)
    if rank == 0:
        return (rank, 0)
    if rank >= 8:
        return (rank, repr(value))
    return (rank, value)


def _values_equal(left: Any, right: Any) -> bool:
    return _type_rank(left) == _type_rank(right) and left == right


def _resolve(document_id: str, data: Mapping[str, Any], field_path: str) -> Any:
    if field_path == DOCUMENT_ID:
        return document_id
    current: Any = data
    for part in field_path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return _MISSING
        current = current[part]
    return current


def _set_path(data: Dict[str, Any], field_path: str, value: Any) -> None:
    parts = field_path.split(".")
    current = data
    for part in parts[:-1]:
        child = current.get(part)
        if not isinstance(child, dict):
            child = {}
            current[part] = child
        current = child
    current[parts[-1]] = value


class InMemoryDocumentStore:
    """Dictionary-backed implementation of the DocumentStore protocol."""

    def __init__(self, supports_or_queries: bool = True):
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._supports_or = supports_or_queries

    @property
    def supports_or_queries(self) -> bool:
        return self._supports_or

    # ------------------------------------------------------------------
    # Temporal conversion
    # ------------------------------------------------------------------

    def to_native_datetime(self, value: datetime) -> datetime:
        return to_datetime(value)

    def normalize_value(self, value: Any) -> Any:
        if isinstance(value, (datetime, date)):
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
        documents = self._collections.setdefault(collection, {})
        document_id = document_id or generate_document_id()
        documents[document_id] = self.normalize_value(copy.deepcopy(dict(data)))
        logger.debug(f"Inserted document {document_id} into {collection}")
        return StoredDocument(document_id, copy.deepcopy(documents[document_id]))

    async def get(self, collection: str, document_id: str) -> Optional[StoredDocument]:
        data = self._collections.get(collection, {}).get(document_id)
        if data is None:
            return None
        return StoredDocument(document_id, copy.deepcopy(data))

    async def update(self, collection: str, document_id: str, partial: Mapping[str, Any]) -> None:
        data = self._collections.get(collection, {}).get(document_id)
        if data is None:
            raise DocumentMissingError(collection, document_id)
        for field_path, value in partial.items():
            _set_path(data, field_path, self.normalize_value(copy.deepcopy(value)))
        logger.debug(f"Updated document {document_id} in {collection}")

    async def remove(self, collection: str, document_id: str) -> None:
        documents = self._collections.get(collection, {})
        if document_id not in documents:
            raise DocumentMissingError(collection, document_id)
        del documents[document_id]
        logger.debug(f"Removed document {document_id} from {collection}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def query(self, query: StoreQuery) -> List[StoredDocument]:
        matches = self._filter(query)
        matches = [
            doc for doc in matches
            if all(_resolve(doc.id, doc.data, sort.field) is not _MISSING for sort in query.ordering)
        ]

        compare = self._comparator(query.ordering)
        matches.sort(key=cmp_to_key(compare))

        if query.start_after_id is not None:
            cursor = await self.get(query.collection, query.start_after_id)
            if cursor is None:
                raise InvalidCursorError(query.start_after_id, "cursor document no longer exists")
            if any(_resolve(cursor.id, cursor.data, s.field) is _MISSING for s in query.ordering):
                raise InvalidCursorError(query.start_after_id, "cursor document lacks an ordering field")
            matches = [doc for doc in matches if compare(doc, cursor) > 0]

        if query.row_offset:
            matches = matches[query.row_offset:]
        if query.row_limit is not None:
            matches = matches[:query.row_limit]
        return matches

    async def count(self, query: StoreQuery) -> int:
        return len(self._filter(query))

    def _filter(self, query: StoreQuery) -> List[StoredDocument]:
        documents = self._collections.get(query.collection, {})
        return [
            StoredDocument(document_id, copy.deepcopy(data))
            for document_id, data in documents.items()
            if all(self._matches(document_id, data, p) for p in query.predicates)
        ]

    def _matches(self, document_id: str, data: Mapping[str, Any], predicate: Predicate) -> bool:
        if isinstance(predicate, AnyOfPredicate):
            return any(self._matches(document_id, data, p) for p in predicate.predicates)
        return self._matches_field(document_id, data, predicate)

    def _matches_field(self, document_id: str, data: Mapping[str, Any], predicate: FieldPredicate) -> bool:
        actual = _resolve(document_id, data, predicate.field)
        if actual is _MISSING:
            return False

        operator = predicate.operator
        expected = predicate.value

        if operator == FilterOperator.EQUAL:
            return _values_equal(actual, expected)
        if operator == FilterOperator.NOT_EQUAL:
            return actual is not None and not _values_equal(actual, expected)
        if operator in (
            FilterOperator.LESS_THAN,
            FilterOperator.LESS_THAN_OR_EQUAL,
            FilterOperator.GREATER_THAN,
            FilterOperator.GREATER_THAN_OR_EQUAL,
        ):
            if actual is None or _type_rank(actual) != _type_rank(expected) or _type_rank(actual) >= 8:
                return False
            if operator == FilterOperator.LESS_THAN:
                return actual < expected
            if operator == FilterOperator.LESS_THAN_OR_EQUAL:
                return actual <= expected
            if operator == FilterOperator.GREATER_THAN:
                return actual > expected
            return actual >= expected
        if operator == FilterOperator.ARRAY_CONTAINS:
            return isinstance(actual, list) and any(_values_equal(item, expected) for item in actual)
        if operator == FilterOperator.ARRAY_CONTAINS_ANY:
            return isinstance(actual, list) and any(
                _values_equal(item, candidate) for item in actual for candidate in expected
            )
        if operator == FilterOperator.IN:
            return any(_values_equal(actual, candidate) for candidate in expected)
        if operator == FilterOperator.NOT_IN:
            return actual is not None and not any(_values_equal(actual, c) for c in expected)
        return False

    @staticmethod
    def _comparator(ordering: Tuple[SortField, ...]):
        tiebreak = ordering[-1].order if ordering else SortOrder.ASC

        def compare(left: StoredDocument, right: StoredDocument) -> int:
            for sort in ordering:
                left_key = _sort_key(_resolve(left.id, left.data, sort.field))
                right_key = _sort_key(_resolve(right.id, right.data, sort.field))
                if left_key != right_key:
                    result = -1 if left_key < right_key else 1
                    return result if sort.order == SortOrder.ASC else -result
            if left.id == right.id:
                return 0
            result = -1 if left.id < right.id else 1
            return result if tiebreak == SortOrder.ASC else -result

        return compare
