"""Maps stored documents to records and describes applied filters."""

from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, TypeVar

from ..database.entities import DocumentStore, SortField, StoredDocument
from ..database.entities.protocols import normalize_document_data
from .entities import AppliedFilters, DateRange, FilterCondition

T = TypeVar("T")

EntityFactory = Callable[[Dict[str, Any]], T]


class ResultMapper(Generic[T]):
    """Converts stored documents into ``{id, ...fields}`` records.

    With an ``entity_factory`` full records are turned into domain entities.
    Projected records (``select``) are always returned as plain dicts.
    """

    def __init__(self, store: DocumentStore, entity_factory: Optional[EntityFactory] = None):
        self.store = store
        self.entity_factory = entity_factory

    def to_record(self, document: StoredDocument) -> Dict[str, Any]:
        record = normalize_document_data(self.store, dict(document.data))
        record["id"] = document.id
        return record

    def map(self, documents: Sequence[StoredDocument], select: Optional[Sequence[str]] = None) -> List[Any]:
        if select:
            return [self._project(doc, select) for doc in documents]

        records = [self.to_record(doc) for doc in documents]
        if self.entity_factory is None:
            return records
        return [self.entity_factory(record) for record in records]

    def _project(self, document: StoredDocument, select: Sequence[str]) -> Dict[str, Any]:
        projected: Dict[str, Any] = {"id": document.id}
        for field_name in select:
            if field_name in document.data:
                projected[field_name] = self.store.normalize_value(document.data[field_name])
        return projected

    @staticmethod
    def normalize(
        filters: Sequence[FilterCondition],
        order_by: Sequence[SortField],
        date_range: Optional[DateRange] = None,
    ) -> AppliedFilters:
        applied: Dict[str, Any] = {}
        for condition in filters:
            applied[condition.key] = condition.value

        ordering: Dict[str, str] = {}
        for sort in order_by:
            ordering[sort.field] = sort.order.value

        range_echo = None
        if date_range is not None:
            range_echo = {"field": date_range.field, "start": date_range.start, "end": date_range.end}

        return AppliedFilters(filters=applied, date_range=range_echo, order_by=ordering)
