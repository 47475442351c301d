"""Translates pagination options into store queries."""

from typing import Any, List, Tuple

from ...utils.datetime import is_temporal, to_datetime
from ..database.entities import DocumentStore, FieldPredicate, StoreQuery
from .cursor import decode_cursor
from .entities import CompositeType, FilterCondition, PaginationOptions

SOFT_DELETE_FIELD = "deletedAt"


class QueryBuilder:
    """Builds the data query and the count query for one paginate call.

    Composition order is fixed: filters, composite groups, date range,
    soft-delete restriction, ordering, then cursor and row cap. The count
    query shares the first four steps only.
    """

    def __init__(self, store: DocumentStore, collection_name: str):
        self.store = store
        self.collection_name = collection_name

    def build(
        self,
        options: PaginationOptions,
        limit: int,
        include_soft_deleted: bool = False,
    ) -> Tuple[StoreQuery, StoreQuery]:
        """Return ``(data_query, count_query)``."""
        filtered = self.build_filtered(options, include_soft_deleted)
        count_query = filtered

        data_query = filtered
        for sort in options.sort_fields:
            data_query = data_query.order_by(sort.field, sort.order)

        if not options.all:
            if options.last_visible:
                data_query = data_query.start_after(decode_cursor(options.last_visible))
            data_query = data_query.limit(limit)

        return data_query, count_query

    def build_filtered(self, options: PaginationOptions, include_soft_deleted: bool = False) -> StoreQuery:
        query = StoreQuery(self.collection_name)

        for condition in options.filters:
            query = query.where(condition.key, condition.operator, self._native(condition.value))

        for group in options.composite_filters:
            if not group.conditions:
                continue
            if group.type == CompositeType.AND:
                for condition in group.conditions:
                    query = query.where(condition.key, condition.operator, self._native(condition.value))
            else:
                query = query.where_any(self._predicates(group.conditions))

        if options.date_range is not None:
            date_range = options.date_range
            if date_range.start is not None:
                query = query.where(date_range.field, ">=", self._native(date_range.start))
            if date_range.end is not None:
                query = query.where(date_range.field, "<=", self._native(date_range.end))

        if not include_soft_deleted:
            query = query.where(SOFT_DELETE_FIELD, "==", None)

        return query

    def _predicates(self, conditions: List[FilterCondition]) -> Tuple[FieldPredicate, ...]:
        return tuple(
            FieldPredicate(c.key, c.operator, self._native(c.value)) for c in conditions
        )

    def _native(self, value: Any) -> Any:
        if is_temporal(value):
            return self.store.to_native_datetime(to_datetime(value))
        if isinstance(value, (list, tuple)):
            return [self._native(v) for v in value]
        return value
