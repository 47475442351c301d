"""Cursor-based paginator over a single collection."""

import logging
import math
from typing import Generic, Optional, TypeVar

from ...core.exceptions import PaginationError, ValidationError
from ..database.entities import DocumentStore
from .cursor import encode_cursor
from .entities import PaginatedResult, PaginationOptions
from .executor import PaginationExecutor
from .mapper import EntityFactory, ResultMapper
from .query_builder import QueryBuilder
from .validation import FilterValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_LIMIT = 100


class Paginator(Generic[T]):
    """Public pagination entry point for one collection.

    Validation errors (bad filters, bad cursors, unsupported OR groups) reach
    the caller unchanged. Every other failure is raised as ``PaginationError``
    with the original exception chained.
    """

    def __init__(
        self,
        store: DocumentStore,
        collection_name: str,
        max_limit: int = DEFAULT_MAX_LIMIT,
        entity_factory: Optional[EntityFactory] = None,
    ):
        self.store = store
        self.collection_name = collection_name
        self.max_limit = max_limit
        self.validator = FilterValidator(store)
        self.builder = QueryBuilder(store, collection_name)
        self.executor = PaginationExecutor(store)
        self.mapper: ResultMapper[T] = ResultMapper(store, entity_factory)

    async def paginate(self, options: Optional[PaginationOptions] = None) -> PaginatedResult[T]:
        options = options or PaginationOptions()
        limit = min(options.limit, self.max_limit)
        include_soft_deleted = bool(options.include_soft_deleted)

        self.validator.validate_options(options)

        try:
            data_query, count_query = self.builder.build(options, limit, include_soft_deleted)
            execution = await self.executor.execute(data_query, count_query)
        except ValidationError:
            raise
        except Exception as e:
            logger.error(f"Failed to paginate {self.collection_name}: {e}")
            raise PaginationError(
                f"Failed to paginate documents: {e}", collection=self.collection_name
            ) from e

        documents = execution.documents
        total = execution.total
        total_pages = math.ceil(total / limit)

        logger.debug(
            f"Paginated {self.collection_name}: page={options.page} limit={limit} "
            f"returned={len(documents)} total={total} in {execution.execution_time_ms:.2f}ms"
        )

        return PaginatedResult(
            data=self.mapper.map(documents, options.select),
            total=total,
            page=options.page,
            limit=limit,
            total_pages=total_pages,
            has_next_page=options.page < total_pages,
            has_prev_page=options.page > 1,
            last_visible=encode_cursor(documents[-1].id) if documents else None,
            execution_time_ms=execution.execution_time_ms,
            applied_filters=ResultMapper.normalize(
                options.filters, options.sort_fields, options.date_range
            ),
        )
