"""
Generic document repository.

Owns one collection, its soft-delete policy and a paginator bound to it.
Timestamps are stamped here and normalized on every read so callers only
ever see aware ``datetime`` values, whatever the store's native type is.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from ..core.exceptions import (
    CreationError,
    DeletionError,
    DocumentMissingError,
    EntityAlreadyExistsError,
    EntityDeletedError,
    EntityNotFoundError,
    UpdateError,
)
from ..features.database.entities import DocumentStore, StoredDocument, StoreQuery
from ..features.pagination import (
    DEFAULT_MAX_LIMIT,
    SOFT_DELETE_FIELD,
    OffsetPaginationRequest,
    OffsetPaginationResponse,
    PaginatedResult,
    PaginationOptions,
    Paginator,
)
from ..features.pagination.mapper import EntityFactory, ResultMapper
from ..utils.concurrency import gather_or_cancel
from ..utils.datetime import utc_now
from ..utils.error_handling import repository_error_handler

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Fields owned by the repository; callers cannot write them directly
PROTECTED_FIELDS = frozenset({"id", "createdAt", "updatedAt", SOFT_DELETE_FIELD})


def to_payload(data: Any) -> Dict[str, Any]:
    """Turn a mapping or pydantic model into a plain dict for storage."""
    if hasattr(data, "model_dump"):
        return data.model_dump(by_alias=True, exclude_unset=True)
    return dict(data)


class BaseRepository(Generic[T]):
    """
    Generic CRUD repository over a document store collection.

    Provides:
    - create / create_with_id with timestamp stamping
    - get_by_id distinguishing "not found" from "deleted"
    - update and delete honouring the soft-delete policy
    - offset-based get_all and cursor-based paginate
    """

    def __init__(
        self,
        store: DocumentStore,
        collection_name: str,
        soft_delete: bool = True,
        entity_factory: Optional[EntityFactory] = None,
        entity_type: str = "Document",
        clock: Callable[[], datetime] = utc_now,
        max_page_size: int = DEFAULT_MAX_LIMIT,
        default_page_size: int = 10,
    ):
        """
        Initialize the repository.

        Args:
            store: Document store holding the collection
            collection_name: Collection this repository owns
            soft_delete: Mark documents deleted instead of removing them
            entity_factory: Builds a domain entity from an ``{id, ...}`` record
            entity_type: Name used in error messages
            clock: Source of timestamps
            max_page_size: Upper bound for paginate limits
            default_page_size: Page size of get_all when no pagination is given
        """
        self.store = store
        self.collection_name = collection_name
        self.soft_delete = soft_delete
        self.entity_type = entity_type
        self.clock = clock
        self.default_page_size = default_page_size
        self.paginator: Paginator[T] = Paginator(
            store, collection_name, max_limit=max_page_size, entity_factory=entity_factory
        )
        self._mapper: ResultMapper[T] = ResultMapper(store, entity_factory)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @repository_error_handler("create document", wrap_with=CreationError)
    async def create(self, data: Any) -> T:
        document = await self.store.insert(self.collection_name, self._stamp_new(data))
        logger.info(f"Created {self.entity_type} {document.id} in {self.collection_name}")
        return self._map(document)

    @repository_error_handler("create document with a specific ID", wrap_with=CreationError)
    async def create_with_id(self, document_id: str, data: Any) -> T:
        # Check-then-insert is not atomic; a concurrent writer can still win the race
        if await self.store.get(self.collection_name, document_id) is not None:
            raise EntityAlreadyExistsError(self.entity_type, document_id)

        document = await self.store.insert(
            self.collection_name, self._stamp_new(data), document_id=document_id
        )
        logger.info(f"Created {self.entity_type} {document_id} in {self.collection_name}")
        return self._map(document)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @repository_error_handler("retrieve document")
    async def get_by_id(self, document_id: str) -> T:
        document = await self._get_live(document_id)
        return self._map(document)

    @repository_error_handler("retrieve documents with pagination")
    async def get_all(
        self, pagination: Optional[OffsetPaginationRequest] = None
    ) -> OffsetPaginationResponse[T]:
        """Offset-based listing of live documents ordered by ``pagination.sort``.

        The total counts every live document, but stores leave out documents
        lacking the sort field when ordering. If some documents lack it,
        ``totalItems`` and ``hasNextPage`` can promise more rows than the
        pages deliver.
        """
        pagination = pagination or OffsetPaginationRequest(limit=self.default_page_size)

        count_query = StoreQuery(self.collection_name)
        if self.soft_delete:
            count_query = count_query.where(SOFT_DELETE_FIELD, "==", None)

        data_query = (
            count_query
            .order_by(pagination.sort, pagination.order)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )

        documents, total_items = await gather_or_cancel(
            self.store.query(data_query),
            self.store.count(count_query),
        )

        return OffsetPaginationResponse(
            data=[self._map(doc) for doc in documents],
            total_items=total_items,
            page=pagination.page,
            limit=pagination.limit,
            has_next_page=pagination.offset + pagination.limit < total_items,
            has_prev_page=pagination.page > 1,
        )

    async def paginate(self, options: Optional[PaginationOptions] = None) -> PaginatedResult[T]:
        """Cursor-based pagination; soft-deleted documents follow the repository policy."""
        options = options or PaginationOptions()
        if options.include_soft_deleted is None:
            options = replace(options, include_soft_deleted=not self.soft_delete)
        return await self.paginator.paginate(options)

    # ------------------------------------------------------------------
    # Update / delete
    # ------------------------------------------------------------------

    @repository_error_handler("update document", wrap_with=UpdateError)
    async def update(self, document_id: str, data: Any) -> T:
        await self._get_live(document_id)

        changes = {k: v for k, v in to_payload(data).items() if k not in PROTECTED_FIELDS}
        changes["updatedAt"] = self.clock()

        try:
            await self.store.update(self.collection_name, document_id, changes)
        except DocumentMissingError:
            raise EntityNotFoundError(self.entity_type, document_id)

        document = await self.store.get(self.collection_name, document_id)
        if document is None:
            raise EntityNotFoundError(self.entity_type, document_id)
        return self._map(document)

    @repository_error_handler("delete document", wrap_with=DeletionError)
    async def delete(self, document_id: str) -> bool:
        await self._get_live(document_id)

        try:
            if self.soft_delete:
                now = self.clock()
                await self.store.update(
                    self.collection_name,
                    document_id,
                    {SOFT_DELETE_FIELD: now, "updatedAt": now},
                )
            else:
                await self.store.remove(self.collection_name, document_id)
        except DocumentMissingError:
            raise EntityNotFoundError(self.entity_type, document_id)

        logger.info(
            f"{'Soft' if self.soft_delete else 'Hard'} deleted {self.entity_type} "
            f"{document_id} from {self.collection_name}"
        )
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _get_live(self, document_id: str) -> StoredDocument:
        document = await self.store.get(self.collection_name, document_id)
        if document is None:
            raise EntityNotFoundError(self.entity_type, document_id)
        if self.soft_delete and document.get(SOFT_DELETE_FIELD) is not None:
            raise EntityDeletedError(self.entity_type, document_id)
        return document

    def _stamp_new(self, data: Any) -> Dict[str, Any]:
        payload = {k: v for k, v in to_payload(data).items() if k not in PROTECTED_FIELDS}
        now = self.clock()
        payload.update({"createdAt": now, "updatedAt": now, SOFT_DELETE_FIELD: None})
        return payload

    def _map(self, document: StoredDocument) -> T:
        return self._mapper.map([document])[0]
