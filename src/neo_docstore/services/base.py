"""
Base service for document CRUD orchestration.

The service holds no state of its own. Domain services compose one and
replace individual operations explicitly, for example to add side effects
around ``create``.
"""

import logging
from typing import Any, Generic, Optional, TypeVar

from ..features.pagination import (
    OffsetPaginationRequest,
    OffsetPaginationResponse,
    PaginatedResult,
    PaginationOptions,
)
from ..repositories.base import BaseRepository
from ..utils.error_handling import log_service_errors

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseService(Generic[T]):
    """Pass-through service over a ``BaseRepository``."""

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository

    @property
    def collection_name(self) -> str:
        return self.repository.collection_name

    @log_service_errors("create entity")
    async def create(self, data: Any) -> T:
        return await self.repository.create(data)

    @log_service_errors("create entity with ID")
    async def create_with_id(self, document_id: str, data: Any) -> T:
        return await self.repository.create_with_id(document_id, data)

    @log_service_errors("get entity by ID")
    async def get_by_id(self, document_id: str) -> T:
        return await self.repository.get_by_id(document_id)

    @log_service_errors("update entity")
    async def update(self, document_id: str, data: Any) -> T:
        return await self.repository.update(document_id, data)

    @log_service_errors("delete entity")
    async def delete(self, document_id: str) -> bool:
        return await self.repository.delete(document_id)

    @log_service_errors("list entities")
    async def get_all(
        self, pagination: Optional[OffsetPaginationRequest] = None
    ) -> OffsetPaginationResponse[T]:
        return await self.repository.get_all(pagination)

    @log_service_errors("paginate entities")
    async def paginator(self, options: Optional[PaginationOptions] = None) -> PaginatedResult[T]:
        return await self.repository.paginate(options)
