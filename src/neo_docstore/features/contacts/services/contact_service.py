"""Contact service.

Composes the generic service and replaces ``create`` and ``update`` to keep contact emails
unique among live contacts.
"""

import logging
from typing import Any, Optional

from ....core.exceptions import EntityAlreadyExistsError
from ....repositories.base import BaseRepository, to_payload
from ....services.base import BaseService
from ...pagination import (
    FilterCondition,
    OffsetPaginationRequest,
    OffsetPaginationResponse,
    PaginatedResult,
    PaginationOptions,
)
from ..entities import Contact

logger = logging.getLogger(__name__)


class ContactService:
    """Business operations on contacts."""

    def __init__(self, repository: BaseRepository[Contact]):
        self._base: BaseService[Contact] = BaseService(repository)

    @property
    def repository(self) -> BaseRepository[Contact]:
        return self._base.repository

    @property
    def collection_name(self) -> str:
        return self._base.collection_name

    async def create(self, data: Any) -> Contact:
        payload = to_payload(data)
        email = str(payload.get("email", "")).strip().lower()
        if email:
            payload["email"] = email
            if await self.find_by_email(email) is not None:
                logger.info(f"Rejected duplicate contact email {email}")
                raise EntityAlreadyExistsError("Contact", email)
        return await self._base.create(payload)

    async def find_by_email(self, email: str) -> Optional[Contact]:
        """Return the live contact registered with ``email``, if any."""
        page = await self._base.paginator(
            PaginationOptions(
                limit=1,
                filters=[FilterCondition("email", "==", email.strip().lower())],
            )
        )
        return page.data[0] if page.data else None

    async def create_with_id(self, document_id: str, data: Any) -> Contact:
        return await self._base.create_with_id(document_id, data)

    async def get_by_id(self, document_id: str) -> Contact:
        return await self._base.get_by_id(document_id)

    async def update(self, document_id: str, data: Any) -> Contact:
        payload = to_payload(data)
        if payload.get("email") is not None:
            email = str(payload["email"]).strip().lower()
            payload["email"] = email
            existing = await self.find_by_email(email)
            if existing is not None and existing.id != document_id:
                logger.info(f"Rejected duplicate contact email {email} on update of {document_id}")
                raise EntityAlreadyExistsError("Contact", email)
        return await self._base.update(document_id, payload)

    async def delete(self, document_id: str) -> bool:
        return await self._base.delete(document_id)

    async def get_all(
        self, pagination: Optional[OffsetPaginationRequest] = None
    ) -> OffsetPaginationResponse[Contact]:
        return await self._base.get_all(pagination)

    async def paginator(self, options: Optional[PaginationOptions] = None) -> PaginatedResult[Contact]:
        return await self._base.paginator(options)
