"""
Generic controller binding HTTP-shaped input to a service.

Controllers return a ``ControllerResult`` on success and raise on failure.
Rendering results and mapping exceptions to status codes belong to the HTTP
layer that mounts them.
"""

import json
import logging
from typing import Any, Dict, Generic, Mapping, Optional, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import (
    BadRequestError,
    CreationFailedError,
    InvalidPaginationError,
    ResourceNotFoundError,
)
from ..models.requests import PaginateRequest, PaginationQuery, PaginatorQuery
from ..models.responses import ControllerResult, ResultKind
from ..services.base import BaseService

T = TypeVar("T")

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseController(Generic[T]):
    """CRUD and pagination endpoints over a ``BaseService``."""

    def __init__(
        self,
        service: BaseService[T],
        create_model: Optional[Type[BaseModel]] = None,
        update_model: Optional[Type[BaseModel]] = None,
    ):
        if service is None:
            raise ValueError("Service must be provided to BaseController")
        self.service = service
        self.create_model = create_model
        self.update_model = update_model

    async def create(self, request: Request) -> ControllerResult:
        data = await self._read_body(request, self.create_model)
        entity = await self.service.create(data)
        if not entity:
            raise CreationFailedError("Creation failed")
        return ControllerResult(kind=ResultKind.CREATED, message="Entity created successfully", data=entity)

    async def get_all(self, request: Request) -> ControllerResult:
        query = self._bind(PaginationQuery, request.query_params)
        logger.debug(f"Listing {self.service.collection_name} with {query.model_dump()}")
        results = await self.service.get_all(query.to_request())
        return ControllerResult(
            kind=ResultKind.OK,
            message="Fetched entities successfully",
            pagination=results.to_dict(),
        )

    async def get_by_id(self, request: Request) -> ControllerResult:
        entity = await self.service.get_by_id(self._path_id(request))
        if not entity:
            raise ResourceNotFoundError("Entity not found")
        return ControllerResult(kind=ResultKind.OK, message="Fetched entity by ID successfully", data=entity)

    async def update(self, request: Request) -> ControllerResult:
        document_id = self._path_id(request)
        data = await self._read_body(request, self.update_model)
        entity = await self.service.update(document_id, data)
        if not entity:
            raise ResourceNotFoundError("Entity not found")
        return ControllerResult(kind=ResultKind.OK, message="Entity updated successfully", data=entity)

    async def delete(self, request: Request) -> ControllerResult:
        result = await self.service.delete(self._path_id(request))
        if not result:
            raise ResourceNotFoundError("Entity not found")
        return ControllerResult(kind=ResultKind.OK, message="Entity deleted successfully")

    async def paginator(self, request: Request) -> ControllerResult:
        try:
            query = PaginatorQuery.model_validate(dict(request.query_params))
        except PydanticValidationError as e:
            raise BadRequestError(
                "Invalid page or limit parameters", details={"errors": e.errors(include_url=False)}
            )
        try:
            options = query.to_options()
        except InvalidPaginationError as e:
            raise BadRequestError("Invalid page or limit parameters", details=e.details) from e
        results = await self.service.paginator(options)
        return ControllerResult(
            kind=ResultKind.OK,
            message="Fetched paginated entities successfully",
            pagination=results.to_dict(),
        )

    async def search(self, request: Request) -> ControllerResult:
        """Rich pagination from a JSON payload (filters, ordering, cursor, projection)."""
        payload = await self._read_json(request)
        options = self._bind(PaginateRequest, payload).to_options()
        results = await self.service.paginator(options)
        return ControllerResult(
            kind=ResultKind.OK,
            message="Fetched paginated entities successfully",
            pagination=results.to_dict(),
        )

    # ------------------------------------------------------------------
    # Binding helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _bind(model: Type[ModelT], data: Mapping[str, Any]) -> ModelT:
        try:
            return model.model_validate(dict(data))
        except PydanticValidationError as e:
            raise BadRequestError(
                f"Invalid {model.__name__} parameters",
                details={"errors": e.errors(include_url=False)},
            )

    @staticmethod
    def _path_id(request: Request) -> str:
        document_id = request.path_params.get("id")
        if not document_id:
            raise BadRequestError("ID is required")
        return document_id

    @staticmethod
    async def _read_json(request: Request) -> Dict[str, Any]:
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise BadRequestError("Request body must be valid JSON")
        if not isinstance(payload, dict):
            raise BadRequestError("Request body must be a JSON object")
        return payload

    async def _read_body(self, request: Request, model: Optional[Type[BaseModel]]) -> Any:
        payload = await self._read_json(request)
        if model is None:
            return payload
        return self._bind(model, payload)
