"""
neo-docstore: generic Firestore pagination engine and CRUD base layer.

Logging is not configured on import; call ``neo_docstore.config.setup_logging()``
from the application entry point.
"""

from .__version__ import __version__
from .config import DocstoreSettings, get_settings, setup_logging
from .core.exceptions import DocstoreError
from .features.database import (
    DOCUMENT_ID,
    DocumentStore,
    FilterOperator,
    SortField,
    SortOrder,
    InMemoryDocumentStore,
    FirestoreDocumentStore,
    create_firestore_client,
)
from .features.pagination import (
    FilterCondition,
    CompositeFilterGroup,
    DateRange,
    PaginationOptions,
    PaginatedResult,
    OffsetPaginationRequest,
    OffsetPaginationResponse,
    Paginator,
)
from .repositories import BaseRepository
from .services import BaseService
from .controllers import BaseController

__all__ = [
    "__version__",
    "DocstoreSettings",
    "get_settings",
    "setup_logging",
    "DocstoreError",
    "DOCUMENT_ID",
    "DocumentStore",
    "FilterOperator",
    "SortField",
    "SortOrder",
    "InMemoryDocumentStore",
    "FirestoreDocumentStore",
    "create_firestore_client",
    "FilterCondition",
    "CompositeFilterGroup",
    "DateRange",
    "PaginationOptions",
    "PaginatedResult",
    "OffsetPaginationRequest",
    "OffsetPaginationResponse",
    "Paginator",
    "BaseRepository",
    "BaseService",
    "BaseController",
]
