"""Cursor-based pagination and filtering engine.

This module provides:
- Declarative filter conditions, composite groups and date ranges
- Fail-fast filter validation
- Query building with soft-delete awareness and field projection
- Concurrent data/count execution with timing
- Opaque ``lastVisible`` cursor tokens
"""

from .entities import (
    FilterCondition,
    CompositeType,
    CompositeFilterGroup,
    DateRange,
    PaginationOptions,
    OffsetPaginationRequest,
    AppliedFilters,
    PaginatedResult,
    OffsetPaginationResponse,
)
from .cursor import encode_cursor, decode_cursor
from .validation import FilterValidator, MAX_MEMBERSHIP_VALUES
from .query_builder import QueryBuilder, SOFT_DELETE_FIELD
from .executor import PaginationExecutor, ExecutionResult
from .mapper import ResultMapper
from .paginator import Paginator, DEFAULT_MAX_LIMIT

__all__ = [
    # Entities
    "FilterCondition",
    "CompositeType",
    "CompositeFilterGroup",
    "DateRange",
    "PaginationOptions",
    "OffsetPaginationRequest",
    "AppliedFilters",
    "PaginatedResult",
    "OffsetPaginationResponse",

    # Cursor tokens
    "encode_cursor",
    "decode_cursor",

    # Engine
    "FilterValidator",
    "MAX_MEMBERSHIP_VALUES",
    "QueryBuilder",
    "SOFT_DELETE_FIELD",
    "PaginationExecutor",
    "ExecutionResult",
    "ResultMapper",
    "Paginator",
    "DEFAULT_MAX_LIMIT",
]
