"""Pagination entities for requests and responses."""

from .requests import (
    FilterCondition,
    CompositeType,
    CompositeFilterGroup,
    DateRange,
    OrderBy,
    PaginationOptions,
    OffsetPaginationRequest,
)

from .responses import (
    AppliedFilters,
    PaginatedResult,
    OffsetPaginationResponse,
)

__all__ = [
    # Requests
    "FilterCondition",
    "CompositeType",
    "CompositeFilterGroup",
    "DateRange",
    "OrderBy",
    "PaginationOptions",
    "OffsetPaginationRequest",

    # Responses
    "AppliedFilters",
    "PaginatedResult",
    "OffsetPaginationResponse",
]
