"""Pagination response entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


def _plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class AppliedFilters:
    """Descriptive echo of the filters and ordering a page was produced with."""

    filters: Dict[str, Any] = field(default_factory=dict)
    date_range: Optional[Dict[str, Any]] = None
    order_by: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filters": _plain(self.filters),
            "dateRange": _plain(self.date_range),
            "orderBy": dict(self.order_by),
        }


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of a cursor-based ``paginate`` call."""

    data: List[T]
    total: int
    page: int
    limit: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
    last_visible: Optional[str] = None
    execution_time_ms: float = 0.0
    applied_filters: AppliedFilters = field(default_factory=AppliedFilters)

    @property
    def count(self) -> int:
        """Get number of items in current page."""
        return len(self.data)

    def to_dict(self) -> Dict[str, Any]:
        """Outbound camelCase shape."""
        return {
            "data": _plain(self.data),
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
            "lastVisible": self.last_visible,
            "executionTime": self.execution_time_ms,
            "appliedFilters": self.applied_filters.to_dict(),
        }


@dataclass(frozen=True)
class OffsetPaginationResponse(Generic[T]):
    """Offset-based page produced by ``getAll``."""

    data: List[T]
    total_items: int
    page: int
    limit: int
    has_next_page: bool
    has_prev_page: bool

    @property
    def total_pages(self) -> int:
        """Calculate total number of pages."""
        return (self.total_items + self.limit - 1) // self.limit

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": _plain(self.data),
            "totalItems": self.total_items,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
        }
