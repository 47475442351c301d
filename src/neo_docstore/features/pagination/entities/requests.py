"""Pagination request entities and enums."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional, Sequence, Union

from ....core.exceptions import InvalidFilterValueError, InvalidPaginationError
from ...database.entities import FilterOperator, SortField, SortOrder


@dataclass(frozen=True)
class FilterCondition:
    """A declarative ``key <operator> value`` filter.

    ``key`` is a dot-path into the document or ``DOCUMENT_ID`` for the document
    identifier. Operator-specific value rules are enforced by ``FilterValidator``
    so a bad value surfaces before any query is issued.
    """

    key: str
    operator: FilterOperator
    value: Any

    def __post_init__(self):
        if not isinstance(self.operator, FilterOperator):
            try:
                object.__setattr__(self, "operator", FilterOperator(self.operator))
            except ValueError:
                raise InvalidFilterValueError(
                    f"unsupported operator '{self.operator}'",
                    key=self.key,
                    operator=str(self.operator),
                    value=self.value,
                )


class CompositeType(str, Enum):
    """How the conditions of a composite group combine."""
    AND = "and"
    OR = "or"


@dataclass(frozen=True)
class CompositeFilterGroup:
    """A named group of conditions combined with AND or OR."""

    type: CompositeType
    conditions: List[FilterCondition] = field(default_factory=list)

    def __post_init__(self):
        if not isinstance(self.type, CompositeType):
            object.__setattr__(self, "type", CompositeType(str(self.type).lower()))


@dataclass(frozen=True)
class DateRange:
    """Inclusive bounds on a single temporal field."""

    field: str
    start: Optional[Union[datetime, date]] = None
    end: Optional[Union[datetime, date]] = None


OrderBy = Union[SortField, Sequence[SortField]]


@dataclass(frozen=True)
class PaginationOptions:
    """Options for a cursor-based ``paginate`` call."""

    page: int = 1
    limit: int = 10
    filters: List[FilterCondition] = field(default_factory=list)
    composite_filters: List[CompositeFilterGroup] = field(default_factory=list)
    last_visible: Optional[str] = None
    order_by: Optional[OrderBy] = None
    select: Optional[List[str]] = None
    date_range: Optional[DateRange] = None
    include_soft_deleted: Optional[bool] = None
    all: bool = False

    def __post_init__(self):
        if self.page < 1:
            raise InvalidPaginationError("page", self.page, "Page must be >= 1")
        if self.limit < 1:
            raise InvalidPaginationError("limit", self.limit, "Limit must be >= 1")

    @property
    def sort_fields(self) -> List[SortField]:
        """Ordering as a list; the first entry is the primary sort key."""
        if self.order_by is None:
            return []
        if isinstance(self.order_by, SortField):
            return [self.order_by]
        return list(self.order_by)


@dataclass(frozen=True)
class OffsetPaginationRequest:
    """Offset-based pagination request (traditional page/limit)."""

    page: int = 1
    limit: int = 10
    sort: str = "createdAt"
    order: SortOrder = SortOrder.ASC

    def __post_init__(self):
        if self.page < 1:
            raise InvalidPaginationError("page", self.page, "Page must be >= 1")
        if self.limit < 1:
            raise InvalidPaginationError("limit", self.limit, "Limit must be >= 1")
        if not isinstance(self.order, SortOrder):
            object.__setattr__(self, "order", SortOrder(str(self.order).lower()))

    @property
    def offset(self) -> int:
        """Calculate offset from page and limit."""
        return (self.page - 1) * self.limit
