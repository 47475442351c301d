"""Request models bound by the generic controller."""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..features.database.entities import FilterOperator, SortField, SortOrder
from ..features.pagination import (
    CompositeFilterGroup,
    CompositeType,
    DateRange,
    FilterCondition,
    OffsetPaginationRequest,
    PaginationOptions,
)


class PaginationQuery(BaseModel):
    """Query string of the offset-based listing.

    Page and limit are parsed leniently: anything that is not a non-zero
    number falls back to the default.
    """

    page: int = Field(1, ge=1, description="1-based page number")
    limit: int = Field(10, ge=1, description="Items per page")
    sort: str = Field("createdAt", description="Sort field")
    order: SortOrder = Field(SortOrder.DESC, description="Sort direction")

    @field_validator("page", "limit", mode="before")
    @classmethod
    def parse_number(cls, v, info):
        default = cls.model_fields[info.field_name].default
        try:
            number = float(v)
        except (TypeError, ValueError):
            return default
        if number != number or number == 0:
            return default
        return int(number)

    @field_validator("sort", "order", mode="before")
    @classmethod
    def default_when_blank(cls, v, info):
        if v is None or (isinstance(v, str) and not v.strip()):
            return cls.model_fields[info.field_name].default
        return v.lower() if info.field_name == "order" and isinstance(v, str) else v

    def to_request(self) -> OffsetPaginationRequest:
        return OffsetPaginationRequest(
            page=self.page, limit=self.limit, sort=self.sort, order=self.order
        )


class PaginatorQuery(BaseModel):
    """Query string of the simple ``paginator`` endpoint."""

    page: int = Field(1, description="1-based page number")
    limit: int = Field(10, description="Items per page")
    all: bool = Field(False, description="Return every matching document")

    @field_validator("all", mode="before")
    @classmethod
    def parse_all(cls, v):
        return str(v).lower() == "true"

    def to_options(self) -> PaginationOptions:
        return PaginationOptions(page=self.page, limit=self.limit, all=self.all)


class FilterConditionModel(BaseModel):
    """A single filter condition."""

    key: str = Field(..., min_length=1)
    operator: FilterOperator
    value: Any = None

    def to_condition(self) -> FilterCondition:
        return FilterCondition(self.key, self.operator, self.value)


class CompositeFilterModel(BaseModel):
    """A group of conditions combined with AND or OR."""

    type: CompositeType
    conditions: List[FilterConditionModel] = Field(default_factory=list)

    def to_group(self) -> CompositeFilterGroup:
        return CompositeFilterGroup(self.type, [c.to_condition() for c in self.conditions])


class OrderByModel(BaseModel):
    field: str = Field(..., min_length=1)
    direction: SortOrder = SortOrder.ASC

    def to_sort_field(self) -> SortField:
        return SortField(self.field, self.direction)


class DateRangeModel(BaseModel):
    field: str = Field(..., min_length=1)
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def to_date_range(self) -> DateRange:
        return DateRange(self.field, self.start, self.end)


class PaginateRequest(BaseModel):
    """JSON payload of the rich ``search`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)
    filters: List[FilterConditionModel] = Field(default_factory=list)
    composite_filters: List[CompositeFilterModel] = Field(default_factory=list, alias="compositeFilters")
    last_visible: Optional[str] = Field(None, alias="lastVisible")
    order_by: Optional[Union[OrderByModel, List[OrderByModel]]] = Field(None, alias="orderBy")
    select: Optional[List[str]] = None
    date_range: Optional[DateRangeModel] = Field(None, alias="dateRange")
    include_soft_deleted: Optional[bool] = Field(None, alias="includeSoftDeleted")
    all: bool = False

    def to_options(self) -> PaginationOptions:
        order_by = None
        if isinstance(self.order_by, list):
            order_by = [o.to_sort_field() for o in self.order_by]
        elif self.order_by is not None:
            order_by = self.order_by.to_sort_field()

        return PaginationOptions(
            page=self.page,
            limit=self.limit,
            filters=[f.to_condition() for f in self.filters],
            composite_filters=[g.to_group() for g in self.composite_filters],
            last_visible=self.last_visible,
            order_by=order_by,
            select=self.select,
            date_range=self.date_range.to_date_range() if self.date_range else None,
            include_soft_deleted=self.include_soft_deleted,
            all=self.all,
        )
