"""Request and response models for the controller layer."""

from .requests import (
    PaginationQuery,
    PaginatorQuery,
    FilterConditionModel,
    CompositeFilterModel,
    OrderByModel,
    DateRangeModel,
    PaginateRequest,
)
from .responses import ResultKind, ControllerResult

__all__ = [
    "PaginationQuery",
    "PaginatorQuery",
    "FilterConditionModel",
    "CompositeFilterModel",
    "OrderByModel",
    "DateRangeModel",
    "PaginateRequest",
    "ResultKind",
    "ControllerResult",
]
