"""Filter validation run before any query reaches the store."""

import logging
from typing import Iterable

from ...core.exceptions import InvalidFilterValueError, UnsupportedFilterError
from ..database.entities import DocumentStore, FilterOperator
from .entities import CompositeType, FilterCondition, PaginationOptions

logger = logging.getLogger(__name__)

# Native cap on membership operator lists
MAX_MEMBERSHIP_VALUES = 10


class FilterValidator:
    """Validates filter conditions and composite groups against a store."""

    def __init__(self, store: DocumentStore):
        self.store = store

    @staticmethod
    def validate(condition: FilterCondition) -> None:
        """Validate a single condition.

        Rules are checked in order: null value, array value with
        ``array-contains``, then list shape for membership operators.

        Raises:
            InvalidFilterValueError: If the condition is not acceptable
        """
        operator = condition.operator
        value = condition.value

        if value is None:
            raise InvalidFilterValueError(
                f"{condition.key} cannot have null or undefined value",
                key=condition.key, operator=operator.value, value=value,
            )

        if operator == FilterOperator.ARRAY_CONTAINS and isinstance(value, (list, tuple)):
            raise InvalidFilterValueError(
                "array-contains operator cannot be used with an array value",
                key=condition.key, operator=operator.value, value=value,
            )

        if operator.requires_array:
            if not isinstance(value, (list, tuple)):
                raise InvalidFilterValueError(
                    f"{operator.value} operator requires an array value",
                    key=condition.key, operator=operator.value, value=value,
                )
            if len(value) == 0:
                raise InvalidFilterValueError(
                    f"{operator.value} operator requires a non-empty array",
                    key=condition.key, operator=operator.value, value=value,
                )
            if len(value) > MAX_MEMBERSHIP_VALUES:
                raise InvalidFilterValueError(
                    f"{operator.value} operator is limited to {MAX_MEMBERSHIP_VALUES} values",
                    key=condition.key, operator=operator.value, value=value,
                )

    def validate_all(self, conditions: Iterable[FilterCondition]) -> None:
        for condition in conditions:
            self.validate(condition)

    def validate_options(self, options: PaginationOptions) -> None:
        """Validate every filter and composite group of a paginate call."""
        self.validate_all(options.filters)

        for group in options.composite_filters:
            self.validate_all(group.conditions)
            if group.type == CompositeType.OR and group.conditions and not self.store.supports_or_queries:
                logger.warning(
                    f"Rejecting OR composite filter on {type(self.store).__name__}: "
                    "store has no native OR support"
                )
                raise UnsupportedFilterError(
                    "OR composite filters are not supported by this document store",
                    store=type(self.store).__name__,
                )
