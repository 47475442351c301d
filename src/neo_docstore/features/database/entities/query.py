"""Store-level query vocabulary.

``StoreQuery`` is an immutable, chainable description of a read against one
collection. Every builder method returns a new query, mirroring the way
Firestore queries compose, so one base query can branch into a data query and
a count query without either affecting the other.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional, Tuple, Union

# Firestore's reserved field path for the document identifier
DOCUMENT_ID = "__name__"


class FilterOperator(str, Enum):
    """Comparison operators understood by every document store."""
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    ARRAY_CONTAINS = "array-contains"
    ARRAY_CONTAINS_ANY = "array-contains-any"
    IN = "in"
    NOT_IN = "not-in"

    @property
    def requires_array(self) -> bool:
        """Membership operators take a list of candidate values."""
        return self in MEMBERSHIP_OPERATORS


MEMBERSHIP_OPERATORS = frozenset({
    FilterOperator.IN,
    FilterOperator.NOT_IN,
    FilterOperator.ARRAY_CONTAINS_ANY,
})


class SortOrder(str, Enum):
    """Sort order enumeration."""
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortField:
    """Sort field specification."""

    field: str
    order: SortOrder = SortOrder.ASC

    def __post_init__(self):
        if not self.field:
            raise ValueError("Sort field name cannot be empty")
        if not isinstance(self.order, SortOrder):
            object.__setattr__(self, "order", SortOrder(str(self.order).lower()))


@dataclass(frozen=True)
class FieldPredicate:
    """A single ``field <operator> value`` predicate in native store terms."""

    field: str
    operator: FilterOperator
    value: Any


@dataclass(frozen=True)
class AnyOfPredicate:
    """A disjunction: matches when at least one inner predicate matches."""

    predicates: Tuple[FieldPredicate, ...]


Predicate = Union[FieldPredicate, AnyOfPredicate]


@dataclass(frozen=True)
class StoreQuery:
    """Immutable query against a single collection."""

    collection: str
    predicates: Tuple[Predicate, ...] = field(default_factory=tuple)
    ordering: Tuple[SortField, ...] = field(default_factory=tuple)
    start_after_id: Optional[str] = None
    row_limit: Optional[int] = None
    row_offset: int = 0

    def where(self, field_path: str, operator: FilterOperator, value: Any) -> "StoreQuery":
        """Conjoin a field predicate."""
        predicate = FieldPredicate(field_path, FilterOperator(operator), value)
        return replace(self, predicates=self.predicates + (predicate,))

    def where_any(self, predicates: Tuple[FieldPredicate, ...]) -> "StoreQuery":
        """Conjoin a disjunction of field predicates."""
        return replace(self, predicates=self.predicates + (AnyOfPredicate(tuple(predicates)),))

    def order_by(self, field_path: str, order: SortOrder = SortOrder.ASC) -> "StoreQuery":
        """Append a sort key; the first one added is the primary sort."""
        return replace(self, ordering=self.ordering + (SortField(field_path, order),))

    def start_after(self, document_id: str) -> "StoreQuery":
        """Resume after the given document in the current ordering."""
        return replace(self, start_after_id=document_id)

    def limit(self, count: int) -> "StoreQuery":
        """Cap the number of returned documents."""
        return replace(self, row_limit=count)

    def offset(self, count: int) -> "StoreQuery":
        """Skip the first ``count`` matching documents."""
        return replace(self, row_offset=count)

    @property
    def uses_disjunction(self) -> bool:
        return any(isinstance(p, AnyOfPredicate) for p in self.predicates)
