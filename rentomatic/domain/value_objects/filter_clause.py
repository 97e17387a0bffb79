"""
Filter clause value objects

A filter key such as ``price__lt`` names an attribute and an operator. The
``FilterGrammar`` table declares which pairs are allowed for an entity type
and how raw values are coerced before comparison. Request validation and
repositories share the same grammar so keys are only ever split here.
"""

import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from rentomatic.domain.exceptions import FilterKeyError, FilterValueError

KEY_SEPARATOR = "__"


class FilterOperator(str, Enum):
    """Comparison operators understood by the filter language"""

    EQ = "eq"
    LT = "lt"
    GT = "gt"

    def compare(self, left: Any, right: Any) -> bool:
        """Apply the operator to an attribute value and a coerced filter value"""
        return _COMPARATORS[self](left, right)


_COMPARATORS: Dict[FilterOperator, Callable[[Any, Any], bool]] = {
    FilterOperator.EQ: operator.eq,
    FilterOperator.LT: operator.lt,
    FilterOperator.GT: operator.gt,
}


# Signed 64-bit bounds shared by every backend that stores integer columns
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def coerce_int(value: Any) -> int:
    """Coerce a raw filter value (int or numeric string) to a 64-bit int"""
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid integer value")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{value} is not an integral value")
        result = int(value)
    elif isinstance(value, str):
        result = int(value.strip())
    elif isinstance(value, int):
        result = value
    else:
        raise TypeError(f"Cannot coerce {type(value).__name__} to int")

    if not INT_MIN <= result <= INT_MAX:
        raise ValueError(f"{value} is outside the 64-bit integer range")
    return result


def coerce_str(value: Any) -> str:
    """Coerce a raw filter value to str"""
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return str(value)
    raise TypeError(f"Cannot coerce {type(value).__name__} to str")


@dataclass(frozen=True)
class FilterAttribute:
    """A filterable attribute, its operators and its value coercer"""

    name: str
    operators: FrozenSet[FilterOperator]
    coerce: Callable[[Any], Any] = coerce_str


@dataclass(frozen=True)
class FilterClause:
    """Parsed (attribute, operator, value) constraint"""

    attribute: str
    operator: FilterOperator
    value: Any

    @property
    def key(self) -> str:
        """The raw key this clause was parsed from"""
        return f"{self.attribute}{KEY_SEPARATOR}{self.operator.value}"


@dataclass(frozen=True)
class FilterGrammar:
    """
    Allow-list of (attribute, operator) pairs for one entity type

    Adding an attribute or operator only means adding an entry to the
    table; parsing and evaluation do not change.
    """

    attributes: Mapping[str, FilterAttribute] = field(default_factory=dict)

    @classmethod
    def from_attributes(cls, attributes: Iterable[FilterAttribute]) -> "FilterGrammar":
        """Build a grammar from a list of attribute declarations"""
        return cls({attribute.name: attribute for attribute in attributes})

    def split_key(self, key: Any) -> Optional[Tuple[FilterAttribute, FilterOperator]]:
        """Return the declared attribute and operator for a key, or None"""
        if not isinstance(key, str):
            return None

        name, separator, operator_name = key.partition(KEY_SEPARATOR)
        if not separator:
            return None

        attribute = self.attributes.get(name)
        if attribute is None:
            return None

        try:
            filter_operator = FilterOperator(operator_name)
        except ValueError:
            return None

        if filter_operator not in attribute.operators:
            return None
        return attribute, filter_operator

    def is_allowed(self, key: Any) -> bool:
        """Check whether a key is part of the allow-list"""
        return self.split_key(key) is not None

    def parse_key(self, key: Any, value: Any) -> FilterClause:
        """Parse one key/value pair into a clause"""
        parsed = self.split_key(key)
        if parsed is None:
            raise FilterKeyError(key)
        attribute, filter_operator = parsed
        return FilterClause(attribute.name, filter_operator, value)

    def parse(self, filters: Optional[Mapping[str, Any]]) -> Tuple[FilterClause, ...]:
        """Parse a filter mapping into clauses, keeping the mapping's order"""
        if not filters:
            return ()
        return tuple(self.parse_key(key, value) for key, value in filters.items())

    def coerce(self, clause: FilterClause) -> Any:
        """Coerce a clause value to its attribute's type"""
        attribute = self.attributes[clause.attribute]
        try:
            return attribute.coerce(clause.value)
        except (TypeError, ValueError) as e:
            raise FilterValueError(clause.key, clause.value) from e

    def predicate(self, clause: FilterClause) -> Callable[[Any], bool]:
        """Coerce the clause value once and return a test for entities"""
        expected = self.coerce(clause)

        def _test(entity: Any) -> bool:
            return clause.operator.compare(getattr(entity, clause.attribute), expected)

        return _test


ROOM_FILTER_GRAMMAR = FilterGrammar.from_attributes(
    [
        FilterAttribute("code", frozenset({FilterOperator.EQ}), coerce_str),
        FilterAttribute(
            "price",
            frozenset({FilterOperator.EQ, FilterOperator.LT, FilterOperator.GT}),
            coerce_int,
        ),
    ]
)
