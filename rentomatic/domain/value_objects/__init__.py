"""
Domain value objects package

Contains immutable value objects that represent concepts in the business domain.
"""

from .filter_clause import (
    ROOM_FILTER_GRAMMAR,
    FilterAttribute,
    FilterClause,
    FilterGrammar,
    FilterOperator,
)

__all__ = [
    "FilterAttribute",
    "FilterClause",
    "FilterGrammar",
    "FilterOperator",
    "ROOM_FILTER_GRAMMAR",
]
