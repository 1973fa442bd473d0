"""
Predicate-based filtering over vertex cursors.
"""

from labelgraph.filtering.predicates import (
    Predicate,
    FunctionPredicate,
    AndPredicate,
    OrPredicate,
    NotPredicate,
    as_predicate,
)
from labelgraph.filtering.filter_cursor import FilterCursor, VertexCursor

__all__ = [
    "Predicate",
    "FunctionPredicate",
    "AndPredicate",
    "OrPredicate",
    "NotPredicate",
    "as_predicate",
    "FilterCursor",
    "VertexCursor",
]
