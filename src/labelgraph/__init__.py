"""
labelgraph
==========

A mutable, undirected graph container with labeled edges, lazy
breadth-first and depth-first cursors, and a composable predicate filter
that can be layered over any cursor.

Public API:
- Graph
- GraphVertex / GraphEdge
- FilterCursor
- Predicate, AndPredicate, OrPredicate, NotPredicate
"""

from labelgraph.errors import (
    GraphError,
    InvalidArgumentError,
    ExhaustedIterationError,
)
from labelgraph.config.settings import GraphConfig, load_config
from labelgraph.graph.graph_schema import GraphVertex, GraphEdge
from labelgraph.graph.graph_store import Graph
from labelgraph.graph.graph_builder import GraphBuilder
from labelgraph.filtering.predicates import (
    Predicate,
    FunctionPredicate,
    AndPredicate,
    OrPredicate,
    NotPredicate,
    as_predicate,
)
from labelgraph.filtering.filter_cursor import FilterCursor

__all__ = [
    "GraphError",
    "InvalidArgumentError",
    "ExhaustedIterationError",
    "GraphConfig",
    "load_config",
    "GraphVertex",
    "GraphEdge",
    "Graph",
    "GraphBuilder",
    "Predicate",
    "FunctionPredicate",
    "AndPredicate",
    "OrPredicate",
    "NotPredicate",
    "as_predicate",
    "FilterCursor",
]

__version__ = "0.1.0"
