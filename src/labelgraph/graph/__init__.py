"""
Graph subsystem for labelgraph.

Defines the labeled graph container, its snapshot types and the
breadth-first and depth-first cursors that walk it.
"""

from labelgraph.graph.graph_schema import GraphVertex, GraphEdge
from labelgraph.graph.graph_store import Graph
from labelgraph.graph.graph_builder import GraphBuilder
from labelgraph.graph.graph_query import (
    TraversalCursor,
    BreadthFirstCursor,
    DepthFirstCursor,
)
from labelgraph.graph.visited import VisitedTable

__all__ = [
    "GraphVertex",
    "GraphEdge",
    "Graph",
    "GraphBuilder",
    "TraversalCursor",
    "BreadthFirstCursor",
    "DepthFirstCursor",
    "VisitedTable",
]
