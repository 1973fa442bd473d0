from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import networkx as nx

from labelgraph.config.settings import GraphConfig
from labelgraph.errors import InvalidArgumentError
from labelgraph.graph.graph_query import BreadthFirstCursor, DepthFirstCursor
from labelgraph.graph.graph_schema import GraphEdge, GraphVertex


# eq=False keeps identity comparison: two records holding equal values are
# still different vertices.


@dataclass(eq=False)
class _InternalEdge:
    label: Optional[str]
    neighbor: "_Node"


@dataclass(eq=False)
class _Node:
    value: Any
    index: int
    adjacent: List[_InternalEdge] = field(default_factory=list)

    def neighbors(self) -> List["_Node"]:
        return [e.neighbor for e in self.adjacent]


def _check_value(value: Any) -> None:
    if value is None:
        raise InvalidArgumentError("Graph vertices cannot have a None value")


def _check_index(index: int) -> int:
    if isinstance(index, bool):
        raise InvalidArgumentError(f"index must be an integer, got {index!r}")
    try:
        index = operator.index(index)
    except TypeError:
        raise InvalidArgumentError(
            f"index must be an integer, got {index!r}"
        ) from None
    if index < 0:
        raise InvalidArgumentError("index cannot be negative")
    return index


class Graph:
    """
    Mutable, undirected graph with optionally labeled edges.

    Every vertex gets a stable index from a per-graph counter when it is
    created. Indices follow creation order and are never reused, even after
    the vertex is removed.

    An undirected edge is stored twice, once in each endpoint's adjacency
    list, and both copies always carry the same label.

    Lookups by value use equality and return the first match in insertion
    order. The graph is not thread-safe; callers coordinate writers.

    ``Graph(None)`` builds an empty graph rather than raising, since
    ``None`` means "no root supplied". ``add_root(None)`` still raises
    InvalidArgumentError.
    """

    def __init__(
        self,
        root: Any = None,
        *,
        config: Optional[GraphConfig] = None,
    ) -> None:
        self.config = config or GraphConfig()
        self._root: Optional[_Node] = None
        self._nodes: List[_Node] = []
        self._next_index = 0

        if root is not None:
            self.add_root(root)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _new_node(self, value: Any) -> _Node:
        _check_value(value)
        node = _Node(value=value, index=self._next_index)
        self._next_index += 1
        self._nodes.append(node)
        return node

    def _find(self, value: Any) -> Optional[_Node]:
        for node in self._nodes:
            if node.value == value:
                return node
        return None

    def _find_at_index(self, index: int) -> Optional[_Node]:
        for node in self._nodes:
            if node.index == index:
                return node
        return None

    def _attach(self, anchor: _Node, label: Optional[str], value: Any) -> _Node:
        node = self._new_node(value)
        self._link(anchor, node, label)
        return node

    @staticmethod
    def _link(a: _Node, b: _Node, label: Optional[str]) -> None:
        a.adjacent.append(_InternalEdge(label=label, neighbor=b))
        b.adjacent.append(_InternalEdge(label=label, neighbor=a))

    @staticmethod
    def _edge_to(node: _Node, neighbor: _Node) -> Optional[_InternalEdge]:
        for edge in node.adjacent:
            if edge.neighbor is neighbor:
                return edge
        return None

    def _snapshot(self, node: _Node) -> GraphVertex:
        return GraphVertex(
            value=node.value,
            index=node.index,
            edges=tuple(
                GraphEdge(label=e.label, neighbor_value=e.neighbor.value)
                for e in node.adjacent
            ),
        )

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_root(self, value: Any) -> bool:
        """
        Adds the root vertex to a graph that has none.

        Raises InvalidArgumentError if a root exists or ``value`` is None.
        """
        if self._root is not None:
            raise InvalidArgumentError("Root vertex has already been assigned")
        _check_value(value)
        self._root = self._new_node(value)
        logging.getLogger("labelgraph.graph").debug(
            "root added index=%s", self._root.index
        )
        return True

    def add(self, existing: Any, label: Optional[str], value: Any) -> bool:
        """
        Adds ``value`` as a new vertex connected to the first vertex equal
        to ``existing``. Returns False if there is no such vertex.
        """
        _check_value(existing)
        _check_value(value)
        anchor = self._find(existing)
        if anchor is None:
            return False
        node = self._attach(anchor, label, value)
        logging.getLogger("labelgraph.graph").debug(
            "vertex added index=%s anchor=%s label=%r",
            node.index,
            anchor.index,
            label,
        )
        return True

    def add_to_index(self, index: int, label: Optional[str], value: Any) -> bool:
        """
        Adds ``value`` as a new vertex connected to the vertex at ``index``.
        Returns False if there is no such vertex.
        """
        index = _check_index(index)
        _check_value(value)
        anchor = self._find_at_index(index)
        if anchor is None:
            return False
        node = self._attach(anchor, label, value)
        logging.getLogger("labelgraph.graph").debug(
            "vertex added index=%s anchor=%s label=%r",
            node.index,
            anchor.index,
            label,
        )
        return True

    def remove(self, value: Any) -> bool:
        """
        Removes the first vertex equal to ``value`` together with every
        edge incident to it.
        """
        _check_value(value)
        node = self._find(value)
        if node is None:
            return False
        self._remove_node(node)
        return True

    def remove_at_index(self, index: int) -> bool:
        index = _check_index(index)
        node = self._find_at_index(index)
        if node is None:
            return False
        self._remove_node(node)
        return True

    def _remove_node(self, target: _Node) -> None:
        for node in self._nodes:
            node.adjacent = [e for e in node.adjacent if e.neighbor is not target]
        self._nodes = [n for n in self._nodes if n is not target]
        target.adjacent = []

        if self._root is target:
            self._root = None

        logging.getLogger("labelgraph.graph").debug(
            "vertex removed index=%s remaining=%s", target.index, len(self._nodes)
        )

    def set_vertex(self, existing: Any, value: Any) -> bool:
        _check_value(existing)
        _check_value(value)
        node = self._find(existing)
        if node is None:
            return False
        node.value = value
        return True

    def set_vertex_at_index(self, index: int, value: Any) -> bool:
        index = _check_index(index)
        _check_value(value)
        node = self._find_at_index(index)
        if node is None:
            return False
        node.value = value
        return True

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, a: Any, b: Any, label: Optional[str] = None) -> bool:
        """
        Connects two existing, distinct vertices. Parallel edges are allowed.
        """
        _check_value(a)
        _check_value(b)
        return self._add_edge(self._find(a), self._find(b), label)

    def add_edge_at_index(
        self, index_a: int, index_b: int, label: Optional[str] = None
    ) -> bool:
        index_a = _check_index(index_a)
        index_b = _check_index(index_b)
        return self._add_edge(
            self._find_at_index(index_a), self._find_at_index(index_b), label
        )

    def _add_edge(
        self, a: Optional[_Node], b: Optional[_Node], label: Optional[str]
    ) -> bool:
        if a is None or b is None or a is b:
            return False
        self._link(a, b, label)
        logging.getLogger("labelgraph.graph").debug(
            "edge added %s<->%s label=%r", a.index, b.index, label
        )
        return True

    def remove_edge(self, a: Any, b: Any) -> bool:
        _check_value(a)
        _check_value(b)
        return self._remove_edge(self._find(a), self._find(b))

    def remove_edge_at_index(self, index_a: int, index_b: int) -> bool:
        index_a = _check_index(index_a)
        index_b = _check_index(index_b)
        return self._remove_edge(
            self._find_at_index(index_a), self._find_at_index(index_b)
        )

    def _remove_edge(self, a: Optional[_Node], b: Optional[_Node]) -> bool:
        if a is None or b is None:
            return False
        forward = self._edge_to(a, b)
        backward = self._edge_to(b, a)
        if forward is None or backward is None:
            return False
        a.adjacent.remove(forward)
        b.adjacent.remove(backward)
        logging.getLogger("labelgraph.graph").debug(
            "edge removed %s<->%s", a.index, b.index
        )
        return True

    def set_edge(self, a: Any, b: Any, label: Optional[str]) -> bool:
        """
        Relabels the edge between the first vertices equal to ``a`` and
        ``b``. Both stored copies are updated; argument order is irrelevant.
        """
        _check_value(a)
        _check_value(b)
        return self._set_edge(self._find(a), self._find(b), label)

    def set_edge_at_index(
        self, index_a: int, index_b: int, label: Optional[str]
    ) -> bool:
        index_a = _check_index(index_a)
        index_b = _check_index(index_b)
        return self._set_edge(
            self._find_at_index(index_a), self._find_at_index(index_b), label
        )

    def _set_edge(
        self, a: Optional[_Node], b: Optional[_Node], label: Optional[str]
    ) -> bool:
        if a is None or b is None:
            return False
        forward = self._edge_to(a, b)
        backward = self._edge_to(b, a)
        if forward is None or backward is None:
            return False
        forward.label = label
        backward.label = label
        return True

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def bfs_iterator(self) -> BreadthFirstCursor:
        """
        Returns a breadth-first cursor rooted at the current root.

        Neighbors are read when a vertex is visited, so vertices attached to
        a not-yet-visited vertex still show up. Any other mutation while a
        cursor is live is unsupported; take a fresh cursor instead.
        """
        return BreadthFirstCursor(self)

    def dfs_iterator(self) -> DepthFirstCursor:
        """
        Returns a depth-first cursor rooted at the current root.

        Siblings are explored last-added first. Same mutation caveats as
        ``bfs_iterator``.
        """
        return DepthFirstCursor(self)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def root_vertex(self) -> Optional[GraphVertex]:
        if self._root is None:
            return None
        return self._snapshot(self._root)

    def get_vertex(self, value: Any) -> Optional[GraphVertex]:
        _check_value(value)
        node = self._find(value)
        return self._snapshot(node) if node is not None else None

    def get_vertex_at_index(self, index: int) -> Optional[GraphVertex]:
        index = _check_index(index)
        node = self._find_at_index(index)
        return self._snapshot(node) if node is not None else None

    def vertices(self) -> List[GraphVertex]:
        return [self._snapshot(n) for n in self._nodes]

    def vertex_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return sum(len(n.adjacent) for n in self._nodes) // 2

    def is_empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, value: Any) -> bool:
        return value is not None and self._find(value) is not None

    # -------------------- Cloning --------------------

    def clone(self) -> "Graph":
        """
        Structural copy. Indices, labels, adjacency order, the root and the
        index counter are preserved; vertex values are shared.
        """
        g = Graph(config=self.config)
        copies: Dict[int, _Node] = {
            n.index: _Node(value=n.value, index=n.index) for n in self._nodes
        }
        for node in self._nodes:
            copies[node.index].adjacent = [
                _InternalEdge(label=e.label, neighbor=copies[e.neighbor.index])
                for e in node.adjacent
            ]
        g._nodes = [copies[n.index] for n in self._nodes]
        g._root = copies[self._root.index] if self._root is not None else None
        g._next_index = self._next_index
        return g

    # -------------------- Export --------------------

    def to_networkx(self) -> nx.MultiGraph:
        """
        Returns a ``networkx.MultiGraph`` keyed by vertex index.

        Nodes carry ``value`` and ``root``; edges carry ``label``.
        """
        g = nx.MultiGraph()
        for node in self._nodes:
            g.add_node(node.index, value=node.value, root=node is self._root)
        for node in self._nodes:
            for edge in node.adjacent:
                if edge.neighbor.index > node.index:
                    g.add_edge(node.index, edge.neighbor.index, label=edge.label)
        return g
