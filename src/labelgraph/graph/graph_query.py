from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Deque

from labelgraph.errors import ExhaustedIterationError
from labelgraph.graph.graph_schema import GraphVertex
from labelgraph.graph.visited import VisitedTable

if TYPE_CHECKING:
    from labelgraph.graph.graph_store import Graph, _Node


class TraversalCursor(ABC):
    """
    Lazy walk over a graph from its root.

    The cursor borrows the graph and owns only its frontier and visited
    table. A vertex's neighbors are read at the moment it is visited, not
    when the cursor is created.

    ``has_next`` reports whether the frontier is non-empty. The frontier may
    hold vertices that were already visited through another edge; ``next``
    skips them, and raises ExhaustedIterationError if nothing unvisited
    remains even though ``has_next`` returned True. Prefer ``for`` loops or
    ``yield from`` over ``while has_next(): yield next()`` in generators.
    """

    order: str

    def __init__(self, graph: "Graph") -> None:
        self._graph = graph
        self._frontier: Deque["_Node"] = deque()
        self._visited = VisitedTable(
            capacity=graph.config.visited_initial_capacity,
            growth_factor=graph.config.visited_growth_factor,
        )
        if graph._root is not None:
            self._frontier.append(graph._root)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def has_next(self) -> bool:
        return bool(self._frontier)

    def next(self) -> GraphVertex:
        if not self.has_next():
            raise ExhaustedIterationError()

        while self._frontier:
            node = self._pop()
            if self._visited.is_visited(node.index):
                continue

            self._visited.mark(node.index)
            self._frontier.extend(node.neighbors())
            logging.getLogger("labelgraph.traversal").debug(
                "%s visit index=%s frontier=%s",
                self.order,
                node.index,
                len(self._frontier),
            )
            return self._graph._snapshot(node)

        raise ExhaustedIterationError()

    def remove(self) -> None:
        """
        Traversal is read-only; this does nothing.
        """
        return

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    def __iter__(self) -> "TraversalCursor":
        return self

    def __next__(self) -> GraphVertex:
        return self.next()

    # ------------------------------------------------------------------
    # Implementation contract
    # ------------------------------------------------------------------

    @abstractmethod
    def _pop(self) -> "_Node":
        """
        Take the next candidate off the frontier.
        """
        raise NotImplementedError


class BreadthFirstCursor(TraversalCursor):
    """
    Level-order traversal; ties within a level follow adjacency order.
    """

    order = "bfs"

    def _pop(self) -> "_Node":
        return self._frontier.popleft()


class DepthFirstCursor(TraversalCursor):
    """
    Iterative depth-first traversal.

    All neighbors of a vertex are pushed before any is taken, so siblings
    come out in reverse adjacency order (last added first).
    """

    order = "dfs"

    def _pop(self) -> "_Node":
        return self._frontier.pop()
