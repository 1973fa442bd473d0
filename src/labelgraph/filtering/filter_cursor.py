from __future__ import annotations

import logging
from typing import Optional, Protocol

from labelgraph.errors import ExhaustedIterationError
from labelgraph.filtering.predicates import PredicateLike, as_predicate
from labelgraph.graph.graph_schema import GraphVertex


class VertexCursor(Protocol):
    """
    Anything that yields vertex snapshots through has_next/next.
    """

    def has_next(self) -> bool: ...

    def next(self) -> GraphVertex: ...


class FilterCursor:
    """
    Decorates a vertex cursor, yielding only vertices whose value the
    predicate accepts.

    Holds at most one buffered match. ``has_next`` pulls from the upstream
    cursor until it finds one, so querying it advances the upstream cursor.
    Works over traversal cursors and over other filter cursors.
    """

    def __init__(self, cursor: VertexCursor, predicate: PredicateLike) -> None:
        self._cursor = cursor
        self._predicate = as_predicate(predicate)
        self._buffered: Optional[GraphVertex] = None

    def has_next(self) -> bool:
        if self._buffered is not None:
            return True

        while self._cursor.has_next():
            try:
                candidate = self._cursor.next()
            except ExhaustedIterationError:
                break
            if self._predicate.accept(candidate.value):
                self._buffered = candidate
                return True
            logging.getLogger("labelgraph.filter").debug(
                "rejected index=%s", candidate.index
            )

        return False

    def next(self) -> GraphVertex:
        if self._buffered is None and not self.has_next():
            raise ExhaustedIterationError()

        vertex = self._buffered
        self._buffered = None
        return vertex

    def remove(self) -> None:
        """
        Filtering is read-only; this does nothing.
        """
        return

    def __iter__(self) -> "FilterCursor":
        return self

    def __next__(self) -> GraphVertex:
        return self.next()
