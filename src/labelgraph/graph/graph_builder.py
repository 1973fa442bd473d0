from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Tuple

from labelgraph.graph.graph_store import Graph


class GraphBuilder:
    """
    Populates a graph from structured inputs.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def add_adjacents(
        self,
        existing: Any,
        pairs: Iterable[Tuple[Optional[str], Any]],
    ) -> int:
        """
        Attaches each ``(label, value)`` pair to the first vertex equal to
        ``existing``. Returns how many vertices were added.
        """
        added = 0
        for label, value in pairs:
            if self.graph.add(existing, label, value):
                added += 1
        return added

    def add_paths(self, triples: Iterable[Tuple[Any, Optional[str], Any]]) -> int:
        added = 0
        for existing, label, value in triples:
            if self.graph.add(existing, label, value):
                added += 1
            else:
                logging.getLogger("labelgraph.graph").debug(
                    "skipped %r: no vertex equal to %r", value, existing
                )
        return added
