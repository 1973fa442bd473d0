from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from labelgraph.errors import InvalidArgumentError


@dataclass(frozen=True)
class GraphEdge:
    """
    External view of one edge as seen from a vertex.

    Carries the edge label and the value at the other end.
    """

    label: Optional[str]
    neighbor_value: Any


@dataclass(frozen=True)
class GraphVertex:
    """
    Point-in-time snapshot of a graph vertex.

    Built when a traversal visits the vertex. The edge tuple is copied from
    the vertex's adjacency at that moment and never changes afterwards.
    """

    value: Any
    index: int
    edges: Tuple[GraphEdge, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgumentError("Graph vertices cannot have a None value")
        if not isinstance(self.edges, tuple):
            object.__setattr__(self, "edges", tuple(self.edges))

    @property
    def degree(self) -> int:
        return len(self.edges)

    def neighbor_values(self) -> List[Any]:
        return [e.neighbor_value for e in self.edges]
