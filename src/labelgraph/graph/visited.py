from __future__ import annotations

import math

import numpy as np

from labelgraph.errors import InvalidArgumentError


class VisitedTable:
    """
    Growable boolean table keyed by node index.

    Node indices only ever increase, so the table grows on demand to cover
    the largest index seen so far. New slots start unvisited.
    """

    def __init__(self, capacity: int = 16, growth_factor: float = 2.0) -> None:
        self._flags = np.zeros(max(int(capacity), 1), dtype=bool)
        self._growth_factor = float(growth_factor)

    @property
    def capacity(self) -> int:
        return int(self._flags.shape[0])

    def _ensure(self, index: int) -> None:
        if index < self.capacity:
            return
        size = max(index + 1, math.ceil(self.capacity * self._growth_factor))
        grown = np.zeros(size, dtype=bool)
        grown[: self.capacity] = self._flags
        self._flags = grown

    def mark(self, index: int) -> None:
        if index < 0:
            raise InvalidArgumentError("index cannot be negative")
        self._ensure(index)
        self._flags[index] = True

    def is_visited(self, index: int) -> bool:
        if index < 0:
            raise InvalidArgumentError("index cannot be negative")
        if index >= self.capacity:
            return False
        return bool(self._flags[index])

    def __contains__(self, index: int) -> bool:
        return self.is_visited(index)

    def __len__(self) -> int:
        return int(np.count_nonzero(self._flags))
