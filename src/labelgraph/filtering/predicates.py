from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Union


class Predicate(ABC):
    """
    Single-argument boolean test over a vertex value.

    Implementations must be pure. Predicates compose with ``&``, ``|``
    and ``~``, and can be called like functions.
    """

    @abstractmethod
    def accept(self, value: Any) -> bool:
        raise NotImplementedError

    def __call__(self, value: Any) -> bool:
        return self.accept(value)

    def __and__(self, other: "PredicateLike") -> "AndPredicate":
        return AndPredicate(self, other)

    def __or__(self, other: "PredicateLike") -> "OrPredicate":
        return OrPredicate(self, other)

    def __invert__(self) -> "NotPredicate":
        return NotPredicate(self)


PredicateLike = Union[Predicate, Callable[[Any], bool]]


class FunctionPredicate(Predicate):
    """
    Adapts a plain callable.
    """

    def __init__(self, fn: Callable[[Any], bool]) -> None:
        if not callable(fn):
            raise TypeError(f"predicate must be callable, got {fn!r}")
        self.fn = fn

    def accept(self, value: Any) -> bool:
        return bool(self.fn(value))


def as_predicate(fn: PredicateLike) -> Predicate:
    if isinstance(fn, Predicate):
        return fn
    return FunctionPredicate(fn)


class AndPredicate(Predicate):
    """
    Both operands must accept. ``right`` is skipped once ``left`` rejects.
    """

    def __init__(self, left: PredicateLike, right: PredicateLike) -> None:
        self.left = as_predicate(left)
        self.right = as_predicate(right)

    def accept(self, value: Any) -> bool:
        return self.left.accept(value) and self.right.accept(value)


class OrPredicate(Predicate):
    """
    Either operand must accept. ``right`` is skipped once ``left`` accepts.
    """

    def __init__(self, left: PredicateLike, right: PredicateLike) -> None:
        self.left = as_predicate(left)
        self.right = as_predicate(right)

    def accept(self, value: Any) -> bool:
        return self.left.accept(value) or self.right.accept(value)


class NotPredicate(Predicate):
    def __init__(self, inner: PredicateLike) -> None:
        self.inner = as_predicate(inner)

    def accept(self, value: Any) -> bool:
        return not self.inner.accept(value)
