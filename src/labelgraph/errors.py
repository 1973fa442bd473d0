from __future__ import annotations


class GraphError(Exception):
    """
    Base class for every error raised by labelgraph.
    """


class InvalidArgumentError(GraphError, ValueError):
    """
    Raised when a call violates a precondition: a ``None`` vertex value,
    a negative index, or a second root.
    """


class ExhaustedIterationError(GraphError, StopIteration):
    """
    Raised by ``next()`` on a cursor with no remaining element.

    Being a ``StopIteration``, it also ends ``for`` loops over a cursor.
    Inside a generator it must not escape: Python turns an escaping
    ``StopIteration`` into ``RuntimeError`` (PEP 479). A traversal cursor's
    ``has_next()`` can be true right before ``next()`` raises, because
    already-visited vertices stay on the frontier. Generators should use
    ``yield from cursor`` or catch this error around ``next()``.
    """
