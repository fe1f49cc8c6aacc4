"""Data models for thunks and lazy lists."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

# A zero-argument deferred computation. Calling it is "forcing" it.
Thunk = Callable[[], T]


class EmptyListError(LookupError):
    """Raised when the head or tail of an exhausted lazy list is requested."""


@dataclass(frozen=True)
class LazyNode(Generic[T]):
    """A forced lazy list cell: a deferred element and the deferred rest."""

    head: Callable[[], T]
    tail: Callable[[], Optional["LazyNode[T]"]]


# Forcing a LazyList yields either None (end of sequence) or a LazyNode.
LazyList = Callable[[], Optional[LazyNode[Any]]]


@dataclass(frozen=True)
class StrictNode(Generic[T]):
    """
    A strict list cell, defined recursively by its head and tail.

    ``None`` represents the empty list, so ``[1, 2, 3]`` is written as
    ``StrictNode(1, StrictNode(2, StrictNode(3, None)))``.
    """

    head: T
    tail: Optional["StrictNode[T]"] = None

    def to_list(self) -> list:
        """Convert the strict list to a Python list."""
        values = []
        node: Optional[StrictNode[T]] = self
        while node is not None:
            values.append(node.head)
            node = node.tail
        return values


@dataclass
class DrainStatistics:
    """Statistics for draining a lazy list into a sink."""

    count: int = 0
    elapsed_time: float = 0.0
    sink_type: str = ""
    result: Any = None
