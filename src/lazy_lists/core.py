"""
Lazy evaluation with explicitly wrapped thunks.

Lazy evaluation can be thought of as (1) wrapping a function around each
argument and (2) only calling those functions when the value is actually
needed. Everything in this module follows that rule: nothing is computed
until somebody forces a thunk by calling it.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, TypeVar

from .models import EmptyListError, LazyList, LazyNode, Thunk
from .protocols import SupportsAdd

logger = logging.getLogger(__name__)

T = TypeVar("T")
N = TypeVar("N", bound=SupportsAdd)


# ============================================================================
# Lazy arguments
# ============================================================================


def lazy_sum(a: Thunk[N], b: Thunk[N]) -> Thunk[N]:
    """
    Lazily add two lazy values.

    Neither argument is forced here; both are forced at the last possible
    moment, when the returned thunk is called.
    """
    return lambda: a() + b()


def bottom():
    """A computation that never returns."""
    while True:
        pass


def first(a: T, b: T) -> T:
    """
    Return the first argument and ignore the second.

    Python evaluates both arguments before the call, so
    ``first(10, bottom())`` never returns even though ``b`` is unused.
    """
    return a


def lazy_first(a: Thunk[T], b: Thunk[T]) -> Thunk[T]:
    """Lazy version of ``first``: ``b`` is never forced."""
    return a


def memoize(thunk: Thunk[T]) -> Thunk[T]:
    """
    Wrap a thunk so that its computation runs at most once.

    Plain thunks recompute on every call. Sharing the result has to be
    asked for explicitly with this wrapper.

    Args:
        thunk: Zero-argument computation to cache

    Returns:
        A thunk returning the cached result after the first call
    """
    cell: List[T] = []
    pending: List[Thunk[T]] = [thunk]

    def force() -> T:
        if pending:
            cell.append(pending[0]())
            # Drop the computation so whatever it closes over can be freed
            pending.clear()
        return cell[0]

    return force


# ============================================================================
# Lazy list producers
# ============================================================================


def lazy_range(start):
    """
    Infinite lazy list of numbers ``start, start + 1, start + 2, ...``.

    Building it is O(1); successors are only discovered by forcing tails.
    Draining it with ``to_list`` never terminates, so bound it with ``take``.

    Args:
        start: First number of the sequence (any type supporting ``+ 1``)

    Returns:
        LazyList of numbers that never forces to None
    """
    return lambda: LazyNode(head=lambda: start, tail=lazy_range(start + 1))


def to_lazy_list(xs: Sequence[T], offset: int = 0) -> LazyList:
    """
    Convert a Python sequence into a lazy list.

    Args:
        xs: Sequence to wrap (not copied)
        offset: Index of the first element to expose

    Returns:
        LazyList over ``xs[offset:]``
    """

    def force() -> Optional[LazyNode[T]]:
        if offset >= len(xs):
            return None
        return LazyNode(head=lambda: xs[offset], tail=to_lazy_list(xs, offset + 1))

    return force


def from_iterable(iterable: Iterable[T]) -> LazyList:
    """
    Convert any iterable, including one-shot iterators, into a lazy list.

    Each node is memoized because forcing it advances the underlying
    iterator; re-forcing the same node must not consume another element.
    """
    iterator = iter(iterable)

    def node_for(it: Iterator[T]) -> LazyList:
        def force() -> Optional[LazyNode[T]]:
            try:
                value = next(it)
            except StopIteration:
                return None
            return LazyNode(head=lambda: value, tail=node_for(it))

        return memoize(force)

    return node_for(iterator)


# ============================================================================
# Lazy list consumers
# ============================================================================


def take(n: int, xs: LazyList) -> LazyList:
    """
    Lazy list of at most the first ``n`` elements of ``xs``.

    ``take(0, xs)`` forces to None without touching ``xs``. For ``n > 0``
    forcing the result forces ``xs`` exactly once and passes its head
    through unforced. If ``xs`` is exhausted early the result ends there.

    Args:
        n: Maximum number of elements, must not be negative
        xs: Source lazy list, possibly infinite

    Returns:
        LazyList of at most ``n`` elements

    Raises:
        ValueError: If ``n`` is negative
    """
    if n < 0:
        raise ValueError("n must not be negative")

    def force() -> Optional[LazyNode]:
        if n == 0:
            return None
        node = xs()
        if node is None:
            logger.debug(f"Source exhausted with {n} elements left to take")
            return None
        return LazyNode(head=node.head, tail=take(n - 1, node.tail))

    return force


def head(xs: LazyList):
    """Force ``xs`` and return its forced first element."""
    node = xs()
    if node is None:
        raise EmptyListError("cannot take head of empty list")
    return node.head()


def tail(xs: LazyList) -> LazyList:
    """Force ``xs`` and return the (unforced) rest of the list."""
    node = xs()
    if node is None:
        raise EmptyListError("cannot take tail of empty list")
    return node.tail


def iterate(xs: LazyList) -> Iterator:
    """
    Yield forced heads of ``xs`` one at a time, on demand.

    Args:
        xs: Lazy list to walk

    Yields:
        Elements of ``xs`` in order
    """
    node = xs()
    while node is not None:
        yield node.head()
        node = node.tail()


def to_list(xs: LazyList) -> list:
    """
    Drain a lazy list into a Python list.

    Never returns for an infinite list such as ``lazy_range(1)``.
    """
    values = []
    node = xs()
    while node is not None:
        values.append(node.head())
        node = node.tail()
    return values
