"""Utility classes for observing how much of a lazy computation gets forced."""

import logging
from typing import Optional

from .models import LazyList, LazyNode, Thunk
from .protocols import LoggerProtocol


class ForceCounter:
    """
    Counts how many times thunks and list elements are forced.

    Single Responsibility: Instrument lazy values without changing them.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        """
        Initialize counter.

        Args:
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)
        self.thunk_forces = 0
        self.node_forces = 0
        self.head_forces = 0

    def thunk(self, thunk: Thunk) -> Thunk:
        """Wrap a plain thunk so each call is counted."""

        def force():
            self.thunk_forces += 1
            return thunk()

        return force

    def lazy_list(self, xs: LazyList) -> LazyList:
        """
        Wrap a lazy list so node and head forcings are counted.

        The wrapper reaches through tails, so every node reachable from the
        returned list is instrumented as well.

        Args:
            xs: Lazy list to observe

        Returns:
            LazyList with the same elements as ``xs``
        """

        def force():
            self.node_forces += 1
            node = xs()
            if node is None:
                return None
            return LazyNode(head=self._head(node.head), tail=self.lazy_list(node.tail))

        return force

    def _head(self, head: Thunk) -> Thunk:
        def force():
            self.head_forces += 1
            value = head()
            self._logger.debug(f"Forced element #{self.head_forces}: {value!r}")
            return value

        return force

    def reset(self) -> None:
        """Reset all counters to zero."""
        self.thunk_forces = 0
        self.node_forces = 0
        self.head_forces = 0

    def summary(self) -> dict:
        """Return counters as a dictionary."""
        return {
            "thunk_forces": self.thunk_forces,
            "node_forces": self.node_forces,
            "head_forces": self.head_forces,
        }
