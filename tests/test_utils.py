"""Tests for utils module."""

from unittest.mock import Mock

from lazy_lists.core import lazy_range, take, to_lazy_list, to_list
from lazy_lists.utils import ForceCounter


def test_counter_initialization():
    """Test that ForceCounter starts at zero."""
    counter = ForceCounter()
    assert counter.summary() == {"thunk_forces": 0, "node_forces": 0, "head_forces": 0}


def test_counter_preserves_elements():
    """Test that wrapping a list does not change its elements."""
    counter = ForceCounter()
    assert to_list(counter.lazy_list(to_lazy_list([3, 1, 2]))) == [3, 1, 2]
    # three nodes plus the final None
    assert counter.node_forces == 4
    assert counter.head_forces == 3


def test_counter_logs_forced_elements():
    """Test that each forced element is reported to the logger."""
    logger = Mock()
    counter = ForceCounter(logger)

    to_list(take(2, counter.lazy_list(lazy_range(7))))

    assert logger.debug.call_count == 2
    assert "7" in logger.debug.call_args_list[0].args[0]


def test_counter_reset():
    """Test resetting counters."""
    counter = ForceCounter()
    counter.thunk(lambda: 1)()
    to_list(take(1, counter.lazy_list(lazy_range(0))))

    counter.reset()
    assert counter.summary() == {"thunk_forces": 0, "node_forces": 0, "head_forces": 0}
