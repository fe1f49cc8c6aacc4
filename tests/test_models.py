"""Tests for models module."""

import dataclasses

import pytest

from lazy_lists.models import EmptyListError, LazyNode, StrictNode


def test_strict_list_from_head_and_tail():
    """Test the strict list from the lesson."""
    a_list = StrictNode(1, StrictNode(2, StrictNode(3, None)))

    assert a_list.head == 1
    assert a_list.tail.head == 2
    assert a_list.to_list() == [1, 2, 3]


def test_lazy_node_is_immutable():
    """Test that lazy list cells cannot be mutated."""
    node = LazyNode(head=lambda: 1, tail=lambda: None)
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.head = lambda: 2


def test_hand_written_lazy_list():
    """Test a lazy list written out with nested thunks."""
    a_lazy_list = lambda: LazyNode(
        head=lambda: 1,
        tail=lambda: LazyNode(
            head=lambda: 2,
            tail=lambda: LazyNode(head=lambda: 3, tail=lambda: None),
        ),
    )

    node = a_lazy_list()
    assert node.head() == 1
    assert node.tail().tail().head() == 3
    assert node.tail().tail().tail() is None


def test_empty_list_error_is_lookup_error():
    """Test the error hierarchy."""
    assert issubclass(EmptyListError, LookupError)
