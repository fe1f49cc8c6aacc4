"""Lazy Lists - lazy evaluation with thunks and infinite lazy lists."""

__version__ = "0.1.0"

from .core import (
    bottom,
    first,
    from_iterable,
    head,
    iterate,
    lazy_first,
    lazy_range,
    lazy_sum,
    memoize,
    tail,
    take,
    to_lazy_list,
    to_list,
)
from .models import DrainStatistics, EmptyListError, LazyList, LazyNode, StrictNode, Thunk
from .sinks import ArrowSink, LazyListSink, ListSink, SeriesSink, create_sink, drain
from .utils import ForceCounter

__all__ = [
    # Models
    "Thunk",
    "LazyList",
    "LazyNode",
    "StrictNode",
    "DrainStatistics",
    "EmptyListError",
    # Lazy arguments
    "lazy_sum",
    "first",
    "lazy_first",
    "bottom",
    "memoize",
    # Lazy lists
    "lazy_range",
    "take",
    "head",
    "tail",
    "iterate",
    "to_lazy_list",
    "from_iterable",
    "to_list",
    # Sinks
    "LazyListSink",
    "ListSink",
    "SeriesSink",
    "ArrowSink",
    "create_sink",
    "drain",
    # Utils
    "ForceCounter",
]
