"""Sinks that drain bounded lazy lists into strict Python, pandas or Arrow values."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import pandas as pd
import pyarrow as pa

from .models import DrainStatistics, LazyList

logger = logging.getLogger(__name__)


class LazyListSink(ABC):
    """Abstract base class for collecting forced lazy list elements."""

    name = "abstract"

    @abstractmethod
    def start(self) -> None:
        """Prepare the sink for a new drain."""
        pass

    @abstractmethod
    def write(self, value: Any) -> None:
        """Append one forced element.

        Args:
            value: The forced head of a lazy list node
        """
        pass

    @abstractmethod
    def finish(self) -> Any:
        """Build the strict result from everything written since ``start``.

        Returns:
            The collected values in the sink's container type
        """
        pass

    def close(self) -> None:
        """Release buffered values."""
        pass


class ListSink(LazyListSink):
    """Collect elements into a Python list."""

    name = "list"

    def __init__(self):
        self._values: Optional[List[Any]] = None

    def start(self) -> None:
        if self._values is not None:
            raise RuntimeError("Sink already started. Call finish() first.")
        self._values = []

    def write(self, value: Any) -> None:
        if self._values is None:
            raise RuntimeError("Sink not started. Call start() first.")
        self._values.append(value)

    def finish(self) -> List[Any]:
        if self._values is None:
            raise RuntimeError("Sink not started. Call start() first.")
        values, self._values = self._values, None
        return values

    def close(self) -> None:
        self._values = None


class SeriesSink(ListSink):
    """Collect elements into a ``pandas.Series``."""

    name = "series"

    def __init__(self, series_name: Optional[str] = None, dtype: Optional[str] = None):
        """
        Initialize the sink.

        Args:
            series_name: Name given to the resulting Series
            dtype: Optional pandas dtype, inferred when omitted
        """
        super().__init__()
        self.series_name = series_name
        self.dtype = dtype

    def finish(self) -> pd.Series:
        values = super().finish()
        series = pd.Series(values, name=self.series_name, dtype=self.dtype)
        logger.debug(f"Built Series of {len(series):,} elements with dtype {series.dtype}")
        return series


class ArrowSink(ListSink):
    """Collect elements into a ``pyarrow.Array``."""

    name = "arrow"

    def __init__(self, arrow_type: Optional[pa.DataType] = None):
        """
        Initialize the sink.

        Args:
            arrow_type: Optional Arrow type, inferred when omitted
        """
        super().__init__()
        self.arrow_type = arrow_type

    def finish(self) -> pa.Array:
        values = super().finish()
        array = pa.array(values, type=self.arrow_type)
        logger.debug(f"Built Arrow array of {len(array):,} elements with type {array.type}")
        return array


SINK_TYPES = {
    ListSink.name: ListSink,
    SeriesSink.name: SeriesSink,
    ArrowSink.name: ArrowSink,
}


def create_sink(sink_type: str) -> LazyListSink:
    """
    Create a sink by name.

    Args:
        sink_type: One of ``list``, ``series`` or ``arrow``

    Returns:
        A fresh, unstarted sink

    Raises:
        ValueError: If the sink type is unknown
    """
    try:
        return SINK_TYPES[sink_type]()
    except KeyError:
        raise ValueError(
            f"Unknown sink type: {sink_type}. Valid options: {', '.join(SINK_TYPES)}"
        ) from None


def drain(xs: LazyList, sink: LazyListSink) -> DrainStatistics:
    """
    Force every element of ``xs`` into ``sink``.

    ``xs`` must be finite; bound infinite lists with ``take`` first.

    Args:
        xs: Lazy list to drain
        sink: Destination for the forced elements

    Returns:
        DrainStatistics with the sink's result
    """
    start_time = time.time()
    count = 0

    sink.start()
    try:
        node = xs()
        while node is not None:
            sink.write(node.head())
            count += 1
            node = node.tail()
        result = sink.finish()
    finally:
        sink.close()

    stats = DrainStatistics(
        count=count,
        elapsed_time=time.time() - start_time,
        sink_type=sink.name,
        result=result,
    )
    logger.debug(f"Drained {count:,} elements into {sink.name} sink in {stats.elapsed_time:.4f}s")
    return stats
