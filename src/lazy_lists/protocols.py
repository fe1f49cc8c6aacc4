"""Protocol definitions for dependency inversion."""

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Anything that can take debug and info messages, e.g. a ``logging.Logger``."""

    def info(self, message: str) -> None:
        ...

    def debug(self, message: str) -> None:
        ...


class SupportsAdd(Protocol):
    """Values that can be summed by ``lazy_sum``."""

    def __add__(self, other: Any) -> Any:
        ...
