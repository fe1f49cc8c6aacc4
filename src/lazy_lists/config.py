"""Configuration management for the lazy list walkthrough."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .sinks import SINK_TYPES

# Load environment variables from .env file
load_dotenv()


@dataclass
class AppConfig:
    """Walkthrough configuration parameters."""

    range_start: int = 100
    take_count: int = 10
    sink_type: str = "list"
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load walkthrough configuration from environment variables.

        - LAZY_RANGE_START: first number of the infinite range
        - LAZY_TAKE_COUNT: how many elements to take from it
        - LAZY_SINK_TYPE: list, series or arrow
        - LAZY_VERBOSE: true to log every forced element
        """
        return cls(
            range_start=int(os.getenv("LAZY_RANGE_START", "100")),
            take_count=int(os.getenv("LAZY_TAKE_COUNT", "10")),
            sink_type=os.getenv("LAZY_SINK_TYPE", "list"),
            verbose=os.getenv("LAZY_VERBOSE", "false").lower() == "true",
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.take_count < 0:
            raise ValueError("take_count must not be negative")
        if self.sink_type not in SINK_TYPES:
            raise ValueError(
                f"Unknown sink type: {self.sink_type}. Valid options: {', '.join(SINK_TYPES)}"
            )


def get_app_config() -> AppConfig:
    """Get walkthrough configuration."""
    return AppConfig.from_env()
