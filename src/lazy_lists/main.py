"""Main entry point for the lazy evaluation walkthrough."""

import logging
import sys

from .config import get_app_config
from .core import (
    bottom,
    lazy_first,
    lazy_range,
    lazy_sum,
    tail,
    take,
    to_lazy_list,
    to_list,
)
from .core import head as force_head
from .models import DrainStatistics
from .sinks import create_sink, drain
from .utils import ForceCounter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def print_summary(start: int, count: int, stats: DrainStatistics, forces: dict):
    """Print summary of the range/take exercise.

    Args:
        start: First number of the range
        count: Number of elements taken
        stats: Statistics from draining the taken list
        forces: Counters from the ForceCounter wrapped around the range
    """
    print("\n" + "=" * 80)
    print("EXERCISE SUMMARY")
    print("=" * 80)

    print(f"\ntake({count}, lazy_range({start})):")
    print(f"  Result ({stats.sink_type}): {stats.result}")
    print(f"  Elements drained: {stats.count:,}")
    print(f"  Time taken: {stats.elapsed_time:.4f} seconds")

    print("\nForcing:")
    print(f"  Range nodes forced: {forces['node_forces']:,}")
    print(f"  Range elements forced: {forces['head_forces']:,}")
    print("  The infinite range was never forced past the elements taken.")

    print("\n" + "=" * 80)


def run_lesson():
    """Walk through lazy arguments and lazy lists, printing each step."""
    logger.info("-" * 80)
    logger.info("STEP 1: Lazy arguments")
    logger.info("-" * 80)

    result = lazy_sum(lazy_sum(lambda: 1, lambda: 2), lazy_sum(lambda: 3, lambda: 4))
    print("total", result())

    # The second argument would never return if it were forced
    y = lazy_first(lambda: 10, lambda: bottom())
    print(y())

    logger.info("-" * 80)
    logger.info("STEP 2: Lazy lists")
    logger.info("-" * 80)

    a_lazy_list = to_lazy_list([1, 2, 3])
    print("first element:", force_head(a_lazy_list))
    print("second element:", force_head(tail(a_lazy_list)))
    print("third element:", force_head(tail(tail(a_lazy_list))))
    print(to_list(a_lazy_list))


def main():
    """Main execution function."""
    logger.info("Starting lazy evaluation walkthrough")
    logger.info("=" * 80)

    try:
        app_config = get_app_config()
        setup_logging(app_config.verbose)

        logger.info(f"Range start: {app_config.range_start}")
        logger.info(f"Take count: {app_config.take_count}")
        logger.info(f"Sink type: {app_config.sink_type}")

        run_lesson()

        logger.info("-" * 80)
        logger.info("STEP 3: take from an infinite range")
        logger.info("-" * 80)

        counter = ForceCounter(logger)
        numbers = counter.lazy_list(lazy_range(app_config.range_start))
        stats = drain(take(app_config.take_count, numbers), create_sink(app_config.sink_type))

        print_summary(app_config.range_start, app_config.take_count, stats, counter.summary())

        logger.info("Walkthrough completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
