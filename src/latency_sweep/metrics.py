"""Timing utilities for sweep measurements."""

from collections.abc import Generator
from contextlib import contextmanager
import time

NANOS_PER_MS = 1_000_000


def now_ns() -> int:
    """Monotonic wall-clock timestamp in nanoseconds."""
    return time.perf_counter_ns()


def ns_to_ms(elapsed_ns: int) -> float:
    return elapsed_ns / NANOS_PER_MS


@contextmanager
def time_execution() -> Generator[dict[str, int], None, None]:
    """Context manager for timing code execution.

    Yields a dictionary that receives an 'elapsed_ns' key on exit, even when
    the timed block raises.

    Example:
        with time_execution() as timing:
            count_capitals_iterative(text)
        elapsed = timing['elapsed_ns']
    """
    start = now_ns()
    timing = {}
    try:
        yield timing
    finally:
        timing["elapsed_ns"] = now_ns() - start
