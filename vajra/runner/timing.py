r"""
Timing utilities for benchmarks.

    from vajra.runner.timing import Timer

    timer = Timer()
    timer.start()
    run_something()
    timer.stop()
    print(f"Elapsed: {timer.elapsed_ms}ms")
"""

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

__all__ = ["Timer", "measure_iterations", "timed_section"]


class Timer:
    """Monotonic timer for a single interval.

    Reading an elapsed value while the timer runs returns the time so far
    without stopping it. Before start() every reading is zero. Call reset()
    to measure another interval with the same instance.

        with Timer("build") as t:
            do_something()
        print(f"{t.name}: {t.elapsed_ms}ms")
    """

    def __init__(self, name: str = "Timer") -> None:
        self.name = name
        self._start: int = 0
        self._end: int = 0
        self._running = False
        self._started = False

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.stop()

    def start(self) -> None:
        """Start timing."""
        self._start = time.perf_counter_ns()
        self._running = True
        self._started = True

    def stop(self) -> None:
        """Stop timing."""
        self._end = time.perf_counter_ns()
        self._running = False

    def reset(self) -> None:
        """Clear the timer so it reads zero until started again."""
        self._start = 0
        self._end = 0
        self._running = False
        self._started = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def started(self) -> bool:
        return self._started

    @property
    def elapsed_ns(self) -> int:
        """Elapsed time in nanoseconds."""
        if not self._started:
            return 0
        end = time.perf_counter_ns() if self._running else self._end
        return end - self._start

    @property
    def elapsed_us(self) -> float:
        """Elapsed time in microseconds."""
        return self.elapsed_ns / 1_000

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds."""
        return self.elapsed_ns / 1_000_000

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return self.elapsed_ns / 1_000_000_000


def measure_iterations(
    func: Callable[[], Any],
    *,
    iterations: int = 100,
    warmup: int = 10,
) -> list[float]:
    """Benchmark a Python callable.

    Args:
        func: Function to call (no arguments).
        iterations: Number of measurement iterations.
        warmup: Number of warmup iterations (not counted).

    Returns:
        List of elapsed times in seconds.
    """
    for _ in range(warmup):
        func()

    timer = Timer()
    timings = []
    for _ in range(iterations):
        timer.reset()
        timer.start()
        func()
        timer.stop()
        timings.append(timer.elapsed_seconds)

    return timings


@contextmanager
def timed_section(name: str, *, callback: Callable[[str, int], None] | None = None) -> Iterator[Timer]:
    """Context manager for timing named code sections.

    Args:
        name: Name of the section being timed.
        callback: Optional callback(name, elapsed_ns) called on exit.

    Yields:
        Timer instance.
    """
    timer = Timer(name)
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
        if callback:
            callback(name, timer.elapsed_ns)
