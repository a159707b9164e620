r"""
Section profiler for timing named parts of a Python program.

    from vajra.runner.profiler import Profiler

    profiler = Profiler()
    profiler.start("load")
    load()
    profiler.stop("load")
    print(profiler.summary("load").mean_ms)
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from vajra import stats
from vajra.runner.timing import Timer
from vajra.types import TimingStats
from vajra.utils.memory import MemoryInfo, get_memory_info

__all__ = ["PerfResult", "Profiler"]


@dataclass
class PerfResult:
    """Outcome of Profiler.measure.

    Attributes:
        name: Name of the measurement.
        elapsed_seconds: Wall-clock time of the call.
        memory: Memory usage right after the call.
        result: Return value of the measured function.
        custom_metrics: Free-form additional metrics.
    """

    name: str
    elapsed_seconds: float = 0.0
    memory: MemoryInfo = field(default_factory=MemoryInfo)
    result: Any = None
    custom_metrics: dict[str, float] = field(default_factory=dict)


class Profiler:
    """Collects repeated timings of named sections."""

    def __init__(self) -> None:
        self._timing_data: dict[str, list[float]] = {}
        self._active: dict[str, Timer] = {}
        self.initial_memory = get_memory_info()

    @property
    def timing_data(self) -> dict[str, list[float]]:
        """Section name to elapsed times in seconds."""
        return self._timing_data

    def start(self, section: str) -> None:
        """Start timing a section, restarting it if already active."""
        timer = Timer(section)
        self._active[section] = timer
        timer.start()

    def stop(self, section: str) -> None:
        """Stop a section and record its time. Unknown sections are ignored."""
        timer = self._active.pop(section, None)
        if timer is None:
            return
        timer.stop()
        self._timing_data.setdefault(section, []).append(timer.elapsed_seconds)

    def add_timing(self, section: str, seconds: float) -> None:
        self._timing_data.setdefault(section, []).append(seconds)

    def measure(self, name: str, func: Callable[[], Any]) -> PerfResult:
        """Time one call of func and snapshot memory afterwards."""
        with Timer(name) as timer:
            value = func()
        return PerfResult(
            name=name,
            elapsed_seconds=timer.elapsed_seconds,
            memory=get_memory_info(),
            result=value,
        )

    def summary(self, section: str) -> TimingStats:
        """Statistics for a section, in milliseconds."""
        samples = [s * 1000.0 for s in self._timing_data.get(section, [])]
        return stats.summarize(samples)

    def clear(self) -> None:
        """Drop all recorded and in-flight timings."""
        self._timing_data.clear()
        self._active.clear()
