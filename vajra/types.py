r"""
Core types for command benchmarks.

    from vajra.types import BenchmarkConfig, BenchmarkResult, ExecutionMode

    result = engine.run(config, runner)
    print(f"Throughput: {result.ops_per_second:.0f} ops/s")
"""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto

__all__ = [
    "SPAWN_FAILED",
    "TIMED_OUT",
    "ExecutionMode",
    "OutputFormat",
    "SpawnFailurePolicy",
    "EngineState",
    "CommandSpec",
    "BenchmarkConfig",
    "TimingStats",
    "BenchmarkResult",
]

# Exit outcome sentinels. Signal deaths are reported as 128 + signum so
# neither value collides with a real child exit.
SPAWN_FAILED = -1
TIMED_OUT = 124


class ExecutionMode(str, Enum):
    """How the benchmarked command is started."""

    DIRECT = "direct"
    SHELL = "shell"


class OutputFormat(str, Enum):
    """Result rendering format."""

    TEXT = "text"
    JSON = "json"


class SpawnFailurePolicy(str, Enum):
    """What the engine does with an iteration whose process never started."""

    INCLUDE = "include"
    EXCLUDE = "exclude"
    ABORT = "abort"


class EngineState(IntEnum):
    """Benchmark engine lifecycle."""

    IDLE = auto()
    WARMUP = auto()
    MEASURING = auto()
    COMPLETED = auto()


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """A validated command to benchmark.

    Attributes:
        raw: The command exactly as given by the user.
        tokens: Argument vector (direct mode) or informative split (shell mode).
        mode: Execution mode.
    """

    raw: str
    tokens: tuple[str, ...]
    mode: ExecutionMode = ExecutionMode.DIRECT

    @property
    def shell(self) -> bool:
        """True if the command is handed to the system shell."""
        return self.mode is ExecutionMode.SHELL

    @property
    def argv(self) -> list[str]:
        """Arguments passed to the process runner."""
        if self.shell:
            return [self.raw]
        return list(self.tokens)


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """Validated benchmark configuration.

    Attributes:
        command: Command to benchmark.
        warmup_count: Unmeasured iterations before measurement.
        iteration_count: Measured iterations.
        output_format: How the result is rendered.
    """

    command: CommandSpec
    warmup_count: int = 5
    iteration_count: int = 100
    output_format: OutputFormat = OutputFormat.TEXT

    @property
    def execution_mode(self) -> ExecutionMode:
        return self.command.mode


@dataclass(frozen=True, slots=True)
class TimingStats:
    """Descriptive statistics over a timing series, in milliseconds.

    Attributes:
        mean_ms: Arithmetic mean.
        median_ms: Median.
        std_dev_ms: Population standard deviation.
        min_ms: Fastest sample.
        max_ms: Slowest sample.
        p95_ms: 95th percentile.
        p99_ms: 99th percentile.
        iterations: Number of samples.
    """

    mean_ms: float
    median_ms: float
    std_dev_ms: float
    min_ms: float
    max_ms: float
    p95_ms: float
    p99_ms: float
    iterations: int

    @property
    def ops_per_second(self) -> float:
        """Operations per second based on mean time."""
        if self.mean_ms == 0:
            return 0.0
        return 1000.0 / self.mean_ms


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    """Result from a benchmark run.

    Attributes:
        command: Raw command string that was benchmarked.
        mean: Mean duration in milliseconds.
        std_dev: Population standard deviation in milliseconds.
        min: Fastest iteration in milliseconds.
        max: Slowest iteration in milliseconds.
        iteration_count: Number of measured iterations.
        stats: Full statistics including median and percentiles.
        spawn_failures: Iterations whose process could not be started.
        nonzero_exits: Iterations where the command exited non-zero.
    """

    command: str
    mean: float
    std_dev: float
    min: float
    max: float
    iteration_count: int
    stats: TimingStats | None = None
    spawn_failures: int = 0
    nonzero_exits: int = 0

    @property
    def ops_per_second(self) -> float:
        """Invocations per second based on mean time."""
        if self.mean == 0:
            return 0.0
        return 1000.0 / self.mean

    @property
    def ok(self) -> bool:
        """True if every iteration started and exited zero."""
        return self.spawn_failures == 0 and self.nonzero_exits == 0
