r"""
Benchmark engine.

Runs the warmup and measured iterations of a single command strictly
one after another and reduces the timings to a BenchmarkResult.

    from vajra.config import build_config
    from vajra.runner import BenchmarkEngine, default_runner

    config = build_config("sleep 0.01", warmup=1, iterations=10)
    result = BenchmarkEngine().run(config, default_runner())
"""

import logging
from dataclasses import dataclass

from vajra import stats
from vajra.errors import SpawnError
from vajra.protocols import ProcessRunner, ProgressSink
from vajra.runner.timing import Timer
from vajra.types import (
    SPAWN_FAILED,
    BenchmarkConfig,
    BenchmarkResult,
    EngineState,
    SpawnFailurePolicy,
)

__all__ = ["BenchmarkEngine", "EngineOptions"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineOptions:
    """Engine behaviour switches.

    Attributes:
        count_warmup_in_progress: Report warmup iterations as progress, with
            warmup + measured iterations as the denominator.
        spawn_failure_policy: What to do with an iteration whose process
            could not be started.
    """

    count_warmup_in_progress: bool = False
    spawn_failure_policy: SpawnFailurePolicy = SpawnFailurePolicy.INCLUDE


class BenchmarkEngine:
    """Drives IDLE -> WARMUP -> MEASURING -> COMPLETED for one command."""

    def __init__(self, *, options: EngineOptions | None = None) -> None:
        self._options = options or EngineOptions()
        self._state = EngineState.IDLE
        self._timings: list[float] = []
        self._progress = 0

    @property
    def options(self) -> EngineOptions:
        return self._options

    @property
    def state(self) -> EngineState:
        """Current lifecycle state."""
        return self._state

    @property
    def timings(self) -> tuple[float, ...]:
        """Samples (ms) recorded by the most recent run."""
        return tuple(self._timings)

    def _transition(self, state: EngineState) -> None:
        logger.debug("Engine %s -> %s", self._state.name, state.name)
        self._state = state

    def _emit(self, sink: ProgressSink | None, total: int) -> None:
        self._progress += 1
        if sink is not None:
            sink.on_progress(self._progress, total)

    def run(
        self,
        config: BenchmarkConfig,
        process_runner: ProcessRunner,
        progress_sink: ProgressSink | None = None,
    ) -> BenchmarkResult:
        """Benchmark the configured command.

        Args:
            config: Validated configuration.
            process_runner: Starts the child processes.
            progress_sink: Receives (current, total) after every counted iteration.

        Returns:
            BenchmarkResult built from the measured timings.

        Raises:
            SpawnError: If a process fails to start under the abort policy.
        """
        command = config.command
        argv = command.argv
        shell = command.shell
        policy = self._options.spawn_failure_policy

        self._state = EngineState.IDLE
        self._timings = []
        self._progress = 0

        count_warmup = self._options.count_warmup_in_progress
        total = config.iteration_count + (config.warmup_count if count_warmup else 0)

        logger.info(
            "Benchmarking %r (%s mode): %d warmup, %d iterations",
            command.raw,
            command.mode.value,
            config.warmup_count,
            config.iteration_count,
        )

        if config.warmup_count > 0:
            self._transition(EngineState.WARMUP)
            for i in range(config.warmup_count):
                code = process_runner.execute(argv, shell)
                if code == SPAWN_FAILED:
                    logger.warning("Warmup iteration %d: failed to start process", i + 1)
                    if policy is SpawnFailurePolicy.ABORT:
                        raise SpawnError(command.raw, i + 1)
                if count_warmup:
                    self._emit(progress_sink, total)

        self._transition(EngineState.MEASURING)
        spawn_failures = 0
        nonzero_exits = 0
        timer = Timer(command.raw)

        for i in range(config.iteration_count):
            timer.reset()
            timer.start()
            code = process_runner.execute(argv, shell)
            timer.stop()

            if code == SPAWN_FAILED:
                spawn_failures += 1
                logger.warning("Iteration %d: failed to start process", i + 1)
                if policy is SpawnFailurePolicy.ABORT:
                    raise SpawnError(command.raw, i + 1)
                if policy is SpawnFailurePolicy.INCLUDE:
                    self._timings.append(timer.elapsed_ms)
            else:
                if code != 0:
                    nonzero_exits += 1
                    logger.debug("Iteration %d: exit code %d", i + 1, code)
                self._timings.append(timer.elapsed_ms)

            self._emit(progress_sink, total)

        self._transition(EngineState.COMPLETED)

        timing_stats = stats.summarize(self._timings)
        result = BenchmarkResult(
            command=command.raw,
            mean=timing_stats.mean_ms,
            std_dev=timing_stats.std_dev_ms,
            min=timing_stats.min_ms,
            max=timing_stats.max_ms,
            iteration_count=config.iteration_count,
            stats=timing_stats,
            spawn_failures=spawn_failures,
            nonzero_exits=nonzero_exits,
        )

        logger.info(
            "Completed %r: mean=%.3fms std=%.3fms (%d samples, %d non-zero exits, %d spawn failures)",
            command.raw,
            result.mean,
            result.std_dev,
            len(self._timings),
            nonzero_exits,
            spawn_failures,
        )
        return result
