r"""
vajra: benchmark shell commands.

Runs a command repeatedly, times each run and reports the mean,
standard deviation, min, max and throughput.

    from vajra import build_config
    from vajra.runner import BenchmarkEngine, default_runner

    config = build_config("sleep 0.01", warmup=2, iterations=20)
    result = BenchmarkEngine().run(config, default_runner())
    print(f"{result.mean:.3f} ms")
"""

import logging

from vajra.command import build_command, parse_command
from vajra.config import DEFAULT_ITERATIONS, DEFAULT_WARMUP, build_config
from vajra.errors import ConfigurationError, ParseError, SpawnError, VajraError
from vajra.types import (
    SPAWN_FAILED,
    BenchmarkConfig,
    BenchmarkResult,
    CommandSpec,
    ExecutionMode,
    OutputFormat,
    SpawnFailurePolicy,
    TimingStats,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "CommandSpec",
    "ConfigurationError",
    "DEFAULT_ITERATIONS",
    "DEFAULT_WARMUP",
    "ExecutionMode",
    "OutputFormat",
    "ParseError",
    "SPAWN_FAILED",
    "SpawnError",
    "SpawnFailurePolicy",
    "TimingStats",
    "VajraError",
    "build_command",
    "build_config",
    "parse_command",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
