r"""
Shared pytest fixtures for vajra tests.
"""

import sys
from collections.abc import Sequence

import pytest

from vajra.types import (
    SPAWN_FAILED,
    BenchmarkConfig,
    BenchmarkResult,
    CommandSpec,
    ExecutionMode,
    TimingStats,
)


class FakeRunner:
    """Process runner returning scripted exit codes without starting anything."""

    def __init__(self, codes: Sequence[int] | None = None, *, default: int = 0) -> None:
        self._codes = list(codes or [])
        self._default = default
        self.calls: list[tuple[list[str], bool]] = []

    def execute(self, tokens: Sequence[str], shell_mode: bool = False) -> int:
        self.calls.append((list(tokens), shell_mode))
        if self._codes:
            return self._codes.pop(0)
        return self._default


@pytest.fixture
def python_argv() -> list[str]:
    """A fast, portable command that exits zero."""
    return [sys.executable, "-c", "pass"]


@pytest.fixture
def python_command(python_argv) -> CommandSpec:
    return CommandSpec(raw=" ".join(python_argv), tokens=tuple(python_argv))


@pytest.fixture
def tiny_config() -> BenchmarkConfig:
    """Config for engine tests driven by FakeRunner."""
    return BenchmarkConfig(
        command=CommandSpec(raw="true", tokens=("true",), mode=ExecutionMode.DIRECT),
        warmup_count=0,
        iteration_count=5,
    )


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def failing_spawn_runner() -> FakeRunner:
    return FakeRunner(default=SPAWN_FAILED)


@pytest.fixture
def sample_result() -> BenchmarkResult:
    stats = TimingStats(
        mean_ms=2.0,
        median_ms=2.0,
        std_dev_ms=0.5,
        min_ms=1.0,
        max_ms=3.5,
        p95_ms=3.2,
        p99_ms=3.4,
        iterations=10,
    )
    return BenchmarkResult(
        command="ls -la",
        mean=2.0,
        std_dev=0.5,
        min=1.0,
        max=3.5,
        iteration_count=10,
        stats=stats,
    )


@pytest.fixture
def runner_factory() -> type[FakeRunner]:
    """FakeRunner class, for tests that script exit codes or subclass it."""
    return FakeRunner
