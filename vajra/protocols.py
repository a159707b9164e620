r"""
Protocol definitions for the benchmark engine's collaborators.

The engine only talks to a process runner and a progress sink through
these protocols, so tests and alternative front ends can supply their own.

    from vajra.protocols import ProcessRunner, ProgressSink

    class PrintSink:
        def on_progress(self, current: int, total: int) -> None:
            print(f"{current}/{total}")
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from vajra.types import BenchmarkResult

__all__ = ["ProcessRunner", "ProgressSink", "ResultFormatter"]


@runtime_checkable
class ProcessRunner(Protocol):
    """Starts one child process per call and waits for it."""

    def execute(self, tokens: Sequence[str], shell_mode: bool = False) -> int:
        """Run the command and return its exit code.

        Returns -1 if the process could not be started. In shell mode the
        tokens are joined and handed to the system shell.
        """
        ...


@runtime_checkable
class ProgressSink(Protocol):
    """Receives progress events from the engine."""

    def on_progress(self, current: int, total: int) -> None:
        """Called with strictly increasing current, ending at total."""
        ...


@runtime_checkable
class ResultFormatter(Protocol):
    """Renders a finished benchmark result."""

    def to_string(self, result: BenchmarkResult) -> str:
        """Render the result."""
        ...
