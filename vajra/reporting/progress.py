r"""
Progress sinks for the benchmark engine.

    from vajra.reporting.progress import ProgressBarSink

    with ProgressBarSink(label="Benchmarking") as sink:
        engine.run(config, runner, sink)
"""

import sys
from typing import Any, TextIO

import typer

__all__ = ["NullProgressSink", "ProgressBarSink", "RecordingProgressSink"]


class NullProgressSink:
    """Discards progress events."""

    def on_progress(self, current: int, total: int) -> None:
        pass


class RecordingProgressSink:
    """Keeps every (current, total) event in order."""

    def __init__(self) -> None:
        self.events: list[tuple[int, int]] = []

    def on_progress(self, current: int, total: int) -> None:
        self.events.append((current, total))


class ProgressBarSink:
    """Renders progress events as a terminal progress bar.

    The bar is created on the first event, when the total is known, and
    finished when the sink is closed.

    Args:
        label: Text shown before the bar.
        file: Stream to draw on (defaults to stderr so stdout stays clean).
    """

    def __init__(self, *, label: str = "", file: TextIO | None = None) -> None:
        self._label = label
        self._file = file or sys.stderr
        self._bar: Any = None
        self._last = 0

    def __enter__(self) -> "ProgressBarSink":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def on_progress(self, current: int, total: int) -> None:
        if self._bar is None:
            self._bar = typer.progressbar(
                length=total,
                label=self._label,
                file=self._file,
                show_eta=True,
                show_percent=True,
                show_pos=True,
            )
            self._bar.__enter__()
        self._bar.update(current - self._last)
        self._last = current

    def close(self) -> None:
        """Finish the bar if one was drawn."""
        if self._bar is not None:
            self._bar.__exit__(None, None, None)
            self._bar = None
