r"""
Output formats for benchmark results.

    from vajra.reporting.formats import JsonFormatter, TextFormatter

    print(TextFormatter().to_string(result))
    JsonFormatter().export(result, "result.json")
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from vajra.types import BenchmarkResult, OutputFormat

__all__ = ["BaseFormatter", "JsonFormatter", "Style", "TextFormatter", "get_formatter", "result_to_dict"]


@dataclass(frozen=True)
class Style:
    """Colors used by the text formatter, by role.

    Attributes:
        enabled: Emit ANSI styling at all.
        header: Color of the "Benchmark:" label.
        mean: Color of the mean figure.
        std_dev: Color of the standard deviation figure.
        min: Color of the fastest time.
        max: Color of the slowest time.
        rate: Color of the throughput figure.
    """

    enabled: bool = True
    header: str = "bright_white"
    mean: str = "bright_green"
    std_dev: str = "bright_magenta"
    min: str = "bright_blue"
    max: str = "bright_red"
    rate: str = "bright_yellow"

    @classmethod
    def plain(cls) -> "Style":
        """Style without any ANSI codes."""
        return cls(enabled=False)

    def paint(self, text: str, color: str | None = None, *, bold: bool = False, dim: bool = False) -> str:
        if not self.enabled:
            return text
        return typer.style(text, fg=color, bold=bold or None, dim=dim or None)


def result_to_dict(result: BenchmarkResult) -> dict[str, Any]:
    """Convert a result to the JSON document schema."""
    return {
        "command": result.command,
        "mean_ms": round(result.mean, 3),
        "std_dev_ms": round(result.std_dev, 3),
        "min_ms": round(result.min, 3),
        "max_ms": round(result.max, 3),
        "ops_per_sec": round(result.ops_per_second),
        "iterations": result.iteration_count,
    }


class BaseFormatter(ABC):
    """Base class for result formatters."""

    def export(self, result: BenchmarkResult, path: str | Path) -> None:
        """Write the rendered result to a file."""
        Path(path).write_text(self.to_string(result), encoding="utf-8")

    @abstractmethod
    def to_string(self, result: BenchmarkResult) -> str:
        """Render the result."""
        ...


class JsonFormatter(BaseFormatter):
    """Render a result as a JSON document."""

    def __init__(self, *, indent: int = 2) -> None:
        self._indent = indent

    def to_string(self, result: BenchmarkResult) -> str:
        return json.dumps(result_to_dict(result), indent=self._indent, ensure_ascii=False) + "\n"


class TextFormatter(BaseFormatter):
    """Render a result as a short human-readable summary."""

    def __init__(self, *, style: Style | None = None) -> None:
        self._style = style or Style()

    @property
    def style(self) -> Style:
        return self._style

    def to_string(self, result: BenchmarkResult) -> str:
        s = self._style
        lines: list[str] = []

        lines.append("")
        lines.append(f"{s.paint('Benchmark:', s.header, bold=True)} {result.command}")
        lines.append(
            f"  {s.paint(f'μ={result.mean:.3f} ms', s.mean)}{s.paint(' (mean)', dim=True)}   "
            f"{s.paint(f'σ={result.std_dev:.3f} ms', s.std_dev)}{s.paint(' (std)', dim=True)}"
        )
        lines.append(
            f"  {s.paint(f'↓ {result.min:.3f} ms', s.min)}{s.paint(' (min)', dim=True)}   "
            f"{s.paint(f'↑ {result.max:.3f} ms', s.max)}{s.paint(' (max)', dim=True)}"
        )
        lines.append(
            f"  {s.paint(f'λ={result.ops_per_second:.0f} ops/s', s.rate)}{s.paint(' (rate)', dim=True)}    "
            f"{s.paint(f'({result.iteration_count} iters)', dim=True)}"
        )

        if result.nonzero_exits:
            lines.append(s.paint(f"  {result.nonzero_exits} iteration(s) exited non-zero", dim=True))
        if result.spawn_failures:
            lines.append(s.paint(f"  {result.spawn_failures} iteration(s) failed to start", s.max))

        lines.append("")
        return "\n".join(lines) + "\n"


def get_formatter(output_format: OutputFormat, *, style: Style | None = None) -> BaseFormatter:
    """Formatter for an output format."""
    if output_format is OutputFormat.JSON:
        return JsonFormatter()
    return TextFormatter(style=style)
