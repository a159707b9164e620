r"""
Result rendering and progress display.

Formats benchmark results as text or JSON and renders
the engine's progress events.

    from vajra.reporting import TextFormatter, Style

    print(TextFormatter(style=Style.plain()).to_string(result))
"""

from vajra.reporting.formats import BaseFormatter, JsonFormatter, Style, TextFormatter, get_formatter, result_to_dict
from vajra.reporting.progress import NullProgressSink, ProgressBarSink, RecordingProgressSink

__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "NullProgressSink",
    "ProgressBarSink",
    "RecordingProgressSink",
    "Style",
    "TextFormatter",
    "get_formatter",
    "result_to_dict",
]
