"""Utility modules for vajra."""

from vajra.utils.memory import (
    MemoryInfo,
    format_memory,
    get_children_peak_rss_kb,
    get_memory_info,
    get_process_memory,
)

__all__ = [
    "MemoryInfo",
    "format_memory",
    "get_children_peak_rss_kb",
    "get_memory_info",
    "get_process_memory",
]
