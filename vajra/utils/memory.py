"""Memory measurement utilities.

Reports resident set size for the current process (via psutil) and the
peak resident set size of the process or of its reaped children.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

import psutil

__all__ = [
    "MemoryInfo",
    "format_memory",
    "get_memory_info",
    "get_process_memory",
    "get_children_peak_rss_kb",
]


@dataclass(frozen=True, slots=True)
class MemoryInfo:
    """Memory usage snapshot.

    Attributes:
        peak_rss_kb: Peak resident set size in kilobytes.
        current_rss_kb: Current resident set size in kilobytes.
    """

    peak_rss_kb: int = 0
    current_rss_kb: int = 0


def get_process_memory() -> int:
    """Get current process RSS memory in bytes."""
    return psutil.Process(os.getpid()).memory_info().rss


def _ru_maxrss_kb(who: int) -> int:
    import resource

    peak = resource.getrusage(who).ru_maxrss
    # macOS reports bytes, Linux reports kilobytes
    if sys.platform == "darwin":
        return peak // 1024
    return peak


def get_memory_info() -> MemoryInfo:
    """Get peak and current RSS of this process in kilobytes."""
    info = psutil.Process(os.getpid()).memory_info()
    current_kb = info.rss // 1024

    if os.name == "nt":
        peak_kb = getattr(info, "peak_wset", info.rss) // 1024
    else:
        import resource

        peak_kb = _ru_maxrss_kb(resource.RUSAGE_SELF)

    return MemoryInfo(peak_rss_kb=max(peak_kb, current_kb), current_rss_kb=current_kb)


def get_children_peak_rss_kb() -> int:
    """Peak RSS in kilobytes of the largest child process reaped so far.

    Returns 0 on platforms without getrusage.
    """
    if os.name == "nt":
        return 0

    import resource

    return _ru_maxrss_kb(resource.RUSAGE_CHILDREN)


def format_memory(kb: int | float) -> str:
    """Format a kilobyte count as a human-readable string.

    Args:
        kb: Memory size in kilobytes.

    Returns:
        "512 KB", "1.50 MB" or "2.00 GB".
    """
    if kb < 1024:
        return f"{int(kb)} KB"
    if kb < 1024 * 1024:
        return f"{kb / 1024:.2f} MB"
    return f"{kb / (1024 * 1024):.2f} GB"
