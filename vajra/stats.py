r"""
Descriptive statistics over timing series.

All functions are pure and never mutate their input; functions that
need sorted order work on a private copy.

    from vajra.stats import mean, percentile, summarize

    stats = summarize([1.2, 1.4, 1.1, 1.3])
    print(f"p95: {stats.p95_ms:.3f} ms")
"""

import math
from collections.abc import Sequence

from vajra.types import TimingStats

__all__ = [
    "mean",
    "variance",
    "stddev",
    "median",
    "percentile",
    "minimum",
    "maximum",
    "value_range",
    "total",
    "summarize",
]


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return math.fsum(values) / len(values)


def variance(values: Sequence[float]) -> float:
    """Population variance (divides by N), 0.0 for fewer than two values."""
    if len(values) < 2:
        return 0.0
    avg = mean(values)
    return math.fsum((v - avg) ** 2 for v in values) / len(values)


def stddev(values: Sequence[float]) -> float:
    """Population standard deviation."""
    return math.sqrt(variance(values))


def median(values: Sequence[float]) -> float:
    """Median, averaging the two middle values for even lengths."""
    if not values:
        return 0.0

    ordered = sorted(values)
    n = len(ordered)
    mid = n // 2

    if n % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) * 0.5
    return float(ordered[mid])


def percentile(values: Sequence[float], p: float) -> float:
    """Linearly interpolated percentile.

    Args:
        values: Samples.
        p: Percentile in [0, 100]; values outside are clamped.

    Returns:
        Interpolated value at fractional index p/100 * (N - 1).
    """
    if not values:
        return 0.0

    p = min(max(p, 0.0), 100.0)
    ordered = sorted(values)

    index = (p / 100.0) * (len(ordered) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)

    if lower == upper:
        return float(ordered[lower])

    weight = index - lower
    return ordered[lower] * (1.0 - weight) + ordered[upper] * weight


def minimum(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return min(values)


def maximum(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return max(values)


def value_range(values: Sequence[float]) -> float:
    """Spread between slowest and fastest sample."""
    if not values:
        return 0.0
    return max(values) - min(values)


def total(values: Sequence[float]) -> float:
    return math.fsum(values)


def summarize(values: Sequence[float]) -> TimingStats:
    """Compute the full statistics record for a series in milliseconds."""
    return TimingStats(
        mean_ms=mean(values),
        median_ms=median(values),
        std_dev_ms=stddev(values),
        min_ms=minimum(values),
        max_ms=maximum(values),
        p95_ms=percentile(values, 95.0),
        p99_ms=percentile(values, 99.0),
        iterations=len(values),
    )
