"""Percentile summaries of reuse latency.

Percentiles use nearest-below selection on the sorted samples:
index = n * numerator // denominator, no interpolation.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

SECONDS_PER_DAY = 86400


class Percentile(NamedTuple):
    label: str
    numerator: int
    denominator: int


PERCENTILES: tuple[Percentile, ...] = tuple(
    Percentile(str(p), p, 100) for p in range(10, 100, 10)
) + (
    Percentile("95", 95, 100),
    Percentile("99", 99, 100),
    Percentile("99.9", 999, 1000),
)


class PercentileValue(BaseModel):
    model_config = ConfigDict(extra="forbid")

    label: str
    seconds: int
    days: float


class LatencySummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    count: int = Field(..., ge=1)
    percentiles: List[PercentileValue]
    max_seconds: int
    max_days: float


def to_days(seconds: int) -> float:
    return seconds / SECONDS_PER_DAY


def percentile_index(n: int, numerator: int, denominator: int) -> int:
    """Index of the nearest-below percentile in a sorted list of length n."""
    if n <= 0:
        raise ValueError("percentile of an empty sample set")
    return n * numerator // denominator


def summarize_latency(samples: Sequence[int]) -> Optional[LatencySummary]:
    """Sort ``samples`` and summarise them. Returns None when there are none."""
    if not samples:
        return None
    ordered = sorted(samples)
    n = len(ordered)
    values = []
    for pct in PERCENTILES:
        v = ordered[percentile_index(n, pct.numerator, pct.denominator)]
        values.append(PercentileValue(label=pct.label, seconds=v, days=to_days(v)))
    return LatencySummary(
        count=n,
        percentiles=values,
        max_seconds=ordered[-1],
        max_days=to_days(ordered[-1]),
    )


def cache_age_days(first_time: Optional[int], last_time: Optional[int]) -> float:
    """Span of the log in days; 0.0 when the log had no events."""
    if first_time is None or last_time is None:
        return 0.0
    return to_days(last_time - first_time)
