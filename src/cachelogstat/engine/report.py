"""Assemble a Report from a completed log scan."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from cachelogstat.engine.stats import LatencySummary, cache_age_days, summarize_latency
from cachelogstat.models.scan import ScanResult
from cachelogstat.version import __version__

CacheName = Literal["action", "data"]


class CacheSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: CacheName
    total_bytes: int
    reused_bytes: int
    reuse: Optional[LatencySummary] = None  # None means no reuse
    reuse_delta: Optional[LatencySummary] = None


class Report(BaseModel):
    model_config = ConfigDict(extra="forbid")

    engine_version: str
    cache_age_days: float
    first_time: Optional[int] = None
    last_time: Optional[int] = None
    events: int = Field(default=0, ge=0)
    entries: int = Field(default=0, ge=0)
    track_reuse_deltas: bool = Field(default=False)
    caches: List[CacheSummary]

    def cache(self, name: CacheName) -> CacheSummary:
        for c in self.caches:
            if c.name == name:
                return c
        raise KeyError(name)


def build_report(
    scan: ScanResult, engine_version: Optional[str] = None
) -> Report:
    """Sort the scan's samples and derive percentile summaries per cache role."""
    deltas = scan.track_reuse_deltas
    caches = [
        CacheSummary(
            name="action",
            total_bytes=scan.total_action_bytes,
            reused_bytes=scan.total_reused_action_bytes,
            reuse=summarize_latency(scan.action_reuse),
            reuse_delta=summarize_latency(scan.action_reuse_deltas) if deltas else None,
        ),
        CacheSummary(
            name="data",
            total_bytes=scan.total_data_bytes,
            reused_bytes=scan.total_reused_data_bytes,
            reuse=summarize_latency(scan.data_reuse),
            reuse_delta=summarize_latency(scan.data_reuse_deltas) if deltas else None,
        ),
    ]
    return Report(
        engine_version=engine_version or __version__,
        cache_age_days=cache_age_days(scan.first_time, scan.last_time),
        first_time=scan.first_time,
        last_time=scan.last_time,
        events=scan.events,
        entries=scan.entries,
        track_reuse_deltas=deltas,
        caches=caches,
    )
