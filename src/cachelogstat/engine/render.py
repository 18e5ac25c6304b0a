"""Text and JSON renderers for a Report.

Both write to an explicit stream; nothing here touches sys.stdout.
"""

from __future__ import annotations

import json
from typing import Optional, TextIO

from cachelogstat.engine.report import CacheSummary, Report
from cachelogstat.engine.stats import LatencySummary

ISSUE_URL = "https://golang.org/issue/22990"


def _write_latency(out: TextIO, title: str, summary: Optional[LatencySummary]) -> None:
    if summary is None:
        out.write("\tno reuse\n")
        return
    out.write(f"\t{title}\n")
    for pv in summary.percentiles:
        out.write(f"\t{pv.label}% {pv.days:.2f} days\n")
    out.write(f"\tmax {summary.max_days:.2f} days\n")


def _write_cache(out: TextIO, cache: CacheSummary, track_reuse_deltas: bool) -> None:
    out.write(
        f"{cache.name} cache: {cache.total_bytes} bytes, {cache.reused_bytes} reused\n"
    )
    _write_latency(out, "reuse time percentiles", cache.reuse)
    if track_reuse_deltas and cache.reuse is not None:
        _write_latency(out, "reuse delta percentiles", cache.reuse_delta)


def render_text(report: Report, out: TextIO, issue_banner: bool = True) -> None:
    """Write the human-readable report."""
    if issue_banner:
        out.write(
            "Please add the following output (including the quotes) "
            f"to {ISSUE_URL}\n\n"
        )
        out.write("```\n")

    out.write(f"cache age: {report.cache_age_days:.2f} days\n")
    for cache in report.caches:
        _write_cache(out, cache, report.track_reuse_deltas)

    if issue_banner:
        out.write("```\n")


def render_json(report: Report, out: TextIO, pretty: bool = False) -> None:
    """Write the report as a single JSON document."""
    indent = 2 if pretty else None
    out.write(json.dumps(report.model_dump(mode="json"), indent=indent, sort_keys=True))
    out.write("\n")
