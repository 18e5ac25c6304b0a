"""Log parser: cache event lines -> entry registry, totals, latency samples.

Line format (whitespace separated)::

    <time> put  <actionKey> <dataKey> <size>
    <time> get  <actionKey>
    <time> miss <actionKey>

Blank lines are skipped and unknown kinds are ignored. Any other
deviation is fatal: the scan raises MalformedLogError and no result is
produced.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from cachelogstat.engine.registry import EntryRegistry
from cachelogstat.models.entry import Entry
from cachelogstat.models.event import EventKind, LogEvent
from cachelogstat.models.scan import ScanResult
from cachelogstat.util.errors import MalformedLogError

_INT_RE = re.compile(r"[+-]?[0-9]+\Z")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

REUSE_KINDS: tuple[EventKind, ...] = ("get", "miss")


def _parse_int64(token: str) -> Optional[int]:
    """Parse a base-10 int64, or return None."""
    if not _INT_RE.match(token):
        return None
    value = int(token)
    if value < _INT64_MIN or value > _INT64_MAX:
        return None
    return value


def parse_line(line: str, line_no: int = 0) -> Optional[LogEvent]:
    """Parse one log line. Returns None for a blank line."""
    fields = line.split()
    if not fields:
        return None
    if len(fields) < 3 or (fields[1] == "put" and len(fields) != 5):
        raise MalformedLogError(line_no, line, "line")

    t = _parse_int64(fields[0])
    if t is None:
        raise MalformedLogError(line_no, line, "time")

    if fields[1] == "put":
        size = _parse_int64(fields[4])
        if size is None:
            raise MalformedLogError(line_no, line, "size")
        return LogEvent(
            line_no=line_no,
            time=t,
            kind="put",
            action_key=fields[2],
            data_key=fields[3],
            size=size,
        )

    return LogEvent(line_no=line_no, time=t, kind=fields[1], action_key=fields[2])


class LogScanner:
    """Single-pass accumulator over cache log lines."""

    def __init__(self, track_reuse_deltas: bool = False) -> None:
        self.track_reuse_deltas = track_reuse_deltas
        self._registry = EntryRegistry()

        self.total_action_bytes = 0
        self.total_reused_action_bytes = 0
        self.total_data_bytes = 0
        self.total_reused_data_bytes = 0

        self.action_reuse: List[int] = []
        self.data_reuse: List[int] = []
        self.action_reuse_deltas: List[int] = []
        self.data_reuse_deltas: List[int] = []

        self.first_time: Optional[int] = None
        self.last_time: Optional[int] = None
        self.lines = 0
        self.events = 0

    @property
    def registry(self) -> EntryRegistry:
        return self._registry

    def feed(self, line: str, line_no: int = 0) -> None:
        """Process a single raw line."""
        self.lines += 1
        event = parse_line(line, line_no)
        if event is None:
            return
        self.apply(event)

    def feed_lines(self, lines: Iterable[str]) -> None:
        for line_no, line in enumerate(lines, start=1):
            self.feed(line, line_no)

    def apply(self, event: LogEvent) -> None:
        """Apply one parsed event to the registry and accumulators."""
        self.events += 1
        if self.first_time is None:
            self.first_time = event.time
        self.last_time = event.time

        if event.kind == "put":
            self._put(event)
        elif event.kind in REUSE_KINDS:
            self._reuse(event)

    def _put(self, event: LogEvent) -> None:
        assert event.data_key is not None and event.size is not None
        data, created = self._registry.put_data(event.data_key, event.time, event.size)
        if created:
            self.total_data_bytes += data.size

        action, created = self._registry.put_action(
            event.action_key, event.time, event.data_key
        )
        if created:
            self.total_action_bytes += action.size

    def _reuse(self, event: LogEvent) -> None:
        action = self._registry.action(event.action_key)
        if action is None:
            return
        data = self._registry.data_for(action)
        t = event.time

        if not action.reused:
            action.reused = True
            self.total_reused_action_bytes += action.size
        if not data.reused:
            data.reused = True
            self.total_reused_data_bytes += data.size

        self.action_reuse.append(t - action.created)
        self.data_reuse.append(t - data.created)

        if self.track_reuse_deltas:
            self.action_reuse_deltas.append(_since_last_reuse(action, t))
            self.data_reuse_deltas.append(_since_last_reuse(data, t))
            action.last_reused = t
            data.last_reused = t

    def result(self) -> ScanResult:
        return ScanResult(
            total_action_bytes=self.total_action_bytes,
            total_reused_action_bytes=self.total_reused_action_bytes,
            total_data_bytes=self.total_data_bytes,
            total_reused_data_bytes=self.total_reused_data_bytes,
            action_reuse=list(self.action_reuse),
            data_reuse=list(self.data_reuse),
            action_reuse_deltas=list(self.action_reuse_deltas),
            data_reuse_deltas=list(self.data_reuse_deltas),
            first_time=self.first_time,
            last_time=self.last_time,
            lines=self.lines,
            events=self.events,
            entries=len(self._registry),
            track_reuse_deltas=self.track_reuse_deltas,
        )


def _since_last_reuse(entry: Entry, t: int) -> int:
    last = entry.last_reused if entry.last_reused is not None else entry.created
    return t - last


def scan_lines(
    lines: Iterable[str], track_reuse_deltas: bool = False
) -> ScanResult:
    """Scan an iterable of log lines and return the accumulated result."""
    scanner = LogScanner(track_reuse_deltas=track_reuse_deltas)
    scanner.feed_lines(lines)
    return scanner.result()


def scan_log_bytes(data: bytes, track_reuse_deltas: bool = False) -> ScanResult:
    """Scan raw log file content.

    Keys are decoded with surrogateescape so distinct byte strings stay
    distinct even when the log is not valid UTF-8.
    """
    text = data.decode("utf-8", errors="surrogateescape")
    return scan_lines(text.split("\n"), track_reuse_deltas=track_reuse_deltas)
