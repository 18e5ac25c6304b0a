"""Typed exceptions for the cache log statistics pipeline."""

from __future__ import annotations


class EnvironmentResolutionError(Exception):
    """Raised when the cache directory cannot be determined or caching is off."""


class LogReadError(Exception):
    """Raised when the cache log file cannot be read."""


class ConfigLoadError(Exception):
    """Raised when a config file cannot be loaded or validated."""


class MalformedLogError(Exception):
    """Raised on the first log line that violates the record format."""

    def __init__(self, line_no: int, line: str, reason: str) -> None:
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"invalid log.txt {reason} (line {line_no}): {line}")
