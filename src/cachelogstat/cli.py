"""CLI entry point: cachelogstat.

Prints reuse-latency statistics for the go build cache, read from the
cache's append-only log.txt.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from cachelogstat.engine.parser import scan_log_bytes
from cachelogstat.engine.render import render_json, render_text
from cachelogstat.engine.report import Report, build_report
from cachelogstat.models.config import StatConfig
from cachelogstat.util.env import resolve_cache_dir
from cachelogstat.util.io import load_config_yaml, read_log_bytes


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cachelogstat",
        description="Print reuse-latency statistics for the go build cache.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--log", default=None, help="Path to a cache log file to analyse."
    )
    source.add_argument(
        "--cache-dir",
        default=None,
        help="Cache directory containing the log. Defaults to `go env GOCACHE`.",
    )
    parser.add_argument(
        "--config", default=None, help="Path to a YAML config file."
    )
    parser.add_argument(
        "--track-deltas",
        action="store_true",
        default=None,
        help="Also report time since the previous reuse of each entry.",
    )
    parser.add_argument(
        "--format", default=None, choices=["text", "json"],
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--no-banner", action="store_true",
        help="Omit the tracking-issue preface in text output.",
    )
    parser.add_argument(
        "--pretty", action="store_true", help="Pretty-print JSON output."
    )
    parser.add_argument(
        "--out", default=None, help="Write the report to this file instead of stdout."
    )
    return parser


def _effective_config(args: argparse.Namespace) -> StatConfig:
    config = load_config_yaml(args.config) if args.config else StatConfig()
    updates = {}
    if args.track_deltas is not None:
        updates["track_reuse_deltas"] = args.track_deltas
    if args.format is not None:
        updates["format"] = args.format
    if args.no_banner:
        updates["issue_banner"] = False
    if updates:
        config = config.model_copy(update=updates)
    return config


def _log_path(
    args: argparse.Namespace,
    config: StatConfig,
    resolve: Callable[[str], Path],
) -> Path:
    if args.log:
        return Path(args.log)
    if args.cache_dir:
        return Path(args.cache_dir) / config.log_name
    return resolve(config.go_command) / config.log_name


def analyze(log_path: str | Path, config: Optional[StatConfig] = None) -> Report:
    """Read, scan and summarise one cache log."""
    config = config or StatConfig()
    data = read_log_bytes(log_path)
    scan = scan_log_bytes(data, track_reuse_deltas=config.track_reuse_deltas)
    return build_report(scan)


def main(
    argv: list[str] | None = None,
    resolve: Callable[[str], Path] = resolve_cache_dir,
) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = _effective_config(args)
        report = analyze(_log_path(args, config, resolve), config)

        # Nothing is written until the whole log has been processed.
        if args.out:
            out_path = Path(args.out)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            with open(out_path, "w", encoding="utf-8") as f:
                _render(report, config, f, args.pretty)
        else:
            _render(report, config, sys.stdout, args.pretty)
        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


def _render(report: Report, config: StatConfig, out: TextIO, pretty: bool) -> None:
    if config.format == "json":
        render_json(report, out, pretty=pretty)
    else:
        render_text(report, out, issue_banner=config.issue_banner)


if __name__ == "__main__":
    sys.exit(main())
