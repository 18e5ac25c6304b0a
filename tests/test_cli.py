"""Tests for the cachelogstat CLI."""

from __future__ import annotations

import json
from pathlib import Path

from cachelogstat.cli import analyze, main
from cachelogstat.models.config import StatConfig
from cachelogstat.util.errors import EnvironmentResolutionError

FIXTURES = Path(__file__).parent / "fixtures"
CONFIGS = FIXTURES / "configs"
LOGS = FIXTURES / "logs"


def _no_resolve(go_command):
    raise AssertionError("cache dir resolution should not run")


def test_text_report_to_stdout(capsys, basic_log_path):
    rc = main(["--log", str(basic_log_path)], resolve=_no_resolve)
    assert rc == 0
    out = capsys.readouterr().out
    assert "cache age: 0.00 days" in out
    assert "action cache: 154 bytes, 154 reused" in out
    assert "data cache: 500 bytes, 500 reused" in out
    assert out.count("```") == 2


def test_json_report(capsys, mixed_log_path):
    rc = main(["--log", str(mixed_log_path), "--format", "json"], resolve=_no_resolve)
    assert rc == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc["track_reuse_deltas"] is False
    assert doc["caches"][0]["total_bytes"] == 462


def test_config_enables_deltas_and_json(capsys, mixed_log_path):
    rc = main(
        ["--log", str(mixed_log_path), "--config", str(CONFIGS / "deltas_json.yaml")],
        resolve=_no_resolve,
    )
    assert rc == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc["track_reuse_deltas"] is True
    assert doc["caches"][0]["reuse_delta"]["max_seconds"] == 800


def test_flags_override_config(capsys, mixed_log_path):
    rc = main(
        [
            "--log", str(mixed_log_path),
            "--config", str(CONFIGS / "deltas_json.yaml"),
            "--format", "text",
            "--no-banner",
        ],
        resolve=_no_resolve,
    )
    assert rc == 0
    out = capsys.readouterr().out
    assert out.startswith("cache age: 0.01 days\n")
    assert "reuse delta percentiles" in out


def test_cache_dir_uses_log_name(capsys, tmp_path):
    (tmp_path / "log.txt").write_text("500 get X\n", encoding="utf-8")
    rc = main(["--cache-dir", str(tmp_path), "--no-banner"], resolve=_no_resolve)
    assert rc == 0
    assert capsys.readouterr().out.count("\tno reuse\n") == 2


def test_resolves_cache_dir_by_default(capsys, tmp_path):
    (tmp_path / "log.txt").write_text("1000 put A D 500\n1010 get A\n", encoding="utf-8")
    seen = []

    def resolve(go_command):
        seen.append(go_command)
        return tmp_path

    rc = main(["--format", "json"], resolve=resolve)
    assert rc == 0
    assert seen == ["go"]
    doc = json.loads(capsys.readouterr().out)
    assert doc["caches"][1]["reused_bytes"] == 500


def test_resolution_failure_is_fatal(capsys):
    def resolve(go_command):
        raise EnvironmentResolutionError("go env GOCACHE: GOCACHE=off")

    rc = main([], resolve=resolve)
    assert rc == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "GOCACHE=off" in captured.err


def test_malformed_log_produces_no_output(capsys):
    rc = main(["--log", str(LOGS / "malformed_put.txt")], resolve=_no_resolve)
    assert rc == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid log.txt line" in captured.err


def test_malformed_log_does_not_create_out_file(tmp_path):
    out = tmp_path / "report.txt"
    rc = main(
        ["--log", str(LOGS / "malformed_put.txt"), "--out", str(out)],
        resolve=_no_resolve,
    )
    assert rc == 2
    assert not out.exists()


def test_missing_log_is_fatal(capsys, tmp_path):
    rc = main(["--log", str(tmp_path / "missing.txt")], resolve=_no_resolve)
    assert rc == 2
    assert "cannot read" in capsys.readouterr().err


def test_out_file(tmp_path, basic_log_path):
    out = tmp_path / "reports" / "report.json"
    rc = main(
        ["--log", str(basic_log_path), "--format", "json", "--pretty", "--out", str(out)],
        resolve=_no_resolve,
    )
    assert rc == 0
    doc = json.loads(out.read_text(encoding="utf-8"))
    assert doc["first_time"] == 1000


def test_analyze_respects_config(mixed_log_path):
    report = analyze(mixed_log_path, StatConfig(track_reuse_deltas=True))
    assert report.track_reuse_deltas is True
    assert report.cache("data").reuse_delta.count == 4
