"""Shared fixtures for all tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from cachelogstat.engine.parser import scan_log_bytes

FIXTURES = Path(__file__).parent / "fixtures"
LOGS = FIXTURES / "logs"
CONFIGS = FIXTURES / "configs"


def _scan_fixture(name: str, track_reuse_deltas: bool = False):
    return scan_log_bytes(
        (LOGS / name).read_bytes(), track_reuse_deltas=track_reuse_deltas
    )


@pytest.fixture
def basic_log_path():
    return LOGS / "basic.txt"


@pytest.fixture
def mixed_log_path():
    return LOGS / "mixed.txt"


@pytest.fixture
def basic_scan():
    return _scan_fixture("basic.txt")


@pytest.fixture
def orphan_scan():
    return _scan_fixture("orphan_get.txt")


@pytest.fixture
def mixed_scan():
    return _scan_fixture("mixed.txt")


@pytest.fixture
def mixed_scan_deltas():
    return _scan_fixture("mixed.txt", track_reuse_deltas=True)


@pytest.fixture
def empty_scan():
    return _scan_fixture("empty.txt")
