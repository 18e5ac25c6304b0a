"""Log reading and strict YAML config loading with Pydantic validation."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from cachelogstat.models.config import StatConfig
from cachelogstat.util.errors import ConfigLoadError, LogReadError


def read_log_bytes(path: str | Path) -> bytes:
    """Return the full content of the cache log at ``path``."""
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise LogReadError(f"cannot read {path}: {e.strerror or e}") from e


def load_config_yaml(path: str | Path) -> StatConfig:
    """Load and validate a StatConfig from a YAML file.

    An empty file yields the default config.
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigLoadError(f"cannot read {path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"invalid YAML in {path}: {e}") from e
    if raw is None:
        return StatConfig()
    if not isinstance(raw, dict):
        raise ConfigLoadError("Config YAML must parse to a mapping at top level.")
    try:
        return StatConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigLoadError(f"Config validation failed: {e}") from e
