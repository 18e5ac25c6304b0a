"""Locate the build cache directory via the go toolchain."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable

from cachelogstat.util.errors import EnvironmentResolutionError

Runner = Callable[..., subprocess.CompletedProcess]


def resolve_cache_dir(
    go_command: str = "go",
    runner: Runner = subprocess.run,
) -> Path:
    """Return the directory reported by ``go env GOCACHE``.

    ``runner`` has the signature of :func:`subprocess.run` so tests can
    substitute a fake.
    """
    argv = [go_command, "env", "GOCACHE"]
    try:
        proc = runner(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except OSError as e:
        raise EnvironmentResolutionError(
            f"{go_command} env GOCACHE: {e.strerror or e}"
        ) from e

    out = proc.stdout or ""
    if proc.returncode != 0:
        raise EnvironmentResolutionError(
            f"{go_command} env GOCACHE: exit status {proc.returncode}\n{out}"
        )

    cache_dir = out.strip()
    if not cache_dir:
        raise EnvironmentResolutionError(
            f"{go_command} env GOCACHE: no output (old Go version?)"
        )
    if cache_dir == "off":
        raise EnvironmentResolutionError(f"{go_command} env GOCACHE: GOCACHE=off")
    return Path(cache_dir)
