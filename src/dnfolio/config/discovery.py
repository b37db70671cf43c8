"""Locating and reading ``dnfolio.toml``.

The file is found by walking up from the working directory, the way git
finds ``.git/``. ``DNFOLIO_CONFIG`` pins an explicit file instead.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from dnfolio.config.models import DnfolioConfig

CONFIG_FILENAME = "dnfolio.toml"
CONFIG_ENV_VAR = "DNFOLIO_CONFIG"


def _ancestors(start: Path) -> Iterator[Path]:
    current = start.resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``dnfolio.toml`` at or above *start* (default: cwd).

    When ``DNFOLIO_CONFIG`` is set it wins, and a missing file there means
    no config at all rather than a fallback to the walk-up.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    for directory in _ancestors(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML. Raises :class:`tomllib.TOMLDecodeError`."""
    return tomllib.loads(path.read_text(encoding="utf-8"))


def load_config(path: Path | None = None, cwd: Path | None = None) -> DnfolioConfig:
    """Validate the TOML sections only, without CLI flags or env vars.

    Falls back to discovery from *cwd* when *path* is None, and to
    defaults when nothing is found.
    """
    path = path or find_config(cwd)
    if path is None:
        return DnfolioConfig()
    return DnfolioConfig.model_validate(read_toml(path))
