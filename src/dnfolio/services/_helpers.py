"""Shared service-layer helper functions."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from email.utils import format_datetime
from pathlib import Path
from typing import Any


def now_iso() -> str:
    """Current UTC time as standard ISO 8601."""
    return datetime.now(UTC).isoformat(timespec="seconds")


def rfc2822(value: datetime) -> str:
    """Format an aware datetime for RSS ``pubDate``/``lastBuildDate``."""
    return format_datetime(value)


def write_text(path: Path, text: str) -> None:
    """Write *text* to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def dump_json(payload: Any) -> str:
    """Pretty JSON with non-ASCII kept readable (Japanese titles)."""
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
