"""Content-tree builders shared across test modules."""

from __future__ import annotations

import json
from pathlib import Path


def write_post(
    content_root: Path,
    category: str,
    slug: str,
    *,
    title: str | None = None,
    created: str = "2024-01-01",
    published: bool = True,
    tags: list[str] | None = None,
    description: str | None = None,
    updated: str | None = None,
    extra: str = "",
    body: str = "Body.\n",
    filename: str = "index.md",
) -> Path:
    """Write ``content_root/category/slug/filename`` with YAML front-matter.

    *created*/*updated* are written unquoted, as authors usually write them.
    *extra* is appended verbatim inside the front-matter block.
    """
    lines = [
        "---",
        f"title: {json.dumps(title or slug)}",
        f"createdAt: {created}",
    ]
    if updated is not None:
        lines.append(f"updatedAt: {updated}")
    if description is not None:
        lines.append(f"description: {json.dumps(description)}")
    if tags is not None:
        lines.append(f"tags: {json.dumps(tags)}")
    lines.append(f"published: {'true' if published else 'false'}")
    if extra:
        lines.append(extra.rstrip("\n"))
    lines.append("---")
    text = "\n".join(lines) + "\n" + body

    path = content_root / category / slug / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_raw(content_root: Path, rel_path: str, text: str) -> Path:
    """Write arbitrary text at *rel_path* under the content root."""
    path = content_root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
