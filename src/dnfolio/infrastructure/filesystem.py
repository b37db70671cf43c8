"""Filesystem operations for post discovery.

INVARIANT: Files are truth. Nothing here writes to the content root;
every listing is derived from a fresh scan.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from dnfolio.domain.frontmatter import parse_frontmatter

# Directories to skip when discovering content files.
_SKIP_DIRS = frozenset({".git", ".dnfolio", "node_modules"})


def read_content_file(path: Path) -> tuple[dict[str, Any], str]:
    """Read a markdown file, returning ``(frontmatter, body)``."""
    content = path.read_text(encoding="utf-8")
    return parse_frontmatter(content)


def find_content_files(content_root: Path, pattern: str = "**/*.md") -> list[Path]:
    """Discover content files under *content_root* matching *pattern*.

    Skips ``.git/``, ``.dnfolio/`` and ``node_modules/``. Returns paths
    sorted so scans are deterministic. A missing root yields an empty list.
    """
    if not content_root.is_dir():
        return []

    results: list[Path] = []
    for path in content_root.glob(pattern):
        if not path.is_file():
            continue
        rel_parts = path.relative_to(content_root).parts
        if any(part in _SKIP_DIRS for part in rel_parts):
            continue
        results.append(path)

    return sorted(results)


def post_location(content_root: Path, path: Path) -> tuple[str, str] | None:
    """Derive ``(category, slug)`` from where *path* sits under *content_root*.

    The slug is the file's parent directory name and the category its
    grandparent's. Both must lie inside the content root, so a file needs
    at least ``category/slug/file`` beneath it.

    Examples:
        >>> post_location(Path("posts"), Path("posts/tech/001-hello/index.md"))
        ('tech', '001-hello')
        >>> post_location(Path("posts"), Path("posts/tech/index.md")) is None
        True
    """
    try:
        rel_parts = path.relative_to(content_root).parts
    except ValueError:
        return None
    if len(rel_parts) < 3:
        return None
    category, slug = rel_parts[-3], rel_parts[-2]
    if not category or not slug:
        return None
    return category, slug
