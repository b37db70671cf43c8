"""Content index — one explicit scan of the content root.

:func:`build_content_index` enumerates matching files once, parses each
file's front-matter, and records either a :class:`ContentEntry` or a
:class:`SkippedFile`. A malformed draft never fails the scan: it is
skipped with a reason and the rest of the site still builds.

:func:`collect_posts` turns an index into the published posts. It does
not order them; see :func:`dnfolio.domain.ordering.sort_posts`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from pydantic import ValidationError
from ruamel.yaml.error import YAMLError

from dnfolio.domain.post import Post, PostFrontmatter
from dnfolio.infrastructure.filesystem import (
    find_content_files,
    post_location,
    read_content_file,
)

logger = logging.getLogger(__name__)


class SkipReason(StrEnum):
    """Why a matched file did not become an index entry."""

    PATH = "path"
    READ = "read"
    YAML = "yaml"
    FRONTMATTER = "frontmatter"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class SkippedFile:
    """A matched file left out of the index."""

    path: Path
    reason: SkipReason
    detail: str = ""
    category: str | None = None
    slug: str | None = None


@dataclass(frozen=True)
class ContentEntry:
    """A content file with valid front-matter and a path-derived identity."""

    path: Path
    category: str
    slug: str
    frontmatter: PostFrontmatter
    body: str

    @property
    def published(self) -> bool:
        return self.frontmatter.published

    def to_post(self) -> Post:
        return Post.from_frontmatter(self.frontmatter, category=self.category, slug=self.slug)


@dataclass(frozen=True)
class ContentIndex:
    """In-memory manifest produced by one scan."""

    root: Path
    entries: tuple[ContentEntry, ...] = ()
    skipped: tuple[SkippedFile, ...] = ()

    def find(self, category: str, slug: str) -> ContentEntry | None:
        """Return the entry at ``category/slug``, published or not."""
        for entry in self.entries:
            if entry.category == category and entry.slug == slug:
                return entry
        return None

    def skipped_at(self, category: str, slug: str) -> SkippedFile | None:
        """Return the first skipped file that sat at ``category/slug``."""
        for item in self.skipped:
            if item.category == category and item.slug == slug:
                return item
        return None

    def warnings(self) -> list[str]:
        """Human-readable skip messages, relative to the content root."""
        messages: list[str] = []
        for item in self.skipped:
            try:
                shown = item.path.relative_to(self.root).as_posix()
            except ValueError:
                shown = str(item.path)
            msg = f"Skipped {shown}: {item.reason}"
            if item.detail:
                msg += f" ({item.detail})"
            messages.append(msg)
        return messages


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ())) or "front-matter"
    return f"{loc}: {err.get('msg', 'invalid')}"


def build_content_index(content_root: Path, pattern: str = "**/*.md") -> ContentIndex:
    """Scan *content_root* and index every file matching *pattern*.

    Files that cannot yield an entry are recorded in ``skipped``:

    - ``path``: not nested as ``category/slug/file``
    - ``read``: unreadable or not UTF-8
    - ``yaml``: front-matter block is not a YAML mapping
    - ``frontmatter``: required fields missing or invalid
    - ``duplicate``: another file already claimed ``category/slug``
    """
    entries: list[ContentEntry] = []
    skipped: list[SkippedFile] = []
    claimed: set[tuple[str, str]] = set()

    for path in find_content_files(content_root, pattern):
        location = post_location(content_root, path)
        if location is None:
            skipped.append(SkippedFile(path, SkipReason.PATH, "expected category/slug/file"))
            logger.debug("Skipping %s: not under category/slug", path)
            continue
        category, slug = location

        try:
            raw_fm, body = read_content_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            skipped.append(SkippedFile(path, SkipReason.READ, str(exc), category, slug))
            logger.debug("Skipping %s: unreadable", path, exc_info=True)
            continue
        except (YAMLError, ValueError) as exc:
            detail = str(exc).splitlines()[0] if str(exc) else type(exc).__name__
            skipped.append(SkippedFile(path, SkipReason.YAML, detail, category, slug))
            logger.debug("Skipping %s: bad YAML", path, exc_info=True)
            continue

        try:
            fm = PostFrontmatter.model_validate(raw_fm)
        except ValidationError as exc:
            skipped.append(
                SkippedFile(path, SkipReason.FRONTMATTER, _first_error(exc), category, slug)
            )
            logger.debug("Skipping %s: invalid front-matter", path)
            continue

        if (category, slug) in claimed:
            skipped.append(
                SkippedFile(
                    path,
                    SkipReason.DUPLICATE,
                    f"{category}/{slug} already indexed",
                    category,
                    slug,
                )
            )
            logger.debug("Skipping %s: duplicate %s/%s", path, category, slug)
            continue

        claimed.add((category, slug))
        entries.append(ContentEntry(path, category, slug, fm, body))

    logger.debug(
        "Indexed %d content files under %s (%d skipped)",
        len(entries),
        content_root,
        len(skipped),
    )
    return ContentIndex(root=content_root, entries=tuple(entries), skipped=tuple(skipped))


def collect_posts(index: ContentIndex) -> list[Post]:
    """Published posts from *index*, in scan order (not display order)."""
    return [entry.to_post() for entry in index.entries if entry.published]
