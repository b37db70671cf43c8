"""Display ordering for post listings.

Most recent first. Posts created at the same instant are ordered by
slug, descending, so zero-padded numeric prefixes keep their natural
"latest part first" order (``010-…`` before ``009-…``); any remaining
tie is settled by category, ascending. Slugs are unique within a
category, so the order is total.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dnfolio.domain.post import Post


def sort_posts(posts: Iterable[Post]) -> list[Post]:
    """Return *posts* ordered for display, newest first.

    Pure and idempotent: sorting an already sorted list returns the
    same order. Implemented as successive stable sorts, least
    significant key first.
    """
    ordered = sorted(posts, key=lambda p: p.category)
    ordered.sort(key=lambda p: p.slug, reverse=True)
    ordered.sort(key=lambda p: p.created, reverse=True)
    return ordered


def archive_month(post: Post) -> str:
    """``YYYY-MM`` bucket a post falls into on date sidebars."""
    return post.created.strftime("%Y-%m")
