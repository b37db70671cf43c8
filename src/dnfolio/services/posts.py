"""PostService — published post listing, lookup, and taxonomies.

Read-only surfaces over a fresh content scan:
- list_posts: the sorted, published post list (the blog index)
- get_post: ``/blog/{category}/{slug}`` lookup with body and neighbours
- find_post: ``/blog/{slug}`` lookup by slug alone
- list_tags: tag cloud with counts
- list_categories: per-category and per-month sidebars
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import TYPE_CHECKING, Any

from dnfolio.domain.ordering import archive_month, sort_posts
from dnfolio.infrastructure.content_index import collect_posts
from dnfolio.services.base import BaseService
from dnfolio.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from dnfolio.domain.post import Post
    from dnfolio.infrastructure.content_index import ContentIndex, SkippedFile


def _ref(post: Post) -> dict[str, str]:
    return {"title": post.title, "url": post.url_path}


def _scan_meta(index: ContentIndex) -> dict[str, Any]:
    return {
        "content_root": str(index.root),
        "indexed": len(index.entries),
        "skipped": len(index.skipped),
    }


def _not_found(op: str, slug: str, **detail: str) -> ServiceResult:
    return ServiceResult.failure(op, ErrorCode.NOT_FOUND, f"Not found : {slug}", slug=slug, **detail)


def _invalid(op: str, skipped: SkippedFile, index: ContentIndex) -> ServiceResult:
    return ServiceResult.failure(
        op,
        ErrorCode.INVALID_POST,
        f"Post file could not be indexed: {skipped.reason}",
        category=skipped.category or "",
        slug=skipped.slug or "",
        path=skipped.path.relative_to(index.root).as_posix(),
        reason=str(skipped.reason),
        detail=skipped.detail,
    )


class PostService(BaseService):
    """Handles post listing, retrieval, and taxonomy queries."""

    # ------------------------------------------------------------------
    # list_posts — the blog index
    # ------------------------------------------------------------------

    def list_posts(
        self,
        *,
        category: str | None = None,
        tag: str | None = None,
        limit: int | None = None,
    ) -> ServiceResult:
        """Published posts, newest first.

        Args:
            category: Only posts in this category.
            tag: Only posts carrying this tag.
            limit: Maximum number of posts to return.
        """
        op = "list_posts"
        index, failure = self._scan(op)
        if failure is not None:
            return failure
        assert index is not None

        posts = collect_posts(index)
        if category is not None:
            posts = [p for p in posts if p.category == category]
        if tag is not None:
            posts = [p for p in posts if tag in p.tags]

        ordered = sort_posts(posts)
        if limit is not None:
            ordered = ordered[: max(limit, 0)]

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(ordered),
                "items": [p.to_wire() for p in ordered],
            },
            warnings=index.warnings(),
            meta=_scan_meta(index),
        )

    # ------------------------------------------------------------------
    # get_post / find_post — single-post loaders
    # ------------------------------------------------------------------

    def get_post(self, category: str, slug: str) -> ServiceResult:
        """Retrieve a published post by category and slug.

        Unpublished or absent posts are ``NOT_FOUND``. A file that sits at
        ``category/slug`` but was skipped during the scan is ``INVALID_POST``.
        """
        op = "get_post"
        index, failure = self._scan(op)
        if failure is not None:
            return failure
        assert index is not None

        entry = index.find(category, slug)
        if entry is None:
            skipped = index.skipped_at(category, slug)
            if skipped is not None:
                return _invalid(op, skipped, index)
            return _not_found(op, slug, category=category)
        if not entry.published:
            return _not_found(op, slug, category=category)

        return self._post_payload(op, index, entry.to_post())

    def find_post(self, slug: str) -> ServiceResult:
        """Retrieve the newest published post with *slug*, in any category."""
        op = "find_post"
        index, failure = self._scan(op)
        if failure is not None:
            return failure
        assert index is not None

        for post in sort_posts(collect_posts(index)):
            if post.slug == slug:
                return self._post_payload(op, index, post)

        if not any(e.slug == slug for e in index.entries):
            for skipped in index.skipped:
                if skipped.slug == slug:
                    return _invalid(op, skipped, index)
        return _not_found(op, slug)

    def _post_payload(self, op: str, index: ContentIndex, post: Post) -> ServiceResult:
        entry = index.find(post.category, post.slug)
        assert entry is not None

        ordered = sort_posts(collect_posts(index))
        position = next(
            i for i, p in enumerate(ordered) if (p.category, p.slug) == (post.category, post.slug)
        )
        newer = ordered[position - 1] if position > 0 else None
        older = ordered[position + 1] if position + 1 < len(ordered) else None

        data = post.to_wire()
        data["content"] = entry.body
        data["path"] = entry.path.relative_to(index.root).as_posix()
        data["prev"] = _ref(newer) if newer is not None else None
        data["next"] = _ref(older) if older is not None else None
        return ServiceResult(ok=True, op=op, data=data, warnings=index.warnings())

    # ------------------------------------------------------------------
    # Taxonomies
    # ------------------------------------------------------------------

    def list_tags(self) -> ServiceResult:
        """Tags of published posts with counts, most used first."""
        op = "list_tags"
        index, failure = self._scan(op)
        if failure is not None:
            return failure
        assert index is not None

        counts: Counter[str] = Counter()
        members: dict[str, list[str]] = defaultdict(list)
        for post in sort_posts(collect_posts(index)):
            for tag in dict.fromkeys(post.tags):
                counts[tag] += 1
                members[tag].append(f"{post.category}/{post.slug}")

        items = [
            {"name": name, "count": count, "posts": members[name]}
            for name, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(items), "items": items},
            warnings=index.warnings(),
        )

    def list_categories(self) -> ServiceResult:
        """Sidebar data: posts grouped by category and by creation month."""
        op = "list_categories"
        index, failure = self._scan(op)
        if failure is not None:
            return failure
        assert index is not None

        by_category: dict[str, list[dict[str, str]]] = defaultdict(list)
        by_month: dict[str, list[dict[str, str]]] = defaultdict(list)
        for post in sort_posts(collect_posts(index)):
            ref = {"slug": post.slug, **_ref(post)}
            by_category[post.category].append(ref)
            by_month[archive_month(post)].append({"category": post.category, **ref})

        categories = [
            {"name": name, "count": len(refs), "posts": refs}
            for name, refs in sorted(by_category.items())
        ]
        archive = [
            {"month": month, "count": len(refs), "posts": refs}
            for month, refs in sorted(by_month.items(), reverse=True)
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(categories), "categories": categories, "archive": archive},
            warnings=index.warnings(),
        )
