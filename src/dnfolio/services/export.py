"""ExportService — static snapshots of the post list.

- export_posts: the ``postsList`` JSON array a static front end loads
  at build time. Stale until exported again.
- export_feed: RSS 2.0 feed of the newest posts.
- export_sitemap: sitemap.xml listing the site root and every post.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from jinja2 import TemplateError

from dnfolio.domain.ordering import sort_posts
from dnfolio.infrastructure.content_index import collect_posts
from dnfolio.services._helpers import dump_json, now_iso, rfc2822, write_text
from dnfolio.services.base import BaseService
from dnfolio.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

FEED_TEMPLATE = "rss.xml.j2"
SITEMAP_TEMPLATE = "sitemap.xml.j2"


def _write_failed(op: str, path: Path, exc: Exception) -> ServiceResult:
    logger.warning("Failed to write %s", path, exc_info=True)
    return ServiceResult.failure(
        op, ErrorCode.WRITE_FAILED, f"Could not write {path}: {exc}", path=str(path)
    )


class ExportService(BaseService):
    """Write post listings to static files."""

    def export_posts(self, output: Path | None = None) -> ServiceResult:
        """Write the sorted, published post list as a JSON array.

        *output* defaults to ``[export] posts_path`` under the site root.
        """
        op = "export_posts"
        settings = self._site.settings
        target = settings.resolve(output or settings.export.posts_path)

        index, failure = self._scan(op)
        if failure is not None:
            return failure
        assert index is not None

        posts = sort_posts(collect_posts(index))
        try:
            write_text(target, dump_json([p.to_wire() for p in posts]))
        except OSError as exc:
            return _write_failed(op, target, exc)

        logger.info("Exported %d posts to %s", len(posts), target)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(target), "count": len(posts), "generated_at": now_iso()},
            warnings=index.warnings(),
        )

    def export_feed(self, output: Path | None = None, *, limit: int | None = None) -> ServiceResult:
        """Render the newest *limit* posts as RSS 2.0.

        *output* defaults to ``[feed] path`` and *limit* to ``[feed] limit``.
        Items link to ``{base_url}/blog/{category}/{slug}/``.
        """
        op = "export_feed"
        settings = self._site.settings
        target = settings.resolve(output or settings.feed.path)
        limit = settings.feed.limit if limit is None else limit

        index, failure = self._scan(op)
        if failure is not None:
            return failure
        assert index is not None

        base_url = settings.site.base_url.rstrip("/")
        posts = sort_posts(collect_posts(index))[: max(limit, 0)]
        items = [
            {
                "title": p.title,
                "link": f"{base_url}{p.url_path}",
                "description": p.description,
                "pub_date": rfc2822(p.created),
                "tags": p.tags,
            }
            for p in posts
        ]

        xml, failure = self._render(
            op,
            "feed",
            FEED_TEMPLATE,
            site=settings.site,
            base_url=base_url,
            build_date=rfc2822(datetime.now(UTC)),
            items=items,
        )
        if failure is not None:
            return failure
        assert xml is not None

        try:
            write_text(target, xml)
        except OSError as exc:
            return _write_failed(op, target, exc)

        logger.info("Wrote feed with %d items to %s", len(items), target)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(target), "count": len(items)},
            warnings=index.warnings(),
        )

    def export_sitemap(self, output: Path | None = None) -> ServiceResult:
        """Write ``sitemap.xml`` with the site root and every published post.

        *output* defaults to ``[export] sitemap_path``. A post's
        ``<lastmod>`` is its ``updatedAt``, falling back to ``createdAt``;
        the site root uses the build time.
        """
        op = "export_sitemap"
        settings = self._site.settings
        target = settings.resolve(output or settings.export.sitemap_path)

        index, failure = self._scan(op)
        if failure is not None:
            return failure
        assert index is not None

        base_url = settings.site.base_url.rstrip("/")
        urls = [{"loc": f"{base_url}/", "lastmod": datetime.now(UTC).isoformat(timespec="seconds")}]
        for post in sort_posts(collect_posts(index)):
            urls.append(
                {
                    "loc": f"{base_url}{post.url_path}",
                    "lastmod": (post.updated or post.created).isoformat(),
                }
            )

        xml, failure = self._render(op, "sitemap", SITEMAP_TEMPLATE, urls=urls)
        if failure is not None:
            return failure
        assert xml is not None

        try:
            write_text(target, xml)
        except OSError as exc:
            return _write_failed(op, target, exc)

        logger.info("Wrote sitemap with %d urls to %s", len(urls), target)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(target), "count": len(urls) - 1},
            warnings=index.warnings(),
        )

    def _render(
        self, op: str, group: str, name: str, **context: Any
    ) -> tuple[str | None, ServiceResult | None]:
        """Render template *name* from *group*, or a ``TEMPLATE_ERROR`` result."""
        try:
            template = self._site.template_environment(group).get_template(name)
            return template.render(**context), None
        except TemplateError as exc:
            return None, ServiceResult.failure(op, ErrorCode.TEMPLATE_ERROR, str(exc), template=name)
