"""BaseService — shared foundation for dnfolio services.

Every service receives a :class:`Site` at construction time and scans it
on demand. Services never cache an index between calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dnfolio.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from dnfolio.infrastructure.content_index import ContentIndex
    from dnfolio.infrastructure.site import Site

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class PostService(BaseService):
            def list_posts(self) -> ServiceResult:
                index, failure = self._scan("list_posts")
                if failure is not None:
                    return failure
                ...
    """

    def __init__(self, site: Site) -> None:
        self._site = site

    def _scan(self, op: str) -> tuple[ContentIndex | None, ServiceResult | None]:
        """Scan the content root, or return a failed result if it is missing."""
        root = self._site.content_root
        if not root.is_dir():
            logger.warning("Content root %s does not exist", root)
            return None, ServiceResult.failure(
                op,
                ErrorCode.CONTENT_ROOT_MISSING,
                f"Content root not found: {root}",
                content_root=str(root),
            )
        return self._site.scan(), None
