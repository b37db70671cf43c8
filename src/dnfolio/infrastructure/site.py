"""Site — the single dependency injected into every service.

Owns the resolved settings and the content root. Every :meth:`Site.scan`
call walks the filesystem again; nothing is cached between calls, so a
listing always reflects the content root at the time it was requested.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from dnfolio.infrastructure.content_index import ContentIndex, build_content_index
from dnfolio.infrastructure.templates import build_template_environment

if TYPE_CHECKING:
    from jinja2 import Environment

    from dnfolio.config.settings import DnfolioSettings

logger = logging.getLogger(__name__)


class Site:
    """A site root with its content tree and configuration."""

    def __init__(self, settings: DnfolioSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> DnfolioSettings:
        return self._settings

    @property
    def root(self) -> Path:
        return self._settings.site_root

    @property
    def content_root(self) -> Path:
        """Directory holding ``category/slug/file`` content trees."""
        return self._settings.resolve(self._settings.content.root)

    def scan(self) -> ContentIndex:
        """Index the content root from scratch."""
        logger.debug("Scanning %s for %s", self.content_root, self._settings.content.pattern)
        return build_content_index(self.content_root, self._settings.content.pattern)

    def template_environment(self, group: str) -> Environment:
        return build_template_environment(group, site_root=self.root)
