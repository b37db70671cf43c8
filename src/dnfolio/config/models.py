"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dnfolio.toml only contains
overrides. A fresh site needs only a ``posts/`` directory.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SiteConfig(BaseModel):
    """[site] section."""

    model_config = {"frozen": True}

    title: str = "dnfolio"
    base_url: str = "https://dnfolio.me"
    description: str = "Daikiの個人サイト。技術ブログを公開しています。"
    language: str = "ja"


class ContentConfig(BaseModel):
    """[content] section.

    ``root`` is resolved against the site root when relative.
    """

    model_config = {"frozen": True}

    root: str = "posts"
    pattern: str = "**/*.md"


class FeedConfig(BaseModel):
    """[feed] section."""

    model_config = {"frozen": True}

    limit: int = 20
    path: str = "dist/feed.xml"


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    posts_path: str = "dist/api/posts.json"
    sitemap_path: str = "dist/sitemap.xml"


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 8000


class DnfolioConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    site: SiteConfig = Field(default_factory=SiteConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    feed: FeedConfig = Field(default_factory=FeedConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
