"""FastAPI application exposing the post list over HTTP.

Every request scans the content root again, so responses always match
the files on disk at request time. Endpoints:

- ``GET /api/posts``: sorted, published posts as a JSON array
- ``GET /api/posts/{slug}``: newest post with that slug, plus body
- ``GET /api/posts/{category}/{slug}``: one post, plus body
- ``GET /api/tags``: tags with counts

Unknown and unindexable posts both answer 404.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, FastAPI, HTTPException, status

from dnfolio import __version__
from dnfolio.infrastructure.site import Site
from dnfolio.services.posts import PostService
from dnfolio.services.result import ErrorCode

if TYPE_CHECKING:
    from dnfolio.config.settings import DnfolioSettings
    from dnfolio.services.result import ServiceResult

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = frozenset({ErrorCode.NOT_FOUND, ErrorCode.INVALID_POST})


def _unwrap(result: ServiceResult) -> dict[str, Any]:
    """Return ``result.data`` or raise the matching HTTP error."""
    if result.ok:
        for warning in result.warnings:
            logger.debug("%s: %s", result.op, warning)
        return result.data

    message = result.error.message if result.error else "Unknown error"
    if result.error_code in _NOT_FOUND_CODES:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)
    logger.warning("%s failed: %s", result.op, message)
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def _post_response(data: dict[str, Any]) -> dict[str, Any]:
    payload = dict(data)
    payload.pop("path", None)
    return payload


def build_router(site: Site) -> APIRouter:
    """Routes bound to *site*."""
    router = APIRouter(prefix="/api", tags=["posts"])

    @router.get("/posts", summary="List published posts")
    def list_posts() -> list[dict[str, Any]]:
        return _unwrap(PostService(site).list_posts())["items"]

    @router.get("/posts/{slug}", summary="Get a post by slug")
    def find_post(slug: str) -> dict[str, Any]:
        return _post_response(_unwrap(PostService(site).find_post(slug)))

    @router.get("/posts/{category}/{slug}", summary="Get a post by category and slug")
    def get_post(category: str, slug: str) -> dict[str, Any]:
        return _post_response(_unwrap(PostService(site).get_post(category, slug)))

    @router.get("/tags", summary="List tags with post counts")
    def list_tags() -> list[dict[str, Any]]:
        return _unwrap(PostService(site).list_tags())["items"]

    return router


def create_app(settings: DnfolioSettings) -> FastAPI:
    """Build the API for the site described by *settings*."""
    site = Site(settings)
    app = FastAPI(title=settings.site.title, version=__version__)
    app.include_router(build_router(site))
    logger.debug("API ready for content root %s", site.content_root)
    return app
