"""Command group: published post listing and lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnfolio.commands._base import DnGroup
from dnfolio.services.posts import PostService

if TYPE_CHECKING:
    from dnfolio.commands._context import AppContext

_POSTS_EXAMPLES = """\
  dnfolio posts list
  dnfolio posts list --category tech --limit 5
  dnfolio posts get tech 001-hello-world
  dnfolio posts find 001-hello-world
  dnfolio --json posts list"""


@click.group(cls=DnGroup, examples=_POSTS_EXAMPLES)
@click.pass_obj
def posts(app: AppContext) -> None:
    """List and look up published posts."""


@posts.command(
    "list",
    examples="""\
  dnfolio posts list
  dnfolio posts list --tag rust
  dnfolio posts list --category diary --limit 10
  dnfolio -q posts list""",
)
@click.option("--category", default=None, help="Only posts in this category.")
@click.option("--tag", default=None, help="Only posts with this tag.")
@click.option("--limit", default=None, type=click.IntRange(min=0), help="Max results.")
@click.pass_obj
def list_cmd(app: AppContext, category: str | None, tag: str | None, limit: int | None) -> None:
    """List published posts, newest first."""
    app.emit(PostService(app.site).list_posts(category=category, tag=tag, limit=limit))


@posts.command(
    examples="""\
  dnfolio posts get tech 001-hello-world
  dnfolio --json posts get diary 2024-01-03"""
)
@click.argument("category")
@click.argument("slug")
@click.pass_obj
def get(app: AppContext, category: str, slug: str) -> None:
    """Show a published post by CATEGORY and SLUG."""
    app.emit(PostService(app.site).get_post(category, slug))


@posts.command(
    examples="""\
  dnfolio posts find 001-hello-world"""
)
@click.argument("slug")
@click.pass_obj
def find(app: AppContext, slug: str) -> None:
    """Show the newest published post with SLUG in any category."""
    app.emit(PostService(app.site).find_post(slug))
