"""Command group: static exports (post list snapshot, RSS feed)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dnfolio.commands._base import DnGroup
from dnfolio.services.export import ExportService

if TYPE_CHECKING:
    from dnfolio.commands._context import AppContext

_EXPORT_EXAMPLES = """\
  dnfolio export posts
  dnfolio export posts --output build/posts.json
  dnfolio export feed --limit 10
  dnfolio export sitemap"""


@click.group(cls=DnGroup, examples=_EXPORT_EXAMPLES)
@click.pass_obj
def export(app: AppContext) -> None:
    """Write static snapshots of the published posts."""


@export.command(
    "posts",
    examples="""\
  dnfolio export posts
  dnfolio export posts --output dist/api/posts.json""",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Output file, relative to the current directory (default: [export] posts_path).",
)
@click.pass_obj
def posts_cmd(app: AppContext, output: Path | None) -> None:
    """Export the sorted post list as a JSON array."""
    app.emit(ExportService(app.site).export_posts(output))


@export.command(
    examples="""\
  dnfolio export feed
  dnfolio export feed --output public/feed.xml --limit 10"""
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Output file, relative to the current directory (default: [feed] path).",
)
@click.option("--limit", default=None, type=click.IntRange(min=0), help="Max feed items.")
@click.pass_obj
def feed(app: AppContext, output: Path | None, limit: int | None) -> None:
    """Render an RSS 2.0 feed of the newest posts."""
    app.emit(ExportService(app.site).export_feed(output, limit=limit))


@export.command(
    examples="""\
  dnfolio export sitemap
  dnfolio export sitemap --output public/sitemap.xml"""
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Output file, relative to the current directory (default: [export] sitemap_path).",
)
@click.pass_obj
def sitemap(app: AppContext, output: Path | None) -> None:
    """Write sitemap.xml for the site root and every published post."""
    app.emit(ExportService(app.site).export_sitemap(output))
