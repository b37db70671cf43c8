"""Commands: tag and category sidebars."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnfolio.commands._base import DnCommand
from dnfolio.services.posts import PostService

if TYPE_CHECKING:
    from dnfolio.commands._context import AppContext


@click.command(
    cls=DnCommand,
    examples="""\
  dnfolio tags
  dnfolio -v tags
  dnfolio --json tags""",
)
@click.pass_obj
def tags(app: AppContext) -> None:
    """List tags of published posts with counts."""
    app.emit(PostService(app.site).list_tags())


@click.command(
    cls=DnCommand,
    examples="""\
  dnfolio categories
  dnfolio --json categories""",
)
@click.pass_obj
def categories(app: AppContext) -> None:
    """List categories and the monthly archive."""
    app.emit(PostService(app.site).list_categories())
