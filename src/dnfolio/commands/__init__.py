"""Subcommand modules for dnfolio.

Provides register_commands() which uses deferred imports to keep
``dnfolio --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from dnfolio.commands.export import export
    from dnfolio.commands.posts import posts

    cli.add_command(posts)
    cli.add_command(export)

    # --- Standalone commands ---
    from dnfolio.commands.serve import serve
    from dnfolio.commands.taxonomy import categories, tags

    cli.add_command(tags)
    cli.add_command(categories)
    cli.add_command(serve)
