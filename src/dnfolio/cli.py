"""Root CLI group for dnfolio with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from dnfolio import __version__
from dnfolio.commands import register_commands
from dnfolio.commands._context import AppContext
from dnfolio.config.settings import DnfolioSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dnfolio")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--root",
    "site_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Site root (default: directory of dnfolio.toml, or CWD).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    site_root: Path | None,
) -> None:
    """dnfolio — index and serve blog posts."""
    ctx.ensure_object(dict)
    settings = DnfolioSettings.from_cli(
        config_path=config_path,
        site_root=site_root,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
