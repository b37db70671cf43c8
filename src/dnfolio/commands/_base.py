"""Click base classes with an eager ``--examples`` flag.

``DnCommand`` and ``DnGroup`` take an ``examples`` keyword. When set,
``--examples`` prints them and exits, and the help epilog points at it.
"""

from __future__ import annotations

from typing import Any

import click

_EPILOG_HINT = "Run with --examples for usage examples."


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples.rstrip("\n"))
    ctx.exit(0)


class _ExamplesMixin:
    """Shared ``examples`` handling for commands and groups."""

    examples: str | None
    params: list[click.Parameter]
    epilog: str | None

    def _attach_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=_print_examples,
                help="Show usage examples.",
            )
        )
        if self.epilog is None:
            self.epilog = _EPILOG_HINT


class DnCommand(_ExamplesMixin, click.Command):
    """Command that accepts ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)


class DnGroup(_ExamplesMixin, click.Group):
    """Group that accepts ``examples=``; subcommands default to :class:`DnCommand`."""

    command_class = DnCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)
