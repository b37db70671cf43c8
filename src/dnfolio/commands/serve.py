"""serve — run the read-only JSON API."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnfolio.commands._base import DnCommand

if TYPE_CHECKING:
    from dnfolio.commands._context import AppContext


@click.command(
    cls=DnCommand,
    examples="""\
  # Serve on [server] host/port (default 127.0.0.1:8000)
  dnfolio serve

  # Listen on all interfaces
  dnfolio serve --host 0.0.0.0 --port 9000""",
)
@click.option("--host", default=None, help="Bind address (default: [server] host).")
@click.option("--port", default=None, type=int, help="Listen port (default: [server] port).")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None) -> None:
    """Serve /api/posts over HTTP."""
    import uvicorn

    from dnfolio.web.app import create_app

    server = app.settings.server
    uvicorn.run(
        create_app(app.settings),
        host=server.host if host is None else host,
        port=server.port if port is None else port,
        log_config=None,
    )
