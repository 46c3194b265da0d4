"""api — start the REST server."""

from __future__ import annotations

import click

from dkgctl.commands._base import DkgCommand


@click.command(
    cls=DkgCommand,
    examples="""\
  # Serve on the [api] address (127.0.0.1:9200 by default)
  dkgctl api

  # Listen on all interfaces
  dkgctl api --host 0.0.0.0 --port 8080""",
)
@click.option("--host", default=None, help="Bind address (default: [api] host).")
@click.option("--port", default=None, type=int, help="Listen port (default: [api] port).")
@click.pass_obj
def api(app: object, host: str | None, port: int | None) -> None:
    """Start the REST API exposing plugin operations as JSON endpoints."""
    import uvicorn

    from dkgctl.commands._context import AppContext
    from dkgctl.rest.app import create_app

    assert isinstance(app, AppContext)
    rest_app = create_app(app.settings, registry=app.registry)
    uvicorn.run(
        rest_app,
        host=host or app.settings.api.host,
        port=port or app.settings.api.port,
        log_config=None,
    )
