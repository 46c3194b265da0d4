"""serve — start the MCP server (requires dkgctl[mcp] extra)."""

from __future__ import annotations

import click

from dkgctl.commands._base import DkgCommand


@click.command(
    cls=DkgCommand,
    examples="""\
  # Start the MCP server (stdio transport, default)
  dkgctl serve

  # Streamable HTTP on custom host/port
  dkgctl serve --transport streamable-http --host 0.0.0.0 --port 9000

  # SSE transport on the [mcp] address
  dkgctl serve --transport sse""",
)
@click.option(
    "--transport",
    default=None,
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport protocol (default: [mcp] transport, stdio).",
)
@click.option("--host", default=None, help="Bind address (HTTP transports only).")
@click.option("--port", default=None, type=int, help="Listen port (HTTP transports only).")
@click.pass_obj
def serve(app: object, transport: str | None, host: str | None, port: int | None) -> None:
    """Start the MCP server exposing plugin operations as agent tools."""
    from dkgctl.mcp.server import create_server, mcp_available

    if not mcp_available:
        click.echo("MCP not installed. Install with: pip install dkgctl[mcp]", err=True)
        raise SystemExit(1)

    from dkgctl.commands._context import AppContext

    assert isinstance(app, AppContext)
    server = create_server(app.settings, registry=app.registry, host=host, port=port)
    server.run(transport=transport or app.settings.mcp.transport)
