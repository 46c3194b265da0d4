"""ops — list registered operations and the surfaces serving them."""

from __future__ import annotations

import click

from dkgctl.commands._base import DkgCommand


@click.command(
    cls=DkgCommand,
    examples="""\
  dkgctl ops
  dkgctl --json ops""",
)
@click.pass_obj
def ops(app: object) -> None:
    """List registered operations with their MCP tool and REST route."""
    from dkgctl.commands._context import AppContext
    from dkgctl.output.formatters import render_operations

    assert isinstance(app, AppContext)
    click.echo(render_operations(app.registry, json_output=app.settings.json_output))
