"""call — run one operation through the dispatcher from the shell."""

from __future__ import annotations

import asyncio

import click

from dkgctl.commands._base import DkgCommand


def _parse_params(values: tuple[str, ...]) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            msg = f"Expected key=value, got {item!r}"
            raise click.BadParameter(msg, param_hint="--param")
        params[key] = value
    return params


@click.command(
    cls=DkgCommand,
    examples="""\
  dkgctl call generate_greeting -p name=Ada -p enthusiastic=true
  dkgctl --json call echo_message -p message=hello
  dkgctl call get_node_stats""",
)
@click.argument("name")
@click.option("-p", "--param", "params", multiple=True, help="Input field as key=value.")
@click.pass_obj
def call(app: object, name: str, params: tuple[str, ...]) -> None:
    """Run operation NAME with the given parameters."""
    from dkgctl.commands._context import AppContext

    assert isinstance(app, AppContext)
    raw = _parse_params(params)
    result = asyncio.run(app.registry.execute(name, raw))
    app.emit(result)
