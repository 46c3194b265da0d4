"""``dkgctl`` entry point: global flags, node settings, subcommands.

The group callback resolves :class:`~dkgctl.config.settings.DkgSettings`
once and hands every subcommand an :class:`AppContext`. Plugins are not
loaded here; the first command that needs the registry loads them.
"""

from __future__ import annotations

from pathlib import Path

import click

from dkgctl import __version__
from dkgctl.commands import register_commands
from dkgctl.commands._context import AppContext
from dkgctl.config.settings import DkgSettings

_NODE_ROOT = click.Path(file_okay=False, dir_okay=True, path_type=Path)


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="dkgctl", message="%(prog)s %(version)s")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Log dkgctl debug events to stderr.")
@click.option("--log-json", is_flag=True, help="Emit log records as JSON lines on stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Path to a dkgctl.toml.")
@click.option("--root", type=_NODE_ROOT, default=None, help="Node directory (default: config dir or cwd).")
@click.option(
    "--no-discover",
    is_flag=True,
    help="Load only the built-in plugins; skip entry points and .dkgctl/plugins/.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    root: Path | None,
    no_discover: bool,
) -> None:
    """dkgctl: serve DKG node plugin operations as MCP tools and a REST API."""
    ctx.obj = AppContext(
        DkgSettings.from_cli(
            config_path=config_path,
            root=root,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
            no_discover=no_discover,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
