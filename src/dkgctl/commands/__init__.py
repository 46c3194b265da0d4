"""Subcommand modules for dkgctl.

Provides register_commands() which uses deferred imports to keep
``dkgctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from dkgctl.commands.api import api
    from dkgctl.commands.call import call
    from dkgctl.commands.ops import ops
    from dkgctl.commands.serve import serve

    cli.add_command(serve)
    cli.add_command(api)
    cli.add_command(ops)
    cli.add_command(call)
