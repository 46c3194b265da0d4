"""``--examples`` support for dkgctl commands.

Usage examples live next to each command but stay out of ``--help``;
the help text only points at them.
"""

from __future__ import annotations

from typing import Any

import click

EXAMPLES_HINT = "Run with --examples for usage examples."


class ExamplesOption(click.Option):
    """Eager flag that prints the owning command's examples and exits."""

    def __init__(self, examples: str) -> None:
        super().__init__(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._show,
            help="Show usage examples.",
        )
        self.examples = examples

    def _show(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class DkgCommand(click.Command):
    """Command that takes an ``examples=`` text and exposes it via ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        if examples and not kwargs.get("epilog"):
            kwargs["epilog"] = EXAMPLES_HINT
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(ExamplesOption(examples))
