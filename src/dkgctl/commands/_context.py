"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin loading and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dkgctl.output.formatters import format_result

if TYPE_CHECKING:
    from dkgctl.config.settings import DkgSettings
    from dkgctl.dispatch.registry import OperationRegistry
    from dkgctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are loaded lazily on first use of :attr:`registry` so
    ``--help`` and ``--version`` never import plugin code.
    """

    def __init__(self, settings: DkgSettings) -> None:
        self.settings = settings
        self._registry: OperationRegistry | None = None

        from dkgctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> OperationRegistry:
        """The frozen operation registry (plugins loaded on first access)."""
        if self._registry is None:
            from dkgctl.host import build_registry

            self._registry = build_registry(self.settings, discover=not self.settings.no_discover)
        return self._registry

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
