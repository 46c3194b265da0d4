"""Pluggy hook specifications for dkgctl plugins.

A plugin is any object carrying ``@hookimpl`` methods. The host calls
``provide_graph_client`` once to resolve the knowledge-graph client, then
``register_operations`` once per plugin to collect operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from dkgctl.config.settings import DkgSettings
    from dkgctl.dispatch.registry import OperationRegistry
    from dkgctl.plugins.context import PluginContext

hookspec = pluggy.HookspecMarker("dkgctl")


class DkgHookSpec:
    """Hook specifications for the dkgctl plugin system."""

    @hookspec
    def register_operations(
        self,
        registry: OperationRegistry,
        context: PluginContext,
    ) -> None:
        """Register the plugin's operations on *registry*."""

    @hookspec(firstresult=True)
    def provide_graph_client(self, settings: DkgSettings) -> Any | None:
        """Return a knowledge-graph client, or None to defer to other plugins."""
