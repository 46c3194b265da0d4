"""Plugin host — assembles the operation registry both surfaces serve.

Equivalent of the node's plugin loader: built-in plugins enabled in
``[plugins]`` are registered first, then entry-point and local plugins.
The graph client is either passed in by the embedding application or
provided by a plugin through ``provide_graph_client``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from dkgctl.dispatch.registry import OperationRegistry
from dkgctl.plugins.builtins import BUILTIN_PLUGINS
from dkgctl.plugins.context import PluginContext
from dkgctl.plugins.manager import PluginManager

if TYPE_CHECKING:
    from dkgctl.config.settings import DkgSettings

logger = logging.getLogger(__name__)


def build_registry(
    settings: DkgSettings,
    *,
    graph_client: Any | None = None,
    plugin_manager: PluginManager | None = None,
    discover: bool = True,
) -> OperationRegistry:
    """Load plugins and return a frozen registry of their operations.

    Args:
        settings: Host settings; ``[plugins]`` selects the built-ins.
        graph_client: Knowledge-graph client injected by the host. When
            None, plugins are asked to provide one.
        plugin_manager: Pre-populated manager (tests, embedding hosts).
        discover: Also load entry-point and local directory plugins.
    """
    pm = plugin_manager or PluginManager()

    registered = set(pm.list_plugin_names())
    for name, plugin_cls in BUILTIN_PLUGINS.items():
        if not getattr(settings.plugins, name) or name in registered:
            continue
        pm.register_plugin(plugin_cls(), name=name)

    if discover:
        pm.discover_and_load(local_dir=settings.local_plugin_dir)

    client = graph_client if graph_client is not None else pm.resolve_graph_client(settings)
    context = PluginContext(settings=settings, graph=client)

    registry = OperationRegistry()
    failures = pm.register_operations(registry, context)
    registry.freeze()

    logger.debug(
        "Plugin host ready: %d plugins, %d operations, %d failures",
        len(pm.list_plugin_names()),
        len(registry),
        len(failures),
    )
    return registry
