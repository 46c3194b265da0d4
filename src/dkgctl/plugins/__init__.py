"""Extension layer — plugin system via pluggy.

Discovery: built-ins, entry_points (pip-installed) and ``.dkgctl/plugins/``.
INVARIANT: Plugin failures are warnings, never errors.
"""

from dkgctl.plugins.context import GraphClient, PluginContext
from dkgctl.plugins.manager import PluginManager

__all__ = ["GraphClient", "PluginContext", "PluginManager"]
