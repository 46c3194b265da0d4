"""FastMCP server setup.

Optional extra — guarded behind try/except ImportError.
Transport: stdio default, SSE and streamable HTTP optional.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dkgctl.config.settings import DkgSettings
    from dkgctl.dispatch.registry import OperationRegistry

mcp_available = False
_FastMCP: Any = None

try:
    from mcp.server.fastmcp import FastMCP as _FastMCP  # type: ignore[no-redef,import-not-found]

    mcp_available = True
except ImportError:
    pass

__all__ = ["create_server", "mcp_available"]

SERVER_NAME = "dkgctl"


def create_server(
    settings: DkgSettings,
    *,
    registry: OperationRegistry | None = None,
    graph_client: Any | None = None,
    host: str | None = None,
    port: int | None = None,
) -> Any:
    """Create the MCP server and register every tool-exposed operation.

    Loads plugins through :func:`dkgctl.host.build_registry` unless a
    ready *registry* is passed. *host* and *port* override ``[mcp]`` for
    the HTTP transports (sse, streamable-http); stdio ignores them.

    Raises RuntimeError if the mcp extra is not installed.
    """
    if not mcp_available or _FastMCP is None:
        msg = "MCP extra not installed. Install with: pip install dkgctl[mcp]"
        raise RuntimeError(msg)

    from dkgctl.host import build_registry
    from dkgctl.mcp.tools import register_tools

    if registry is None:
        registry = build_registry(settings, graph_client=graph_client)

    server = _FastMCP(
        SERVER_NAME,
        host=host or settings.mcp.host,
        port=port or settings.mcp.port,
    )
    register_tools(server, registry)
    return server
