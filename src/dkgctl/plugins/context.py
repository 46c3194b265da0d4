"""PluginContext and the knowledge-graph client protocol.

The graph client is supplied by the host (or by a plugin implementing
``provide_graph_client``) and handed to plugins at construction time.
Its semantics (consistency, retries, UAL format) are opaque to dkgctl.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from dkgctl.config.settings import DkgSettings


class AssetApi(Protocol):
    def create(self, content: dict[str, Any], options: dict[str, Any]) -> Any: ...

    def get(self, ual: str) -> Any: ...


class GraphApi(Protocol):
    def query(self, query: str, query_type: str) -> Any: ...


class GraphClient(Protocol):
    """Knowledge-graph client surface used by the gateway plugin.

    Methods may be plain or coroutine functions; results are awaited
    when awaitable.
    """

    asset: AssetApi
    graph: GraphApi


@dataclass(frozen=True)
class PluginContext:
    """Everything a plugin receives from the host.

    Attributes:
        settings: Host settings.
        graph: Knowledge-graph client, or None when none was provided.
        started_at: Monotonic clock reading taken when the host started.
    """

    settings: DkgSettings
    graph: GraphClient | None = None
    started_at: float = field(default_factory=time.monotonic)

    def uptime(self) -> float:
        """Seconds since the host started."""
        return time.monotonic() - self.started_at
