"""Operation — one capability declared once, served on every surface.

An Operation bundles the declared input shape (a pydantic model), the
handler that implements it, and optional surface specs: a ToolSpec makes
it an MCP tool, a RouteSpec makes it a REST endpoint. Adapters read these
specs; they never hold business logic of their own.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel

Handler = Callable[[Any], BaseModel | Awaitable[BaseModel]]
Renderer = Callable[[dict[str, Any]], str]


class InvalidInput(Exception):
    """Client-input error detected by a handler before any external call.

    Shape validation runs before the handler; this covers checks that need
    the handler's own logic (e.g. content that must parse as JSON).
    """


class NoInput(BaseModel):
    """Input model for operations that take no parameters."""


@dataclass(frozen=True)
class ToolSpec:
    """Exposes an operation as an MCP tool.

    Attributes:
        render: Turns the operation's output data into the text block an
            agent reads. Never returns raw JSON for simple results.
        error_prefix: Leads the text of an ``isError`` result.
    """

    render: Renderer
    error_prefix: str | None = None


@dataclass(frozen=True)
class RouteSpec:
    """Exposes an operation as a REST endpoint.

    ``path`` uses FastAPI syntax; use ``{name:path}`` for values that may
    contain ``/``. With ``envelope="data"`` the output is nested under a
    ``data`` key, otherwise its fields sit next to ``success``.
    """

    method: Literal["GET", "POST"]
    path: str
    tag: str
    summary: str
    envelope: Literal["flat", "data"] = "flat"

    def wrap(self, data: dict[str, Any]) -> dict[str, Any]:
        """Build the success envelope for *data*."""
        if self.envelope == "data":
            return {"success": True, "data": data}
        return {"success": True, **data}


@dataclass(frozen=True)
class Operation:
    """A named capability with a declared input and output shape."""

    name: str
    title: str
    description: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]
    handler: Handler
    tool: ToolSpec | None = None
    route: RouteSpec | None = None
    failure_message: str | None = None

    @property
    def fallback_message(self) -> str:
        """Error message used when a downstream exception carries none."""
        return self.failure_message or f"Failed to run {self.name}"

    @property
    def error_prefix(self) -> str:
        if self.tool is not None and self.tool.error_prefix:
            return self.tool.error_prefix
        return f"Error running {self.name}"
