"""MCP tool surface — every operation with a ToolSpec becomes a tool.

``call_tool_impl`` is the testable core (no mcp package needed): it runs
the operation through the registry and renders the agent-facing text.
``register_tools()`` wraps it with FastMCP decorators, deriving each
tool's parameters from the operation's input model.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticUndefined

from dkgctl.services.result import ServiceResult

if TYPE_CHECKING:
    from dkgctl.dispatch.operation import Operation
    from dkgctl.dispatch.registry import OperationRegistry


class TextContent(BaseModel):
    model_config = {"frozen": True}

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """MCP-shaped tool result: text content plus the ``isError`` flag."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)


def to_tool_response(operation: Operation, result: ServiceResult) -> ToolResponse:
    """Render a ServiceResult as the text block an agent reads."""
    if result.ok and operation.tool is not None:
        return ToolResponse(content=[TextContent(text=operation.tool.render(result.data))])
    message = result.error.message if result.error and result.error.message else "Unknown error"
    return ToolResponse(
        content=[TextContent(text=f"{operation.error_prefix}: {message}")],
        is_error=True,
    )


async def call_tool_impl(
    registry: OperationRegistry,
    tool_name: str,
    arguments: dict[str, Any] | None = None,
) -> ToolResponse:
    """Run *tool_name* with *arguments* and return the rendered response."""
    operation = registry.get(tool_name)
    if operation is None or operation.tool is None:
        return ToolResponse(content=[TextContent(text=f"Unknown tool: {tool_name}")], is_error=True)
    result = await registry.execute(tool_name, arguments or {})
    return to_tool_response(operation, result)


def tool_signature(model: type[BaseModel]) -> inspect.Signature:
    """Keyword-only signature mirroring *model*'s fields and descriptions."""
    parameters = []
    for name, field in model.model_fields.items():
        default = inspect.Parameter.empty if field.default is PydanticUndefined else field.default
        parameters.append(
            inspect.Parameter(
                name,
                inspect.Parameter.KEYWORD_ONLY,
                default=default,
                annotation=Annotated[field.annotation, Field(description=field.description)],
            )
        )
    return inspect.Signature(parameters, return_annotation=str)


def _make_tool(registry: OperationRegistry, operation: Operation) -> Any:
    """Build the FastMCP callable for *operation*.

    Failures raise ``ToolError`` so FastMCP answers with ``isError=True``.
    """

    async def tool(**arguments: Any) -> str:
        response = await call_tool_impl(registry, operation.name, arguments)
        if response.is_error:
            from mcp.server.fastmcp.exceptions import ToolError

            raise ToolError(response.text)
        return response.text

    tool.__name__ = operation.name
    tool.__doc__ = operation.description
    tool.__signature__ = tool_signature(operation.input_model)  # type: ignore[attr-defined]
    return tool


def register_tools(server: Any, registry: OperationRegistry) -> list[str]:
    """Register every tool-exposed operation on the FastMCP server.

    Returns the registered tool names in registration order.
    """
    names: list[str] = []
    for operation in registry.tools():
        server.tool(
            name=operation.name,
            title=operation.title,
            description=operation.description,
        )(_make_tool(registry, operation))
        names.append(operation.name)
    return names
