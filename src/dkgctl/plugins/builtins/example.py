"""Built-in utility plugin (``example1``).

Greeting, node statistics, message echo and a health check. Each function
below is the single implementation shared by the MCP tool and the REST
route registered for it.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

import pluggy
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from dkgctl.dispatch import NoInput, Operation, RouteSpec, ToolSpec
from dkgctl.services._helpers import now_iso

if TYPE_CHECKING:
    from dkgctl.dispatch.registry import OperationRegistry
    from dkgctl.plugins.context import PluginContext

hookimpl = pluggy.HookimplMarker("dkgctl")

PLUGIN_ID = "example1"
PLUGIN_VERSION = "1.0.0"
ENTHUSIASTIC_MARKER = " 🎉"


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------


class GreetingInput(BaseModel):
    name: str = Field(description="The name of the person to greet")
    enthusiastic: bool = Field(
        default=False,
        description="Whether to make the greeting enthusiastic (all caps with emoji)",
    )


class GreetingOutput(BaseModel):
    greeting: str
    timestamp: str


class NodeStats(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str
    timestamp: str
    plugin_version: str
    uptime: float
    plugin: str


class EchoInput(BaseModel):
    message: str = Field(description="The message to echo back")

    @field_validator("message")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("Message is required")
        return value


class EchoOutput(BaseModel):
    echo: str
    length: int
    reversed: str
    uppercase: str
    timestamp: str


class HealthStatus(BaseModel):
    status: str
    plugin: str
    timestamp: str


# ---------------------------------------------------------------------------
# Shared functions
# ---------------------------------------------------------------------------


def greet(name: str, enthusiastic: bool = False) -> str:
    """Build the greeting for *name*.

    Examples:
        >>> greet("Ada")
        'Hello, Ada! Welcome to the DKG.'
        >>> greet("Ada", enthusiastic=True)
        'HELLO, ADA! WELCOME TO THE DKG. 🎉'
    """
    greeting = f"Hello, {name}! Welcome to the DKG."
    return greeting.upper() + ENTHUSIASTIC_MARKER if enthusiastic else greeting


def node_stats(context: PluginContext) -> NodeStats:
    return NodeStats(
        status="operational",
        timestamp=now_iso(),
        plugin_version=PLUGIN_VERSION,
        uptime=context.uptime(),
        plugin=PLUGIN_ID,
    )


def echo(message: str) -> EchoOutput:
    """Echo *message* with its length, reversal and uppercase form.

    Length and reversal work on code points.
    """
    return EchoOutput(
        echo=message,
        length=len(message),
        reversed=message[::-1],
        uppercase=message.upper(),
        timestamp=now_iso(),
    )


def health() -> HealthStatus:
    return HealthStatus(status="healthy", plugin=PLUGIN_ID, timestamp=now_iso())


# ---------------------------------------------------------------------------
# Tool text
# ---------------------------------------------------------------------------


def _render_greeting(data: dict[str, Any]) -> str:
    return data["greeting"]


def _render_stats(data: dict[str, Any]) -> str:
    return (
        f"Node Status: {data['status']}\n"
        f"Uptime: {math.floor(data['uptime'])} seconds\n"
        f"Timestamp: {data['timestamp']}\n"
        f"Plugin: {data['plugin']}"
    )


def _render_echo(data: dict[str, Any]) -> str:
    return (
        f"Original: {data['echo']}\n"
        f"Length: {data['length']}\n"
        f"Reversed: {data['reversed']}\n"
        f"Uppercase: {data['uppercase']}"
    )


# ---------------------------------------------------------------------------
# Plugin
# ---------------------------------------------------------------------------


class ExamplePlugin:
    """Utility operations exposed as MCP tools and REST routes."""

    @hookimpl
    def register_operations(self, registry: OperationRegistry, context: PluginContext) -> None:
        registry.register(
            Operation(
                name="generate_greeting",
                title="Generate Greeting",
                description="Generates a personalized greeting message for a given name",
                input_model=GreetingInput,
                output_model=GreetingOutput,
                handler=lambda params: GreetingOutput(
                    greeting=greet(params.name, params.enthusiastic),
                    timestamp=now_iso(),
                ),
                tool=ToolSpec(render=_render_greeting),
                route=RouteSpec(
                    method="GET",
                    path="/greeting/{name}",
                    tag="Greetings",
                    summary="Generate a greeting",
                ),
            )
        )
        registry.register(
            Operation(
                name="get_node_stats",
                title="Get Node Statistics",
                description="Retrieves current node statistics and status information",
                input_model=NoInput,
                output_model=NodeStats,
                handler=lambda _params: node_stats(context),
                tool=ToolSpec(render=_render_stats),
                route=RouteSpec(
                    method="GET",
                    path="/stats",
                    tag="System",
                    summary="Get node statistics",
                    envelope="data",
                ),
            )
        )
        registry.register(
            Operation(
                name="echo_message",
                title="Echo Message",
                description="Echoes back a message with additional metadata and transformations",
                input_model=EchoInput,
                output_model=EchoOutput,
                handler=lambda params: echo(params.message),
                tool=ToolSpec(render=_render_echo),
                route=RouteSpec(
                    method="POST",
                    path="/echo",
                    tag="Utilities",
                    summary="Echo a message",
                    envelope="data",
                ),
            )
        )
        registry.register(
            Operation(
                name="health_check",
                title="Health Check",
                description="Simple health check endpoint for the plugin",
                input_model=NoInput,
                output_model=HealthStatus,
                handler=lambda _params: health(),
                route=RouteSpec(
                    method="GET",
                    path="/health",
                    tag="System",
                    summary="Health check",
                ),
            )
        )
