"""Built-in knowledge-asset gateway plugin (``publishnote``).

Thin pass-through to the host's knowledge-graph client: publish JSON-LD as
a Knowledge Asset, fetch one by UAL, run a read-only graph query. The
gateway owns no state; every call is one round trip to the client.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Literal

import pluggy
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dkgctl.config.models import PublishConfig
from dkgctl.dispatch import InvalidInput, Operation, RouteSpec, ToolSpec
from dkgctl.services._helpers import resolve

if TYPE_CHECKING:
    from dkgctl.dispatch.registry import OperationRegistry
    from dkgctl.plugins.context import GraphClient, PluginContext

hookimpl = pluggy.HookimplMarker("dkgctl")

logger = logging.getLogger(__name__)

PLUGIN_ID = "publishnote"
CREATED_MESSAGE = "Knowledge Asset successfully created and published"
INVALID_JSON_MESSAGE = "Invalid JSON-LD: Content must be valid JSON"

Privacy = Literal["public", "private"]


class PublishInput(BaseModel):
    content: str = Field(description="JSON-LD content as a string")
    privacy: Privacy = Field(default="public", description="Privacy setting for the Knowledge Asset")


class PublishOutput(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ual: str
    explorer_link: str
    message: str


class FetchInput(BaseModel):
    ual: str = Field(description="Universal Asset Locator (UAL) of the Knowledge Asset")


class FetchOutput(BaseModel):
    ual: str
    content: Any


class QueryInput(BaseModel):
    query: str = Field(description="SPARQL query")


class QueryOutput(BaseModel):
    results: Any


class KnowledgeAssetGateway:
    """Knowledge Asset operations over an injected graph client.

    Args:
        client: The knowledge-graph client; its methods may be sync or async.
        config: Retention policy, explorer URL and query type.
    """

    def __init__(self, client: GraphClient, config: PublishConfig | None = None) -> None:
        self._client = client
        self._config = config or PublishConfig()

    def epochs_for(self, privacy: Privacy) -> int:
        """Retention in epochs: public assets live longer than private ones."""
        if privacy == "public":
            return self._config.public_epochs
        return self._config.private_epochs

    def explorer_link(self, ual: str) -> str:
        return f"{self._config.explorer_url}{ual}"

    async def create_asset(self, params: PublishInput) -> PublishOutput:
        try:
            document = json.loads(params.content, parse_constant=_reject_constant)
        except ValueError as exc:
            raise InvalidInput(INVALID_JSON_MESSAGE) from exc

        result = await resolve(
            self._client.asset.create(
                {"public": document},
                {
                    "epochs_num": self.epochs_for(params.privacy),
                    "immutable": self._config.immutable,
                },
            )
        )
        ual = _field(result, "UAL")
        if not ual:
            msg = "Knowledge graph client returned no UAL"
            raise RuntimeError(msg)

        logger.info("Created Knowledge Asset %s", ual)
        return PublishOutput(ual=ual, explorer_link=self.explorer_link(ual), message=CREATED_MESSAGE)

    async def get_asset(self, params: FetchInput) -> FetchOutput:
        result = await resolve(self._client.asset.get(params.ual))
        public = _field(result, "public")
        return FetchOutput(ual=params.ual, content=public if public is not None else result)

    async def query_graph(self, params: QueryInput) -> QueryOutput:
        results = await resolve(self._client.graph.query(params.query, self._config.query_type))
        return QueryOutput(results=results)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON.
    msg = f"Invalid JSON constant: {name}"
    raise ValueError(msg)


def _field(result: Any, name: str) -> Any:
    """Read *name* from a client response that may be a mapping or an object."""
    if isinstance(result, Mapping):
        return result.get(name)
    return getattr(result, name, None)


def _render_created(data: dict[str, Any]) -> str:
    return (
        "Knowledge Asset created successfully!\n"
        f"UAL: {data['ual']}\n"
        f"Explorer: {data['explorerLink']}"
    )


def _render_fetched(data: dict[str, Any]) -> str:
    return f"Knowledge Asset retrieved:\n{json.dumps(data['content'], indent=2, ensure_ascii=False)}"


def register_gateway(registry: OperationRegistry, gateway: KnowledgeAssetGateway) -> None:
    """Register the gateway's three operations on *registry*."""
    registry.register(
        Operation(
            name="publish_note",
            title="Publish Note to DKG",
            description="Publishes JSON-LD content as a Knowledge Asset to the DKG and returns its UAL",
            input_model=PublishInput,
            output_model=PublishOutput,
            handler=gateway.create_asset,
            tool=ToolSpec(render=_render_created, error_prefix="Error creating Knowledge Asset"),
            route=RouteSpec(
                method="POST",
                path="/publishnote/create",
                tag="Publish Note",
                summary="Create Knowledge Asset",
            ),
            failure_message="Failed to create Knowledge Asset",
        )
    )
    registry.register(
        Operation(
            name="get_published_note",
            title="Get Published Note",
            description="Retrieves a Knowledge Asset from the DKG using its UAL",
            input_model=FetchInput,
            output_model=FetchOutput,
            handler=gateway.get_asset,
            tool=ToolSpec(render=_render_fetched, error_prefix="Error fetching Knowledge Asset"),
            route=RouteSpec(
                method="GET",
                path="/publishnote/get/{ual:path}",
                tag="Publish Note",
                summary="Get Knowledge Asset",
            ),
            failure_message="Failed to fetch Knowledge Asset",
        )
    )
    registry.register(
        Operation(
            name="query_graph",
            title="Query Knowledge Assets",
            description="Query Knowledge Assets using SPARQL",
            input_model=QueryInput,
            output_model=QueryOutput,
            handler=gateway.query_graph,
            route=RouteSpec(
                method="POST",
                path="/publishnote/query",
                tag="Publish Note",
                summary="Query Knowledge Assets",
            ),
            failure_message="Failed to query Knowledge Assets",
        )
    )


class PublishNotePlugin:
    """Registers the gateway when the host has a graph client."""

    @hookimpl
    def register_operations(self, registry: OperationRegistry, context: PluginContext) -> None:
        if context.graph is None:
            logger.warning("publishnote disabled: no knowledge graph client configured")
            return
        register_gateway(registry, KnowledgeAssetGateway(context.graph, context.settings.publish))
