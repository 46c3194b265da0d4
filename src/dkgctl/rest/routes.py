"""REST surface — every operation with a RouteSpec becomes an endpoint.

GET routes read query parameters, POST routes read the JSON body; path
parameters are merged on top. The resulting record goes to the registry,
which validates it against the same input model the MCP tool uses.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from dkgctl.dispatch.operation import Operation
    from dkgctl.dispatch.registry import OperationRegistry

_PATH_PARAM = re.compile(r"\{(\w+)(?::\w+)?\}")

_ERROR_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "success": {"type": "boolean", "const": False},
        "error": {"type": "string"},
    },
    "required": ["success", "error"],
}


class BodyError(ValueError):
    """The request body is not a JSON object."""


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"success": False, "error": message}, status_code=status_code)


async def read_json_body(request: Request) -> dict[str, Any]:
    """Return the JSON object body, ``{}`` for an empty body.

    Raises:
        BodyError: The body is not valid JSON or not an object.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError as exc:
        raise BodyError("Request body must be valid JSON") from exc
    if not isinstance(body, dict):
        raise BodyError("Request body must be a JSON object")
    return body


def openapi_extra(operation: Operation) -> dict[str, Any]:
    """OpenAPI parameters / request body derived from the input model."""
    assert operation.route is not None
    schema = operation.input_model.model_json_schema()
    properties: dict[str, Any] = schema.get("properties", {})
    required = set(schema.get("required", []))
    path_params = set(_PATH_PARAM.findall(operation.route.path))

    extra: dict[str, Any] = {
        "responses": {
            "400": {
                "description": "Invalid input",
                "content": {"application/json": {"schema": _ERROR_SCHEMA}},
            },
            "500": {
                "description": "Downstream failure",
                "content": {"application/json": {"schema": _ERROR_SCHEMA}},
            },
        }
    }

    if operation.route.method == "POST":
        body_props = {k: v for k, v in properties.items() if k not in path_params}
        extra["requestBody"] = {
            "required": bool(required - path_params),
            "content": {
                "application/json": {
                    "schema": {
                        "type": "object",
                        "properties": body_props,
                        "required": sorted(required - path_params),
                    }
                }
            },
        }
        in_url = path_params
    else:
        in_url = set(properties)

    extra["parameters"] = [
        {
            "name": name,
            "in": "path" if name in path_params else "query",
            "required": name in path_params or name in required,
            "description": prop.get("description", ""),
            "schema": {k: v for k, v in prop.items() if k != "description"},
        }
        for name, prop in properties.items()
        if name in in_url
    ]
    return extra


def _make_endpoint(registry: OperationRegistry, operation: Operation) -> Any:
    route = operation.route
    assert route is not None

    async def endpoint(request: Request) -> JSONResponse:
        raw: dict[str, Any]
        if route.method == "POST":
            try:
                raw = await read_json_body(request)
            except BodyError as exc:
                return error_response(str(exc), 400)
        else:
            raw = dict(request.query_params)
        raw.update(request.path_params)

        result = await registry.execute(operation.name, raw)
        if result.ok:
            return JSONResponse(route.wrap(result.data))
        assert result.error is not None
        return error_response(result.error.message, result.error.http_status)

    endpoint.__name__ = operation.name
    return endpoint


def register_routes(router: APIRouter, registry: OperationRegistry) -> list[str]:
    """Add one route per REST-exposed operation. Returns ``"METHOD path"`` keys."""
    added: list[str] = []
    for operation in registry.routes():
        route = operation.route
        assert route is not None
        router.add_api_route(
            route.path,
            _make_endpoint(registry, operation),
            methods=[route.method],
            name=operation.name,
            summary=route.summary,
            description=operation.description,
            tags=[route.tag],
            openapi_extra=openapi_extra(operation),
        )
        added.append(f"{route.method} {route.path}")
    return added
