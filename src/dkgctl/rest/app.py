"""FastAPI application serving the REST surface.

    Client Request
         |
         v
    FastAPI route (rest/routes.py)   -- merges path / query / body
         |
         v
    OperationRegistry.execute()      -- validates, runs the plugin handler
         |
         v
    {"success": true, ...} | {"success": false, "error": ...}

Running:
    dkgctl api --host 0.0.0.0 --port 9200
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dkgctl import __version__
from dkgctl.rest.routes import error_response, register_routes

if TYPE_CHECKING:
    from dkgctl.config.settings import DkgSettings
    from dkgctl.dispatch.registry import OperationRegistry

logger = logging.getLogger(__name__)


def create_app(
    settings: DkgSettings,
    *,
    registry: OperationRegistry | None = None,
    graph_client: Any | None = None,
) -> FastAPI:
    """Build the REST application.

    Loads plugins through :func:`dkgctl.host.build_registry` unless a
    ready *registry* is passed.
    """
    if registry is None:
        from dkgctl.host import build_registry

        registry = build_registry(settings, graph_client=graph_client)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Starting dkgctl API with %d routes", len(registry.routes()))
        yield
        logger.info("Shutting down dkgctl API")

    app = FastAPI(
        title="dkgctl",
        description="DKG node plugin API: utility and Knowledge Asset operations",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(str(exc.detail), exc.status_code)

    router = APIRouter()
    register_routes(router, registry)
    app.include_router(router, prefix=settings.api.prefix)
    app.state.registry = registry
    return app
