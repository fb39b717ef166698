"""Server lifecycle and StreamableHTTP wiring for MCP server."""

from __future__ import annotations

import contextlib
from datetime import datetime, timezone
from typing import AsyncIterator

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from taskmaster import __version__
from taskmaster.mcp_server.mcp_server import app, initialize_server, logger
from taskmaster.mcp_server.state import get_components

SERVICE_NAME = "clickup-taskmaster-mcp"

session_manager_http = StreamableHTTPSessionManager(
    app=app,
    event_store=None,
    json_response=False,
    stateless=True,
)


async def handle_streamable_http(scope, receive, send) -> None:
    await session_manager_http.handle_request(scope, receive, send)


async def ping(request: Request) -> JSONResponse:
    return JSONResponse(
        {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": SERVICE_NAME,
        }
    )


async def health(request: Request) -> JSONResponse:
    components = get_components()
    credential_source = components.credentials.source() if components else None
    return JSONResponse(
        {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": __version__,
            "credential_source": credential_source,
        }
    )


@contextlib.asynccontextmanager
async def lifespan(starlette_app) -> AsyncIterator[None]:
    logger.info("Starting StreamableHTTP session manager")
    await initialize_server()
    async with session_manager_http.run():
        logger.info("StreamableHTTP session manager ready")
        yield


starlette_app = Starlette(
    routes=[
        Route("/ping", ping, methods=["GET"]),
        Route("/health", health, methods=["GET"]),
        Mount("/mcp", app=handle_streamable_http),
    ],
    lifespan=lifespan,
)


async def main(host: str = "0.0.0.0", port: int = 8010) -> None:
    import uvicorn

    logger.info("Starting ClickUp MCP server", host=host, port=port)
    config = uvicorn.Config(starlette_app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)
    await server.serve()
