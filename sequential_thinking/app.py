"""
HTTP application hosting the sequential thinking MCP server.

FastAPI serves the health probe and service description document; the
FastMCP transport app is mounted at the root and handles the MCP stream.
"""

import logging
from typing import Any, Dict, Optional

import fastmcp
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sequential_thinking.config import ServerSettings, get_settings
from sequential_thinking.handler import SequentialThinkingHandler
from sequential_thinking.server import create_mcp_server

logger = logging.getLogger(__name__)


def _endpoints(settings: ServerSettings) -> Dict[str, str]:
    if settings.transport == "sse":
        return {
            "sse": settings.sse_path,
            "message": fastmcp.settings.message_path,
            "health": "/health",
        }
    return {"mcp": settings.http_path, "health": "/health"}


def create_app(
    settings: Optional[ServerSettings] = None,
    handler: Optional[SequentialThinkingHandler] = None,
) -> FastAPI:
    """Create the FastAPI app with the MCP transport mounted."""
    settings = settings or get_settings()
    mcp = create_mcp_server(handler=handler, settings=settings)

    if settings.transport == "sse":
        mcp_app = mcp.http_app(path=settings.sse_path, transport="sse")
    else:
        mcp_app = mcp.http_app(path=settings.http_path, transport="http")

    endpoints = _endpoints(settings)
    logger.info(f"MCP transport '{settings.transport}' with endpoints {endpoints}")

    app = FastAPI(
        title=settings.app_name,
        description="MCP server exposing the sequential_thinking tool",
        version=settings.version,
        lifespan=mcp_app.lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {"status": "ok", "service": f"{settings.service_name}-{settings.transport}"}

    @app.get("/")
    async def root() -> Dict[str, Any]:
        return {
            "service": settings.app_name,
            "version": settings.version,
            "endpoints": endpoints,
        }

    # Mounted last so the routes above take precedence
    app.mount("/", mcp_app)
    return app
