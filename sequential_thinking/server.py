#!/usr/bin/env python3
"""
Sequential Thinking MCP Server using FastMCP
Registers the sequential_thinking tool backed by a SequentialThinkingHandler.
"""

import logging
from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from pydantic import Field

from sequential_thinking.config import ServerSettings, get_settings
from sequential_thinking.exceptions import UnknownToolError
from sequential_thinking.handler import (
    NEXT_MOVE_DESCRIPTION,
    THOUGHT_DESCRIPTION,
    TOOL_DESCRIPTION,
    TOOL_NAME,
    SequentialThinkingHandler,
)

logger = logging.getLogger(__name__)


class ToolCallMiddleware(Middleware):
    """Logs tool calls and rejects names the handler does not expose."""

    def __init__(self, handler: SequentialThinkingHandler) -> None:
        self.handler = handler

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        name = context.message.name
        try:
            self.handler.get_tool(name)
        except UnknownToolError as e:
            raise ToolError(str(e)) from e
        logger.info("Tool call: %s", name)
        return await call_next(context)


def create_mcp_server(
    handler: Optional[SequentialThinkingHandler] = None,
    settings: Optional[ServerSettings] = None,
) -> FastMCP:
    """
    Build a FastMCP server exposing the sequential_thinking tool.

    Each call creates an independent server; pass a handler to share or
    inspect its ThoughtLog.
    """
    handler = handler or SequentialThinkingHandler()
    settings = settings or get_settings()

    mcp = FastMCP(settings.service_name)
    mcp.add_middleware(ToolCallMiddleware(handler))

    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def sequential_thinking(
        thought: Annotated[str, Field(description=THOUGHT_DESCRIPTION)],
        nextMove: Annotated[str, Field(description=NEXT_MOVE_DESCRIPTION)],  # noqa: N803
    ) -> str:
        return handler.record(thought, nextMove).to_text()

    return mcp


if __name__ == "__main__":
    create_mcp_server().run()
