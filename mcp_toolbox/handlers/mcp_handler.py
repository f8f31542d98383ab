"""MCP request handlers for tools/list and tools/call."""

import logging

from mcp import types
from mcp.server.lowlevel import Server

from mcp_toolbox.handlers import to_json
from mcp_toolbox.services.dispatcher.dispatcher import ToolDispatcher
from mcp_toolbox.services.dispatcher.dto import ToolCallFailure

logger = logging.getLogger(__name__)


def register(server: Server, dispatcher: ToolDispatcher) -> None:
    """Register tool handlers on a low-level MCP server."""

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [definition.to_mcp_tool() for definition in dispatcher.list_tools()]

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        # Registered as a raw request handler so failures reach the caller
        # as JSON-RPC errors with their own codes
        name = request.params.name
        result = await dispatcher.call_tool(name, request.params.arguments)

        if isinstance(result, ToolCallFailure):
            raise dispatcher.translator.to_mcp_error(result)

        logger.debug(f"Returning result of {name}")
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=to_json(result.payload))],
            )
        )

    server.request_handlers[types.CallToolRequest] = call_tool
