"""MCP server assembly and transports (stdio and Streamable HTTP)."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from mcp_toolbox.config import Settings
from mcp_toolbox.handlers import http_handler, mcp_handler
from mcp_toolbox.services.dispatcher.dispatcher import ToolDispatcher
from mcp_toolbox.services.error_translator.error_translator import ErrorTranslator
from mcp_toolbox.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def create_dispatcher(settings: Settings, registry: ToolRegistry) -> ToolDispatcher:
    translator = ErrorTranslator(redact_internal_errors=settings.redact_internal_errors)
    return ToolDispatcher(registry, translator)


def create_server(settings: Settings, dispatcher: ToolDispatcher) -> Server:
    """Create a low-level MCP server exposing the dispatcher's tools."""
    server = Server(settings.server_name, version=settings.server_version)
    mcp_handler.register(server, dispatcher)
    return server


async def run_stdio(server: Server) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
    logger.info("stdio transport closed")


def create_http_app(server: Server, dispatcher: ToolDispatcher) -> FastAPI:
    """
    Build a FastAPI app serving MCP over Streamable HTTP at ``/mcp``.

    The app also exposes ``/health`` and a REST view of the tools.
    """
    session_manager = StreamableHTTPSessionManager(
        app=server,
        json_response=True,
        stateless=True,
    )

    async def handle_streamable_http(scope, receive, send):
        await session_manager.handle_request(scope, receive, send)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting MCP HTTP transport...")
        async with session_manager.run():
            yield
        logger.info("MCP HTTP transport stopped")

    app = FastAPI(
        title="MCP Toolbox",
        description="MCP tool server",
        lifespan=lifespan,
    )
    app.state.dispatcher = dispatcher
    app.mount("/mcp", app=handle_streamable_http)
    http_handler.setup_routes(app)
    return app
