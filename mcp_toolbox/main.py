"""Entry point: build the tool registry and serve it over MCP."""

import asyncio
import logging
import signal

from mcp_toolbox.config import Settings, get_settings
from mcp_toolbox.server import create_dispatcher, create_http_app, create_server, run_stdio
from mcp_toolbox.tools.registry import init_tool_registry

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    # Logs go to stderr; stdout carries the stdio transport
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _raise_keyboard_interrupt(signum, frame):
    raise KeyboardInterrupt


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info(f"Starting {settings.server_name} {settings.server_version}...")

    try:
        registry = init_tool_registry(settings)
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        raise SystemExit(1)

    dispatcher = create_dispatcher(settings, registry)
    server = create_server(settings, dispatcher)

    if settings.transport == "http":
        import uvicorn

        app = create_http_app(server, dispatcher)
        uvicorn.run(app, host=settings.http_host, port=settings.http_port)
        return

    # SIGTERM takes the same path as Ctrl-C so the transport is closed
    signal.signal(signal.SIGTERM, _raise_keyboard_interrupt)
    try:
        asyncio.run(run_stdio(server))
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    logger.info("Shutdown complete")


if __name__ == "__main__":
    main()
