"""Example MCP client - spawns the server over stdio and exercises every tool."""

import asyncio
import json
import logging
import os
import sys
import tempfile
from typing import Any

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from mcp.shared.exceptions import McpError

logger = logging.getLogger(__name__)


class ExampleClient:
    """Thin wrapper around an initialized MCP client session."""

    def __init__(self, session: ClientSession):
        self.session = session

    async def call(self, name: str, arguments: dict[str, Any]) -> Any:
        """
        Call a tool and decode its JSON text content.

        Raises:
            McpError: If the server answers with a JSON-RPC error
        """
        result = await self.session.call_tool(name, arguments)
        if result.content and hasattr(result.content[0], "text"):
            try:
                return json.loads(result.content[0].text)
            except json.JSONDecodeError:
                return result.content[0].text
        return {"result": str(result)}

    async def list_tools(self) -> None:
        print("=== Available Tools ===")
        result = await self.session.list_tools()
        for tool in result.tools:
            print(f"\nTool: {tool.name}")
            print(f"Description: {tool.description}")
            print(f"Input Schema: {json.dumps(tool.inputSchema, indent=2)}")
        print()

    async def calculator_examples(self) -> None:
        print("=== Calculator Tool Example ===")
        for label, args in (
            ("Addition: 15 + 7", {"operation": "add", "a": 15, "b": 7}),
            ("Multiplication: 8 * 9", {"operation": "multiply", "a": 8, "b": 9}),
            ("Square root: sqrt(144)", {"operation": "sqrt", "a": 144}),
        ):
            print(f"\n{label}")
            print("Result:", await self.call("calculator", args))
        print()

    async def weather_examples(self) -> None:
        print("=== Weather Tool Example ===")
        for location, units in (("San Francisco", "celsius"), ("New York", "fahrenheit")):
            print(f"\nWeather in {location} ({units})")
            result = await self.call("weather", {"location": location, "units": units})
            print("Result:", json.dumps(result, indent=2))
        print()

    async def file_examples(self, path: str) -> None:
        print("=== File Operations Tool Example ===")
        steps = (
            ("Writing file", {"operation": "write", "path": path, "content": "Hello from MCP Server!"}),
            ("Checking if file exists", {"operation": "exists", "path": path}),
            ("Reading file", {"operation": "read", "path": path}),
            ("Deleting file", {"operation": "delete", "path": path}),
        )
        for label, args in steps:
            print(f"\n{label}: {path}")
            print("Result:", await self.call("file_operations", args))
        print()

    async def error_examples(self, missing_path: str) -> None:
        print("=== Error Handling Example ===")
        for label, name, args in (
            ("Attempting division by zero", "calculator", {"operation": "divide", "a": 10, "b": 0}),
            ("Attempting to read non-existent file", "file_operations", {"operation": "read", "path": missing_path}),
            ("Calling an unknown tool", "does_not_exist", {}),
        ):
            print(f"\n{label}")
            try:
                await self.call(name, args)
            except McpError as e:
                print(f"Error caught ({e.error.code}): {e.error.message}")
        print()


async def run_examples() -> None:
    params = StdioServerParameters(
        command=sys.executable,
        args=["-m", "mcp_toolbox"],
        env=dict(os.environ),
    )
    tmp = tempfile.gettempdir()

    async with stdio_client(params) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()
            logger.info("Connected to MCP server")

            client = ExampleClient(session)
            await client.list_tools()
            await client.calculator_examples()
            await client.weather_examples()
            await client.file_examples(os.path.join(tmp, "mcp-test.txt"))
            await client.error_examples(os.path.join(tmp, "does-not-exist.txt"))

    logger.info("Disconnected from MCP server")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        asyncio.run(run_examples())
    except Exception as e:
        logger.error(f"Client error: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
