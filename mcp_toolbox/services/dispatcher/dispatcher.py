"""Tool dispatcher - resolves calls against the registry and wraps outcomes."""

import json
import logging
from typing import Any

from mcp_toolbox.errors import ErrorKind, ToolNotFoundError
from mcp_toolbox.services.dispatcher.dto import (
    ToolCallFailure,
    ToolCallRequest,
    ToolCallResult,
    ToolCallSuccess,
)
from mcp_toolbox.services.error_translator.error_translator import ErrorTranslator
from mcp_toolbox.tools.registry import ToolRegistry
from mcp_toolbox.tools.schema import ToolDefinition

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """
    Executes tool calls and turns every outcome into a ``ToolCallResult``.

    No exception raised by a tool escapes ``call_tool``: validation failures
    become INVALID_PARAMS, unknown names METHOD_NOT_FOUND and anything else
    INTERNAL_ERROR. A payload that cannot be encoded as JSON is an
    INTERNAL_ERROR as well.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        translator: ErrorTranslator | None = None,
    ):
        self.registry = registry
        self.translator = translator or ErrorTranslator()

    def list_tools(self) -> list[ToolDefinition]:
        return self.registry.list_definitions()

    async def call_tool(
        self,
        name: str,
        arguments: dict[str, Any] | None = None,
    ) -> ToolCallResult:
        """
        Execute a tool by name.

        Args:
            name: Tool name
            arguments: Raw, unvalidated tool arguments

        Returns:
            ToolCallSuccess with the tool payload, or ToolCallFailure
        """
        tool = self.registry.get_tool(name)
        if tool is None:
            logger.warning(f"Unknown tool requested: {name}")
            return self.translator.classify(ToolNotFoundError(name))

        logger.info(f"Executing tool {name}")
        try:
            payload = await tool.execute(arguments)
            # every transport sends the payload as JSON; allow_nan=False keeps
            # non-finite floats out
            json.dumps(payload, allow_nan=False)
        except Exception as e:
            failure = self.translator.classify(e)
            self._log_failure(name, failure, e)
            return failure

        logger.debug(f"Tool {name} completed")
        return ToolCallSuccess(payload)

    async def dispatch(self, request: ToolCallRequest) -> ToolCallResult:
        return await self.call_tool(request.name, request.arguments)

    def _log_failure(self, name: str, failure: ToolCallFailure, exc: Exception) -> None:
        if failure.kind is ErrorKind.INTERNAL_ERROR:
            logger.exception(f"Tool {name} failed: {exc}")
        else:
            logger.warning(f"Tool {name} rejected arguments: {failure.message}")
