"""Base class for MCP tools."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from mcp_toolbox.tools.schema import InputSchema, ToolDefinition

InputT = TypeVar("InputT")


class BaseTool(ABC, Generic[InputT]):
    """
    Abstract base class for tools served by the dispatcher.

    Each tool is defined in its own module with:
    - name: Unique identifier for the tool
    - description: Human-readable description shown to the caller
    - input_schema: Declared fields used for validation and tools/list
    - parse_input: Builds the tool's typed input from validated arguments
    - run: Async method doing the actual work
    """

    name: str
    description: str
    input_schema: InputSchema

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema,
        )

    async def execute(self, arguments: dict[str, Any] | None) -> Any:
        """
        Validate raw arguments and run the tool.

        Args:
            arguments: Untyped argument mapping from the caller

        Returns:
            JSON-serializable tool output

        Raises:
            ToolValidationError: If the arguments are invalid
        """
        values = self.input_schema.validate(arguments)
        params = self.parse_input(values)
        return await self.run(params)

    @abstractmethod
    def parse_input(self, values: dict[str, Any]) -> InputT:
        """Convert schema-validated values into the typed input and apply
        tool-specific checks."""
        pass

    @abstractmethod
    async def run(self, params: InputT) -> Any:
        pass

    def __repr__(self) -> str:
        return f"<Tool: {self.name}>"
