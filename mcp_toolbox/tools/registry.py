"""Tool registry mapping tool names to their handlers."""

import logging

from mcp_toolbox.config import Settings
from mcp_toolbox.errors import DuplicateToolNameError, RegistryFrozenError
from mcp_toolbox.tools.base import BaseTool
from mcp_toolbox.tools.schema import ToolDefinition

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Registry of tools, filled during startup and read-only afterwards.

    Registration order is preserved and is the order reported by
    ``list_definitions``. There is no removal operation.
    """

    def __init__(self):
        self._tools: dict[str, BaseTool] = {}
        self._frozen = False

    def register(self, tool: BaseTool) -> None:
        """
        Register a tool under its name.

        Raises:
            DuplicateToolNameError: If a tool with the same name exists
            RegistryFrozenError: If the registry has been frozen
        """
        if self._frozen:
            raise RegistryFrozenError(tool.name)
        if tool.name in self._tools:
            raise DuplicateToolNameError(tool.name)
        self._tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name}")

    def freeze(self) -> None:
        """Forbid further registrations."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get_tool(self, name: str) -> BaseTool | None:
        return self._tools.get(name)

    def list_definitions(self) -> list[ToolDefinition]:
        return [tool.definition for tool in self._tools.values()]

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def build_default_registry(settings: Settings) -> ToolRegistry:
    """
    Build and freeze the registry holding the bundled tools.

    Args:
        settings: Settings providing the file tool allow-list

    Returns:
        Frozen ToolRegistry
    """
    # Import tools here so the registry module stays free of tool imports
    from mcp_toolbox.tools.calculator import CalculatorTool
    from mcp_toolbox.tools.file_operations import FileOperationsTool
    from mcp_toolbox.tools.weather import WeatherTool

    registry = ToolRegistry()
    for tool in (
        CalculatorTool(),
        WeatherTool(),
        FileOperationsTool(settings.resolved_allowed_directories()),
    ):
        registry.register(tool)
    registry.freeze()

    logger.info(f"Loaded {len(registry)} tools: {registry.tool_names}")
    return registry


# Global registry instance (initialized at startup)
_registry: ToolRegistry | None = None


def init_tool_registry(settings: Settings) -> ToolRegistry:
    """
    Initialize the global tool registry.

    Args:
        settings: Application settings

    Returns:
        Initialized ToolRegistry
    """
    global _registry
    _registry = build_default_registry(settings)
    return _registry


def get_tool_registry() -> ToolRegistry:
    """
    Get the global tool registry.

    Raises:
        RuntimeError: If registry not initialized
    """
    if _registry is None:
        raise RuntimeError("Tool registry not initialized. Call init_tool_registry first.")
    return _registry
