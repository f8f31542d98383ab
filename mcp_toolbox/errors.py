"""Error taxonomy and exceptions raised by tools and the registry."""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds a tool call can end with."""

    METHOD_NOT_FOUND = "method_not_found"
    INVALID_PARAMS = "invalid_params"
    INTERNAL_ERROR = "internal_error"


class ToolError(Exception):
    """Base class for errors raised inside the tool layer."""


class ToolNotFoundError(ToolError):
    """Requested tool name is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolValidationError(ToolError):
    """Tool arguments failed presence, type, enum or semantic validation."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ResourceNotFoundError(ToolValidationError):
    """A tool was pointed at a resource that does not exist."""


class RegistryError(ToolError):
    """Registry misconfiguration detected at startup."""


class DuplicateToolNameError(RegistryError):
    def __init__(self, name: str):
        super().__init__(f"Tool already registered: {name}")
        self.name = name


class RegistryFrozenError(RegistryError):
    def __init__(self, name: str):
        super().__init__(f"Registry is frozen, cannot register tool: {name}")
        self.name = name
