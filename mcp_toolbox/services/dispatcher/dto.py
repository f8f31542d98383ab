"""DTOs for the tool dispatcher."""

from dataclasses import dataclass
from typing import Any

from mcp_toolbox.errors import ErrorKind


@dataclass(frozen=True)
class ToolCallRequest:
    name: str
    arguments: dict[str, Any] | None = None


@dataclass(frozen=True)
class ToolCallSuccess:
    payload: Any


@dataclass(frozen=True)
class ToolCallFailure:
    kind: ErrorKind
    message: str

    def __post_init__(self):
        if not self.message:
            raise ValueError("Failure message must not be empty")


ToolCallResult = ToolCallSuccess | ToolCallFailure
