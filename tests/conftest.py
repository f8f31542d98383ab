from pathlib import Path
from typing import Any

import pytest

from mcp_toolbox.config import Settings
from mcp_toolbox.errors import ToolValidationError
from mcp_toolbox.server import create_dispatcher
from mcp_toolbox.services.dispatcher.dispatcher import ToolDispatcher
from mcp_toolbox.tools.base import BaseTool
from mcp_toolbox.tools.registry import ToolRegistry, build_default_registry
from mcp_toolbox.tools.schema import FieldSpec, FieldType, InputSchema


@pytest.fixture
def sandbox(tmp_path: Path) -> Path:
    root = tmp_path / "sandbox"
    root.mkdir()
    return root


@pytest.fixture
def settings(sandbox: Path) -> Settings:
    return Settings(_env_file=None, allowed_directories=[sandbox])


@pytest.fixture
def registry(settings: Settings) -> ToolRegistry:
    return build_default_registry(settings)


@pytest.fixture
def dispatcher(settings: Settings, registry: ToolRegistry) -> ToolDispatcher:
    return create_dispatcher(settings, registry)


class EchoTool(BaseTool[dict]):
    """Returns its validated arguments unchanged."""

    name = "echo"
    description = "Echo arguments back"
    input_schema = InputSchema(
        fields=(FieldSpec("text", FieldType.STRING, required=True),)
    )

    def parse_input(self, values: dict[str, Any]) -> dict:
        return values

    async def run(self, params: dict) -> dict:
        return params


class ExplodingTool(BaseTool[dict]):
    """Fails with an unexpected exception, or a validation error on request."""

    name = "explode"
    description = "Always fails"
    input_schema = InputSchema(
        fields=(FieldSpec("validation", FieldType.BOOLEAN, default=False),)
    )

    def __init__(self, exc: Exception | None = None):
        self.exc = exc or RuntimeError("disk on fire at /var/lib/secret")

    def parse_input(self, values: dict[str, Any]) -> dict:
        return values

    async def run(self, params: dict) -> Any:
        if params["validation"]:
            raise ToolValidationError("bad input")
        raise self.exc


class FixedPayloadTool(BaseTool[dict]):
    """Returns the payload it was built with."""

    description = "Returns a fixed payload"
    input_schema = InputSchema()

    def __init__(self, name: str, payload: Any):
        self.name = name
        self.payload = payload

    def parse_input(self, values: dict[str, Any]) -> dict:
        return values

    async def run(self, params: dict) -> Any:
        return self.payload
