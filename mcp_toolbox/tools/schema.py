"""Declarative tool definitions and the shared argument validator.

A tool declares its inputs as an ordered tuple of ``FieldSpec``. The
``InputSchema`` built from them is used twice: rendered to JSON Schema for
``tools/list`` and applied to the raw wire arguments before a tool runs.

Validation visits fields in declared order and, for each field, checks
presence, then type, then enum membership. The first violation wins.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from mcp import types

from mcp_toolbox.errors import ToolValidationError


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"


_MISSING = object()


@dataclass(frozen=True)
class FieldSpec:
    """One named input of a tool."""

    name: str
    type: FieldType
    description: str = ""
    required: bool = False
    default: Any = _MISSING
    values: tuple[str, ...] = ()

    def __post_init__(self):
        if self.type is FieldType.ENUM and not self.values:
            raise ValueError(f"Enum field '{self.name}' needs at least one value")
        if self.type is not FieldType.ENUM and self.values:
            raise ValueError(f"Only enum fields take values: '{self.name}'")

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING

    def check(self, value: Any) -> None:
        """Check type and enum membership of a present value."""
        if self.type is FieldType.NUMBER:
            if not _is_number(value):
                raise ToolValidationError(f"{self.name} must be a number", self.name)
        elif self.type is FieldType.BOOLEAN:
            if not isinstance(value, bool):
                raise ToolValidationError(f"{self.name} must be a boolean", self.name)
        elif not isinstance(value, str):
            # enum values are strings on the wire
            raise ToolValidationError(f"{self.name} must be a string", self.name)

        if self.type is FieldType.ENUM and value not in self.values:
            raise ToolValidationError(
                f"{self.name} must be one of: {', '.join(self.values)}",
                self.name,
            )

    def to_json_schema(self) -> dict[str, Any]:
        if self.type is FieldType.ENUM:
            prop: dict[str, Any] = {"type": "string", "enum": list(self.values)}
        else:
            prop = {"type": self.type.value}
        if self.description:
            prop["description"] = self.description
        if self.has_default:
            prop["default"] = self.default
        return prop


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


@dataclass(frozen=True)
class InputSchema:
    """Ordered set of fields accepted by a tool."""

    fields: tuple[FieldSpec, ...] = ()

    def __post_init__(self):
        names = [f.name for f in self.fields]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate field names in schema: {names}")

    def validate(self, arguments: Any) -> dict[str, Any]:
        """
        Validate raw call arguments against the schema.

        Args:
            arguments: Untyped mapping received from the caller (None = empty)

        Returns:
            Declared fields only, with defaults applied to absent optionals

        Raises:
            ToolValidationError: On the first violation in declared field order
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise ToolValidationError("arguments must be an object")

        values: dict[str, Any] = {}
        for spec in self.fields:
            value = arguments.get(spec.name)
            if value is None:
                if spec.required:
                    raise ToolValidationError(f"{spec.name} is required", spec.name)
                if spec.has_default:
                    values[spec.name] = spec.default
                continue
            spec.check(value)
            values[spec.name] = value
        return values

    def to_json_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {f.name: f.to_json_schema() for f in self.fields},
            "required": [f.name for f in self.fields if f.required],
        }


@dataclass(frozen=True)
class ToolDefinition:
    """Static descriptor of a tool, as reported by tools/list."""

    name: str
    description: str
    input_schema: InputSchema = field(default_factory=InputSchema)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema.to_json_schema(),
        }

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema.to_json_schema(),
        )
