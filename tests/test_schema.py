import math

import pytest

from mcp_toolbox.errors import ToolValidationError
from mcp_toolbox.tools.schema import FieldSpec, FieldType, InputSchema, ToolDefinition

SCHEMA = InputSchema(
    fields=(
        FieldSpec("operation", FieldType.ENUM, required=True, values=("add", "sqrt")),
        FieldSpec("a", FieldType.NUMBER, required=True),
        FieldSpec("label", FieldType.STRING),
        FieldSpec("verbose", FieldType.BOOLEAN, default=False),
    )
)


def _error(arguments) -> ToolValidationError:
    with pytest.raises(ToolValidationError) as exc_info:
        SCHEMA.validate(arguments)
    return exc_info.value


def test_missing_required_field():
    err = _error({"operation": "add"})
    assert err.message == "a is required"
    assert err.field == "a"


def test_first_violation_in_declared_order_wins():
    # operation has a bad type, a is missing: operation is declared first
    assert _error({"operation": 3}).message == "operation must be a string"
    # operation missing, a has the wrong type
    assert _error({"a": "x"}).message == "operation is required"


def test_type_is_checked_before_enum():
    assert _error({"operation": "mul", "a": 1}).message == (
        "operation must be one of: add, sqrt"
    )
    assert _error({"operation": ["add"], "a": 1}).message == "operation must be a string"


@pytest.mark.parametrize("value", [True, "1", None, [], math.nan])
def test_number_rejects_non_numbers(value):
    if value is None:
        assert _error({"operation": "add", "a": value}).message == "a is required"
    else:
        assert _error({"operation": "add", "a": value}).message == "a must be a number"


def test_boolean_and_string_types():
    assert _error({"operation": "add", "a": 1, "verbose": "yes"}).message == (
        "verbose must be a boolean"
    )
    assert _error({"operation": "add", "a": 1, "label": 5}).message == (
        "label must be a string"
    )


def test_defaults_applied_and_unknown_fields_dropped():
    values = SCHEMA.validate({"operation": "sqrt", "a": 2.5, "extra": "ignored"})
    assert values == {"operation": "sqrt", "a": 2.5, "verbose": False}


def test_none_arguments_are_treated_as_empty():
    with pytest.raises(ToolValidationError, match="operation is required"):
        SCHEMA.validate(None)


def test_non_mapping_arguments_rejected():
    with pytest.raises(ToolValidationError, match="arguments must be an object"):
        SCHEMA.validate(["add", 1])


def test_json_schema_rendering():
    schema = SCHEMA.to_json_schema()
    assert schema["type"] == "object"
    assert schema["required"] == ["operation", "a"]
    assert list(schema["properties"]) == ["operation", "a", "label", "verbose"]
    assert schema["properties"]["operation"] == {"type": "string", "enum": ["add", "sqrt"]}
    assert schema["properties"]["verbose"] == {"type": "boolean", "default": False}


def test_invalid_schema_declarations():
    with pytest.raises(ValueError):
        FieldSpec("units", FieldType.ENUM)
    with pytest.raises(ValueError):
        FieldSpec("a", FieldType.NUMBER, values=("1",))
    with pytest.raises(ValueError):
        InputSchema(fields=(FieldSpec("a", FieldType.NUMBER), FieldSpec("a", FieldType.STRING)))


def test_tool_definition_renders_mcp_tool():
    definition = ToolDefinition("calc", "Does math", SCHEMA)
    tool = definition.to_mcp_tool()
    assert tool.name == "calc"
    assert tool.description == "Does math"
    assert tool.inputSchema == SCHEMA.to_json_schema()
    assert definition.to_dict()["inputSchema"]["required"] == ["operation", "a"]
