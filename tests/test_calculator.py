import pytest

from mcp_toolbox.errors import ErrorKind
from mcp_toolbox.services.dispatcher.dto import ToolCallFailure, ToolCallSuccess


async def _call(dispatcher, **arguments):
    return await dispatcher.call_tool("calculator", arguments)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "arguments, expected",
    [
        ({"operation": "add", "a": 15, "b": 7}, 22),
        ({"operation": "subtract", "a": 10, "b": 4}, 6),
        ({"operation": "multiply", "a": 8, "b": 9}, 72),
        ({"operation": "divide", "a": 10, "b": 4}, 2.5),
        ({"operation": "power", "a": 2, "b": 10}, 1024),
        ({"operation": "sqrt", "a": 144}, 12),
    ],
)
async def test_operations(dispatcher, arguments, expected):
    result = await _call(dispatcher, **arguments)
    assert isinstance(result, ToolCallSuccess)
    assert result.payload["result"] == expected
    assert result.payload["operation"] == arguments["operation"]


@pytest.mark.asyncio
async def test_inputs_echoed(dispatcher):
    result = await _call(dispatcher, operation="sqrt", a=144)
    assert result.payload["inputs"] == {"a": 144}

    result = await _call(dispatcher, operation="add", a=1, b=2)
    assert result.payload["inputs"] == {"a": 1, "b": 2}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "arguments, message",
    [
        ({"operation": "divide", "a": 10, "b": 0}, "Division by zero is not allowed"),
        ({"operation": "sqrt", "a": -1}, "Cannot calculate square root of negative number"),
        ({"operation": "add", "a": 1}, "b is required for add operation"),
        ({"operation": "modulo", "a": 1, "b": 2}, "operation must be one of: add, subtract, multiply, divide, power, sqrt"),
        ({"a": 1, "b": 2}, "operation is required"),
        ({"operation": "add", "a": "1", "b": 2}, "a must be a number"),
        ({"operation": "add", "a": True, "b": 2}, "a must be a number"),
        ({"operation": "power", "a": -8, "b": 0.5}, "Result of power is not a real number"),
        ({"operation": "power", "a": 10, "b": 400}, "Result of power is too large"),
        ({"operation": "multiply", "a": 1e308, "b": 10}, "Result of multiply is not a finite number"),
    ],
)
async def test_invalid_params(dispatcher, arguments, message):
    result = await _call(dispatcher, **arguments)
    assert isinstance(result, ToolCallFailure)
    assert result.kind is ErrorKind.INVALID_PARAMS
    assert result.message == message


@pytest.mark.asyncio
async def test_type_error_reported_before_missing_operand(dispatcher):
    # b has the wrong type and would also be "required": type check wins
    result = await _call(dispatcher, operation="add", a=1, b="two")
    assert result.message == "b must be a number"
