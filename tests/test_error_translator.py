import pytest
from mcp import types
from mcp.shared.exceptions import McpError

from mcp_toolbox.errors import (
    ErrorKind,
    ResourceNotFoundError,
    ToolNotFoundError,
    ToolValidationError,
)
from mcp_toolbox.services.dispatcher.dto import ToolCallFailure
from mcp_toolbox.services.error_translator.error_translator import ErrorTranslator


@pytest.mark.parametrize(
    "exc, kind",
    [
        (ToolNotFoundError("x"), ErrorKind.METHOD_NOT_FOUND),
        (ToolValidationError("bad"), ErrorKind.INVALID_PARAMS),
        (ResourceNotFoundError("File not found: f"), ErrorKind.INVALID_PARAMS),
        (RuntimeError("boom"), ErrorKind.INTERNAL_ERROR),
    ],
)
def test_classify(exc, kind):
    assert ErrorTranslator().classify(exc).kind is kind


def test_empty_exception_text_uses_class_name():
    failure = ErrorTranslator(redact_internal_errors=False).classify(ZeroDivisionError())
    assert failure.message == "Tool execution failed: ZeroDivisionError"


@pytest.mark.parametrize(
    "kind, code, status",
    [
        (ErrorKind.METHOD_NOT_FOUND, types.METHOD_NOT_FOUND, 404),
        (ErrorKind.INVALID_PARAMS, types.INVALID_PARAMS, 422),
        (ErrorKind.INTERNAL_ERROR, types.INTERNAL_ERROR, 500),
    ],
)
def test_wire_codes(kind, code, status):
    translator = ErrorTranslator()
    failure = ToolCallFailure(kind, "message")

    data = translator.to_error_data(failure)
    assert (data.code, data.message) == (code, "message")
    assert translator.to_http_status(kind) == status

    error = translator.to_mcp_error(failure)
    assert isinstance(error, McpError)
    assert error.error.code == code


def test_failure_requires_message():
    with pytest.raises(ValueError):
        ToolCallFailure(ErrorKind.INTERNAL_ERROR, "")
