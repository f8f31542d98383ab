"""Translate tool failures into the error taxonomy and wire-level errors."""

from mcp import types
from mcp.shared.exceptions import McpError

from mcp_toolbox.errors import ErrorKind, ToolNotFoundError, ToolValidationError
from mcp_toolbox.services.dispatcher.dto import ToolCallFailure

REDACTED_DETAIL = "internal error (see server logs)"

JSONRPC_CODES: dict[ErrorKind, int] = {
    ErrorKind.METHOD_NOT_FOUND: types.METHOD_NOT_FOUND,
    ErrorKind.INVALID_PARAMS: types.INVALID_PARAMS,
    ErrorKind.INTERNAL_ERROR: types.INTERNAL_ERROR,
}

HTTP_STATUSES: dict[ErrorKind, int] = {
    ErrorKind.METHOD_NOT_FOUND: 404,
    ErrorKind.INVALID_PARAMS: 422,
    ErrorKind.INTERNAL_ERROR: 500,
}


class ErrorTranslator:
    """
    Single place where exceptions become ``ToolCallFailure`` values and
    failures become JSON-RPC errors.

    Messages of internal errors carry the raw exception text only when
    ``redact_internal_errors`` is off.
    """

    def __init__(self, redact_internal_errors: bool = True):
        self.redact_internal_errors = redact_internal_errors

    def classify(self, exc: Exception) -> ToolCallFailure:
        if isinstance(exc, ToolNotFoundError):
            return ToolCallFailure(ErrorKind.METHOD_NOT_FOUND, _describe(exc))
        if isinstance(exc, ToolValidationError):
            return ToolCallFailure(ErrorKind.INVALID_PARAMS, _describe(exc))

        detail = REDACTED_DETAIL if self.redact_internal_errors else _describe(exc)
        return ToolCallFailure(
            ErrorKind.INTERNAL_ERROR, f"Tool execution failed: {detail}"
        )

    def to_error_data(self, failure: ToolCallFailure) -> types.ErrorData:
        return types.ErrorData(code=JSONRPC_CODES[failure.kind], message=failure.message)

    def to_mcp_error(self, failure: ToolCallFailure) -> McpError:
        return McpError(self.to_error_data(failure))

    @staticmethod
    def to_http_status(kind: ErrorKind) -> int:
        return HTTP_STATUSES[kind]


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__
