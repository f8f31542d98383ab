"""HTTP handlers - FastAPI routes for health check and a REST view of tools."""

import logging
from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse

from mcp_toolbox.services.dispatcher.dispatcher import ToolDispatcher
from mcp_toolbox.services.dispatcher.dto import ToolCallFailure

logger = logging.getLogger(__name__)


def setup_routes(app: FastAPI) -> None:
    """Register HTTP routes on the FastAPI app.

    Expects the dispatcher in ``app.state.dispatcher``.
    """

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.get("/tools")
    async def list_tools(request: Request):
        dispatcher: ToolDispatcher = request.app.state.dispatcher
        return {"tools": [d.to_dict() for d in dispatcher.list_tools()]}

    @app.post("/tools/{tool_name}/call")
    async def call_tool(
        request: Request,
        tool_name: str,
        arguments: dict[str, Any] | None = Body(default=None),
    ):
        dispatcher: ToolDispatcher = request.app.state.dispatcher
        result = await dispatcher.call_tool(tool_name, arguments)

        if isinstance(result, ToolCallFailure):
            error = dispatcher.translator.to_error_data(result)
            return JSONResponse(
                status_code=dispatcher.translator.to_http_status(result.kind),
                content={
                    "error": {
                        "code": error.code,
                        "kind": result.kind.value,
                        "message": error.message,
                    }
                },
            )
        return {"result": result.payload}
