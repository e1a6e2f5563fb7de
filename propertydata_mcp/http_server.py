from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, StreamingResponse
from mcp import types

from . import __version__
from .config import Settings
from .dispatcher import Dispatcher
from .main import SERVER_NAME, create_dispatcher
from .propertydata_client import PropertyDataClient
from .tools import UnknownToolError

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"


def _error(message_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": message_id,
        "error": {"code": code, "message": message},
    }


def _result(message_id: Any, result: Dict[str, Any]) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": message_id, "result": result}


def create_http_app(
    settings: Settings,
    client: Optional[PropertyDataClient] = None,
) -> FastAPI:
    """
    Create FastAPI app that serves the PropertyData tools over HTTP/SSE.

    MCP over HTTP/SSE:
    - Client sends POST requests with JSON-RPC messages in body
    - Server responds with SSE stream containing JSON-RPC responses
    - Each SSE event format: "data: <json-rpc-response>\\n\\n"
    """
    client = client or PropertyDataClient(settings)
    dispatcher = create_dispatcher(client)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        await client.aclose()

    app = FastAPI(
        title="PropertyData MCP",
        version=__version__,
        description="MCP server for the PropertyData UK property API",
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok", "service": SERVER_NAME}

    @app.get("/")
    async def root():
        """Root endpoint with service info."""
        return {
            "service": SERVER_NAME,
            "version": __version__,
            "protocol": "mcp",
            "transport": "http/sse",
            "endpoints": {
                "health": "/health",
                "mcp_stream": "/mcp/stream",
            },
        }

    @app.post("/mcp/stream")
    async def mcp_stream(request: Request):
        """
        MCP SSE stream endpoint.

        Supported MCP methods:
        - initialize: Server initialization handshake
        - ping: Liveness check
        - tools/list: List available tools
        - tools/call: Execute a tool
        """
        body = await request.body()
        if not body:
            return JSONResponse(_error(None, types.INVALID_REQUEST, "Empty request body"), status_code=400)

        try:
            message = json.loads(body)
        except json.JSONDecodeError as e:
            return JSONResponse(_error(None, types.PARSE_ERROR, f"Parse error: {e}"), status_code=400)

        if not isinstance(message, dict) or message.get("jsonrpc") != "2.0":
            message_id = message.get("id") if isinstance(message, dict) else None
            return JSONResponse(
                _error(message_id, types.INVALID_REQUEST, "Invalid Request: jsonrpc must be '2.0'"),
                status_code=400,
            )

        method = message.get("method")
        message_id = message.get("id")
        params = message.get("params") or {}

        if not method:
            return JSONResponse(
                _error(message_id, types.INVALID_REQUEST, "Invalid Request: method is required"),
                status_code=400,
            )

        async def generate_sse() -> AsyncIterator[str]:
            """Generate SSE events from dispatcher responses."""
            try:
                response = await handle_mcp_request(dispatcher, method, params, message_id)
            except Exception as e:
                logger.exception("Error handling MCP request")
                response = _error(message_id, types.INTERNAL_ERROR, f"Internal error: {e}")
            yield f"data: {json.dumps(response)}\n\n"

        return StreamingResponse(
            generate_sse(),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "X-Accel-Buffering": "no",  # Disable nginx buffering
            },
        )

    return app


async def handle_mcp_request(
    dispatcher: Dispatcher,
    method: str,
    params: Dict[str, Any],
    message_id: Any,
) -> Dict[str, Any]:
    """
    Handle a single MCP JSON-RPC request by routing it through the dispatcher.
    """
    if method == "initialize":
        return _result(
            message_id,
            {
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": {"tools": {"listChanged": False}},
                "serverInfo": {"name": SERVER_NAME, "version": __version__},
            },
        )

    if method == "ping":
        return _result(message_id, {})

    if method == "tools/list":
        tools = dispatcher.list_tools()
        return _result(
            message_id,
            {"tools": [tool.model_dump(by_alias=True, exclude_none=True) for tool in tools]},
        )

    if method == "tools/call":
        tool_name = params.get("name")
        if not tool_name:
            return _error(message_id, types.INVALID_PARAMS, "Invalid params: 'name' is required")

        try:
            call_result = await dispatcher.call_tool(tool_name, params.get("arguments"))
        except UnknownToolError as e:
            return _error(message_id, types.INVALID_PARAMS, str(e))

        return _result(message_id, call_result.model_dump(by_alias=True, exclude_none=True))

    return _error(message_id, types.METHOD_NOT_FOUND, f"Method not found: {method}")


async def run_http_server(settings: Settings) -> None:
    """Run the HTTP server using uvicorn."""
    import uvicorn

    app = create_http_app(settings)
    config = uvicorn.Config(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )
    server = uvicorn.Server(config)
    logger.info(
        "PropertyData MCP Server running on http://%s:%s",
        settings.server_host,
        settings.server_port,
    )
    await server.serve()
