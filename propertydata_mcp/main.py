from __future__ import annotations

import logging
import sys
from typing import Any, Dict, List, Optional

import anyio
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from pydantic import ValidationError

from . import __version__
from .config import Settings, get_settings
from .dispatcher import Dispatcher
from .propertydata_client import PropertyDataClient
from .tools import ToolRegistry, UnknownToolError
from .tools import propertydata_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "propertydata-mcp"


def create_dispatcher(client: PropertyDataClient) -> Dispatcher:
    """Build the registry with every PropertyData tool bound to `client`."""
    registry = ToolRegistry()
    propertydata_tools.register_tools(registry, client)
    return Dispatcher(registry)


def create_server(dispatcher: Dispatcher) -> Server:
    """
    Create the MCP server and bind the dispatcher to its tool handlers.
    """
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return dispatcher.list_tools()

    # Registered directly rather than through `server.call_tool()`, which
    # converts every exception into an `isError` result. An unknown tool has
    # to reach the client as a JSON-RPC error instead.
    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        name = request.params.name
        arguments: Optional[Dict[str, Any]] = request.params.arguments
        try:
            result = await dispatcher.call_tool(name, arguments)
        except UnknownToolError as e:
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=str(e))) from e
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = call_tool

    return server


async def run_stdio_server(settings: Settings) -> None:
    client = PropertyDataClient(settings)
    server = create_server(create_dispatcher(client))
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("PropertyData MCP Server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await client.aclose()


def describe_config_error(error: ValidationError) -> List[str]:
    lines = []
    for err in error.errors():
        field = str(err["loc"][0]) if err["loc"] else "settings"
        env_name = f"PROPERTYDATA_{field.upper()}"
        if err["type"] == "missing":
            lines.append(f"ERROR: {env_name} environment variable is required")
        else:
            lines.append(f"ERROR: invalid {env_name}: {err['msg']}")
    return lines


def load_settings_or_exit() -> Settings:
    """Load settings, or print a diagnostic to stderr and exit with status 1."""
    try:
        return get_settings()
    except ValidationError as e:
        for line in describe_config_error(e):
            print(line, file=sys.stderr)
        print("Set it in your environment or in the MCP client config.", file=sys.stderr)
        sys.exit(1)


def main() -> None:
    """
    Entrypoint for running the MCP server.

    Supports two transport modes:
    - stdio: For direct process-to-process communication (default)
    - http: For HTTP/SSE transport behind reverse proxy
    """
    settings = load_settings_or_exit()

    logging.basicConfig(
        level=settings.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if settings.transport == "http":
            from .http_server import run_http_server

            anyio.run(run_http_server, settings)
        else:
            anyio.run(run_stdio_server, settings)
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
