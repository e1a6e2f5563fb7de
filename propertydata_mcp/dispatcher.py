from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from mcp import types

from .models import Failure
from .tools import ToolRegistry

logger = logging.getLogger(__name__)


def _text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


class Dispatcher:
    """
    Resolves tool calls against the registry and wraps outcomes in MCP results.

    There are two distinct error surfaces:
    - a remote `Failure` (transport error or non-2xx) is returned as ordinary
      content, `{"error": "..."}`, with `isError` unset;
    - an exception raised while handling the call (bad arguments, a malformed
      2xx body, bugs) is returned as `"Error: ..."` with `isError=True`.

    Unknown tool names are not wrapped at all: `UnknownToolError` propagates so
    the transport can answer with a protocol-level error.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    def list_tools(self) -> List[types.Tool]:
        return self._registry.list_tools()

    async def call_tool(
        self,
        name: str,
        arguments: Optional[Dict[str, Any]] = None,
    ) -> types.CallToolResult:
        handler = self._registry.get_handler(name)
        logger.debug("Calling tool %s", name)

        try:
            result = await handler(arguments or {})
        except Exception as e:
            logger.exception("Error executing tool %s", name)
            return _text_result(f"Error: {e}", is_error=True)

        if isinstance(result, Failure):
            return _text_result(_pretty(result.as_payload()))
        return _text_result(_pretty(result.value))
