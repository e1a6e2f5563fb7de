"""
Tool registration utilities.

Each module in this package exposes a `register_tools(registry, ...)` function
that adds its tools to the central registry used by the MCP server.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List

from mcp import types

from ..models import ApiResult


ToolHandler = Callable[[Dict[str, Any]], Awaitable[ApiResult]]


class UnknownToolError(KeyError):
    """Raised when a tool name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown tool: {self.name}"


@dataclass
class RegisteredTool:
    spec: types.Tool
    handler: ToolHandler


class ToolRegistry:
    """
    In-memory registry mapping MCP tool names to their specifications and handlers.

    Registration order is preserved, so `list_tools()` is stable for the
    lifetime of the process.
    """

    def __init__(self) -> None:
        self._tools: Dict[str, RegisteredTool] = {}

    def add_tool(self, tool: types.Tool, handler: ToolHandler) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' already registered")
        self._tools[tool.name] = RegisteredTool(spec=tool, handler=handler)

    def list_tools(self) -> List[types.Tool]:
        return [rt.spec for rt in self._tools.values()]

    def names(self) -> List[str]:
        return list(self._tools)

    def get_handler(self, name: str) -> ToolHandler:
        if name not in self._tools:
            raise UnknownToolError(name)
        return self._tools[name].handler

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
