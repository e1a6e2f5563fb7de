from __future__ import annotations

from typing import Any, Dict, Iterable

from ..models import ApiResult
from ..propertydata_client import PropertyDataClient
from . import ToolRegistry
from .arguments import build_query
from .catalog import ENDPOINTS, Endpoint, to_tool


async def _call_endpoint(
    client: PropertyDataClient,
    endpoint: Endpoint,
    arguments: Dict[str, Any],
) -> ApiResult:
    """Map arguments onto the endpoint's query and perform the single GET."""
    query = build_query(endpoint, arguments)
    return await client.get(endpoint.path, query)


def _make_handler(client: PropertyDataClient, endpoint: Endpoint):
    async def handler(arguments: Dict[str, Any]) -> ApiResult:
        return await _call_endpoint(client, endpoint, arguments)

    return handler


def register_tools(
    registry: ToolRegistry,
    client: PropertyDataClient,
    endpoints: Iterable[Endpoint] = ENDPOINTS,
) -> None:
    for endpoint in endpoints:
        registry.add_tool(to_tool(endpoint), _make_handler(client, endpoint))
