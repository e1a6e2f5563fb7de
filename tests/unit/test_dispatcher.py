"""Tests for tool dispatch and result envelopes."""

import json
from unittest.mock import AsyncMock

import httpx
import pytest
from mcp import types

from propertydata_mcp.dispatcher import Dispatcher
from propertydata_mcp.main import create_dispatcher
from propertydata_mcp.models import Failure, Success
from propertydata_mcp.tools import ToolRegistry, UnknownToolError
from propertydata_mcp.tools.catalog import ENDPOINTS


@pytest.fixture
def dispatcher(client):
    return create_dispatcher(client)


def _text(result: types.CallToolResult) -> str:
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


class TestListTools:
    def test_returns_full_catalog(self, dispatcher):
        tools = dispatcher.list_tools()
        assert [t.name for t in tools] == [e.name for e in ENDPOINTS]

    def test_deterministic(self, dispatcher):
        assert dispatcher.list_tools() == dispatcher.list_tools()


class TestCallTool:
    @pytest.mark.anyio
    async def test_get_prices_success(self, dispatcher, transport):
        body = {"prices": {"average": 1250000, "points_analysed": 40}}
        transport.respond_with(200, json=body)

        result = await dispatcher.call_tool("get_prices", {"postcode": "SW1A 1AA"})

        request = transport.last_request
        assert request.url.path == "/prices"
        assert request.url.query == b"key=test-key&postcode=SW1A%201AA"
        assert _text(result) == json.dumps(body, indent=2)
        assert result.isError is False

    @pytest.mark.anyio
    async def test_api_error_is_plain_content(self, dispatcher, transport):
        transport.respond_with(404, text="not found")

        result = await dispatcher.call_tool("get_prices", {"postcode": "SW1A 1AA"})

        assert _text(result) == json.dumps({"error": "API Error 404: not found"}, indent=2)
        assert result.isError is False

    @pytest.mark.anyio
    async def test_network_error_is_plain_content(self, dispatcher, transport):
        transport.raise_error(httpx.ConnectError("Name or service not known"))

        result = await dispatcher.call_tool("get_crime_data", {"postcode": "SW1A 1AA"})

        assert json.loads(_text(result)) == {"error": "Request failed: Name or service not known"}
        assert result.isError is False

    @pytest.mark.anyio
    async def test_unknown_tool_raises(self, dispatcher, transport):
        with pytest.raises(UnknownToolError, match="Unknown tool: nonexistent_tool"):
            await dispatcher.call_tool("nonexistent_tool", {})
        assert transport.requests == []

    @pytest.mark.anyio
    async def test_optional_boolean_omitted(self, dispatcher, transport):
        transport.respond_with(200, json={"stamp_duty": 15000})

        await dispatcher.call_tool("stamp_duty_calculator", {"property_value": 500000})

        params = transport.last_request.url.params
        assert params["property_value"] == "500000"
        assert "first_time_buyer" not in params

    @pytest.mark.anyio
    async def test_optional_boolean_forwarded(self, dispatcher, transport):
        transport.respond_with(200, json={"stamp_duty": 5000})

        await dispatcher.call_tool(
            "stamp_duty_calculator", {"property_value": 500000, "first_time_buyer": True}
        )

        assert transport.last_request.url.params["first_time_buyer"] == "true"

    @pytest.mark.anyio
    async def test_no_argument_tool(self, dispatcher, transport):
        transport.respond_with(200, json={"credits": 1200})

        result = await dispatcher.call_tool("get_account_credits", None)

        assert transport.last_request.url.path == "/account/credits"
        assert transport.last_request.url.query == b"key=test-key"
        assert json.loads(_text(result)) == {"credits": 1200}

    @pytest.mark.anyio
    async def test_malformed_json_is_flagged_error(self, dispatcher, transport):
        transport.respond_with(200, text="not json")

        result = await dispatcher.call_tool("get_prices", {"postcode": "SW1A 1AA"})

        assert result.isError is True
        assert _text(result).startswith("Error: ")

    @pytest.mark.anyio
    async def test_missing_required_is_flagged_error_without_request(self, dispatcher, transport):
        result = await dispatcher.call_tool("get_prices", {})

        assert result.isError is True
        assert _text(result) == "Error: Missing required field 'postcode'"
        assert transport.requests == []

    @pytest.mark.anyio
    async def test_kind_mismatch_is_flagged_error_without_request(self, dispatcher, transport):
        result = await dispatcher.call_tool("mortgage_calculator", {
            "loan_amount": "lots",
            "deposit": 1,
            "interest_rate": 1,
            "term_years": 25,
        })

        assert result.isError is True
        assert "loan_amount" in _text(result)
        assert transport.requests == []

    @pytest.mark.anyio
    async def test_unicode_is_not_escaped(self, dispatcher, transport):
        transport.respond_with(200, json={"area": "Ynys Môn"})

        result = await dispatcher.call_tool("get_area_type", {"postcode": "LL65 1AA"})

        assert "Ynys Môn" in _text(result)


class TestErrorSurfaces:
    """Remote failures are content; dispatch exceptions are flagged."""

    @pytest.mark.anyio
    async def test_failure_result_not_flagged(self):
        registry = ToolRegistry()
        registry.add_tool(
            types.Tool(name="t", inputSchema={"type": "object", "properties": {}}),
            AsyncMock(return_value=Failure(message="API Error 500: oops")),
        )

        result = await Dispatcher(registry).call_tool("t", {})

        assert result.isError is False
        assert json.loads(result.content[0].text) == {"error": "API Error 500: oops"}

    @pytest.mark.anyio
    async def test_handler_exception_flagged(self):
        registry = ToolRegistry()
        registry.add_tool(
            types.Tool(name="t", inputSchema={"type": "object", "properties": {}}),
            AsyncMock(side_effect=RuntimeError("kaboom")),
        )

        result = await Dispatcher(registry).call_tool("t", {})

        assert result.isError is True
        assert result.content[0].text == "Error: kaboom"

    @pytest.mark.anyio
    async def test_success_passthrough(self):
        handler = AsyncMock(return_value=Success(value=[1, 2, 3]))
        registry = ToolRegistry()
        registry.add_tool(
            types.Tool(name="t", inputSchema={"type": "object", "properties": {}}),
            handler,
        )

        result = await Dispatcher(registry).call_tool("t", None)

        handler.assert_awaited_once_with({})
        assert result.content[0].text == json.dumps([1, 2, 3], indent=2)
