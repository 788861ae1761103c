from __future__ import annotations

import json

import pytest
from fastmcp import Client

from core.client import API_KEY_HEADER
from core.config import Settings
from core.tool_definitions import INTERZOID_TOOLS
from tools import mcp_server
from tools.mcp_server import create_server


def _text(result) -> str:
    assert len(result.content) == 1
    return result.content[0].text


@pytest.mark.asyncio
async def test_every_catalog_entry_is_listed_with_its_schema(fake_api):
    server = create_server(Settings(), executor=fake_api.executor())

    async with Client(server) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}

    assert set(tools) == {d.name for d in INTERZOID_TOOLS}
    for descriptor in INTERZOID_TOOLS:
        listed = tools[descriptor.name]
        assert listed.description == descriptor.description
        assert listed.inputSchema["required"] == [p.caller_name for p in descriptor.required_params]


@pytest.mark.asyncio
async def test_success_comes_back_as_pretty_json(fake_api):
    fake_api.reply(200, json_body={"Standard": "Bank of America", "Code": "Success"})
    server = create_server(Settings(api_key="server-key"), executor=fake_api.executor())

    async with Client(server) as client:
        result = await client.call_tool("interzoid_org_standard", {"org": "b.o.a."})

    assert not result.is_error
    assert json.loads(_text(result)) == {"Standard": "Bank of America", "Code": "Success"}
    assert fake_api.last_request.headers[API_KEY_HEADER] == "server-key"
    assert dict(fake_api.last_request.url.params) == {"org": "b.o.a."}


@pytest.mark.asyncio
async def test_payment_required_is_an_ordinary_tool_result(fake_api):
    fake_api.reply(402, json_body={"amount": "12500", "network": "base"})
    server = create_server(Settings(), executor=fake_api.executor())

    async with Client(server) as client:
        result = await client.call_tool("interzoid_gender", {"name": "Alex"})

    assert not result.is_error
    document = json.loads(_text(result))
    assert document["status"] == "payment_required"
    assert document["x402"] is True
    assert document["paymentRequirements"] == {"amount": "12500", "network": "base"}
    assert API_KEY_HEADER not in fake_api.last_request.headers


@pytest.mark.asyncio
async def test_remote_failure_is_flagged_as_tool_error(fake_api):
    fake_api.reply(500, body="internal error")
    server = create_server(Settings(api_key="k"), executor=fake_api.executor())

    async with Client(server) as client:
        result = await client.call_tool("interzoid_gender", {"name": "Alex"}, raise_on_error=False)

    assert result.is_error
    assert _text(result) == "API returned status 500: internal error"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "arguments,message",
    [
        ({}, "Missing required parameter: name"),
        ({"name": 42}, "Parameter name must be a string"),
    ],
)
async def test_bad_arguments_are_flagged_as_tool_errors(fake_api, arguments, message):
    server = create_server(Settings(api_key="k"), executor=fake_api.executor())

    async with Client(server) as client:
        result = await client.call_tool("interzoid_gender", arguments, raise_on_error=False)

    assert result.is_error
    assert _text(result) == message
    assert fake_api.requests == []


@pytest.mark.asyncio
async def test_authorization_header_overrides_server_key(fake_api, monkeypatch):
    monkeypatch.setattr(
        mcp_server, "get_http_headers", lambda include_all=False: {"authorization": "Bearer caller-key"}
    )
    server = create_server(Settings(api_key="server-key"), executor=fake_api.executor())

    async with Client(server) as client:
        await client.call_tool("interzoid_gender", {"name": "Alex"})

    assert fake_api.last_request.headers[API_KEY_HEADER] == "caller-key"
