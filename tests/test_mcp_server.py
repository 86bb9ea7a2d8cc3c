"""End-to-end tests of the MCP surface, run in-process with fastmcp.Client.

Failures must arrive as JSON-RPC errors carrying their code, not as a
CallToolResult flagged isError, so these tests go through call_tool_mcp and
inspect McpError.error.code.
"""

import json

import pytest
from fastmcp import Client
from mcp.shared.exceptions import McpError

from core.errors import ErrorCode
from core.registry import list_capabilities
from core.search import INVALID_KEY_MESSAGE, InvocationHandler
from core.unsplash import UnsplashAPIError
from tools.mcp_server import create_server

from tests.conftest import FakeUnsplashClient


def _server(client):
    return create_server(InvocationHandler(client))


async def _call(fake, name, arguments):
    async with Client(_server(fake)) as client:
        return await client.call_tool_mcp(name, arguments)


async def test_tools_list_is_the_registry(cats_payload):
    async with Client(_server(FakeUnsplashClient(payload=cats_payload))) as client:
        tools = await client.list_tools()

    assert [t.model_dump(include={"name", "description", "inputSchema"}) for t in tools] == [
        c.to_dict() for c in list_capabilities()
    ]


async def test_search_returns_single_text_block(cats_payload):
    fake = FakeUnsplashClient(payload=cats_payload)

    result = await _call(fake, "search_images", {"query": "cats", "per_page": 50})

    assert not result.isError
    assert fake.calls[0].upstream_per_page == 30
    assert len(result.content) == 1
    body = json.loads(result.content[0].text)
    assert body["query"] == "cats"
    assert [r["description"] for r in body["results"]] == ["a cat", "a dog"]


async def test_defaults_applied_when_omitted(empty_payload):
    fake = FakeUnsplashClient(payload=empty_payload)

    result = await _call(fake, "search_images", {"query": "nothing"})

    assert (fake.calls[0].page, fake.calls[0].per_page) == (1, 10)
    assert result.content[0].text == 'No images found for query: "nothing"'


async def test_invalid_key_is_invalid_request():
    fake = FakeUnsplashClient(error=UnsplashAPIError("HTTP Error 401: Unauthorized", 401, ["OAuth error"]))

    with pytest.raises(McpError) as exc_info:
        await _call(fake, "search_images", {"query": "cats"})

    assert exc_info.value.error.code == ErrorCode.INVALID_REQUEST == -32600
    assert exc_info.value.error.message == INVALID_KEY_MESSAGE


async def test_api_errors_are_internal_error():
    fake = FakeUnsplashClient(error=UnsplashAPIError("HTTP Error 400: Bad Request", 400, ["a", "b"]))

    with pytest.raises(McpError) as exc_info:
        await _call(fake, "search_images", {"query": "cats"})

    assert exc_info.value.error.code == ErrorCode.INTERNAL_ERROR == -32603
    assert exc_info.value.error.message == "Unsplash API error: a, b"


async def test_unknown_tool_is_method_not_found(cats_payload):
    fake = FakeUnsplashClient(payload=cats_payload)

    with pytest.raises(McpError) as exc_info:
        await _call(fake, "search_videos", {"query": "cats"})

    assert exc_info.value.error.code == ErrorCode.METHOD_NOT_FOUND == -32601
    assert exc_info.value.error.message == "Unknown tool: search_videos"
    assert fake.calls == []


async def test_missing_query_is_invalid_params(cats_payload):
    fake = FakeUnsplashClient(payload=cats_payload)

    with pytest.raises(McpError) as exc_info:
        await _call(fake, "search_images", {"page": 2})

    assert exc_info.value.error.code == ErrorCode.INVALID_PARAMS == -32602
    assert fake.calls == []
