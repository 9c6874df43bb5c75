"""End-to-end tests of the get-avs-list MCP tool, in memory via fastmcp.Client."""

import pytest
from fastmcp import Client

from conftest import FakeCompleter, FakeFetcher
from core.assistant import AvsAssistant
from core.models import CompletionFailure, CompletionSuccess
from tools.mcp_server import TOOL_NAME, create_server


@pytest.fixture
def completer():
    return FakeCompleter(CompletionSuccess(contents=["Hello"]))


@pytest.fixture
def server(completer):
    return create_server(AvsAssistant(FakeFetcher(), completer))


async def test_tool_is_registered_with_declared_schema(server):
    async with Client(server) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}

    assert TOOL_NAME == "get-avs-list"
    tool = tools["get-avs-list"]
    assert tool.description == "Query AVSs data"

    schema = tool.inputSchema
    assert set(schema["properties"]) == {"fullPrompt", "avsName"}
    assert schema["required"] == ["fullPrompt"]
    assert schema["properties"]["fullPrompt"]["description"] == "The complete user query about AVS data"


async def test_call_returns_one_text_item(server):
    async with Client(server) as client:
        result = await client.call_tool(TOOL_NAME, {"fullPrompt": "List all AVSs", "avsName": "EigenDA"})

    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.content[0].text == "Hello"


async def test_avs_name_is_optional(server, completer):
    async with Client(server) as client:
        await client.call_tool(TOOL_NAME, {"fullPrompt": "List all AVSs"})

    assert "AVS name: None" in completer.prompts[0]


async def test_model_failure_is_a_normal_text_result(completer):
    completer.outcome = CompletionFailure(message="boom")
    server = create_server(AvsAssistant(FakeFetcher(), completer))

    async with Client(server) as client:
        result = await client.call_tool(TOOL_NAME, {"fullPrompt": "q"})

    assert not result.is_error
    assert result.content[0].text == "Error fetching AVS data boom"
