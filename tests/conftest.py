"""Shared fixtures: a fake tool host session and ready-made settings."""
import pytest
from mcp.types import CallToolResult, TextContent, Tool

from agent.settings import Settings


class FakeToolHost:
    """Stands in for a connected FastMCP client.

    Records every call and how many times the session was entered/closed.
    """

    def __init__(self, tools=None, results=None, list_error=None, call_error=None):
        self.tools = list(tools or [])
        self.results = dict(results or {})
        self.list_error = list_error
        self.call_error = call_error
        self.calls = []
        self.list_count = 0
        self.enter_count = 0
        self.close_count = 0

    async def __aenter__(self):
        self.enter_count += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.close_count += 1
        return False

    async def list_tools(self):
        self.list_count += 1
        if self.list_error:
            raise self.list_error
        return self.tools

    async def call_tool_mcp(self, name, arguments):
        self.calls.append((name, arguments))
        if self.call_error:
            raise self.call_error
        return self.results.get(name, CallToolResult(content=[]))


def text_result(text):
    return CallToolResult(content=[TextContent(type="text", text=text)])


@pytest.fixture
def settings():
    return Settings(
        openrouter_api_key="or-key",
        cisco_client_id="client-id",
        cisco_client_secret="client-secret",
    )


@pytest.fixture
def search_bugs_tool():
    return Tool(
        name="search_bugs",
        description="",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "search text"},
                "limit": {"type": "number"},
            },
        },
    )


@pytest.fixture
def tool_host(search_bugs_tool):
    return FakeToolHost(
        tools=[
            search_bugs_tool,
            Tool(
                name="get_bug_details",
                description="Get full details for a bug ID",
                inputSchema={
                    "type": "object",
                    "properties": {"bug_ids": {"type": "string", "description": "Comma separated bug IDs"}},
                    "required": ["bug_ids"],
                },
            ),
            Tool(name="list_products", inputSchema={"type": "object"}),
        ],
        results={
            "search_bugs": text_result("CSCwa12345: crash in IOS XE"),
            "get_bug_details": text_result("CSCwa12345 severity 2"),
        },
    )
