"""Tests for startup configuration, transport and agent construction."""
import pytest
from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm

from agent.cisco_agent import AGENT_NAME, create_agent, create_model
from agent.settings import DEFAULT_MODEL, ConfigurationError, Settings
from core.models import OperationDescriptor
from tools.bridge import McpTool
from tools.mcp_client import build_transport, open_tool_host

REQUIRED_ENV = {
    "OPENROUTER_API_KEY": "or-key",
    "CISCO_CLIENT_ID": "client-id",
    "CISCO_CLIENT_SECRET": "client-secret",
}


class TestSettingsFromEnv:

    def test_defaults(self):
        settings = Settings.from_env(REQUIRED_ENV)
        assert settings.model == DEFAULT_MODEL == "openrouter/anthropic/claude-3.5-sonnet"
        assert settings.api_base == "https://openrouter.ai/api/v1"
        assert settings.support_api == "all"
        assert settings.server_command == "npx"
        assert settings.server_args == ("-y", "mcp-cisco-support")

    def test_overrides(self):
        env = dict(
            REQUIRED_ENV,
            SUPPORT_API="bug,case",
            AGENT_MODEL="openrouter/openai/gpt-4o",
            MCP_SERVER_COMMAND="node",
            MCP_SERVER_ARGS="dist/index.js --stdio",
        )
        settings = Settings.from_env(env)
        assert settings.support_api == "bug,case"
        assert settings.model == "openrouter/openai/gpt-4o"
        assert settings.server_command == "node"
        assert settings.server_args == ("dist/index.js", "--stdio")

    def test_missing_required_lists_every_name(self):
        with pytest.raises(ConfigurationError) as excinfo:
            Settings.from_env({"CISCO_CLIENT_ID": "id"})
        message = str(excinfo.value)
        assert "OPENROUTER_API_KEY" in message
        assert "CISCO_CLIENT_SECRET" in message
        assert "CISCO_CLIENT_ID" not in message

    def test_empty_value_counts_as_missing(self):
        with pytest.raises(ConfigurationError):
            Settings.from_env(dict(REQUIRED_ENV, OPENROUTER_API_KEY=""))

    def test_reads_process_environment_by_default(self, monkeypatch):
        for name, value in REQUIRED_ENV.items():
            monkeypatch.setenv(name, value)
        assert Settings.from_env().cisco_client_id == "client-id"

    def test_repr_hides_secrets(self, settings):
        text = repr(settings)
        assert "or-key" not in text
        assert "client-secret" not in text

    def test_server_env(self, settings):
        assert settings.server_env() == {
            "CISCO_CLIENT_ID": "client-id",
            "CISCO_CLIENT_SECRET": "client-secret",
            "SUPPORT_API": "all",
        }


class TestTransport:

    def test_command_and_environment(self, settings, monkeypatch):
        monkeypatch.setenv("PATH", "/usr/local/bin:/usr/bin")
        transport = build_transport(settings)
        assert transport.command == "npx"
        assert transport.args == ["-y", "mcp-cisco-support"]
        assert transport.env["CISCO_CLIENT_SECRET"] == "client-secret"
        assert transport.env["SUPPORT_API"] == "all"
        assert transport.env["PATH"] == "/usr/local/bin:/usr/bin"
        assert transport.keep_alive is False

    def test_client_is_not_connected_yet(self, settings):
        client = open_tool_host(settings)
        assert not client.is_connected()


class TestAgentFactory:

    def test_model_routes_through_openrouter(self, settings):
        model = create_model(settings)
        assert isinstance(model, LiteLlm)
        assert model.model == "openrouter/anthropic/claude-3.5-sonnet"

    def test_agent_gets_every_tool(self, settings, tool_host):
        tools = [
            McpTool(OperationDescriptor(name="search_bugs"), tool_host),
            McpTool(OperationDescriptor(name="get_bug_details"), tool_host),
        ]
        agent = create_agent(tools, settings)
        assert isinstance(agent, Agent)
        assert agent.name == AGENT_NAME
        assert [tool.name for tool in agent.tools] == ["search_bugs", "get_bug_details"]
        assert "Cisco" in agent.instruction
