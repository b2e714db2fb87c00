# =============================================================================
# agent/cisco_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the ADK agent that answers support questions.  It gets:
#     - a model: Claude 3.5 Sonnet through OpenRouter, via LiteLlm
#     - an instruction: agent/prompt.py
#     - tools: the McpTool list built by tools/bridge.py
#
# MODEL ROUTING:
#   ADK → LiteLlm → OpenRouter API → anthropic/claude-3.5-sonnet
#
#   The "openrouter/anthropic/claude-3.5-sonnet" string tells LiteLlm:
#     - Provider: "openrouter"
#     - Model:    "anthropic/claude-3.5-sonnet"
#
#   The key, base URL and attribution headers are passed explicitly from
#   Settings; LiteLlm forwards extra keyword arguments to every completion.
# =============================================================================

from typing import Sequence

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.base_tool import BaseTool

from agent.prompt import get_support_prompt
from agent.settings import Settings

AGENT_NAME = "cisco_support_agent"


def create_model(settings: Settings) -> LiteLlm:
    """Configure the OpenRouter-backed model handle."""
    return LiteLlm(
        model=settings.model,
        api_key=settings.openrouter_api_key,
        api_base=settings.api_base,
        extra_headers={
            "HTTP-Referer": settings.referer,
            "X-Title": settings.app_title,
        },
    )


def create_agent(tools: Sequence[BaseTool], settings: Settings) -> Agent:
    """Create the support agent with the discovered MCP tools.

    Args:
        tools: Tools built from the live MCP session.  They stay bound to
            that session, so the agent must not outlive it.
        settings: Startup configuration.

    Returns:
        A configured Google ADK Agent instance.
    """
    return Agent(
        name=AGENT_NAME,
        model=create_model(settings),
        instruction=get_support_prompt(),
        tools=list(tools),
    )
