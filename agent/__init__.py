# =============================================================================
# agent/__init__.py
# =============================================================================
# Google ADK side of the bridge: startup settings, the system instruction,
# and the agent factory.
#
# The agent owns no tools of its own.  Everything it can do comes from the
# MCP server, converted by tools/bridge.py and handed in at creation time.
# The LLM (Claude through OpenRouter, via LiteLlm) decides which of those
# tools to call and with what arguments.
# =============================================================================
