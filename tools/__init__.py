# =============================================================================
# tools/__init__.py
# =============================================================================
# MCP side of the bridge.
#
#   mcp_client.py — spawns the Cisco Support MCP server and opens a FastMCP
#                   client session to it (stdio transport)
#   bridge.py     — lists the server's operations and wraps each one as a
#                   Google ADK tool with a translated schema and a proxy
#                   that forwards calls and flattens the answer to text
#
# Nothing here knows about prompts or models; the agent/ package does.
# =============================================================================
