# =============================================================================
# tools/mcp_client.py  —  Tool Host Session (FastMCP client over stdio)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP client that talks to the Cisco Support MCP server.
#   The server is an npm package; the stdio transport spawns it with
#   `npx -y mcp-cisco-support` and speaks MCP over its stdin/stdout.
#
# LIFECYCLE:
#   The returned Client is NOT connected yet.  Use it as an async context
#   manager:
#
#       async with open_tool_host(settings) as session:
#           tools = await session.list_tools()
#           ...
#
#   Entering spawns the process and runs the MCP handshake; leaving closes
#   the connection and reaps the process, on success or failure.
#
# ENVIRONMENT:
#   The Cisco credentials are layered on top of the MCP SDK's default
#   subprocess environment so that PATH/HOME still resolve `npx`.
# =============================================================================

import logging

from fastmcp import Client
from fastmcp.client.transports import StdioTransport
from mcp.client.stdio import get_default_environment

from agent.settings import Settings

logger = logging.getLogger(__name__)


def build_transport(settings: Settings) -> StdioTransport:
    """Describe how to launch the MCP server process."""
    env = get_default_environment()
    env.update(settings.server_env())
    return StdioTransport(
        command=settings.server_command,
        args=list(settings.server_args),
        env=env,
        # Reap the server process when the client context exits.
        keep_alive=False,
    )


def open_tool_host(settings: Settings) -> Client:
    """Create an (unconnected) client for the Cisco Support MCP server."""
    logger.info(
        "Tool host: %s %s (SUPPORT_API=%s)",
        settings.server_command,
        " ".join(settings.server_args),
        settings.support_api,
    )
    return Client(build_transport(settings))
