# =============================================================================
# agent/settings.py  —  Startup Configuration
# =============================================================================
#
# Everything the process needs from the environment is read HERE, once, at
# startup.  The resulting Settings object is passed explicitly to the tool
# host session and to the model; nothing reads os.environ mid-flow.
#
# REQUIRED:
#   OPENROUTER_API_KEY   — model access through OpenRouter
#   CISCO_CLIENT_ID      — Cisco Support API credentials, forwarded to the
#   CISCO_CLIENT_SECRET    MCP server process
#
# OPTIONAL (defaults in brackets):
#   SUPPORT_API          [all]
#   AGENT_MODEL          [openrouter/anthropic/claude-3.5-sonnet]
#   OPENROUTER_BASE_URL  [https://openrouter.ai/api/v1]
#   OPENROUTER_REFERER   [http://localhost:3000]
#   OPENROUTER_APP_TITLE [ADK Cisco MCP Agent]
#   MCP_SERVER_COMMAND   [npx]
#   MCP_SERVER_ARGS      [-y mcp-cisco-support]
# =============================================================================

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_MODEL = "openrouter/anthropic/claude-3.5-sonnet"
DEFAULT_API_BASE = "https://openrouter.ai/api/v1"
DEFAULT_SERVER_COMMAND = "npx"
DEFAULT_SERVER_ARGS = ("-y", "mcp-cisco-support")

_REQUIRED = ("OPENROUTER_API_KEY", "CISCO_CLIENT_ID", "CISCO_CLIENT_SECRET")


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing."""


@dataclass(frozen=True)
class Settings:
    """Credentials and endpoints, treated as opaque strings."""

    openrouter_api_key: str
    cisco_client_id: str
    cisco_client_secret: str
    support_api: str = "all"
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    referer: str = "http://localhost:3000"
    app_title: str = "ADK Cisco MCP Agent"
    server_command: str = DEFAULT_SERVER_COMMAND
    server_args: tuple[str, ...] = field(default=DEFAULT_SERVER_ARGS)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from ``environ`` (defaults to ``os.environ``).

        Raises ConfigurationError listing every missing required variable.
        """
        env = os.environ if environ is None else environ

        missing = [name for name in _REQUIRED if not env.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variable(s): {', '.join(missing)}. "
                "Set them in your shell or in a .env file."
            )

        server_args = env.get("MCP_SERVER_ARGS")
        return cls(
            openrouter_api_key=env["OPENROUTER_API_KEY"],
            cisco_client_id=env["CISCO_CLIENT_ID"],
            cisco_client_secret=env["CISCO_CLIENT_SECRET"],
            support_api=env.get("SUPPORT_API") or "all",
            model=env.get("AGENT_MODEL") or DEFAULT_MODEL,
            api_base=env.get("OPENROUTER_BASE_URL") or DEFAULT_API_BASE,
            referer=env.get("OPENROUTER_REFERER") or "http://localhost:3000",
            app_title=env.get("OPENROUTER_APP_TITLE") or "ADK Cisco MCP Agent",
            server_command=env.get("MCP_SERVER_COMMAND") or DEFAULT_SERVER_COMMAND,
            server_args=tuple(server_args.split()) if server_args else DEFAULT_SERVER_ARGS,
        )

    def server_env(self) -> dict[str, str]:
        """Variables handed to the MCP server process."""
        return {
            "CISCO_CLIENT_ID": self.cisco_client_id,
            "CISCO_CLIENT_SECRET": self.cisco_client_secret,
            "SUPPORT_API": self.support_api,
        }

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks.
        return (
            f"Settings(model={self.model!r}, api_base={self.api_base!r}, "
            f"support_api={self.support_api!r}, server_command={self.server_command!r}, "
            f"server_args={self.server_args!r})"
        )
