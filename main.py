# =============================================================================
# main.py  —  Entry Point for the Cisco Support MCP Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py                       # first example query
#   uv run python main.py --example 3           # pick an example query
#   uv run python main.py "Find bugs in IOS XE 17.9"
#   uv run python main.py --interactive         # ask several questions
#   uv run python main.py --list-tools          # show what the server offers
#
# WHAT HAPPENS:
#   1. Settings are read from the environment (.env is loaded first)
#   2. The Cisco Support MCP server is spawned and the MCP session opens
#   3. Its operations are converted into ADK tools (tools/bridge.py)
#   4. An ADK agent is created with those tools (agent/cisco_agent.py)
#   5. The query runs; the agent calls tools through the open session
#   6. The session closes, whether the run succeeded or not
#
# LIFECYCLE RULE:
#   Everything that touches the tools happens inside one
#   `async with session:` block.  Tools built from a session are useless
#   once it closes, and the session is closed exactly once on every path.
# =============================================================================

import argparse
import asyncio
import logging
import sys
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any, AsyncIterator, Callable, Optional, Sequence

from dotenv import load_dotenv
from google.adk.agents import Agent
from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.cisco_agent import create_agent
from agent.prompt import EXAMPLE_QUERIES
from agent.settings import ConfigurationError, Settings
from tools.bridge import McpTool, build_tools
from tools.mcp_client import open_tool_host

APP_NAME = "cisco_support"
USER_ID = "cli_user"

logger = logging.getLogger("cisco_agent")


def configure_logging(verbose: bool = False) -> None:
    """Log to STDERR so console answers on STDOUT stay clean."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    # LiteLLM and the HTTP stack are chatty at INFO.
    for noisy in ("LiteLLM", "httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


# =============================================================================
# Conversation wrapper around the ADK Runner
# =============================================================================
class SupportChat:
    """One ADK conversation: a runner plus an in-memory session."""

    def __init__(self, agent: Agent):
        self.session_service = InMemorySessionService()
        self.runner = Runner(
            agent=agent,
            app_name=APP_NAME,
            session_service=self.session_service,
        )
        self.session_id: Optional[str] = None

    async def ask(self, query: str) -> str:
        """Send one user message and return the agent's final text."""
        if self.session_id is None:
            session = await self.session_service.create_session(app_name=APP_NAME, user_id=USER_ID)
            self.session_id = session.id

        message = types.Content(role="user", parts=[types.Part(text=query)])

        final_response = ""
        async for event in self.runner.run_async(
            user_id=USER_ID,
            session_id=self.session_id,
            new_message=message,
        ):
            for call in event.get_function_calls():
                print(f"  🔧 Calling tool: {call.name}")
            if event.is_final_response() and event.content and event.content.parts:
                final_response = "".join(part.text for part in event.content.parts if part.text)
        return final_response


# =============================================================================
# Session orchestration
# =============================================================================
@asynccontextmanager
async def connected_tools(
    settings: Settings,
    open_session: Callable[[Settings], AbstractAsyncContextManager[Any]] = open_tool_host,
) -> AsyncIterator[list[McpTool]]:
    """Open the tool host, build the catalog, and close the host on exit."""
    print("Initializing MCP client for Cisco Support...")
    async with open_session(settings) as session:
        print("Converting MCP tools to ADK tools...")
        tools = await build_tools(session)
        print(f"Loaded {len(tools)} Cisco Support tools")
        yield tools


async def run_query(
    query: str,
    settings: Settings,
    open_session: Callable[[Settings], AbstractAsyncContextManager[Any]] = open_tool_host,
) -> str:
    """Answer one query with a fresh session, agent and conversation."""
    async with connected_tools(settings, open_session) as tools:
        chat = SupportChat(create_agent(tools, settings))
        print("\nRunning query:", query)
        return await chat.ask(query)


async def run_interactive(
    settings: Settings,
    open_session: Callable[[Settings], AbstractAsyncContextManager[Any]] = open_tool_host,
) -> None:
    """Read questions from the console until the user quits."""
    async with connected_tools(settings, open_session) as tools:
        chat = SupportChat(create_agent(tools, settings))
        print("\n💬 Ask about Cisco bugs, products or cases. (Type 'quit' to exit)\n")
        print("-" * 70)

        while True:
            try:
                user_input = input("\n🧑 You: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\n\n👋 Goodbye!")
                break

            if user_input.lower() in ("quit", "exit", "q"):
                print("\n👋 Goodbye!")
                break
            if not user_input:
                continue

            print("\n🤖 Agent is thinking...\n")
            _print_answer(await chat.ask(user_input))


async def list_tools(
    settings: Settings,
    open_session: Callable[[Settings], AbstractAsyncContextManager[Any]] = open_tool_host,
) -> list[McpTool]:
    """Print the discovered catalog and return it."""
    async with connected_tools(settings, open_session) as tools:
        for tool in tools:
            params = ", ".join(
                f"{name}: {rule.kind}" for name, rule in tool.schema.items()
            )
            print(f"\n• {tool.name}({params})\n    {tool.description}")
        return tools


# =============================================================================
# Command line
# =============================================================================
def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Ask an LLM agent questions answered by the Cisco Support MCP server.",
    )
    parser.add_argument("query", nargs="*", help="free-text question (default: first example)")
    parser.add_argument(
        "-e", "--example", type=int, choices=range(1, len(EXAMPLE_QUERIES) + 1),
        help="run one of the built-in example queries",
    )
    parser.add_argument("-i", "--interactive", action="store_true", help="ask several questions in one session")
    parser.add_argument("--list-tools", action="store_true", help="list the server's tools and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def select_query(args: argparse.Namespace) -> str:
    """Free text wins, then --example, then the first example."""
    if args.query:
        return " ".join(args.query)
    if args.example:
        return EXAMPLE_QUERIES[args.example - 1]
    return EXAMPLE_QUERIES[0]


def _print_answer(answer: str) -> None:
    print("-" * 70)
    if answer:
        print(f"\n🤖 Agent:\n\n{answer}")
    else:
        print("\n⚠️  No response generated. The agent may have encountered an error.")
    print("\n" + "=" * 70)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    # .env first, so Settings.from_env() sees OPENROUTER_API_KEY and friends.
    load_dotenv()
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        print(f"⚠️  {exc}", file=sys.stderr)
        return 2
    logger.debug("Loaded %r", settings)

    print("=" * 70)
    print("  CISCO SUPPORT AGENT")
    print("  Powered by Google ADK + OpenRouter + Cisco Support MCP")
    print("=" * 70)

    if args.list_tools:
        asyncio.run(list_tools(settings))
        return 0
    if args.interactive:
        asyncio.run(run_interactive(settings))
        return 0

    answer = asyncio.run(run_query(select_query(args), settings))
    print("\n--- Agent Response ---")
    _print_answer(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
