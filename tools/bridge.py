# =============================================================================
# tools/bridge.py  —  MCP Operations → Google ADK Tools
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Takes an open MCP session and turns every operation it advertises into
#   an ADK tool the agent can call.
#
# HOW IT WORKS (the flow):
#   1. build_tools() asks the session for its operation list (one round trip)
#   2. For each operation, McpTool translates the input declaration
#      (core/schema.py) and wraps a proxy around the remote call
#   3. The agent sees a FunctionDeclaration per tool and calls run_async()
#   4. run_async() validates the arguments, forwards them to the tool host,
#      and reduces the multi-part answer to one string (core/results.py)
#
# FAILURES:
#   Nothing here retries or swallows errors.  If listing fails, build_tools()
#   raises and no tools exist.  If a call fails in transport, the exception
#   reaches the agent runtime as-is.  Arguments that fail validation come
#   back to the model as an {"error": ...} payload, like ADK FunctionTool,
#   and never reach the server.  A result the server flags as an error
#   is still a result: its text goes back to the model.
#
# CONCURRENCY:
#   Tools hold no per-call state.  Parallel calls are as safe as the session
#   underneath them.
# =============================================================================

import json
import logging
from typing import Any, Awaitable, Callable, Optional

from google.adk.tools.base_tool import BaseTool
from google.adk.tools.tool_context import ToolContext
from google.genai import types
from pydantic import ValidationError

from core.models import OperationDescriptor, ParameterSchema, StringRule
from core.results import reduce_result
from core.schema import build_arguments_model, translate_input_schema, validate_arguments

logger = logging.getLogger(__name__)

# ANSI color codes for terminal output
_CYAN = "\033[36m"     # Requests (tool calls with arguments)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status messages
_RESET = "\033[0m"

_PREVIEW_CHARS = 300

Invoker = Callable[[Optional[dict[str, Any]]], Awaitable[str]]


def _log_request(tool_name: str, arguments: dict[str, Any]) -> None:
    logger.info(f"{_CYAN}{tool_name} called with: {json.dumps(arguments, default=str)}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log a preview of the reduced response, then return it unchanged."""
    preview = text if len(text) <= _PREVIEW_CHARS else text[:_PREVIEW_CHARS] + "…"
    logger.info(f"{_GREEN}  ← {tool_name} response ({len(text)} chars): {preview}{_RESET}")
    return text


# =============================================================================
# Invocation Proxy
# =============================================================================
def make_invoker(session: Any, tool_name: str) -> Invoker:
    """Wrap one remote operation as ``async invoke(arguments) -> str``.

    ``session`` only needs ``call_tool_mcp(name, arguments)`` returning an
    object (or dict) with a ``content`` list.
    """

    async def invoke(arguments: Optional[dict[str, Any]] = None) -> str:
        arguments = dict(arguments or {})
        _log_request(tool_name, arguments)
        result = await session.call_tool_mcp(tool_name, arguments)
        if getattr(result, "isError", False):
            _log_status(f"{tool_name} reported an error result")
        return _log_response(tool_name, reduce_result(result))

    return invoke


# =============================================================================
# Declaration for the model
# =============================================================================
def build_parameters(schema: ParameterSchema) -> types.Schema:
    """Render a ParameterSchema as the OBJECT schema the model sees.

    String rules become STRING properties carrying their description and are
    required.  Unconstrained rules become an empty (untyped) schema.
    """
    properties: dict[str, types.Schema] = {}
    required: list[str] = []
    for name, rule in schema.items():
        if isinstance(rule, StringRule):
            properties[name] = types.Schema(type=types.Type.STRING, description=rule.description)
            required.append(name)
        else:
            properties[name] = types.Schema()
    return types.Schema(type=types.Type.OBJECT, properties=properties, required=required or None)


class McpTool(BaseTool):
    """One tool host operation, callable by an ADK agent."""

    def __init__(self, operation: OperationDescriptor, session: Any):
        super().__init__(name=operation.name, description=operation.display_description)
        self.operation = operation
        self.schema: ParameterSchema = translate_input_schema(operation.input_schema)
        self.arguments_model = build_arguments_model(operation.name, self.schema)
        self.invoke: Invoker = make_invoker(session, operation.name)

    def _get_declaration(self) -> Optional[types.FunctionDeclaration]:
        return types.FunctionDeclaration(
            name=self.name,
            description=self.description,
            parameters=build_parameters(self.schema),
        )

    async def run_async(self, *, args: dict[str, Any], tool_context: ToolContext) -> Any:
        try:
            arguments = validate_arguments(self.arguments_model, args)
        except ValidationError as exc:
            _log_status(f"Rejected arguments for {self.name}: {exc.error_count()} error(s)")
            return {"error": f"Invalid arguments for {self.name}: {exc}"}
        return await self.invoke(arguments)

    def __repr__(self) -> str:
        return f"McpTool(name={self.name!r}, params={list(self.schema)!r})"


# =============================================================================
# Tool Catalog Builder
# =============================================================================
async def list_operations(session: Any) -> list[OperationDescriptor]:
    """Ask the session for its operations, once."""
    listing = await session.list_tools()
    # fastmcp returns a list; a raw MCP ClientSession returns ListToolsResult.
    items = getattr(listing, "tools", listing)
    return [OperationDescriptor.from_listing(item) for item in items]


async def build_tools(session: Any) -> list[McpTool]:
    """Build one McpTool per operation, in the order the host listed them.

    Duplicate names are kept (and warned about); ADK resolves calls by name,
    so the later tool with a shared name is the one that gets invoked.
    """
    operations = await list_operations(session)

    seen: set[str] = set()
    for operation in operations:
        if operation.name in seen:
            logger.warning(f"Tool host listed '{operation.name}' more than once")
        seen.add(operation.name)

    tools = [McpTool(operation, session) for operation in operations]
    logger.info(f"Built {len(tools)} tools: {', '.join(tool.name for tool in tools)}")
    return tools
