# =============================================================================
# agent/prompt.py  —  System Instruction & Example Queries
# =============================================================================
#
# The agent gets a short instruction: it is a Cisco support assistant, its
# tools come from the Cisco Support MCP server, and it should answer from
# tool output rather than memory.  The tool descriptions themselves come
# from the server, so the instruction does not list them.
# =============================================================================

from datetime import date

EXAMPLE_QUERIES = [
    "Search for recent bugs related to 'crash' in Cisco products",
    "Find high-severity bugs modified in the last 30 days",
    "Search for bugs affecting Catalyst 9200 series",
]


def get_support_prompt() -> str:
    """Build the instruction with today's date injected."""
    today = date.today().isoformat()

    return f"""You are a Cisco support assistant. You answer questions about Cisco
products, bugs, cases, end-of-life notices and software using the tools
provided by the Cisco Support API.

TODAY'S DATE: {today}
Resolve relative dates ("last 30 days", "recent") against this date.

Guidelines:
- Call a tool whenever the question needs Cisco data. Do not answer from memory.
- Pass only the arguments a tool declares. Always fill every required
  argument. If a tool reports invalid arguments, fix them and call it again.
- If a tool returns an error or no results, say so plainly and suggest a
  narrower or different search.
- Summarize results for a network engineer: bug IDs, severity, status,
  affected products and releases, and a one-line headline per item.
"""
