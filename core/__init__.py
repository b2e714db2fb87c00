# =============================================================================
# core/__init__.py
# =============================================================================
# Pure translation logic for the MCP → agent bridge.
#
# RULE:
#   Nothing in this package imports Google ADK or FastMCP.  Schema
#   translation and result reduction only need pydantic and the standard
#   library, so they can be exercised without a tool host or a model.
# =============================================================================
