# =============================================================================
# core/results.py  —  Invocation Result Reduction
# =============================================================================
#
# A tool host answers every call with a list of typed content parts:
# text, images, audio, embedded resources, whatever comes next.  The agent
# wants one string.  Reduction, first match wins:
#
#   1. no parts (or no content at all)  →  "No response from tool"
#   2. at least one "text" part         →  that first part's text, verbatim
#   3. parts, none of them text         →  JSON dump of the whole list
#
# Parts may arrive as pydantic models (mcp.types.TextContent etc.) or as
# plain dicts; both are handled.
# =============================================================================

import json
from typing import Any, Optional, Sequence

from core.models import NO_RESPONSE


def part_kind(part: Any) -> Optional[str]:
    """Return the ``type`` tag of a content part, if any."""
    if isinstance(part, dict):
        return part.get("type")
    return getattr(part, "type", None)


def part_to_dict(part: Any) -> Any:
    if hasattr(part, "model_dump"):
        return part.model_dump(mode="json", by_alias=True, exclude_none=True)
    return part


def serialize_content(content: Sequence[Any]) -> str:
    """Serialize a full content list to JSON."""
    return json.dumps([part_to_dict(part) for part in content], ensure_ascii=False, default=str)


def reduce_content(content: Optional[Sequence[Any]]) -> str:
    """Reduce a content list to the single string handed back to the agent."""
    if not content:
        return NO_RESPONSE

    for part in content:
        if part_kind(part) == "text":
            text = part.get("text") if isinstance(part, dict) else getattr(part, "text", None)
            # An empty text part still counts as the answer.
            return text if isinstance(text, str) else str(text or "")

    return serialize_content(content)


def reduce_result(result: Any) -> str:
    """Reduce a whole call result (an object or dict with ``content``)."""
    if result is None:
        return NO_RESPONSE
    if isinstance(result, dict):
        return reduce_content(result.get("content"))
    return reduce_content(getattr(result, "content", None))
