# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the bridge)
# =============================================================================
#
# These dataclasses describe what flows between the tool host and the agent:
#   - OperationDescriptor: one operation as the tool host advertises it
#   - StringRule / AnyRule: the two kinds of translated field rules
#   - ParameterSchema: parameter name → rule, one entry per declared field
#
# TWO CASES ONLY:
#   The tool host tags each field with an arbitrary type string.  We only
#   recognize "string".  Everything else (numbers, arrays, objects, missing
#   tags, garbage) becomes AnyRule, which accepts whatever the model sends.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Optional, Union


# Sentinel returned when a tool call comes back with no content at all.
NO_RESPONSE = "No response from tool"

# Type tag that maps to a string-constrained rule.
STRING_TYPE = "string"


# -----------------------------------------------------------------------------
# OperationDescriptor — read-only view of one tool host operation
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class OperationDescriptor:
    """One operation as listed by the tool host."""

    name: str
    description: Optional[str] = None
    input_schema: Optional[dict[str, Any]] = None

    @classmethod
    def from_listing(cls, item: Any) -> "OperationDescriptor":
        """Build from an MCP ``Tool`` object or a plain dict."""
        if isinstance(item, dict):
            return cls(
                name=item["name"],
                description=item.get("description"),
                input_schema=item.get("inputSchema"),
            )
        return cls(
            name=item.name,
            description=getattr(item, "description", None),
            input_schema=getattr(item, "inputSchema", None),
        )

    @property
    def display_description(self) -> str:
        # Empty descriptions count as missing.
        return self.description or f"MCP tool: {self.name}"


# -----------------------------------------------------------------------------
# Field rules — a tagged variant with exactly two cases
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class StringRule:
    """Argument must be a string.  Carries the declared description."""

    description: str = ""

    kind = "string"


@dataclass(frozen=True)
class AnyRule:
    """Argument may be any value, including absent."""

    kind = "any"


FieldRule = Union[StringRule, AnyRule]

# Parameter name → rule.  Insertion order follows the declaration.
ParameterSchema = dict[str, FieldRule]

