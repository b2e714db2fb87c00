# =============================================================================
# core/schema.py  —  Schema Translator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a tool host's loosely-typed input declaration (JSON-Schema-ish,
#   whatever the server felt like sending) into a ParameterSchema, and turns
#   a ParameterSchema into a pydantic model the agent side validates against.
#
# THE RULE:
#   For every key under "properties":
#     - type == "string"  →  StringRule(description or "")
#     - anything else     →  AnyRule()
#   Unknown types are never an error.  A new field kind on the server side
#   must not stop the tool from registering.
#
# VALIDATION MODEL:
#   StringRule fields are required strings (pydantic strict enough to reject
#   ints).  AnyRule fields are optional and accept anything.  Field names are
#   internal placeholders aliased to the real parameter names, so parameters
#   like "from", "_cursor" or "model_config" never collide with Python or
#   pydantic attribute rules.
# =============================================================================

import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, create_model

from core.models import STRING_TYPE, AnyRule, FieldRule, ParameterSchema, StringRule

logger = logging.getLogger(__name__)


def translate_field(name: str, descriptor: Any) -> FieldRule:
    """Map one field descriptor to a rule."""
    if not isinstance(descriptor, Mapping):
        logger.debug("Field %r has malformed descriptor %r; accepting any value", name, descriptor)
        return AnyRule()

    declared_type = descriptor.get("type")
    if declared_type == STRING_TYPE:
        description = descriptor.get("description") or ""
        return StringRule(description=str(description))

    logger.debug("Field %r declares type %r; accepting any value", name, declared_type)
    return AnyRule()


def translate_input_schema(input_schema: Optional[Mapping[str, Any]]) -> ParameterSchema:
    """Translate an operation's input declaration into a ParameterSchema.

    ``input_schema`` is the whole declaration (``{"type": "object",
    "properties": {...}}``).  A missing declaration, a declaration without
    properties, or a non-mapping ``properties`` value all yield ``{}``: the
    tool takes no arguments.
    """
    if not isinstance(input_schema, Mapping):
        return {}
    properties = input_schema.get("properties")
    if not isinstance(properties, Mapping):
        return {}
    return {str(name): translate_field(name, descriptor) for name, descriptor in properties.items()}


def build_arguments_model(tool_name: str, schema: ParameterSchema) -> type[BaseModel]:
    """Create a pydantic model that validates call arguments for one tool."""
    fields: dict[str, Any] = {}
    for index, (param, rule) in enumerate(schema.items()):
        if isinstance(rule, StringRule):
            fields[f"field_{index}"] = (str, Field(..., alias=param, description=rule.description))
        else:
            fields[f"field_{index}"] = (Any, Field(None, alias=param))

    return create_model(
        f"{_model_name(tool_name)}Arguments",
        __config__=ConfigDict(extra="ignore", populate_by_name=False),
        **fields,
    )


def validate_arguments(model: type[BaseModel], arguments: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Validate ``arguments`` and return them keyed by the original names.

    Unknown keys are dropped.  Unconstrained fields the caller never sent are
    left out rather than forwarded as ``None``.
    """
    parsed = model.model_validate(dict(arguments or {}))
    return parsed.model_dump(by_alias=True, exclude_unset=True)


def _model_name(tool_name: str) -> str:
    parts = "".join(ch if ch.isalnum() else " " for ch in tool_name).split()
    return "".join(part[:1].upper() + part[1:] for part in parts) or "Tool"
