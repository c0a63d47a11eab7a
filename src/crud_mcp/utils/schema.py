"""Utilities for generating MCP tool schemas from function signatures."""

import inspect
import types
from collections.abc import Callable
from typing import Annotated, Any, Literal, Union, get_args, get_origin, get_type_hints

from pydantic.fields import FieldInfo


def python_type_to_json_schema(python_type: Any) -> dict[str, Any]:
    """Convert Python type hint to JSON schema type definition.

    Args:
        python_type: Python type to convert

    Returns:
        JSON schema type definition
    """
    origin = get_origin(python_type)
    args = get_args(python_type)

    if origin is Annotated:
        return python_type_to_json_schema(args[0])

    # Handle Union types (including Optional)
    if origin is Union or origin is types.UnionType:
        non_none = [arg for arg in args if arg is not type(None)]
        if len(non_none) == 1:
            # Optional types don't need to be in required array
            return python_type_to_json_schema(non_none[0])
        return {"anyOf": [python_type_to_json_schema(arg) for arg in non_none]}

    if origin is Literal:
        return {"type": "string", "enum": list(args)}

    if python_type is Any:
        return {}
    if python_type is str:
        return {"type": "string"}
    if python_type is bool:
        return {"type": "boolean"}
    if python_type is int:
        return {"type": "integer"}
    if python_type is float:
        return {"type": "number"}
    if python_type is list or origin is list:
        if not args:
            return {"type": "array"}
        return {"type": "array", "items": python_type_to_json_schema(args[0])}
    if python_type is dict or origin is dict:
        schema: dict[str, Any] = {"type": "object"}
        if len(args) == 2 and args[1] is not Any:
            schema["additionalProperties"] = python_type_to_json_schema(args[1])
        return schema

    # Default to string for unknown types
    return {"type": "string"}


def _annotated_description(hint: Any) -> str | None:
    if get_origin(hint) is not Annotated:
        return None
    for meta in get_args(hint)[1:]:
        if isinstance(meta, FieldInfo) and meta.description:
            return meta.description
    return None


def _docstring_arg_descriptions(doc: str | None) -> dict[str, str]:
    descriptions: dict[str, str] = {}
    if not doc:
        return descriptions

    in_args = False
    for line in doc.split("\n"):
        line = line.strip()
        if line == "Args:":
            in_args = True
            continue
        if not in_args:
            continue
        if line == "" or line in ("Returns:", "Raises:"):
            break
        name, sep, description = line.partition(":")
        if sep and name.isidentifier():
            descriptions[name] = description.strip()
    return descriptions


def _docstring_summary(doc: str | None) -> str:
    if not doc:
        return ""
    summary_lines = []
    for line in doc.split("\n"):
        line = line.strip()
        if not line or line in ("Args:", "Returns:", "Raises:"):
            if summary_lines:
                break
            continue
        summary_lines.append(line)
    return " ".join(summary_lines)


def generate_tool_schema(
    func: Callable[..., Any], tool_name: str | None = None
) -> dict[str, Any]:
    """Generate MCP tool schema from function signature and docstring.

    Parameter descriptions come from ``Annotated[..., Field(description=...)]``
    metadata, falling back to the docstring's Args section.

    Args:
        func: Function to generate schema for
        tool_name: Override tool name (defaults to function name)

    Returns:
        MCP tool schema dictionary
    """
    sig = inspect.signature(func)
    hints = get_type_hints(func, include_extras=True)
    doc_descriptions = _docstring_arg_descriptions(func.__doc__)

    properties = {}
    required = []

    for param_name, param in sig.parameters.items():
        if param_name == "self":
            continue

        hint = hints.get(param_name, str)
        schema = python_type_to_json_schema(hint)

        description = _annotated_description(hint) or doc_descriptions.get(param_name)
        if description:
            schema["description"] = description

        if param.default is param.empty:
            required.append(param_name)
        elif param.default is not None:
            schema["default"] = param.default

        properties[param_name] = schema

    return {
        "name": tool_name or func.__name__,
        "description": _docstring_summary(func.__doc__),
        "inputSchema": {
            "type": "object",
            "properties": properties,
            "required": required,
        },
    }
