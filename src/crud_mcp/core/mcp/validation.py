"""Validation utilities for MCP tool parameters.

Reports every validation failure at once so an LLM can fix all of its
arguments in a single retry.
"""

from pydantic import ValidationError


def format_validation_errors(
    error: ValidationError, context: str = "parameters"
) -> str:
    """Format all Pydantic validation errors into a clear message for LLMs.

    Args:
        error: The Pydantic ValidationError containing all validation failures
        context: Description of what was being validated (e.g., "create request")

    Returns:
        Formatted error message showing all validation errors at once

    Example:
        >>> try:
        >>>     params = GetResourceParams(resource="", id=5)
        >>> except ValidationError as e:
        >>>     msg = format_validation_errors(e, "get request")
        >>>     # Returns: "Invalid get request - 2 errors:\n  • resource: ..."
    """
    errors = error.errors()

    if len(errors) == 1:
        err = errors[0]
        field = ".".join(str(x) for x in err["loc"]) or "input"
        input_val = err.get("input", "N/A")
        return (
            f"Invalid {context}: {field} - {err['msg']} (received: {repr(input_val)})"
        )

    msg_lines = [f"Invalid {context} - {len(errors)} errors:"]
    for err in errors:
        field = ".".join(str(x) for x in err["loc"]) or "input"
        input_val = err.get("input", "N/A")
        input_type = type(input_val).__name__ if input_val != "N/A" else "unknown"

        msg_lines.append(
            f"  • {field}: {err['msg']} (received {input_type}: {repr(input_val)})"
        )

    msg_lines.append("\nPlease fix all errors and retry with correct types.")
    return "\n".join(msg_lines)
