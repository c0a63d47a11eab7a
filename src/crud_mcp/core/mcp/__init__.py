"""Core MCP abstractions and protocols."""

from .exceptions import McpError, ResourceError, ToolError
from .protocols import McpServer, ResourceProvider, ToolProvider

__all__ = [
    "ToolProvider",
    "ResourceProvider",
    "McpServer",
    "McpError",
    "ToolError",
    "ResourceError",
]
