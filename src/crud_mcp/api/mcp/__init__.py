"""FastMCP server implementation."""

from .providers import BaseResourceProvider, BaseToolProvider
from .server import FastMcpServerAdapter

__all__ = [
    "FastMcpServerAdapter",
    "BaseToolProvider",
    "BaseResourceProvider",
]
