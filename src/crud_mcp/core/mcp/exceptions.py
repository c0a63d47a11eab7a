"""MCP-related exceptions."""

from typing import Any


class McpError(Exception):
    """Base exception for MCP-related errors."""

    pass


class ToolError(McpError):
    """Exception raised when tool execution fails."""

    def __init__(
        self, tool_name: str, message: str, details: dict[str, Any] | None = None
    ):
        self.tool_name = tool_name
        self.details = details or {}
        super().__init__(f"Tool '{tool_name}' failed: {message}")

    @property
    def kind(self) -> str | None:
        """Error kind reported by the resource API, if any."""
        return self.details.get("kind")

    @property
    def status_code(self) -> int | None:
        """Status hint reported by the resource API, if any."""
        return self.details.get("status_code")


class ResourceError(McpError):
    """Exception raised when resource access fails."""

    def __init__(self, uri: str, message: str, details: dict[str, Any] | None = None):
        self.uri = uri
        self.details = details or {}
        super().__init__(f"Resource '{uri}' failed: {message}")

    @property
    def kind(self) -> str | None:
        """Error kind reported by the resource API, if any."""
        return self.details.get("kind")

    @property
    def status_code(self) -> int | None:
        """Status hint reported by the resource API, if any."""
        return self.details.get("status_code")
