"""Base implementations for MCP providers."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any


class BaseToolProvider(ABC):
    """Base implementation for tool providers."""

    @property
    @abstractmethod
    def tools(self) -> Mapping[str, Any]:
        """Tool objects keyed by name, each exposing an async ``execute`` method."""
        pass

    @abstractmethod
    def get_tools(self) -> Sequence[dict[str, Any]]:
        """Return list of tool definitions.

        Returns:
            Sequence of tool definitions in MCP protocol format.
        """
        pass

    @abstractmethod
    async def call_tool(self, name: str, arguments: dict[str, Any]) -> Any:
        """Execute a tool with given arguments.

        Args:
            name: Tool name to execute
            arguments: Tool arguments

        Returns:
            Tool execution result

        Raises:
            ToolError: If tool execution fails
        """
        pass


class BaseResourceProvider(ABC):
    """Base implementation for resource providers."""

    @abstractmethod
    def get_resources(self) -> Sequence[dict[str, Any]]:
        """Return list of static resource definitions.

        Returns:
            Sequence of resource definitions in MCP protocol format.
        """
        pass

    def get_resource_templates(self) -> Sequence[dict[str, Any]]:
        """Return list of URI template definitions.

        Providers without parameterized URIs keep the default empty list.
        """
        return []

    @abstractmethod
    async def get_resource(self, uri: str) -> Any:
        """Retrieve a resource by URI.

        Args:
            uri: Resource URI to retrieve

        Returns:
            Resource data

        Raises:
            ApiError: If the URI is malformed or names a missing record
        """
        pass
