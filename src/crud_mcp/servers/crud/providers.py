"""CRUD tool provider with resource API injection."""

from collections.abc import Mapping, Sequence
from typing import Any

from crud_mcp.api.mcp.providers import BaseToolProvider
from crud_mcp.core.mcp.exceptions import ToolError
from crud_mcp.store.interface import ResourceApi
from crud_mcp.utils.schema import generate_tool_schema

from .tools import (
    BaseResourceTool,
    CreateResourceTool,
    DeleteResourceTool,
    GetResourceTool,
    ListResourcesTool,
    UpdateResourceTool,
)

TOOL_TITLES = {
    "create": "Create Resource",
    "get": "Get Resource",
    "list": "List Resources",
    "update": "Update Resource",
    "delete": "Delete Resource",
}


class CrudToolProvider(BaseToolProvider):
    """Tool provider for the five CRUD operations.

    The provider owns one tool object per operation, all sharing the injected
    ResourceApi. Tool objects are exposed through ``tools`` so the server
    adapter can register their ``execute`` methods directly with FastMCP.
    """

    def __init__(self, api: ResourceApi):
        """Initialize with the backing resource API.

        Args:
            api: Resource API every tool delegates to
        """
        self._api = api
        self._tools: dict[str, BaseResourceTool] = {
            tool.tool_name: tool
            for tool in (
                CreateResourceTool(api),
                GetResourceTool(api),
                ListResourcesTool(api),
                UpdateResourceTool(api),
                DeleteResourceTool(api),
            )
        }

    @property
    def api(self) -> ResourceApi:
        """Access to the injected resource API."""
        return self._api

    @property
    def tools(self) -> Mapping[str, BaseResourceTool]:
        """Tool objects keyed by tool name."""
        return self._tools

    def get_tools(self) -> Sequence[dict[str, Any]]:
        """Return tool definitions generated from the execute signatures.

        Schema is generated from each execute method's type hints and
        docstring, so documentation stays in sync with implementation.
        """
        definitions = []
        for name, tool in self._tools.items():
            definition = generate_tool_schema(tool.execute, name)
            definition["title"] = TOOL_TITLES.get(name, name.title())
            definitions.append(definition)
        return definitions

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> Any:
        """Execute a CRUD tool.

        Args:
            name: Tool name to execute
            arguments: Tool arguments from LLM

        Returns:
            Tool execution result

        Raises:
            ToolError: If the tool is unknown or execution fails
        """
        tool = self._tools.get(name)
        if tool is None:
            raise ToolError(name, f"Unknown tool: {name}")
        try:
            return await tool.execute(**arguments)
        except TypeError as e:
            raise ToolError(name, f"Invalid arguments: {e}") from e
