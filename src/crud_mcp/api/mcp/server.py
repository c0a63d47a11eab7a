"""FastMCP server adapter implementation."""

import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from crud_mcp import __version__
from crud_mcp.core.mcp.exceptions import ResourceError
from crud_mcp.core.mcp.protocols import ResourceProvider, ToolProvider
from crud_mcp.store.errors import ApiError

logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = (
    "Generic CRUD over named collections. Use the create/get/list/update/delete "
    "tools to manage records, or read <collection>://list and <collection>://{id} "
    "resources for read-only access."
)


class FastMcpServerAdapter:
    """Adapter that makes FastMCP work with our protocols."""

    def __init__(self, name: str = "crud-mcp", version: str = __version__):
        """Initialize the FastMCP server adapter.

        Args:
            name: Server name for MCP identification
            version: Server version reported to clients and by /health
        """
        self._name = name
        self._version = version
        self._mcp = FastMCP(name, instructions=SERVER_INSTRUCTIONS, version=version)
        self._tool_providers: list[ToolProvider] = []
        self._resource_providers: list[ResourceProvider] = []
        self._register_health_route()

    def add_tool_provider(self, provider: ToolProvider) -> None:
        """Add a tool provider to the server.

        Args:
            provider: Object implementing ToolProvider protocol
        """
        self._tool_providers.append(provider)
        self._register_tools(provider)

    def add_resource_provider(self, provider: ResourceProvider) -> None:
        """Add a resource provider to the server.

        Args:
            provider: Object implementing ResourceProvider protocol
        """
        self._resource_providers.append(provider)
        self._register_resources(provider)

    def _register_tools(self, provider: ToolProvider) -> None:
        """Register each tool object's ``execute`` method with FastMCP.

        FastMCP derives the input schema from the ``execute`` signature; the
        provider's definitions supply the title and description.
        """
        definitions = {tool_def["name"]: tool_def for tool_def in provider.get_tools()}

        for tool_name, tool in provider.tools.items():
            tool_def = definitions.get(tool_name, {})
            self._mcp.tool(
                tool.execute,
                name=tool_name,
                title=tool_def.get("title"),
                description=tool_def.get("description", ""),
            )

    def _register_resources(self, provider: ResourceProvider) -> None:
        """Register static resources and URI templates with FastMCP."""
        for resource_def in provider.get_resources():
            resource_uri = resource_def["uri"]

            def make_resource_wrapper(
                uri: str, prov: ResourceProvider
            ) -> Callable[[], Awaitable[Any]]:
                async def resource_wrapper() -> Any:
                    """Wrapper function for resource access."""
                    return await _read_resource(prov, uri)

                return resource_wrapper

            self._mcp.resource(
                resource_uri,
                name=resource_def.get("name", ""),
                title=resource_def.get("title"),
                description=resource_def.get("description", ""),
                mime_type=resource_def.get("mimeType", "application/json"),
            )(make_resource_wrapper(resource_uri, provider))

        for template_def in provider.get_resource_templates():
            uri_template = template_def["uriTemplate"]

            def make_template_wrapper(
                template: str, prov: ResourceProvider
            ) -> Callable[[str], Awaitable[Any]]:
                async def template_wrapper(id: str) -> Any:
                    """Wrapper function for templated resource access."""
                    return await _read_resource(prov, template.replace("{id}", id))

                return template_wrapper

            self._mcp.resource(
                uri_template,
                name=template_def.get("name", ""),
                title=template_def.get("title"),
                description=template_def.get("description", ""),
                mime_type=template_def.get("mimeType", "application/json"),
            )(make_template_wrapper(uri_template, provider))

    def _register_health_route(self) -> None:
        """Expose GET /health on the HTTP transports."""

        async def health(_request: Request) -> Response:
            return JSONResponse(self.health_status())

        self._mcp.custom_route("/health", methods=["GET"], name="health")(health)

    def health_status(self) -> dict[str, Any]:
        """Payload served by the health check endpoint."""
        return {
            "status": "ok",
            "service": self._name,
            "version": self._version,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    def start(self, transport: str = "stdio", **kwargs: Any) -> None:
        """Start the MCP server.

        Args:
            transport: Transport type (stdio, http, sse)
            **kwargs: Additional server configuration (host, port, path,
                allowed_hosts, allowed_origins for HTTP)
        """
        if transport == "stdio":
            self._mcp.run(transport="stdio")
        elif transport == "http":
            # HTTP streaming transport (recommended)
            host = kwargs.get("host", "127.0.0.1")
            port = kwargs.get("port", 3000)
            path = kwargs.get("path", "/mcp")
            logger.info(f"Starting HTTP MCP server at http://{host}:{port}{path}")
            self._mcp.run(
                transport="http",
                host=host,
                port=port,
                path=path,
                allowed_hosts=kwargs.get("allowed_hosts"),
                allowed_origins=kwargs.get("allowed_origins"),
            )
        elif transport == "sse":
            # SSE transport (deprecated but supported)
            host = kwargs.get("host", "127.0.0.1")
            port = kwargs.get("port", 3000)
            logger.info(f"Starting SSE MCP server at http://{host}:{port}")
            self._mcp.run(transport="sse", host=host, port=port)
        else:
            raise ValueError(f"Unsupported transport: {transport}")

    async def stop(self) -> None:
        """Stop the MCP server."""
        # FastMCP handles cleanup automatically
        pass

    @property
    def mcp(self) -> FastMCP:
        """Access to underlying FastMCP instance."""
        return self._mcp


async def _read_resource(provider: ResourceProvider, uri: str) -> Any:
    try:
        return await provider.get_resource(uri)
    except ApiError as e:
        raise ResourceError(uri, e.describe(), details=e.to_dict()) from e
    except Exception as e:
        raise ResourceError(uri, str(e)) from e
