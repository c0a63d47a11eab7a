"""CRUD tools that delegate every operation to a ResourceApi."""

import logging
from typing import Annotated, Any, ClassVar, NoReturn

from pydantic import BaseModel, Field, JsonValue, ValidationError

from crud_mcp.core.mcp.exceptions import ToolError
from crud_mcp.core.mcp.validation import format_validation_errors
from crud_mcp.store.errors import ApiError
from crud_mcp.store.interface import ResourceApi

logger = logging.getLogger(__name__)


class ResourceParams(BaseModel):
    """Parameters shared by every CRUD tool."""

    # Define field descriptions as class variables for reuse
    RESOURCE_DESC: ClassVar[str] = "Resource type (e.g., 'users', 'products')"
    ID_DESC: ClassVar[str] = "Resource ID"
    CREATE_DATA_DESC: ClassVar[str] = "Resource data to create"
    UPDATE_DATA_DESC: ClassVar[str] = (
        "Fields to update; omitted fields are kept and the id never changes"
    )
    QUERY_DESC: ClassVar[str] = (
        "Optional filter criteria; a record matches when every field is exactly equal"
    )

    resource: str = Field(description=RESOURCE_DESC, min_length=1)


class CreateResourceParams(ResourceParams):
    """Parameters for creating a resource."""

    data: dict[str, JsonValue] = Field(description=ResourceParams.CREATE_DATA_DESC)


class GetResourceParams(ResourceParams):
    """Parameters for reading or deleting a single resource."""

    id: str = Field(description=ResourceParams.ID_DESC, min_length=1)


class ListResourcesParams(ResourceParams):
    """Parameters for listing resources."""

    query: dict[str, JsonValue] | None = Field(
        None, description=ResourceParams.QUERY_DESC
    )


class UpdateResourceParams(GetResourceParams):
    """Parameters for updating a resource."""

    data: dict[str, JsonValue] = Field(description=ResourceParams.UPDATE_DATA_DESC)


class BaseResourceTool:
    """Shared plumbing for tools backed by a ResourceApi."""

    tool_name: ClassVar[str] = ""

    def __init__(self, api: ResourceApi):
        """Initialize the tool.

        Args:
            api: Resource API that performs the operation
        """
        self._api = api

    def _validate(self, model: type[BaseModel], **values: Any) -> Any:
        try:
            return model(**values)
        except ValidationError as e:
            raise ToolError(
                self.tool_name,
                format_validation_errors(e, f"{self.tool_name} request"),
            ) from e

    def _fail(self, action: str, error: Exception) -> NoReturn:
        if isinstance(error, ApiError):
            raise ToolError(
                self.tool_name, error.describe(), details=error.to_dict()
            ) from error

        logger.error(f"Failed to {action}: {error}")
        raise ToolError(self.tool_name, f"Failed to {action}: {error}") from error


class CreateResourceTool(BaseResourceTool):
    """Tool for creating resources."""

    tool_name = "create"

    async def execute(
        self,
        resource: Annotated[str, Field(description=ResourceParams.RESOURCE_DESC)],
        data: Annotated[
            dict[str, Any], Field(description=ResourceParams.CREATE_DATA_DESC)
        ],
    ) -> dict[str, Any]:
        """Creates a new resource in the specified collection.

        Args:
            resource: Resource type (e.g., 'users', 'products')
            data: Resource data to create

        Returns:
            Creation status with the generated resource ID

        Raises:
            ToolError: If parameters are invalid or creation fails
        """
        params = self._validate(CreateResourceParams, resource=resource, data=data)

        try:
            result = await self._api.create(params.resource, params.data)
        except Exception as e:
            self._fail(f"create {params.resource}", e)

        return {
            "status": "created",
            "resource": params.resource,
            "id": result["id"],
            "message": f"Created {params.resource} with id: {result['id']}",
        }


class GetResourceTool(BaseResourceTool):
    """Tool for reading a single resource."""

    tool_name = "get"

    async def execute(
        self,
        resource: Annotated[str, Field(description=ResourceParams.RESOURCE_DESC)],
        id: Annotated[str, Field(description=ResourceParams.ID_DESC)],
    ) -> dict[str, Any]:
        """Retrieves a specific resource by ID.

        Args:
            resource: Resource type
            id: Resource ID

        Returns:
            The stored resource data

        Raises:
            ToolError: If the resource does not exist
        """
        params = self._validate(GetResourceParams, resource=resource, id=id)

        try:
            return await self._api.get(params.resource, params.id)
        except Exception as e:
            self._fail(f"get {params.resource}", e)


class ListResourcesTool(BaseResourceTool):
    """Tool for listing and filtering resources."""

    tool_name = "list"

    async def execute(
        self,
        resource: Annotated[str, Field(description=ResourceParams.RESOURCE_DESC)],
        query: Annotated[
            dict[str, Any] | None, Field(description=ResourceParams.QUERY_DESC)
        ] = None,
    ) -> dict[str, Any]:
        """Lists all resources of a type with optional filtering.

        Args:
            resource: Resource type
            query: Optional filter criteria

        Returns:
            Matching resources in insertion order with their count

        Raises:
            ToolError: If parameters are invalid or listing fails
        """
        params = self._validate(ListResourcesParams, resource=resource, query=query)

        try:
            items = await self._api.list(params.resource, params.query)
        except Exception as e:
            self._fail(f"list {params.resource}", e)

        return {"resource": params.resource, "count": len(items), "items": items}


class UpdateResourceTool(BaseResourceTool):
    """Tool for merging fields into an existing resource."""

    tool_name = "update"

    async def execute(
        self,
        resource: Annotated[str, Field(description=ResourceParams.RESOURCE_DESC)],
        id: Annotated[str, Field(description=ResourceParams.ID_DESC)],
        data: Annotated[
            dict[str, Any], Field(description=ResourceParams.UPDATE_DATA_DESC)
        ],
    ) -> dict[str, Any]:
        """Updates an existing resource.

        Args:
            resource: Resource type
            id: Resource ID
            data: Data to update

        Returns:
            Update status

        Raises:
            ToolError: If the resource does not exist
        """
        params = self._validate(
            UpdateResourceParams, resource=resource, id=id, data=data
        )

        try:
            await self._api.update(params.resource, params.id, params.data)
        except Exception as e:
            self._fail(f"update {params.resource}", e)

        return {
            "status": "updated",
            "resource": params.resource,
            "id": params.id,
            "message": f"Successfully updated {params.resource} with id: {params.id}",
        }


class DeleteResourceTool(BaseResourceTool):
    """Tool for deleting resources."""

    tool_name = "delete"

    async def execute(
        self,
        resource: Annotated[str, Field(description=ResourceParams.RESOURCE_DESC)],
        id: Annotated[str, Field(description=ResourceParams.ID_DESC)],
    ) -> dict[str, Any]:
        """Deletes a resource by ID.

        Args:
            resource: Resource type
            id: Resource ID

        Returns:
            Deletion status

        Raises:
            ToolError: If the resource does not exist
        """
        params = self._validate(GetResourceParams, resource=resource, id=id)

        try:
            await self._api.delete(params.resource, params.id)
        except Exception as e:
            self._fail(f"delete {params.resource}", e)

        return {
            "status": "deleted",
            "resource": params.resource,
            "id": params.id,
            "message": f"Successfully deleted {params.resource} with id: {params.id}",
        }
