"""URI-addressable, read-only access to resource collections.

Each registered collection type ``T`` is exposed through two locators:

- ``T://list`` lists every record of the collection
- ``T://{id}`` returns a single record
"""

import logging
from collections.abc import Sequence
from typing import Any

from crud_mcp.api.mcp.providers import BaseResourceProvider
from crud_mcp.store.errors import ApiError
from crud_mcp.store.interface import ResourceApi

logger = logging.getLogger(__name__)

DEFAULT_COLLECTIONS = ("users", "products", "orders")
SCHEME_SEPARATOR = "://"
LIST_SEGMENT = "list"


def parse_locator(uri: str, collections: Sequence[str]) -> tuple[str, str | None]:
    """Split a locator into its collection and record identifier.

    Args:
        uri: Locator such as ``users://list`` or ``users://users-1-abc``
        collections: Collection types that may appear as the scheme

    Returns:
        Tuple of (collection, id); id is None for a listing locator

    Raises:
        ApiError: INVALID_URI if the locator does not have the expected shape
    """
    if SCHEME_SEPARATOR not in uri:
        raise ApiError.invalid_uri(uri, "Resource URI must look like <collection>://<id>")

    collection, _, remainder = uri.partition(SCHEME_SEPARATOR)
    if collection not in collections:
        raise ApiError.invalid_uri(uri, f"Unknown resource collection '{collection}'")
    if not remainder:
        raise ApiError.invalid_uri(uri, "Resource URI is missing an identifier")

    if remainder == LIST_SEGMENT:
        return collection, None
    return collection, remainder


class CollectionResourceProvider(BaseResourceProvider):
    """Resolves collection locators against a ResourceApi."""

    def __init__(
        self, api: ResourceApi, collections: Sequence[str] = DEFAULT_COLLECTIONS
    ):
        """Initialize the resource provider.

        Args:
            api: Resource API that answers list and get lookups
            collections: Collection types to expose as URI schemes
        """
        self._api = api
        self._collections = tuple(dict.fromkeys(collections))

    @property
    def collections(self) -> tuple[str, ...]:
        """Registered collection types."""
        return self._collections

    def get_resources(self) -> list[dict[str, Any]]:
        """Return one listing resource per collection type."""
        return [
            {
                "uri": f"{collection}{SCHEME_SEPARATOR}{LIST_SEGMENT}",
                "name": f"{collection}-list",
                "title": f"List all {collection}",
                "description": f"Returns all {collection} in the collection",
                "mimeType": "application/json",
            }
            for collection in self._collections
        ]

    def get_resource_templates(self) -> list[dict[str, Any]]:
        """Return one by-id template per collection type."""
        return [
            {
                "uriTemplate": f"{collection}{SCHEME_SEPARATOR}{{id}}",
                "name": f"{collection}-by-id",
                "title": f"Get {collection} by ID",
                "description": f"Returns a specific {collection} by its ID",
                "mimeType": "application/json",
            }
            for collection in self._collections
        ]

    def has_resource(self, uri: str) -> bool:
        """Whether ``uri`` is a well-formed locator for a registered collection."""
        try:
            parse_locator(uri, self._collections)
        except ApiError:
            return False
        return True

    async def get_resource(self, uri: str) -> Any:
        """Resolve a locator to a listing or a single record.

        Args:
            uri: ``T://list`` or ``T://{id}``

        Returns:
            List of records for a listing locator, otherwise the record

        Raises:
            ApiError: INVALID_URI for a malformed locator, NOT_FOUND for a
                missing record
        """
        collection, resource_id = parse_locator(uri, self._collections)
        if resource_id is None:
            logger.debug(f"Resolving {uri} to list({collection})")
            return await self._api.list(collection)

        logger.debug(f"Resolving {uri} to get({collection}, {resource_id})")
        return await self._api.get(collection, resource_id)
