"""Abstract CRUD surface that every backing store implements."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import JsonValue

# A record is an ordered mapping of field name to JSON-compatible value.
Record = dict[str, JsonValue]
Query = dict[str, Any]


class ResourceApi(ABC):
    """Unified interface for all data operations.

    All data access from the MCP layer goes through this interface, so the
    backing store can be swapped without touching tools or resources. Every
    implementation must honour the same success and error semantics.
    """

    @abstractmethod
    async def create(self, resource: str, data: Record) -> dict[str, str]:
        """Create a new record in a collection.

        Args:
            resource: Collection name (e.g. 'users', 'products')
            data: Field mapping for the new record. A caller-supplied ``id``
                is replaced by the generated identifier.

        Returns:
            Mapping containing the generated ``id``
        """

    @abstractmethod
    async def get(self, resource: str, resource_id: str) -> Record:
        """Retrieve a record by identifier.

        Args:
            resource: Collection name
            resource_id: Record identifier

        Returns:
            The stored record

        Raises:
            ApiError: NOT_FOUND if the record does not exist
        """

    @abstractmethod
    async def list(self, resource: str, query: Query | None = None) -> list[Record]:
        """List records of a collection in insertion order.

        Args:
            resource: Collection name
            query: Optional exact-match filter criteria

        Returns:
            Matching records; empty for an unknown collection
        """

    @abstractmethod
    async def update(self, resource: str, resource_id: str, data: Record) -> None:
        """Shallow-merge fields into an existing record.

        Args:
            resource: Collection name
            resource_id: Record identifier
            data: Fields to overwrite; the ``id`` field is never changed

        Raises:
            ApiError: NOT_FOUND if the record does not exist
        """

    @abstractmethod
    async def delete(self, resource: str, resource_id: str) -> None:
        """Permanently remove a record.

        Args:
            resource: Collection name
            resource_id: Record identifier

        Raises:
            ApiError: NOT_FOUND if the record does not exist
        """
