"""In-memory reference implementation of the resource API."""

import logging
import secrets
import string
import time

from .errors import ApiError
from .interface import Query, Record, ResourceApi
from .query import filter_records

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_RANDOM_LENGTH = 9


def generate_id(collection: str) -> str:
    """Build an identifier of the form ``{collection}-{epoch_ms}-{random}``."""
    random_part = "".join(
        secrets.choice(_ID_ALPHABET) for _ in range(_ID_RANDOM_LENGTH)
    )
    return f"{collection}-{time.time_ns() // 1_000_000}-{random_part}"


class InMemoryResourceApi(ResourceApi):
    """Resource API backed by per-collection dictionaries.

    Collections are created lazily on first write and never removed. Reads of
    a collection that was never written see it as empty.
    Dictionaries keep insertion order, which is the listing order.
    Operations never await, so each one runs to completion on the event loop
    without interleaving with other operations.
    """

    def __init__(self) -> None:
        self._storage: dict[str, dict[str, Record]] = {}

    def get_or_create_collection(self, resource: str) -> dict[str, Record]:
        """Get the collection for a resource type, creating it if needed."""
        collection = self._storage.get(resource)
        if collection is None:
            collection = self._storage[resource] = {}
            logger.debug(f"Created collection '{resource}'")
        return collection

    def collection_names(self) -> list[str]:
        """Names of the collections created so far."""
        return list(self._storage)

    async def create(self, resource: str, data: Record) -> dict[str, str]:
        collection = self.get_or_create_collection(resource)

        resource_id = generate_id(resource)
        while resource_id in collection:
            resource_id = generate_id(resource)

        collection[resource_id] = {**data, "id": resource_id}
        logger.debug(f"Created {resource} record {resource_id}")
        return {"id": resource_id}

    async def get(self, resource: str, resource_id: str) -> Record:
        collection = self._storage.get(resource, {})
        record = collection.get(resource_id)
        if record is None:
            raise ApiError.not_found(resource, resource_id)
        return dict(record)

    async def list(self, resource: str, query: Query | None = None) -> list[Record]:
        collection = self._storage.get(resource, {})
        return [dict(record) for record in filter_records(collection.values(), query)]

    async def update(self, resource: str, resource_id: str, data: Record) -> None:
        collection = self._storage.get(resource, {})
        existing = collection.get(resource_id)
        if existing is None:
            raise ApiError.not_found(resource, resource_id)
        collection[resource_id] = {**existing, **data, "id": resource_id}
        logger.debug(f"Updated {resource} record {resource_id}")

    async def delete(self, resource: str, resource_id: str) -> None:
        collection = self._storage.get(resource, {})
        if resource_id not in collection:
            raise ApiError.not_found(resource, resource_id)
        del collection[resource_id]
        logger.debug(f"Deleted {resource} record {resource_id}")
