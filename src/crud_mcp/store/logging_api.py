"""Resource API decorator that logs every operation."""

import json
import logging

from .errors import ApiError
from .interface import Query, Record, ResourceApi

logger = logging.getLogger(__name__)


class LoggingResourceApi(ResourceApi):
    """Wraps another ResourceApi and records each call.

    Results and errors from the wrapped API pass through unchanged, so this
    can be swapped in for any backend without changing caller behaviour.
    """

    def __init__(self, inner: ResourceApi):
        """Initialize the logging wrapper.

        Args:
            inner: The resource API that performs the actual operations
        """
        self._inner = inner
        self._history: list[str] = []

    @property
    def inner(self) -> ResourceApi:
        """The wrapped resource API."""
        return self._inner

    @property
    def history(self) -> list[str]:
        """Copy of the operation log entries, oldest first."""
        return self._history.copy()

    def _record(self, entry: str) -> None:
        self._history.append(entry)
        logger.info(entry)

    def _failed(self, entry: str, error: ApiError) -> None:
        self._history.append(f"{entry} !! {error.kind.value}")
        logger.warning(f"{entry} failed: {error.message}")

    async def create(self, resource: str, data: Record) -> dict[str, str]:
        result = await self._inner.create(resource, data)
        self._record(f"CREATE {resource}: {_dump(data)} -> {result['id']}")
        return result

    async def get(self, resource: str, resource_id: str) -> Record:
        entry = f"GET {resource}/{resource_id}"
        try:
            record = await self._inner.get(resource, resource_id)
        except ApiError as e:
            self._failed(entry, e)
            raise
        self._record(entry)
        return record

    async def list(self, resource: str, query: Query | None = None) -> list[Record]:
        records = await self._inner.list(resource, query)
        self._record(f"LIST {resource}: {_dump(query or {})} -> {len(records)} items")
        return records

    async def update(self, resource: str, resource_id: str, data: Record) -> None:
        entry = f"UPDATE {resource}/{resource_id}: {_dump(data)}"
        try:
            await self._inner.update(resource, resource_id, data)
        except ApiError as e:
            self._failed(entry, e)
            raise
        self._record(entry)

    async def delete(self, resource: str, resource_id: str) -> None:
        entry = f"DELETE {resource}/{resource_id}"
        try:
            await self._inner.delete(resource, resource_id)
        except ApiError as e:
            self._failed(entry, e)
            raise
        self._record(entry)


def _dump(value: object) -> str:
    return json.dumps(value, default=str, sort_keys=True)
