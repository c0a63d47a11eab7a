"""Unit tests for the logging resource API decorator."""

import logging

import pytest

from crud_mcp.store.errors import ApiError, ErrorKind
from crud_mcp.store.logging_api import LoggingResourceApi
from crud_mcp.store.memory import InMemoryResourceApi


@pytest.fixture
def logging_api() -> LoggingResourceApi:
    """Provide a logging wrapper around a fresh in-memory API."""
    return LoggingResourceApi(InMemoryResourceApi())


class TestLoggingResourceApi:
    """Test that the decorator records calls and preserves the contract."""

    @pytest.mark.asyncio
    async def test_passes_results_through(self, logging_api):
        """Results are identical to the wrapped API's."""
        result = await logging_api.create("products", {"name": "Laptop"})

        assert await logging_api.get("products", result["id"]) == {
            "name": "Laptop",
            "id": result["id"],
        }
        assert await logging_api.inner.get("products", result["id"]) == {
            "name": "Laptop",
            "id": result["id"],
        }

    @pytest.mark.asyncio
    async def test_history_records_operations(self, logging_api):
        """Every operation is appended to the history in call order."""
        # Act
        result = await logging_api.create("products", {"name": "Laptop"})
        resource_id = result["id"]
        await logging_api.update("products", resource_id, {"price": 99.99})
        await logging_api.list("products", {"name": "Laptop"})
        await logging_api.get("products", resource_id)
        await logging_api.delete("products", resource_id)

        # Assert
        assert logging_api.history == [
            f'CREATE products: {{"name": "Laptop"}} -> {resource_id}',
            f'UPDATE products/{resource_id}: {{"price": 99.99}}',
            'LIST products: {"name": "Laptop"} -> 1 items',
            f"GET products/{resource_id}",
            f"DELETE products/{resource_id}",
        ]

    @pytest.mark.asyncio
    async def test_errors_are_reraised(self, logging_api):
        """NOT_FOUND from the wrapped API reaches the caller unchanged."""
        for call in (
            logging_api.get("users", "missing"),
            logging_api.update("users", "missing", {"a": 1}),
            logging_api.delete("users", "missing"),
        ):
            with pytest.raises(ApiError) as exc_info:
                await call
            assert exc_info.value.kind is ErrorKind.NOT_FOUND

        assert logging_api.history == [
            "GET users/missing !! NOT_FOUND",
            'UPDATE users/missing: {"a": 1} !! NOT_FOUND',
            "DELETE users/missing !! NOT_FOUND",
        ]

    @pytest.mark.asyncio
    async def test_failures_logged_as_warnings(self, logging_api, caplog):
        """Failed operations are logged at WARNING level."""
        with caplog.at_level(logging.INFO, logger="crud_mcp.store.logging_api"):
            await logging_api.list("users")
            with pytest.raises(ApiError):
                await logging_api.get("users", "missing")

        levels = [record.levelno for record in caplog.records]
        assert levels == [logging.INFO, logging.WARNING]
        assert "users with id missing not found" in caplog.records[-1].getMessage()

    @pytest.mark.asyncio
    async def test_history_is_a_copy(self, logging_api):
        """Mutating the returned history does not affect the log."""
        await logging_api.list("users")

        history = logging_api.history
        history.clear()

        assert len(logging_api.history) == 1
