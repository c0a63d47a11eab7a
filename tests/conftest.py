"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add src to path for testing
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from crud_mcp.store.memory import InMemoryResourceApi  # noqa: E402


@pytest.fixture
def api() -> InMemoryResourceApi:
    """Provide an empty in-memory resource API."""
    return InMemoryResourceApi()


@pytest.fixture
def sample_data():
    """Provide sample record data for tests."""
    return {
        "name": "test",
        "value": 42,
        "active": True,
        "tags": ["a", "b"],
        "address": {"city": "Paris"},
    }


@pytest_asyncio.fixture
async def populated_api(api: InMemoryResourceApi):
    """Provide an API holding Alice, Bob and Charlie in 'users'.

    Returns the API and the created ids in insertion order.
    """
    ids = []
    for record in (
        {"name": "Alice", "age": 25},
        {"name": "Bob", "age": 30},
        {"name": "Charlie", "age": 25},
    ):
        result = await api.create("users", record)
        ids.append(result["id"])
    return api, ids
