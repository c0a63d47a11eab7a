"""Populate a resource API from a YAML seed document."""

import datetime
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .interface import ResourceApi

logger = logging.getLogger(__name__)


class SeedError(ValueError):
    """Raised when a seed document cannot be read or has the wrong shape."""


def load_seed_file(path: Path | str) -> dict[str, list[dict[str, Any]]]:
    """Read and validate a seed document.

    The document maps collection names to lists of records::

        users:
          - name: Alice
            age: 25

    Args:
        path: YAML file to read

    Returns:
        Mapping of collection name to the records to create

    Raises:
        SeedError: If the file cannot be read or parsed, or has the wrong shape
    """
    seed_path = Path(path)
    try:
        with seed_path.open("r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SeedError(f"Failed to read seed file {seed_path}: {e}") from e
    except yaml.YAMLError as e:
        raise SeedError(f"Failed to parse seed file {seed_path}: {e}") from e

    if data is None:
        return {}
    return validate_seed_data(data, source=str(seed_path))


def validate_seed_data(
    data: Any, source: str = "seed data"
) -> dict[str, list[dict[str, Any]]]:
    """Check that ``data`` maps collection names to lists of JSON records.

    YAML dates and timestamps are converted to ISO 8601 strings; any other
    value that has no JSON form is rejected.
    """
    if not isinstance(data, Mapping):
        raise SeedError(f"{source} must be a mapping of collection name to records")

    seed: dict[str, list[dict[str, Any]]] = {}
    for collection, records in data.items():
        if not isinstance(collection, str) or not collection:
            raise SeedError(f"{source}: collection names must be non-empty strings")
        if not isinstance(records, list):
            raise SeedError(f"{source}: '{collection}' must contain a list of records")
        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise SeedError(
                    f"{source}: {collection}[{index}] must be a mapping, "
                    f"got {type(record).__name__}"
                )
        seed[collection] = [
            _to_json_value(record, f"{source}: {collection}[{index}]")
            for index, record in enumerate(records)
        ]
    return seed


def _to_json_value(value: Any, where: str) -> Any:
    # bool is an int subclass, so it is covered here too
    if value is None or isinstance(value, str | int | float):
        return value
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, list):
        return [_to_json_value(item, f"{where}[{i}]") for i, item in enumerate(value)]
    if isinstance(value, Mapping):
        converted = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise SeedError(f"{where}: field names must be strings, got {key!r}")
            converted[key] = _to_json_value(item, f"{where}.{key}")
        return converted
    raise SeedError(f"{where}: {type(value).__name__} values are not supported")


async def seed_api(
    api: ResourceApi, data: Mapping[str, list[dict[str, Any]]]
) -> dict[str, list[str]]:
    """Create every seed record through the resource API.

    Args:
        api: Target resource API
        data: Validated seed mapping

    Returns:
        Generated identifiers per collection, in creation order
    """
    created: dict[str, list[str]] = {}
    for collection, records in data.items():
        ids = created.setdefault(collection, [])
        for record in records:
            result = await api.create(collection, record)
            ids.append(result["id"])
        logger.info(f"Seeded {len(records)} {collection} records")
    return created
