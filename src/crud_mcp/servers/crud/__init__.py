"""CRUD tools and collection resources for the MCP server.

Available tools:
- create: Create a record in a collection
- get: Read a record by ID
- list: List a collection with optional exact-match filtering
- update: Merge fields into a record
- delete: Remove a record

Available resources, per collection type T:
- T://list: every record of the collection
- T://{id}: a single record
"""

from .providers import CrudToolProvider
from .resources import CollectionResourceProvider, parse_locator
from .tools import (
    CreateResourceTool,
    DeleteResourceTool,
    GetResourceTool,
    ListResourcesTool,
    UpdateResourceTool,
)

__all__ = [
    "CrudToolProvider",
    "CollectionResourceProvider",
    "parse_locator",
    "CreateResourceTool",
    "GetResourceTool",
    "ListResourcesTool",
    "UpdateResourceTool",
    "DeleteResourceTool",
]
