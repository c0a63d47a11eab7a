"""Resource API contract and its backends."""

from .errors import ApiError, ErrorKind
from .interface import Query, Record, ResourceApi
from .logging_api import LoggingResourceApi
from .memory import InMemoryResourceApi
from .query import filter_records, matches_query

__all__ = [
    "ApiError",
    "ErrorKind",
    "Record",
    "Query",
    "ResourceApi",
    "InMemoryResourceApi",
    "LoggingResourceApi",
    "filter_records",
    "matches_query",
]
