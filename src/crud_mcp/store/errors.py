"""Typed failures raised by resource operations."""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of failure kinds a resource operation can report."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_URI = "INVALID_URI"

    @property
    def status_code(self) -> int:
        """HTTP-style status hint for this kind."""
        return _STATUS_HINTS[self]


_STATUS_HINTS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_URI: 400,
}


class ApiError(Exception):
    """Failure of a single resource operation.

    Carries a machine-readable ``kind``, a human message and a numeric status
    hint so gateways can translate it without losing information.
    """

    def __init__(self, kind: ErrorKind, message: str, status_code: int | None = None):
        self.kind = kind
        self.message = message
        self.status_code = status_code if status_code is not None else kind.status_code
        super().__init__(message)

    @classmethod
    def not_found(cls, collection: str, resource_id: str) -> "ApiError":
        return cls(ErrorKind.NOT_FOUND, f"{collection} with id {resource_id} not found")

    @classmethod
    def invalid_uri(cls, uri: str, reason: str = "Invalid resource URI") -> "ApiError":
        return cls(ErrorKind.INVALID_URI, f"{reason}: {uri}")

    def describe(self) -> str:
        """Text form that keeps the kind and status for transports that only carry text."""
        return f"{self.kind.value} ({self.status_code}): {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serializable form used by the MCP layer."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "status_code": self.status_code,
        }

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind.value!r}, message={self.message!r}, status_code={self.status_code})"
