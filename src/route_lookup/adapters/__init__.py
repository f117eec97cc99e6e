"""Adapter protocol definitions for injectable dependencies."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ApiTransport(Protocol):
    """Authenticated read access to the Cloud Controller API.

    ``get`` takes a path relative to the API root (or an absolute URL) and
    returns the raw response body, raising ``TransportError`` on failure.
    """

    def get(self, path: str) -> str:
        ...


__all__ = ["ApiTransport"]
