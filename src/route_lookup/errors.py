"""Exception hierarchy for Cloud Controller lookups."""
from __future__ import annotations

from typing import Optional


class ApiError(RuntimeError):
    """Base class for failures talking to the Cloud Controller API."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class TransportError(ApiError):
    """Raised when a request could not be completed."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, path=path)
        self.status_code = status_code


class DecodeError(ApiError):
    """Raised when a response body is not a valid page envelope."""


class ConfigError(RuntimeError):
    """Raised when no usable API target or credentials are configured."""


__all__ = ["ApiError", "TransportError", "DecodeError", "ConfigError"]
