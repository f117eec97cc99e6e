"""Resolve hostnames to Cloud Foundry domains and routes."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from . import utils
from .config import ApiConfig, LookupConfig
from .errors import ApiError, ConfigError, DecodeError, TransportError

__all__ = [
    "ApiConfig",
    "LookupConfig",
    "ApiError",
    "ConfigError",
    "DecodeError",
    "TransportError",
    "HostnameResolver",
    "ResolutionResult",
    "Outcome",
    "CloudControllerClient",
    "CfCurlTransport",
    "ReportBuilder",
    "utils",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name == "HostnameResolver":
        module = import_module(".core.resolver", __name__)
        return getattr(module, name)
    if name in {"ResolutionResult", "Outcome"}:
        module = import_module(".models", __name__)
        return getattr(module, name)
    if name in {"CloudControllerClient", "CfCurlTransport"}:
        module = import_module(".api_client", __name__)
        return getattr(module, name)
    if name == "ReportBuilder":
        module = import_module(".report", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
