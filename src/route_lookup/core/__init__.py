"""Side-effect-free building blocks for hostname resolution."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "Domain",
    "Route",
    "Page",
    "Outcome",
    "ResolutionResult",
    "fetch_all",
    "HostnameResolver",
    "get_domain",
    "get_domains",
    "get_routes",
    "resolve_hostname",
]

_RESOLVER_NAMES = {"HostnameResolver", "get_domain", "get_domains", "get_routes", "resolve_hostname"}
_MODEL_NAMES = {"Domain", "Route", "Page", "Outcome", "ResolutionResult"}


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name == "fetch_all":
        module = import_module(".pagination", __name__)
        return module.fetch_all
    if name in _RESOLVER_NAMES:
        module = import_module(".resolver", __name__)
        return getattr(module, name)
    if name in _MODEL_NAMES:
        module = import_module(".models", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
