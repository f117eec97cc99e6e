"""Re-export of the core data models at the package top level."""
from __future__ import annotations

from .core.models import Domain, Outcome, Page, ResolutionResult, Route

__all__ = ["Domain", "Outcome", "Page", "ResolutionResult", "Route"]
