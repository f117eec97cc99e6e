"""Rendering of resolution results for the terminal and JSON output."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .models import Domain, Outcome, ResolutionResult, Route


class ReportBuilder:
    def build_text(self, result: ResolutionResult) -> str:
        lines: List[str] = []
        outcome = result.outcome
        if outcome is Outcome.FAILURE:
            lines.append(f"Lookup of {result.hostname} failed: {result.error or 'unknown error'}")
        elif outcome is Outcome.NO_DOMAIN_FOUND:
            lines.append(f"Could not find matching domain for {result.hostname}.")
        elif outcome is Outcome.EXACT_DOMAIN and result.domain is not None:
            kind = "shared" if result.domain.shared else "private"
            lines.append(f"It's a domain! GUID: {result.domain.guid} ({kind})")
        else:
            domain_name = result.domain.name if result.domain else "?"
            lines.append(f"Domain: {domain_name}")
            lines.append(f"Subdomain: {result.subdomain}")
            lines.append(f"{result.total_routes} routes found.")
            if result.routes:
                lines.append(f"{len(result.routes)} matching route(s):")
                for route in result.routes:
                    lines.append(f"- {route.url(domain_name)} (guid: {route.guid})")
            else:
                lines.append("No route matches the subdomain.")
        return "\n".join(lines)

    def build_json(self, result: ResolutionResult) -> Dict[str, Any]:
        return {
            "hostname": result.hostname,
            "outcome": result.outcome.value,
            "domain": self._serialise_domain(result.domain),
            "subdomain": result.subdomain,
            "routes": [self._serialise_route(route) for route in result.routes],
            "total_routes": result.total_routes,
            "error": result.error,
        }

    @staticmethod
    def _serialise_domain(domain: Optional[Domain]) -> Optional[Dict[str, Any]]:
        if domain is None:
            return None
        return {
            "guid": domain.guid,
            "name": domain.name,
            "shared": domain.shared,
            "router_group_guid": domain.router_group_guid,
            "owning_organization_guid": domain.owning_organization_guid,
        }

    @staticmethod
    def _serialise_route(route: Route) -> Dict[str, Any]:
        return {
            "guid": route.guid,
            "host": route.host,
            "domain_guid": route.domain_guid,
            "space_guid": route.space_guid,
            "path": route.path,
            "port": route.port,
        }


__all__ = ["ReportBuilder"]
