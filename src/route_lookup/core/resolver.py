"""Hostname to domain/route resolution."""
from __future__ import annotations

import logging
from functools import partial
from typing import Optional, Sequence

from ..adapters import ApiTransport
from ..config import DEFAULT_RESULTS_PER_PAGE, LookupConfig
from ..errors import ApiError
from ..utils import build_query, get_possible_domains, name_filter_query, subdomain_of
from .models import Domain, Outcome, ResolutionResult, Route
from .pagination import fetch_all

logger = logging.getLogger(__name__)

# Private (organisation-owned) domains are listed before shared ones
DOMAIN_ENDPOINTS: tuple[tuple[str, bool], ...] = (
    ("/v2/private_domains", False),
    ("/v2/shared_domains", True),
)
ROUTES_ENDPOINT = "/v2/routes"


def get_domains(
    transport: ApiTransport,
    names: Sequence[str],
    *,
    results_per_page: int = DEFAULT_RESULTS_PER_PAGE,
) -> list[Domain]:
    """Fetch every private and shared domain whose name is in ``names``."""
    query = name_filter_query(names, results_per_page)
    domains: list[Domain] = []
    for endpoint, shared in DOMAIN_ENDPOINTS:
        parse = partial(Domain.from_resource, shared=shared)
        domains.extend(fetch_all(transport, f"{endpoint}?{query}", parse))
    return domains


def get_domain(
    transport: ApiTransport,
    hostname: str,
    *,
    results_per_page: int = DEFAULT_RESULTS_PER_PAGE,
) -> Optional[Domain]:
    """Return the most specific registered domain that ``hostname`` falls under."""
    candidates = get_possible_domains(hostname)
    logger.debug("Candidate domains for %s: %s", hostname, candidates)
    if not candidates:
        return None

    pool = get_domains(transport, candidates, results_per_page=results_per_page)
    logger.debug("Matching domains: %s", [domain.name for domain in pool])

    # Candidate order, not pool order, decides precedence
    for candidate in candidates:
        for domain in pool:
            if domain.name == candidate:
                return domain
    return None


def get_routes(
    transport: ApiTransport,
    *,
    results_per_page: int = DEFAULT_RESULTS_PER_PAGE,
) -> list[Route]:
    """Fetch every route visible to the caller."""
    query = build_query({"results-per-page": str(results_per_page)})
    return fetch_all(transport, f"{ROUTES_ENDPOINT}?{query}", Route.from_resource)


def filter_routes(routes: Sequence[Route], subdomain: str) -> list[Route]:
    """Routes whose host equals ``subdomain``; host-less routes never match."""
    return [route for route in routes if route.host is not None and route.host == subdomain]


class HostnameResolver:
    """Works out whether a hostname is a domain or a route within one."""

    def __init__(self, transport: ApiTransport, config: LookupConfig | None = None) -> None:
        self._transport = transport
        self.config = config or LookupConfig()

    def resolve(self, hostname: str) -> ResolutionResult:
        per_page = self.config.results_per_page
        try:
            domain = get_domain(self._transport, hostname, results_per_page=per_page)
        except ApiError as exc:
            logger.error("Error retrieving the domains: %s", exc)
            return ResolutionResult(hostname=hostname, outcome=Outcome.FAILURE, error=str(exc))

        if domain is None:
            logger.info("Could not find matching domain for %s", hostname)
            return ResolutionResult(hostname=hostname, outcome=Outcome.NO_DOMAIN_FOUND)

        if domain.name == hostname:
            logger.info("%s is a domain (guid %s)", hostname, domain.guid)
            return ResolutionResult(hostname=hostname, outcome=Outcome.EXACT_DOMAIN, domain=domain)

        subdomain = subdomain_of(hostname)
        try:
            routes = get_routes(self._transport, results_per_page=per_page)
        except ApiError as exc:
            logger.error("Error retrieving the routes: %s", exc)
            return ResolutionResult(
                hostname=hostname,
                outcome=Outcome.FAILURE,
                domain=domain,
                subdomain=subdomain,
                error=str(exc),
            )
        logger.info("%d routes found", len(routes))

        matches = filter_routes(routes, subdomain)
        outcome = Outcome.ROUTES_FOUND if matches else Outcome.NO_ROUTES_FOUND
        logger.info("%d route(s) match subdomain %r under %s", len(matches), subdomain, domain.name)
        return ResolutionResult(
            hostname=hostname,
            outcome=outcome,
            domain=domain,
            subdomain=subdomain,
            routes=matches,
            total_routes=len(routes),
        )


def resolve_hostname(
    hostname: str,
    transport: ApiTransport,
    config: LookupConfig | None = None,
) -> ResolutionResult:
    return HostnameResolver(transport, config).resolve(hostname)


__all__ = [
    "DOMAIN_ENDPOINTS",
    "ROUTES_ENDPOINT",
    "HostnameResolver",
    "filter_routes",
    "get_domain",
    "get_domains",
    "get_routes",
    "resolve_hostname",
]
