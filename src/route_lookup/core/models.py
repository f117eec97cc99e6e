"""Core dataclasses representing Cloud Controller resources and lookup results."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


def _split_resource(resource: Any) -> tuple[dict[str, Any], dict[str, Any]]:
    """Return ``(metadata, entity)`` for a v2 resource or a flat object."""
    if not isinstance(resource, dict):
        raise ValueError(f"Resource must be an object, got {type(resource).__name__}")
    metadata = resource.get("metadata")
    entity = resource.get("entity")
    if isinstance(metadata, dict) and isinstance(entity, dict):
        return metadata, entity
    return resource, resource


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"Expected string, got {type(value).__name__}")
    return value


@dataclass(slots=True)
class Domain:
    guid: str
    name: str
    shared: bool = False
    router_group_guid: Optional[str] = None
    owning_organization_guid: Optional[str] = None

    @classmethod
    def from_resource(cls, resource: Any, *, shared: bool = False) -> "Domain":
        metadata, entity = _split_resource(resource)
        guid = metadata.get("guid")
        name = entity.get("name")
        if not isinstance(guid, str) or not isinstance(name, str):
            raise ValueError("Domain resource requires string 'guid' and 'name'")
        return cls(
            guid=guid,
            name=name,
            shared=shared,
            router_group_guid=_optional_str(entity.get("router_group_guid")),
            owning_organization_guid=_optional_str(entity.get("owning_organization_guid")),
        )


@dataclass(slots=True)
class Route:
    guid: str
    host: Optional[str]
    domain_guid: Optional[str] = None
    space_guid: Optional[str] = None
    path: str = ""
    port: Optional[int] = None

    @classmethod
    def from_resource(cls, resource: Any) -> "Route":
        metadata, entity = _split_resource(resource)
        guid = metadata.get("guid")
        if not isinstance(guid, str):
            raise ValueError("Route resource requires a string 'guid'")
        port = entity.get("port")
        if port is not None and (isinstance(port, bool) or not isinstance(port, int)):
            raise ValueError(f"Route port must be an integer, got {port!r}")
        return cls(
            guid=guid,
            # apex routes on private domains come back with an empty host
            host=_optional_str(entity.get("host")),
            domain_guid=_optional_str(entity.get("domain_guid")),
            space_guid=_optional_str(entity.get("space_guid")),
            path=_optional_str(entity.get("path")) or "",
            port=port,
        )

    def url(self, domain_name: str) -> str:
        hostname = f"{self.host}.{domain_name}" if self.host else domain_name
        if self.port is not None:
            hostname = f"{hostname}:{self.port}"
        return f"{hostname}{self.path}"


@dataclass(slots=True)
class Page(Generic[T]):
    next_url: Optional[str]
    resources: list[T]

    @property
    def is_last(self) -> bool:
        return not self.next_url


class Outcome(enum.Enum):
    EXACT_DOMAIN = "exact_domain"
    ROUTES_FOUND = "routes_found"
    NO_ROUTES_FOUND = "no_routes_found"
    NO_DOMAIN_FOUND = "no_domain_found"
    FAILURE = "failure"


@dataclass(slots=True)
class ResolutionResult:
    hostname: str
    outcome: Outcome
    domain: Optional[Domain] = None
    subdomain: Optional[str] = None
    routes: list[Route] = field(default_factory=list)
    total_routes: int = 0
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.outcome in (Outcome.EXACT_DOMAIN, Outcome.ROUTES_FOUND)
