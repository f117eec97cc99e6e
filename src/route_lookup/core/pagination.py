"""Generic walker for paginated Cloud Controller collections."""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, TypeVar

from ..adapters import ApiTransport
from ..errors import DecodeError
from .models import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")


def decode_page(body: str, parse: Callable[[Any], T], *, path: Optional[str] = None) -> Page[T]:
    """Decode one ``{"next_url": ..., "resources": [...]}`` envelope."""
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Response is not valid JSON: {exc}", path=path) from exc
    if not isinstance(data, dict):
        raise DecodeError("Response is not a JSON object", path=path)

    next_url = data.get("next_url")
    if next_url is not None and not isinstance(next_url, str):
        raise DecodeError(f"Unexpected next_url value {next_url!r}", path=path)
    raw_resources = data.get("resources")
    if not isinstance(raw_resources, list):
        raise DecodeError("Response has no resources list", path=path)

    try:
        resources = [parse(item) for item in raw_resources]
    except (KeyError, TypeError, ValueError) as exc:
        raise DecodeError(f"Malformed resource: {exc}", path=path) from exc
    return Page(next_url=next_url or None, resources=resources)


def fetch_all(transport: ApiTransport, path: str, parse: Callable[[Any], T]) -> list[T]:
    """Follow ``next_url`` links from ``path`` and return every resource in server order.

    Transport and decode errors propagate; nothing gathered so far is returned.
    """
    items: list[T] = []
    next_path = path
    pages = 0
    while True:
        logger.debug("GET %s", next_path)
        body = transport.get(next_path)
        page = decode_page(body, parse, path=next_path)
        items.extend(page.resources)
        pages += 1
        if page.is_last:
            break
        next_path = page.next_url
    logger.debug("Fetched %d resources across %d page(s) from %s", len(items), pages, path)
    return items
