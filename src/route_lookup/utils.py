"""Hostname and query helpers."""
from __future__ import annotations

from typing import Sequence
from urllib.parse import urlencode


def get_possible_domains(hostname: str) -> list[str]:
    """Return every domain level of ``hostname`` down to the second-level domain.

    ``"a.b.c.com"`` gives ``["a.b.c.com", "b.c.com", "c.com"]``; a single
    label gives an empty list.
    """
    parts = hostname.split(".")
    return [".".join(parts[index:]) for index in range(len(parts) - 1)]


def subdomain_of(hostname: str) -> str:
    """Leading label of ``hostname``."""
    return hostname.split(".")[0]


def build_query(params: dict[str, str]) -> str:
    # Keys sorted so repeated lookups produce identical request paths
    return urlencode(sorted(params.items()))


def name_filter_query(names: Sequence[str], results_per_page: int) -> str:
    return build_query(
        {
            "q": "name IN " + ",".join(names),
            "results-per-page": str(results_per_page),
        }
    )
