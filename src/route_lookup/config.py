"""Configuration dataclasses for the route lookup tool."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ConfigError

DEFAULT_USER_AGENT = "route-lookup/1.0"
DEFAULT_RESULTS_PER_PAGE = 100


@dataclass(slots=True)
class ApiConfig:
    api_url: str
    access_token: str
    timeout: float = 30.0
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT

    def authorization_header(self) -> str:
        token = self.access_token.strip()
        if token.lower().startswith("bearer "):
            return token
        return f"bearer {token}"


@dataclass(slots=True)
class LookupConfig:
    results_per_page: int = DEFAULT_RESULTS_PER_PAGE


def default_cf_config_path() -> Path:
    """Location of the cf CLI's config file, honouring ``CF_HOME``."""
    home = os.environ.get("CF_HOME")
    base = Path(home) if home else Path.home()
    return base / ".cf" / "config.json"


def load_cf_config(path: Path | None = None) -> Optional[ApiConfig]:
    """Build an :class:`ApiConfig` from the target the cf CLI is logged into.

    Returns ``None`` when the file does not exist or holds no target/token.
    """

    config_path = path or default_cf_config_path()
    if not config_path.exists():
        return None
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to read cf config {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Unexpected content in cf config {config_path}")

    target = data.get("Target")
    token = data.get("AccessToken")
    if not target or not token:
        return None
    return ApiConfig(
        api_url=str(target),
        access_token=str(token),
        verify_ssl=not bool(data.get("SSLDisabled", False)),
    )
