"""Transports that perform authenticated GETs against the Cloud Controller."""
from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Optional
from urllib.parse import urlsplit

import requests

from .config import ApiConfig
from .errors import TransportError

logger = logging.getLogger(__name__)

_CF_CURL_TIMEOUT = 60.0


class CloudControllerClient:
    """Talks to the API directly over HTTPS using a bearer token."""

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.base_url = config.api_url.rstrip("/") + "/"
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": config.authorization_header(),
                "Accept": "application/json",
                "User-Agent": config.user_agent,
            }
        )

    def get(self, path: str) -> str:
        url = self._url_for(path)
        try:
            response = self._session.get(
                url,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            raise TransportError(f"GET {path} failed: {exc}", path=path) from exc

        if response.status_code >= 400:
            raise TransportError(
                f"GET {path} returned status {response.status_code}: {response.text[:200]}",
                path=path,
                status_code=response.status_code,
            )
        return response.text

    def _url_for(self, path: str) -> str:
        # absolute next_url values pass through; everything else hangs off api_url, prefix included
        if urlsplit(path).scheme:
            return path
        return self.base_url + path.lstrip("/")

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "CloudControllerClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class CfCurlTransport:
    """Delegates requests to ``cf curl`` so the cf CLI's login session is reused."""

    def __init__(self, binary: str = "cf", timeout: float = _CF_CURL_TIMEOUT) -> None:
        self.binary = binary
        self.timeout = timeout

    def get(self, path: str) -> str:
        executable = shutil.which(self.binary)
        if not executable:
            raise TransportError(f"{self.binary} binary not found on PATH", path=path)
        try:
            completed = subprocess.run(
                [executable, "curl", path],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise TransportError(f"cf curl {path} timed out after {self.timeout}s", path=path) from exc
        except OSError as exc:
            raise TransportError(f"cf curl {path} could not be started: {exc}", path=path) from exc

        if completed.returncode != 0:
            detail = (completed.stderr or completed.stdout).strip()
            raise TransportError(f"cf curl {path} exited with {completed.returncode}: {detail}", path=path)
        return completed.stdout


__all__ = ["CloudControllerClient", "CfCurlTransport"]
