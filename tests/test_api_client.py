import subprocess
from types import SimpleNamespace

import pytest
import requests

from route_lookup.api_client import CfCurlTransport, CloudControllerClient
from route_lookup.config import ApiConfig
from route_lookup.errors import TransportError


class FakeSession:
    def __init__(self, response=None, error=None) -> None:
        self.headers: dict[str, str] = {}
        self.response = response
        self.error = error
        self.requests: list[tuple[str, dict]] = []
        self.closed = False

    def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


def _config(**overrides) -> ApiConfig:
    values = {"api_url": "https://api.sys.example.com/", "access_token": "abc"}
    values.update(overrides)
    return ApiConfig(**values)


def test_get_joins_path_and_sends_auth_header():
    session = FakeSession(response=SimpleNamespace(status_code=200, text='{"resources": []}'))
    client = CloudControllerClient(_config(timeout=5.0, verify_ssl=False), session=session)

    body = client.get("/v2/routes?results-per-page=100")

    assert body == '{"resources": []}'
    url, kwargs = session.requests[0]
    assert url == "https://api.sys.example.com/v2/routes?results-per-page=100"
    assert kwargs == {"timeout": 5.0, "verify": False}
    assert session.headers["Authorization"] == "bearer abc"
    assert session.headers["Accept"] == "application/json"


def test_existing_bearer_prefix_is_kept():
    session = FakeSession()
    CloudControllerClient(_config(access_token="bearer xyz"), session=session)
    assert session.headers["Authorization"] == "bearer xyz"


def test_error_status_raises_transport_error():
    session = FakeSession(response=SimpleNamespace(status_code=401, text="Unauthorized"))
    client = CloudControllerClient(_config(), session=session)
    with pytest.raises(TransportError) as excinfo:
        client.get("/v2/routes")
    assert excinfo.value.status_code == 401
    assert excinfo.value.path == "/v2/routes"


def test_request_exception_raises_transport_error():
    session = FakeSession(error=requests.ConnectionError("refused"))
    client = CloudControllerClient(_config(), session=session)
    with pytest.raises(TransportError):
        client.get("/v2/routes")


def test_context_manager_closes_session():
    session = FakeSession()
    with CloudControllerClient(_config(), session=session):
        pass
    assert session.closed


def test_cf_curl_returns_stdout(monkeypatch: pytest.MonkeyPatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return SimpleNamespace(returncode=0, stdout='{"resources": []}', stderr="")

    monkeypatch.setattr("route_lookup.api_client.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("route_lookup.api_client.subprocess.run", fake_run)

    assert CfCurlTransport().get("/v2/routes") == '{"resources": []}'
    assert calls == [["/usr/bin/cf", "curl", "/v2/routes"]]


def test_cf_curl_missing_binary(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("route_lookup.api_client.shutil.which", lambda name: None)
    with pytest.raises(TransportError):
        CfCurlTransport().get("/v2/routes")


def test_cf_curl_nonzero_exit(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("route_lookup.api_client.shutil.which", lambda name: "/usr/bin/cf")
    monkeypatch.setattr(
        "route_lookup.api_client.subprocess.run",
        lambda cmd, **kwargs: SimpleNamespace(returncode=1, stdout="", stderr="Not logged in."),
    )
    with pytest.raises(TransportError) as excinfo:
        CfCurlTransport().get("/v2/routes")
    assert "Not logged in." in str(excinfo.value)


def test_cf_curl_timeout(monkeypatch: pytest.MonkeyPatch):
    def fake_run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

    monkeypatch.setattr("route_lookup.api_client.shutil.which", lambda name: "/usr/bin/cf")
    monkeypatch.setattr("route_lookup.api_client.subprocess.run", fake_run)
    with pytest.raises(TransportError):
        CfCurlTransport(timeout=0.1).get("/v2/routes")


def test_api_url_path_prefix_is_kept():
    session = FakeSession(response=SimpleNamespace(status_code=200, text="{}"))
    client = CloudControllerClient(_config(api_url="https://gw.example.com/cf"), session=session)

    client.get("/v2/routes?results-per-page=100")
    client.get("https://gw.example.com/cf/v2/routes?page=2")

    assert [url for url, _ in session.requests] == [
        "https://gw.example.com/cf/v2/routes?results-per-page=100",
        "https://gw.example.com/cf/v2/routes?page=2",
    ]
