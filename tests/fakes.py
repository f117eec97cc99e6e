import json

from route_lookup.errors import TransportError


def page(resources, next_url=None):
    return json.dumps({"next_url": next_url, "resources": resources})


def domain_resource(guid, name):
    return {"metadata": {"guid": guid}, "entity": {"name": name}}


def route_resource(guid, host, domain_guid="domain-1", path="", port=None):
    return {
        "metadata": {"guid": guid},
        "entity": {
            "host": host,
            "domain_guid": domain_guid,
            "space_guid": "space-1",
            "path": path,
            "port": port,
        },
    }


class FakeTransport:
    """Replays canned bodies keyed by full path, or by endpoint for the first page."""

    def __init__(self, responses=None, failures=None):
        self.responses = dict(responses or {})
        self.failures = set(failures or ())
        self.calls: list[str] = []

    def get(self, path: str) -> str:
        self.calls.append(path)
        endpoint = path.split("?")[0]
        if path in self.failures or endpoint in self.failures:
            raise TransportError(f"GET {path} failed", path=path)
        if path in self.responses:
            return self.responses[path]
        if endpoint in self.responses:
            return self.responses[endpoint]
        raise AssertionError(f"Unexpected path requested: {path}")

    def endpoints_called(self) -> list[str]:
        return [call.split("?")[0] for call in self.calls]
