"""Shared fixtures: an in-memory stand-in for the status page API."""

import json

import pytest

from statuspage.common import ComponentRegistry, Config, StatusPageClient

ACCOUNT_URL = "https://api.example.test/v1/pages/page123"

SAMPLE_COMPONENTS = [
    {"id": "c1", "name": "Website", "status": "operational"},
    {"id": "c2", "name": "Web API", "status": "major_outage"},
    {"id": "c3", "name": "Email Delivery", "status": "degraded_performance"},
]

SAMPLE_INCIDENTS = [
    {
        "id": "i1",
        "name": "Login failures",
        "status": "investigating",
        "created_at": "2026-10-18T09:00:00Z",
    },
    {
        "id": "i2",
        "name": "Slow dashboard",
        "status": "monitoring",
        "created_at": "2026-10-19T08:30:00Z",
    },
    {
        "id": "i3",
        "name": "Old outage",
        "status": "resolved",
        "created_at": "2026-09-01T12:00:00Z",
    },
    {
        "id": "i4",
        "name": "Reviewed outage",
        "status": "postmortem",
        "created_at": "2026-08-01T12:00:00Z",
    },
]


class FakeResponse:
    def __init__(self, body=None, status_code=200, text=None):
        self.status_code = status_code
        if text is not None:
            self.text = text
        elif body is None:
            self.text = ""
        else:
            self.text = json.dumps(body)
        self.content = self.text.encode()

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Records every request and answers from a route table.

    Routes map ``(METHOD, path)`` to a FakeResponse or an exception, where
    ``path`` is the URL with the account root removed.
    """

    def __init__(self, routes=None):
        self.headers = {}
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False

    def request(self, method, url, headers=None, **kwargs):
        self.calls.append({"method": method, "url": url, "headers": headers, **kwargs})
        path = url[len(ACCOUNT_URL):] if url.startswith(ACCOUNT_URL) else url
        answer = self.routes.get((method, path))
        if answer is None:
            return FakeResponse(status_code=404, text="not found")
        if isinstance(answer, Exception):
            raise answer
        return answer

    def close(self):
        self.closed = True

    def calls_to(self, method):
        return [c for c in self.calls if c["method"] == method]


@pytest.fixture
def config():
    return Config(
        token="secret-token",
        base_url="https://api.example.test/v1/pages/",
        page_id="page123",
    )


@pytest.fixture
def session():
    return FakeSession(
        {
            ("GET", "/components.json"): FakeResponse(SAMPLE_COMPONENTS),
            ("GET", "/incidents.json"): FakeResponse(SAMPLE_INCIDENTS),
        }
    )


@pytest.fixture
def client(config, session):
    return StatusPageClient(config, session=session)


@pytest.fixture
def registry(client):
    return ComponentRegistry.build(client)
