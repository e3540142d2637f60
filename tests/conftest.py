import json

import pytest
import requests
from fastapi.testclient import TestClient

from app.api.routes import get_upstream_client
from app.main import app
from app.utils.upstream import UpstreamClient


def make_response(status_code=200, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeSession:
    """Stands in for requests.Session; replays one canned response or raises."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def upstream():
    """Install a fake upstream for the app. Call it with a response or an error."""
    sessions = []

    def install(response=None, error=None):
        session = FakeSession(response=response, error=error)
        sessions.append(session)
        app.dependency_overrides[get_upstream_client] = lambda: UpstreamClient(
            "http://upstream.test", session=session
        )
        return session

    yield install
    app.dependency_overrides.pop(get_upstream_client, None)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def fake_session():
    return FakeSession
