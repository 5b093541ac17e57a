"""
Pytest configuration and fixtures for the LinkSnatcher test suite.

The remote video resolution API is replaced by an httpx.MockTransport so no
test touches the network.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from linksnatcher.main import app
from linksnatcher.api.dependencies import get_resolution_client
from linksnatcher.services.resolution_client import ResolutionClient


class FakeVideoAPI:
    """Records outbound requests and answers with a canned response."""

    def __init__(self, status_code=200, body=None, content=None, error=None):
        self.status_code = status_code
        self.body = body
        self.content = content
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def sample_api_response():
    """A typical successful response from the resolution API."""
    return {
        "title": "Never Gonna Give You Up",
        "thumbnail": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
        "duration": "3:33",
        "source": "youtube",
        "medias": [
            {"url": "https://cdn.example.com/v/1080.mp4", "quality": "1080p", "formattedSize": "48.2 MB"},
            {"url": "https://cdn.example.com/v/720.mp4", "quality": "720p", "formattedSize": "21.7 MB"},
            {"url": "https://cdn.example.com/v/audio.m4a", "quality": "audio"},
        ],
    }


@pytest.fixture
def fake_api():
    """Factory for FakeVideoAPI instances."""
    return FakeVideoAPI


@pytest.fixture
def make_client():
    """Factory building a ResolutionClient wired to a FakeVideoAPI."""
    def _make(api: FakeVideoAPI, api_key: str = "test-key") -> ResolutionClient:
        return ResolutionClient(api_key=api_key, transport=httpx.MockTransport(api))
    return _make


@pytest.fixture
def app_client(make_client):
    """
    Factory returning a TestClient whose resolution client talks to the
    given FakeVideoAPI.
    """
    def _client(api: FakeVideoAPI) -> TestClient:
        resolution_client = make_client(api)
        app.dependency_overrides[get_resolution_client] = lambda: resolution_client
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()
