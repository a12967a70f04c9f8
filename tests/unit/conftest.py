"""
pytest configuration and fixtures for the Cloudant action tests
Every fixture routes the actions' HTTP client through an in-memory fake.
"""

import httpx
import pytest

from infrastructure import BASE_URL, FakeCloudant, ScriptedCloudant
from services import cloudant_client


def _install(monkeypatch, handler):
    def create_http_client():
        return httpx.Client(
            headers=cloudant_client.JSON_HEADERS,
            transport=httpx.MockTransport(handler)
        )

    monkeypatch.setattr(cloudant_client, "create_http_client", create_http_client)


@pytest.fixture
def fake_cloudant(monkeypatch):
    """A stateful fake Cloudant with an empty ``testdb`` database"""
    store = FakeCloudant()
    store.create_database("testdb")
    _install(monkeypatch, store.handler)
    return store


@pytest.fixture
def scripted_cloudant(monkeypatch):
    """Factory for a fake Cloudant that replays canned replies in order"""
    def factory(*replies):
        store = ScriptedCloudant(*replies)
        _install(monkeypatch, store.handler)
        return store
    return factory


@pytest.fixture
def base_args():
    """Invocation parameters shared by every action"""
    return {
        "services.cloudant.url": BASE_URL,
        "services.cloudant.database": "testdb",
    }
