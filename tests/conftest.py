import httpx
import pytest

from db.playground import Session
from db.snapshot import MemorySnapshotStore


@pytest.fixture
def store():
    return MemorySnapshotStore()


@pytest.fixture
def session(store):
    return Session.initialize(store, default_language="cpp")


@pytest.fixture
def stub_client():
    """Build an AsyncClient whose requests are answered by a handler instead of the network."""

    def build(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return build
