"""
Shared fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from centriq_backend.api.deps import get_cache, get_http_client
from centriq_backend.core.cache import ResponseCache
from centriq_backend.main import app
from factories import FakeClock, FakeUpstream


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ResponseCache(clock=clock)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def api(upstream):
    """TestClient whose upstream calls go to the fake and whose cache is fresh."""
    shared_cache = ResponseCache()
    http_client = upstream.client()
    app.dependency_overrides[get_http_client] = lambda: http_client
    app.dependency_overrides[get_cache] = lambda: shared_cache
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
