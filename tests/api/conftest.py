"""API test fixtures — FastAPI test client over an in-memory user store.

Invariants:
    - Every test gets a fresh InMemoryUserStore (seed via the `store` fixture)
    - get_user_store and get_write_lock overridden; the lifespan never runs,
      so no file is touched
"""

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.infrastructure.json_store import get_user_store, get_write_lock
from users_api.main import app
from tests.fake_store import InMemoryUserStore


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
async def client(store):
    app.dependency_overrides[get_user_store] = lambda: store
    app.dependency_overrides[get_write_lock] = lambda: None

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
