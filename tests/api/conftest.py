"""API test fixtures: FastAPI test client bound to an injected CarStore.

Invariants:
    - get_car_store dependency overridden to the per-test `store` fixture
    - The lifespan hook is not run; no sample cars are seeded

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises routing, middleware and
      error handlers in-process
"""

import pytest
from httpx import ASGITransport, AsyncClient

from car_service.api.dependencies import get_car_store
from car_service.main import app


@pytest.fixture
def override_store():
    """Install a store for the app; cleared after the test."""
    def _install(store):
        app.dependency_overrides[get_car_store] = lambda: store
    yield _install
    app.dependency_overrides.clear()


@pytest.fixture
async def client(store, override_store):
    """FastAPI test client with the store dependency overridden."""
    override_store(store)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
