"""Root conftest: shared test configuration and store fixtures.

Invariants:
    - Every test gets fresh, empty stores (no sample cars)
    - The SQL store runs on an in-memory SQLite database per test
    - `store` is parametrized so contract tests run against both backends

Design Decisions:
    - SQLite in-memory: fast, no external dependency; PostgreSQL-specific
      behaviour (NUMERIC precision, int4 bounds) is not exercised here
"""

import os

os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from car_service.db.base import Base  # noqa: E402
from car_service.infrastructure.database import DatabaseSessionManager  # noqa: E402
from car_service.infrastructure.memory_store import InMemoryCarStore  # noqa: E402
from car_service.infrastructure.sql_store import SqlCarStore  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def memory_store():
    return InMemoryCarStore()


@pytest.fixture
async def sql_store(db_manager):
    return SqlCarStore(db_manager)


@pytest.fixture(params=["memory", "sql"])
async def store(request, test_engine):
    """Empty CarStore: runs each test once per backend."""
    if request.param == "memory":
        return InMemoryCarStore()
    return SqlCarStore(DatabaseSessionManager.from_engine(test_engine))
