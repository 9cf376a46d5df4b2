"""App startup: settings choose and build the CarStore.

Invariants:
    - memory backend seeds the sample cars unless seed_sample_cars is off
    - database backend returns a SqlCarStore plus the manager to dispose
    - postgresql:// URLs are rewritten for asyncpg
"""

from car_service.config import Settings
from car_service.core.domain_types import StoreBackend
from car_service.infrastructure.memory_store import InMemoryCarStore
from car_service.infrastructure.sql_store import SqlCarStore
from car_service.main import build_car_store


async def test_memory_backend_is_seeded_by_default():
    store, db = await build_car_store(Settings(_env_file=None, store_backend="memory"))
    assert isinstance(store, InMemoryCarStore)
    assert db is None
    assert len(await store.list_all()) == 10


async def test_memory_backend_without_seed_is_empty():
    store, _ = await build_car_store(
        Settings(_env_file=None, store_backend="memory", seed_sample_cars=False),
    )
    assert await store.list_all() == []


async def test_database_backend_builds_sql_store():
    settings = Settings(
        _env_file=None,
        store_backend="database",
        database_url="sqlite+aiosqlite:///:memory:",
        database_create_tables=True,
    )
    store, db = await build_car_store(settings)
    try:
        assert isinstance(store, SqlCarStore)
        assert await store.list_all() == []
    finally:
        await db.dispose()


def test_settings_defaults():
    settings = Settings(_env_file=None, store_backend="memory")
    assert settings.store_backend is StoreBackend.MEMORY
    assert settings.seed_sample_cars is True


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(_env_file=None, database_url="postgresql://u:p@host/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host/db"
