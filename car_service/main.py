"""Car Service API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CarServiceError → {"message": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - The CarStore is built on startup via lifespan and injected into routes

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Store on app.state instead of a module global: one store per app, and
      tests swap it through dependency_overrides
"""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from car_service.api.error_handlers import register_error_handlers
from car_service.api.request_logging import register_request_logging
from car_service.api.routes import cars, health
from car_service.config import Settings, get_settings
from car_service.core.domain_types import StoreBackend
from car_service.core.repository_protocols import CarStore
from car_service.infrastructure.database import DatabaseSessionManager
from car_service.infrastructure.memory_store import InMemoryCarStore, SAMPLE_CARS
from car_service.infrastructure.observability import setup_logging
from car_service.infrastructure.sql_store import SqlCarStore

logger = logging.getLogger(__name__)


async def build_car_store(
    settings: Settings,
) -> tuple[CarStore, DatabaseSessionManager | None]:
    """Create the configured store. Returns the session manager to dispose, if any."""
    if settings.store_backend is StoreBackend.DATABASE:
        db = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_tables:
            await db.create_tables()
        return SqlCarStore(db), db
    seed = SAMPLE_CARS if settings.seed_sample_cars else ()
    return InMemoryCarStore(seed), None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store, db = await build_car_store(settings)
    app.state.car_store = store
    logger.info(f"Car Service started ({settings.store_backend.value} store)")
    yield
    logger.info("Car Service shutting down")
    if db is not None:
        await db.dispose()


app = FastAPI(
    title="Car Service API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_request_logging(app)
register_error_handlers(app)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(cars.router)

# Static files: serves the front-end build when present
# Mounted AFTER API routes so /api/v1/* takes precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "car_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
