"""API Dependencies: request-scoped access to app-lifetime collaborators.

Invariants:
    - The CarStore is built once in the lifespan hook and stored on app.state
    - Routes obtain it only through get_car_store (tests override this dependency)
"""

from fastapi import Request

from car_service.core.repository_protocols import CarStore


def get_car_store(request: Request) -> CarStore:
    """FastAPI dependency for the app's CarStore."""
    store = getattr(request.app.state, "car_store", None)
    if store is None:
        raise RuntimeError("Car store not initialized")
    return store
