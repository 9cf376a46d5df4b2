"""API Layer: FastAPI routes, dependencies, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; errors use the {"message": ...} body

Design Decisions:
    - Thin routes delegate rules to core/ and persistence to the injected CarStore
"""
