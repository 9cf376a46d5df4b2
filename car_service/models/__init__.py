"""ORM Models: SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - Models imported here so Base.metadata is complete before create_all or
      alembic autogenerate runs
"""

from car_service.models.car import Car  # noqa: F401
