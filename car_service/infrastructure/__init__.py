"""Infrastructure Layer: store implementations and cross-cutting concerns.

Invariants:
    - Infrastructure never holds request state; stores are built once per app
    - All database failures surface as DatabaseError

Design Decisions:
    - memory_store and sql_store satisfy the same CarStore protocol, so the
      backend is a settings choice made in the lifespan hook
"""
