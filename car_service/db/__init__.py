"""Database Infrastructure: SQLAlchemy declarative Base.

Invariants:
    - Single async engine per process, owned by DatabaseSessionManager

Design Decisions:
    - asyncpg driver for PostgreSQL in production, aiosqlite for tests and dev
"""
