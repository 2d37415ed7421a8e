"""Database Infrastructure — SQLAlchemy declarative base.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiomysql for MySQL deployments,
      aiosqlite for tests
"""
