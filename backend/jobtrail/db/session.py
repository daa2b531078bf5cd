"""Async Session Factory — provides async DB sessions outside FastAPI.

Invariants:
    - Meant for scripts and one-off seeding (python -m jobtrail.services.seed_data)
    - SQLite connections get foreign keys enabled, same as DatabaseSessionManager

Design Decisions:
    - Separate from infrastructure/database.py: no pooling knobs, no error mapping
"""

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from jobtrail.infrastructure.database import enable_sqlite_foreign_keys


def create_session_factory(
    database_url: str,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory for the given database URL."""
    engine = create_async_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        enable_sqlite_foreign_keys(engine)
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
