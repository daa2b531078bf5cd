"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test DB session
    - clock is pinned: history start dates are deterministic
    - seeded loads the sample dataset (employees 1-8 with backfilled history)

Design Decisions:
    - SQLite in-memory: fast, no external dependency; deferred constraints go
      through PRAGMA defer_foreign_keys instead of SET CONSTRAINTS
    - No drop_all at teardown: the department/employee cycle blocks ordered
      drops with foreign keys on, and the in-memory database dies with the engine
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from jobtrail.db.base import Base
import jobtrail.models  # noqa: F401
from jobtrail.infrastructure.database import (
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
import jobtrail.infrastructure.database as db_module
from jobtrail.services.audit_recorder import AuditRecorder
from jobtrail.services.seed_data import seed_sample_data
from jobtrail.main import app


class FixedClock:
    """Settable clock; call returns the current pinned instant."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set_date(self, year: int, month: int, day: int) -> None:
        self.now = datetime(year, month, day, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc))


@pytest.fixture
def recorder(test_db, clock):
    return AuditRecorder(test_db, clock=clock)


@pytest.fixture
async def seeded(test_db, clock):
    """Load the sample dataset; job last_update stamped with the pinned clock."""
    assert await seed_sample_data(test_db, clock=clock)
    return test_db


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seeded_client(client, test_session_factory, clock):
    """Client over a database preloaded with the sample dataset."""
    async with test_session_factory() as db:
        await seed_sample_data(db, clock=clock)
    return client
