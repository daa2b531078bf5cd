"""Deferred Constraints — postpone foreign-key checks to commit for cyclic inserts.

Invariants:
    - Only affects the current transaction; the next transaction starts IMMEDIATE again
    - PostgreSQL defers only constraints declared DEFERRABLE (department/employee cycle)
    - SQLite defers every foreign key until commit
    - Any other dialect raises UnsupportedDialectError before touching the session

Design Decisions:
    - Dialect dispatch on the bound engine: tests run on aiosqlite, production on asyncpg
"""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from jobtrail.core.errors import UnsupportedDialectError

logger = logging.getLogger(__name__)

_DEFER_STATEMENTS = {
    "postgresql": "SET CONSTRAINTS ALL DEFERRED",
    "sqlite": "PRAGMA defer_foreign_keys = ON",
}


async def defer_constraints(db: AsyncSession) -> None:
    """Defer foreign-key enforcement until the current transaction commits."""
    dialect = db.get_bind().dialect.name
    statement = _DEFER_STATEMENTS.get(dialect)
    if statement is None:
        raise UnsupportedDialectError(dialect)
    await db.execute(text(statement))
    logger.debug(f"Constraints deferred ({dialect})")
