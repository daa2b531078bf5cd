"""jobtrail API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map JobTrailError → structured JSON responses
    - Database initialized on startup via lifespan context manager
    - Sample data loaded on startup only when SEED_SAMPLE_DATA is set

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import jobtrail.infrastructure.database as database
from jobtrail.infrastructure.observability import setup_logging
from jobtrail.config import get_settings
from jobtrail.api.error_handlers import register_error_handlers
from jobtrail.api.routes import departments, employees, health, jobs
from jobtrail.services.seed_data import seed_sample_data

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.seed_sample_data:
        async with database.db_manager.session() as db:
            await seed_sample_data(db)
    logger.info("jobtrail API started")
    yield
    logger.info("jobtrail API shutting down")
    await database.db_manager.dispose()


app = FastAPI(
    title="jobtrail API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(employees.router)
app.include_router(jobs.router)
app.include_router(departments.router)

register_error_handlers(app)
