"""Weapon Paints API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WeaponPaintsError → {"error", "message"} responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py and are registered here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weaponpaints import __version__
from weaponpaints.api.error_handlers import register_error_handlers
from weaponpaints.api.routes import health, weapons
from weaponpaints.config import get_settings
from weaponpaints.infrastructure import database
from weaponpaints.infrastructure.observability import setup_logging

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
    logger.info("Weapon Paints API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Weapon Paints API shutting down")


app = FastAPI(
    title="Weapon Paints API", version=__version__, lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(weapons.router)

register_error_handlers(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("weaponpaints.main:app", host="0.0.0.0", port=8000)
