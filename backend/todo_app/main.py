"""To-Do API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoError → plain-text responses with the error's status
    - CORS configured from settings (not hardcoded)
    - Database initialized, then bootstrapped (legacy re-hash, admin seed), on startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers: TodoError (domain), RequestValidationError
      (Pydantic), Exception (catch-all): never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import todo_app.infrastructure.database as database
from todo_app.api.dependencies import get_password_hasher
from todo_app.api.error_handlers import register_error_handlers
from todo_app.infrastructure.observability import setup_logging
from todo_app.services.bootstrap import run_bootstrap
from todo_app.config import get_settings
from todo_app.api.routes import auth, health, tasks, users

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
    async with database.db_manager.session() as db:
        await run_bootstrap(db, settings, get_password_hasher())
    logger.info("To-Do API started")
    yield
    await database.db_manager.dispose()
    logger.info("To-Do API shutting down")


app = FastAPI(
    title="To-Do API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(tasks.router)
app.include_router(users.router)

register_error_handlers(app)
