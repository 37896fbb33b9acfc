"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures the storage backend and the form on lifespan startup.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.storage.postgres import run_migrations
from src.api.dependencies import build_user_store, get_notifier
from src.api.v1 import router as v1_router
from src.config.settings import get_settings
from src.domain.form import FormModel

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Registration Form API v1 - Edit, validate and submit the registration form",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates database connection pool and runs migrations (postgres backend)
    - Wires the user store and notifier into a fresh form
    - Closes connection pool on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")

    pool = None
    if settings.storage_backend == "postgres":
        logger.info("Connecting to database...")
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )
        logger.info("Running database migrations...")
        run_migrations(pool)

    store = build_user_store(settings, pool)

    # Store collaborators in app state for dependency injection
    app.state.pool = pool
    app.state.store = store
    app.state.form = FormModel(store=store, notifier=get_notifier())

    logger.info("Application startup complete (storage backend: %s)", settings.storage_backend)

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="regform",
    description="Registration Form API - Field validation and form-state engine for user registration",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint.

    Returns 200 OK if the application is up. With the postgres backend
    the database connection is checked too and failures propagate.
    """
    pool = request.app.state.pool
    if pool is not None:
        with pool.connection() as conn:
            conn.execute("SELECT 1")

    return {"status": "healthy"}
