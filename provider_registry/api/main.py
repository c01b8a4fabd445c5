"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from provider_registry.adapters.repository import (
    InMemoryRegistryStore,
    PostgresRegistryStore,
    run_migrations,
)
from provider_registry.api.errors import install_error_handlers
from provider_registry.api.v1 import router as v1_router
from provider_registry.config.settings import get_settings
from provider_registry.domain.registry import ProviderRegistry

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Provider Registry API v1 - Register providers, delegate and record verification",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the storage backend (in-memory or PostgreSQL pool + migrations)
    - Builds the single registry instance with the configured admin
    - Closes the connection pool on shutdown
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
        store = PostgresRegistryStore(pool)
    else:
        store = InMemoryRegistryStore()

    # Store registry in app state for dependency injection
    app.state.registry = ProviderRegistry(admin=settings.admin_principal, store=store)

    logger.info("Application startup complete (storage=%s)", settings.storage_backend)

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="provider-registry",
    description="Provider Registry API - Self-registration with admin-delegated verification",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

install_error_handlers(app)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with storage validation.

    Returns 200 OK if application and storage are healthy.
    Raises exception if the storage backend is unreachable.
    """
    request.app.state.registry.provider_count()

    return {"status": "healthy"}
