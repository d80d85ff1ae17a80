"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures logging, routers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from psycopg_pool import AsyncConnectionPool

from src.adapters.repository.memory import InMemoryFederationCache, InMemoryUserKeyDirectory
from src.adapters.repository.postgres import (
    PostgresFederationCache,
    PostgresUserKeyDirectory,
    run_migrations,
)
from src.api.dependencies import build_registry_client
from src.api.v1 import peer_router
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Federation Discovery API v1 - Discover peers and load remote user keys",
    },
    {
        "name": "federation",
        "description": "Peer-facing endpoint answering other domains' user-key requests",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the shared HTTP client and registry client
    - Creates database connection pool and runs migrations (postgres backend)
    - Closes HTTP client and connection pool on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")

    pool = None
    if settings.cache_backend == "postgres":
        logger.info("Connecting to database...")
        pool = AsyncConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            open=False,
        )
        await pool.open()

        logger.info("Running database migrations...")
        await run_migrations(pool)

        app.state.cache = PostgresFederationCache(pool)
        app.state.user_key_directory = PostgresUserKeyDirectory(pool)
    else:
        logger.info("Using in-memory federation cache")
        app.state.cache = InMemoryFederationCache()
        app.state.user_key_directory = InMemoryUserKeyDirectory(settings.user_public_keys)

    http_client = httpx.AsyncClient()
    app.state.pool = pool
    app.state.http_client = http_client
    app.state.registry_client = build_registry_client(http_client, settings)

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await http_client.aclose()
    if pool is not None:
        await pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="2ndlock-federation",
    description="Domain Federation Discovery API - Discover federation peers "
    "through the public registry and exchange user public keys",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(v1_router, prefix="/v1")
app.include_router(peer_router, prefix="/api/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application (and database, when used) are healthy.
    Raises exception if database connection fails.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is not None:
        async with pool.connection() as conn:
            await conn.execute("SELECT 1")

    return {"status": "healthy"}
