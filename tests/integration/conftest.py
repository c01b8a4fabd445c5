"""
Shared fixtures for integration tests.

Provides the FastAPI app pinned to the in-memory backend, and a
PostgreSQL pool that skips dependent tests when no database is reachable.
"""

from collections.abc import Generator

import psycopg
import pytest
from fastapi.testclient import TestClient
from psycopg_pool import ConnectionPool, PoolTimeout

from provider_registry.adapters.repository.postgres import run_migrations
from provider_registry.api.main import app
from provider_registry.config.settings import get_settings

ADMIN = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"


@pytest.fixture
def memory_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Force the in-memory backend and a known admin for the app lifespan."""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("ADMIN_PRINCIPAL", ADMIN)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client(memory_settings: None) -> Generator[TestClient, None, None]:
    """Test client running the full app lifespan (fresh registry per test)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for PostgreSQL tests, skipping if unreachable."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=False,
    )
    try:
        pool.open(wait=True, timeout=3)
    except (PoolTimeout, psycopg.OperationalError):
        pool.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")

    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Reset all registry tables before a test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM principal_providers")
        conn.execute("DELETE FROM providers")
        conn.execute("DELETE FROM verifiers")
        conn.execute("UPDATE registry_meta SET provider_count = 0 WHERE id = 1")
        conn.commit()
    yield
