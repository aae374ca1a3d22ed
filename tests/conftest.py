"""Pytest configuration and shared fixtures.

Provides a throwaway SQLite database per test, a stub catalog, the
wishlist service and an HTTP client with database and catalog overridden.
"""

import asyncio
import os

# Settings are read once at import time, so configure the test
# environment before anything from wishlist_api is imported.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient

from wishlist_api.core.database import build_engine, build_session_factory, create_tables, get_db
from wishlist_api.core.security import SecurityUtils
from wishlist_api.main import app
from wishlist_api.services.catalog import CatalogLookup
from wishlist_api.services.wishlist_service import WishlistService
from wishlist_api.utils.dependencies import get_catalog_lookup


class StubCatalog(CatalogLookup):
    """In-memory catalog that knows a fixed set of (ref_id, type) pairs."""

    def __init__(self, known=()):
        self.known = set(known)
        self.calls = []

    async def exists(self, ref_id, item_type):
        self.calls.append((ref_id, item_type))
        return (ref_id, item_type) in self.known


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
def database_url(tmp_path):
    """URL of a fresh SQLite file for this test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'wishlist_test.db'}"


@pytest.fixture
async def engine(database_url):
    """Async engine with all tables created."""
    test_engine = build_engine(database_url)
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def catalog():
    """Catalog with two listings and one experience."""
    return StubCatalog({("L1", "listing"), ("L2", "listing"), ("E1", "experience")})


@pytest.fixture
def service(db, catalog):
    return WishlistService(db, catalog)


# ============================================================================
# API Fixtures
# ============================================================================


@pytest.fixture
def api_engine(database_url):
    """Engine for HTTP tests; tables are created outside the client's loop."""
    test_engine = build_engine(database_url)
    asyncio.run(create_tables(test_engine))
    yield test_engine
    asyncio.run(test_engine.dispose())


@pytest.fixture
def client(api_engine, catalog):
    """Test client backed by the per-test database and the stub catalog."""
    factory = build_session_factory(api_engine)

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog_lookup] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers_for():
    """Factory building bearer headers for a given user id."""

    def _make(user_id: str) -> dict:
        token = SecurityUtils.create_access_token({"sub": user_id})
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def auth_headers(auth_headers_for):
    return auth_headers_for("user-1")
