"""Shared test fixtures — async DB, seeded reference data, HTTP client.

Uses SQLite + aiosqlite in memory; every test gets freshly created tables
seeded with the reference employees (John Doe with two benefits, Jane Doe).
"""

from __future__ import annotations

import os

# Configure settings before any other import touches pydantic-settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("RATE_LIMIT", "30/minute")

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from employee_api.database import Base, get_db
from employee_api.main import create_app
from employee_api.seed import seed_database

# Import ALL model modules so SQLAlchemy can resolve cross-module relationships
import employee_api.benefits.models  # noqa: F401
import employee_api.employees.models  # noqa: F401


# ── Test database (SQLite in-memory) ────────────────────────────────

TEST_DATABASE_URL = "sqlite+aiosqlite://"

engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine.sync_engine, "connect")
def _enable_foreign_keys(dbapi_conn, connection_record):
    """Benefit rows rely on ON DELETE CASCADE."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestSessionFactory = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False,
)

JOHN_ID = 1
JANE_ID = 2
MISSING_ID = 99


@pytest.fixture(autouse=True)
async def _setup_db():
    """Create all tables and seed reference data before each test, drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with TestSessionFactory() as session:
        await seed_database(session)
        await session.commit()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    """Reset rate limiter storage between tests to prevent cross-test interference."""
    from employee_api.common.rate_limit import limiter

    limiter.reset()
    yield


async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
    async with TestSessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── FastAPI test client ─────────────────────────────────────────────

@pytest.fixture
async def app():
    """Create a fresh app instance with DB dependency overridden."""
    application = create_app()
    application.dependency_overrides[get_db] = _override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ── Database session (for direct DB operations in tests) ────────────

@pytest.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    async with TestSessionFactory() as session:
        yield session
        await session.commit()


# ── Model factories ─────────────────────────────────────────────────

def make_employee_payload(
    *,
    first_name: str | None = "Toki",
    last_name: str | None = "theDog",
    **overrides,
) -> dict:
    """camelCase JSON body for POST /employees."""
    payload = {
        "firstName": first_name,
        "lastName": last_name,
        "socialSecurityNumber": "123-45-0001",
    }
    payload.update(overrides)
    return payload


def make_update_payload(*, address1: str | None = "123 dale st", **overrides) -> dict:
    """camelCase JSON body for PUT /employees/{id}."""
    payload = {
        "address1": address1,
        "address2": None,
        "city": None,
        "state": None,
        "zipCode": None,
        "phoneNumber": None,
        "email": None,
    }
    payload.update(overrides)
    return payload
