"""Pytest fixtures for application service tests."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.application.services.order_service import OrderApplicationService
from core.data.models import Base


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def order_service(test_session_factory) -> OrderApplicationService:
    """Order service backed by the in-memory database."""
    return OrderApplicationService(session_factory=test_session_factory)


@pytest_asyncio.fixture
async def seeded_orders(order_service):
    """A small mixed set of orders for search tests."""
    payloads = [
        {"customerName": "Janet", "totalAmount": 50, "status": "shipped"},
        {"customerName": "Bob", "totalAmount": 20},
        {"customerName": "Alice", "totalAmount": 75, "status": "shipped"},
        {"customerName": "Daniel", "totalAmount": 10, "status": "delivered"},
        {"customerName": "Ann_Marie", "totalAmount": 30},
    ]
    return [await order_service.create_order(payload) for payload in payloads]
