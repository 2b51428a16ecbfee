"""Pytest configuration and fixtures for integration tests."""

from typing import Callable, Iterator, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.api.main import create_app
from core.infrastructure.chaos import ChaosProfile, FaultInjector
from core.settings import AppSettings


# Use in-memory SQLite for testing; the app opens it inside its own event loop
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings() -> AppSettings:
    """Settings that never write a log file."""
    return AppSettings(LOG_FILE=None)


@pytest.fixture
def make_app(test_settings) -> Callable[..., FastAPI]:
    """Factory for apps with an explicit fault injector."""

    def factory(injector: Optional[FaultInjector] = None) -> FastAPI:
        return create_app(
            settings=test_settings,
            fault_injector=injector or FaultInjector(ChaosProfile.disabled()),
            database_url=TEST_DATABASE_URL,
        )

    return factory


@pytest.fixture
def app(make_app) -> FastAPI:
    """App with fault injection disabled."""
    return make_app()


@pytest.fixture
def test_client(app) -> Iterator[TestClient]:
    """Create FastAPI test client; entering it runs the app lifespan."""
    with TestClient(app) as client:
        yield client
