"""Integration tests for the fault-injection middleware."""

import logging
import random
from collections import Counter
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from apps.api.main import create_app
from core.infrastructure.chaos import DEFAULT_FAULTS, ChaosProfile, FaultInjector
from core.settings import AppSettings


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def scripted_rng(roll: float, pick: int = 0) -> Mock:
    """Random source that always rolls ``roll`` and picks fault ``pick``."""
    rng = Mock()
    rng.random.return_value = roll
    rng.choice.side_effect = lambda seq: seq[pick]
    return rng


EXPECTED = {
    0: (503, "Service Unavailable: Database connection pool exhausted"),
    1: (504, "Gateway Timeout: Upstream service did not respond"),
    2: (500, "Internal Server Error: Transaction deadlock detected"),
}


@pytest.mark.parametrize("pick", [0, 1, 2])
def test_fault_short_circuits_with_canned_response(make_app, pick):
    injector = FaultInjector(ChaosProfile(), rng=scripted_rng(roll=0.01, pick=pick))
    status_code, message = EXPECTED[pick]

    with TestClient(make_app(injector)) as client:
        response = client.get("/orders")

    assert response.status_code == status_code
    assert response.json() == {"error": message}


def test_fault_runs_before_validation_and_persistence(make_app):
    app = make_app(FaultInjector(ChaosProfile(failure_rate=1.0), rng=scripted_rng(roll=0.0)))

    with TestClient(app) as client:
        # Invalid body would be a 400 if it reached validation
        invalid = client.post("/orders", json={})
        valid = client.post("/orders", json={"customerName": "Janet", "totalAmount": 5})
        assert invalid.status_code == 503
        assert valid.status_code == 503

        app.state.fault_injector = FaultInjector(ChaosProfile.disabled())
        assert client.get("/orders").json() == []


def test_fault_logged_with_simulated_tag(make_app, caplog):
    injector = FaultInjector(ChaosProfile(), rng=scripted_rng(roll=0.0, pick=1))

    with TestClient(make_app(injector)) as client:
        with caplog.at_level(logging.WARNING):
            client.delete("/orders/7")

    records = [r for r in caplog.records if getattr(r, "simulated", False)]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert records[0].status == 504
    assert records[0].path == "/orders/7"
    assert records[0].method == "DELETE"


def test_pass_through_reaches_routes(make_app):
    injector = FaultInjector(ChaosProfile(), rng=scripted_rng(roll=0.5))

    with TestClient(make_app(injector)) as client:
        assert client.get("/health").status_code == 200
        assert client.post("/orders", json={"customerName": "Bob", "totalAmount": 3}).status_code == 201


def test_observed_rate_over_many_requests(make_app):
    injector = FaultInjector(ChaosProfile(), rng=random.Random(4242))
    fault_messages = {f.status_code: f.message for f in DEFAULT_FAULTS}

    with TestClient(make_app(injector)) as client:
        statuses = Counter()
        for _ in range(2000):
            response = client.get("/health")
            statuses[response.status_code] += 1
            if response.status_code != 200:
                assert response.json() == {"error": fault_messages[response.status_code]}

    faulted = sum(count for code, count in statuses.items() if code != 200)
    # Expected 200 with a standard deviation of about 13
    assert 140 <= faulted <= 260
    assert set(statuses) <= {200, 500, 503, 504}


def test_settings_drive_default_profile():
    settings = AppSettings(LOG_FILE=None, CHAOS_FAILURE_RATE=1.0)

    app = create_app(settings=settings, database_url=TEST_DATABASE_URL)
    assert app.state.fault_injector.profile.failure_rate == 1.0

    with TestClient(app) as client:
        assert client.get("/health").status_code in {500, 503, 504}


def test_disabled_chaos_setting():
    settings = AppSettings(LOG_FILE=None, CHAOS_ENABLED=False, CHAOS_FAILURE_RATE=1.0)

    app = create_app(settings=settings, database_url=TEST_DATABASE_URL)
    assert app.state.fault_injector.profile.failure_rate == 0.0
