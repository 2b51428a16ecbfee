"""
Tests for the fault injector.

Rate checks are statistical and run against a seeded random source.
"""
import logging
import random
from collections import Counter
from itertools import cycle

import pytest

from core.infrastructure.chaos import (
    DEFAULT_FAULTS,
    ChaosProfile,
    FaultInjector,
    SimulatedFault,
)


class ScriptedRandom:
    """Random source replaying fixed rolls and choice indexes."""

    def __init__(self, rolls, picks=(0,)):
        self._rolls = cycle(rolls)
        self._picks = cycle(picks)
        self.random_calls = 0

    def random(self) -> float:
        self.random_calls += 1
        return next(self._rolls)

    def choice(self, seq):
        return seq[next(self._picks)]


class TestChaosProfile:
    """Profile construction."""

    def test_defaults(self):
        profile = ChaosProfile()
        assert profile.failure_rate == 0.10
        assert [(f.status_code, f.message) for f in profile.faults] == [
            (503, "Service Unavailable: Database connection pool exhausted"),
            (504, "Gateway Timeout: Upstream service did not respond"),
            (500, "Internal Server Error: Transaction deadlock detected"),
        ]

    @pytest.mark.parametrize("rate", [-0.1, 1.5])
    def test_rate_out_of_range_rejected(self, rate):
        with pytest.raises(ValueError):
            ChaosProfile(failure_rate=rate)

    def test_non_zero_rate_needs_faults(self):
        with pytest.raises(ValueError):
            ChaosProfile(failure_rate=0.5, faults=())

    def test_faults_stored_as_tuple(self):
        profile = ChaosProfile(faults=[SimulatedFault(500, "boom")])
        assert profile.faults == (SimulatedFault(500, "boom"),)

    def test_is_immutable(self):
        profile = ChaosProfile()
        with pytest.raises(AttributeError):
            profile.failure_rate = 0.5


class TestFaultInjector:
    """Sampling behaviour."""

    def test_disabled_profile_never_faults_and_never_rolls(self):
        rng = ScriptedRandom(rolls=[0.0])
        injector = FaultInjector(ChaosProfile.disabled(), rng=rng)
        assert all(injector.sample() is None for _ in range(100))
        assert rng.random_calls == 0

    def test_full_rate_always_faults(self):
        injector = FaultInjector(ChaosProfile(failure_rate=1.0), rng=random.Random(7))
        assert all(injector.sample() in DEFAULT_FAULTS for _ in range(500))

    def test_roll_below_rate_faults(self):
        injector = FaultInjector(ChaosProfile(), rng=ScriptedRandom(rolls=[0.05], picks=[1]))
        assert injector.sample() == DEFAULT_FAULTS[1]

    def test_roll_at_or_above_rate_passes(self):
        injector = FaultInjector(ChaosProfile(), rng=ScriptedRandom(rolls=[0.10, 0.99]))
        assert injector.sample() is None
        assert injector.sample() is None

    def test_long_run_rate_near_ten_percent(self):
        injector = FaultInjector(ChaosProfile(), rng=random.Random(20240601))
        samples = [injector.sample() for _ in range(10_000)]
        faults = [fault for fault in samples if fault is not None]

        # Expected 1000 with a standard deviation of 30
        assert 850 <= len(faults) <= 1150

        by_status = Counter(fault.status_code for fault in faults)
        assert set(by_status) == {500, 503, 504}
        # Uniform pick: each roughly a third
        assert all(count > 250 for count in by_status.values())
        assert {fault.message for fault in faults} == {f.message for f in DEFAULT_FAULTS}

    def test_intercept_logs_simulated_warning(self, caplog):
        injector = FaultInjector(ChaosProfile(), rng=ScriptedRandom(rolls=[0.0], picks=[2]))

        with caplog.at_level(logging.WARNING):
            fault = injector.intercept("PATCH", "/orders/3")

        assert fault.status_code == 500
        records = [r for r in caplog.records if getattr(r, "simulated", False)]
        assert len(records) == 1
        record = records[0]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "Internal Server Error: Transaction deadlock detected"
        assert (record.status, record.path, record.method) == (500, "/orders/3", "PATCH")

    def test_intercept_pass_through_is_silent(self, caplog):
        injector = FaultInjector(ChaosProfile(), rng=ScriptedRandom(rolls=[0.5]))
        with caplog.at_level(logging.DEBUG):
            assert injector.intercept("GET", "/orders") is None
        assert not [r for r in caplog.records if getattr(r, "simulated", False)]

    def test_fault_body_shape(self):
        assert DEFAULT_FAULTS[0].to_body() == {
            "error": "Service Unavailable: Database connection pool exhausted"
        }
