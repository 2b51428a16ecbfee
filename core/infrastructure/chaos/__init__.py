"""Simulated failure injection."""

from .fault_injector import (
    DEFAULT_FAILURE_RATE,
    DEFAULT_FAULTS,
    ChaosProfile,
    FaultInjector,
    RandomSource,
    SimulatedFault,
)

__all__ = [
    "ChaosProfile",
    "DEFAULT_FAILURE_RATE",
    "DEFAULT_FAULTS",
    "FaultInjector",
    "RandomSource",
    "SimulatedFault",
]
