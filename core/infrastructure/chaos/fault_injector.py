"""
Fault injection.

Decides, per request, whether to short-circuit with a simulated backend
failure. The decision depends only on the configured profile and the random
source, never on request content.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence, Tuple


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulatedFault:
    """Canned failure returned instead of running the request."""

    status_code: int
    message: str

    def to_body(self) -> dict:
        return {"error": self.message}


DEFAULT_FAULTS: Tuple[SimulatedFault, ...] = (
    SimulatedFault(503, "Service Unavailable: Database connection pool exhausted"),
    SimulatedFault(504, "Gateway Timeout: Upstream service did not respond"),
    SimulatedFault(500, "Internal Server Error: Transaction deadlock detected"),
)

DEFAULT_FAILURE_RATE = 0.10


@dataclass(frozen=True)
class ChaosProfile:
    """
    Immutable fault-injection configuration.

    Attributes:
        failure_rate: Probability (0..1) that a request is short-circuited
        faults: Candidates, picked uniformly when a fault fires
    """

    failure_rate: float = DEFAULT_FAILURE_RATE
    faults: Tuple[SimulatedFault, ...] = field(default=DEFAULT_FAULTS)

    def __post_init__(self):
        if not 0.0 <= self.failure_rate <= 1.0:
            raise ValueError(
                f"failure_rate must be between 0 and 1, got: {self.failure_rate}"
            )
        if self.failure_rate > 0 and not self.faults:
            raise ValueError("A non-zero failure_rate needs at least one fault")
        # Accept any sequence but store a tuple
        object.__setattr__(self, "faults", tuple(self.faults))

    @classmethod
    def disabled(cls) -> "ChaosProfile":
        """Profile that never injects a fault."""
        return cls(failure_rate=0.0)


class RandomSource(Protocol):
    """Subset of ``random.Random`` the injector relies on."""

    def random(self) -> float: ...

    def choice(self, seq: Sequence[SimulatedFault]) -> SimulatedFault: ...


class FaultInjector:
    """
    Samples simulated faults.

    Args:
        profile: Rate and candidate faults
        rng: Random source; defaults to a fresh ``random.Random``
    """

    def __init__(
        self,
        profile: Optional[ChaosProfile] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.profile = profile or ChaosProfile()
        self._rng = rng or random.Random()

    def sample(self) -> Optional[SimulatedFault]:
        """Return a fault to inject, or None to let the request through."""
        if self.profile.failure_rate <= 0.0:
            return None
        if self._rng.random() >= self.profile.failure_rate:
            return None
        return self._rng.choice(self.profile.faults)

    def intercept(self, method: str, path: str) -> Optional[SimulatedFault]:
        """
        Sample a fault for an inbound request and log it if one fires.

        Args:
            method: HTTP method
            path: Request path

        Returns:
            The fault to respond with, or None
        """
        fault = self.sample()
        if fault is not None:
            # Injected faults log at WARNING; genuine store errors log at ERROR
            logger.warning(
                fault.message,
                extra={
                    "simulated": True,
                    "status": fault.status_code,
                    "path": path,
                    "method": method,
                },
            )
        return fault
