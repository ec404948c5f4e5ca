"""
Metrics — Simple metrics collection for formdfa.

Counts simulations by outcome and tracks how many characters each run
consumed. Recorded by callers of the simulator, never by the simulator
itself.
"""

from dataclasses import dataclass, field
from threading import Lock
from typing import Any

from formdfa.vocabulary import Verdict


class Counter:
    """Monotonically increasing counter."""

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self._value = 0.0
        self._lock = Lock()

    def inc(self, amount: float = 1.0) -> None:
        """Increment counter."""
        with self._lock:
            self._value += amount

    @property
    def value(self) -> float:
        return self._value

    def reset(self) -> None:
        """Reset counter (for testing)."""
        with self._lock:
            self._value = 0.0


class Histogram:
    """
    Simple histogram for tracking distributions.

    Tracks count, sum, min, max for calculating stats.
    """

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self._count = 0
        self._sum = 0.0
        self._min = float("inf")
        self._max = float("-inf")
        self._lock = Lock()

    def observe(self, value: float) -> None:
        """Record an observation."""
        with self._lock:
            self._count += 1
            self._sum += value
            self._min = min(self._min, value)
            self._max = max(self._max, value)

    @property
    def count(self) -> int:
        return self._count

    @property
    def sum(self) -> float:
        return self._sum

    @property
    def avg(self) -> float:
        if self._count == 0:
            return 0.0
        return self._sum / self._count

    @property
    def min(self) -> float:
        return self._min if self._count > 0 else 0.0

    @property
    def max(self) -> float:
        return self._max if self._count > 0 else 0.0

    def reset(self) -> None:
        with self._lock:
            self._count = 0
            self._sum = 0.0
            self._min = float("inf")
            self._max = float("-inf")

    def to_dict(self) -> dict[str, float]:
        return {
            "count": self._count,
            "sum": self._sum,
            "avg": self.avg,
            "min": self.min,
            "max": self.max,
        }


@dataclass
class MetricsRegistry:
    """
    Registry for all formdfa metrics.
    """
    simulations_total: Counter = field(
        default_factory=lambda: Counter("simulations_total", "Total simulations run")
    )
    simulations_accepted: Counter = field(
        default_factory=lambda: Counter("simulations_accepted", "Inputs accepted")
    )
    simulations_rejected: Counter = field(
        default_factory=lambda: Counter("simulations_rejected", "Inputs rejected at end of input")
    )
    simulations_trapped: Counter = field(
        default_factory=lambda: Counter("simulations_trapped", "Inputs rejected via the trap state")
    )
    stale_runs_discarded: Counter = field(
        default_factory=lambda: Counter("stale_runs_discarded", "Replays superseded by newer input")
    )
    steps_per_simulation: Histogram = field(
        default_factory=lambda: Histogram("steps_per_simulation", "Characters consumed per run")
    )

    def record_simulation(self, verdict: Verdict, steps: int) -> None:
        """Count one finished simulation."""
        self.simulations_total.inc()
        if verdict == Verdict.ACCEPTED:
            self.simulations_accepted.inc()
        elif verdict == Verdict.REJECTED_TRAP:
            self.simulations_trapped.inc()
        else:
            self.simulations_rejected.inc()
        self.steps_per_simulation.observe(steps)

    def to_dict(self) -> dict[str, Any]:
        """Export all metrics as dict."""
        return {
            "simulations": {
                "total": self.simulations_total.value,
                "accepted": self.simulations_accepted.value,
                "rejected": self.simulations_rejected.value,
                "trapped": self.simulations_trapped.value,
            },
            "runs": {
                "stale_discarded": self.stale_runs_discarded.value,
            },
            "steps": self.steps_per_simulation.to_dict(),
        }

    def reset(self) -> None:
        """Reset all metrics (for testing)."""
        self.simulations_total.reset()
        self.simulations_accepted.reset()
        self.simulations_rejected.reset()
        self.simulations_trapped.reset()
        self.stale_runs_discarded.reset()
        self.steps_per_simulation.reset()


# Global metrics registry
_metrics = MetricsRegistry()


def get_metrics() -> MetricsRegistry:
    """Get global metrics registry."""
    return _metrics


def reset_metrics() -> None:
    """Reset all metrics (for testing)."""
    _metrics.reset()
