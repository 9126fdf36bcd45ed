"""
Metrics — Simple in-process metrics for wash cycles.

Counts outcomes per error code and tracks cycle duration and load weight.
"""

from dataclasses import dataclass, field, fields
from threading import Lock
from typing import Any

from washer.vocabulary import ErrorCode


class _Metric:
    """Named value guarded by a lock."""

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self._lock = Lock()
        self.reset()

    def reset(self) -> None:
        with self._lock:
            self._value = 0.0

    @property
    def value(self) -> float:
        return self._value


class Counter(_Metric):
    """Counts events; only goes up between resets."""

    def inc(self, amount: float = 1.0) -> None:
        with self._lock:
            self._value += amount


class Gauge(_Metric):
    """Counts things in flight, e.g. running cycles."""

    def inc(self, amount: float = 1.0) -> None:
        with self._lock:
            self._value += amount

    def dec(self, amount: float = 1.0) -> None:
        with self._lock:
            self._value -= amount


class Histogram:
    """
    Range tracker for an observed quantity.

    Keeps count, smallest and largest observation; enough to report
    batch weights and cycle durations.
    """

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self._lock = Lock()
        self.reset()

    def observe(self, value: float) -> None:
        with self._lock:
            self._count += 1
            self._min = value if self._min is None else min(self._min, value)
            self._max = value if self._max is None else max(self._max, value)

    @property
    def count(self) -> int:
        return self._count

    @property
    def min(self) -> float:
        return self._min if self._min is not None else 0.0

    @property
    def max(self) -> float:
        return self._max if self._max is not None else 0.0

    def reset(self) -> None:
        with self._lock:
            self._count = 0
            self._min: float | None = None
            self._max: float | None = None

    def to_dict(self) -> dict[str, float]:
        return {"count": self._count, "min": self.min, "max": self.max}


@dataclass
class MetricsRegistry:
    """
    Registry for all washer metrics.
    """
    # Cycle outcomes
    cycles_total: Counter = field(
        default_factory=lambda: Counter("cycles_total", "Total cycles started")
    )
    cycles_success: Counter = field(
        default_factory=lambda: Counter("cycles_success", "Successful cycles")
    )
    cycles_failed: Counter = field(
        default_factory=lambda: Counter("cycles_failed", "Failed cycles")
    )

    # Failure reasons
    too_heavy_rejections: Counter = field(
        default_factory=lambda: Counter("too_heavy_rejections", "Batches rejected as over capacity")
    )
    water_pump_failures: Counter = field(
        default_factory=lambda: Counter("water_pump_failures", "Pump faults while pouring")
    )
    engine_failures: Counter = field(
        default_factory=lambda: Counter("engine_failures", "Engine faults while washing")
    )
    finishing_faults: Counter = field(
        default_factory=lambda: Counter("finishing_faults", "Faults during release or spin, outcome kept")
    )

    # Program resolution
    autodetect_resolutions: Counter = field(
        default_factory=lambda: Counter("autodetect_resolutions", "AUTODETECT programs resolved")
    )

    # Distributions
    cycle_duration_seconds: Histogram = field(
        default_factory=lambda: Histogram("cycle_duration_seconds", "Wall clock time of start()")
    )
    batch_weight_kg: Histogram = field(
        default_factory=lambda: Histogram("batch_weight_kg", "Weight of submitted batches")
    )

    # Active state
    active_cycles: Gauge = field(
        default_factory=lambda: Gauge("active_cycles", "Cycles currently running")
    )

    def record_failure(self, error_code: ErrorCode) -> None:
        """Count a failed cycle under its reason."""
        self.cycles_failed.inc()
        if error_code == ErrorCode.TOO_HEAVY:
            self.too_heavy_rejections.inc()
        elif error_code == ErrorCode.WATER_PUMP_FAILURE:
            self.water_pump_failures.inc()
        elif error_code == ErrorCode.ENGINE_FAILURE:
            self.engine_failures.inc()

    def to_dict(self) -> dict[str, Any]:
        """Export all metrics as dict."""
        return {
            "cycles": {
                "total": self.cycles_total.value,
                "success": self.cycles_success.value,
                "failed": self.cycles_failed.value,
                "active": self.active_cycles.value,
            },
            "failures": {
                "too_heavy": self.too_heavy_rejections.value,
                "water_pump": self.water_pump_failures.value,
                "engine": self.engine_failures.value,
                "release_or_spin": self.finishing_faults.value,
            },
            "programs": {
                "autodetect_resolutions": self.autodetect_resolutions.value,
            },
            "distributions": {
                "cycle_duration_seconds": self.cycle_duration_seconds.to_dict(),
                "batch_weight_kg": self.batch_weight_kg.to_dict(),
            },
        }

    def reset(self) -> None:
        """Reset all metrics (for testing)."""
        for f in fields(self):
            getattr(self, f.name).reset()


# Global metrics registry
_metrics = MetricsRegistry()


def get_metrics() -> MetricsRegistry:
    """Get global metrics registry."""
    return _metrics


def reset_metrics() -> None:
    """Reset all metrics (for testing)."""
    _metrics.reset()
