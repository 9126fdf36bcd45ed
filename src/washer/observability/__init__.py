"""
Observability — Logging and metrics for the washer.

Provides:
- Logging stamped with cycle ID and effective program
- Metrics collection (counters, gauges, histograms)
"""

from washer.observability.logging import (
    current_cycle_id,
    current_program,
    bind_program,
    configure_logging,
    get_logger,
    CycleContext,
    CycleFilter,
    JSONFormatter,
    ReadableFormatter,
)
from washer.observability.metrics import (
    Counter,
    Gauge,
    Histogram,
    MetricsRegistry,
    get_metrics,
    reset_metrics,
)

__all__ = [
    # Logging
    "current_cycle_id",
    "current_program",
    "bind_program",
    "configure_logging",
    "get_logger",
    "CycleContext",
    "CycleFilter",
    "JSONFormatter",
    "ReadableFormatter",
    # Metrics
    "Counter",
    "Gauge",
    "Histogram",
    "MetricsRegistry",
    "get_metrics",
    "reset_metrics",
]
