"""Tests for metrics collection."""

import pytest

from washer.observability import (
    Counter,
    Gauge,
    Histogram,
    MetricsRegistry,
    get_metrics,
    reset_metrics,
)
from washer.vocabulary import ErrorCode


class TestCounter:
    """Tests for Counter metric."""

    def test_starts_at_zero(self):
        """Counter starts at zero."""
        assert Counter("test", "Test counter").value == 0

    def test_increment_by_amount(self):
        """Can increment by specific amount."""
        counter = Counter("test", "Test counter")
        counter.inc()
        counter.inc(5)
        assert counter.value == 6

    def test_reset(self):
        """Can reset counter."""
        counter = Counter("test", "Test counter")
        counter.inc(10)
        counter.reset()
        assert counter.value == 0


class TestGauge:
    """Tests for Gauge metric."""

    def test_inc_dec(self):
        """Gauge moves both ways."""
        gauge = Gauge("test", "Test gauge")
        gauge.inc(5)
        gauge.dec(3)
        assert gauge.value == 2

    def test_reset(self):
        """Gauge resets to zero."""
        gauge = Gauge("test")
        gauge.inc(4)
        gauge.reset()
        assert gauge.value == 0


class TestHistogram:
    """Tests for Histogram metric."""

    def test_observe_values(self):
        """Tracks count, min and max."""
        hist = Histogram("test", "Test histogram")
        for v in (5.0, 1.0, 3.0):
            hist.observe(v)

        assert hist.count == 3
        assert hist.min == 1.0
        assert hist.max == 5.0

    def test_empty_histogram(self):
        """Empty histogram reports zeros."""
        hist = Histogram("test")
        assert hist.to_dict() == {"count": 0, "min": 0.0, "max": 0.0}


class TestMetricsRegistry:
    """Tests for the metrics registry."""

    def setup_method(self):
        reset_metrics()

    def test_get_metrics_is_global(self):
        """get_metrics returns the same registry each time."""
        assert get_metrics() is get_metrics()

    @pytest.mark.parametrize("code,attr", [
        (ErrorCode.TOO_HEAVY, "too_heavy_rejections"),
        (ErrorCode.WATER_PUMP_FAILURE, "water_pump_failures"),
        (ErrorCode.ENGINE_FAILURE, "engine_failures"),
    ])
    def test_record_failure(self, code, attr):
        """Failures are counted overall and by reason."""
        metrics = MetricsRegistry()
        metrics.record_failure(code)

        assert metrics.cycles_failed.value == 1
        assert getattr(metrics, attr).value == 1

    def test_to_dict(self):
        """Exports a nested dict."""
        metrics = get_metrics()
        metrics.cycles_total.inc()
        metrics.cycles_success.inc()

        d = metrics.to_dict()
        assert d["cycles"]["total"] == 1
        assert d["cycles"]["success"] == 1
        assert d["failures"]["engine"] == 0
        assert "cycle_duration_seconds" in d["distributions"]

    def test_reset_metrics(self):
        """reset_metrics clears the global registry."""
        get_metrics().cycles_total.inc(3)
        get_metrics().batch_weight_kg.observe(4.0)
        reset_metrics()

        assert get_metrics().cycles_total.value == 0
        assert get_metrics().batch_weight_kg.count == 0

    def test_reset_covers_every_metric(self):
        """reset() clears every registered metric."""
        metrics = MetricsRegistry()
        metrics.finishing_faults.inc()
        metrics.active_cycles.inc()
        metrics.cycle_duration_seconds.observe(0.5)

        metrics.reset()

        d = metrics.to_dict()
        assert d["failures"]["release_or_spin"] == 0
        assert d["cycles"]["active"] == 0
        assert d["distributions"]["cycle_duration_seconds"]["count"] == 0
