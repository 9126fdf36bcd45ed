"""Tests for the devices module — protocols, results and simulators."""

import pytest

from washer.devices import (
    DeviceResult,
    DeviceFault,
    WaterPumpFault,
    EngineFault,
    DirtDetector,
    WaterPump,
    Engine,
    CallJournal,
    SimulatedWaterPump,
    SimulatedEngine,
    FixedDirtDetector,
)
from washer.schemas import LaundryBatch, Percentage
from washer.vocabulary import Material


@pytest.fixture
def batch() -> LaundryBatch:
    return LaundryBatch(material_type=Material.COTTON, weight_kg=4)


# =============================================================================
# DeviceResult / DeviceFault Tests
# =============================================================================

def test_device_result_ok():
    """DeviceResult.ok() has no error."""
    result = DeviceResult.ok("pump")

    assert result.success is True
    assert result.device == "pump"
    assert result.error is None


def test_device_result_fail():
    """DeviceResult.fail() carries the error."""
    result = DeviceResult.fail("engine", "overheated")

    assert result.success is False
    assert result.device == "engine"
    assert result.error == "overheated"


def test_faults_share_base_class():
    """Device-specific faults are DeviceFaults."""
    assert isinstance(WaterPumpFault(), DeviceFault)
    assert isinstance(EngineFault(), DeviceFault)
    assert WaterPumpFault().device == "pump"
    assert EngineFault("stalled").device == "engine"


# =============================================================================
# Protocol Conformance Tests
# =============================================================================

def test_simulators_satisfy_protocols():
    """Simulators implement the device protocols."""
    assert isinstance(SimulatedWaterPump(), WaterPump)
    assert isinstance(SimulatedEngine(), Engine)
    assert isinstance(FixedDirtDetector(10), DirtDetector)


def test_unrelated_object_is_not_a_pump():
    """Objects without the operations do not satisfy the protocol."""
    assert not isinstance(object(), WaterPump)
    assert not isinstance(SimulatedEngine(), WaterPump)


# =============================================================================
# CallJournal Tests
# =============================================================================

def test_journal_records_in_order():
    """Journal keeps calls in the order they happened."""
    journal = CallJournal()
    journal.record("pump", "pour", 4.0)
    journal.record("engine", "run_washing", 30)

    assert journal.operations() == ["pump.pour", "engine.run_washing"]
    assert journal.calls[0].args == (4.0,)


def test_journal_count_and_clear():
    """Journal counts calls by name and can be cleared."""
    journal = CallJournal()
    journal.record("engine", "spin")
    journal.record("engine", "spin")

    assert journal.count("engine.spin") == 2
    journal.clear()
    assert journal.operations() == []


def test_shared_journal_across_devices(batch):
    """Devices sharing a journal record into one sequence."""
    journal = CallJournal()
    pump = SimulatedWaterPump(journal=journal)
    engine = SimulatedEngine(journal=journal)
    detector = FixedDirtDetector(5, journal=journal)

    detector.detect_dirt_degree(batch)
    pump.pour(4.0)
    engine.run_washing(60)
    pump.release()
    engine.spin()

    assert journal.operations() == [
        "detector.detect_dirt_degree",
        "pump.pour",
        "engine.run_washing",
        "pump.release",
        "engine.spin",
    ]


# =============================================================================
# Simulator Tests
# =============================================================================

def test_pump_pours_and_releases():
    """Healthy pump succeeds and tracks its work."""
    pump = SimulatedWaterPump()

    result = pump.pour(3.5)
    pump.release()

    assert result.success is True
    assert pump.poured == [3.5]
    assert pump.releases == 1


def test_pump_fault_as_result():
    """Faulty pump returns a failed result."""
    pump = SimulatedWaterPump(fail_on_pour=True)

    result = pump.pour(3.5)

    assert result.success is False
    assert "3.5" in result.error
    assert pump.poured == []


def test_pump_fault_as_exception():
    """Faulty pump can raise instead."""
    pump = SimulatedWaterPump(fail_on_pour=True, raise_fault=True)

    with pytest.raises(WaterPumpFault):
        pump.pour(3.5)


def test_engine_washes_and_spins():
    """Healthy engine succeeds and tracks its work."""
    engine = SimulatedEngine()

    result = engine.run_washing(120)
    engine.spin()

    assert result.success is True
    assert engine.washes == [120]
    assert engine.spins == 1


def test_engine_fault_as_result():
    """Faulty engine returns a failed result."""
    result = SimulatedEngine(fail_on_wash=True).run_washing(30)

    assert result.success is False
    assert result.device == "engine"


def test_engine_fault_as_exception():
    """Faulty engine can raise instead."""
    with pytest.raises(EngineFault):
        SimulatedEngine(fail_on_wash=True, raise_fault=True).run_washing(30)


def test_detector_returns_fixed_degree(batch):
    """Detector returns its preset degree and records the batch."""
    detector = FixedDirtDetector(Percentage(73))

    degree = detector.detect_dirt_degree(batch)

    assert degree == Percentage(73)
    assert detector.batches == [batch]
    assert detector.call_count == 1


def test_detector_accepts_plain_number():
    """Detector wraps plain numbers in a Percentage."""
    assert FixedDirtDetector(12).degree == Percentage(12)
