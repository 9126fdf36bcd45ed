"""
Simulated Devices — In-process stand-ins for washer hardware.

Useful for demos and tests. Every simulator records its calls, and
simulators sharing a CallJournal record into one ordered log so the
sequence across devices can be inspected.
"""

from dataclasses import dataclass, field
from typing import Any

from washer.devices.base import (
    DeviceResult,
    EngineFault,
    WaterPumpFault,
)
from washer.schemas import LaundryBatch, Percentage


@dataclass(frozen=True)
class DeviceCall:
    """Single recorded device operation."""
    device: str
    operation: str
    args: tuple[Any, ...] = ()

    @property
    def name(self) -> str:
        return f"{self.device}.{self.operation}"


@dataclass
class CallJournal:
    """Ordered record of device calls."""
    calls: list[DeviceCall] = field(default_factory=list)

    def record(self, device: str, operation: str, *args: Any) -> DeviceCall:
        call = DeviceCall(device=device, operation=operation, args=args)
        self.calls.append(call)
        return call

    def operations(self) -> list[str]:
        """Call names in order, e.g. ``["pump.pour", "engine.run_washing"]``."""
        return [c.name for c in self.calls]

    def count(self, name: str) -> int:
        return sum(1 for c in self.calls if c.name == name)

    def clear(self) -> None:
        self.calls.clear()


class SimulatedWaterPump:
    """
    Water pump simulator.

    Args:
        journal: Shared journal (a private one is created if omitted)
        fail_on_pour: Report a fault on every pour
        raise_fault: Raise WaterPumpFault instead of returning a failed result
    """

    device = "pump"

    def __init__(
        self,
        journal: CallJournal | None = None,
        fail_on_pour: bool = False,
        raise_fault: bool = False,
    ):
        self.journal = journal if journal is not None else CallJournal()
        self.fail_on_pour = fail_on_pour
        self.raise_fault = raise_fault
        self.poured: list[float] = []
        self.releases = 0

    def pour(self, weight_kg: float) -> DeviceResult:
        self.journal.record(self.device, "pour", weight_kg)
        if self.fail_on_pour:
            if self.raise_fault:
                raise WaterPumpFault(f"pump failed pouring for {weight_kg} kg")
            return DeviceResult.fail(self.device, f"pump failed pouring for {weight_kg} kg")
        self.poured.append(weight_kg)
        return DeviceResult.ok(self.device)

    def release(self) -> None:
        self.journal.record(self.device, "release")
        self.releases += 1


class SimulatedEngine:
    """
    Engine simulator.

    Args:
        journal: Shared journal (a private one is created if omitted)
        fail_on_wash: Report a fault on every washing run
        raise_fault: Raise EngineFault instead of returning a failed result
    """

    device = "engine"

    def __init__(
        self,
        journal: CallJournal | None = None,
        fail_on_wash: bool = False,
        raise_fault: bool = False,
    ):
        self.journal = journal if journal is not None else CallJournal()
        self.fail_on_wash = fail_on_wash
        self.raise_fault = raise_fault
        self.washes: list[int] = []
        self.spins = 0

    def run_washing(self, minutes: int) -> DeviceResult:
        self.journal.record(self.device, "run_washing", minutes)
        if self.fail_on_wash:
            if self.raise_fault:
                raise EngineFault(f"engine stalled after starting a {minutes} min wash")
            return DeviceResult.fail(self.device, f"engine stalled after starting a {minutes} min wash")
        self.washes.append(minutes)
        return DeviceResult.ok(self.device)

    def spin(self) -> None:
        self.journal.record(self.device, "spin")
        self.spins += 1


class FixedDirtDetector:
    """Dirt detector that always reports the same degree."""

    device = "detector"

    def __init__(
        self,
        degree: Percentage | float = 0.0,
        journal: CallJournal | None = None,
    ):
        self.degree = degree if isinstance(degree, Percentage) else Percentage(degree)
        self.journal = journal if journal is not None else CallJournal()
        self.batches: list[LaundryBatch] = []

    def detect_dirt_degree(self, batch: LaundryBatch) -> Percentage:
        self.journal.record(self.device, "detect_dirt_degree", batch)
        self.batches.append(batch)
        return self.degree

    @property
    def call_count(self) -> int:
        return len(self.batches)
