"""
Device Infrastructure — Protocols and result types for washer hardware.

The washing machine drives three collaborators: a dirt detector, a water
pump and an engine. Concrete drivers live outside this package; anything
satisfying these protocols can be plugged in.

Faults are reported by returning a failed DeviceResult. Drivers that
prefer raising may raise a DeviceFault subclass instead; the washing
machine treats both the same way.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from washer.schemas import LaundryBatch, Percentage


class DeviceFault(Exception):
    """Raised by a driver when the hardware reports a fault."""

    def __init__(self, message: str = "", device: str = ""):
        super().__init__(message)
        self.device = device


class WaterPumpFault(DeviceFault):
    """Water pump could not pour."""

    def __init__(self, message: str = "water pump fault"):
        super().__init__(message, device="pump")


class EngineFault(DeviceFault):
    """Engine could not run the washing phase."""

    def __init__(self, message: str = "engine fault"):
        super().__init__(message, device="engine")


@dataclass(frozen=True)
class DeviceResult:
    """
    Outcome of a device operation that may fault.
    """
    success: bool
    device: str = ""
    error: str | None = None

    @classmethod
    def ok(cls, device: str) -> "DeviceResult":
        """Create successful result."""
        return cls(success=True, device=device)

    @classmethod
    def fail(cls, device: str, error: str) -> "DeviceResult":
        """Create failed result."""
        return cls(success=False, device=device, error=error)


@runtime_checkable
class DirtDetector(Protocol):
    """Measures how soiled a batch is."""

    def detect_dirt_degree(self, batch: LaundryBatch) -> Percentage:
        """Return the dirt degree of the batch. Pure query."""
        ...


@runtime_checkable
class WaterPump(Protocol):
    """Fills and drains the drum."""

    def pour(self, weight_kg: float) -> DeviceResult:
        """Pour water for a load of the given weight. May fault."""
        ...

    def release(self) -> None:
        """Drain the drum."""
        ...


@runtime_checkable
class Engine(Protocol):
    """Turns the drum."""

    def run_washing(self, minutes: int) -> DeviceResult:
        """Run the washing phase for the given duration. May fault."""
        ...

    def spin(self) -> None:
        """Run the final spin."""
        ...
