"""
Devices — Hardware collaborators driven by the washing machine.

Provides:
- Protocols for the dirt detector, water pump and engine
- DeviceResult / DeviceFault for fault reporting
- Simulators that record their calls
"""

from washer.devices.base import (
    DeviceFault,
    WaterPumpFault,
    EngineFault,
    DeviceResult,
    DirtDetector,
    WaterPump,
    Engine,
)
from washer.devices.simulated import (
    DeviceCall,
    CallJournal,
    SimulatedWaterPump,
    SimulatedEngine,
    FixedDirtDetector,
)

__all__ = [
    # Base
    "DeviceFault",
    "WaterPumpFault",
    "EngineFault",
    "DeviceResult",
    "DirtDetector",
    "WaterPump",
    "Engine",
    # Simulators
    "DeviceCall",
    "CallJournal",
    "SimulatedWaterPump",
    "SimulatedEngine",
    "FixedDirtDetector",
]
