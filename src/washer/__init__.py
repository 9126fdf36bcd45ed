"""
washer — Control logic for a washing-machine cycle.
"""

from washer.vocabulary import Material, Program, Result, ErrorCode
from washer.schemas import (
    Percentage,
    LaundryBatch,
    ProgramConfiguration,
    LaundryStatus,
)
from washer.machine import (
    WashingMachineConfig,
    WashingMachine,
    create_washing_machine,
    create_simulated_washing_machine,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Material",
    "Program",
    "Result",
    "ErrorCode",
    "Percentage",
    "LaundryBatch",
    "ProgramConfiguration",
    "LaundryStatus",
    "WashingMachineConfig",
    "WashingMachine",
    "create_washing_machine",
    "create_simulated_washing_machine",
]
