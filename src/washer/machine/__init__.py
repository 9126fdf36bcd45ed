"""
Machine — Wash cycle orchestration.

Usage:
    from washer.machine import create_simulated_washing_machine
    from washer.schemas import LaundryBatch, ProgramConfiguration
    from washer.vocabulary import Material, Program

    machine = create_simulated_washing_machine()
    status = machine.start(
        LaundryBatch(material_type=Material.COTTON, weight_kg=4),
        ProgramConfiguration(program=Program.SHORT, spin=True),
    )
    print(f"Result: {status.result.value}, Program: {status.runned_program}")
"""

from washer.machine.machine import (
    WashingMachineConfig,
    WashingMachine,
    create_washing_machine,
    create_simulated_washing_machine,
)

__all__ = [
    "WashingMachineConfig",
    "WashingMachine",
    "create_washing_machine",
    "create_simulated_washing_machine",
]
