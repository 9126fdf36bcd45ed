"""
Vocabulary enums — the shared language of a wash cycle.

Every enumerated value referenced by the value objects, the devices and
the washing machine orchestrator is defined here.
"""

from enum import Enum


# =============================================================================
# LAUNDRY
# =============================================================================

class Material(str, Enum):
    """Fabric class of a laundry batch."""
    COTTON = "COTTON"
    SYNTHETIC = "SYNTHETIC"
    WOOL = "WOOL"
    DELICATE = "DELICATE"
    JEANS = "JEANS"


# =============================================================================
# PROGRAMS
# =============================================================================

class Program(str, Enum):
    """
    Wash program selection.

    SHORT, MEDIUM and LONG carry a fixed wash duration. AUTODETECT has no
    duration of its own and must be resolved to one of the others before
    the engine is driven.
    """
    SHORT = "SHORT"
    MEDIUM = "MEDIUM"
    LONG = "LONG"
    AUTODETECT = "AUTODETECT"

    @property
    def time_in_minutes(self) -> int | None:
        """Wash duration in minutes, None for AUTODETECT."""
        return PROGRAM_DURATIONS.get(self)

    @property
    def is_concrete(self) -> bool:
        """True if the program carries a duration."""
        return self in PROGRAM_DURATIONS


PROGRAM_DURATIONS: dict[Program, int] = {
    Program.SHORT: 30,
    Program.MEDIUM: 60,
    Program.LONG: 120,
}


# =============================================================================
# OUTCOMES
# =============================================================================

class Result(str, Enum):
    """Overall outcome of a cycle."""
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class ErrorCode(str, Enum):
    """
    Reason attached to a cycle outcome.

    NO_ERROR pairs with SUCCESS only; every other code pairs with FAILURE.
    """
    NO_ERROR = "NO_ERROR"
    TOO_HEAVY = "TOO_HEAVY"                    # Batch over capacity, nothing started
    WATER_PUMP_FAILURE = "WATER_PUMP_FAILURE"  # Pump faulted while pouring
    ENGINE_FAILURE = "ENGINE_FAILURE"          # Engine faulted while washing
