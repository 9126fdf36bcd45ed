"""
Vocabulary — Enumerated types shared by every part of the cycle.
"""

from washer.vocabulary.enums import (
    Material,
    Program,
    PROGRAM_DURATIONS,
    Result,
    ErrorCode,
)

__all__ = [
    "Material",
    "Program",
    "PROGRAM_DURATIONS",
    "Result",
    "ErrorCode",
]
