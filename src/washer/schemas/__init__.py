"""
Schemas — Validated, immutable value objects of a wash cycle.
"""

from washer.schemas.laundry import (
    Percentage,
    LaundryBatch,
    ProgramConfiguration,
    LaundryStatus,
)

__all__ = [
    "Percentage",
    "LaundryBatch",
    "ProgramConfiguration",
    "LaundryStatus",
]
