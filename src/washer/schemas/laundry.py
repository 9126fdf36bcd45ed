"""
Laundry value objects — the inputs and the outcome of a wash cycle.

All models are frozen: they are validated once at construction and never
mutated afterwards. Equality is by value.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from washer.vocabulary import Material, Program, Result, ErrorCode


class Percentage(BaseModel):
    """
    Bounded degree in [0, 100].

    Used by dirt detectors to report how soiled a batch is.
    Accepts the value positionally: ``Percentage(42)``.
    """
    value: float = Field(
        ...,
        ge=0,
        le=100,
        allow_inf_nan=False,
        description="Degree as a percentage"
    )

    model_config = {"frozen": True}

    def __init__(self, value: float | None = None, **data):
        if value is not None:
            data["value"] = value
        super().__init__(**data)

    def __float__(self) -> float:
        return self.value

    # Ordering by value; equality and hashing stay pydantic's.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Percentage):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Percentage):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Percentage):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Percentage):
            return NotImplemented
        return self.value >= other.value


class LaundryBatch(BaseModel):
    """
    One load to be washed.

    Created by the caller right before a cycle and discarded after it.
    """
    material_type: Material = Field(
        ...,
        description="Fabric class of the load"
    )

    weight_kg: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Weight of the load in kilograms"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"material_type": "COTTON", "weight_kg": 4.0}
            ]
        },
    }


class ProgramConfiguration(BaseModel):
    """Program selection for a single cycle."""
    program: Program = Field(
        ...,
        description="Requested program, AUTODETECT allowed"
    )

    spin: bool = Field(
        ...,
        description="Whether the final spin step runs"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"program": "SHORT", "spin": True},
                {"program": "AUTODETECT", "spin": False},
            ]
        },
    }


class LaundryStatus(BaseModel):
    """
    Outcome of a cycle.

    Produced by the washing machine. ``runned_program`` is the concrete
    program actually executed and stays None when no program was started
    (e.g. TOO_HEAVY).
    """
    result: Result = Field(
        ...,
        description="SUCCESS or FAILURE"
    )

    error_code: ErrorCode = Field(
        ...,
        description="Reason for the result, NO_ERROR on success"
    )

    runned_program: Program | None = Field(
        default=None,
        description="Concrete program executed, if any"
    )

    model_config = {"frozen": True}

    @field_validator("runned_program")
    @classmethod
    def validate_program_is_concrete(cls, v: Program | None) -> Program | None:
        """AUTODETECT never appears in an outcome."""
        if v is not None and not v.is_concrete:
            raise ValueError(f"runned_program must be a concrete program, got {v.value}")
        return v

    @model_validator(mode="after")
    def validate_result_matches_error_code(self) -> "LaundryStatus":
        """SUCCESS goes with NO_ERROR and nothing else."""
        if (self.result == Result.SUCCESS) != (self.error_code == ErrorCode.NO_ERROR):
            raise ValueError(
                f"Inconsistent status: result={self.result.value}, "
                f"error_code={self.error_code.value}"
            )
        return self

    @classmethod
    def success(cls, program: Program) -> "LaundryStatus":
        """Create a successful status for the given program."""
        return cls(
            result=Result.SUCCESS,
            error_code=ErrorCode.NO_ERROR,
            runned_program=program,
        )

    @classmethod
    def failure(
        cls,
        error_code: ErrorCode,
        program: Program | None = None,
    ) -> "LaundryStatus":
        """Create a failed status."""
        return cls(
            result=Result.FAILURE,
            error_code=error_code,
            runned_program=program,
        )

    @property
    def succeeded(self) -> bool:
        return self.result == Result.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        return {
            "result": self.result.value,
            "error_code": self.error_code.value,
            "runned_program": self.runned_program.value if self.runned_program else None,
        }
