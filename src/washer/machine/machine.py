"""
Washing Machine — Control routine for a single wash cycle.

Validates the batch, resolves the effective program, drives the pump and
the engine in a fixed order and reports the outcome as a LaundryStatus.
No collaborator fault ever escapes start().

Sequence (each step terminal on failure):
    weight check -> program resolution -> pour -> run_washing -> release -> spin
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Callable
from uuid import uuid4

from washer.vocabulary import ErrorCode, Program
from washer.schemas import LaundryBatch, LaundryStatus, ProgramConfiguration
from washer.devices import (
    CallJournal,
    DeviceFault,
    DeviceResult,
    DirtDetector,
    Engine,
    FixedDirtDetector,
    SimulatedEngine,
    SimulatedWaterPump,
    WaterPump,
)
from washer.observability import (
    CycleContext,
    bind_program,
    MetricsRegistry,
    get_logger,
    get_metrics,
)

logger = get_logger("machine")


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class WashingMachineConfig:
    """
    Configuration for the washing machine.

    max_weight_kg: capacity; a batch strictly heavier is rejected.
    autodetect_threshold: dirt degree at or above which AUTODETECT
        resolves to LONG; below it resolves to MEDIUM.
    release_on_engine_failure: drain the drum after an engine fault.
        Spin is still skipped.
    """
    max_weight_kg: float = 8.0
    autodetect_threshold: float = 50.0
    release_on_engine_failure: bool = False

    def __post_init__(self):
        if not math.isfinite(self.max_weight_kg) or self.max_weight_kg <= 0:
            raise ValueError(f"max_weight_kg must be a positive finite number, got {self.max_weight_kg}")
        if not 0 <= self.autodetect_threshold <= 100:
            raise ValueError(
                f"autodetect_threshold must be within [0, 100], got {self.autodetect_threshold}"
            )


# =============================================================================
# WASHING MACHINE
# =============================================================================

class WashingMachine:
    """
    Orchestrates one wash cycle per start() call.

    Holds no state between cycles; the same instance can be reused.

    Usage:
        machine = WashingMachine(detector, engine, pump)
        status = machine.start(batch, ProgramConfiguration(program=Program.SHORT, spin=True))
    """

    def __init__(
        self,
        dirt_detector: DirtDetector,
        engine: Engine,
        water_pump: WaterPump,
        config: WashingMachineConfig | None = None,
        metrics: MetricsRegistry | None = None,
    ):
        """
        Initialize washing machine.

        Args:
            dirt_detector: Consulted only for AUTODETECT
            engine: Runs washing and spin
            water_pump: Pours and releases water
            config: Capacity and threshold settings
            metrics: Metrics registry (defaults to the global one)
        """
        self.dirt_detector = dirt_detector
        self.engine = engine
        self.water_pump = water_pump
        self.config = config or WashingMachineConfig()
        self.metrics = metrics or get_metrics()

    def start(
        self,
        batch: LaundryBatch,
        configuration: ProgramConfiguration,
    ) -> LaundryStatus:
        """
        Run a complete cycle.

        Args:
            batch: The load to wash
            configuration: Requested program and spin flag

        Returns:
            LaundryStatus describing the outcome
        """
        cycle_id = uuid4()
        start_time = datetime.now()

        with CycleContext(cycle_id):
            logger.info(
                f"Cycle started: {batch.material_type.value} {batch.weight_kg} kg, "
                f"program={configuration.program.value}, spin={configuration.spin}"
            )
            self.metrics.cycles_total.inc()
            self.metrics.batch_weight_kg.observe(batch.weight_kg)
            self.metrics.active_cycles.inc()

            try:
                status = self._run_cycle(batch, configuration)
            finally:
                self.metrics.active_cycles.dec()
                duration = (datetime.now() - start_time).total_seconds()
                self.metrics.cycle_duration_seconds.observe(duration)

            if status.succeeded:
                self.metrics.cycles_success.inc()
            else:
                self.metrics.record_failure(status.error_code)

            logger.info(
                f"Cycle finished: {status.result.value} ({status.error_code.value})",
                extra={"extra_data": status.to_dict()},
            )

        return status

    def _run_cycle(
        self,
        batch: LaundryBatch,
        configuration: ProgramConfiguration,
    ) -> LaundryStatus:
        """Execute the cycle steps in order."""
        if batch.weight_kg > self.config.max_weight_kg:
            logger.warning(
                f"Batch too heavy: {batch.weight_kg} kg > {self.config.max_weight_kg} kg"
            )
            return LaundryStatus.failure(ErrorCode.TOO_HEAVY)

        program = self._resolve_program(batch, configuration.program)
        bind_program(program)

        error = self._attempt(self.water_pump.pour, batch.weight_kg)
        if error is not None:
            logger.warning(f"Water pump failure: {error}")
            return LaundryStatus.failure(ErrorCode.WATER_PUMP_FAILURE, program)

        error = self._attempt(self.engine.run_washing, program.time_in_minutes)
        if error is not None:
            logger.warning(f"Engine failure: {error}")
            if self.config.release_on_engine_failure:
                self._finish_step("release", self.water_pump.release)
            return LaundryStatus.failure(ErrorCode.ENGINE_FAILURE, program)

        self._finish_step("release", self.water_pump.release)

        if configuration.spin:
            self._finish_step("spin", self.engine.spin)
        else:
            logger.debug("Spin skipped")

        return LaundryStatus.success(program)

    def _finish_step(self, step: str, operation: Callable[[], DeviceResult | None]) -> None:
        """
        Run release or spin.

        These steps have no error code of their own: a fault is logged and
        counted, and the cycle outcome is left as is.
        """
        error = self._attempt(operation)
        if error is not None:
            self.metrics.finishing_faults.inc()
            logger.warning(f"Fault during {step}, outcome unchanged: {error}")

    def _resolve_program(self, batch: LaundryBatch, program: Program) -> Program:
        """Turn AUTODETECT into a concrete program; pass others through."""
        if program.is_concrete:
            return program

        degree = self.dirt_detector.detect_dirt_degree(batch)
        if degree.value >= self.config.autodetect_threshold:
            resolved = Program.LONG
        else:
            resolved = Program.MEDIUM

        self.metrics.autodetect_resolutions.inc()
        logger.info(f"AUTODETECT resolved to {resolved.value} (dirt degree {degree.value}%)")
        return resolved

    @staticmethod
    def _attempt(
        operation: Callable[..., DeviceResult | None],
        *args,
    ) -> str | None:
        """
        Call a device operation that may fault.

        Returns the fault description, or None on success. A driver
        returning None is treated as successful.
        """
        try:
            result = operation(*args)
        except DeviceFault as e:
            return str(e) or type(e).__name__

        if result is not None and not result.success:
            return result.error or f"{result.device or 'device'} fault"
        return None


# =============================================================================
# FACTORY FUNCTIONS
# =============================================================================

def create_washing_machine(
    dirt_detector: DirtDetector,
    engine: Engine,
    water_pump: WaterPump,
    config: WashingMachineConfig | None = None,
    metrics: MetricsRegistry | None = None,
) -> WashingMachine:
    """
    Create a washing machine around real device drivers.

    Raises:
        TypeError: If a collaborator does not satisfy its protocol
    """
    for collaborator, protocol in (
        (dirt_detector, DirtDetector),
        (engine, Engine),
        (water_pump, WaterPump),
    ):
        if not isinstance(collaborator, protocol):
            raise TypeError(
                f"{type(collaborator).__name__} does not implement {protocol.__name__}"
            )
    return WashingMachine(
        dirt_detector=dirt_detector,
        engine=engine,
        water_pump=water_pump,
        config=config,
        metrics=metrics,
    )


def create_simulated_washing_machine(
    dirt_degree: float = 0.0,
    fail_on_pour: bool = False,
    fail_on_wash: bool = False,
    config: WashingMachineConfig | None = None,
    metrics: MetricsRegistry | None = None,
) -> WashingMachine:
    """
    Create a washing machine wired to simulators sharing one CallJournal.

    The journal is reachable as ``machine.water_pump.journal``.
    """
    journal = CallJournal()
    return WashingMachine(
        dirt_detector=FixedDirtDetector(dirt_degree, journal=journal),
        engine=SimulatedEngine(journal=journal, fail_on_wash=fail_on_wash),
        water_pump=SimulatedWaterPump(journal=journal, fail_on_pour=fail_on_pour),
        config=config,
        metrics=metrics,
    )
