"""
Logging — Cycle-aware logging for the washer.

While a cycle runs, every record is stamped with the cycle ID and, once
known, the effective program. Output from several machines can then be
split per cycle and per program.
"""

import logging
import json
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from washer.vocabulary import Program


_cycle_id: ContextVar[str | None] = ContextVar("cycle_id", default=None)
_program: ContextVar[str | None] = ContextVar("program", default=None)


def current_cycle_id() -> str | None:
    """Cycle ID of the running cycle, if any."""
    return _cycle_id.get()


def current_program() -> str | None:
    """Effective program of the running cycle, once resolved."""
    return _program.get()


def bind_program(program: Program) -> None:
    """Record the effective program for the rest of the cycle."""
    _program.set(program.value)


class CycleFilter(logging.Filter):
    """Stamps cycle_id and program onto log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.cycle_id = current_cycle_id() or "-"
        record.program = current_program() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Fields passed as ``extra={"extra_data": {...}}`` are merged in, which
    is how the final status of a cycle reaches the log.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "cycle_id": getattr(record, "cycle_id", None),
            "program": getattr(record, "program", None),
        }
        entry.update(getattr(record, "extra_data", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


class ReadableFormatter(logging.Formatter):
    """``LEVEL [cycle8 PROGRAM] logger: message``"""

    def format(self, record: logging.LogRecord) -> str:
        cid = getattr(record, "cycle_id", "-")
        program = getattr(record, "program", "-")
        line = f"{record.levelname:<7} [{cid[:8]} {program}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Any = None,
) -> None:
    """
    Configure washer logging.

    Args:
        level: Logging level
        json_format: Use JSON format (for production)
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(CycleFilter())
    handler.setFormatter(JSONFormatter() if json_format else ReadableFormatter())

    washer_logger = logging.getLogger("washer")
    washer_logger.setLevel(level)
    washer_logger.handlers.clear()
    washer_logger.addHandler(handler)
    washer_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a washer component."""
    return logging.getLogger(f"washer.{name}")


class CycleContext:
    """
    Binds a cycle ID for the duration of a block.

    The program starts unbound inside the block; both values are
    restored on exit.

    Usage:
        with CycleContext(uuid4()):
            bind_program(Program.LONG)
            logger.info("Pouring...")  # carries cycle ID and LONG
    """

    def __init__(self, cycle_id: UUID | str):
        self.cycle_id = str(cycle_id)
        self._tokens = None

    def __enter__(self):
        self._tokens = (_cycle_id.set(self.cycle_id), _program.set(None))
        return self

    def __exit__(self, *args):
        if self._tokens is not None:
            cycle_token, program_token = self._tokens
            _program.reset(program_token)
            _cycle_id.reset(cycle_token)
