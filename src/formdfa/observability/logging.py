"""
Logging — Structured logging with run and automaton propagation.

Every record is stamped with the field run it belongs to and the automaton
that run drives, so interleaved email and password runs stay apart in one
log stream.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from enum import Enum
from typing import Any


_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)
_automaton: ContextVar[str | None] = ContextVar("automaton", default=None)


def _text(value: int | str | Enum | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def set_run_id(run_id: int | str | None) -> None:
    """Set run ID for current context."""
    _run_id.set(_text(run_id))


def get_run_id() -> str | None:
    """Get run ID from current context."""
    return _run_id.get()


def set_automaton(automaton: str | Enum | None) -> None:
    """Set the automaton id (e.g. AutomatonID.EMAIL) for current context."""
    _automaton.set(_text(automaton))


def get_automaton() -> str | None:
    return _automaton.get()


class RunFilter(logging.Filter):
    """Adds run_id and automaton to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = get_run_id() or "-"
        record.automaton = get_automaton() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    run_id and automaton are null outside a run.
    """

    def format(self, record: logging.LogRecord) -> str:
        run_id = getattr(record, "run_id", "-")
        automaton = getattr(record, "automaton", "-")
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "run_id": None if run_id == "-" else run_id,
            "automaton": None if automaton == "-" else automaton,
        }

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class ReadableFormatter(logging.Formatter):
    """
    Terminal lines such as `INFO    [run 3 password] formdfa.runs: ...`.
    """

    def format(self, record: logging.LogRecord) -> str:
        tag = f"run {getattr(record, 'run_id', '-')}"
        automaton = getattr(record, "automaton", "-")
        if automaton != "-":
            tag += f" {automaton}"

        base = f"{record.levelname:<7} [{tag}] {record.name}: {record.getMessage()}"

        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)

        return base


def configure_logging(
    level: int | str = logging.WARNING,
    json_format: bool = False,
    stream: Any = None,
) -> None:
    """
    Configure the "formdfa" logger tree.

    Args:
        level: Logging level (number or name such as "DEBUG")
        json_format: Use JSON format
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(RunFilter())
    handler.setFormatter(JSONFormatter() if json_format else ReadableFormatter())

    root = logging.getLogger("formdfa")
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a formdfa component."""
    return logging.getLogger(f"formdfa.{name}")


class RunLogContext:
    """
    Scope log records to one field run.

    Usage:
        with RunLogContext(token, AutomatonID.EMAIL):
            logger.info("Replaying...")  # Includes run_id and automaton

    automaton=None keeps whatever automaton the enclosing scope set.
    """

    def __init__(self, run_id: int | str | None, automaton: str | Enum | None = None):
        self.run_id = run_id
        self.automaton = automaton
        self._tokens: list = []

    def __enter__(self):
        self._tokens.append((_run_id, _run_id.set(_text(self.run_id))))
        if self.automaton is not None:
            self._tokens.append((_automaton, _automaton.set(_text(self.automaton))))
        return self

    def __exit__(self, *args):
        while self._tokens:
            var, token = self._tokens.pop()
            var.reset(token)
