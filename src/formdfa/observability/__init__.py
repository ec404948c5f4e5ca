"""
Observability — Logging and metrics for formdfa.

Provides:
- Structured logging with run ID and automaton id
- Metrics collection (counters, histograms)
"""

from formdfa.observability.logging import (
    set_run_id,
    get_run_id,
    set_automaton,
    get_automaton,
    configure_logging,
    get_logger,
    RunLogContext,
    JSONFormatter,
    ReadableFormatter,
)
from formdfa.observability.metrics import (
    Counter,
    Histogram,
    MetricsRegistry,
    get_metrics,
    reset_metrics,
)

__all__ = [
    # Logging
    "set_run_id",
    "get_run_id",
    "set_automaton",
    "get_automaton",
    "configure_logging",
    "get_logger",
    "RunLogContext",
    "JSONFormatter",
    "ReadableFormatter",
    # Metrics
    "Counter",
    "Histogram",
    "MetricsRegistry",
    "get_metrics",
    "reset_metrics",
]
