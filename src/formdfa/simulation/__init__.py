"""
Simulation — Driving automata over input.

- Models: immutable step records and results
- Simulator: the shared driver loop
"""

from formdfa.simulation.models import (
    StepRecord,
    SimulationResult,
)
from formdfa.simulation.simulator import (
    simulate,
    classify,
)

__all__ = [
    "StepRecord",
    "SimulationResult",
    "simulate",
    "classify",
]
