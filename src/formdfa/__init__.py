"""
formdfa — Email and password validation with explicit finite automata.

Each format is a deterministic automaton with a small side context. The
shared simulator replays an input one character at a time and returns the
full transition trace together with the verdict.
"""

__version__ = "0.1.0"

from formdfa.vocabulary import (
    AutomatonID,
    EmailState,
    PasswordState,
    Verdict,
)
from formdfa.automata import (
    Automaton,
    AutomatonContext,
    EMAIL_AUTOMATON,
    PASSWORD_AUTOMATON,
    AutomatonNotFoundError,
    get_automaton,
    list_automata,
)
from formdfa.simulation import (
    StepRecord,
    SimulationResult,
    simulate,
)

__all__ = [
    "__version__",
    "AutomatonID",
    "EmailState",
    "PasswordState",
    "Verdict",
    "Automaton",
    "AutomatonContext",
    "EMAIL_AUTOMATON",
    "PASSWORD_AUTOMATON",
    "AutomatonNotFoundError",
    "get_automaton",
    "list_automata",
    "StepRecord",
    "SimulationResult",
    "simulate",
]
