"""
Vocabulary — Enumerated types forming the shared language of the system.

All enums referenced by automata, results and presentation helpers are
defined here.
"""

from formdfa.vocabulary.enums import (
    # Automata
    AutomatonID,
    # States
    EmailState,
    PasswordState,
    State,
    STATE_TYPES,
    # Outcomes
    Verdict,
    # Edges
    EmailEdge,
    PasswordEdge,
)

__all__ = [
    "AutomatonID",
    "EmailState",
    "PasswordState",
    "State",
    "STATE_TYPES",
    "Verdict",
    "EmailEdge",
    "PasswordEdge",
]
