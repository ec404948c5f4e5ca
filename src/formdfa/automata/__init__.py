"""
Automata — The email and password format automata.

- Character classes: ASCII predicates
- Base: the shared automaton protocol
- Email and password definitions
- Registry: lookup by id
"""

from formdfa.automata.base import (
    Automaton,
    AutomatonContext,
    StateInfo,
)
from formdfa.automata.email import (
    EmailAutomaton,
    EmailContext,
    EmailSnapshot,
    EMAIL_AUTOMATON,
)
from formdfa.automata.password import (
    PasswordAutomaton,
    PasswordContext,
    PasswordSnapshot,
    PASSWORD_AUTOMATON,
)
from formdfa.automata.registry import (
    AutomatonNotFoundError,
    get_automaton,
    list_automata,
)

__all__ = [
    # Base
    "Automaton",
    "AutomatonContext",
    "StateInfo",
    # Email
    "EmailAutomaton",
    "EmailContext",
    "EmailSnapshot",
    "EMAIL_AUTOMATON",
    # Password
    "PasswordAutomaton",
    "PasswordContext",
    "PasswordSnapshot",
    "PASSWORD_AUTOMATON",
    # Registry
    "AutomatonNotFoundError",
    "get_automaton",
    "list_automata",
]
