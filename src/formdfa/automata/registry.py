"""
Automaton Registry — Lookup of the shared automaton definitions.
"""

from formdfa.automata.base import Automaton
from formdfa.automata.email import EMAIL_AUTOMATON
from formdfa.automata.password import PASSWORD_AUTOMATON
from formdfa.vocabulary import AutomatonID


class AutomatonNotFoundError(Exception):
    """Raised when a requested automaton doesn't exist."""
    pass


_AUTOMATA: dict[AutomatonID, Automaton] = {
    AutomatonID.EMAIL: EMAIL_AUTOMATON,
    AutomatonID.PASSWORD: PASSWORD_AUTOMATON,
}


def get_automaton(automaton_id: AutomatonID | str) -> Automaton:
    """
    Get an automaton by id.

    Accepts the enum or its string value ("email", "password").
    """
    try:
        key = AutomatonID(automaton_id)
    except ValueError:
        raise AutomatonNotFoundError(f"Unknown automaton: {automaton_id!r}") from None
    return _AUTOMATA[key]


def list_automata() -> list[Automaton]:
    """List all registered automata in id order."""
    return [_AUTOMATA[automaton_id] for automaton_id in AutomatonID]
