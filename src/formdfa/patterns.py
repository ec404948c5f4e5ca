"""
Reference Patterns — The regular expressions the automata approximate.

Used to cross-check a field: the form shows the pattern's opinion next to
the automaton's trace. The two agree on ordinary input; they can differ on
edge cases such as consecutive dots in the domain, which the pattern
accepts through backtracking and the email automaton traps on.
"""

import re

from formdfa.automata.registry import AutomatonNotFoundError
from formdfa.vocabulary import AutomatonID


# ASCII classes written out; \d would also match non-ASCII digits
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PASSWORD_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])[A-Za-z0-9]{8,}", re.DOTALL)

PATTERNS: dict[AutomatonID, re.Pattern[str]] = {
    AutomatonID.EMAIL: EMAIL_PATTERN,
    AutomatonID.PASSWORD: PASSWORD_PATTERN,
}


def pattern_matches(automaton_id: AutomatonID | str, text: str) -> bool:
    """Whether the reference pattern matches the whole of text."""
    try:
        pattern = PATTERNS[AutomatonID(automaton_id)]
    except ValueError:
        raise AutomatonNotFoundError(f"Unknown automaton: {automaton_id!r}") from None
    return pattern.fullmatch(text) is not None
