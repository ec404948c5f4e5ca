"""
Vocabulary enums — the shared language of the automata.

State identifiers, automaton ids, verdicts and edge categories referenced by
the automata, the simulator and the presentation helpers.
"""

from enum import Enum


# =============================================================================
# AUTOMATA
# =============================================================================

class AutomatonID(str, Enum):
    """Identifier of a registered automaton."""
    EMAIL = "email"
    PASSWORD = "password"


# =============================================================================
# STATES
# =============================================================================

class EmailState(str, Enum):
    """
    States of the email automaton.

    TLD is the only accepting state; TRAP absorbs every invalid input.
    """
    S = "S"                    # Start, nothing consumed
    L = "L"                    # Local part (before @)
    D = "D"                    # Domain label
    AFTER_DOT = "AFTER_DOT"    # Just read a dot inside the domain
    TLD = "TLD"                # Letters-only tail after the last dot
    TRAP = "TRAP"


class PasswordState(str, Enum):
    """
    States of the password automaton.

    Each non-trap state is a three-bit label LUD: has-lowercase,
    has-uppercase, has-digit.
    """
    NONE = "000"
    LOWER = "100"
    UPPER = "010"
    DIGIT = "001"
    LOWER_UPPER = "110"
    LOWER_DIGIT = "101"
    UPPER_DIGIT = "011"
    ALL = "111"
    TRAP = "TRAP"

    @classmethod
    def from_bits(cls, lower: bool, upper: bool, digit: bool) -> "PasswordState":
        """Encode three class flags into a state."""
        return cls(f"{int(lower)}{int(upper)}{int(digit)}")

    @property
    def bits(self) -> tuple[bool, bool, bool]:
        """Decode the state into (lower, upper, digit) flags."""
        if self is PasswordState.TRAP:
            raise ValueError("TRAP carries no character-class bits")
        return tuple(flag == "1" for flag in self.value)  # type: ignore[return-value]


# Any state of any automaton
State = EmailState | PasswordState


# =============================================================================
# OUTCOMES
# =============================================================================

class Verdict(str, Enum):
    """
    Outcome of a simulation.

    Both rejections carry accepted=False; they differ in where the
    automaton stopped.
    """
    ACCEPTED = "ACCEPTED"
    REJECTED_TRAP = "REJECTED_TRAP"              # Invalid character drove the run to TRAP
    REJECTED_INCOMPLETE = "REJECTED_INCOMPLETE"  # Input ended before the pattern completed


# =============================================================================
# EDGE CATEGORIES
# =============================================================================

class EmailEdge(str, Enum):
    """Character category drawn on an email transition edge."""
    AT = "@"
    DOT = "."
    LOWER = "letter"
    UPPER = "LETTER"
    DIGIT = "digit"
    UNDERSCORE = "_"
    PERCENT = "%"
    PLUS = "+"
    HYPHEN = "-"
    INVALID = "invalid"


class PasswordEdge(str, Enum):
    """Character category drawn on a password transition edge."""
    LOWER = "lower"
    UPPER = "UPPER"
    DIGIT = "digit"
    INVALID = "invalid"

# State enum owning each automaton's state values
STATE_TYPES: dict[AutomatonID, type[EmailState] | type[PasswordState]] = {
    AutomatonID.EMAIL: EmailState,
    AutomatonID.PASSWORD: PasswordState,
}
