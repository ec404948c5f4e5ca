"""
Password Automaton — DFA approximating the password pattern.

Mirrors ^(?=.*[a-z])(?=.*[A-Z])(?=.*\\d)[A-Za-z\\d]{8,}$:
- Only ASCII letters and digits
- Length >= 8
- At least one lowercase letter, one uppercase letter and one digit

The three lookaheads become three bits of state (LUD). Bits only turn on,
so a run climbs towards 111 until a disallowed character forces TRAP.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Literal, Mapping

from pydantic import Field

from formdfa.automata.base import Automaton, AutomatonContext, EdgeLabel
from formdfa.automata.charclass import is_digit, is_letter, is_lowercase, is_uppercase
from formdfa.vocabulary import AutomatonID, PasswordEdge, PasswordState, State


MIN_PASSWORD_LENGTH = 8


class PasswordContext(AutomatonContext):
    """Counters for one password run."""
    automaton: Literal["password"] = Field(default="password", description="Owning automaton")
    length: int = Field(default=0, description="Letters and digits consumed so far")

    def snapshot(self) -> "PasswordSnapshot":
        return PasswordSnapshot.model_validate(self.model_dump())


class PasswordSnapshot(PasswordContext):
    """Read-only PasswordContext recorded in step traces."""
    model_config = {"frozen": True}


def _bits_description(state: PasswordState) -> str:
    if state is PasswordState.TRAP:
        return "Trap state: character not allowed."
    lower, upper, digit = state.bits
    parts = [
        f"L={'yes' if lower else 'no'} lowercase",
        f"U={'yes' if upper else 'no'} uppercase",
        f"D={'yes' if digit else 'no'} digit",
    ]
    return (
        f"State {state.value}: {' · '.join(parts)}. "
        f"Accepts at 111 with length >= {MIN_PASSWORD_LENGTH}."
    )


@dataclass(frozen=True)
class PasswordAutomaton(Automaton):
    """
    Password format automaton.

    Layers: 000 | 100, 010, 001 | 110, 101, 011 | 111, plus TRAP.
    """
    automaton_id: ClassVar[AutomatonID] = AutomatonID.PASSWORD
    states: ClassVar[tuple[State, ...]] = (
        PasswordState.NONE,
        PasswordState.LOWER,
        PasswordState.UPPER,
        PasswordState.DIGIT,
        PasswordState.LOWER_UPPER,
        PasswordState.LOWER_DIGIT,
        PasswordState.UPPER_DIGIT,
        PasswordState.ALL,
        PasswordState.TRAP,
    )
    start: ClassVar[State] = PasswordState.NONE
    trap: ClassVar[State] = PasswordState.TRAP
    accepting_states: ClassVar[frozenset[State]] = frozenset({PasswordState.ALL})
    invalid_edge: ClassVar[EdgeLabel] = PasswordEdge.INVALID

    state_labels: ClassVar[Mapping[State, str]] = MappingProxyType({
        PasswordState.NONE: "000",
        PasswordState.LOWER: "100 (has lower)",
        PasswordState.UPPER: "010 (has upper)",
        PasswordState.DIGIT: "001 (has digit)",
        PasswordState.LOWER_UPPER: "110 (lower+upper)",
        PasswordState.LOWER_DIGIT: "101 (lower+digit)",
        PasswordState.UPPER_DIGIT: "011 (upper+digit)",
        PasswordState.ALL: "111 (lower+upper+digit)",
        PasswordState.TRAP: "TRAP",
    })
    state_descriptions: ClassVar[Mapping[State, str]] = MappingProxyType({
        state: _bits_description(state) for state in PasswordState
    })
    edge_descriptions: ClassVar[Mapping[EdgeLabel, str]] = MappingProxyType({
        PasswordEdge.LOWER: "Lowercase character [a-z]",
        PasswordEdge.UPPER: "Uppercase character [A-Z]",
        PasswordEdge.DIGIT: "Digit [0-9]",
        PasswordEdge.INVALID: "Invalid character: only letters and digits are allowed",
    })

    def init_context(self) -> PasswordContext:
        return PasswordContext()

    def step(self, state: State, ch: str, ctx: PasswordContext) -> State:
        if state == PasswordState.TRAP:
            return PasswordState.TRAP

        if not (is_letter(ch) or is_digit(ch)):
            ctx.trap = True
            return PasswordState.TRAP

        ctx.length += 1

        lower, upper, digit = PasswordState(state).bits
        # Case and digit are disjoint classes: exactly one bit can turn on
        if is_lowercase(ch):
            lower = True
        elif is_uppercase(ch):
            upper = True
        else:
            digit = True

        return PasswordState.from_bits(lower, upper, digit)

    def is_accepting(self, state: State, ctx: PasswordContext) -> bool:
        return (
            state == PasswordState.ALL
            and ctx.length >= MIN_PASSWORD_LENGTH
            and not ctx.trap
        )

    def edge_label(self, ch: str) -> PasswordEdge:
        if is_lowercase(ch):
            return PasswordEdge.LOWER
        if is_uppercase(ch):
            return PasswordEdge.UPPER
        if is_digit(ch):
            return PasswordEdge.DIGIT
        return PasswordEdge.INVALID


PASSWORD_AUTOMATON = PasswordAutomaton()
