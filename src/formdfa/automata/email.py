"""
Email Automaton — DFA approximating the email pattern.

Mirrors ^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\\.[a-zA-Z]{2,}$ as explicit states:
- Local part: one or more of [a-zA-Z0-9._%+-] (consecutive dots allowed)
- A single @
- Domain labels of [a-zA-Z0-9-] separated by dots, at least one dot
- Final segment (TLD): letters only, length >= 2

Only the segment after the last dot is held to the TLD rule. tld_length is
reset at every dot and TLD is the only accepting state.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Literal, Mapping

from pydantic import Field

from formdfa.automata.base import Automaton, AutomatonContext, EdgeLabel
from formdfa.automata.charclass import (
    is_digit,
    is_domain_label_char,
    is_letter,
    is_local_email_char,
    is_lowercase,
    is_uppercase,
)
from formdfa.vocabulary import AutomatonID, EmailEdge, EmailState, State


MIN_TLD_LENGTH = 2


class EmailContext(AutomatonContext):
    """Flags and counters for one email run."""
    automaton: Literal["email"] = Field(default="email", description="Owning automaton")
    seen_at: bool = Field(default=False, description="An @ has been consumed")
    seen_dot: bool = Field(default=False, description="A dot has been consumed in the domain")
    local_length: int = Field(default=0, description="Characters consumed before the @")
    tld_length: int = Field(default=0, description="Letters consumed since the last domain dot")

    def snapshot(self) -> "EmailSnapshot":
        return EmailSnapshot.model_validate(self.model_dump())


class EmailSnapshot(EmailContext):
    """Read-only EmailContext recorded in step traces."""
    model_config = {"frozen": True}


@dataclass(frozen=True)
class EmailAutomaton(Automaton):
    """
    Email format automaton.

    States: S -> L -> D -> AFTER_DOT -> TLD, plus TRAP.
    """
    automaton_id: ClassVar[AutomatonID] = AutomatonID.EMAIL
    states: ClassVar[tuple[State, ...]] = (
        EmailState.S,
        EmailState.L,
        EmailState.D,
        EmailState.AFTER_DOT,
        EmailState.TLD,
        EmailState.TRAP,
    )
    start: ClassVar[State] = EmailState.S
    trap: ClassVar[State] = EmailState.TRAP
    accepting_states: ClassVar[frozenset[State]] = frozenset({EmailState.TLD})
    invalid_edge: ClassVar[EdgeLabel] = EmailEdge.INVALID

    state_labels: ClassVar[Mapping[State, str]] = MappingProxyType({
        EmailState.S: "S (start)",
        EmailState.L: "L (local)",
        EmailState.D: "D (domain)",
        EmailState.AFTER_DOT: "AFTER_DOT (after '.')",
        EmailState.TLD: "TLD",
        EmailState.TRAP: "TRAP",
    })
    state_descriptions: ClassVar[Mapping[State, str]] = MappingProxyType({
        EmailState.S: "Start. Waiting for the first character of the local part.",
        EmailState.L: "Local part (before @). Letters, digits and ._%+- are allowed.",
        EmailState.D: "Domain: labels of [a-zA-Z0-9-] separated by '.'",
        EmailState.AFTER_DOT: "A dot was read in the domain; a new label or the TLD starts.",
        EmailState.TLD: "Top-level domain (e.g. com). Letters only, length >= 2.",
        EmailState.TRAP: "Trap state: the sequence cannot be an email address.",
    })
    edge_descriptions: ClassVar[Mapping[EdgeLabel, str]] = MappingProxyType({
        EmailEdge.AT: "Separator between the local part and the domain",
        EmailEdge.DOT: "Dot between domain labels; the last segment is the TLD",
        EmailEdge.LOWER: "Letter a-z",
        EmailEdge.UPPER: "Letter A-Z",
        EmailEdge.DIGIT: "Digit 0-9",
        EmailEdge.UNDERSCORE: "Character allowed in the local part",
        EmailEdge.PERCENT: "Character allowed in the local part",
        EmailEdge.PLUS: "Character allowed in the local part",
        EmailEdge.HYPHEN: "Character allowed in the local part",
        EmailEdge.INVALID: "Character not valid for the email pattern",
    })

    def init_context(self) -> EmailContext:
        return EmailContext()

    def step(self, state: State, ch: str, ctx: EmailContext) -> State:
        if state == EmailState.TRAP:
            return EmailState.TRAP

        if state == EmailState.S:
            if is_local_email_char(ch):
                ctx.local_length = 1
                return EmailState.L

        elif state == EmailState.L:
            if is_local_email_char(ch):
                ctx.local_length += 1
                return EmailState.L
            if ch == "@" and ctx.local_length >= 1:
                ctx.seen_at = True
                ctx.tld_length = 0
                return EmailState.D

        elif state == EmailState.D:
            if is_domain_label_char(ch):
                return EmailState.D
            if ch == ".":
                ctx.seen_dot = True
                ctx.tld_length = 0
                return EmailState.AFTER_DOT

        elif state == EmailState.AFTER_DOT:
            if is_letter(ch):
                ctx.tld_length = 1
                return EmailState.TLD
            # Not a TLD start; the domain simply continues with a new label
            if is_digit(ch) or ch == "-":
                return EmailState.D

        elif state == EmailState.TLD:
            if is_letter(ch):
                ctx.tld_length += 1
                return EmailState.TLD
            if ch == ".":
                ctx.seen_dot = True
                ctx.tld_length = 0
                return EmailState.AFTER_DOT
            if is_digit(ch) or ch == "-":
                return EmailState.D

        ctx.trap = True
        return EmailState.TRAP

    def is_accepting(self, state: State, ctx: EmailContext) -> bool:
        return (
            state == EmailState.TLD
            and ctx.seen_at
            and ctx.seen_dot
            and ctx.tld_length >= MIN_TLD_LENGTH
            and not ctx.trap
        )

    def edge_label(self, ch: str) -> EmailEdge:
        if ch == "@":
            return EmailEdge.AT
        if ch == ".":
            return EmailEdge.DOT
        if is_lowercase(ch):
            return EmailEdge.LOWER
        if is_uppercase(ch):
            return EmailEdge.UPPER
        if is_digit(ch):
            return EmailEdge.DIGIT
        if ch in ("_", "%", "+", "-"):
            return EmailEdge(ch)
        return EmailEdge.INVALID


EMAIL_AUTOMATON = EmailAutomaton()
