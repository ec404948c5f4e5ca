"""
Simulation Models — Step records and results.

Both are immutable once produced. Step records carry a frozen snapshot of
the context taken right after their transition, so later steps never alter
them.

State values overlap between automata ("TRAP" exists in both), so states
are read back through the owning automaton's enum: the result's
`automaton` field, or the `automaton` tag of a step's context snapshot.
"""

from typing import Annotated, Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from formdfa.automata.email import EmailSnapshot
from formdfa.automata.password import PasswordSnapshot
from formdfa.vocabulary import STATE_TYPES, AutomatonID, State, Verdict


# Frozen context of either automaton, told apart by its `automaton` tag
ContextSnapshot = Annotated[
    EmailSnapshot | PasswordSnapshot,
    Field(discriminator="automaton"),
]


def _owned_state(value: Any, automaton: Any) -> Any:
    """Read value as a state of automaton; unknown owners pass through."""
    if automaton is None:
        return value
    return STATE_TYPES[AutomatonID(automaton)](value)


class StepRecord(BaseModel):
    """
    One consumed character and the transition it caused.
    """
    index: int = Field(..., ge=0, description="Position of the character in the input")
    character: str = Field(..., description="The consumed character")
    context: ContextSnapshot = Field(
        ...,
        description="Snapshot of the run's context after the transition"
    )
    from_state: State = Field(..., description="State before the character")
    to_state: State = Field(..., description="State after the character")

    model_config = {"frozen": True}

    @field_validator("from_state", "to_state", mode="before")
    @classmethod
    def state_of_context_automaton(cls, v: Any, info: ValidationInfo) -> Any:
        """States belong to the automaton that owns the snapshot."""
        context = info.data.get("context")
        return _owned_state(v, getattr(context, "automaton", None))


class SimulationResult(BaseModel):
    """
    Outcome of running one automaton over one input.

    `steps` ends at the trapping step when the run hit the trap state, so
    it may be shorter than the input.
    """
    automaton: AutomatonID = Field(..., description="Which automaton produced this result")
    text: str = Field(..., description="The simulated input")
    steps: tuple[StepRecord, ...] = Field(
        default=(),
        description="Ordered trace, one record per consumed character"
    )
    final_state: State = Field(..., description="State after the last consumed character")
    accepted: bool = Field(..., description="Whether the input matches the format")
    verdict: Verdict = Field(..., description="Accepted, trapped, or incomplete at end of input")
    final_context: ContextSnapshot = Field(
        ...,
        description="Context at the end of the run"
    )

    model_config = {"frozen": True}

    @field_validator("final_state", mode="before")
    @classmethod
    def state_of_automaton(cls, v: Any, info: ValidationInfo) -> Any:
        return _owned_state(v, info.data.get("automaton"))

    @field_validator("steps", "final_context")
    @classmethod
    def same_automaton(cls, v: Any, info: ValidationInfo) -> Any:
        """Every snapshot must come from the result's automaton."""
        automaton = info.data.get("automaton")
        contexts = [step.context for step in v] if isinstance(v, tuple) else [v]
        for context in contexts:
            if automaton is not None and context.automaton != automaton.value:
                raise ValueError(
                    f"{context.automaton} context in a {automaton.value} result"
                )
        return v
