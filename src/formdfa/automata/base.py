"""
Automaton Base — Common protocol for the format automata.

An automaton definition is a static, immutable description:
- Ordered state identifiers with one start and one trap state
- A context initializer for the per-run flags/counters
- A transition function that may mutate the run's context
- An acceptance predicate over (state, context)

The simulator drives any definition through this interface; presentation
code reads the introspection helpers (state descriptions, edge categories).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, Mapping

from pydantic import BaseModel, Field

from formdfa.vocabulary import AutomatonID, EmailEdge, PasswordEdge, State

if TYPE_CHECKING:
    from formdfa.simulation.models import SimulationResult


EdgeLabel = EmailEdge | PasswordEdge


# =============================================================================
# CONTEXT
# =============================================================================

class AutomatonContext(BaseModel):
    """
    Mutable side context carried alongside the state during one run.

    Owned by a single simulation call. Step records hold frozen snapshots,
    each subclass pairing with a read-only twin that snapshot() produces.
    """
    trap: bool = Field(
        default=False,
        description="Set once the run has entered the trap state"
    )

    def snapshot(self) -> AutomatonContext:
        """Frozen copy of the context at this point of the run."""
        raise NotImplementedError(f"{type(self).__name__} has no snapshot type")


# =============================================================================
# STATE DESCRIPTIONS
# =============================================================================

class StateInfo(BaseModel):
    """
    Description of one state for diagram renderers.

    Carries no layout; renderers decide where nodes go.
    """
    id: State = Field(..., description="State identifier")
    label: str = Field(..., description="Short display label")
    accepting: bool = Field(default=False, description="Whether this state can accept")
    trap: bool = Field(default=False, description="Whether this is the trap state")
    description: str = Field(default="", description="Explanatory text for tooltips")

    model_config = {"frozen": True}


# =============================================================================
# AUTOMATON DEFINITION
# =============================================================================

@dataclass(frozen=True)
class Automaton(ABC):
    """
    Abstract automaton definition.

    Subclasses declare their states as class-level constants and implement
    the transition and acceptance rules. Instances hold no per-run data and
    are shared across all simulations.
    """
    automaton_id: ClassVar[AutomatonID]
    states: ClassVar[tuple[State, ...]]
    start: ClassVar[State]
    trap: ClassVar[State]
    accepting_states: ClassVar[frozenset[State]]
    invalid_edge: ClassVar[EdgeLabel]

    # Read-only lookup tables shared by every caller
    state_labels: ClassVar[Mapping[State, str]] = MappingProxyType({})
    state_descriptions: ClassVar[Mapping[State, str]] = MappingProxyType({})
    edge_descriptions: ClassVar[Mapping[EdgeLabel, str]] = MappingProxyType({})

    @abstractmethod
    def init_context(self) -> AutomatonContext:
        """Fresh context for a new run."""
        ...

    @abstractmethod
    def step(self, state: State, ch: str, ctx: AutomatonContext) -> State:
        """
        Transition function.

        Returns the next state and may update ctx in place. Never raises:
        disallowed characters lead to the trap state.
        """
        ...

    @abstractmethod
    def is_accepting(self, state: State, ctx: AutomatonContext) -> bool:
        """Acceptance predicate, usable at any intermediate step."""
        ...

    @abstractmethod
    def edge_label(self, ch: str) -> EdgeLabel:
        """Category of a character as drawn on a transition edge."""
        ...

    def describe_edge(self, label: EdgeLabel) -> str:
        """Explanatory text for an edge category."""
        return self.edge_descriptions.get(label) or self.edge_descriptions[self.invalid_edge]

    def describe_states(self) -> list[StateInfo]:
        """Ordered state descriptions for diagram renderers."""
        return [
            StateInfo(
                id=state,
                label=self.state_labels.get(state, state.value),
                accepting=state in self.accepting_states,
                trap=state == self.trap,
                description=self.state_descriptions.get(state, ""),
            )
            for state in self.states
        ]

    def simulate(self, text: str) -> SimulationResult:
        """Run this automaton over text."""
        from formdfa.simulation.simulator import simulate

        return simulate(self, text)
