"""
Trace Rendering — Text views over a simulation result.

Pure functions producing what a form or terminal displays:
- The step-by-step trace with live acceptance markers
- The consumed / current / remaining split of the input
- The state badge
"""

from dataclasses import dataclass

from formdfa.automata.base import Automaton
from formdfa.simulation.models import SimulationResult, StepRecord
from formdfa.vocabulary import State


ACCEPTED_STATUS = "Accepted"
REJECTED_STATUS = "Not accepted"
NO_INPUT = "No input."


@dataclass(frozen=True)
class ProgressView:
    """Input split around the character being consumed."""
    consumed: str = ""
    current: str = ""
    remaining: str = ""

    @property
    def empty(self) -> bool:
        return not (self.consumed or self.current or self.remaining)


def progress_view(value: str, position: int) -> ProgressView:
    """
    Split value around position.

    The position is clamped into the input; an empty value gives an empty
    view.
    """
    if not value:
        return ProgressView()
    i = max(0, min(len(value) - 1, position))
    return ProgressView(
        consumed=value[:i],
        current=value[i],
        remaining=value[i + 1:],
    )


def final_progress_view(value: str) -> ProgressView:
    """View once replay has finished; value is the consumed part of the input."""
    return ProgressView(consumed=value)


def format_step(step: StepRecord, automaton: Automaton) -> str:
    """One trace line, marked when the step lands in an accepting configuration."""
    line = (
        f"i={step.index}  char='{step.character}'  "
        f"{step.from_state.value} -> {step.to_state.value}"
    )
    if automaton.is_accepting(step.to_state, step.context):
        line += "  [accepting]"
    return line


def format_steps(result: SimulationResult, automaton: Automaton) -> list[str]:
    """
    Full trace: status line followed by one line per step.
    """
    lines = [ACCEPTED_STATUS if result.accepted else REJECTED_STATUS]
    if not result.steps:
        lines.append(NO_INPUT)
        return lines
    lines.extend(format_step(step, automaton) for step in result.steps)
    return lines


def state_badge(state: State, accepted: bool, trap: bool = False) -> str:
    """Badge text for the current state."""
    badge = f"State: {state.value}"
    if trap:
        return f"{badge} · TRAP"
    if accepted:
        return f"{badge} · ACCEPTS"
    return badge
