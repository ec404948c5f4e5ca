"""
Simulator — Generic driver for any automaton definition.

Replays the input one character at a time:
1. Start at the automaton's start state with a fresh context
2. Stop consuming as soon as the trap state is reached
3. Record every transition with a frozen snapshot of the context
4. Decide acceptance at end of input (empty input never accepts)

The simulator never fails. Malformed input drives the automaton into its
trap state and yields accepted=False.
"""

from formdfa.automata.base import Automaton, AutomatonContext
from formdfa.observability.logging import get_logger
from formdfa.simulation.models import SimulationResult, StepRecord
from formdfa.vocabulary import State, Verdict

logger = get_logger("simulator")


def classify(
    automaton: Automaton,
    text: str,
    final_state: State,
    ctx: AutomatonContext,
) -> Verdict:
    """Place a finished run in the outcome taxonomy."""
    if final_state == automaton.trap:
        return Verdict.REJECTED_TRAP
    if text and automaton.is_accepting(final_state, ctx):
        return Verdict.ACCEPTED
    return Verdict.REJECTED_INCOMPLETE


def simulate(automaton: Automaton, text: str) -> SimulationResult:
    """
    Run an automaton over text.

    Args:
        automaton: The automaton definition to drive
        text: Input characters

    Returns:
        Result with the ordered step trace, final state and verdict
    """
    state = automaton.start
    ctx = automaton.init_context()
    steps: list[StepRecord] = []

    for index, ch in enumerate(text):
        if state == automaton.trap:
            break
        next_state = automaton.step(state, ch, ctx)
        steps.append(
            StepRecord(
                index=index,
                character=ch,
                from_state=state,
                to_state=next_state,
                context=ctx.snapshot(),
            )
        )
        state = next_state

    accepted = bool(text) and automaton.is_accepting(state, ctx)
    verdict = classify(automaton, text, state, ctx)

    logger.debug(
        f"{automaton.automaton_id.value}: consumed {len(steps)}/{len(text)} -> "
        f"{state.value} ({verdict.value})",
        extra={"extra_data": {
            "automaton": automaton.automaton_id.value,
            "consumed": len(steps),
            "input_length": len(text),
            "final_state": state.value,
            "verdict": verdict.value,
        }},
    )

    return SimulationResult(
        automaton=automaton.automaton_id,
        text=text,
        steps=tuple(steps),
        final_state=state,
        accepted=accepted,
        verdict=verdict,
        final_context=ctx.snapshot(),
    )
