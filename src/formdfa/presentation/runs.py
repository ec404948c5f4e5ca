"""
Runs — Cooperative cancellation for replaying simulations.

A form field re-simulates on every edit. Each edit takes a new token from
the field's RunTracker; a replay checks its token before emitting each
frame and stops once a newer run has started. The simulator itself knows
nothing about runs: it always completes synchronously.
"""

from dataclasses import dataclass
from threading import Lock
from typing import Iterator

from formdfa.automata.base import Automaton
from formdfa.observability.logging import RunLogContext, get_logger
from formdfa.observability.metrics import get_metrics
from formdfa.presentation.trace import ProgressView, progress_view
from formdfa.simulation.models import SimulationResult, StepRecord
from formdfa.simulation.simulator import simulate

logger = get_logger("runs")


class RunTracker:
    """
    Monotonically increasing run tokens.

    Safe to share between threads.
    """

    def __init__(self):
        self._current = 0
        self._lock = Lock()

    def begin(self) -> int:
        """Start a new run, superseding every earlier token."""
        with self._lock:
            self._current += 1
            return self._current

    @property
    def current(self) -> int:
        return self._current

    def is_current(self, token: int) -> bool:
        """Whether token still belongs to the newest run."""
        with self._lock:
            return token == self._current


@dataclass(frozen=True)
class ReplayFrame:
    """One frame of an animated replay."""
    step: StepRecord
    accepting: bool          # Live acceptance at this intermediate step
    progress: ProgressView


def replay(
    result: SimulationResult,
    automaton: Automaton,
    tracker: RunTracker,
    token: int,
) -> Iterator[ReplayFrame]:
    """
    Yield replay frames for result while token is current.

    Stops silently as soon as a newer run supersedes token.
    """
    for step in result.steps:
        if not tracker.is_current(token):
            get_metrics().stale_runs_discarded.inc()
            with RunLogContext(token, automaton.automaton_id):
                logger.debug(f"Run superseded at step {step.index}; replay discarded")
            return
        yield ReplayFrame(
            step=step,
            accepting=automaton.is_accepting(step.to_state, step.context),
            progress=progress_view(result.text, step.index),
        )


@dataclass(frozen=True)
class FieldRun:
    """A simulation started by one edit of a field."""
    token: int
    result: SimulationResult


class FieldSession:
    """
    Simulation state for one input field.

    Every update supersedes the previous one. Usage:
        session = FieldSession(EMAIL_AUTOMATON)
        run = session.update("a@b.co")
        for frame in session.frames(run):
            draw(frame)
    """

    def __init__(self, automaton: Automaton, tracker: RunTracker | None = None):
        self.automaton = automaton
        self.tracker = tracker or RunTracker()

    def update(self, text: str) -> FieldRun:
        """Simulate the field's new value under a fresh token."""
        token = self.tracker.begin()
        with RunLogContext(token, self.automaton.automaton_id):
            result = simulate(self.automaton, text)
            get_metrics().record_simulation(result.verdict, result.consumed)
            logger.info(
                f"{self.automaton.automaton_id.value} run: "
                f"{result.final_state.value} ({result.verdict.value})"
            )
        return FieldRun(token=token, result=result)

    def is_stale(self, run: FieldRun) -> bool:
        return not self.tracker.is_current(run.token)

    def frames(self, run: FieldRun) -> Iterator[ReplayFrame]:
        """Replay frames for run, stopping once it is stale."""
        return replay(run.result, self.automaton, self.tracker, run.token)
