"""
Presentation — Data consumed by diagram, trace and form views.

- Trace: step lines, progress split, state badge
- Runs: run tokens, replay frames, per-field sessions
"""

from formdfa.presentation.trace import (
    ProgressView,
    progress_view,
    final_progress_view,
    format_step,
    format_steps,
    state_badge,
)
from formdfa.presentation.runs import (
    RunTracker,
    ReplayFrame,
    replay,
    FieldRun,
    FieldSession,
)

__all__ = [
    # Trace
    "ProgressView",
    "progress_view",
    "final_progress_view",
    "format_step",
    "format_steps",
    "state_badge",
    # Runs
    "RunTracker",
    "ReplayFrame",
    "replay",
    "FieldRun",
    "FieldSession",
]
