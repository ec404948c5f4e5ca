"""
Tests for the generic simulator.

Covers trace shape, trap handling, snapshots, idempotence and verdicts.
"""

import pytest
from pydantic import ValidationError

from formdfa.automata import (
    EMAIL_AUTOMATON,
    PASSWORD_AUTOMATON,
    PasswordContext,
    PasswordSnapshot,
)
from formdfa.simulation import classify, simulate
from formdfa.vocabulary import AutomatonID, EmailState, PasswordState, Verdict


ALL_AUTOMATA = [EMAIL_AUTOMATON, PASSWORD_AUTOMATON]

SAMPLE_INPUTS = [
    "",
    "a",
    "a@b.co",
    "a@b.c",
    "@b.co",
    "a@@b.co",
    "user.name+tag@sub.example.com",
    "Abcdefg1",
    "abcdefg1",
    "Ab1",
    "Abcdefg!",
    "with space@x.io",
]


# =============================================================================
# TRACE SHAPE
# =============================================================================

class TestTrace:
    """Tests for the ordered step trace."""

    def test_email_trace(self):
        result = simulate(EMAIL_AUTOMATON, "a@b.co")
        transitions = [(s.from_state, s.to_state) for s in result.steps]
        assert transitions == [
            (EmailState.S, EmailState.L),
            (EmailState.L, EmailState.D),
            (EmailState.D, EmailState.D),
            (EmailState.D, EmailState.AFTER_DOT),
            (EmailState.AFTER_DOT, EmailState.TLD),
            (EmailState.TLD, EmailState.TLD),
        ]
        assert [s.index for s in result.steps] == list(range(6))
        assert "".join(s.character for s in result.steps) == "a@b.co"

    @pytest.mark.parametrize("automaton", ALL_AUTOMATA)
    @pytest.mark.parametrize("text", SAMPLE_INPUTS)
    def test_at_most_one_step_per_character(self, automaton, text):
        result = simulate(automaton, text)
        assert len(result.steps) <= len(text)

    @pytest.mark.parametrize("automaton", ALL_AUTOMATA)
    @pytest.mark.parametrize("text", SAMPLE_INPUTS)
    def test_steps_chain(self, automaton, text):
        """Each step starts where the previous one ended."""
        result = simulate(automaton, text)
        state = automaton.start
        for step in result.steps:
            assert step.from_state == state
            state = step.to_state
        assert result.final_state == state

    @pytest.mark.parametrize("automaton", ALL_AUTOMATA)
    @pytest.mark.parametrize("text", SAMPLE_INPUTS)
    def test_trace_ends_at_trap(self, automaton, text):
        """Only the last step may enter TRAP, and nothing follows it."""
        result = simulate(automaton, text)
        for step in result.steps[:-1]:
            assert step.to_state != automaton.trap
            assert step.from_state != automaton.trap
        if result.final_state == automaton.trap:
            assert result.steps[-1].to_state == automaton.trap

    def test_trap_discards_remaining_input(self):
        result = simulate(EMAIL_AUTOMATON, "a b@c.com")
        assert len(result.steps) == 2
        assert result.final_state == EmailState.TRAP
        assert result.text == "a b@c.com"


# =============================================================================
# CONTEXT SNAPSHOTS
# =============================================================================

class TestSnapshots:
    """Tests for per-step context copies."""

    def test_snapshots_are_independent(self):
        result = simulate(PASSWORD_AUTOMATON, "Abcdefg1")
        assert [s.context.length for s in result.steps] == list(range(1, 9))
        assert result.steps[0].context is not result.final_context

    def test_snapshot_reflects_transition(self):
        result = simulate(EMAIL_AUTOMATON, "ab@c.de")
        at_step = result.steps[2]
        assert at_step.character == "@"
        assert at_step.context.seen_at
        assert at_step.context.local_length == 2
        assert not result.steps[1].context.seen_at

    def test_final_context_matches_last_snapshot(self):
        result = simulate(EMAIL_AUTOMATON, "x@y.org")
        assert result.final_context == result.steps[-1].context

    def test_empty_input_has_fresh_context(self):
        result = simulate(EMAIL_AUTOMATON, "")
        assert result.final_context == EMAIL_AUTOMATON.init_context().snapshot()

    def test_recorded_step_cannot_be_rewritten(self):
        result = simulate(PASSWORD_AUTOMATON, "Abcdefg1")
        with pytest.raises(ValidationError):
            result.steps[7].context.length = 1
        assert result.steps[7].context.length == 8

    def test_final_context_is_frozen(self):
        result = simulate(PASSWORD_AUTOMATON, "Abcdefg1")
        with pytest.raises(ValidationError):
            result.final_context.trap = True
        assert not result.final_context.trap

    def test_snapshots_keep_context_type(self):
        result = simulate(PASSWORD_AUTOMATON, "Ab1")
        assert isinstance(result.final_context, PasswordSnapshot)
        assert isinstance(result.steps[0].context, PasswordContext)


# =============================================================================
# RESULTS
# =============================================================================

class TestResults:
    """Tests for acceptance, verdicts and idempotence."""

    @pytest.mark.parametrize("automaton", ALL_AUTOMATA)
    @pytest.mark.parametrize("text", SAMPLE_INPUTS)
    def test_idempotent(self, automaton, text):
        assert simulate(automaton, text) == simulate(automaton, text)

    @pytest.mark.parametrize("automaton", ALL_AUTOMATA)
    def test_empty_never_accepted(self, automaton):
        result = simulate(automaton, "")
        assert not result.accepted
        assert result.verdict == Verdict.REJECTED_INCOMPLETE

    @pytest.mark.parametrize("automaton", ALL_AUTOMATA)
    @pytest.mark.parametrize("text", SAMPLE_INPUTS)
    def test_verdict_consistent(self, automaton, text):
        result = simulate(automaton, text)
        assert result.accepted == (result.verdict == Verdict.ACCEPTED)
        assert result.trapped == (result.final_state == automaton.trap)

    def test_result_identifies_automaton(self):
        assert simulate(EMAIL_AUTOMATON, "a").automaton == AutomatonID.EMAIL
        assert simulate(PASSWORD_AUTOMATON, "a").automaton == AutomatonID.PASSWORD

    def test_bound_simulate_matches_driver(self):
        assert PASSWORD_AUTOMATON.simulate("Abcdefg1") == simulate(PASSWORD_AUTOMATON, "Abcdefg1")

    def test_classify(self):
        ctx = PASSWORD_AUTOMATON.init_context()
        assert classify(PASSWORD_AUTOMATON, "x!", PasswordState.TRAP, ctx) == Verdict.REJECTED_TRAP
        assert classify(PASSWORD_AUTOMATON, "abc", PasswordState.LOWER, ctx) == Verdict.REJECTED_INCOMPLETE
