"""
Tests for simulation models.
"""

import json

import pytest
from pydantic import ValidationError

from formdfa.automata import (
    EMAIL_AUTOMATON,
    PASSWORD_AUTOMATON,
    EmailContext,
    EmailSnapshot,
    PasswordContext,
    PasswordSnapshot,
)
from formdfa.simulation import SimulationResult, StepRecord, simulate
from formdfa.vocabulary import AutomatonID, EmailState, PasswordState, Verdict


class TestStepRecord:
    """Tests for StepRecord."""

    def test_frozen(self):
        step = StepRecord(
            index=0,
            character="a",
            from_state=EmailState.S,
            to_state=EmailState.L,
            context=EmailContext(local_length=1).snapshot(),
        )
        with pytest.raises(ValidationError):
            step.index = 3

    def test_context_frozen(self):
        step = StepRecord(
            index=0,
            character="a",
            from_state=EmailState.S,
            to_state=EmailState.L,
            context=EmailContext(local_length=1).snapshot(),
        )
        with pytest.raises(ValidationError):
            step.context.local_length = 5

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            StepRecord(
                index=-1,
                character="a",
                from_state=EmailState.S,
                to_state=EmailState.L,
                context=EmailContext().snapshot(),
            )

    def test_keeps_context_subclass(self):
        step = StepRecord(
            index=0,
            character="a",
            from_state=EmailState.S,
            to_state=EmailState.L,
            context=EmailContext(local_length=1).snapshot(),
        )
        assert isinstance(step.context, EmailSnapshot)
        assert step.context.local_length == 1

    def test_trap_read_through_context_automaton(self):
        """A bare "TRAP" belongs to the automaton owning the snapshot."""
        step = StepRecord(
            index=2,
            character="!",
            from_state="110",
            to_state="TRAP",
            context=PasswordContext(length=2, trap=True).snapshot(),
        )
        assert step.to_state is PasswordState.TRAP
        assert step.from_state is PasswordState.LOWER_UPPER

    def test_state_of_other_automaton_rejected(self):
        with pytest.raises(ValidationError):
            StepRecord(
                index=0,
                character="a",
                from_state="S",
                to_state="L",
                context=PasswordContext().snapshot(),
            )


class TestSnapshotTypes:
    """Tests for frozen context snapshots."""

    def test_snapshot_is_frozen_copy(self):
        ctx = PasswordContext(length=3)
        snap = ctx.snapshot()
        ctx.length = 4
        assert snap.length == 3
        with pytest.raises(ValidationError):
            snap.length = 9

    def test_snapshot_carries_automaton_tag(self):
        assert EmailContext().snapshot().automaton == "email"
        assert PasswordContext().snapshot().automaton == "password"
        assert isinstance(EmailContext().snapshot(), EmailSnapshot)
        assert isinstance(PasswordContext().snapshot(), PasswordSnapshot)


class TestSimulationResult:
    """Tests for SimulationResult."""

    def test_frozen(self):
        result = simulate(EMAIL_AUTOMATON, "a@b.co")
        with pytest.raises(ValidationError):
            result.accepted = False

    def test_json_dump_includes_context_fields(self):
        result = simulate(EMAIL_AUTOMATON, "a@b.co")
        data = json.loads(result.model_dump_json())
        assert data["automaton"] == "email"
        assert data["final_state"] == "TLD"
        assert data["accepted"] is True
        assert data["verdict"] == "ACCEPTED"
        assert data["final_context"]["automaton"] == "email"
        assert data["final_context"]["tld_length"] == 2
        assert data["steps"][1]["context"]["seen_at"] is True

    def test_consumed(self):
        assert simulate(EMAIL_AUTOMATON, "@@@").consumed == 1
        assert simulate(EMAIL_AUTOMATON, "a@b.co").consumed == 6

    def test_context_of_other_automaton_rejected(self):
        result = simulate(EMAIL_AUTOMATON, "a@b.co")
        data = result.model_dump()
        data["final_context"] = PasswordContext().snapshot()
        with pytest.raises(ValidationError):
            SimulationResult.model_validate(data)


class TestJsonRoundTrip:
    """Results read back from their JSON form unchanged."""

    @pytest.mark.parametrize("text", ["user.name+tag@sub.example.com", "a@@b.co", "a@b", ""])
    def test_email(self, text):
        result = simulate(EMAIL_AUTOMATON, text)
        restored = SimulationResult.model_validate_json(result.model_dump_json())
        assert restored == result
        assert isinstance(restored.final_context, EmailSnapshot)
        assert all(isinstance(s.to_state, EmailState) for s in restored.steps)
        assert type(restored.final_state) is EmailState

    @pytest.mark.parametrize("text", ["Abcdefg1", "Abc!", "abc", ""])
    def test_password(self, text):
        result = simulate(PASSWORD_AUTOMATON, text)
        restored = SimulationResult.model_validate_json(result.model_dump_json())
        assert restored == result
        assert isinstance(restored.final_context, PasswordSnapshot)
        assert all(isinstance(s.to_state, PasswordState) for s in restored.steps)
        assert type(restored.final_state) is PasswordState

    def test_trapped_password_keeps_password_trap(self):
        result = simulate(PASSWORD_AUTOMATON, "Abc!")
        restored = SimulationResult.model_validate_json(result.model_dump_json())
        assert restored.automaton == AutomatonID.PASSWORD
        assert restored.final_state is PasswordState.TRAP
        assert restored.steps[-1].to_state is PasswordState.TRAP
        assert restored.final_context.length == 3
        assert restored.final_context.trap
        assert restored.verdict == Verdict.REJECTED_TRAP
