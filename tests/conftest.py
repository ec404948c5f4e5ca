"""
Shared fixtures for formdfa tests.
"""

import pytest

from formdfa.automata import EMAIL_AUTOMATON, PASSWORD_AUTOMATON, EmailAutomaton, PasswordAutomaton
from formdfa.observability import reset_metrics


@pytest.fixture
def email() -> EmailAutomaton:
    return EMAIL_AUTOMATON


@pytest.fixture
def password() -> PasswordAutomaton:
    return PASSWORD_AUTOMATON


@pytest.fixture
def clean_metrics():
    """Reset global metrics around a test."""
    reset_metrics()
    yield
    reset_metrics()
