"""
Verify project setup is correct.
"""

import formdfa


def test_version_exists():
    """Package has version."""
    assert hasattr(formdfa, "__version__")
    assert formdfa.__version__ == "0.1.0"


def test_public_api_exported():
    """Top-level package exposes the engine entry points."""
    for name in ("simulate", "EMAIL_AUTOMATON", "PASSWORD_AUTOMATON", "get_automaton"):
        assert name in formdfa.__all__
        assert hasattr(formdfa, name)
