"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator instance."""
    from stackcalc import Calculator

    return Calculator()


@pytest.fixture
def calculator_with_history():
    """Provide a Calculator that has evaluated two expressions."""
    from stackcalc import Calculator

    calc = Calculator()
    calc.evaluate("1 + 1")
    calc.evaluate("6 * 7")
    return calc


@pytest.fixture
def sample_expressions():
    """Provide expressions paired with their values."""
    return [
        ("0", 0),
        ("42", 42),
        ("1 + 2 * 3", 7),
        ("(1 + 2) * 3", 9),
        ("10 - 4 - 3", 3),
        ("100 / 10 / 5", 2),
        ("2 ^ 10", 1024),
        ("-8 / 3", -2),
        ("7 % 4 + 1", 4),
        ("((2))", 2),
    ]
