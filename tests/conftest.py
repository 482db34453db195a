"""
Shared test fixtures for the clinicdesk test suite.
"""

from datetime import datetime

import pytest

from clinicdesk.parsing.parser import CommandParser

FIXED_NOW = datetime(2026, 1, 15, 10, 0)


@pytest.fixture
def fixed_now():
    """The moment the parser treats as 'now' in tests."""
    return FIXED_NOW


@pytest.fixture
def parser(fixed_now):
    """CommandParser whose clock is pinned to fixed_now.

    Usage:
        def test_something(parser):
            request = parser.parse("list-patient")
    """
    return CommandParser(clock=lambda: fixed_now)
