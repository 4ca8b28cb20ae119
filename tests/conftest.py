"""Shared test fixtures for all test modules."""

import pytest

from messagematch.core.models import Message, Severity


@pytest.fixture
def messages() -> list[Message]:
    """The canonical two-message list: one INFO, one ERROR."""
    return [
        Message(Severity.INFO, "All ok"),
        Message(Severity.ERROR, "A problem"),
    ]
