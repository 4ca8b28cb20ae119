"""Helper functions for creating Message objects."""

from messagematch.core.models import Message, Severity


def message(severity: Severity, text: str) -> Message:
    """Create a message with the given severity.

    Args:
        severity: Message severity
        text: The message text

    Returns:
        Message with the given severity and text
    """
    return Message.create(severity, text)


def info(text: str) -> Message:
    """Create an INFO message."""
    return message(Severity.INFO, text)


def warn(text: str) -> Message:
    """Create a WARN message."""
    return message(Severity.WARN, text)


def error(text: str) -> Message:
    """Create an ERROR message."""
    return message(Severity.ERROR, text)
