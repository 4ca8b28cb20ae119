"""Core domain models for severity-tagged messages."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


@total_ordering
class Severity(Enum):
    """Importance of a message, ordered INFO < WARN < ERROR."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        order = list(Severity)
        return order.index(self) < order.index(other)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Message:
    """A message tagged with a severity.

    Attributes:
        severity: How important the message is.
        text: Free-form message text. Any string, including empty.
    """

    severity: Severity
    text: str

    @classmethod
    def create(cls, severity: Severity, text: str) -> "Message":
        """Create a message. Never validates the text."""
        return cls(severity=severity, text=text)

    def __str__(self) -> str:
        return f"Message{{severity={self.severity}, text='{self.text}'}}"
