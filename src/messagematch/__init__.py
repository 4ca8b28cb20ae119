"""Severity-tagged messages and composable field matchers."""

from messagematch.core.matchers import (
    ANY,
    FieldMatcher,
    has_severity,
    has_text,
    info_message,
    select,
    with_severity,
    with_severity_and_text,
    with_text,
)
from messagematch.core.messages import error, info, message, warn
from messagematch.core.models import Message, Severity

__all__ = [
    "ANY",
    "FieldMatcher",
    "Message",
    "Severity",
    "error",
    "has_severity",
    "has_text",
    "info",
    "info_message",
    "message",
    "select",
    "warn",
    "with_severity",
    "with_severity_and_text",
    "with_text",
]
