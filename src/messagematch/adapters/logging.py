"""Python logging handler adapter for messagematch.

This adapter bridges Python's standard library logging module to Message
objects, so log output can be asserted on with field matchers.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from messagematch.core.models import Message, Severity


def severity_for_level(levelno: int) -> Severity:
    """Map a logging level number to a Severity.

    DEBUG and INFO map to INFO, WARNING to WARN, ERROR and above to ERROR.
    """
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARN
    return Severity.INFO


class MessageCaptureHandler(logging.Handler):
    """Logging handler that records log records as Message objects.

    Example:
        ```python
        handler = MessageCaptureHandler()
        logging.getLogger().addHandler(handler)
        ...
        assert any(info_message().matches(m) for m in handler.messages)
        ```
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.messages: list[Message] = []

    def emit(self, record: logging.LogRecord) -> None:
        """Convert the record and append it to ``messages``.

        Args:
            record: The log record to emit.
        """
        try:
            text = record.getMessage()
        except (TypeError, ValueError):
            self.handleError(record)
            return
        self.messages.append(
            Message(severity=severity_for_level(record.levelno), text=text)
        )


@contextmanager
def captured_messages(
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> Generator[list[Message]]:
    """Capture messages logged on ``logger`` (root by default) within the block.

    Args:
        logger: Logger to attach to. Defaults to the root logger.
        level: Minimum level the logger passes on while capturing.

    Yields:
        The list of captured messages, filled as records are emitted.
    """
    target = logger if logger is not None else logging.getLogger()
    handler = MessageCaptureHandler()
    previous_level = target.level
    target.addHandler(handler)
    target.setLevel(level)
    try:
        yield handler.messages
    finally:
        target.setLevel(previous_level)
        target.removeHandler(handler)
