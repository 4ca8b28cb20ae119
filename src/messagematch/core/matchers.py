"""Composite matchers over the fields of a Message.

A FieldMatcher holds one optional predicate per field. An absent predicate
is a wildcard: the field always matches. This is distinct from a predicate
that accepts everything, and is rendered as ``ANY`` in descriptions.

Example:
    ```python
    from messagematch import error, info, select
    from messagematch.core.matchers import with_text
    from messagematch.core.predicates import contains_string

    messages = [info("All ok"), error("A problem")]
    select(with_text(contains_string("problem")), messages)
    ```
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from messagematch.core.models import Message, Severity
from messagematch.core.ports import Predicate
from messagematch.core.predicates import describe_predicate, equal_to

# Description of a wildcard field
ANY = "ANY"

SeverityPredicate = Predicate[Severity]
TextPredicate = Predicate[str]


@dataclass(frozen=True)
class FieldMatcher:
    """Matches a Message iff every supplied field predicate accepts its field.

    Attributes:
        severity_predicate: Test for ``Message.severity``, or None for any.
        text_predicate: Test for ``Message.text``, or None for any.
    """

    severity_predicate: SeverityPredicate | None = None
    text_predicate: TextPredicate | None = None

    def __post_init__(self) -> None:
        if self.severity_predicate is not None and not callable(
            self.severity_predicate
        ):
            raise TypeError("severity_predicate must be callable")
        if self.text_predicate is not None and not callable(self.text_predicate):
            raise TypeError("text_predicate must be callable")

    def matches(self, message: Message) -> bool:
        """Return True if the message satisfies every supplied predicate."""
        if self.severity_predicate is not None and not self.severity_predicate(
            message.severity
        ):
            return False
        if self.text_predicate is not None and not self.text_predicate(
            message.text
        ):
            return False
        return True

    def __call__(self, message: Message) -> bool:
        return self.matches(message)

    def describe(self) -> str:
        """Describe which messages match, e.g. for assertion failures."""
        severity = (
            ANY
            if self.severity_predicate is None
            else describe_predicate(self.severity_predicate)
        )
        text = (
            ANY
            if self.text_predicate is None
            else describe_predicate(self.text_predicate)
        )
        return f"message with severity {severity} and text {text}"


def with_severity(predicate: SeverityPredicate) -> FieldMatcher:
    """Match on severity only; any text."""
    return FieldMatcher(severity_predicate=predicate)


def with_text(predicate: TextPredicate) -> FieldMatcher:
    """Match on text only; any severity."""
    return FieldMatcher(text_predicate=predicate)


def with_severity_and_text(
    severity_predicate: SeverityPredicate | None,
    text_predicate: TextPredicate | None,
) -> FieldMatcher:
    """Match on both fields. Either predicate may be None (wildcard)."""
    return FieldMatcher(
        severity_predicate=severity_predicate, text_predicate=text_predicate
    )


def has_severity(severity: Severity) -> FieldMatcher:
    """Match messages with exactly the given severity."""
    return with_severity(equal_to(severity))


def info_message() -> FieldMatcher:
    """Match INFO messages."""
    return has_severity(Severity.INFO)


def has_text(predicate: TextPredicate) -> FieldMatcher:
    """Alias of with_text()."""
    return with_text(predicate)


def select(
    matcher: Callable[[Message], bool], messages: Iterable[Message]
) -> list[Message]:
    """Return the messages accepted by the matcher, in input order."""
    return [m for m in messages if matcher(m)]
