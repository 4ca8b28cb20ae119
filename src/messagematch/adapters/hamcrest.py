"""PyHamcrest adapter for message matchers.

Wraps a FieldMatcher as a hamcrest Matcher so it composes with collection
matchers, and lifts hamcrest matchers into field predicates.

Example:
    ```python
    from hamcrest import assert_that, contains_string, has_item

    from messagematch.adapters.hamcrest import info_message, message_with_text

    assert_that(messages, has_item(info_message()))
    assert_that(messages, has_item(message_with_text(contains_string("problem"))))
    ```
"""

from typing import Any

from hamcrest import equal_to, is_
from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import tostring

from messagematch.core.matchers import FieldMatcher
from messagematch.core.models import Message, Severity
from messagematch.core.predicates import DescribedPredicate, described


class MessageMatcher(BaseMatcher[Message]):
    """Hamcrest matcher delegating to a FieldMatcher.

    Items that are not Message instances never match.
    """

    def __init__(self, field_matcher: FieldMatcher) -> None:
        if not isinstance(field_matcher, FieldMatcher):
            raise TypeError("field_matcher must be a FieldMatcher")
        self.field_matcher = field_matcher

    def _matches(self, item: Any) -> bool:
        if not isinstance(item, Message):
            return False
        return self.field_matcher.matches(item)

    def describe_to(self, description: Description) -> None:
        description.append_text(self.field_matcher.describe())

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if not isinstance(item, Message):
            mismatch_description.append_text("was not a Message: ")
            mismatch_description.append_description_of(item)
            return
        mismatch_description.append_text(f"was {item}")


def from_hamcrest(matcher: Matcher[Any]) -> DescribedPredicate:
    """Lift a hamcrest matcher into a field predicate."""
    if not isinstance(matcher, Matcher):
        raise TypeError("matcher must be a hamcrest Matcher")
    return described(matcher.matches, tostring(matcher))


def message_matching(
    severity_matcher: Matcher[Severity] | None = None,
    text_matcher: Matcher[str] | None = None,
) -> MessageMatcher:
    """Build a MessageMatcher from optional hamcrest field matchers."""
    return MessageMatcher(
        FieldMatcher(
            severity_predicate=(
                None if severity_matcher is None else from_hamcrest(severity_matcher)
            ),
            text_predicate=None if text_matcher is None else from_hamcrest(text_matcher),
        )
    )


def message_with_severity(severity: Severity) -> MessageMatcher:
    """Match messages whose severity is ``severity``."""
    return message_matching(severity_matcher=is_(equal_to(severity)))


def info_message() -> MessageMatcher:
    """Match INFO messages."""
    return message_with_severity(Severity.INFO)


def message_with_text(text_matcher: Matcher[str]) -> MessageMatcher:
    """Match messages whose text satisfies ``text_matcher``."""
    return message_matching(text_matcher=text_matcher)
