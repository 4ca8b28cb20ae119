"""assertpy extensions for fluent assertions on message collections.

Example:
    ```python
    from assertpy import assert_that

    from messagematch.adapters.assertpy import register
    from messagematch.core.matchers import info_message

    register()
    assert_that(messages).contains_message_matching(info_message())
    ```
"""

from collections.abc import Callable
from typing import Any

from assertpy import add_extension

from messagematch.core.models import Message
from messagematch.core.predicates import describe_predicate


def _check_matcher(matcher: Any) -> None:
    if not callable(matcher):
        raise TypeError("matcher must be callable")


def contains_message_matching(self: Any, matcher: Callable[[Message], bool]) -> Any:
    """Assert that at least one message in the collection matches."""
    _check_matcher(matcher)
    messages = list(self.val)
    if not any(matcher(m) for m in messages):
        return self.error(
            f"Expected <{[str(m) for m in messages]}> to contain "
            f"{describe_predicate(matcher)}, but did not."
        )
    return self


def does_not_contain_message_matching(
    self: Any, matcher: Callable[[Message], bool]
) -> Any:
    """Assert that no message in the collection matches."""
    _check_matcher(matcher)
    found = [str(m) for m in self.val if matcher(m)]
    if found:
        return self.error(
            f"Expected no {describe_predicate(matcher)}, but found <{found}>."
        )
    return self


def register() -> None:
    """Install the message extensions on assertpy's builder."""
    add_extension(contains_message_matching)
    add_extension(does_not_contain_message_matching)
