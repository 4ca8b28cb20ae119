"""BDD step definitions for message matching features."""

from dataclasses import dataclass, field

import pytest
from hamcrest import assert_that, has_item
from pytest_bdd import given, parsers, then, when

from messagematch.adapters.hamcrest import message_with_severity
from messagematch.core.matchers import (
    FieldMatcher,
    has_severity,
    has_text,
    select,
)
from messagematch.core.models import Message, Severity
from messagematch.core.predicates import contains_string


@dataclass
class MatchingScenarioContext:
    """Shared state between steps in a matching scenario."""

    messages: list[Message] = field(default_factory=list)
    selected: list[Message] = field(default_factory=list)
    description: str = ""
    failure: AssertionError | None = None


@pytest.fixture
def ctx() -> MatchingScenarioContext:
    """Fresh scenario context for each test."""
    return MatchingScenarioContext()


def _positions(ctx: MatchingScenarioContext, positions: str) -> list[Message]:
    if positions == "none":
        return []
    return [ctx.messages[int(p) - 1] for p in positions.split(",")]


# === Background Steps ===
@given("the messages:")
def step_messages(ctx: MatchingScenarioContext, datatable: list[list[str]]) -> None:
    ctx.messages = [Message(Severity[row[0]], row[1]) for row in datatable[1:]]


# === Selection Steps ===
@when(parsers.parse("I select messages with severity {severity}"))
def step_select_severity(ctx: MatchingScenarioContext, severity: str) -> None:
    ctx.selected = select(has_severity(Severity[severity]), ctx.messages)


@when(parsers.parse('I select messages with text containing "{substring}"'))
def step_select_text(ctx: MatchingScenarioContext, substring: str) -> None:
    ctx.selected = select(has_text(contains_string(substring)), ctx.messages)


@when("I select messages with any severity and any text")
def step_select_any(ctx: MatchingScenarioContext) -> None:
    ctx.selected = select(FieldMatcher(), ctx.messages)


@then(parsers.parse("exactly the messages {positions} are selected"))
def step_selected(ctx: MatchingScenarioContext, positions: str) -> None:
    assert ctx.selected == _positions(ctx, positions)


# === Description Steps ===
@when("I describe a matcher with any severity and any text")
def step_describe_any(ctx: MatchingScenarioContext) -> None:
    ctx.description = FieldMatcher().describe()


@then(parsers.parse('the description is "{expected}"'))
def step_description(ctx: MatchingScenarioContext, expected: str) -> None:
    assert ctx.description == expected


# === Hamcrest Steps ===
@when(
    parsers.parse(
        "I assert with hamcrest that the list has a message with severity {severity}"
    )
)
def step_hamcrest_assert(ctx: MatchingScenarioContext, severity: str) -> None:
    try:
        assert_that(ctx.messages, has_item(message_with_severity(Severity[severity])))
    except AssertionError as e:
        ctx.failure = e


@then(parsers.parse('the assertion fails mentioning "{text}"'))
def step_assertion_failed(ctx: MatchingScenarioContext, text: str) -> None:
    assert ctx.failure is not None
    assert text in str(ctx.failure)
