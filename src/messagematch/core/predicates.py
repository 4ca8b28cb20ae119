"""Described predicates for testing a single message field."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from messagematch.core.ports import Describable


@dataclass(frozen=True)
class DescribedPredicate:
    """A predicate paired with a human-readable description.

    Attributes:
        test: Callable returning True for accepted values.
        description: What the predicate accepts, e.g. "a string containing 'x'".
    """

    test: Callable[[Any], bool]
    description: str

    def __post_init__(self) -> None:
        if not callable(self.test):
            raise TypeError("test must be callable")

    def __call__(self, value: Any) -> bool:
        return bool(self.test(value))

    def describe(self) -> str:
        return self.description


def described(test: Callable[[Any], bool], description: str) -> DescribedPredicate:
    """Attach a description to an arbitrary predicate."""
    return DescribedPredicate(test=test, description=description)


def _value_description(value: Any) -> str:
    if isinstance(value, str):
        return repr(value)
    return f"<{value}>"


def equal_to(expected: Any) -> DescribedPredicate:
    """Accept values equal to ``expected``."""
    return described(lambda value: value == expected, _value_description(expected))


def contains_string(substring: str) -> DescribedPredicate:
    """Accept strings containing ``substring``."""
    return described(
        lambda value: substring in value, f"a string containing {substring!r}"
    )


def starts_with(prefix: str) -> DescribedPredicate:
    """Accept strings starting with ``prefix``."""
    return described(
        lambda value: value.startswith(prefix), f"a string starting with {prefix!r}"
    )


def ends_with(suffix: str) -> DescribedPredicate:
    """Accept strings ending with ``suffix``."""
    return described(
        lambda value: value.endswith(suffix), f"a string ending with {suffix!r}"
    )


def has_length(length: int) -> DescribedPredicate:
    """Accept sized values of exactly ``length``."""
    return described(
        lambda value: len(value) == length, f"a value with length of <{length}>"
    )


def describe_predicate(predicate: Callable[[Any], bool]) -> str:
    """Describe any predicate for diagnostics.

    Uses ``describe()`` when available, then the callable's name, then repr.
    """
    if isinstance(predicate, Describable):
        return predicate.describe()
    name = getattr(predicate, "__name__", None)
    if name and name != "<lambda>":
        return name
    return repr(predicate)
