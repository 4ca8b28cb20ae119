"""Protocols for field predicates.

A predicate is any callable from a field value to a bool. Predicates that
also implement ``describe()`` contribute their own wording to matcher
descriptions.
"""

from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Predicate(Protocol[T_contra]):
    """Port for a single-field test."""

    def __call__(self, value: T_contra) -> bool:
        """Return True if the value is accepted."""
        ...


@runtime_checkable
class Describable(Protocol):
    """Port for objects that describe what they accept.

    Examples: DescribedPredicate, FieldMatcher.
    """

    def describe(self) -> str:
        """Return a human-readable description."""
        ...
