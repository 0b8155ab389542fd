"""Small filters and records shared by the search code."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Hashable, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


@dataclass(frozen=True)
class Range(Generic[T]):
    """An inclusive range filter on an attribute value."""

    lower: T
    upper: T

    def test(self, value: T) -> bool:
        """Return True if ``lower <= value <= upper``."""
        return self.lower <= value <= self.upper


@dataclass
class SetFilter(Generic[H]):
    """A membership filter over a set of attribute values."""

    values: set = field(default_factory=set)

    def set(self, value: H) -> None:
        """Add ``value`` to the accepted values."""
        self.values.add(value)

    def test(self, value: H) -> bool:
        """Return True if ``value`` has been added."""
        return value in self.values


@dataclass(order=True, slots=True)
class DistIdPair:
    """A distance paired with an element id, ordered by distance only."""

    dist: float
    id: int = field(compare=False)