"""A non-empty list whose length operations are guaranteed to be positive."""

from __future__ import annotations

from typing import TypeVar

from nonempty.core import NonEmpty as _BaseNonEmpty

T = TypeVar("T")


class NonEmpty(_BaseNonEmpty[T]):
    """A non-empty list whose length, capacity and truncation work with positive integers."""

    @classmethod
    def from_nonempty(cls, other: _BaseNonEmpty[T]) -> NonEmpty[T]:
        """Wrap the elements of an existing non-empty list."""
        return cls(other.head, other.tail)

    def len(self) -> int:
        """The number of elements, always at least 1."""
        return len(self.tail) + 1

    def capacity(self) -> int:
        """Number of elements the list holds without growing, always at least 1."""
        return self.len()

    def truncate(self, length: int) -> None:
        """Shorten the list to ``length`` elements; ``length`` must be positive."""
        if length < 1:
            raise ValueError(f"length must be a positive integer, got {length}")
        del self.tail[length - 1:]