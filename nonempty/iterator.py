"""A double-ended iterator over the elements of a non-empty list."""

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Iter(Generic[T]):
    """Iterates over a head element followed by a tail, from either end.

    Once exhausted from both ends it stays exhausted.
    """

    def __init__(self, head: T, tail: Iterable[T]):
        self._remaining: deque[T] = deque([head])
        self._remaining.extend(tail)

    def __iter__(self) -> "Iter[T]":
        return self

    def __next__(self) -> T:
        """Take the next element from the front."""
        if not self._remaining:
            raise StopIteration
        return self._remaining.popleft()

    def next_back(self) -> T:
        """Take the next element from the back; raise StopIteration when none is left."""
        if not self._remaining:
            raise StopIteration
        return self._remaining.pop()

    def __reversed__(self) -> Iterator[T]:
        while self._remaining:
            yield self._remaining.pop()

    def __len__(self) -> int:
        return len(self._remaining)