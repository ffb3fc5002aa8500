"""A list that always holds at least one element."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Generic, TypeVar

from nonempty.iterator import Iter

T = TypeVar("T")
U = TypeVar("U")


def _cmp(a: Any, b: Any) -> int:
    """Three-way comparison: negative, zero or positive."""
    return (a > b) - (a < b)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a binary search.

    When ``found`` is true, ``index`` is the position of a matching element.
    Otherwise ``index`` is where the element could be inserted to keep the order.
    """

    index: int
    found: bool


@total_ordering
class NonEmpty(Generic[T]):
    """A growable list with a guaranteed first element ``head`` and a possibly empty ``tail``."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, head: T, tail: Iterable[T] | None = None):
        self.head = head
        self.tail: list[T] = list(tail) if tail is not None else []

    # Construction

    @classmethod
    def singleton(cls, head: T) -> NonEmpty[T]:
        """Create a list holding one element."""
        return cls(head)

    @classmethod
    def new(cls, head: T) -> NonEmpty[T]:
        """Alias for :meth:`singleton`."""
        return cls.singleton(head)

    @classmethod
    def collect(cls, iterable: Iterable[T]) -> NonEmpty[T] | None:
        """Build a list from an iterable, or return None if it yields nothing."""
        it = iter(iterable)
        for head in it:
            return cls(head, it)
        return None

    @classmethod
    def from_list(cls, items: Iterable[T]) -> NonEmpty[T] | None:
        """Build a list from a sequence, or return None if it is empty."""
        return cls.collect(items)

    @classmethod
    def from_pair(cls, pair: tuple[T, Iterable[T]]) -> NonEmpty[T]:
        """Build a list from a ``(head, tail)`` pair."""
        head, tail = pair
        return cls(head, tail)

    @classmethod
    def flatten(cls, nested: NonEmpty[NonEmpty[T]]) -> NonEmpty[T]:
        """Flatten a non-empty list of non-empty lists into one."""
        return nested.flat_map(lambda inner: inner)

    # Inspection

    def is_empty(self) -> bool:
        """Always False."""
        return False

    def first(self) -> T:
        """The first element."""
        return self.head

    def last(self) -> T:
        """The last element."""
        return self.tail[-1] if self.tail else self.head

    def set_last(self, value: T) -> None:
        """Replace the last element."""
        if self.tail:
            self.tail[-1] = value
        else:
            self.head = value

    def __len__(self) -> int:
        return len(self.tail) + 1

    def capacity(self) -> int:
        """Number of elements the list holds without growing."""
        return len(self)

    def __contains__(self, value: object) -> bool:
        return self.head == value or value in self.tail

    def contains(self, value: object) -> bool:
        """Whether ``value`` is an element of the list."""
        return value in self

    def get(self, index: int) -> T | None:
        """The element at ``index``, or None if there is none."""
        if index == 0:
            return self.head
        if 0 < index <= len(self.tail):
            return self.tail[index - 1]
        return None

    def split_first(self) -> tuple[T, list[T]]:
        """The head and the tail."""
        return self.head, list(self.tail)

    def split(self) -> tuple[T, list[T], T | None]:
        """The first element, the middle elements and the last element (None if only one)."""
        if not self.tail:
            return self.head, [], None
        return self.head, self.tail[:-1], self.tail[-1]

    # Mutation

    def push(self, value: T) -> None:
        """Add an element at the end."""
        self.tail.append(value)

    def pop(self) -> T | None:
        """Remove and return the last element; None if only the head is left."""
        return self.tail.pop() if self.tail else None

    def remove(self, index: int) -> T | None:
        """Remove and return the element at ``index``.

        Returns None when the list has a single element. Raises IndexError if
        ``index`` is out of range.
        """
        if len(self) < 2:
            return None
        if not 0 <= index < len(self):
            raise IndexError(f"removal index {index} out of range for length {len(self)}")
        if index == 0:
            removed = self.head
            self.head = self.tail.pop(0)
            return removed
        return self.tail.pop(index - 1)

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` at ``index``, shifting later elements right.

        Raises IndexError if ``index`` is greater than the length.
        """
        if not 0 <= index <= len(self):
            raise IndexError(f"insertion index {index} out of range for length {len(self)}")
        if index == 0:
            self.tail.insert(0, self.head)
            self.head = value
        else:
            self.tail.insert(index - 1, value)

    def truncate(self, length: int) -> None:
        """Shorten the list to ``length`` elements; ``length`` must be at least 1."""
        if length < 1:
            raise ValueError("a non-empty list cannot be truncated below one element")
        del self.tail[length - 1:]

    def append(self, other: list[T]) -> None:
        """Move every element of ``other`` to the end, leaving ``other`` empty."""
        self.tail.extend(other)
        other.clear()

    def extend(self, iterable: Iterable[T]) -> None:
        """Add every element of ``iterable`` at the end."""
        self.tail.extend(iterable)

    def sort(self) -> None:
        """Sort the elements in place in ascending order."""
        items = sorted(self)
        self.head = items[0]
        self.tail = items[1:]

    # Iteration

    def iter(self) -> Iter[T]:
        """A double-ended iterator over the elements."""
        return Iter(self.head, self.tail)

    def __iter__(self) -> Iterator[T]:
        yield self.head
        yield from self.tail

    def __reversed__(self) -> Iterator[T]:
        yield from reversed(self.tail)
        yield self.head

    # Transformation

    def map(self, func: Callable[[T], U]) -> NonEmpty[U]:
        """Apply ``func`` to every element, keeping the structure."""
        return NonEmpty(func(self.head), [func(item) for item in self.tail])

    def try_map(self, func: Callable[[T], U]) -> NonEmpty[U]:
        """Like :meth:`map`; the first exception raised by ``func`` propagates."""
        return self.map(func)

    def flat_map(self, func: Callable[[T], NonEmpty[U]]) -> NonEmpty[U]:
        """Apply ``func`` to every element and concatenate the resulting lists."""
        result = func(self.head)
        out = NonEmpty(result.head, result.tail)
        for item in self.tail:
            out.extend(func(item))
        return out

    # Searching

    def binary_search_by(self, compare: Callable[[T], int]) -> SearchResult:
        """Binary search with ``compare`` returning the probe's order relative to the target."""
        order = compare(self.head)
        if order == 0:
            return SearchResult(index=0, found=True)
        if order > 0:
            return SearchResult(index=0, found=False)
        lo, hi = 0, len(self.tail)
        while lo < hi:
            mid = (lo + hi) // 2
            order = compare(self.tail[mid])
            if order < 0:
                lo = mid + 1
            elif order > 0:
                hi = mid
            else:
                return SearchResult(index=mid + 1, found=True)
        return SearchResult(index=lo + 1, found=False)

    def binary_search(self, value: T) -> SearchResult:
        """Binary search this sorted list for ``value``."""
        return self.binary_search_by(lambda probe: _cmp(probe, value))

    def binary_search_by_key(self, key_value: Any, key: Callable[[T], Any]) -> SearchResult:
        """Binary search a list sorted by ``key`` for ``key_value``."""
        return self.binary_search_by(lambda probe: _cmp(key(probe), key_value))

    # Extremes

    def maximum_by(self, compare: Callable[[T, T], int]) -> T:
        """The greatest element under ``compare``; the earliest one wins ties."""
        best = self.head
        for item in self.tail:
            if compare(best, item) < 0:
                best = item
        return best

    def minimum_by(self, compare: Callable[[T, T], int]) -> T:
        """The least element under ``compare``; the earliest one wins ties."""
        return self.maximum_by(lambda a, b: -compare(a, b))

    def maximum(self) -> T:
        """The greatest element."""
        return self.maximum_by(_cmp)

    def minimum(self) -> T:
        """The least element."""
        return self.minimum_by(_cmp)

    def maximum_by_key(self, key: Callable[[T], Any]) -> T:
        """The element with the greatest key."""
        return self.maximum_by(lambda a, b: _cmp(key(a), key(b)))

    def minimum_by_key(self, key: Callable[[T], Any]) -> T:
        """The element with the least key."""
        return self.minimum_by(lambda a, b: _cmp(key(a), key(b)))

    # Conversion

    def to_list(self) -> list[T]:
        """All elements as a plain list."""
        return [self.head, *self.tail]

    def to_pair(self) -> tuple[T, list[T]]:
        """The ``(head, tail)`` pair."""
        return self.head, list(self.tail)

    # Indexing

    def _position(self, index: int) -> int:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"index out of range for length {size}")
        return index

    def __getitem__(self, index: int) -> T:
        position = self._position(index)
        return self.head if position == 0 else self.tail[position - 1]

    def __setitem__(self, index: int, value: T) -> None:
        position = self._position(index)
        if position == 0:
            self.head = value
        else:
            self.tail[position - 1] = value

    # Comparison and display

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonEmpty):
            return NotImplemented
        return self.head == other.head and self.tail == other.tail

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NonEmpty):
            return NotImplemented
        return (self.head, self.tail) < (other.head, other.tail)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(head={self.head!r}, tail={self.tail!r})"


def nonempty(head: T, *args: T) -> NonEmpty[T]:
    """Build a non-empty list from one or more elements."""
    return NonEmpty(head, args)