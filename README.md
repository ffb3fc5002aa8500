# nonempty

A list that always holds at least one element.

Sometimes a function cannot proceed without at least one item, and sometimes
a caller needs a promise that what comes back is not empty. `NonEmpty`
carries that guarantee itself: it keeps a `head` element and a possibly
empty `tail` list. `first()` and `last()` always return an element, and
operations that would remove the last remaining element (`pop()`,
`remove()`) return `None` instead.

## Installation

```
pip install nonempty
```

## Usage

```python
from nonempty.core import NonEmpty, nonempty

items = nonempty(1, 2, 3)
assert items.head == 1
assert items.tail == [2, 3]

items.push(9001)
assert items.last() == 9001
assert len(items) == 4
assert 2 in items
assert items[1] == 2
assert items.get(10) is None
```

### Converting to and from lists

```python
from nonempty.core import NonEmpty, nonempty

items = nonempty(42, 36, 58, 9001)
assert items.to_list() == [42, 36, 58, 9001]
assert items.to_pair() == (42, [36, 58, 9001])

assert NonEmpty.from_list([42, 36, 58, 9001]) == items
assert NonEmpty.from_list([]) is None

assert NonEmpty.collect(iter([])) is None
assert NonEmpty.from_pair((1, [2, 3])) == nonempty(1, 2, 3)
```

### Structure-preserving operations

```python
from nonempty.core import NonEmpty, nonempty

squares = nonempty(1, 2, 3, 4, 5).map(lambda i: i * i)
assert squares == nonempty(1, 4, 9, 16, 25)

pairs = nonempty(1, 2).flat_map(lambda i: nonempty(i, i * 10))
assert pairs == nonempty(1, 10, 2, 20)

nested = nonempty(nonempty(1, 2, 3), nonempty(4, 5))
assert NonEmpty.flatten(nested) == nonempty(1, 2, 3, 4, 5)

values = nonempty(1, -34, 42, 76, 4, 5)
assert values.maximum() == 76
assert values.minimum() == -34

numbers = nonempty(-5, 4, 1, -3, 2)
numbers.sort()
assert numbers == nonempty(-5, -3, 1, 2, 4)
```

`try_map` behaves like `map`; the first exception raised by the function
propagates to the caller.

### Head, middle and last

```python
from nonempty.core import nonempty

head, middle, last = nonempty(1, 2, 3, 4, 5).split()
assert (head, middle, last) == (1, [2, 3, 4], 5)

head, middle, last = nonempty(1).split()
assert (head, middle, last) == (1, [], None)
```

### Binary search

`binary_search`, `binary_search_by` and `binary_search_by_key` return a
`SearchResult` whose `found` tells whether the value was found and whose
`index` is where it is, or where it could be inserted to keep the order:

```python
from nonempty.core import nonempty

values = nonempty(0, 1, 1, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55)

result = values.binary_search(13)
assert (result.index, result.found) == (9, True)

result = values.binary_search(4)
assert (result.index, result.found) == (7, False)
```

### Iterating from both ends

`iter()` returns an `Iter` that can be consumed from the front with `next()`
and from the back with `next_back()`:

```python
from nonempty.core import nonempty

it = nonempty(0, 1, 2, 3).iter()
assert next(it) == 0
assert it.next_back() == 3
assert len(it) == 2
```

### Non-zero lengths

`nonempty.nonzero.NonEmpty` is a `NonEmpty` whose `len()`, `capacity()` and
`truncate()` work with lengths that are always at least 1:

```python
from nonempty.core import nonempty
from nonempty.nonzero import NonEmpty

items = NonEmpty.from_nonempty(nonempty(0, 1, 2, 3))
assert items.len() == 4
items.truncate(2)
assert items.to_list() == [0, 1]
```

`truncate(0)` raises `ValueError`.

## What this package does not do

It has no serialization support of its own. To write a `NonEmpty` as JSON,
convert it with `to_list()`; to read one back, pass the decoded list to
`NonEmpty.from_list()`, which returns `None` for an empty list.