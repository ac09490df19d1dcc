"""
Source Iterators
================

Iterators that are not derived from another pull iterator: arrays, ranges,
recurrences and repetition, plus the small iterable wrappers that let
sequences use them as restartable (or deliberately single-use) sources.
"""

from typing import Callable, Generic, Iterable, Iterator, Optional, Sequence as SequenceABC, TypeVar

from lazyseq.collection.size_type import SizeType, size_type_of
from lazyseq.errors import NoSuchElementError
from lazyseq.iterator.base import IteratorAdapter, PullIterator, as_pull
from lazyseq.util.preconditions import (
    require_callable,
    require_non_negative,
    require_not_none,
    require_size_within_bounds,
)

T = TypeVar('T')


class ArrayIterator(PullIterator[T]):
    """
    Iterates ``array[offset:offset + size]``.

    Any indexable sequence works, including ``numpy.ndarray``; numpy scalars
    are handed out as Python scalars.
    """

    def __init__(self, array: SequenceABC[T], offset: int = 0, size: Optional[int] = None):
        require_not_none(array, "array")
        length = len(array)
        require_size_within_bounds(length, "len(array)", offset, "offset")
        if size is None:
            size = length - offset
        require_size_within_bounds(length - offset, "len(array) - offset", size, "size")

        self._array = array
        self._offset = offset
        self._size = size
        self._index = 0

    def has_next(self) -> bool:
        return self._index < self._size

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        item = self._array[self._offset + self._index]
        self._index += 1
        return item.item() if hasattr(item, 'item') else item


class RangeIterator(PullIterator[int]):
    """Arithmetic progression from ``start`` to ``end`` inclusive; ``end=None`` never ends."""

    def __init__(self, start: int, end: Optional[int] = None, step: int = 1):
        if step == 0:
            raise ValueError("step must not be zero")
        self._next = start
        self._end = end
        self._step = step

    def has_next(self) -> bool:
        if self._end is None:
            return True
        return self._next <= self._end if self._step > 0 else self._next >= self._end

    def next(self) -> int:
        if not self.has_next():
            raise NoSuchElementError()
        item = self._next
        self._next += self._step
        return item


class RecursiveIterator(PullIterator[T]):
    """Infinite recurrence ``x0 = seed``, ``x(n+1) = f(x(n))``."""

    def __init__(self, seed: T, f: Callable[[T], T]):
        self._f = require_callable(f, "f")
        self._next = seed
        self._started = False

    def has_next(self) -> bool:
        return True

    def next(self) -> T:
        if self._started:
            self._next = self._f(self._next)
        self._started = True
        return self._next


class RepeatingIterator(PullIterator[T]):
    """
    Cycles an iterable by re-requesting an iterator each time the current one
    ends. Terminates only when the iterable hands out an empty iterator, or
    after ``times`` passes when a count is given.
    """

    def __init__(self, iterable: Iterable[T], times: Optional[int] = None):
        self._iterable = require_not_none(iterable, "iterable")
        self._remaining = None if times is None else require_non_negative(times, "times")
        self._iterator: Optional[PullIterator[T]] = None

    def has_next(self) -> bool:
        if self._iterator is None or not self._iterator.has_next():
            if self._remaining is not None:
                if self._remaining == 0:
                    return False
                self._remaining -= 1
            self._iterator = as_pull(self._iterable)
        return self._iterator.has_next()

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        return self._iterator.next()


class Recurrence(Generic[T]):
    """Restartable iterable over ``RecursiveIterator(seed, f)``."""

    def __init__(self, seed: T, f: Callable[[T], T]):
        self.seed = seed
        self.f = require_callable(f, "f")

    def iterator(self) -> RecursiveIterator[T]:
        return RecursiveIterator(self.seed, self.f)

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def size_type(self) -> SizeType:
        return SizeType.INFINITE


class Repeating(Generic[T]):
    """Restartable iterable over ``RepeatingIterator``."""

    def __init__(self, iterable: Iterable[T], times: Optional[int] = None):
        self.iterable = require_not_none(iterable, "iterable")
        self.times = None if times is None else require_non_negative(times, "times")

    def iterator(self) -> RepeatingIterator[T]:
        return RepeatingIterator(self.iterable, self.times)

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def size_type(self) -> SizeType:
        if self.times is None:
            return SizeType.INFINITE
        return size_type_of(self.iterable)


class Range:
    """Restartable iterable over ``RangeIterator``."""

    def __init__(self, start: int, end: Optional[int] = None, step: int = 1):
        if step == 0:
            raise ValueError("step must not be zero")
        self.start = start
        self.end = end
        self.step = step

    def iterator(self) -> RangeIterator:
        return RangeIterator(self.start, self.end, self.step)

    def __iter__(self) -> Iterator[int]:
        return self.iterator()

    def size_type(self) -> SizeType:
        return SizeType.INFINITE if self.end is None else SizeType.FIXED


class ArraySlice(Generic[T]):
    """Restartable iterable over ``ArrayIterator``; bounds are checked eagerly."""

    def __init__(self, array: SequenceABC[T], offset: int = 0, size: Optional[int] = None):
        probe = ArrayIterator(array, offset, size)
        self.array = array
        self.offset = offset
        self.size = probe._size

    def iterator(self) -> ArrayIterator[T]:
        return ArrayIterator(self.array, self.offset, self.size)

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __len__(self) -> int:
        return self.size

    def size_type(self) -> SizeType:
        return SizeType.AVAILABLE


class Once(Generic[T]):
    """
    Single-use source around an iterator.

    Every traversal pulls from the same underlying iterator, so the second
    traversal of a pipeline built on it sees only what the first one left.
    Nothing is buffered to make it restartable.
    """

    def __init__(self, iterator: Iterator[T]):
        require_not_none(iterator, "iterator")
        self._iterator = iterator if isinstance(iterator, PullIterator) else IteratorAdapter(iter(iterator))

    def iterator(self) -> PullIterator[T]:
        return self._iterator

    def __iter__(self) -> Iterator[T]:
        return self._iterator

    def size_type(self) -> SizeType:
        return SizeType.AVAILABLE
