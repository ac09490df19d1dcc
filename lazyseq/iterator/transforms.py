"""
Unary Transform Iterators
=========================

Each transform wraps one upstream pull iterator and realises one combinator
as an explicit state machine. Nothing is pulled from upstream until the
first ``has_next()``/``next()`` call.

Several peeking transforms carry a ``_started`` flag: "not yet primed" and
"primed but upstream was empty" are different states and must not be
conflated.

``remove()`` is delegated upstream only by transforms that hand out
upstream elements one-to-one (filtering, limiting, skipping, terminal
truncation). Transforms that synthesise or buffer elements reject it.
"""

import logging
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

from lazyseq.collection.list_cursor import ListCursor
from lazyseq.errors import NoSuchElementError, UnsupportedOperationError
from lazyseq.iterator.base import PullIterator, as_pull
from lazyseq.util.pair import Pair
from lazyseq.util.preconditions import (
    require_callable,
    require_non_negative,
    require_not_none,
    require_positive,
)

T = TypeVar('T')
U = TypeVar('U')
logger = logging.getLogger(__name__)


class DelegatingIterator(PullIterator[U], Generic[T, U]):
    """Base for transforms over a single upstream iterator."""

    def __init__(self, iterator: PullIterator[T]):
        self._iterator = require_not_none(iterator, "iterator")


class FilteringIterator(DelegatingIterator[T, T]):
    """
    Yields upstream elements accepted by ``predicate``.

    ``has_next`` advances upstream until an element is accepted and caches
    it; ``next`` hands out and clears the cache. ``remove`` is valid right
    after ``next`` and before the following ``has_next``, while upstream
    still points at the returned element.
    """

    def __init__(self, iterator: PullIterator[T], predicate: Callable[[T], bool]):
        super().__init__(iterator)
        self._predicate = require_callable(predicate, "predicate")
        self._next: Any = None
        self._has_next = False

    def has_next(self) -> bool:
        if self._has_next:
            return True
        while self._iterator.has_next():
            item = self._iterator.next()
            if self._predicate(item):
                self._next = item
                self._has_next = True
                return True
        return False

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        self._has_next = False
        item, self._next = self._next, None
        return item

    def remove(self) -> None:
        if self._has_next:
            raise UnsupportedOperationError("cannot remove after has_next() has advanced past the element")
        self._iterator.remove()


class MappingIterator(DelegatingIterator[T, U]):
    def __init__(self, iterator: PullIterator[T], mapper: Callable[[T], U]):
        super().__init__(iterator)
        self._mapper = require_callable(mapper, "mapper")

    def has_next(self) -> bool:
        return self._iterator.has_next()

    def next(self) -> U:
        if not self.has_next():
            raise NoSuchElementError()
        return self._mapper(self._iterator.next())


class ForwardPeekingMappingIterator(DelegatingIterator[T, U]):
    """
    Emits ``mapper(current, next)`` for each element, where ``next`` is the
    following upstream element, or ``last_next`` for the final element.

        [x0, x1, x2] -> [m(x0, x1), m(x1, x2), m(x2, last_next)]
    """

    def __init__(self, iterator: PullIterator[T], last_next: Optional[T], mapper: Callable[[T, Optional[T]], U]):
        super().__init__(iterator)
        self._last_next = last_next
        self._mapper = require_callable(mapper, "mapper")
        self._current: Any = None
        self._has_current = False
        self._started = False

    def has_next(self) -> bool:
        if not self._started:
            if self._iterator.has_next():
                self._current = self._iterator.next()
                self._has_current = True
            self._started = True
        return self._has_current

    def next(self) -> U:
        if not self.has_next():
            raise NoSuchElementError()

        has_following = self._iterator.has_next()
        following = self._iterator.next() if has_following else self._last_next

        result = self._mapper(self._current, following)
        self._current = following
        self._has_current = has_following
        return result


class BackwardPeekingMappingIterator(DelegatingIterator[T, U]):
    """
    Emits ``mapper(previous, current)`` for each element, where ``previous``
    is ``first_previous`` for the first element.
    """

    def __init__(self, iterator: PullIterator[T], first_previous: Optional[T],
                 mapper: Callable[[Optional[T], T], U]):
        super().__init__(iterator)
        self._previous = first_previous
        self._mapper = require_callable(mapper, "mapper")

    def has_next(self) -> bool:
        return self._iterator.has_next()

    def next(self) -> U:
        if not self.has_next():
            raise NoSuchElementError()
        current = self._iterator.next()
        result = self._mapper(self._previous, current)
        self._previous = current
        return result


class ForwardPeekingFilteringIterator(DelegatingIterator[T, T]):
    """
    Yields ``next`` when ``predicate(next, following)`` accepts it, where
    ``following`` is the element after it or ``last_next`` at the end.
    """

    def __init__(self, iterator: PullIterator[T], last_next: Optional[T],
                 predicate: Callable[[T, Optional[T]], bool]):
        super().__init__(iterator)
        self._last_next = last_next
        self._predicate = require_callable(predicate, "predicate")
        self._next: Any = None
        self._has_next = False
        self._following: Any = None
        self._has_following = False
        self._started = False

    def has_next(self) -> bool:
        if self._has_next:
            return True
        if not self._started:
            if self._iterator.has_next():
                self._following = self._iterator.next()
                self._has_following = True
            self._started = True

        while self._has_following:
            self._next = self._following
            self._has_following = self._iterator.has_next()
            self._following = self._iterator.next() if self._has_following else self._last_next
            if self._predicate(self._next, self._following):
                self._has_next = True
                return True
        return False

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        self._has_next = False
        return self._next


class BackwardPeekingFilteringIterator(DelegatingIterator[T, T]):
    """Yields ``current`` when ``predicate(previous, current)`` accepts it."""

    def __init__(self, iterator: PullIterator[T], first_previous: Optional[T],
                 predicate: Callable[[Optional[T], T], bool]):
        super().__init__(iterator)
        self._previous = first_previous
        self._predicate = require_callable(predicate, "predicate")
        self._next: Any = None
        self._has_next = False

    def has_next(self) -> bool:
        if self._has_next:
            return True
        while self._iterator.has_next():
            current = self._iterator.next()
            accepted = self._predicate(self._previous, current)
            self._previous = current
            if accepted:
                self._next = current
                self._has_next = True
                return True
        return False

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        self._has_next = False
        return self._next


class InclusiveTerminalIterator(DelegatingIterator[T, T]):
    """
    Passes elements through and stops *after* the first one accepted by
    ``terminal``. Nothing beyond the terminal element is requested upstream.
    """

    def __init__(self, iterator: PullIterator[T], terminal: Callable[[T], bool]):
        super().__init__(iterator)
        self._terminal = require_callable(terminal, "terminal")
        self._done = False

    @classmethod
    def of_value(cls, iterator: PullIterator[T], terminal: T) -> 'InclusiveTerminalIterator[T]':
        """Stop after the first element equal to ``terminal``."""
        return cls(iterator, lambda item: item == terminal)

    def has_next(self) -> bool:
        return not self._done and self._iterator.has_next()

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        item = self._iterator.next()
        self._done = bool(self._terminal(item))
        return item

    def remove(self) -> None:
        self._iterator.remove()


class ExclusiveTerminalIterator(DelegatingIterator[T, T]):
    """Passes elements through up to, but not including, the first one accepted by ``terminal``."""

    def __init__(self, iterator: PullIterator[T], terminal: Callable[[T], bool]):
        super().__init__(iterator)
        self._terminal = require_callable(terminal, "terminal")
        self._next: Any = None
        self._has_next = False
        self._done = False

    @classmethod
    def of_value(cls, iterator: PullIterator[T], terminal: T) -> 'ExclusiveTerminalIterator[T]':
        return cls(iterator, lambda item: item == terminal)

    def has_next(self) -> bool:
        if self._has_next:
            return True
        if self._done or not self._iterator.has_next():
            return False
        item = self._iterator.next()
        if self._terminal(item):
            self._done = True
            return False
        self._next = item
        self._has_next = True
        return True

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        self._has_next = False
        return self._next

    def remove(self) -> None:
        if self._has_next or self._done:
            raise UnsupportedOperationError("cannot remove after has_next() has advanced past the element")
        self._iterator.remove()


class LimitingIterator(DelegatingIterator[T, T]):
    def __init__(self, iterator: PullIterator[T], limit: int):
        super().__init__(iterator)
        self._limit = require_non_negative(limit, "limit")
        self._count = 0

    def has_next(self) -> bool:
        return self._count < self._limit and self._iterator.has_next()

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        self._count += 1
        return self._iterator.next()

    def remove(self) -> None:
        self._iterator.remove()


class SkippingIterator(DelegatingIterator[T, T]):
    def __init__(self, iterator: PullIterator[T], skip: int):
        super().__init__(iterator)
        self._skip = require_non_negative(skip, "skip")
        self._skipped = False

    def has_next(self) -> bool:
        if not self._skipped:
            self._iterator.skip(self._skip)
            self._skipped = True
        return self._iterator.has_next()

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        return self._iterator.next()

    def remove(self) -> None:
        self._iterator.remove()


class SteppingIterator(DelegatingIterator[T, T]):
    """Yields every ``step``-th element, starting with the first."""

    def __init__(self, iterator: PullIterator[T], step: int):
        super().__init__(iterator)
        self._step = require_positive(step, "step")

    def has_next(self) -> bool:
        return self._iterator.has_next()

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        item = self._iterator.next()
        self._iterator.skip(self._step - 1)
        return item


class TailLimitingIterator(DelegatingIterator[T, T]):
    """
    Yields the last ``limit`` elements of a finite upstream, in order.

    On first use upstream is drained into a ring buffer of length ``limit``;
    ``offset`` marks the oldest surviving element once the buffer wraps.
    """

    def __init__(self, iterator: PullIterator[T], limit: int):
        super().__init__(iterator)
        self._limit = require_non_negative(limit, "limit")
        self._started = False
        self._buffer: List[Any] = []
        self._offset = 0
        self._index = 0
        self._size = 0

    def has_next(self) -> bool:
        if not self._started:
            self._started = True
            if self._limit > 0:
                self._buffer = [None] * self._limit
                i = 0
                seen = 0
                while self._iterator.has_next():
                    self._buffer[i] = self._iterator.next()
                    i = (i + 1) % self._limit
                    seen += 1
                self._size = min(seen, self._limit)
                self._offset = i % self._size if self._size else 0
                logger.debug(f"Tail limit drained {seen} elements, kept {self._size}")
        return self._index < self._size

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        item = self._buffer[(self._offset + self._index) % self._limit]
        self._index += 1
        return item


class ReverseIterator(DelegatingIterator[T, T]):
    """Drains upstream into a list on first ``next`` and serves it backwards."""

    def __init__(self, iterator: PullIterator[T]):
        super().__init__(iterator)
        self._cursor = None

    def has_next(self) -> bool:
        if self._cursor is None:
            return self._iterator.has_next()
        return self._cursor.has_previous()

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        if self._cursor is None:
            buffer = list(self._iterator)
            logger.debug(f"Reverse buffered {len(buffer)} elements")
            self._cursor = ListCursor(buffer, len(buffer))
        return self._cursor.previous()


class PairingIterator(DelegatingIterator[T, Any]):
    """Yields ``Pair(x(i), x(i+1))`` for consecutive upstream elements."""

    def __init__(self, iterator: PullIterator[T]):
        super().__init__(iterator)
        self._previous: Any = None
        self._started = False

    def has_next(self) -> bool:
        if not self._started:
            if not self._iterator.has_next():
                return False
            self._previous = self._iterator.next()
            self._started = True
        return self._iterator.has_next()

    def next(self):
        if not self.has_next():
            raise NoSuchElementError()
        current = self._iterator.next()
        pair = Pair.of(self._previous, current)
        self._previous = current
        return pair


class InterleavingIterator(PullIterator[Any]):
    """
    Yields ``Pair(a(i), b(i))`` until both sides are exhausted; the shorter
    side is padded with ``None``.
    """

    def __init__(self, first: PullIterator[T], second: PullIterator[U]):
        self._first = require_not_none(first, "first")
        self._second = require_not_none(second, "second")

    def has_next(self) -> bool:
        return self._first.has_next() or self._second.has_next()

    def next(self):
        if not self.has_next():
            raise NoSuchElementError()
        left = self._first.next() if self._first.has_next() else None
        right = self._second.next() if self._second.has_next() else None
        return Pair.of(left, right)


class FlatteningIterator(DelegatingIterator[T, U]):
    """Yields the elements of ``mapper(x)`` for every upstream ``x``."""

    def __init__(self, iterator: PullIterator[T], mapper: Optional[Callable[[T], Iterable[U]]] = None):
        super().__init__(iterator)
        self._mapper = mapper if mapper is not None else (lambda item: item)
        self._inner: Optional[PullIterator[U]] = None

    def has_next(self) -> bool:
        while self._inner is None or not self._inner.has_next():
            if not self._iterator.has_next():
                return False
            self._inner = as_pull(self._mapper(self._iterator.next()))
        return True

    def next(self) -> U:
        if not self.has_next():
            raise NoSuchElementError()
        return self._inner.next()


class BufferingIterator(DelegatingIterator[T, T]):
    """
    Drains upstream into a list on first use, rewrites the buffer with
    ``transform`` (sort, shuffle, ...) and serves the result in order.
    """

    def __init__(self, iterator: PullIterator[T], transform: Callable[[List[T]], None], name: str = "buffer"):
        super().__init__(iterator)
        self._transform = require_callable(transform, "transform")
        self._name = name
        self._cursor: Optional[ListCursor] = None

    def has_next(self) -> bool:
        if self._cursor is None:
            buffer = list(self._iterator)
            self._transform(buffer)
            logger.debug(f"{self._name.capitalize()} buffered {len(buffer)} elements")
            self._cursor = ListCursor(buffer)
        return self._cursor.has_next()

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        return self._cursor.next()
