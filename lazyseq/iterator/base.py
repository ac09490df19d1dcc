"""
Pull Iterator Protocol
======================

Every pipeline stage is a *pull iterator*: an object with an idempotent
``has_next()`` and a ``next()`` that fails with ``NoSuchElementError`` when
the stream is exhausted.

Pull iterators are also ordinary Python iterators (``__next__`` raises
``StopIteration``), so they can be consumed by ``for`` loops, ``list()``
and ``itertools`` without adaptation.

    >>> it = as_pull([1, 2])
    >>> it.has_next(), it.next(), it.next(), it.has_next()
    (True, 1, 2, False)
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Iterator, TypeVar

from lazyseq.errors import NoSuchElementError, UnsupportedOperationError

T = TypeVar('T')


class PullIterator(ABC, Generic[T]):
    """Base class of all iterators in the library."""

    @abstractmethod
    def has_next(self) -> bool:
        """True if ``next()`` will return an element. Idempotent."""

    @abstractmethod
    def next(self) -> T:
        """Return the next element or raise ``NoSuchElementError``."""

    def remove(self) -> None:
        raise UnsupportedOperationError(f"{type(self).__name__} does not support remove")

    def skip(self, steps: int = 1) -> int:
        """Advance at most ``steps`` elements; return how many were skipped."""
        count = 0
        while count < steps and self.has_next():
            self.next()
            count += 1
        return count

    def __iter__(self) -> 'PullIterator[T]':
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()


class IteratorAdapter(PullIterator[T]):
    """Pull view of a plain Python iterator, using a one-element lookahead."""

    _EMPTY = object()

    def __init__(self, iterator: Iterator[T]):
        self._iterator = iterator
        self._lookahead: Any = self._EMPTY

    def has_next(self) -> bool:
        if self._lookahead is self._EMPTY:
            self._lookahead = next(self._iterator, self._EMPTY)
        return self._lookahead is not self._EMPTY

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        item, self._lookahead = self._lookahead, self._EMPTY
        return item


def as_pull(iterable: Iterable[T]) -> PullIterator[T]:
    """
    Obtain a fresh pull iterator from any iterable.

    Library iterables expose ``iterator()``; anything else is adapted
    through ``iter()``. A pull iterator passed in is returned as is.
    """
    if isinstance(iterable, PullIterator):
        return iterable
    factory = getattr(iterable, 'iterator', None)
    if callable(factory):
        return factory()
    return IteratorAdapter(iter(iterable))


class ListIterator(PullIterator[T]):
    """
    Bidirectional cursor contract.

    The cursor sits *between* elements: ``next_index()`` is the index of the
    element ``next()`` would return, ``previous_index()`` is one less.
    Mutators are optional.
    """

    @abstractmethod
    def has_previous(self) -> bool:
        ...

    @abstractmethod
    def previous(self) -> T:
        ...

    @abstractmethod
    def next_index(self) -> int:
        ...

    def previous_index(self) -> int:
        return self.next_index() - 1

    def set(self, item: T) -> None:
        raise UnsupportedOperationError(f"{type(self).__name__} does not support set")

    def add(self, item: T) -> None:
        raise UnsupportedOperationError(f"{type(self).__name__} does not support add")


class ForwardOnlyListIterator(ListIterator[T]):
    """List-iterator face over a plain iterator; reverse navigation is unsupported."""

    def __init__(self, iterator: PullIterator[T], index: int = 0):
        self._iterator = iterator
        self._cursor = index

    def has_next(self) -> bool:
        return self._iterator.has_next()

    def next(self) -> T:
        item = self._iterator.next()
        self._cursor += 1
        return item

    def remove(self) -> None:
        self._iterator.remove()
        self._cursor -= 1

    def has_previous(self) -> bool:
        raise UnsupportedOperationError("forward-only iterator cannot move backwards")

    def previous(self) -> T:
        raise UnsupportedOperationError("forward-only iterator cannot move backwards")

    def next_index(self) -> int:
        return self._cursor


def forward_only(iterator: PullIterator[T], index: int = 0) -> ForwardOnlyListIterator[T]:
    """Skip ``index`` elements of ``iterator`` and wrap it as a forward-only list iterator."""
    skipped = iterator.skip(index)
    if skipped != index:
        raise IndexError(f"index: {index} size: {skipped}")
    return ForwardOnlyListIterator(iterator, index)
