"""
Chaining Iterators
==================

Concatenation of a dynamic sequence of sub-iterables. Sub-iterables are
opened lazily, one at a time, so appending to the outer collection while a
chain is in flight is visible to it.
"""

from typing import Iterable, List, Optional, Sequence as SequenceABC, TypeVar

from lazyseq.collection.list_cursor import ListCursor
from lazyseq.collection.size_type import SizeType, size_type_of
from lazyseq.errors import NoSuchElementError, UnsupportedOperationError
from lazyseq.iterator.base import ListIterator, PullIterator, as_pull
from lazyseq.util.preconditions import require_not_none

T = TypeVar('T')


class ChainingIterator(PullIterator[T]):
    """
    Pulls from each sub-iterable in turn.

    ``has_next`` advances the outer cursor past empty sub-iterables and
    returns False only once both the outer cursor and the current inner
    iterator are exhausted.
    """

    def __init__(self, iterables: Iterable[Iterable[T]]):
        self._iterables = as_pull(require_not_none(iterables, "iterables"))
        self._iterator: Optional[PullIterator[T]] = None

    def has_next(self) -> bool:
        while (self._iterator is None or not self._iterator.has_next()) and self._iterables.has_next():
            self._iterator = as_pull(self._iterables.next())
        return self._iterator is not None and self._iterator.has_next()

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        return self._iterator.next()

    def remove(self) -> None:
        if self._iterator is None:
            raise UnsupportedOperationError("no element to remove")
        self._iterator.remove()


class ChainingIterable(Iterable[T]):
    """Restartable concatenation of iterables."""

    def __init__(self, *iterables: Iterable[T]):
        self._iterables: List[Iterable[T]] = [require_not_none(i, "iterable") for i in iterables]

    def append(self, iterable: Iterable[T]) -> 'ChainingIterable[T]':
        self._iterables.append(require_not_none(iterable, "iterable"))
        return self

    def iterator(self) -> ChainingIterator[T]:
        return ChainingIterator(self._iterables)

    def __iter__(self) -> ChainingIterator[T]:
        return self.iterator()

    def size_type(self) -> SizeType:
        return SizeType.join(size_type_of(i) for i in self._iterables)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChainingIterable):
            return NotImplemented
        return self._iterables == other._iterables

    def __repr__(self) -> str:
        return f"ChainingIterable({self._iterables!r})"


class ChainedListIterator(ListIterator[T]):
    """
    Bidirectional list iterator over a list of lists.

    The constructor routes ``index`` into the backing list that contains it.
    ``set``/``remove`` apply to the backing list that produced the last
    element; ``add`` inserts at the cursor, bootstrapping an empty backing
    list when there is none.
    """

    def __init__(self, lists: SequenceABC[SequenceABC[T]], index: int = 0):
        self._lists = lists
        self._index = index
        self._last: Optional[ListCursor[T]] = None

        remaining = index
        for k, items in enumerate(lists):
            if remaining <= len(items):
                self._k = k
                self._cursor = ListCursor(items, remaining)
                return
            remaining -= len(items)

        if index == 0:
            self._k = -1
            self._cursor = None
            return
        raise IndexError(f"index {index} out of range")

    def _advance(self) -> bool:
        while self._cursor is None or not self._cursor.has_next():
            if self._k + 1 >= len(self._lists):
                return False
            self._k += 1
            self._cursor = ListCursor(self._lists[self._k], 0)
        return True

    def _retreat(self) -> bool:
        while self._cursor is None or not self._cursor.has_previous():
            if self._k <= 0:
                return False
            self._k -= 1
            items = self._lists[self._k]
            self._cursor = ListCursor(items, len(items))
        return True

    def has_next(self) -> bool:
        k, cursor = self._k, self._cursor
        found = self._advance()
        if not found:
            self._k, self._cursor = k, cursor
        return found

    def next(self) -> T:
        if not self._advance():
            raise NoSuchElementError()
        item = self._cursor.next()
        self._last = self._cursor
        self._index += 1
        return item

    def has_previous(self) -> bool:
        k, cursor = self._k, self._cursor
        found = self._retreat()
        if not found:
            self._k, self._cursor = k, cursor
        return found

    def previous(self) -> T:
        if not self._retreat():
            raise NoSuchElementError()
        item = self._cursor.previous()
        self._last = self._cursor
        self._index -= 1
        return item

    def next_index(self) -> int:
        return self._index

    def remove(self) -> None:
        if self._last is None:
            raise UnsupportedOperationError("no element to remove: call next() or previous() first")
        removed_before_cursor = self._last.next_index()
        self._last.remove()
        if self._last.next_index() < removed_before_cursor:
            self._index -= 1
        self._last = None

    def set(self, item: T) -> None:
        if self._last is None:
            raise UnsupportedOperationError("no element to set: call next() or previous() first")
        self._last.set(item)

    def add(self, item: T) -> None:
        if self._cursor is None:
            self._lists.append([])
            self._k = 0
            self._cursor = ListCursor(self._lists[0], 0)
        self._cursor.add(item)
        self._index += 1
        self._last = None
