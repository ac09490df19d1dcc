"""
List Cursor & Sub-List View
===========================

``ListCursor`` is a bidirectional list iterator over any Python sequence,
with the usual list-iterator rules: ``set``/``remove`` apply to the element
most recently returned by ``next``/``previous`` and are invalid after
``add`` or ``remove``.

``SubListView`` is a live window ``[start, start + size)`` on a mutable
sequence; mutations through the view are applied to the backing list and
resize the window accordingly.
"""

from collections.abc import MutableSequence
from typing import Any, Iterator, Optional, Sequence as SequenceABC, TypeVar

from lazyseq.collection.size_type import SizeType
from lazyseq.errors import NoSuchElementError, UnsupportedOperationError
from lazyseq.iterator.base import ListIterator

T = TypeVar('T')


class ListCursor(ListIterator[T]):
    """List iterator over an indexable (and optionally mutable) sequence."""

    def __init__(self, items: SequenceABC[T], index: int = 0):
        if not 0 <= index <= len(items):
            raise IndexError(f"index {index} out of range [0, {len(items)}]")
        self._items = items
        self._cursor = index
        self._last: Optional[int] = None

    def has_next(self) -> bool:
        return self._cursor < len(self._items)

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError()
        item = self._items[self._cursor]
        self._last = self._cursor
        self._cursor += 1
        return item

    def has_previous(self) -> bool:
        return self._cursor > 0

    def previous(self) -> T:
        if not self.has_previous():
            raise NoSuchElementError()
        self._cursor -= 1
        self._last = self._cursor
        return self._items[self._cursor]

    def next_index(self) -> int:
        return self._cursor

    def _mutable(self) -> MutableSequence:
        if not isinstance(self._items, MutableSequence):
            raise UnsupportedOperationError(f"{type(self._items).__name__} is read-only")
        return self._items

    def _require_last(self) -> int:
        if self._last is None:
            raise UnsupportedOperationError("no element to modify: call next() or previous() first")
        return self._last

    def remove(self) -> None:
        items = self._mutable()
        last = self._require_last()
        del items[last]
        if last < self._cursor:
            self._cursor -= 1
        self._last = None

    def set(self, item: T) -> None:
        items = self._mutable()
        items[self._require_last()] = item

    def add(self, item: T) -> None:
        self._mutable().insert(self._cursor, item)
        self._cursor += 1
        self._last = None


class SubListView(MutableSequence):
    """Live view of ``backing[start:start + size]``."""

    def __init__(self, backing: SequenceABC, start: int, size: int):
        if start < 0 or size < 0 or start + size > len(backing):
            raise IndexError(f"sub-list [{start}, {start + size}) out of range [0, {len(backing)}]")
        self._backing = backing
        self._start = start
        self._size = size

    def _index(self, index: int, inclusive_end: bool = False) -> int:
        if not isinstance(index, int):
            raise TypeError(f"sub-list indices must be integers, not {type(index).__name__}")
        if index < 0 and not inclusive_end:
            index += self._size
        limit = self._size + 1 if inclusive_end else self._size
        if not 0 <= index < limit:
            raise IndexError(f"index {index} out of range [0, {self._size})")
        return self._start + index

    def _mutable(self) -> MutableSequence:
        if not isinstance(self._backing, MutableSequence):
            raise UnsupportedOperationError(f"{type(self._backing).__name__} is read-only")
        return self._backing

    def __getitem__(self, index: int) -> Any:
        return self._backing[self._index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._mutable()[self._index(index)] = value

    def __delitem__(self, index: int) -> None:
        del self._mutable()[self._index(index)]
        self._size -= 1

    def insert(self, index: int, value: Any) -> None:
        self._mutable().insert(self._index(index, inclusive_end=True), value)
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        for i in range(self._size):
            yield self._backing[self._start + i]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (list, tuple, SubListView)):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    def __repr__(self) -> str:
        return f"SubListView({list(self)!r})"

    def size_type(self) -> SizeType:
        return SizeType.AVAILABLE
