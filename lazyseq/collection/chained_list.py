"""
Chained List
============

A read/write list view over an ordered sequence of backing lists
``L0, L1, ...``. The view owns no storage: every mutation lands in exactly
one backing list and is visible there, and changes made to the backing
lists are visible through the view. No rebalancing ever happens.

Index routing: global index ``i`` belongs to the first ``Lk`` with

    sum(|Lj| for j < k) <= i < sum(|Lj| for j <= k)

Usage:
    >>> chained = ChainedList.concat([[1, 2], [3, 4, 5], [6]])
    >>> chained[3], len(chained)
    (4, 6)
    >>> empty = ChainedList.concat([])
    >>> empty.insert(0, 0)
    >>> list(empty)
    [0]
"""

import logging
from collections.abc import MutableSequence
from typing import Any, Iterable, List, Sequence as SequenceABC, TypeVar

from lazyseq.collection.size_type import SizeType, size_type_of
from lazyseq.iterator.chaining import ChainedListIterator, ChainingIterator
from lazyseq.util.preconditions import require_not_none

T = TypeVar('T')
logger = logging.getLogger(__name__)


class ChainedList(MutableSequence):
    """Mutable list view over a list of backing lists."""

    def __init__(self, lists: SequenceABC[SequenceABC[T]]):
        self._lists = require_not_none(lists, "lists")

    @classmethod
    def concat(cls, lists: SequenceABC[SequenceABC[T]]) -> 'ChainedList':
        """View over ``lists`` itself; appending bootstraps into it."""
        return cls(lists)

    @classmethod
    def of(cls, *lists: SequenceABC[T]) -> 'ChainedList':
        return cls(list(lists))

    @property
    def lists(self) -> SequenceABC[SequenceABC[T]]:
        return self._lists

    # ---- Size ----

    def size_type(self) -> SizeType:
        """Lattice join of the backing lists, recomputed on every call."""
        result = SizeType.FIXED if size_type_of(self._lists) is SizeType.FIXED else SizeType.AVAILABLE
        for items in self._lists:
            result = result.concat(size_type_of(items))
        return result

    def _require_finite(self, operation: str) -> None:
        self.size_type().require_finite(operation)

    def __len__(self) -> int:
        self._require_finite("size")
        return sum(len(items) for items in self._lists)

    def is_empty(self) -> bool:
        self._require_finite("is_empty")
        for items in self._lists:
            if len(items) > 0:
                return False
        return True

    def clear(self) -> None:
        self._require_finite("clear")
        for items in self._lists:
            items.clear()

    # ---- Routing ----

    def _check_index(self, index: Any) -> int:
        if not isinstance(index, int):
            raise TypeError(f"ChainedList indices must be integers, not {type(index).__name__}")
        if index < 0:
            index += len(self)
            if index < 0:
                raise IndexError("ChainedList index out of range")
        return index

    def _route(self, index: int):
        """Return ``(backing_list, local_index)`` for an existing element."""
        for items in self._lists:
            if len(items) > index:
                return items, index
            index -= len(items)
        raise IndexError("ChainedList index out of range")

    def __getitem__(self, index: int) -> T:
        items, local = self._route(self._check_index(index))
        return items[local]

    def __setitem__(self, index: int, value: T) -> None:
        items, local = self._route(self._check_index(index))
        items[local] = value

    def __delitem__(self, index: int) -> None:
        items, local = self._route(self._check_index(index))
        del items[local]

    def pop(self, index: int = -1) -> T:
        items, local = self._route(self._check_index(index))
        return items.pop(local)

    def _bootstrap(self, index: int) -> None:
        if index == 0 and len(self._lists) == 0:
            logger.debug("Bootstrapping empty ChainedList with a fresh backing list")
            self._lists.append([])

    def insert(self, index: int, value: T) -> None:
        """Insert into the first backing list with ``index <= len(list)``."""
        if not isinstance(index, int):
            raise TypeError(f"ChainedList indices must be integers, not {type(index).__name__}")
        self._bootstrap(index)
        remaining = index
        if remaining >= 0:
            for items in self._lists:
                if remaining <= len(items):
                    items.insert(remaining, value)
                    return
                remaining -= len(items)
        raise IndexError(f"ChainedList insertion index {index} out of range")

    def insert_all(self, index: int, values: Iterable[T]) -> bool:
        """Insert all ``values`` at ``index`` into a single backing list."""
        if not isinstance(index, int):
            raise TypeError(f"ChainedList indices must be integers, not {type(index).__name__}")
        values = list(values)
        self._bootstrap(index)
        remaining = index
        if remaining >= 0:
            for items in self._lists:
                if remaining <= len(items):
                    for offset, value in enumerate(values):
                        items.insert(remaining + offset, value)
                    return len(values) > 0
                remaining -= len(items)
        raise IndexError(f"ChainedList insertion index {index} out of range")

    # ---- Iteration ----

    def iterator(self) -> ChainingIterator[T]:
        return ChainingIterator(self._lists)

    def __iter__(self) -> ChainingIterator[T]:
        return self.iterator()

    def list_iterator(self, index: int = 0) -> ChainedListIterator[T]:
        return ChainedListIterator(self._lists, index)

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (list, tuple, MutableSequence)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ChainedList({self._lists!r})"

    def to_list(self) -> List[T]:
        return list(self)
