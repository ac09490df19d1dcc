"""
List Sequence
=============

A sequence whose source is a list, materialised on demand through a list
supplier. Combinators that can keep list semantics cheaply do so:

    skip / limit              live sub-list views of the backing list
    reverse / sorted / shuffle  fresh list copies, transformed in place
    append(list, ...)         a ChainedList over the backing lists

Everything else (``filter``, ``map``...) downgrades to a generic lazy
``Sequence`` reading from this one.
"""

import functools
import logging
import random
from typing import Any, Callable, Iterable, List, Optional, Tuple, TypeVar

from lazyseq import config
from lazyseq.collection.chained_list import ChainedList
from lazyseq.collection.list_cursor import ListCursor, SubListView
from lazyseq.collection.size_type import SizeType, size_type_of
from lazyseq.sequence.sequence import Sequence
from lazyseq.util.preconditions import require_non_negative, require_not_none

T = TypeVar('T')
logger = logging.getLogger(__name__)


class ListSequence(Sequence[T]):
    """
    Sequence backed by a list.

    Usage:
        >>> backing = [1, 2, 3, 4]
        >>> seq = ListSequence(backing).skip(1).limit(2)
        >>> seq.to_list()
        SubListView([2, 3])
        >>> backing[1] = 20
        >>> seq.to_list()
        SubListView([20, 3])
    """

    def __init__(self, items: list):
        require_not_none(items, "items")
        self._supplier: Callable[[], list] = lambda: items

    @classmethod
    def _lazy(cls, supplier: Callable[[], list]) -> 'ListSequence[T]':
        seq = cls.__new__(cls)
        seq._supplier = supplier
        return seq

    def _parts(self) -> Tuple[Iterable, List[tuple]]:
        return self, []

    def _derived_type(self) -> type:
        return Sequence

    # ---- Iteration ----

    def to_list(self) -> list:
        """The backing list itself (or a view/copy for derived list sequences)."""
        return self._supplier()

    def iterator(self) -> ListCursor[T]:
        return ListCursor(self.to_list())

    def list_iterator(self, index: int = 0) -> ListCursor[T]:
        return ListCursor(self.to_list(), index)

    def stream(self):
        return iter(self.to_list())

    # ---- List-preserving combinators ----

    def skip(self, skip: int) -> 'ListSequence[T]':
        require_non_negative(skip, "skip")

        def supplier():
            items = self.to_list()
            start = min(len(items), skip)
            return SubListView(items, start, len(items) - start)
        return ListSequence._lazy(supplier)

    def limit(self, limit: int) -> 'ListSequence[T]':
        require_non_negative(limit, "limit")

        def supplier():
            items = self.to_list()
            return SubListView(items, 0, min(len(items), limit))
        return ListSequence._lazy(supplier)

    def append(self, *iterables: Iterable[T]) -> Sequence[T]:
        """Appending lists keeps the result list-backed through a ChainedList."""
        if iterables and all(isinstance(i, list) for i in iterables):
            return ListSequence._lazy(lambda: ChainedList([self.to_list(), *iterables]))
        return super().append(*iterables)

    def reverse(self) -> 'ListSequence[T]':
        def supplier():
            reversed_items = list(self.to_list())
            reversed_items.reverse()
            return reversed_items
        return ListSequence._lazy(supplier)

    def sorted(self, key: Optional[Callable[[T], Any]] = None, comparator: Optional[Callable[[T, T], int]] = None,
               reverse: bool = False) -> 'ListSequence[T]':
        if key is not None and comparator is not None:
            raise ValueError("give either key or comparator, not both")

        def supplier():
            sorted_items = list(self.to_list())
            sorted_items.sort(key=functools.cmp_to_key(comparator) if comparator is not None else key, reverse=reverse)
            logger.debug(f"Sorted a copy of {len(sorted_items)} elements")
            return sorted_items
        return ListSequence._lazy(supplier)

    def shuffle(self, rng: Optional[random.Random] = None) -> 'ListSequence[T]':
        def supplier():
            shuffled = list(self.to_list())
            (rng if rng is not None else config.default_rng()).shuffle(shuffled)
            logger.debug(f"Shuffled a copy of {len(shuffled)} elements")
            return shuffled
        return ListSequence._lazy(supplier)

    # ---- Terminal Operations ----

    def size_type(self) -> SizeType:
        return size_type_of(self.to_list())

    def size(self) -> int:
        return len(self.to_list())

    def is_empty(self) -> bool:
        return len(self.to_list()) == 0

    def clear(self) -> None:
        self.to_list().clear()

    def collect_into(self, collection):
        if isinstance(collection, list):
            collection.extend(self.to_list())
            return collection
        return super().collect_into(collection)

    def get(self, index: int, default: Optional[T] = None) -> Optional[T]:
        require_non_negative(index, "index")
        items = self.to_list()
        if len(items) < index + 1:
            return default
        return items[index]

    def first(self, default: Optional[T] = None) -> Optional[T]:
        return self.get(0, default)

    def last(self, default: Optional[T] = None) -> Optional[T]:
        items = self.to_list()
        if len(items) < 1:
            return default
        return items[len(items) - 1]

    def __repr__(self) -> str:
        return f"ListSequence({self.to_list()!r})"
