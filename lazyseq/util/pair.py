"""
Pair
====

An immutable 2-tuple that is also a map entry (``key`` is ``left``,
``value`` is ``right``). Every operation returns a fresh pair.

    >>> p = Pair.of(1, 'a')
    >>> p.swap()
    ("a", 1)
    >>> p.shift_left(2)
    ("a", 2)
    >>> list(p)
    [1, 'a']
"""

import functools
from typing import Any, Callable, Generic, MutableMapping, TypeVar

from lazyseq.errors import NoSuchElementError, UnsupportedOperationError
from lazyseq.iterator.base import PullIterator

L = TypeVar('L')
R = TypeVar('R')
T = TypeVar('T')


def _entry_parts(obj: Any):
    """Return ``(key, value)`` of a pair or key/value entry, or None if it is not one."""
    if isinstance(obj, Pair):
        return obj.left, obj.right
    if hasattr(obj, 'key') and hasattr(obj, 'value'):
        return obj.key, obj.value
    return None


def _hash(obj: Any) -> int:
    return 0 if obj is None else hash(obj)


def _format(obj: Any) -> str:
    if isinstance(obj, str):
        return f'"{obj}"'
    return str(obj)


def _compare(a: Any, b: Any) -> int:
    if a == b:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return -1 if a < b else 1


@functools.total_ordering
class Pair(Generic[L, R]):
    """Immutable ``(left, right)`` pair with the map-entry contract."""

    __slots__ = ('_left', '_right')

    def __init__(self, left: L, right: R):
        object.__setattr__(self, '_left', left)
        object.__setattr__(self, '_right', right)

    def __setattr__(self, name, value):
        raise UnsupportedOperationError("Pair is immutable")

    # ---- Construction ----

    @staticmethod
    def of(left: L, right: R) -> 'Pair[L, R]':
        return Pair(left, right)

    @staticmethod
    def from_entry(entry: Any) -> 'Pair':
        """Build a pair from another pair, a ``(key, value)`` tuple or an object with ``key``/``value``."""
        parts = tuple(entry) if isinstance(entry, tuple) and len(entry) == 2 else _entry_parts(entry)
        if parts is None:
            raise TypeError(f"not an entry: {entry!r}")
        return Pair(*parts)

    @staticmethod
    def unary(item: T) -> 'Pair[T, T]':
        return Pair(item, item)

    # ---- Accessors ----

    @property
    def left(self) -> L:
        return self._left

    @property
    def right(self) -> R:
        return self._right

    @property
    def key(self) -> L:
        return self._left

    @property
    def value(self) -> R:
        return self._right

    def set_value(self, value: R) -> R:
        raise UnsupportedOperationError("Pair is immutable")

    # ---- Derivation ----

    def swap(self) -> 'Pair[R, L]':
        return Pair(self._right, self._left)

    def with_left(self, left: T) -> 'Pair[T, R]':
        return Pair(left, self._right)

    def with_right(self, right: T) -> 'Pair[L, T]':
        return Pair(self._left, right)

    def shift_left(self, replacement: T) -> 'Pair[R, T]':
        """``(left, right) -> (right, replacement)``"""
        return Pair(self._right, replacement)

    def shift_right(self, replacement: T) -> 'Pair[T, L]':
        """``(left, right) -> (replacement, left)``"""
        return Pair(replacement, self._left)

    def map(self, left_mapper: Callable[[L], Any], right_mapper: Callable[[R], Any]) -> 'Pair':
        return Pair(left_mapper(self._left), right_mapper(self._right))

    def map_pair(self, mapper: Callable[[L, R], 'Pair']) -> 'Pair':
        return mapper(self._left, self._right)

    def apply(self, function: Callable[[L, R], T]) -> T:
        return function(self._left, self._right)

    def test(self, left_predicate: Callable[[L], bool], right_predicate: Callable[[R], bool]) -> bool:
        return bool(left_predicate(self._left)) and bool(right_predicate(self._right))

    def test_pair(self, predicate: Callable[[L, R], bool]) -> bool:
        return bool(predicate(self._left, self._right))

    def put_into(self, mapping: MutableMapping) -> MutableMapping:
        mapping[self._left] = self._right
        return mapping

    # ---- Iteration ----

    def iterator(self) -> 'PairIterator':
        return PairIterator(self)

    def __iter__(self):
        return self.iterator()

    def __len__(self) -> int:
        return 2

    # ---- Equality, hashing, ordering ----

    # Plain tuples compare unequal: their hash differs from the entry hash.
    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        parts = _entry_parts(other)
        if parts is None:
            return NotImplemented
        return self._left == parts[0] and self._right == parts[1]

    def __hash__(self) -> int:
        return 31 * _hash(self._left) + _hash(self._right)

    def __lt__(self, other: Any) -> bool:
        parts = _entry_parts(other)
        if parts is None:
            return NotImplemented
        result = _compare(self._left, parts[0])
        if result == 0:
            result = _compare(self._right, parts[1])
        return result < 0

    def __repr__(self) -> str:
        return f"({_format(self._left)}, {_format(self._right)})"

    def __reduce__(self):
        return Pair, (self._left, self._right)


class PairIterator(PullIterator[Any]):
    """Yields the left then the right element of a pair."""

    def __init__(self, pair: Pair):
        self._pair = pair
        self._index = 0

    def has_next(self) -> bool:
        return self._index < 2

    def next(self) -> Any:
        if not self.has_next():
            raise NoSuchElementError()
        self._index += 1
        return self._pair.left if self._index == 1 else self._pair.right
