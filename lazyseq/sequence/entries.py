"""
Entry Sequence
==============

A sequence of key/value ``Pair``s whose ``filter`` and ``map`` take
two-argument callables. ``map`` results are coerced back into pairs, so any
entry-like value (a ``Pair``, a 2-tuple, an object with ``key``/``value``)
may be returned from the mapper.

    >>> (EntrySequence.from_map({"a": 1, "b": 2, "c": 3})
    ...     .filter(lambda k, v: v != 2)
    ...     .map(lambda k, v: (k.upper(), v * 10))
    ...     .to_map())
    {'A': 10, 'C': 30}
"""

from typing import Any, Callable, Iterable, Mapping

from lazyseq.sequence.sequence import Sequence
from lazyseq.util.pair import Pair
from lazyseq.util.preconditions import require_callable, require_not_none


class EntrySequence(Sequence):
    """Sequence of ``Pair`` entries."""

    @classmethod
    def from_map(cls, mapping: Mapping) -> 'EntrySequence':
        """Entries of ``mapping`` in its iteration order, read at traversal time."""
        require_not_none(mapping, "mapping")
        return cls._chain(mapping.items(), [('map', (Pair.from_entry,))])

    @classmethod
    def of(cls, *entries: Any) -> 'EntrySequence':
        return cls(tuple(Pair.from_entry(entry) for entry in entries))

    @classmethod
    def from_iterable(cls, iterable: Iterable) -> 'EntrySequence':
        require_not_none(iterable, "iterable")
        return cls._chain(iterable, [('map', (Pair.from_entry,))])

    def filter(self, predicate: Callable[[Any, Any], bool]) -> 'EntrySequence':
        require_callable(predicate, "predicate")
        return self._derive('filter', lambda pair: predicate(pair.left, pair.right))

    def map(self, mapper: Callable[[Any, Any], Any]) -> 'EntrySequence':
        require_callable(mapper, "mapper")
        return self._derive('map', lambda pair: Pair.from_entry(mapper(pair.left, pair.right)))

    def filter_keys(self, predicate: Callable[[Any], bool]) -> 'EntrySequence':
        require_callable(predicate, "predicate")
        return self._derive('filter', lambda pair: predicate(pair.left))

    def filter_values(self, predicate: Callable[[Any], bool]) -> 'EntrySequence':
        require_callable(predicate, "predicate")
        return self._derive('filter', lambda pair: predicate(pair.right))

    def map_keys(self, mapper: Callable[[Any], Any]) -> 'EntrySequence':
        require_callable(mapper, "mapper")
        return self._derive('map', lambda pair: pair.with_left(mapper(pair.left)))

    def map_values(self, mapper: Callable[[Any], Any]) -> 'EntrySequence':
        require_callable(mapper, "mapper")
        return self._derive('map', lambda pair: pair.with_right(mapper(pair.right)))

    def keys(self) -> Sequence:
        return self._convert(Sequence, lambda pair: pair.left)

    def values(self) -> Sequence:
        return self._convert(Sequence, lambda pair: pair.right)
