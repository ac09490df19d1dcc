"""
Sequence
========

A lazy, composable pipeline over finite or infinite ordered data.

A sequence is a *recipe*, not a container: it holds a source iterable and
the list of operations recorded on it. Combinators return new sequences and
never traverse anything; terminal operations (``to_list``, ``reduce``,
``first``...) build a fresh chain of pull iterators and run it. Traversals
are independent of each other and re-run the recipe from the source, so a
sequence is restartable whenever its source is.

    >>> (Sequence.of(1, 2, 3, 4, 5, 6, 7, 8, 9)
    ...     .filter(lambda x: x % 2 == 0)
    ...     .map(str)
    ...     .to_list())
    ['2', '4', '6', '8']

Sources built from a one-shot iterator (``Sequence.once``) are single-use:
a second traversal only sees what the first one left behind.
"""

import functools
from collections.abc import MutableMapping
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from lazyseq import config
from lazyseq.collection.size_type import SizeType, size_type_of
from lazyseq.iterator.base import ListIterator, PullIterator, as_pull, forward_only
from lazyseq.iterator.chaining import ChainingIterator
from lazyseq.iterator.sources import ArraySlice, Once, Range, Recurrence, Repeating
from lazyseq.iterator.transforms import (
    BackwardPeekingFilteringIterator,
    BackwardPeekingMappingIterator,
    BufferingIterator,
    ExclusiveTerminalIterator,
    FilteringIterator,
    FlatteningIterator,
    ForwardPeekingFilteringIterator,
    ForwardPeekingMappingIterator,
    InclusiveTerminalIterator,
    InterleavingIterator,
    LimitingIterator,
    MappingIterator,
    PairingIterator,
    ReverseIterator,
    SkippingIterator,
    SteppingIterator,
    TailLimitingIterator,
)
from lazyseq.util.pair import Pair
from lazyseq.util.preconditions import (
    require_callable,
    require_non_negative,
    require_not_none,
    require_positive,
)

T = TypeVar('T')
U = TypeVar('U')

_MISSING = object()


def _sort_in_place(key, comparator, reverse):
    if comparator is not None:
        key = functools.cmp_to_key(comparator)

    def transform(buffer):
        buffer.sort(key=key, reverse=reverse)
    return transform


def _shuffle_in_place(rng):
    def transform(buffer):
        (rng if rng is not None else config.default_rng()).shuffle(buffer)
    return transform


# Operation name -> iterator factory taking the upstream iterator first.
_OPERATORS: Dict[str, Callable[..., PullIterator]] = {
    'map': MappingIterator,
    'filter': FilteringIterator,
    'flatten': FlatteningIterator,
    'append': lambda it, *iterables: ChainingIterator([it, *iterables]),
    'reverse': ReverseIterator,
    'sorted': lambda it, key, comparator, reverse: BufferingIterator(
        it, _sort_in_place(key, comparator, reverse), "sort"),
    'shuffle': lambda it, rng: BufferingIterator(it, _shuffle_in_place(rng), "shuffle"),
    'skip': SkippingIterator,
    'limit': LimitingIterator,
    'limit_tail': TailLimitingIterator,
    'step': SteppingIterator,
    'until': ExclusiveTerminalIterator,
    'ending_at': InclusiveTerminalIterator,
    'pair': PairingIterator,
    'interleave': lambda it, other: InterleavingIterator(it, as_pull(other)),
    'map_back': lambda it, mapper, first: BackwardPeekingMappingIterator(it, first, mapper),
    'map_forward': lambda it, mapper, last: ForwardPeekingMappingIterator(it, last, mapper),
    'filter_back': lambda it, predicate, first: BackwardPeekingFilteringIterator(it, first, predicate),
    'filter_forward': lambda it, predicate, last: ForwardPeekingFilteringIterator(it, last, predicate),
}


def _same(size_type: SizeType, *args) -> SizeType:
    return size_type


def _shrinking(size_type: SizeType, *args) -> SizeType:
    return size_type if size_type is SizeType.INFINITE else SizeType.AVAILABLE


def _bounded(size_type: SizeType, *args) -> SizeType:
    return SizeType.AVAILABLE if size_type is SizeType.INFINITE else size_type


def _terminated(size_type: SizeType, *args) -> SizeType:
    return SizeType.AVAILABLE


def _concatenated(size_type: SizeType, *iterables) -> SizeType:
    return SizeType.join([size_type, *(size_type_of(i) for i in iterables)])


# Operation name -> size-type propagation rule.
_SIZE_RULES: Dict[str, Callable[..., SizeType]] = {
    'map': _same,
    'filter': _shrinking,
    'flatten': _shrinking,
    'append': _concatenated,
    'reverse': _same,
    'sorted': _same,
    'shuffle': _same,
    'skip': _same,
    'limit': _bounded,
    'limit_tail': _same,
    'step': _shrinking,
    'until': _terminated,
    'ending_at': _terminated,
    'pair': _same,
    'interleave': _concatenated,
    'map_back': _same,
    'map_forward': _same,
    'filter_back': _shrinking,
    'filter_forward': _shrinking,
}


class Sequence(Generic[T]):
    """
    Lazy pipeline over a source iterable.

    Usage:
        >>> fibonacci = (Sequence.recurse(Pair.of(0, 1), lambda p: p.shift_left(p.apply(int.__add__)))
        ...     .map(lambda p: p.left)
        ...     .until(55))
        >>> fibonacci.to_list()
        [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]
    """

    # Typed iterator faces wrapped around every traversal, if any.
    _iterator_type: Optional[type] = None
    _list_iterator_type: Optional[type] = None

    def __init__(self, source: Iterable[T]):
        self._source = require_not_none(source, "source")
        self._operations: List[tuple] = []

    # ---- Construction ----

    @classmethod
    def _chain(cls, source: Iterable, operations: List[tuple]) -> 'Sequence':
        seq = cls.__new__(cls)
        seq._source = source
        seq._operations = operations
        return seq

    @classmethod
    def empty(cls) -> 'Sequence[T]':
        if cls is Sequence:
            from lazyseq.sequence.list_sequence import ListSequence
            return ListSequence([])
        return cls(())

    @classmethod
    def of(cls, *items: T) -> 'Sequence[T]':
        if cls is Sequence:
            from lazyseq.sequence.list_sequence import ListSequence
            return ListSequence(list(items))
        return cls(items)

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> 'Sequence[T]':
        """
        Wrap an iterable. Lists become list-backed sequences; other iterables
        are wrapped as-is and are restartable if the iterable is.
        """
        require_not_none(iterable, "iterable")
        if cls is Sequence:
            if isinstance(iterable, Sequence):
                return iterable
            if isinstance(iterable, list):
                from lazyseq.sequence.list_sequence import ListSequence
                return ListSequence(iterable)
        return cls(iterable)

    @classmethod
    def from_list(cls, items: list) -> 'Sequence[T]':
        from lazyseq.sequence.list_sequence import ListSequence
        return ListSequence(require_not_none(items, "items"))

    @classmethod
    def once(cls, iterator: Iterator[T]) -> 'Sequence[T]':
        """Single-use sequence over an iterator."""
        return cls(Once(iterator))

    @classmethod
    def from_array(cls, array, offset: int = 0, size: Optional[int] = None) -> 'Sequence[T]':
        return cls(ArraySlice(array, offset, size))

    @classmethod
    def recurse(cls, seed: T, f: Callable[[T], T]) -> 'Sequence[T]':
        """Infinite sequence ``seed, f(seed), f(f(seed)), ...``"""
        return cls(Recurrence(seed, f))

    @classmethod
    def repeat(cls, iterable: Iterable[T], times: Optional[int] = None) -> 'Sequence[T]':
        return cls(Repeating(iterable, times))

    @staticmethod
    def ints() -> 'Sequence[int]':
        """``1, 2, 3, ...``"""
        return Sequence(Range(1))

    @staticmethod
    def longs() -> 'Sequence[int]':
        """``1, 2, 3, ...``"""
        return Sequence(Range(1))

    @staticmethod
    def range(start: int, end: int) -> 'Sequence[int]':
        """``start`` to ``end`` inclusive, counting down when ``end < start``."""
        return Sequence(Range(start, end, 1 if end >= start else -1))

    # ---- Internals ----

    def _parts(self) -> Tuple[Iterable, List[tuple]]:
        return self._source, self._operations

    def _derived_type(self) -> type:
        return type(self)

    def _derive(self, op_type: str, *args, cls: Optional[type] = None) -> 'Sequence':
        source, operations = self._parts()
        return (cls or self._derived_type())._chain(source, operations + [(op_type, args)])

    def _convert(self, cls: type, mapper: Optional[Callable] = None) -> 'Sequence':
        source, operations = self._parts()
        if mapper is not None:
            operations = operations + [('map', (require_callable(mapper, "mapper"),))]
        return cls._chain(source, list(operations))

    def _fuse_operations(self) -> List[tuple]:
        """
        Fuse adjacent map operations.

        map(f) -> map(g) becomes map(lambda x: g(f(x)))
        """
        optimized = []
        pending_maps = []

        for op_type, args in self._operations:
            if op_type == 'map':
                pending_maps.append(args[0])
            else:
                if pending_maps:
                    optimized.append(('map', (self._compose_functions(pending_maps),)))
                    pending_maps = []
                optimized.append((op_type, args))

        if pending_maps:
            optimized.append(('map', (self._compose_functions(pending_maps),)))

        return optimized

    @staticmethod
    def _compose_functions(funcs: List[Callable]) -> Callable:
        if len(funcs) == 1:
            return funcs[0]

        def composed(x):
            result = x
            for f in funcs:
                result = f(result)
            return result

        return composed

    def _execute(self) -> PullIterator[T]:
        stream = as_pull(self._source)
        for op_type, args in self._fuse_operations():
            stream = _OPERATORS[op_type](stream, *args)
        return stream

    # ---- Iteration ----

    def iterator(self) -> PullIterator[T]:
        """A fresh pull iterator running the whole recipe."""
        stream = self._execute()
        if self._iterator_type is not None:
            return self._iterator_type(stream)
        return stream

    def __iter__(self) -> PullIterator[T]:
        return self.iterator()

    def list_iterator(self, index: int = 0) -> ListIterator[T]:
        """Forward-only list iterator positioned at ``index``."""
        if self._list_iterator_type is not None:
            return self._list_iterator_type(forward_only(self._execute(), index))
        return forward_only(self.iterator(), index)

    def stream(self) -> Iterator[T]:
        """Plain Python generator over the elements."""
        return (item for item in self.iterator())

    # ---- Combinators ----

    def filter(self, predicate: Callable[[T], bool]) -> 'Sequence[T]':
        return self._derive('filter', require_callable(predicate, "predicate"))

    def map(self, mapper: Callable[[T], U]) -> 'Sequence[U]':
        return self._derive('map', require_callable(mapper, "mapper"))

    def flatten(self, mapper: Optional[Callable[[T], Iterable[U]]] = None) -> 'Sequence[U]':
        """Concatenate the iterables produced by ``mapper`` (default: the elements themselves)."""
        if mapper is not None:
            require_callable(mapper, "mapper")
        return self._derive('flatten', mapper, cls=Sequence)

    def append(self, *iterables: Iterable[T]) -> 'Sequence[T]':
        for iterable in iterables:
            require_not_none(iterable, "iterable")
        return self._derive('append', *iterables)

    def reverse(self) -> 'Sequence[T]':
        return self._derive('reverse')

    def sorted(self, key: Optional[Callable[[T], Any]] = None, comparator: Optional[Callable[[T, T], int]] = None,
               reverse: bool = False) -> 'Sequence[T]':
        """Sort by natural order, ``key``, or a ``comparator(a, b) -> int``."""
        if key is not None and comparator is not None:
            raise ValueError("give either key or comparator, not both")
        return self._derive('sorted', key, comparator, reverse)

    def shuffle(self, rng=None) -> 'Sequence[T]':
        """
        Shuffle with ``rng`` (anything with a ``shuffle(list)`` method, e.g.
        ``random.Random`` or ``numpy.random.Generator``). Without one, a
        generator seeded from ``config.settings.random_seed`` is used.
        """
        return self._derive('shuffle', rng)

    def skip(self, skip: int) -> 'Sequence[T]':
        return self._derive('skip', require_non_negative(skip, "skip"))

    def limit(self, limit: int) -> 'Sequence[T]':
        return self._derive('limit', require_non_negative(limit, "limit"))

    def limit_tail(self, limit: int) -> 'Sequence[T]':
        """Keep only the last ``limit`` elements of a finite sequence."""
        return self._derive('limit_tail', require_non_negative(limit, "limit"))

    def step(self, step: int) -> 'Sequence[T]':
        """Every ``step``-th element, starting with the first."""
        return self._derive('step', require_positive(step, "step"))

    def until(self, terminal: T) -> 'Sequence[T]':
        """Elements before the first one equal to ``terminal``."""
        return self._derive('until', lambda item: item == terminal)

    def until_match(self, predicate: Callable[[T], bool]) -> 'Sequence[T]':
        """Elements before the first one accepted by ``predicate``."""
        return self._derive('until', require_callable(predicate, "predicate"))

    def ending_at(self, terminal: T) -> 'Sequence[T]':
        """Elements up to and including the first one equal to ``terminal``."""
        return self._derive('ending_at', lambda item: item == terminal)

    def ending_at_match(self, predicate: Callable[[T], bool]) -> 'Sequence[T]':
        """Elements up to and including the first one accepted by ``predicate``."""
        return self._derive('ending_at', require_callable(predicate, "predicate"))

    def pair(self) -> 'Sequence[Pair[T, T]]':
        """Consecutive pairs: ``a, b, c -> (a, b), (b, c)``."""
        return self._derive('pair', cls=Sequence)

    def interleave(self, other: Iterable[U]) -> 'Sequence[Pair[T, U]]':
        """Pairs of corresponding elements; the shorter side is padded with None."""
        return self._derive('interleave', require_not_none(other, "other"), cls=Sequence)

    def map_back(self, mapper: Callable[[Optional[T], T], U], first_previous: Optional[T] = None) -> 'Sequence[U]':
        """Map with ``mapper(previous, current)``; ``first_previous`` stands in before the first element."""
        return self._derive('map_back', require_callable(mapper, "mapper"), first_previous)

    def map_forward(self, mapper: Callable[[T, Optional[T]], U], last_next: Optional[T] = None) -> 'Sequence[U]':
        """Map with ``mapper(current, next)``; ``last_next`` stands in after the last element."""
        return self._derive('map_forward', require_callable(mapper, "mapper"), last_next)

    def filter_back(self, predicate: Callable[[Optional[T], T], bool],
                    first_previous: Optional[T] = None) -> 'Sequence[T]':
        return self._derive('filter_back', require_callable(predicate, "predicate"), first_previous)

    def filter_forward(self, predicate: Callable[[T, Optional[T]], bool],
                       last_next: Optional[T] = None) -> 'Sequence[T]':
        return self._derive('filter_forward', require_callable(predicate, "predicate"), last_next)

    def cycle(self, times: Optional[int] = None) -> 'Sequence[T]':
        """Repeat the whole sequence forever, or ``times`` times."""
        return self._derived_type()._chain(Repeating(self, times), [])

    # ---- Conversions ----

    def to_sequence(self, mapper: Optional[Callable[[T], U]] = None) -> 'Sequence[U]':
        return self._convert(Sequence, mapper)

    def to_ints(self, mapper: Optional[Callable[[T], int]] = None) -> 'Sequence[int]':
        from lazyseq.sequence.primitives import Ints
        return self._convert(Ints, mapper)

    def to_longs(self, mapper: Optional[Callable[[T], int]] = None) -> 'Sequence[int]':
        from lazyseq.sequence.primitives import Longs
        return self._convert(Longs, mapper)

    def to_doubles(self, mapper: Optional[Callable[[T], float]] = None) -> 'Sequence[float]':
        from lazyseq.sequence.primitives import Doubles
        return self._convert(Doubles, mapper)

    def to_chars(self, mapper: Optional[Callable[[T], str]] = None) -> 'Sequence[str]':
        from lazyseq.sequence.primitives import Chars
        return self._convert(Chars, mapper)

    def to_entries(self, mapper: Optional[Callable[[T], Any]] = None) -> 'Sequence[Pair]':
        from lazyseq.sequence.entries import EntrySequence
        return self._convert(EntrySequence, mapper)._derive('map', Pair.from_entry)

    # ---- Terminal Operations ----

    def size_type(self) -> SizeType:
        source, operations = self._parts()
        size_type = size_type_of(source)
        for op_type, args in operations:
            size_type = _SIZE_RULES[op_type](size_type, *args)
        return size_type

    def size(self) -> int:
        self.size_type().require_finite("size")
        count = 0
        iterator = self.iterator()
        while iterator.has_next():
            iterator.next()
            count += 1
        return count

    def is_empty(self) -> bool:
        self.size_type().require_finite("is_empty")
        return not self.iterator().has_next()

    def clear(self) -> None:
        """Remove every element from the underlying source through ``remove()``."""
        self.size_type().require_finite("clear")
        iterator = self.iterator()
        while iterator.has_next():
            iterator.next()
            iterator.remove()

    def to_list(self) -> List[T]:
        return list(self.iterator())

    def to_tuple(self) -> Tuple[T, ...]:
        return tuple(self.iterator())

    def to_set(self) -> set:
        return set(self.iterator())

    def to_map(self) -> Dict:
        """Dict from entry-like elements; later duplicate keys overwrite earlier ones."""
        result = {}
        for item in self.iterator():
            Pair.from_entry(item).put_into(result)
        return result

    def collect_into(self, collection):
        """Add every element to ``collection`` (list, set, dict of entries, ...) and return it."""
        if isinstance(collection, MutableMapping):
            for item in self.iterator():
                Pair.from_entry(item).put_into(collection)
            return collection
        adder = getattr(collection, 'append', None) or getattr(collection, 'add', None)
        if adder is None:
            raise TypeError(f"cannot collect into {type(collection).__name__}")
        for item in self.iterator():
            adder(item)
        return collection

    def reduce(self, func: Callable[[Any, T], Any], initial: Any = _MISSING) -> Any:
        """Left fold. Without ``initial`` the first element seeds the fold; empty gives None."""
        iterator = self.iterator()
        if initial is _MISSING:
            if not iterator.has_next():
                return None
            result = iterator.next()
        else:
            result = initial
        for item in iterator:
            result = func(result, item)
        return result

    def first(self, default: Optional[T] = None) -> Optional[T]:
        iterator = self.iterator()
        return iterator.next() if iterator.has_next() else default

    def last(self, default: Optional[T] = None) -> Optional[T]:
        result = default
        for item in self.iterator():
            result = item
        return result

    def get(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """The element at ``index``, or ``default`` if the sequence is shorter."""
        require_non_negative(index, "index")
        iterator = self.iterator()
        if iterator.skip(index) != index or not iterator.has_next():
            return default
        return iterator.next()

    def for_each(self, action: Callable[[T], None]) -> None:
        for item in self.iterator():
            action(item)

    def join(self, delimiter: str = "") -> str:
        return delimiter.join(str(item) for item in self.iterator())

    def __repr__(self) -> str:
        source, operations = self._parts()
        ops = ', '.join(op_type for op_type, _ in operations)
        return f"{type(self).__name__}({source!r}{', ' + ops if ops else ''})"
