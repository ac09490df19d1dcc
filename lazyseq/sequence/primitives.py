"""
Primitive Sequences
===================

Specialised sequences for integers, long integers, doubles and characters.
They share the generic pipeline engine and differ in:

  - the typed iterator wrapped around every traversal (``next_int`` ...),
  - element-preserving combinators stay in the specialisation,
  - ``to_array()`` materialises into a numpy array of the matching dtype.

    >>> Ints.positive().map(lambda i: i * i).skip(3).limit(5).to_list()
    [16, 25, 36, 49, 64]
    >>> Longs.negative().step(2).skip(3).limit(5).to_list()
    [-7, -9, -11, -13, -15]

Converting to a boxed ``Sequence`` is explicit: ``to_sequence(mapper)``.
"""

import math
from typing import Optional

import numpy as np

from lazyseq.iterator.primitive import (CharIterator, CharListIterator, DoubleIterator, DoubleListIterator,
                                       IntIterator, IntListIterator, LongIterator, LongListIterator)
from lazyseq.iterator.sources import Range
from lazyseq.sequence.sequence import Sequence
from lazyseq.util.preconditions import require_not_none


class NumericSequence(Sequence):
    """Common base of the number specialisations."""

    DTYPE = np.int64

    def to_array(self) -> np.ndarray:
        self.size_type().require_finite("to_array")
        return np.fromiter(self.iterator(), dtype=self.DTYPE)

    def sum(self):
        self.size_type().require_finite("sum")
        return self.reduce(lambda a, b: a + b, 0)

    def min(self, default=None):
        self.size_type().require_finite("min")
        result = self.reduce(lambda a, b: b if b < a else a)
        return default if result is None else result

    def max(self, default=None):
        self.size_type().require_finite("max")
        result = self.reduce(lambda a, b: b if b > a else a)
        return default if result is None else result


class IntegerSequence(NumericSequence):
    """Integer sources shared by Ints and Longs."""

    @classmethod
    def positive(cls) -> 'IntegerSequence':
        """``1, 2, 3, ...``"""
        return cls(Range(1))

    @classmethod
    def negative(cls) -> 'IntegerSequence':
        """``-1, -2, -3, ...``"""
        return cls(Range(-1, None, -1))

    @classmethod
    def range(cls, start: int, end: int) -> 'IntegerSequence':
        """``start`` to ``end`` inclusive, counting down when ``end < start``."""
        return cls(Range(start, end, 1 if end >= start else -1))


class Ints(IntegerSequence):
    _iterator_type = IntIterator
    _list_iterator_type = IntListIterator
    DTYPE = np.int32


class Longs(IntegerSequence):
    _iterator_type = LongIterator
    _list_iterator_type = LongListIterator
    DTYPE = np.int64


class Doubles(NumericSequence):
    _iterator_type = DoubleIterator
    _list_iterator_type = DoubleListIterator
    DTYPE = np.float64

    @classmethod
    def positive(cls) -> 'Doubles':
        """``1.0, 2.0, 3.0, ...``"""
        return cls(Range(1)).map(float)

    @classmethod
    def negative(cls) -> 'Doubles':
        """``-1.0, -2.0, -3.0, ...``"""
        return cls(Range(-1, None, -1)).map(float)

    @classmethod
    def range(cls, start: float, end: float, step: float = 1.0) -> 'Doubles':
        """``start`` to ``end`` inclusive in increments of ``step``."""
        if step == 0:
            raise ValueError("step must not be zero")
        # Tolerance keeps an end reached by accumulated rounding, e.g. 0.1 * 3.
        count = math.floor((end - start) / step + 1e-9) + 1
        return cls(Range(0, max(count, 0) - 1)).map(lambda i: start + i * step)


class Chars(Sequence):
    """
    Sequence of single-character strings.

        >>> (Chars.from_string("Hello Lexicon")
        ...     .map(lambda c: '_' if c == ' ' else c)
        ...     .map(str.lower)
        ...     .as_string())
        'hello_lexicon'
    """

    _iterator_type = CharIterator
    _list_iterator_type = CharListIterator

    @classmethod
    def from_string(cls, text: str) -> 'Chars':
        return cls(require_not_none(text, "text"))

    @classmethod
    def range(cls, start: str, end: str) -> 'Chars':
        """``start`` to ``end`` inclusive by code point."""
        first, last = ord(start), ord(end)
        return cls(Range(first, last, 1 if last >= first else -1))

    def as_string(self) -> str:
        self.size_type().require_finite("as_string")
        return ''.join(self.iterator())

    def to_array(self) -> np.ndarray:
        """Code points as ``uint32``."""
        self.size_type().require_finite("to_array")
        return np.fromiter((ord(c) for c in self.iterator()), dtype=np.uint32)

    def to_upper(self) -> 'Chars':
        return self.map(str.upper)

    def to_lower(self) -> 'Chars':
        return self.map(str.lower)

    def __str__(self) -> str:
        return self.as_string()


def chars(text: Optional[str]) -> Chars:
    """Shorthand for ``Chars.from_string``."""
    return Chars.from_string(text)
