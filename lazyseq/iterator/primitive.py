"""
Primitive Iterators
===================

Typed faces of the pull protocol for the four element kinds that have
specialised sequences:

    IntIterator     next_int()     -> int
    LongIterator    next_long()    -> int
    DoubleIterator  next_double()  -> float
    CharIterator    next_char()    -> str of length 1

Each has a list-iterator counterpart (``IntListIterator`` and so on) that
adds ``previous_int()``, ``set_int()`` and ``add_int()`` style accessors.

Python has no unboxed scalars, so a single generic engine drives every
pipeline and these classes only convert at the edge. The plain ``next()``
defers to the typed accessor. Conversion is strict: values of the wrong
kind raise TypeError instead of being parsed.
"""

from numbers import Integral, Real
from typing import Any, Callable

import numpy as np

from lazyseq.iterator.base import ListIterator, PullIterator


def _to_int(value: Any) -> int:
    if isinstance(value, np.integer):
        return value.item()
    if isinstance(value, Integral):
        return int(value)
    raise TypeError(f"expected an integer, got {type(value).__name__} {value!r}")


def _to_float(value: Any) -> float:
    if isinstance(value, (np.integer, np.floating)):
        return float(value.item())
    if isinstance(value, Real):
        return float(value)
    raise TypeError(f"expected a number, got {type(value).__name__} {value!r}")


def _to_char(value: Any) -> str:
    if isinstance(value, (int, np.integer)):
        return chr(value)
    if not isinstance(value, str) or len(value) != 1:
        raise TypeError(f"expected a single character, got {value!r}")
    return value


class PrimitiveIterator(PullIterator):
    """Wraps a pull iterator and converts every element with ``convert``."""

    convert: Callable[[Any], Any] = staticmethod(lambda value: value)

    def __init__(self, iterator: PullIterator):
        self._iterator = iterator

    def has_next(self) -> bool:
        return self._iterator.has_next()

    def next_raw(self):
        return self.convert(self._iterator.next())

    def next(self):
        return self.next_raw()

    def remove(self) -> None:
        self._iterator.remove()


class IntIterator(PrimitiveIterator):
    convert = staticmethod(_to_int)

    def next_int(self) -> int:
        return self.next_raw()


class LongIterator(PrimitiveIterator):
    convert = staticmethod(_to_int)

    def next_long(self) -> int:
        return self.next_raw()


class DoubleIterator(PrimitiveIterator):
    convert = staticmethod(_to_float)

    def next_double(self) -> float:
        return self.next_raw()


class CharIterator(PrimitiveIterator):
    """Chars are single-character strings; integer code points are accepted on input."""
    convert = staticmethod(_to_char)

    def next_char(self) -> str:
        return self.next_raw()


class PrimitiveListIterator(ListIterator):
    """Wraps a list iterator; reads are converted and writes are converted before delegating."""

    convert: Callable[[Any], Any] = staticmethod(lambda value: value)

    def __init__(self, iterator: ListIterator):
        self._iterator = iterator

    def has_next(self) -> bool:
        return self._iterator.has_next()

    def next(self):
        return self.convert(self._iterator.next())

    def has_previous(self) -> bool:
        return self._iterator.has_previous()

    def previous(self):
        return self.convert(self._iterator.previous())

    def next_index(self) -> int:
        return self._iterator.next_index()

    def remove(self) -> None:
        self._iterator.remove()

    def set(self, item) -> None:
        self._iterator.set(self.convert(item))

    def add(self, item) -> None:
        self._iterator.add(self.convert(item))


class IntListIterator(PrimitiveListIterator):
    convert = staticmethod(_to_int)

    def next_int(self) -> int:
        return self.next()

    def previous_int(self) -> int:
        return self.previous()

    def set_int(self, value: int) -> None:
        self.set(value)

    def add_int(self, value: int) -> None:
        self.add(value)


class LongListIterator(PrimitiveListIterator):
    convert = staticmethod(_to_int)

    def next_long(self) -> int:
        return self.next()

    def previous_long(self) -> int:
        return self.previous()

    def set_long(self, value: int) -> None:
        self.set(value)

    def add_long(self, value: int) -> None:
        self.add(value)


class DoubleListIterator(PrimitiveListIterator):
    convert = staticmethod(_to_float)

    def next_double(self) -> float:
        return self.next()

    def previous_double(self) -> float:
        return self.previous()

    def set_double(self, value: float) -> None:
        self.set(value)

    def add_double(self, value: float) -> None:
        self.add(value)


class CharListIterator(PrimitiveListIterator):
    convert = staticmethod(_to_char)

    def next_char(self) -> str:
        return self.next()

    def previous_char(self) -> str:
        return self.previous()

    def set_char(self, value: str) -> None:
        self.set(value)

    def add_char(self, value: str) -> None:
        self.add(value)
