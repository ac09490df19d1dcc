"""
Size-Type Lattice
=================

Every pipeline and collection is classified as one of:

    FIXED      size known, immutable, finite
    AVAILABLE  size computable in bounded time, may change
    INFINITE   unbounded

Concatenation joins the lattice:

    FIXED ⊕ FIXED    = FIXED
    X ⊕ INFINITE     = INFINITE
    otherwise        = AVAILABLE
"""

from enum import Enum
from typing import Any, Iterable

from lazyseq.errors import UnsupportedOperationError


class SizeType(Enum):
    FIXED = 'fixed'
    AVAILABLE = 'available'
    INFINITE = 'infinite'

    def concat(self, other: 'SizeType') -> 'SizeType':
        if self is SizeType.INFINITE or other is SizeType.INFINITE:
            return SizeType.INFINITE
        if self is SizeType.FIXED and other is SizeType.FIXED:
            return SizeType.FIXED
        return SizeType.AVAILABLE

    @staticmethod
    def join(size_types: Iterable['SizeType']) -> 'SizeType':
        """Fold ``concat`` over ``size_types``; the empty join is FIXED."""
        result = SizeType.FIXED
        for size_type in size_types:
            result = result.concat(size_type)
        return result

    @property
    def finite(self) -> bool:
        return self is not SizeType.INFINITE

    def require_finite(self, operation: str) -> None:
        if self is SizeType.INFINITE:
            raise UnsupportedOperationError(f"{operation} is not supported on an infinite sequence")


_FIXED_TYPES = (tuple, str, bytes, range, frozenset)


def size_type_of(obj: Any) -> SizeType:
    """Classify any iterable."""
    size_type = getattr(obj, 'size_type', None)
    if callable(size_type):
        return size_type()
    if isinstance(obj, _FIXED_TYPES):
        return SizeType.FIXED
    return SizeType.AVAILABLE
