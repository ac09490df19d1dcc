"""Argument checks shared by iterators, sequences and collections."""

from typing import Any


def require_not_none(value: Any, name: str) -> Any:
    if value is None:
        raise TypeError(f"{name} must not be None")
    return value


def require_callable(func: Any, name: str) -> Any:
    if not callable(func):
        raise TypeError(f"{name} must be callable, got {type(func).__name__}")
    return func


def require_non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must be non-negative: {value}")
    return value


def require_positive(value: int, name: str) -> int:
    if value < 1:
        raise ValueError(f"{name} must be positive: {value}")
    return value


def require_size_within_bounds(bound: int, bound_name: str, size: int, size_name: str) -> int:
    """Check that ``0 <= size <= bound``."""
    if size < 0:
        raise IndexError(f"{size_name} must be non-negative: {size}")
    if size > bound:
        raise IndexError(f"{size_name} ({size}) is out of bounds of {bound_name} ({bound})")
    return size
