"""
Argument checks used at the public entry points.

Each helper returns its (validated) argument so it can be used inline.
"""

from __future__ import annotations
from collections.abc import Sized
from typing import Any, TypeVar

T = TypeVar("T")


def require_not_none(value: T | None, name: str) -> T:
    if value is None:
        raise TypeError(f"{name} must not be None")
    return value


def require_non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name}={value} must be non-negative")
    return value


def require_positive(value: int, name: str) -> int:
    if value <= 0:
        raise ValueError(f"{name}={value} must be positive")
    return value


def require_multiple(length: int, count: int, name: str = "length") -> int:
    """
    Require ``length`` to be an exact multiple of ``count``.

    Returns:
        ``length // count``, the number of whole elements.
    """
    if length % count != 0:
        raise ValueError(
            f"{name}={length} is not a multiple of the component count {count} "
            f"({length} % {count} != 0)"
        )
    return length // count


def require_index(buffer: Sized, index: int, name: str = "buffer") -> int:
    """Bounds check that rejects negative indices instead of wrapping them."""
    if not 0 <= index < len(buffer):
        raise IndexError(f"{name} index {index} out of range for length {len(buffer)}")
    return index


def require_instance(value: Any, expected: type | tuple[type, ...], name: str) -> Any:
    if value is None:
        raise TypeError(f"{name} must not be None")
    if not isinstance(value, expected):
        expected_name = (
            expected.__name__ if isinstance(expected, type)
            else " or ".join(t.__name__ for t in expected)
        )
        raise TypeError(f"{name} must be {expected_name}, got {type(value).__name__}")
    return value
