"""Scalar and channel-array helpers shared by the color operations."""

from __future__ import annotations
import math
import numpy as np
from boundednumbers import clamp
from boundednumbers.np_functions import clamp as np_clamp
from ..constants import CHANNEL_MAX


def finite_or_default(value: float, default: float = 0.0) -> float:
    """Return ``value`` when it is finite, otherwise ``default``."""
    return value if math.isfinite(value) else default


def np_finite_or_default(values: np.ndarray, default: float = 0.0) -> np.ndarray:
    """Vectorized :func:`finite_or_default`, preserving dtype."""
    return np.where(np.isfinite(values), values, values.dtype.type(default))


def as_float_array(values) -> np.ndarray:
    """Return ``values`` as an array, keeping a floating dtype and promoting anything else to float64."""
    arr = np.asarray(values)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    return arr


def float_key(values, dtype=None) -> bytes:
    """
    Bytes of ``values`` with every NaN replaced by one canonical NaN.

    Equal keys mean bitwise-equal floats, except that all NaNs match and
    ``0.0`` differs from ``-0.0``. Hashing the key keeps hash and equality
    consistent.
    """
    arr = np.array(values, dtype=dtype, ndmin=1)
    arr[np.isnan(arr)] = np.nan
    return arr.tobytes()


def lerp(a, b, t):
    """Linear interpolation in the ``(1 - t) * a + t * b`` form."""
    return (1.0 - t) * a + t * b


def saturate(value: float, edge_a: float = 0.0, edge_b: float = 1.0) -> float:
    """Clamp ``value`` between two edges given in either order."""
    return clamp(value, min(edge_a, edge_b), max(edge_a, edge_b))


def np_saturate(values: np.ndarray, edge_a: float = 0.0, edge_b: float = 1.0) -> np.ndarray:
    return np_clamp(values, min(edge_a, edge_b), max(edge_a, edge_b))


def saturate_int(value: int) -> int:
    """Clamp an 8-bit channel value to ``[0, 255]``."""
    return clamp(int(value), 0, CHANNEL_MAX)


def to_int(value: float) -> int:
    """Truncate toward zero; NaN maps to 0."""
    if math.isnan(value):
        return 0
    return int(value)


def to_8bit(value: float) -> int:
    """Map a unit-range channel to ``[0, 255]`` with round-half-up."""
    return to_int(saturate(value) * CHANNEL_MAX + 0.5)
