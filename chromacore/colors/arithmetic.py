"""
Channel-wise color arithmetic.

Every function returns a new color of the operands' variant and never touches
its inputs. Combining operations (add, subtract, multiply, divide, blend,
maximum, minimum and friends) work on every channel, alpha included.
Color transforms (invert, sepia, grayscale, saturate, ...) work on the three
color channels and carry alpha through.

Arithmetic runs in the variant's dtype, so float32 colors round like float32.
"""

from __future__ import annotations
from typing import Callable, Sequence, TypeVar, Union
import numpy as np
from ..constants import NORMALIZE_EPSILON, SEPIA_MATRIX
from ..types.color_types import Scalar
from ..utils.floats import lerp, np_finite_or_default, np_saturate
from ..utils.validators import require_instance, require_not_none, require_positive
from .color_base import ColorBase

C = TypeVar("C", bound=ColorBase)
Operand = Union[ColorBase, Scalar]


# -----------------------
# Core engines
# -----------------------
def _operand_array(operand: Operand, cls: type[ColorBase], name: str):
    """Array (or dtype scalar) view of an operand, checked against ``cls``."""
    if operand is None:
        raise TypeError(f"{name} must not be None")
    if isinstance(operand, ColorBase):
        if type(operand) is not cls:
            raise TypeError(
                f"{name} is a {type(operand).__name__}, expected {cls.__name__}; "
                f"convert it first with .convert()"
            )
        return operand.array
    if isinstance(operand, (int, float, np.number)):
        return cls._type(operand)
    raise TypeError(f"{name} must be a color or a number, got {type(operand).__name__}")


def _combine(op: Callable, first: C, *others: Operand) -> C:
    """Fold ``op`` over every channel of ``first`` and ``others``."""
    require_instance(first, ColorBase, "color")
    cls = type(first)
    result = first.array
    for i, other in enumerate(others, start=1):
        result = op(result, _operand_array(other, cls, f"operand {i}"))
    return cls(result)


def _map_color_channels(color: C, fn: Callable[[np.ndarray], np.ndarray]) -> C:
    """Apply ``fn`` to the three color channels; alpha passes through."""
    require_instance(color, ColorBase, "color")
    arr = color.array
    out = arr.copy()
    out[:3] = fn(arr[:3])
    return type(color)(out)


def _with_color_channels(color: C, rgb) -> C:
    out = color.array
    out[:3] = rgb
    return type(color)(out)


# -----------------------
# Combining operations
# -----------------------
def add(color: C, other: Operand) -> C:
    return _combine(np.add, color, other)


def subtract(color: C, other: Operand, other2: Operand | None = None) -> C:
    """``color - other`` or ``color - other - other2``."""
    if other2 is None:
        return _combine(np.subtract, color, other)
    return _combine(np.subtract, color, other, other2)


def multiply(color: C, *others: Operand) -> C:
    """
    Multiply a color by one to three colors and/or scalars, left to right.

    ``multiply(a, b)``, ``multiply(a, b, c)``, ``multiply(a, b, c, d)`` and
    ``multiply(a, b, 2.0)`` are all supported.
    """
    if not 1 <= len(others) <= 3:
        raise TypeError(f"multiply expects 1 to 3 factors after the color, got {len(others)}")
    return _combine(np.multiply, color, *others)


def _finite_divide(a, b):
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return np_finite_or_default(np.asarray(np.divide(a, b)), 0.0)


def divide(color: C, other: Operand) -> C:
    """Divide channel-wise; any non-finite quotient becomes 0."""
    return _combine(_finite_divide, color, other)


def add_and_multiply(color_add: C, color_a: C, color_b: C, scalar: Scalar | None = None) -> C:
    """``color_add + color_a * color_b [* scalar]``."""
    product = multiply(color_a, color_b) if scalar is None else multiply(color_a, color_b, scalar)
    return add(color_add, product)


def add_multiply_and_divide(
    color_add: C,
    color_a: C,
    color_b: C,
    scalar_divide: Scalar,
    scalar_multiply: Scalar | None = None,
    color_c: C | None = None,
) -> C:
    """
    ``color_add + color_a * color_b [* color_c] [* scalar_multiply] / scalar_divide``.

    The product is evaluated left to right before the single division.
    """
    factors = [color_b]
    if color_c is not None:
        factors.append(color_c)
    if scalar_multiply is not None:
        factors.append(scalar_multiply)
    product = _combine(np.multiply, color_a, *factors)
    return add(color_add, _combine(np.divide, product, scalar_divide))


def add_sample(current: C, sample: C, sample_count: int) -> C:
    """
    Incremental mean: ``current + (sample - current) / sample_count``.

    Raises:
        ValueError: if ``sample_count`` is not positive.
    """
    require_positive(sample_count, "sample_count")
    cls = type(require_instance(current, ColorBase, "current"))
    c = current.array
    s = _operand_array(sample, cls, "sample")
    return cls(c + (s - c) / cls._type(sample_count))


def blend(color_a: C, color_b: C, t: Union[Scalar, Sequence[Scalar]] = 0.5) -> C:
    """
    Linear blend ``(1 - t) * a + t * b``.

    Args:
        t: One factor for every channel, or one factor per channel.
    """
    cls = type(require_instance(color_a, ColorBase, "color_a"))
    a = color_a.array
    b = _operand_array(color_b, cls, "color_b")
    require_not_none(t, "t")
    if isinstance(t, (int, float, np.number)):
        factor = cls._type(t)
    else:
        factor = np.asarray(t, dtype=cls._type)
        if factor.shape != (cls.num_channels,):
            raise ValueError(f"{cls.__name__} blend expects {cls.num_channels} factors, got {factor.shape}")
    return cls(lerp(a, b, factor))


def blend_over(color_a: C, color_b: C) -> C:
    """
    Porter-Duff "over": ``color_a`` composited on top of ``color_b``.

    Only defined for 4-channel colors. A fully transparent result has its
    color channels forced to 0 instead of 0/0.
    """
    cls = type(require_instance(color_a, ColorBase, "color_a"))
    if not cls.num_channels == 4:
        raise TypeError(f"blend_over requires 4-channel colors, got {cls.__name__}")
    a = color_a.array
    b = _operand_array(color_b, cls, "color_b")
    one = cls._type(1.0)
    alpha = a[3] + b[3] * (one - a[3])
    rgb = _finite_divide(a[:3] * a[3] + b[:3] * b[3] * (one - a[3]), alpha)
    return cls(np.append(rgb, alpha))


def maximum(color_a: C, color_b: C) -> C:
    return _combine(np.maximum, color_a, color_b)


def minimum(color_a: C, color_b: C) -> C:
    return _combine(np.minimum, color_a, color_b)


# -----------------------
# Color transforms
# -----------------------
def invert(color: C) -> C:
    return _map_color_channels(color, lambda c: c.dtype.type(1.0) - c)


def negate(color: C) -> C:
    return _map_color_channels(color, np.negative)


def maximum_to_1(color: C) -> C:
    """Scale down so the largest color channel is 1 when it exceeds 1."""
    peak = color.maximum
    if peak > 1.0:
        return _map_color_channels(color, lambda c: c / c.dtype.type(peak))
    return color


def minimum_to_0(color: C) -> C:
    """Shift up so the smallest color channel is 0 when it is negative."""
    low = color.minimum
    if low < 0.0:
        return _map_color_channels(color, lambda c: c + -c.dtype.type(low))
    return color


def multiply_and_saturate_negative(color: C, scalar: Scalar) -> C:
    """``max(color * scalar, 0)`` per color channel."""
    return _map_color_channels(color, lambda c: np.maximum(c * c.dtype.type(scalar), c.dtype.type(0.0)))


def normalize(color: C) -> C:
    """Divide by the channel sum; sums below 1e-6 leave the color unchanged."""
    rgb = color.array[:3]
    total = rgb[0] + rgb[1] + rgb[2]
    if total < rgb.dtype.type(NORMALIZE_EPSILON):
        return color
    reciprocal = rgb.dtype.type(1.0) / total
    return _with_color_channels(color, rgb * reciprocal)


def normalize_luminance(color: C) -> C:
    """Divide by luminance; colors with non-positive luminance become white."""
    luminance = color.luminance
    if luminance > 0.0:
        return _map_color_channels(color, lambda c: _finite_divide(c, c.dtype.type(luminance)))
    return _with_color_channels(color, (1.0, 1.0, 1.0))


def saturate(color: C, edge_a: float = 0.0, edge_b: float = 1.0) -> C:
    """Clamp color channels between two edges given in either order."""
    return _map_color_channels(color, lambda c: np_saturate(c, edge_a, edge_b))


def sepia(color: C) -> C:
    matrix = np.asarray(SEPIA_MATRIX, dtype=color._type)
    return _map_color_channels(color, lambda c: matrix @ c)


def sqrt(color: C) -> C:
    """Channel square root; negative channels give NaN."""
    def _sqrt(c):
        with np.errstate(invalid="ignore"):
            return np.sqrt(c)
    return _map_color_channels(color, _sqrt)


# -----------------------
# Grayscale
# -----------------------
def _grayscale(color: C, level: float) -> C:
    return _with_color_channels(color, (level, level, level))


def grayscale_average(color: C) -> C:
    return _grayscale(color, color.average)


def grayscale_component1(color: C) -> C:
    return _grayscale(color, color.component1)


def grayscale_component2(color: C) -> C:
    return _grayscale(color, color.component2)


def grayscale_component3(color: C) -> C:
    return _grayscale(color, color.component3)


def grayscale_lightness(color: C) -> C:
    return _grayscale(color, color.lightness)


def grayscale_luminance(color: C) -> C:
    return _grayscale(color, color.luminance)


def grayscale_maximum(color: C) -> C:
    return _grayscale(color, color.maximum)


def grayscale_minimum(color: C) -> C:
    return _grayscale(color, color.minimum)


# Add arithmetic operators to ColorBase
def _auto_arithmetic_operation(fn, reflected=False):
    """Create an operator that delegates to a module function."""
    def operation(self, other):
        if not isinstance(other, (ColorBase, int, float, np.number)):
            return NotImplemented
        if reflected:
            if isinstance(other, ColorBase):
                return NotImplemented
            return fn(type(self)(np.full(self.num_channels, other)), self)
        return fn(self, other)
    return operation


ColorBase.__add__ = _auto_arithmetic_operation(add)
ColorBase.__sub__ = _auto_arithmetic_operation(subtract)
ColorBase.__mul__ = _auto_arithmetic_operation(multiply)
ColorBase.__truediv__ = _auto_arithmetic_operation(divide)
ColorBase.__radd__ = _auto_arithmetic_operation(add, reflected=True)
ColorBase.__rsub__ = _auto_arithmetic_operation(subtract, reflected=True)
ColorBase.__rmul__ = _auto_arithmetic_operation(multiply, reflected=True)
ColorBase.__rtruediv__ = _auto_arithmetic_operation(divide, reflected=True)
ColorBase.__neg__ = negate
