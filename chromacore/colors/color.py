from __future__ import annotations
from typing import Optional
from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from ..types.precision_type import Precision
from ..types.color_types import Scalar

unified_tuple_to_class: dict[tuple[int, Precision], type[ColorBase]] = {**rgb_tuple_to_class}


def get_color_class(num_channels: int, precision: Precision | str) -> type[ColorBase]:
    try:
        precision = Precision(precision)
    except ValueError:
        raise ValueError(f"Unsupported precision: {precision!r}") from None
    color_class = unified_tuple_to_class.get((num_channels, precision))
    if color_class is None:
        raise ValueError(
            f"Unsupported channel count/precision combination: {num_channels}/{precision.value}"
        )
    return color_class


def color_convert(self: ColorBase, num_channels: Optional[int] = None, precision: Precision | None = None) -> ColorBase:
    """
    Convert this color to another variant.

    Args:
        num_channels: Target channel count (3 or 4). Defaults to the current one.
        precision: Target precision. Defaults to the current one.

    Returns:
        New color of the target variant. 3 to 4 channels adds alpha 1.0,
        4 to 3 drops alpha, float64 to float32 rounds every channel.
    """
    cls = get_color_class(num_channels or self.num_channels, precision or self.precision)
    if cls is type(self):
        return self
    return cls(self)


def with_alpha(self: ColorBase, alpha: Scalar = 1.0) -> ColorBase:
    """
    Return the 4-channel variant of this color with the given alpha.

    A color that already has alpha gets its alpha replaced.
    """
    cls = get_color_class(4, self.precision)
    return cls(self.value[:3], alpha=alpha)


def without_alpha(self: ColorBase) -> ColorBase:
    """Return the 3-channel variant of this color; alpha is dropped."""
    return color_convert(self, 3)


def to_precision(self: ColorBase, precision: Precision) -> ColorBase:
    return color_convert(self, self.num_channels, precision)


ColorBase.convert = color_convert
ColorBase.with_alpha = with_alpha
ColorBase.without_alpha = without_alpha
ColorBase.to_precision = to_precision


def convert_color(value, num_channels: int, precision: Precision):
    """Build a color of the requested variant from a color or raw channels."""
    color_class = get_color_class(num_channels, precision)
    if isinstance(value, ColorBase):
        return value.convert(num_channels, precision)
    return color_class(value)
