"""
Chromacore Color Values
=======================

Immutable 3- and 4-channel colors in single and double precision.

Classes
-------
Color3F, Color3D: RGB (or XYZ) colors in float32 / float64
Color4F, Color4D: RGBA colors in float32 / float64
ColorBase: shared implementation, parameterized by class variables
ColorCache: caller-owned interning of equal colors

Construction
------------
>>> from chromacore.colors import Color3F, Color4F
>>> Color3F(0.5)                     # fill every color channel
>>> Color3F((1.0, 0.5, 0.0))
>>> Color3F.from_ints(255, 128, 0)   # saturated, divided by 255
>>> Color4F(Color3F.RED, alpha=0.5)  # 3 -> 4 channels
>>> Color3F.unpack(0xFFFF8000)       # ARGB word

Arithmetic
----------
Operators ``+ - * /`` and unary ``-`` work between colors of the same variant
and with plain numbers. Division never yields NaN or infinity: non-finite
quotients become 0. The module ``chromacore.colors.arithmetic`` holds the
full set (blend, add_sample, normalize, sepia, grayscale_*, ...).

Variants
--------
Use ``color.convert(num_channels, precision)``, ``with_alpha``,
``without_alpha`` or ``to_precision`` to move between variants; mixing
variants in one arithmetic call raises ``TypeError``.
"""

from .color_base import ColorBase, WithAlpha
from .rgb import Color3F, Color3D, Color4F, Color4D
from .color import unified_tuple_to_class, get_color_class, convert_color
from . import named
from .arithmetic import (
    add, subtract, multiply, divide,
    add_and_multiply, add_multiply_and_divide, add_sample,
    blend, blend_over, maximum, minimum,
    invert, negate, maximum_to_1, minimum_to_0,
    multiply_and_saturate_negative, normalize, normalize_luminance,
    saturate, sepia, sqrt,
    grayscale_average, grayscale_component1, grayscale_component2,
    grayscale_component3, grayscale_lightness, grayscale_luminance,
    grayscale_maximum, grayscale_minimum,
)
from .cache import ColorCache

__all__ = [
    "ColorBase", "WithAlpha",
    "Color3F", "Color3D", "Color4F", "Color4D",
    "unified_tuple_to_class", "get_color_class", "convert_color",
    "add", "subtract", "multiply", "divide",
    "add_and_multiply", "add_multiply_and_divide", "add_sample",
    "blend", "blend_over", "maximum", "minimum",
    "invert", "negate", "maximum_to_1", "minimum_to_0",
    "multiply_and_saturate_negative", "normalize", "normalize_luminance",
    "saturate", "sepia", "sqrt",
    "grayscale_average", "grayscale_component1", "grayscale_component2",
    "grayscale_component3", "grayscale_lightness", "grayscale_luminance",
    "grayscale_maximum", "grayscale_minimum",
    "ColorCache",
]
