"""
Chromacore - Color Values, Layouts and Encodings for Rendering
==============================================================

Immutable color values and the numeric machinery a renderer needs around them:
channel layouts for buffers and packed words, gamma and tone-mapping curves,
spectral-to-RGB conversion and the RGBE shared-exponent codec.

Key Features
------------
- 3- and 4-channel colors in float32 and float64 precision
- Channel-wise arithmetic, predicates, luminance and lightness
- Packed 32-bit and flat 8-bit layouts with any channel order
- Color spaces with two-segment transfer curves (sRGB, Adobe RGB, NTSC, ...)
- Reinhard, filmic, ACES and Unreal 3 tone mapping
- Constant, regular and irregular spectral curves with CIE 1931 integration
- RGBE HDR encoding and a thread-safe color cache

Quick Start
-----------
>>> from chromacore import Color3F, ColorSpace, PackedIntComponentOrder, tone_map
>>>
>>> # Create colors
>>> orange = Color3F.from_ints(255, 128, 0)
>>> half = orange * 0.5
>>>
>>> # Linearize and tone map
>>> linear = ColorSpace.SRGB.undo_gamma_correction(orange)
>>> mapped = tone_map(linear * 4.0, exposure=1.0, operator="aces_modified_v1")
>>>
>>> # Pack into a 32-bit word
>>> word = orange.pack(PackedIntComponentOrder.ARGB)

Modules
-------
- colors: Color3F, Color3D, Color4F, Color4D, arithmetic and the color cache
- layouts: ArrayComponentOrder and PackedIntComponentOrder
- conversions: color spaces, PBRT transfer, tone mapping, RGBE
- spectral: spectral curves, CIE 1931 data and metal curves
"""

from .colors import (
    ColorBase, WithAlpha,
    Color3F, Color3D, Color4F, Color4D,
    get_color_class, convert_color,
    ColorCache,
)
from .layouts import ArrayComponentOrder, PackedIntComponentOrder
from .conversions import (
    ColorSpace,
    ToneMapper, ToneMapperType, tone_map,
    encode_rgbe, decode_rgbe,
)
from .spectral import (
    SpectralCurve,
    ConstantSpectralCurve, RegularSpectralCurve, IrregularSpectralCurve,
    metal_curve, metal_color,
)
from .types import Precision

__version__ = "1.0.0"

__all__ = [
    "ColorBase", "WithAlpha",
    "Color3F", "Color3D", "Color4F", "Color4D",
    "get_color_class", "convert_color", "ColorCache",
    "ArrayComponentOrder", "PackedIntComponentOrder",
    "ColorSpace", "ToneMapper", "ToneMapperType", "tone_map",
    "encode_rgbe", "decode_rgbe",
    "SpectralCurve", "ConstantSpectralCurve", "RegularSpectralCurve", "IrregularSpectralCurve",
    "metal_curve", "metal_color",
    "Precision",
]
