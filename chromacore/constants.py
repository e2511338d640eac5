"""
Numeric constants shared across chromacore.

Values are the published coefficients the rendering pipeline depends on;
changing any of them shifts every derived color.
"""

from __future__ import annotations

# =============================================================================
# Luminance and Color Classification
# =============================================================================

# Rec. 709 / sRGB luminance weights (Y row of the PBRT RGB->XYZ matrix)
LUMINANCE_WEIGHTS = (0.212671, 0.715160, 0.072169)

DEFAULT_PRIMARY_THRESHOLD = 1.0
SECONDARY_THRESHOLD = 0.5

# normalize() leaves colors whose channel sum is below this untouched
NORMALIZE_EPSILON = 1.0e-6

SEPIA_MATRIX = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)

# =============================================================================
# 8-bit Channels
# =============================================================================

CHANNEL_MAX = 255
ALPHA_DEFAULT = 255
COLOR_DEFAULT = 0
BYTE_MASK = 0xFF
WORD_MASK = 0xFFFFFFFF

# =============================================================================
# PBRT Transfer Functions
# =============================================================================

PBRT_RGB_TO_XYZ = (
    (0.412453, 0.357580, 0.180423),
    (0.212671, 0.715160, 0.072169),
    (0.019334, 0.119193, 0.950227),
)

PBRT_XYZ_TO_RGB = (
    (3.240479, -1.537150, -0.498535),
    (-0.969256, 1.875991, 0.041556),
    (0.055648, -0.204043, 1.057311),
)

PBRT_GAMMA = 2.4
PBRT_LINEAR_SCALE = 12.92
PBRT_ENCODE_BREAK_POINT = 0.0031308
PBRT_DECODE_BREAK_POINT = 0.04045
PBRT_SEGMENT_SCALE = 1.055
PBRT_SEGMENT_OFFSET = 0.055

# =============================================================================
# Tone Mapping
# =============================================================================

REINHARD_WHITE_POINT = 4.0
UNREAL3_OFFSET = 0.155
UNREAL3_SCALE = 1.019

# (a, b, c, d, e)
ACES_MODIFIED_V1_COEFFICIENTS = (2.51, 0.03, 2.43, 0.59, 0.14)
FILMIC_GAMMA_22_COEFFICIENTS = (6.2, 0.5, 6.2, 1.7, 0.06)
FILMIC_GAMMA_22_SUBTRACT = 0.004
FILMIC_GAMMA_22_MINIMUM = 0.0

# =============================================================================
# RGBE
# =============================================================================

RGBE_EXPONENT_BIAS = 128
RGBE_ZERO_THRESHOLD = 1.0e-32
# 256 would be the exact mantissa scale, 255 is what existing encoded data uses.
RGBE_MANTISSA_SCALE = 255.0
RGBE_TABLE_SIZE = 256
# Table entry i holds 2 ** (i - RGBE_TABLE_OFFSET)
RGBE_TABLE_OFFSET = 136

# =============================================================================
# Spectral Sampling
# =============================================================================

WAVELENGTH_MIN = 360
WAVELENGTH_MAX = 830
