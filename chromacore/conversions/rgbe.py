"""
RGBE shared-exponent encoding.

A 32-bit word holds three 8-bit mantissas and one biased exponent::

    R << 24 | G << 16 | B << 8 | (exponent + 128)

Encoding scales the mantissas by 255 while decoding scales by 256 (through
the ``2 ** (e - 136)`` table), matching previously encoded data.
The asymmetry makes repeated encode/decode cycles drift slowly toward zero.
"""

from __future__ import annotations
import logging
import math
import threading
import warnings
from typing import Optional, TypeVar
import numpy as np
from boundednumbers import clamp
from ..colors.color_base import ColorBase
from ..colors.rgb import Color3F
from ..constants import (
    BYTE_MASK,
    RGBE_EXPONENT_BIAS,
    RGBE_MANTISSA_SCALE,
    RGBE_TABLE_OFFSET,
    RGBE_TABLE_SIZE,
    RGBE_ZERO_THRESHOLD,
)
from ..utils.validators import require_instance, require_not_none

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=ColorBase)

_table: Optional[np.ndarray] = None
_table_lock = threading.Lock()


def _build_scale_table() -> np.ndarray:
    table = np.zeros(RGBE_TABLE_SIZE, dtype=np.float64)
    for i in range(1, RGBE_TABLE_SIZE):
        power = i - RGBE_TABLE_OFFSET
        scale = 1.0
        # Repeated doubling/halving keeps the table exact on every platform
        if power > 0:
            for _ in range(power):
                scale *= 2.0
        else:
            for _ in range(-power):
                scale *= 0.5
        table[i] = scale
    table.flags.writeable = False
    return table


def rgbe_scale_table() -> np.ndarray:
    """Return the read-only exponent -> scale table, building it on first use."""
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                _table = _build_scale_table()
                logger.debug("Built RGBE scale table (%d entries)", RGBE_TABLE_SIZE)
    return _table


def _mantissa_exponent(maximum: float) -> tuple[float, int]:
    """Split ``maximum`` into a mantissa in (0.5, 1] and a power of two."""
    mantissa = maximum
    exponent = 0
    if maximum > 1.0:
        while mantissa > 1.0:
            mantissa *= 0.5
            exponent += 1
    elif maximum <= 0.5:
        while mantissa <= 0.5:
            mantissa *= 2.0
            exponent -= 1
    return mantissa, exponent


def encode_rgbe(color: ColorBase) -> int:
    """
    Encode the color channels of ``color`` as an RGBE word.

    Colors whose largest channel is below 1e-32 encode to 0. Negative
    channels cannot be represented and are clamped to 0 with a warning.

    Raises:
        TypeError: if ``color`` is None.
        ValueError: if a channel is NaN or infinite, or too large for the
            8-bit exponent.
    """
    require_instance(color, ColorBase, "color")
    r, g, b = (float(v) for v in color.value[:3])
    if not all(math.isfinite(v) for v in (r, g, b)):
        raise ValueError(f"RGBE cannot encode non-finite channels: {color!r}")

    maximum = max(r, g, b)
    if maximum < RGBE_ZERO_THRESHOLD:
        return 0

    mantissa, exponent = _mantissa_exponent(maximum)
    biased = exponent + RGBE_EXPONENT_BIAS
    if biased > BYTE_MASK:
        raise ValueError(f"RGBE exponent {exponent} out of range for {color!r}")

    if min(r, g, b) < 0.0:
        warnings.warn(f"RGBE cannot store negative channels; clamping {color!r} to 0")

    multiplier = mantissa * RGBE_MANTISSA_SCALE / maximum
    red, green, blue = (clamp(int(v * multiplier), 0, BYTE_MASK) for v in (r, g, b))
    return (red << 24) | (green << 16) | (blue << 8) | biased


def decode_rgbe(word: int, cls: type[C] = Color3F) -> C:
    """
    Decode an RGBE word into a color of variant ``cls`` (alpha 1 for
    4-channel variants). Word 0 decodes to black.
    """
    require_not_none(word, "word")
    word = int(word)
    scale = rgbe_scale_table()[word & BYTE_MASK]
    red = scale * (((word >> 24) & BYTE_MASK) + 0.5)
    green = scale * (((word >> 16) & BYTE_MASK) + 0.5)
    blue = scale * (((word >> 8) & BYTE_MASK) + 0.5)
    return cls((red, green, blue))
