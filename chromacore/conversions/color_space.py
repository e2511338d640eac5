"""
RGB color spaces defined by a two-segment transfer curve and chromaticities.

The transfer curve is linear below ``break_point`` and a power law with
exponent ``1 / gamma`` above it. Slope, matching slope and segment offset are
solved once per space so the two segments meet with equal value and slope.

Scalar curves run in Python floats. Vectorized curves, matrices and the color
operations run in the dtype of their input, so float32 colors are evaluated
in single precision throughout.
"""

from __future__ import annotations
from typing import ClassVar, TypeVar
import numpy as np
from numpy import ndarray
from ..colors.color_base import ColorBase
from ..utils.floats import as_float_array
from ..utils.validators import require_instance

C = TypeVar("C", bound=ColorBase)


def _matrix_xyz_to_rgb(x_r, y_r, x_g, y_g, x_b, y_b, x_w, y_w) -> ndarray:
    z_r = 1.0 - (x_r + y_r)
    z_g = 1.0 - (x_g + y_g)
    z_b = 1.0 - (x_b + y_b)
    z_w = 1.0 - (x_w + y_w)

    r = np.array([y_g * z_b - y_b * z_g, x_b * z_g - x_g * z_b, x_g * y_b - x_b * y_g])
    g = np.array([y_b * z_r - y_r * z_b, x_r * z_b - x_b * z_r, x_b * y_r - x_r * y_b])
    b = np.array([y_r * z_g - y_g * z_r, x_g * z_r - x_r * z_g, x_r * y_g - x_g * y_r])

    white = np.array([x_w, y_w, z_w])
    rows = []
    for row in (r, g, b):
        # Scale each row so the white point maps to equal RGB
        row_white = (row[0] * white[0] + row[1] * white[1] + row[2] * white[2]) / y_w
        rows.append(row / row_white)
    return np.array(rows)


def _matrix_rgb_to_xyz(m: ndarray) -> ndarray:
    """Inverse of a 3x3 matrix by cofactors, laid out so ``xyz = M @ rgb``."""
    m = m.reshape(-1)
    a = m[0] * (m[4] * m[8] - m[7] * m[5])
    b = m[1] * (m[3] * m[8] - m[6] * m[5])
    c = m[2] * (m[3] * m[7] - m[6] * m[4])
    s = 1.0 / (a - b + c)

    x_r = s * (m[4] * m[8] - m[5] * m[7])
    y_r = s * (m[5] * m[6] - m[3] * m[8])
    z_r = s * (m[3] * m[7] - m[4] * m[6])
    x_g = s * (m[2] * m[7] - m[1] * m[8])
    y_g = s * (m[0] * m[8] - m[2] * m[6])
    z_g = s * (m[1] * m[6] - m[0] * m[7])
    x_b = s * (m[1] * m[5] - m[2] * m[4])
    y_b = s * (m[2] * m[3] - m[0] * m[5])
    z_b = s * (m[0] * m[4] - m[1] * m[3])

    return np.array([
        [x_r, x_g, x_b],
        [y_r, y_g, y_b],
        [z_r, z_g, z_b],
    ])


class ColorSpace:
    __slots__ = (
        "break_point", "gamma", "slope", "slope_match", "segment_offset",
        "matrix_rgb_to_xyz", "matrix_xyz_to_rgb", "_is_frozen",
    )

    ADOBE_RGB_1998: ClassVar[ColorSpace]
    ADOBE_WIDE_GAMUT_RGB: ClassVar[ColorSpace]
    APPLE: ClassVar[ColorSpace]
    CIE: ClassVar[ColorSpace]
    EBU: ClassVar[ColorSpace]
    HDTV: ClassVar[ColorSpace]
    NTSC: ClassVar[ColorSpace]
    SMPTE_240M: ClassVar[ColorSpace]
    SMPTE_C: ClassVar[ColorSpace]
    SRGB: ClassVar[ColorSpace]

    def __setattr__(self, name, value):
        if getattr(self, "_is_frozen", False):
            raise AttributeError(f"ColorSpace is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        break_point: float,
        gamma: float,
        x_r: float, y_r: float,
        x_g: float, y_g: float,
        x_b: float, y_b: float,
        x_w: float, y_w: float,
    ) -> None:
        """
        Args:
            break_point: Linear-light value where the curve switches from the
                linear segment to the power segment. 0 disables the linear segment.
            gamma: Decoding exponent of the power segment.
            x_r, y_r, x_g, y_g, x_b, y_b: CIE xy chromaticities of the primaries.
            x_w, y_w: CIE xy chromaticity of the white point.
        """
        if gamma <= 0.0:
            raise ValueError(f"gamma={gamma} must be positive")
        if y_w == 0.0:
            raise ValueError("white point y must be non-zero")

        self.break_point = break_point
        self.gamma = gamma
        if break_point > 0.0:
            self.slope = 1.0 / (gamma / break_point ** (1.0 / gamma - 1.0) - gamma * break_point + break_point)
            self.slope_match = gamma * self.slope / break_point ** (1.0 / gamma - 1.0)
            self.segment_offset = self.slope_match * break_point ** (1.0 / gamma) - self.slope * break_point
        else:
            self.slope = 1.0
            self.slope_match = 1.0
            self.segment_offset = 0.0

        xyz_to_rgb = _matrix_xyz_to_rgb(x_r, y_r, x_g, y_g, x_b, y_b, x_w, y_w)
        rgb_to_xyz = _matrix_rgb_to_xyz(xyz_to_rgb)
        xyz_to_rgb.flags.writeable = False
        rgb_to_xyz.flags.writeable = False
        self.matrix_xyz_to_rgb = xyz_to_rgb
        self.matrix_rgb_to_xyz = rgb_to_xyz

        super().__setattr__("_is_frozen", True)

    def __repr__(self) -> str:
        return f"ColorSpace(break_point={self.break_point!r}, gamma={self.gamma!r})"

    # ------------------ SCALAR CURVES ------------------
    def redo(self, value: float) -> float:
        """Encode one linear value."""
        if value <= self.break_point:
            return value * self.slope
        return self.slope_match * value ** (1.0 / self.gamma) - self.segment_offset

    def undo(self, value: float) -> float:
        """Decode one encoded value."""
        if value <= self.break_point * self.slope:
            return value / self.slope
        return ((value + self.segment_offset) / self.slope_match) ** self.gamma

    def np_redo(self, values: ndarray) -> ndarray:
        """Vectorized :meth:`redo`, evaluated in the floating dtype of ``values``."""
        values = as_float_array(values)
        t = values.dtype.type
        linear = values <= t(self.break_point)
        with np.errstate(invalid="ignore"):
            power = t(self.slope_match) * np.power(np.where(linear, t(0.0), values), t(1.0 / self.gamma)) - t(self.segment_offset)
        return np.where(linear, values * t(self.slope), power)

    def np_undo(self, values: ndarray) -> ndarray:
        """Vectorized :meth:`undo`, evaluated in the floating dtype of ``values``."""
        values = as_float_array(values)
        t = values.dtype.type
        linear = values <= t(self.break_point * self.slope)
        with np.errstate(invalid="ignore"):
            power = np.power((np.where(linear, t(0.0), values) + t(self.segment_offset)) / t(self.slope_match), t(self.gamma))
        return np.where(linear, values / t(self.slope), power)

    # ------------------ COLORS ------------------
    def redo_gamma_correction(self, color: C) -> C:
        """Encode the color channels of ``color``; alpha is untouched."""
        require_instance(color, ColorBase, "color")
        arr = color.array
        arr[:3] = self.np_redo(arr[:3])
        return type(color)(arr)

    def undo_gamma_correction(self, color: C) -> C:
        """Decode the color channels of ``color``; alpha is untouched."""
        require_instance(color, ColorBase, "color")
        arr = color.array
        arr[:3] = self.np_undo(arr[:3])
        return type(color)(arr)

    def convert_rgb_to_xyz(self, color: C) -> C:
        require_instance(color, ColorBase, "color")
        arr = color.array
        arr[:3] = self.matrix_rgb_to_xyz.astype(arr.dtype) @ arr[:3]
        return type(color)(arr)

    def convert_xyz_to_rgb(self, color: C) -> C:
        require_instance(color, ColorBase, "color")
        arr = color.array
        arr[:3] = self.matrix_xyz_to_rgb.astype(arr.dtype) @ arr[:3]
        return type(color)(arr)


ColorSpace.ADOBE_RGB_1998 = ColorSpace(0.0, 2.2, 0.6400, 0.3300, 0.2100, 0.7100, 0.1500, 0.0600, 0.31271, 0.32902)
ColorSpace.ADOBE_WIDE_GAMUT_RGB = ColorSpace(0.0, 563.0 / 256.0, 0.7347, 0.2653, 0.1152, 0.8264, 0.1566, 0.0177, 0.3457, 0.3585)
ColorSpace.APPLE = ColorSpace(0.0, 1.8, 0.6250, 0.3400, 0.2800, 0.5950, 0.1550, 0.0700, 0.31271, 0.32902)
ColorSpace.CIE = ColorSpace(0.0, 2.2, 0.7350, 0.2650, 0.2740, 0.7170, 0.1670, 0.0090, 1.0 / 3.0, 1.0 / 3.0)
ColorSpace.EBU = ColorSpace(0.018, 20.0 / 9.0, 0.6400, 0.3300, 0.2900, 0.6000, 0.1500, 0.0600, 0.31271, 0.32902)
ColorSpace.HDTV = ColorSpace(0.018, 20.0 / 9.0, 0.6400, 0.3300, 0.3000, 0.6000, 0.1500, 0.0600, 0.31271, 0.32902)
ColorSpace.NTSC = ColorSpace(0.018, 20.0 / 9.0, 0.6700, 0.3300, 0.2100, 0.7100, 0.1400, 0.0800, 0.31010, 0.31620)
ColorSpace.SMPTE_240M = ColorSpace(0.018, 20.0 / 9.0, 0.6300, 0.3400, 0.3100, 0.5950, 0.1550, 0.0700, 0.31271, 0.32902)
ColorSpace.SMPTE_C = ColorSpace(0.018, 20.0 / 9.0, 0.6300, 0.3400, 0.3100, 0.5950, 0.1550, 0.0700, 0.31271, 0.32902)
ColorSpace.SRGB = ColorSpace(0.00304, 2.4, 0.6400, 0.3300, 0.3000, 0.6000, 0.1500, 0.0600, 0.31271, 0.32902)
