"""
Fixed-coefficient transfer functions and RGB/XYZ matrices as used by PBRT,
plus sRGB shortcuts backed by :data:`ColorSpace.SRGB`.

Only the three color channels are transformed; alpha is untouched. Color and
array operations are evaluated in the dtype of the input, so float32 colors
never pass through double precision.
"""

from __future__ import annotations
from typing import TypeVar
import numpy as np
from numpy import ndarray
from ..colors.color_base import ColorBase
from ..constants import (
    PBRT_DECODE_BREAK_POINT,
    PBRT_ENCODE_BREAK_POINT,
    PBRT_GAMMA,
    PBRT_LINEAR_SCALE,
    PBRT_RGB_TO_XYZ,
    PBRT_SEGMENT_OFFSET,
    PBRT_SEGMENT_SCALE,
    PBRT_XYZ_TO_RGB,
)
from ..utils.floats import as_float_array
from ..utils.validators import require_instance
from .color_space import ColorSpace

C = TypeVar("C", bound=ColorBase)

_RGB_TO_XYZ = np.array(PBRT_RGB_TO_XYZ)
_XYZ_TO_RGB = np.array(PBRT_XYZ_TO_RGB)


def redo_gamma_pbrt(value: float) -> float:
    if value <= PBRT_ENCODE_BREAK_POINT:
        return PBRT_LINEAR_SCALE * value
    return PBRT_SEGMENT_SCALE * value ** (1.0 / PBRT_GAMMA) - PBRT_SEGMENT_OFFSET


def undo_gamma_pbrt(value: float) -> float:
    if value <= PBRT_DECODE_BREAK_POINT:
        return value / PBRT_LINEAR_SCALE
    return ((value + PBRT_SEGMENT_OFFSET) / PBRT_SEGMENT_SCALE) ** PBRT_GAMMA


def np_redo_gamma_pbrt(values: ndarray) -> ndarray:
    values = as_float_array(values)
    t = values.dtype.type
    linear = values <= t(PBRT_ENCODE_BREAK_POINT)
    power = t(PBRT_SEGMENT_SCALE) * np.power(np.where(linear, t(0.0), values), t(1.0 / PBRT_GAMMA)) - t(PBRT_SEGMENT_OFFSET)
    return np.where(linear, t(PBRT_LINEAR_SCALE) * values, power)


def np_undo_gamma_pbrt(values: ndarray) -> ndarray:
    values = as_float_array(values)
    t = values.dtype.type
    linear = values <= t(PBRT_DECODE_BREAK_POINT)
    power = np.power((np.where(linear, t(0.0), values) + t(PBRT_SEGMENT_OFFSET)) / t(PBRT_SEGMENT_SCALE), t(PBRT_GAMMA))
    return np.where(linear, values / t(PBRT_LINEAR_SCALE), power)


def _transform(color: C, fn) -> C:
    require_instance(color, ColorBase, "color")
    arr = color.array
    arr[:3] = fn(arr[:3])
    return type(color)(arr)


def redo_gamma_correction_pbrt(color: C) -> C:
    return _transform(color, np_redo_gamma_pbrt)


def undo_gamma_correction_pbrt(color: C) -> C:
    return _transform(color, np_undo_gamma_pbrt)


def convert_rgb_to_xyz_pbrt(color: C) -> C:
    return _transform(color, lambda rgb: _RGB_TO_XYZ.astype(rgb.dtype) @ rgb)


def convert_xyz_to_rgb_pbrt(color: C) -> C:
    return _transform(color, lambda xyz: _XYZ_TO_RGB.astype(xyz.dtype) @ xyz)


def redo_gamma_correction_srgb(color: C) -> C:
    return ColorSpace.SRGB.redo_gamma_correction(color)


def undo_gamma_correction_srgb(color: C) -> C:
    return ColorSpace.SRGB.undo_gamma_correction(color)


def convert_rgb_to_xyz_srgb(color: C) -> C:
    return ColorSpace.SRGB.convert_rgb_to_xyz(color)


def convert_xyz_to_rgb_srgb(color: C) -> C:
    return ColorSpace.SRGB.convert_xyz_to_rgb(color)
