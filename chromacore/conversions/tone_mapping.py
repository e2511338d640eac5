"""
Tone Mapping Operators
======================

Each operator compresses linear light into a displayable range. All share one
contract, ``operator(color, exposure) -> color``: the three color channels are
scaled by ``exposure`` and mapped; alpha passes through. New curves are added
as new :class:`ToneMapper` subclasses and registered in :data:`tone_mappers`.

Operators
---------
Reinhard                 x / (1 + x)
ReinhardModifiedV1       x * (1 + x / white_point**2) / (1 + x)
ReinhardModifiedV2       1 - exp(-x * exposure)
FilmicCurve              saturate(y (a y + b) / (y (c y + d) + e)), y = max(x - subtract, minimum)
ACESModifiedV1           FilmicCurve(2.51, 0.03, 2.43, 0.59, 0.14)
FilmicGammaCorrection22  FilmicCurve(6.2, 0.5, 6.2, 1.7, 0.06, subtract=0.004, minimum=0)
Unreal3                  saturate(x / (x + 0.155) * 1.019)

The Reinhard family is left unsaturated; every other operator saturates to
[0, 1].
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, TypeVar
import numpy as np
from numpy import ndarray
from ..colors.color_base import ColorBase
from ..constants import (
    ACES_MODIFIED_V1_COEFFICIENTS,
    FILMIC_GAMMA_22_COEFFICIENTS,
    FILMIC_GAMMA_22_MINIMUM,
    FILMIC_GAMMA_22_SUBTRACT,
    REINHARD_WHITE_POINT,
    UNREAL3_OFFSET,
    UNREAL3_SCALE,
)
from ..types.precision_type import precision_min_values
from ..utils.floats import np_saturate
from ..utils.validators import require_instance

C = TypeVar("C", bound=ColorBase)


class ToneMapper(ABC):
    """A ``Color x exposure -> Color`` curve applied to the color channels."""

    def __call__(self, color: C, exposure: float = 1.0) -> C:
        require_instance(color, ColorBase, "color")
        arr = color.array
        dtype = arr.dtype.type
        x = arr[:3] * dtype(exposure)
        with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
            arr[:3] = self._map(x, dtype(exposure), color)
        return type(color)(arr)

    @abstractmethod
    def _map(self, x: ndarray, exposure, color: ColorBase) -> ndarray:
        """Map exposed channels ``x`` (in the color's dtype)."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Reinhard(ToneMapper):
    def _map(self, x, exposure, color):
        return x / (x.dtype.type(1.0) + x)


class ReinhardModifiedV1(ToneMapper):
    def __init__(self, white_point: float = REINHARD_WHITE_POINT) -> None:
        if white_point <= 0.0:
            raise ValueError(f"white_point={white_point} must be positive")
        self.white_point = white_point

    def _map(self, x, exposure, color):
        one = x.dtype.type(1.0)
        white_squared = x.dtype.type(self.white_point * self.white_point)
        return x * (one + x / white_squared) / (one + x)

    def __repr__(self) -> str:
        return f"ReinhardModifiedV1(white_point={self.white_point!r})"


class ReinhardModifiedV2(ToneMapper):
    # Exposure enters twice: once in x, once in the exponent
    def _map(self, x, exposure, color):
        return x.dtype.type(1.0) - np.exp(-x * exposure)


class FilmicCurve(ToneMapper):
    """
    Six-parameter rational filmic curve.

    Args:
        a, b, c, d, e: Curve coefficients.
        subtract: Amount removed from the exposed value before the curve.
        minimum: Floor of the shifted value. ``None`` uses the smallest
            positive subnormal of the color's precision.
    """

    def __init__(
        self,
        a: float,
        b: float,
        c: float,
        d: float,
        e: float,
        subtract: float = 0.0,
        minimum: Optional[float] = None,
    ) -> None:
        self.a, self.b, self.c, self.d, self.e = a, b, c, d, e
        self.subtract = subtract
        self.minimum = minimum

    def _map(self, x, exposure, color):
        dtype = x.dtype.type
        floor = precision_min_values[color.precision] if self.minimum is None else self.minimum
        y = np.maximum(x - dtype(self.subtract), dtype(floor))
        a, b, c, d, e = (dtype(v) for v in (self.a, self.b, self.c, self.d, self.e))
        return np_saturate(y * (a * y + b) / (y * (c * y + d) + e))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(a={self.a}, b={self.b}, c={self.c}, d={self.d}, "
            f"e={self.e}, subtract={self.subtract}, minimum={self.minimum})"
        )


class ACESModifiedV1(FilmicCurve):
    def __init__(self) -> None:
        super().__init__(*ACES_MODIFIED_V1_COEFFICIENTS)


class FilmicGammaCorrection22(FilmicCurve):
    """Filmic curve with the 2.2 display gamma folded in."""

    def __init__(self) -> None:
        super().__init__(
            *FILMIC_GAMMA_22_COEFFICIENTS,
            subtract=FILMIC_GAMMA_22_SUBTRACT,
            minimum=FILMIC_GAMMA_22_MINIMUM,
        )


class Unreal3(ToneMapper):
    def _map(self, x, exposure, color):
        dtype = x.dtype.type
        return np_saturate(x / (x + dtype(UNREAL3_OFFSET)) * dtype(UNREAL3_SCALE))


class ToneMapperType(str, Enum):
    REINHARD = "reinhard"
    REINHARD_MODIFIED_V1 = "reinhard_modified_v1"
    REINHARD_MODIFIED_V2 = "reinhard_modified_v2"
    ACES_MODIFIED_V1 = "aces_modified_v1"
    FILMIC_GAMMA_CORRECTION_22 = "filmic_gamma_correction_22"
    UNREAL3 = "unreal3"


tone_mappers: dict[ToneMapperType, ToneMapper] = {
    ToneMapperType.REINHARD: Reinhard(),
    ToneMapperType.REINHARD_MODIFIED_V1: ReinhardModifiedV1(),
    ToneMapperType.REINHARD_MODIFIED_V2: ReinhardModifiedV2(),
    ToneMapperType.ACES_MODIFIED_V1: ACESModifiedV1(),
    ToneMapperType.FILMIC_GAMMA_CORRECTION_22: FilmicGammaCorrection22(),
    ToneMapperType.UNREAL3: Unreal3(),
}


def get_tone_mapper(operator: ToneMapperType | str | ToneMapper) -> ToneMapper:
    if isinstance(operator, ToneMapper):
        return operator
    try:
        return tone_mappers[ToneMapperType(operator)]
    except ValueError:
        valid = ", ".join(t.value for t in ToneMapperType)
        raise ValueError(f"Unknown tone mapper {operator!r}; expected one of: {valid}") from None


def tone_map(color: C, exposure: float = 1.0, operator: ToneMapperType | str | ToneMapper = ToneMapperType.REINHARD) -> C:
    """Tone map ``color`` with a registered operator or a ``ToneMapper`` instance."""
    return get_tone_mapper(operator)(color, exposure)


def tone_map_filmic_curve(
    color: C,
    exposure: float,
    a: float, b: float, c: float, d: float, e: float,
    subtract: float = 0.0,
    minimum: Optional[float] = None,
) -> C:
    return FilmicCurve(a, b, c, d, e, subtract, minimum)(color, exposure)
