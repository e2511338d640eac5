"""
Spectral Curves
===============

Wavelength (nm) -> amplitude functions and their conversion to tristimulus
colors. The variant set is closed:

ConstantSpectralCurve    same amplitude at every wavelength
RegularSpectralCurve     N >= 2 samples evenly spaced over [lambda_min, lambda_max]
IrregularSpectralCurve   samples at explicit ascending wavelengths

Sampled curves return 0 outside their domain (NaN and infinite wavelengths
included) and interpolate linearly inside it. A constant curve returns its
amplitude for every wavelength, non-finite ones too.

``to_color_xyz`` sums ``sample(lambda) * bar(lambda)`` over the CIE 1931 table
at its native 1 nm spacing and multiplies by the spacing. Measured constants
derived from these curves depend on that exact quadrature.
"""

from __future__ import annotations
import math
from abc import ABC, abstractmethod
from bisect import bisect_right
from typing import Sequence, TypeVar, Union
import numpy as np
from numpy import ndarray
from ..colors.color_base import ColorBase
from ..colors.rgb import Color3F
from ..conversions.color_space import ColorSpace
from ..utils.floats import float_key
from ..utils.validators import require_not_none
from .cie import cie_step, cie_wavelengths, cie_x_bar, cie_y_bar, cie_z_bar

C = TypeVar("C", bound=ColorBase)


def _frozen_array(values, name: str) -> ndarray:
    require_not_none(values, name)
    arr = np.array(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    arr.flags.writeable = False
    return arr


class SpectralCurve(ABC):
    __slots__ = ("_is_frozen",)

    def __setattr__(self, name, value):
        if getattr(self, "_is_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        super().__setattr__("_is_frozen", True)

    @abstractmethod
    def sample(self, wavelength: float) -> float:
        """Amplitude at ``wavelength`` nanometers."""

    @abstractmethod
    def np_sample(self, wavelengths: ndarray) -> ndarray:
        """Vectorized :meth:`sample`."""

    def to_color_xyz(self, cls: type[C] = Color3F) -> C:
        """Integrate against the CIE 1931 matching functions; returns XYZ."""
        samples = self.np_sample(cie_wavelengths())
        step = cie_step()
        x = float(np.sum(samples * cie_x_bar())) * step
        y = float(np.sum(samples * cie_y_bar())) * step
        z = float(np.sum(samples * cie_z_bar())) * step
        return cls((x, y, z))

    def to_color_rgb(self, cls: type[C] = Color3F) -> C:
        """:meth:`to_color_xyz` converted to linear sRGB."""
        return ColorSpace.SRGB.convert_xyz_to_rgb(self.to_color_xyz(cls))


class ConstantSpectralCurve(SpectralCurve):
    __slots__ = ("amplitude",)

    def __init__(self, amplitude: float) -> None:
        require_not_none(amplitude, "amplitude")
        self.amplitude = float(amplitude)
        self._freeze()

    def sample(self, wavelength: float) -> float:
        return self.amplitude

    def np_sample(self, wavelengths: ndarray) -> ndarray:
        return np.full(np.shape(wavelengths), self.amplitude, dtype=np.float64)

    def __eq__(self, other):
        if not isinstance(other, ConstantSpectralCurve):
            return NotImplemented
        return float_key(self.amplitude) == float_key(other.amplitude)

    def __hash__(self):
        return hash(("constant", float_key(self.amplitude)))

    def __repr__(self) -> str:
        return f"ConstantSpectralCurve({self.amplitude!r})"


class RegularSpectralCurve(SpectralCurve):
    """
    Evenly spaced samples.

    Args:
        lambda_min: Wavelength of the first sample.
        lambda_max: Wavelength of the last sample.
        amplitudes: At least two amplitudes.
    """

    __slots__ = ("lambda_min", "lambda_max", "amplitudes", "delta")

    def __init__(self, lambda_min: float, lambda_max: float, amplitudes: Sequence[float]) -> None:
        amplitudes = _frozen_array(amplitudes, "amplitudes")
        if amplitudes.size < 2:
            raise ValueError(f"RegularSpectralCurve needs at least 2 samples, got {amplitudes.size}")
        if not lambda_max > lambda_min:
            raise ValueError(f"lambda_max={lambda_max} must be greater than lambda_min={lambda_min}")

        self.lambda_min = float(lambda_min)
        self.lambda_max = float(lambda_max)
        self.amplitudes = amplitudes
        self.delta = (self.lambda_max - self.lambda_min) / (amplitudes.size - 1)
        self._freeze()

    def sample(self, wavelength: float) -> float:
        if not self.lambda_min <= wavelength <= self.lambda_max:
            return 0.0
        index = (wavelength - self.lambda_min) / self.delta
        last = self.amplitudes.size - 1
        index0 = min(int(math.floor(index)), last)
        index1 = min(index0 + 1, last)
        t = index - index0
        a0 = float(self.amplitudes[index0])
        a1 = float(self.amplitudes[index1])
        return (1.0 - t) * a0 + t * a1

    def np_sample(self, wavelengths: ndarray) -> ndarray:
        wavelengths = np.asarray(wavelengths, dtype=np.float64)
        inside = (wavelengths >= self.lambda_min) & (wavelengths <= self.lambda_max)
        last = self.amplitudes.size - 1
        index = np.where(inside, (wavelengths - self.lambda_min) / self.delta, 0.0)
        index0 = np.minimum(np.floor(index).astype(np.intp), last)
        index1 = np.minimum(index0 + 1, last)
        t = index - index0
        values = (1.0 - t) * self.amplitudes[index0] + t * self.amplitudes[index1]
        return np.where(inside, values, 0.0)

    def __repr__(self) -> str:
        return (
            f"RegularSpectralCurve(lambda_min={self.lambda_min}, lambda_max={self.lambda_max}, "
            f"samples={self.amplitudes.size})"
        )


class IrregularSpectralCurve(SpectralCurve):
    """
    Samples at explicit, strictly ascending wavelengths.

    Args:
        amplitudes: Amplitude per wavelength.
        wavelengths: Matching wavelengths in nanometers.
    """

    __slots__ = ("amplitudes", "wavelengths")

    def __init__(self, amplitudes: Sequence[float], wavelengths: Sequence[float]) -> None:
        amplitudes = _frozen_array(amplitudes, "amplitudes")
        wavelengths = _frozen_array(wavelengths, "wavelengths")
        if amplitudes.size != wavelengths.size:
            raise ValueError(
                f"amplitudes ({amplitudes.size}) and wavelengths ({wavelengths.size}) differ in length"
            )
        if amplitudes.size == 0:
            raise ValueError("IrregularSpectralCurve needs at least one sample")
        if np.any(np.diff(wavelengths) <= 0.0):
            raise ValueError("wavelengths must be strictly ascending")

        self.amplitudes = amplitudes
        self.wavelengths = wavelengths
        self._freeze()

    @property
    def lambda_min(self) -> float:
        return float(self.wavelengths[0])

    @property
    def lambda_max(self) -> float:
        return float(self.wavelengths[-1])

    def sample(self, wavelength: float) -> float:
        if not self.lambda_min <= wavelength <= self.lambda_max:
            return 0.0
        if wavelength == self.lambda_max:
            return float(self.amplitudes[-1])
        upper = bisect_right(self.wavelengths, wavelength)
        lower = upper - 1
        w0 = float(self.wavelengths[lower])
        w1 = float(self.wavelengths[upper])
        t = (wavelength - w0) / (w1 - w0)
        return (1.0 - t) * float(self.amplitudes[lower]) + t * float(self.amplitudes[upper])

    def np_sample(self, wavelengths: ndarray) -> ndarray:
        wavelengths = np.asarray(wavelengths, dtype=np.float64)
        values = np.interp(wavelengths, self.wavelengths, self.amplitudes, left=0.0, right=0.0)
        return np.where(np.isfinite(wavelengths), values, 0.0)

    def __repr__(self) -> str:
        return (
            f"IrregularSpectralCurve(lambda_min={self.lambda_min}, lambda_max={self.lambda_max}, "
            f"samples={self.amplitudes.size})"
        )


SpectralCurveVariant = Union[ConstantSpectralCurve, RegularSpectralCurve, IrregularSpectralCurve]
