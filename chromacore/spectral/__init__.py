"""
Spectral curves, CIE 1931 matching functions and measured metal data.

>>> from chromacore.spectral import RegularSpectralCurve, metal_color
>>> curve = RegularSpectralCurve(400.0, 700.0, [0.1, 0.5, 0.9])
>>> curve.sample(550.0)
0.5
>>> metal_color("au", "k")
"""

from .cie import cie_1931, cie_wavelengths, cie_x_bar, cie_y_bar, cie_z_bar, cie_step
from .curves import (
    SpectralCurve,
    SpectralCurveVariant,
    ConstantSpectralCurve,
    RegularSpectralCurve,
    IrregularSpectralCurve,
)
from .metals import METALS, METAL_COMPONENTS, metal_curve, metal_color

__all__ = [
    "cie_1931", "cie_wavelengths", "cie_x_bar", "cie_y_bar", "cie_z_bar", "cie_step",
    "SpectralCurve", "SpectralCurveVariant",
    "ConstantSpectralCurve", "RegularSpectralCurve", "IrregularSpectralCurve",
    "METALS", "METAL_COMPONENTS", "metal_curve", "metal_color",
]
