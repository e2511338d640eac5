"""
CIE 1931 2-degree colour-matching functions, sampled at 1 nm over 360-830 nm.
"""

from __future__ import annotations
import logging
from functools import lru_cache
from importlib import resources
import numpy as np
from ..constants import WAVELENGTH_MAX, WAVELENGTH_MIN

logger = logging.getLogger(__name__)

CIE_DATA_FILE = "cie_1931_2deg.csv"


@lru_cache(maxsize=None)
def cie_1931() -> np.ndarray:
    """
    Return the read-only ``(N, 4)`` table of ``wavelength, x_bar, y_bar, z_bar``.

    Loaded from package data on first call.
    """
    source = resources.files(__package__).joinpath("data").joinpath(CIE_DATA_FILE)
    with source.open("r", encoding="utf-8") as handle:
        table = np.loadtxt(handle, delimiter=",", skiprows=1, dtype=np.float64)

    expected = WAVELENGTH_MAX - WAVELENGTH_MIN + 1
    if table.shape != (expected, 4):
        raise ValueError(f"{CIE_DATA_FILE} has shape {table.shape}, expected ({expected}, 4)")

    table.flags.writeable = False
    logger.debug("Loaded %s (%d samples)", CIE_DATA_FILE, table.shape[0])
    return table


def cie_wavelengths() -> np.ndarray:
    return cie_1931()[:, 0]


def cie_x_bar() -> np.ndarray:
    return cie_1931()[:, 1]


def cie_y_bar() -> np.ndarray:
    return cie_1931()[:, 2]


def cie_z_bar() -> np.ndarray:
    return cie_1931()[:, 3]


def cie_step() -> float:
    """Wavelength spacing of the table in nanometers."""
    return (WAVELENGTH_MAX - WAVELENGTH_MIN) / (cie_1931().shape[0] - 1)
