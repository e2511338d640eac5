"""
Measured complex refractive indices of common conductors.

``eta`` is the real index of refraction and ``k`` the absorption coefficient,
each tabulated against wavelength in nanometers. Their RGB projections are the
usual inputs to conductor Fresnel terms.
"""

from __future__ import annotations
import logging
from functools import lru_cache
from importlib import resources
from typing import Literal, TypeVar
import numpy as np
from ..colors.color_base import ColorBase
from ..colors.rgb import Color3F
from .curves import IrregularSpectralCurve

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=ColorBase)

METALS_DATA_FILE = "metals.csv"
METALS = ("ag", "al", "au", "be", "cr", "cu", "hg")
METAL_COMPONENTS = ("eta", "k")

MetalComponent = Literal["eta", "k"]


@lru_cache(maxsize=None)
def _metal_tables() -> dict[str, np.ndarray]:
    source = resources.files(__package__).joinpath("data").joinpath(METALS_DATA_FILE)
    with source.open("r", encoding="utf-8") as handle:
        rows = np.genfromtxt(
            handle,
            delimiter=",",
            names=True,
            dtype=None,
            encoding="utf-8",
        )

    tables = {}
    for metal in METALS:
        selected = rows[rows["metal"] == metal]
        if selected.size == 0:
            raise ValueError(f"{METALS_DATA_FILE} has no rows for metal {metal!r}")
        table = np.column_stack([
            selected["wavelength"].astype(np.float64),
            selected["eta"].astype(np.float64),
            selected["k"].astype(np.float64),
        ])
        table.flags.writeable = False
        tables[metal] = table

    logger.debug("Loaded %s (%d metals, %d rows)", METALS_DATA_FILE, len(tables), rows.size)
    return tables


def _normalize_metal(metal: str) -> str:
    if not isinstance(metal, str):
        raise TypeError(f"metal must be a str, got {type(metal).__name__}")
    key = metal.lower()
    if key not in METALS:
        raise ValueError(f"Unknown metal {metal!r}; expected one of: {', '.join(METALS)}")
    return key


def _normalize_component(component: str) -> str:
    if component not in METAL_COMPONENTS:
        raise ValueError(f"Unknown component {component!r}; expected 'eta' or 'k'")
    return component


@lru_cache(maxsize=None)
def _metal_curve(metal: str, component: str) -> IrregularSpectralCurve:
    table = _metal_tables()[metal]
    column = 1 if component == "eta" else 2
    return IrregularSpectralCurve(table[:, column], table[:, 0])


def metal_curve(metal: str, component: MetalComponent) -> IrregularSpectralCurve:
    """
    Return the spectral curve for ``component`` (``"eta"`` or ``"k"``) of
    ``metal`` (case-insensitive, one of :data:`METALS`).
    """
    return _metal_curve(_normalize_metal(metal), _normalize_component(component))


@lru_cache(maxsize=None)
def _metal_color(metal: str, component: str, cls: type) -> ColorBase:
    return _metal_curve(metal, component).to_color_rgb(cls)


def metal_color(metal: str, component: MetalComponent, cls: type[C] = Color3F) -> C:
    """RGB projection of :func:`metal_curve`, computed once per argument set."""
    return _metal_color(_normalize_metal(metal), _normalize_component(component), cls)
