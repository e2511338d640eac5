"""
Chromacore Conversions
======================

Transfer functions, color space matrices, tone mapping and the RGBE codec.
Every function takes and returns chromacore colors; alpha channels pass
through untouched.

Color Spaces
------------
ColorSpace(break_point, gamma, xR, yR, xG, yG, xB, yB, xW, yW)
    Two-segment transfer curve plus primaries. Presets:
    ADOBE_RGB_1998, ADOBE_WIDE_GAMUT_RGB, APPLE, CIE, EBU, HDTV, NTSC,
    SMPTE_240M, SMPTE_C, SRGB
ColorSpace.redo_gamma_correction(color) / undo_gamma_correction(color)
ColorSpace.convert_rgb_to_xyz(color) / convert_xyz_to_rgb(color)

PBRT and sRGB shortcuts
-----------------------
redo_gamma_correction_pbrt, undo_gamma_correction_pbrt
convert_rgb_to_xyz_pbrt, convert_xyz_to_rgb_pbrt
redo_gamma_correction_srgb, undo_gamma_correction_srgb
convert_rgb_to_xyz_srgb, convert_xyz_to_rgb_srgb

Tone Mapping
------------
tone_map(color, exposure, operator="reinhard")
    operator: ToneMapperType value or any ToneMapper instance
Reinhard, ReinhardModifiedV1, ReinhardModifiedV2, FilmicCurve,
ACESModifiedV1, FilmicGammaCorrection22, Unreal3

RGBE
----
encode_rgbe(color) -> int
decode_rgbe(word, cls=Color3F) -> color

Examples
--------
>>> from chromacore.colors import Color3F
>>> from chromacore.conversions import ColorSpace, tone_map, encode_rgbe
>>> linear = ColorSpace.SRGB.undo_gamma_correction(Color3F((0.5, 0.5, 0.5)))
>>> tone_map(Color3F(4.0), exposure=1.0, operator="aces_modified_v1")
>>> encode_rgbe(Color3F((1.0, 0.5, 0.25)))
"""

from .color_space import ColorSpace
from .transfer import (
    redo_gamma_pbrt, undo_gamma_pbrt,
    redo_gamma_correction_pbrt, undo_gamma_correction_pbrt,
    convert_rgb_to_xyz_pbrt, convert_xyz_to_rgb_pbrt,
    redo_gamma_correction_srgb, undo_gamma_correction_srgb,
    convert_rgb_to_xyz_srgb, convert_xyz_to_rgb_srgb,
)
from .tone_mapping import (
    ToneMapper, ToneMapperType, tone_mappers,
    Reinhard, ReinhardModifiedV1, ReinhardModifiedV2,
    FilmicCurve, ACESModifiedV1, FilmicGammaCorrection22, Unreal3,
    get_tone_mapper, tone_map, tone_map_filmic_curve,
)
from .rgbe import encode_rgbe, decode_rgbe, rgbe_scale_table

__all__ = [
    # Color spaces
    "ColorSpace",

    # PBRT / sRGB
    "redo_gamma_pbrt", "undo_gamma_pbrt",
    "redo_gamma_correction_pbrt", "undo_gamma_correction_pbrt",
    "convert_rgb_to_xyz_pbrt", "convert_xyz_to_rgb_pbrt",
    "redo_gamma_correction_srgb", "undo_gamma_correction_srgb",
    "convert_rgb_to_xyz_srgb", "convert_xyz_to_rgb_srgb",

    # Tone mapping
    "ToneMapper", "ToneMapperType", "tone_mappers",
    "Reinhard", "ReinhardModifiedV1", "ReinhardModifiedV2",
    "FilmicCurve", "ACESModifiedV1", "FilmicGammaCorrection22", "Unreal3",
    "get_tone_mapper", "tone_map", "tone_map_filmic_curve",

    # RGBE
    "encode_rgbe", "decode_rgbe", "rgbe_scale_table",
]
