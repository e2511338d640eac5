import numpy as np
import pytest
from chromacore.colors import Color3D, Color3F, Color4D
from chromacore.conversions.transfer import np_redo_gamma_pbrt, np_undo_gamma_pbrt
from chromacore.conversions import (
    ColorSpace,
    redo_gamma_pbrt, undo_gamma_pbrt,
    redo_gamma_correction_pbrt, undo_gamma_correction_pbrt,
    convert_rgb_to_xyz_pbrt, convert_xyz_to_rgb_pbrt,
    redo_gamma_correction_srgb, undo_gamma_correction_srgb,
    convert_rgb_to_xyz_srgb, convert_xyz_to_rgb_srgb,
)


def test_pbrt_linear_segment():
    assert redo_gamma_pbrt(0.001) == pytest.approx(0.01292)
    assert undo_gamma_pbrt(0.01292) == pytest.approx(0.001)


def test_pbrt_power_segment():
    assert redo_gamma_pbrt(1.0) == pytest.approx(1.0)
    assert redo_gamma_pbrt(0.5) == pytest.approx(1.055 * 0.5 ** (1.0 / 2.4) - 0.055)
    for v in (0.01, 0.18, 0.5, 0.9):
        assert undo_gamma_pbrt(redo_gamma_pbrt(v)) == pytest.approx(v, rel=1e-9)


def test_pbrt_color_gamma_keeps_alpha():
    color = Color4D((0.001, 0.18, 0.5, 0.4))
    encoded = redo_gamma_correction_pbrt(color)
    assert encoded.a == 0.4
    assert encoded.r == pytest.approx(0.01292)
    assert undo_gamma_correction_pbrt(encoded).is_close(color)


def test_pbrt_matrices():
    xyz = convert_rgb_to_xyz_pbrt(Color3D((1.0, 0.0, 0.0)))
    assert np.allclose(xyz.value, (0.412453, 0.212671, 0.019334))
    round_trip = convert_xyz_to_rgb_pbrt(convert_rgb_to_xyz_pbrt(Color3D((0.2, 0.4, 0.6))))
    assert np.allclose(round_trip.value, (0.2, 0.4, 0.6), atol=1e-5)


def test_srgb_shortcuts_match_color_space():
    color = Color3D((0.1, 0.5, 0.9))
    assert redo_gamma_correction_srgb(color) == ColorSpace.SRGB.redo_gamma_correction(color)
    assert undo_gamma_correction_srgb(color) == ColorSpace.SRGB.undo_gamma_correction(color)
    assert convert_rgb_to_xyz_srgb(color) == ColorSpace.SRGB.convert_rgb_to_xyz(color)
    assert convert_xyz_to_rgb_srgb(color) == ColorSpace.SRGB.convert_xyz_to_rgb(color)


def test_pbrt_float_colors_stay_in_single_precision():
    values = np.array([0.001, 0.18, 0.5], dtype=np.float32)
    encoded = np_redo_gamma_pbrt(values)
    assert encoded.dtype == np.float32
    assert np_undo_gamma_pbrt(encoded).dtype == np.float32
    color = redo_gamma_correction_pbrt(Color3F(tuple(values.tolist())))
    assert np.array_equal(color.array, encoded)
    assert np.allclose(encoded, [redo_gamma_pbrt(float(v)) for v in values], rtol=1e-6)
