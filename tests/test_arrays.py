"""
Tests for array conversion paths.
"""

from __future__ import annotations

import numpy as np
import pytest

from rgbxyz import RGBColor, RGBXYZConverter
from rgbxyz.spaces import illuminants
from rgbxyz.spaces.working_spaces import ADOBE_RGB_1998, SRGB, WIDE_GAMUT_RGB


def test_image_round_trip() -> None:
    converter = RGBXYZConverter()
    rng = np.random.default_rng(0)
    img = rng.uniform(0.05, 0.95, size=(16, 16, 3))

    xyz = converter.rgb_array_to_xyz(img, ADOBE_RGB_1998)
    back = converter.xyz_array_to_rgb(xyz, illuminants.D65, ADOBE_RGB_1998)

    assert xyz.shape == img.shape
    np.testing.assert_allclose(back, img, atol=1e-9)


def test_arrays_match_single_colors() -> None:
    converter = RGBXYZConverter()
    rng = np.random.default_rng(1)
    pixels = rng.random((8, 3))

    xyz = converter.rgb_array_to_xyz(pixels, SRGB, illuminants.D50)
    rgb = converter.xyz_array_to_rgb(xyz, illuminants.D50, WIDE_GAMUT_RGB)

    for pixel, xyz_row, rgb_row in zip(pixels, xyz, rgb):
        single = converter.rgb_to_xyz(RGBColor(*pixel, SRGB), illuminants.D50)
        np.testing.assert_allclose(xyz_row, single.vector, atol=1e-12)
        np.testing.assert_allclose(rgb_row, converter.xyz_to_rgb(single, WIDE_GAMUT_RGB).vector, atol=1e-12)


def test_array_output_is_clamped() -> None:
    converter = RGBXYZConverter()
    xyz = np.array([[0.1, 0.8, 0.05], [1.5, 1.5, 1.5], [0.0, 0.0, 0.5]])
    rgb = converter.xyz_array_to_rgb(xyz, illuminants.D65)
    assert rgb.min() >= 0.0 and rgb.max() <= 1.0


def test_rejects_wrong_channel_count() -> None:
    converter = RGBXYZConverter()
    with pytest.raises(ValueError):
        converter.rgb_array_to_xyz(np.zeros((4, 4)), SRGB)
    with pytest.raises(ValueError):
        converter.xyz_array_to_rgb(np.float64(0.5), illuminants.D65)
