"""
Tests for working space matrix derivation.
"""

from __future__ import annotations

import threading

import numpy as np
import pytest

from rgbxyz import SingularMatrixError, WorkingSpaceMatrixCache, rgb_to_xyz_matrix, xyz_to_rgb_matrix
from rgbxyz.core.colors import Chromaticity, ReferenceWhite, RGBPrimaries, RGBWorkingSpace
from rgbxyz.core.matrix import invert_matrix
from rgbxyz.spaces import SRGB_COMPANDING, WORKING_SPACES, illuminants
from rgbxyz.spaces.working_spaces import ADOBE_RGB_1998, SRGB


def _space(red, green, blue, white=illuminants.D65) -> RGBWorkingSpace:
    primaries = RGBPrimaries(Chromaticity(*red), Chromaticity(*green), Chromaticity(*blue))
    return RGBWorkingSpace(primaries, white, SRGB_COMPANDING)


def test_srgb_matrix_matches_reference() -> None:
    expected = np.array(
        [
            [0.4124564, 0.3575761, 0.1804375],
            [0.2126729, 0.7151522, 0.0721750],
            [0.0193339, 0.1191920, 0.9503041],
        ]
    )
    np.testing.assert_allclose(rgb_to_xyz_matrix(SRGB), expected, atol=1e-6)


@pytest.mark.parametrize("working_space", list(WORKING_SPACES.values()), ids=lambda ws: ws.name)
def test_white_maps_to_reference_white(working_space: RGBWorkingSpace) -> None:
    matrix = rgb_to_xyz_matrix(working_space)
    np.testing.assert_allclose(matrix @ np.ones(3), working_space.reference_white.vector, rtol=1e-9)
    # Y row sums to the luminance of the white
    assert np.isclose(matrix[1].sum(), 1.0)


def test_inverse_matrix() -> None:
    forward = rgb_to_xyz_matrix(ADOBE_RGB_1998)
    inverse = xyz_to_rgb_matrix(ADOBE_RGB_1998)
    np.testing.assert_allclose(forward @ inverse, np.eye(3), atol=1e-12)


def test_derivation_is_deterministic() -> None:
    assert np.array_equal(rgb_to_xyz_matrix(SRGB), rgb_to_xyz_matrix(SRGB))


def test_zero_y_primaries_are_singular() -> None:
    degenerate = _space((0.2, 0.0), (0.4, 0.0), (0.6, 0.0))
    with pytest.raises(SingularMatrixError):
        rgb_to_xyz_matrix(degenerate)


def test_identical_primaries_are_singular() -> None:
    degenerate = _space((0.64, 0.33), (0.64, 0.33), (0.15, 0.06))
    with pytest.raises(SingularMatrixError):
        rgb_to_xyz_matrix(degenerate)


def test_collinear_primaries_are_singular() -> None:
    degenerate = _space((0.2, 0.2), (0.3, 0.3), (0.4, 0.4))
    with pytest.raises(SingularMatrixError):
        xyz_to_rgb_matrix(degenerate)


def test_invert_matrix_rejects_singular_input() -> None:
    with pytest.raises(SingularMatrixError):
        invert_matrix(np.zeros((3, 3)))
    with pytest.raises(SingularMatrixError):
        invert_matrix(np.full((3, 3), np.nan))


def test_cache_reuses_entries_by_value() -> None:
    cache = WorkingSpaceMatrixCache()
    first = cache.rgb_to_xyz(SRGB)
    # Equal by value, different identity and name
    clone = RGBWorkingSpace(SRGB.primaries, SRGB.reference_white, SRGB.companding, name="copy")
    assert cache.rgb_to_xyz(clone) is first
    assert len(cache) == 1

    with pytest.raises(ValueError):
        first[0, 0] = 1.0

    cache.clear()
    assert len(cache) == 0


def test_cache_concurrent_readers() -> None:
    cache = WorkingSpaceMatrixCache()
    results = []

    def worker() -> None:
        results.append(cache.xyz_to_rgb(SRGB))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 1
    assert all(result is results[0] for result in results)


def test_reference_white_from_chromaticity() -> None:
    white = ReferenceWhite.from_chromaticity(Chromaticity(0.31271, 0.32902), name="D65 xy")
    np.testing.assert_allclose(white.vector, illuminants.D65.vector, atol=1e-3)
    assert white.y == 1.0
