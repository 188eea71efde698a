"""
Tests for the torch conversion path. Skipped automatically when torch is unavailable.
"""

from __future__ import annotations

import numpy as np
import pytest

torch = pytest.importorskip("torch")

from rgbxyz import CompandingFunction, RGBWorkingSpace, RGBXYZConverter  # noqa: E402
from rgbxyz.spaces import illuminants  # noqa: E402
from rgbxyz.spaces.working_spaces import ECI_RGB_V2, PROPHOTO_RGB, REC_2020, SRGB  # noqa: E402
from rgbxyz.torch import TorchRGBXYZConverter  # noqa: E402


def test_matches_numpy_path() -> None:
    img = torch.rand(8, 8, 3, dtype=torch.float64)
    tconv = TorchRGBXYZConverter(device=torch.device("cpu"), dtype=torch.float64)
    nconv = RGBXYZConverter()

    xyz = tconv.rgb_to_xyz(img, SRGB, illuminants.D50)
    expected = nconv.rgb_array_to_xyz(img.numpy(), SRGB, illuminants.D50)

    assert xyz.shape == img.shape
    np.testing.assert_allclose(xyz.numpy(), expected, atol=1e-9)


@pytest.mark.parametrize("working_space", [SRGB, PROPHOTO_RGB, ECI_RGB_V2, REC_2020], ids=lambda ws: ws.name)
def test_batched_round_trip(working_space: RGBWorkingSpace) -> None:
    img = torch.rand(2, 3, 8, 8, dtype=torch.float64) * 0.9 + 0.05
    tconv = TorchRGBXYZConverter(dtype=torch.float64)

    xyz = tconv.rgb_to_xyz(img, working_space)
    back = tconv.xyz_to_rgb(xyz, working_space.reference_white, working_space)

    assert back.shape == img.shape
    assert torch.allclose(back, img, atol=1e-6)


def test_output_is_clamped() -> None:
    tconv = TorchRGBXYZConverter()
    xyz = torch.rand(3, 4, 4) * 3.0
    rgb = tconv.xyz_to_rgb(xyz, illuminants.D65)
    assert rgb.shape == xyz.shape
    assert torch.isfinite(rgb).all()
    assert (rgb >= 0).all() and (rgb <= 1).all()


def test_unknown_companding_raises() -> None:
    custom = CompandingFunction("custom", lambda v: v, lambda v: v)
    space = RGBWorkingSpace(SRGB.primaries, SRGB.reference_white, custom)
    with pytest.raises(KeyError):
        TorchRGBXYZConverter().rgb_to_xyz(torch.rand(4, 4, 3), space)
