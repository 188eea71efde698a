"""
Advanced rgbxyz usage scenarios.
"""

from __future__ import annotations

import numpy as np

from rgbxyz import (
    AdaptationMethod,
    AdaptationMethodType,
    ChromaticAdaptation,
    Chromaticity,
    ConverterConfig,
    RGBColor,
    RGBPrimaries,
    RGBWorkingSpace,
    RGBXYZConverter,
    WorkingSpaceName,
)
from rgbxyz.spaces import gamma_companding, illuminants
from rgbxyz.spaces.working_spaces import SRGB


def example_image_conversion() -> np.ndarray:
    """Convert an sRGB image to Rec. 2020 through XYZ."""

    img = np.random.rand(256, 256, 3)
    converter = RGBXYZConverter(ConverterConfig(default_working_space=WorkingSpaceName.REC_2020))
    xyz = converter.rgb_array_to_xyz(img, SRGB)
    img_2020 = converter.xyz_array_to_rgb(xyz, SRGB.reference_white)
    print(f"Rec. 2020 image range: [{img_2020.min():0.3f}, {img_2020.max():0.3f}]")
    return img_2020


def example_custom_working_space() -> RGBColor:
    """Define a working space that is not in the catalog."""

    primaries = RGBPrimaries(Chromaticity(0.68, 0.32), Chromaticity(0.265, 0.69), Chromaticity(0.15, 0.06))
    p3_like = RGBWorkingSpace(primaries, illuminants.D65, gamma_companding(2.6), name="P3 gamma 2.6")

    converter = RGBXYZConverter()
    xyz = converter.rgb_to_xyz(RGBColor(0.0, 1.0, 0.0, p3_like))
    rgb = converter.xyz_to_rgb(xyz, SRGB)
    print(f"{p3_like} green in sRGB (clamped): ({rgb.r:0.3f}, {rgb.g:0.3f}, {rgb.b:0.3f})")
    return rgb


def example_comparison() -> dict:
    """Compare adaptation methods for a D65 -> A conversion."""

    color = RGBColor(0.2, 0.5, 0.8, SRGB)
    results = {}

    for method in AdaptationMethodType:
        converter = RGBXYZConverter(ConverterConfig(adaptation_method=method))
        results[method.value] = converter.rgb_to_xyz(color, illuminants.A)

    for name, xyz in results.items():
        print(f"{name:>12}: ({xyz.x:0.4f}, {xyz.y:0.4f}, {xyz.z:0.4f})")

    return results


def example_custom_adaptation() -> RGBColor:
    """Plug in a cone response matrix (CAT02) that is not built in."""

    cat02 = AdaptationMethod(
        "cat02",
        [
            [0.7328, 0.4296, -0.1624],
            [-0.7036, 1.6975, 0.0061],
            [0.0030, 0.0136, 0.9834],
        ],
    )
    converter = RGBXYZConverter(chromatic_adaptation=ChromaticAdaptation(cat02))
    xyz = converter.rgb_to_xyz(RGBColor(0.9, 0.6, 0.3, SRGB), illuminants.D50)
    rgb = converter.xyz_to_rgb(xyz, SRGB)
    print(f"CAT02 round trip: ({rgb.r:0.4f}, {rgb.g:0.4f}, {rgb.b:0.4f})")
    return rgb


def example_torch_conversion():
    """Demonstrate the PyTorch accelerated path (requires torch)."""
    try:
        import torch
        from rgbxyz.torch import TorchRGBXYZConverter  # type: ignore
    except Exception:  # pragma: no cover - torch optional
        print("PyTorch is not available; skipping GPU example.")
        return None

    img = torch.rand(1, 3, 256, 256)
    device = torch.device("cuda" if torch.cuda.is_available() else "cpu")
    converter = TorchRGBXYZConverter(device=device)
    xyz = converter.rgb_to_xyz(img.to(device), SRGB, illuminants.D50)
    print(f"Torch XYZ on {device}: max Y={xyz[:, 1].max():0.3f}")
    return xyz


if __name__ == "__main__":
    print("Running rgbxyz advanced examples...")
    example_image_conversion()
    example_custom_working_space()
    example_comparison()
    example_custom_adaptation()
    example_torch_conversion()
