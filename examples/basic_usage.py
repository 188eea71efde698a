"""
Basic usage examples for rgbxyz.
"""

from __future__ import annotations

from rgbxyz import RGBColor, RGBXYZConverter, XYZColor, convert_color
from rgbxyz.spaces import illuminants
from rgbxyz.spaces.working_spaces import ADOBE_RGB_1998, PROPHOTO_RGB, SRGB


def example_rgb_to_xyz() -> XYZColor:
    """Convert an sRGB color to XYZ under the working space's white (D65)."""

    converter = RGBXYZConverter()
    xyz = converter.rgb_to_xyz(RGBColor(0.8, 0.4, 0.2, SRGB))
    print(f"sRGB -> XYZ (D65): ({xyz.x:0.4f}, {xyz.y:0.4f}, {xyz.z:0.4f})")
    return xyz


def example_adapted_xyz() -> XYZColor:
    """Request the XYZ result under D50, applying Bradford adaptation."""

    converter = RGBXYZConverter()
    xyz = converter.rgb_to_xyz(RGBColor(0.8, 0.4, 0.2, SRGB), illuminants.D50)
    print(f"sRGB -> XYZ (D50): ({xyz.x:0.4f}, {xyz.y:0.4f}, {xyz.z:0.4f})")
    return xyz


def example_between_working_spaces() -> RGBColor:
    """Move a color from Adobe RGB (D65) into ProPhoto RGB (D50)."""

    converter = RGBXYZConverter()
    xyz = converter.rgb_to_xyz(RGBColor(0.1, 0.7, 0.3, ADOBE_RGB_1998))
    rgb = converter.xyz_to_rgb(xyz, PROPHOTO_RGB)
    print(f"Adobe RGB -> ProPhoto RGB: ({rgb.r:0.4f}, {rgb.g:0.4f}, {rgb.b:0.4f})")
    return rgb


def example_convenience_function() -> RGBColor:
    """Convert with the one-off helper, using the default sRGB target."""

    rgb = convert_color(XYZColor(0.35, 0.3, 0.25, illuminants.D50))
    print(f"XYZ (D50) -> sRGB: ({rgb.r:0.4f}, {rgb.g:0.4f}, {rgb.b:0.4f})")
    return rgb


if __name__ == "__main__":
    print("Running rgbxyz basic examples...")
    example_rgb_to_xyz()
    example_adapted_xyz()
    example_between_working_spaces()
    example_convenience_function()
