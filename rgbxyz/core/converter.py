"""
RGB <-> XYZ conversion.

RGB -> XYZ: inverse companding, working space matrix, optional chromatic
adaptation onto a requested reference white.

XYZ -> RGB: optional (unclipped) chromatic adaptation onto the working
space's reference white, inverse working space matrix, companding, and a
final clamp to [0, 1]. The clamp is lossy: out-of-gamut colors are hard
clipped rather than rejected. Callers that need gamut mapping must do it
before converting.

Inputs are expected to be finite; NaN or Inf propagate unchecked.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from rgbxyz.adaptation.chromatic import ChromaticAdaptation
from rgbxyz.adaptation.factory import create_adaptation
from rgbxyz.core.colors import ReferenceWhite, RGBColor, RGBWorkingSpace, XYZColor
from rgbxyz.core.config import AdaptationMethodType, ConverterConfig
from rgbxyz.core.matrix import WorkingSpaceMatrixCache, rgb_to_xyz_matrix, xyz_to_rgb_matrix
from rgbxyz.spaces.working_spaces import get_working_space
from rgbxyz.utils.color import apply_matrix, as_triplets

logger = logging.getLogger(__name__)


class RGBXYZConverter:
    """
    Converts colors between RGB working spaces and CIE XYZ.

    Parameters
    ----------
    config : ConverterConfig, optional
        Default adaptation method and default target working space.
    chromatic_adaptation : ChromaticAdaptation, optional
        Overrides the adaptation selected by ``config``.
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        chromatic_adaptation: Optional[ChromaticAdaptation] = None,
    ) -> None:
        self.config = config or ConverterConfig()
        self.config.validate()

        self.chromatic_adaptation = chromatic_adaptation or create_adaptation(self.config.adaptation_method)
        self.default_working_space = get_working_space(self.config.default_working_space)
        self._matrices = WorkingSpaceMatrixCache() if self.config.cache_matrices else None

        logger.info("Initializing RGB/XYZ converter")
        logger.info("  Adaptation: %s", self.chromatic_adaptation.method.name)
        logger.info("  Default working space: %s", self.default_working_space)

    # ------------------------------------------------------------------
    # Matrices
    # ------------------------------------------------------------------

    def rgb_to_xyz_matrix(self, working_space: RGBWorkingSpace) -> np.ndarray:
        if self._matrices is None:
            return rgb_to_xyz_matrix(working_space)
        return self._matrices.rgb_to_xyz(working_space)

    def xyz_to_rgb_matrix(self, working_space: RGBWorkingSpace) -> np.ndarray:
        if self._matrices is None:
            return xyz_to_rgb_matrix(working_space)
        return self._matrices.xyz_to_rgb(working_space)

    # ------------------------------------------------------------------
    # Single colors
    # ------------------------------------------------------------------

    def rgb_to_xyz(
        self,
        color: RGBColor,
        target_reference_white: Optional[ReferenceWhite] = None,
    ) -> XYZColor:
        """
        Convert an RGB color to XYZ.

        The result is expressed under the working space's reference white
        unless ``target_reference_white`` names a different one, in which case
        it is chromatically adapted.
        """

        working_space = color.working_space
        xyz = self._rgb_values_to_xyz(color.vector, working_space)
        result = XYZColor.from_vector(xyz, working_space.reference_white)

        if target_reference_white is None or target_reference_white == result.reference_white:
            return result

        return self.chromatic_adaptation.transform_color(result, target_reference_white)

    def xyz_to_rgb(
        self,
        color: XYZColor,
        working_space: Optional[RGBWorkingSpace] = None,
    ) -> RGBColor:
        """
        Convert an XYZ color to RGB, defaulting to the configured working space.

        Components outside [0, 1] are clamped.
        """

        working_space = working_space or self.default_working_space
        rgb = self._xyz_values_to_rgb(color.vector, color.reference_white, working_space)
        return RGBColor.from_vector(rgb, working_space)

    def convert(
        self,
        color: Union[RGBColor, XYZColor],
        target: Optional[Union[ReferenceWhite, RGBWorkingSpace]] = None,
    ) -> Union[XYZColor, RGBColor]:
        """
        Convert RGB to XYZ or XYZ to RGB depending on the input type.

        ``target`` is a reference white for RGB input and a working space for
        XYZ input.
        """

        if isinstance(color, RGBColor):
            if target is not None and not isinstance(target, ReferenceWhite):
                raise TypeError(f"RGB input expects a ReferenceWhite target, got {type(target).__name__}")
            return self.rgb_to_xyz(color, target)

        if isinstance(color, XYZColor):
            if target is not None and not isinstance(target, RGBWorkingSpace):
                raise TypeError(f"XYZ input expects an RGBWorkingSpace target, got {type(target).__name__}")
            return self.xyz_to_rgb(color, target)

        raise TypeError(f"Cannot convert {type(color).__name__}")

    # ------------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------------

    def rgb_array_to_xyz(
        self,
        rgb: np.ndarray,
        working_space: RGBWorkingSpace,
        target_reference_white: Optional[ReferenceWhite] = None,
    ) -> np.ndarray:
        """
        Convert companded RGB values of shape (..., 3) to XYZ.

        Parameters
        ----------
        rgb : np.ndarray
            Companded RGB in ``working_space``, e.g. an H x W x 3 image.
            Components are clamped to [0, 1] first, as for :class:`RGBColor`.
        target_reference_white : ReferenceWhite, optional
            White to adapt the result onto; defaults to the working space's.
        """

        rgb = np.clip(as_triplets(rgb, "RGB values"), 0.0, 1.0)
        xyz = self._rgb_values_to_xyz(rgb, working_space)

        if target_reference_white is None:
            return xyz
        return self.chromatic_adaptation.transform(xyz, working_space.reference_white, target_reference_white)

    def xyz_array_to_rgb(
        self,
        xyz: np.ndarray,
        reference_white: ReferenceWhite,
        working_space: Optional[RGBWorkingSpace] = None,
    ) -> np.ndarray:
        """Convert XYZ values of shape (..., 3) under ``reference_white`` to clamped RGB."""

        xyz = as_triplets(xyz, "XYZ values")
        return self._xyz_values_to_rgb(xyz, reference_white, working_space or self.default_working_space)

    # ------------------------------------------------------------------
    # Shared stages
    # ------------------------------------------------------------------

    def _rgb_values_to_xyz(self, rgb: np.ndarray, working_space: RGBWorkingSpace) -> np.ndarray:
        logger.debug("RGB -> XYZ in %s", working_space)
        linear = working_space.companding.uncompand(rgb)
        return apply_matrix(linear, self.rgb_to_xyz_matrix(working_space))

    def _xyz_values_to_rgb(
        self,
        xyz: np.ndarray,
        reference_white: ReferenceWhite,
        working_space: RGBWorkingSpace,
    ) -> np.ndarray:
        logger.debug("XYZ -> RGB in %s", working_space)

        if reference_white != working_space.reference_white:
            xyz = self.chromatic_adaptation.transform(xyz, reference_white, working_space.reference_white)

        linear = apply_matrix(xyz, self.xyz_to_rgb_matrix(working_space))
        companded = working_space.companding.compand(linear)

        clipped = np.clip(companded, 0.0, 1.0)
        if logger.isEnabledFor(logging.DEBUG) and not np.array_equal(clipped, companded):
            logger.debug("Clamped out-of-gamut RGB values to [0, 1] in %s", working_space)
        return clipped


def convert_color(
    color: Union[RGBColor, XYZColor],
    target: Optional[Union[ReferenceWhite, RGBWorkingSpace]] = None,
    adaptation_method: AdaptationMethodType = AdaptationMethodType.BRADFORD,
) -> Union[XYZColor, RGBColor]:
    """
    Convenience wrapper for one-off conversions.
    """

    config = ConverterConfig(adaptation_method=adaptation_method)
    converter = RGBXYZConverter(config)
    return converter.convert(color, target)
