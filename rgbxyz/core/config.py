"""
Configuration primitives for RGB <-> XYZ conversion.

Defines enums naming the built-in adaptation methods and RGB working spaces,
and a dataclass collecting the converter defaults.
"""

from dataclasses import dataclass
from enum import Enum


class AdaptationMethodType(Enum):
    """Chromatic adaptation method selection."""

    BRADFORD = "bradford"        # Recommended default
    VON_KRIES = "von_kries"      # Hunt-Pointer-Estevez cone space
    XYZ_SCALING = "xyz_scaling"  # Identity cone space


class WorkingSpaceName(Enum):
    """Built-in RGB working spaces."""

    SRGB = "srgb"
    ADOBE_RGB_1998 = "adobe_rgb_1998"
    APPLE_RGB = "apple_rgb"
    BEST_RGB = "best_rgb"
    BETA_RGB = "beta_rgb"
    BRUCE_RGB = "bruce_rgb"
    CIE_RGB = "cie_rgb"
    COLOR_MATCH_RGB = "color_match_rgb"
    DON_RGB_4 = "don_rgb_4"
    ECI_RGB_V2 = "eci_rgb_v2"
    EKTA_SPACE_PS5 = "ekta_space_ps5"
    NTSC_RGB = "ntsc_rgb"
    PAL_SECAM_RGB = "pal_secam_rgb"
    PROPHOTO_RGB = "prophoto_rgb"
    SMPTE_C_RGB = "smpte_c_rgb"
    WIDE_GAMUT_RGB = "wide_gamut_rgb"
    REC_709 = "rec_709"
    REC_2020 = "rec_2020"


@dataclass
class ConverterConfig:
    """
    Defaults used by the converter when a call does not name them explicitly.

    Both defaults can be overridden per call; a converter built with a
    different configuration is the way to change them.
    """

    adaptation_method: AdaptationMethodType = AdaptationMethodType.BRADFORD
    default_working_space: WorkingSpaceName = WorkingSpaceName.SRGB
    cache_matrices: bool = True  # reuse derived working space matrices

    def validate(self) -> None:
        """Validate configuration parameters."""

        if not isinstance(self.adaptation_method, AdaptationMethodType):
            raise ValueError(f"Unknown adaptation method {self.adaptation_method!r}")

        if not isinstance(self.default_working_space, WorkingSpaceName):
            raise ValueError(f"Unknown working space {self.default_working_space!r}")
