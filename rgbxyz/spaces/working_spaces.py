"""
Standard RGB working spaces.

Primaries and reference whites follow Bruce Lindbloom's working space table.
"""

from __future__ import annotations

from typing import Dict

from rgbxyz.core.colors import Chromaticity, CompandingFunction, ReferenceWhite, RGBPrimaries, RGBWorkingSpace
from rgbxyz.core.config import WorkingSpaceName
from rgbxyz.spaces import illuminants
from rgbxyz.spaces.companding import (
    GAMMA_18_COMPANDING,
    GAMMA_22_COMPANDING,
    LSTAR_COMPANDING,
    REC709_COMPANDING,
    REC2020_COMPANDING,
    SRGB_COMPANDING,
)


def _space(
    name: str,
    white: ReferenceWhite,
    companding: CompandingFunction,
    red: tuple,
    green: tuple,
    blue: tuple,
) -> RGBWorkingSpace:
    primaries = RGBPrimaries(Chromaticity(*red), Chromaticity(*green), Chromaticity(*blue))
    return RGBWorkingSpace(primaries, white, companding, name=name)


SRGB = _space("sRGB", illuminants.D65, SRGB_COMPANDING, (0.64, 0.33), (0.30, 0.60), (0.15, 0.06))
ADOBE_RGB_1998 = _space(
    "Adobe RGB (1998)", illuminants.D65, GAMMA_22_COMPANDING, (0.64, 0.33), (0.21, 0.71), (0.15, 0.06)
)
APPLE_RGB = _space(
    "Apple RGB", illuminants.D65, GAMMA_18_COMPANDING, (0.625, 0.34), (0.28, 0.595), (0.155, 0.07)
)
BEST_RGB = _space(
    "Best RGB", illuminants.D50, GAMMA_22_COMPANDING, (0.7347, 0.2653), (0.215, 0.775), (0.13, 0.035)
)
BETA_RGB = _space(
    "Beta RGB", illuminants.D50, GAMMA_22_COMPANDING, (0.6888, 0.3112), (0.1986, 0.7551), (0.1265, 0.0352)
)
BRUCE_RGB = _space(
    "Bruce RGB", illuminants.D65, GAMMA_22_COMPANDING, (0.64, 0.33), (0.28, 0.65), (0.15, 0.06)
)
CIE_RGB = _space(
    "CIE RGB", illuminants.E, GAMMA_22_COMPANDING, (0.735, 0.265), (0.274, 0.717), (0.167, 0.009)
)
COLOR_MATCH_RGB = _space(
    "ColorMatch RGB", illuminants.D50, GAMMA_18_COMPANDING, (0.63, 0.34), (0.295, 0.605), (0.15, 0.075)
)
DON_RGB_4 = _space(
    "Don RGB 4", illuminants.D50, GAMMA_22_COMPANDING, (0.696, 0.3), (0.215, 0.765), (0.13, 0.035)
)
ECI_RGB_V2 = _space(
    "ECI RGB v2", illuminants.D50, LSTAR_COMPANDING, (0.67, 0.33), (0.21, 0.71), (0.14, 0.08)
)
EKTA_SPACE_PS5 = _space(
    "Ekta Space PS5", illuminants.D50, GAMMA_22_COMPANDING, (0.695, 0.305), (0.26, 0.7), (0.11, 0.005)
)
NTSC_RGB = _space(
    "NTSC RGB", illuminants.C, GAMMA_22_COMPANDING, (0.67, 0.33), (0.21, 0.71), (0.14, 0.08)
)
PAL_SECAM_RGB = _space(
    "PAL/SECAM RGB", illuminants.D65, GAMMA_22_COMPANDING, (0.64, 0.33), (0.29, 0.6), (0.15, 0.06)
)
PROPHOTO_RGB = _space(
    "ProPhoto RGB", illuminants.D50, GAMMA_18_COMPANDING, (0.7347, 0.2653), (0.1596, 0.8404), (0.0366, 0.0001)
)
SMPTE_C_RGB = _space(
    "SMPTE-C RGB", illuminants.D65, GAMMA_22_COMPANDING, (0.63, 0.34), (0.31, 0.595), (0.155, 0.07)
)
WIDE_GAMUT_RGB = _space(
    "Wide Gamut RGB", illuminants.D50, GAMMA_22_COMPANDING, (0.735, 0.265), (0.115, 0.826), (0.157, 0.018)
)
REC_709 = _space("Rec. 709", illuminants.D65, REC709_COMPANDING, (0.64, 0.33), (0.30, 0.60), (0.15, 0.06))
REC_2020 = _space(
    "Rec. 2020", illuminants.D65, REC2020_COMPANDING, (0.708, 0.292), (0.170, 0.797), (0.131, 0.046)
)

WORKING_SPACES: Dict[WorkingSpaceName, RGBWorkingSpace] = {
    WorkingSpaceName.SRGB: SRGB,
    WorkingSpaceName.ADOBE_RGB_1998: ADOBE_RGB_1998,
    WorkingSpaceName.APPLE_RGB: APPLE_RGB,
    WorkingSpaceName.BEST_RGB: BEST_RGB,
    WorkingSpaceName.BETA_RGB: BETA_RGB,
    WorkingSpaceName.BRUCE_RGB: BRUCE_RGB,
    WorkingSpaceName.CIE_RGB: CIE_RGB,
    WorkingSpaceName.COLOR_MATCH_RGB: COLOR_MATCH_RGB,
    WorkingSpaceName.DON_RGB_4: DON_RGB_4,
    WorkingSpaceName.ECI_RGB_V2: ECI_RGB_V2,
    WorkingSpaceName.EKTA_SPACE_PS5: EKTA_SPACE_PS5,
    WorkingSpaceName.NTSC_RGB: NTSC_RGB,
    WorkingSpaceName.PAL_SECAM_RGB: PAL_SECAM_RGB,
    WorkingSpaceName.PROPHOTO_RGB: PROPHOTO_RGB,
    WorkingSpaceName.SMPTE_C_RGB: SMPTE_C_RGB,
    WorkingSpaceName.WIDE_GAMUT_RGB: WIDE_GAMUT_RGB,
    WorkingSpaceName.REC_709: REC_709,
    WorkingSpaceName.REC_2020: REC_2020,
}


def get_working_space(name: WorkingSpaceName) -> RGBWorkingSpace:
    """Look up a built-in working space."""

    try:
        return WORKING_SPACES[name]
    except KeyError:
        raise KeyError(f"Unknown working space '{name}'.") from None
