"""Standard illuminants, companding functions and RGB working spaces."""

from rgbxyz.spaces import illuminants
from rgbxyz.spaces.companding import (
    GAMMA_18_COMPANDING,
    GAMMA_22_COMPANDING,
    LSTAR_COMPANDING,
    REC709_COMPANDING,
    REC2020_COMPANDING,
    SRGB_COMPANDING,
    gamma_companding,
)
from rgbxyz.spaces.illuminants import ILLUMINANTS
from rgbxyz.spaces.working_spaces import WORKING_SPACES, get_working_space

__all__ = [
    "illuminants",
    "ILLUMINANTS",
    "WORKING_SPACES",
    "get_working_space",
    "gamma_companding",
    "SRGB_COMPANDING",
    "GAMMA_18_COMPANDING",
    "GAMMA_22_COMPANDING",
    "LSTAR_COMPANDING",
    "REC709_COMPANDING",
    "REC2020_COMPANDING",
]
