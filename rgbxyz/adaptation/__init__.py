"""Chromatic adaptation transforms."""

from rgbxyz.adaptation.chromatic import (
    BRADFORD,
    VON_KRIES,
    XYZ_SCALING,
    AdaptationMethod,
    ChromaticAdaptation,
)
from rgbxyz.adaptation.factory import create_adaptation

__all__ = [
    "AdaptationMethod",
    "ChromaticAdaptation",
    "BRADFORD",
    "VON_KRIES",
    "XYZ_SCALING",
    "create_adaptation",
]
