"""
Factory utilities for selecting a chromatic adaptation method.
"""

from __future__ import annotations

from rgbxyz.adaptation.chromatic import BRADFORD, VON_KRIES, XYZ_SCALING, ChromaticAdaptation
from rgbxyz.core.config import AdaptationMethodType

ADAPTATION_METHODS = {
    AdaptationMethodType.BRADFORD: BRADFORD,
    AdaptationMethodType.VON_KRIES: VON_KRIES,
    AdaptationMethodType.XYZ_SCALING: XYZ_SCALING,
}


def create_adaptation(method_type: AdaptationMethodType) -> ChromaticAdaptation:
    """Instantiate the requested chromatic adaptation."""

    method = ADAPTATION_METHODS.get(method_type)
    if method is None:
        raise ValueError(f"Unknown adaptation method: {method_type}")
    return ChromaticAdaptation(method)
