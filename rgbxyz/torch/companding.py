"""
Torch implementations of the catalog companding curves.

Curves are looked up by :attr:`CompandingFunction.name`; parametric curves
read their constants from :attr:`CompandingFunction.parameters`.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

import torch

from rgbxyz.core.colors import CompandingFunction
from rgbxyz.spaces.companding import CIE_EPSILON, CIE_KAPPA, REC2020_ALPHA, REC2020_BETA

TensorFn = Callable[[torch.Tensor], torch.Tensor]


def _srgb(v: torch.Tensor) -> torch.Tensor:
    return torch.where(v <= 0.0031308, 12.92 * v, 1.055 * v.abs().pow(1.0 / 2.4) - 0.055)


def _srgb_inverse(v: torch.Tensor) -> torch.Tensor:
    return torch.where(v <= 0.04045, v / 12.92, ((v.abs() + 0.055) / 1.055).pow(2.4))


def _lstar(v: torch.Tensor) -> torch.Tensor:
    return torch.where(v <= CIE_EPSILON, v * CIE_KAPPA / 100.0, 1.16 * v.abs().pow(1.0 / 3.0) - 0.16)


def _lstar_inverse(v: torch.Tensor) -> torch.Tensor:
    return torch.where(v <= 0.08, 100.0 * v / CIE_KAPPA, ((v.abs() + 0.16) / 1.16).pow(3.0))


def _rec709(v: torch.Tensor) -> torch.Tensor:
    return torch.where(v < 0.018, 4.5 * v, 1.099 * v.abs().pow(0.45) - 0.099)


def _rec709_inverse(v: torch.Tensor) -> torch.Tensor:
    return torch.where(v < 0.081, v / 4.5, ((v.abs() + 0.099) / 1.099).pow(1.0 / 0.45))


def _rec2020(v: torch.Tensor) -> torch.Tensor:
    return torch.where(
        v < REC2020_BETA,
        4.5 * v,
        REC2020_ALPHA * v.abs().pow(0.45) - (REC2020_ALPHA - 1.0),
    )


def _rec2020_inverse(v: torch.Tensor) -> torch.Tensor:
    return torch.where(
        v < 4.5 * REC2020_BETA,
        v / 4.5,
        ((v.abs() + REC2020_ALPHA - 1.0) / REC2020_ALPHA).pow(1.0 / 0.45),
    )


_FIXED_CURVES: Dict[str, Tuple[TensorFn, TensorFn]] = {
    "srgb": (_srgb, _srgb_inverse),
    "lstar": (_lstar, _lstar_inverse),
    "rec709": (_rec709, _rec709_inverse),
    "rec2020": (_rec2020, _rec2020_inverse),
}


def torch_companding(companding: CompandingFunction) -> Tuple[TensorFn, TensorFn]:
    """Return ``(forward, inverse)`` tensor functions for a companding descriptor."""

    if companding.name == "gamma":
        (gamma,) = companding.parameters
        return (
            lambda v: v.sign() * v.abs().pow(1.0 / gamma),
            lambda v: v.sign() * v.abs().pow(gamma),
        )

    try:
        return _FIXED_CURVES[companding.name]
    except KeyError:
        raise KeyError(f"No torch implementation for companding '{companding.name}'.") from None
