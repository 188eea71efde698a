"""
Catalog of companding (transfer) functions.

Every function is elementwise and works on floats and numpy arrays. The
nonlinear branches are evaluated on ``abs(v)`` so that negative linear values,
which appear for out-of-gamut colors, follow the linear segment instead of
producing NaN.
"""

from __future__ import annotations

import numpy as np

from rgbxyz.core.colors import CompandingFunction

CIE_EPSILON = 216.0 / 24389.0
CIE_KAPPA = 24389.0 / 27.0

REC2020_ALPHA = 1.09929682680944
REC2020_BETA = 0.018053968510807


def _scalar_or_array(result: np.ndarray):
    return float(result) if np.ndim(result) == 0 else result


def srgb_compand(v):
    v = np.asarray(v, dtype=float)
    return _scalar_or_array(
        np.where(v <= 0.0031308, 12.92 * v, 1.055 * np.power(np.abs(v), 1.0 / 2.4) - 0.055)
    )


def srgb_inverse_compand(v):
    v = np.asarray(v, dtype=float)
    return _scalar_or_array(
        np.where(v <= 0.04045, v / 12.92, np.power((np.abs(v) + 0.055) / 1.055, 2.4))
    )


def gamma_compand(v, gamma: float):
    # Mirrored around zero
    v = np.asarray(v, dtype=float)
    return _scalar_or_array(np.sign(v) * np.power(np.abs(v), 1.0 / gamma))


def gamma_inverse_compand(v, gamma: float):
    v = np.asarray(v, dtype=float)
    return _scalar_or_array(np.sign(v) * np.power(np.abs(v), gamma))


def lstar_compand(v):
    v = np.asarray(v, dtype=float)
    return _scalar_or_array(
        np.where(v <= CIE_EPSILON, v * CIE_KAPPA / 100.0, 1.16 * np.cbrt(np.abs(v)) - 0.16)
    )


def lstar_inverse_compand(v):
    v = np.asarray(v, dtype=float)
    return _scalar_or_array(
        np.where(v <= 0.08, 100.0 * v / CIE_KAPPA, np.power((np.abs(v) + 0.16) / 1.16, 3.0))
    )


def rec709_compand(v):
    v = np.asarray(v, dtype=float)
    return _scalar_or_array(
        np.where(v < 0.018, 4.5 * v, 1.099 * np.power(np.abs(v), 0.45) - 0.099)
    )


def rec709_inverse_compand(v):
    v = np.asarray(v, dtype=float)
    return _scalar_or_array(
        np.where(v < 0.081, v / 4.5, np.power((np.abs(v) + 0.099) / 1.099, 1.0 / 0.45))
    )


def rec2020_compand(v):
    v = np.asarray(v, dtype=float)
    return _scalar_or_array(
        np.where(
            v < REC2020_BETA,
            4.5 * v,
            REC2020_ALPHA * np.power(np.abs(v), 0.45) - (REC2020_ALPHA - 1.0),
        )
    )


def rec2020_inverse_compand(v):
    v = np.asarray(v, dtype=float)
    return _scalar_or_array(
        np.where(
            v < 4.5 * REC2020_BETA,
            v / 4.5,
            np.power((np.abs(v) + REC2020_ALPHA - 1.0) / REC2020_ALPHA, 1.0 / 0.45),
        )
    )


def gamma_companding(gamma: float) -> CompandingFunction:
    """Plain power-law companding with exponent ``gamma``."""

    if gamma <= 0:
        raise ValueError(f"Gamma must be positive, got {gamma}")

    return CompandingFunction(
        name="gamma",
        forward=lambda v: gamma_compand(v, gamma),
        inverse=lambda v: gamma_inverse_compand(v, gamma),
        parameters=(float(gamma),),
        vectorized=True,
    )


SRGB_COMPANDING = CompandingFunction("srgb", srgb_compand, srgb_inverse_compand, vectorized=True)
LSTAR_COMPANDING = CompandingFunction("lstar", lstar_compand, lstar_inverse_compand, vectorized=True)
REC709_COMPANDING = CompandingFunction("rec709", rec709_compand, rec709_inverse_compand, vectorized=True)
REC2020_COMPANDING = CompandingFunction("rec2020", rec2020_compand, rec2020_inverse_compand, vectorized=True)
GAMMA_18_COMPANDING = gamma_companding(1.8)
GAMMA_22_COMPANDING = gamma_companding(2.2)
