"""
Array helpers shared by the numpy conversion paths.
"""

from __future__ import annotations

import numpy as np


def as_triplets(values, name: str = "values") -> np.ndarray:
    """
    Coerce input to a float array whose last axis holds three channels.

    Parameters
    ----------
    values : array_like
        Shape (..., 3), e.g. a single triplet or an H x W x 3 image.
    """

    arr = np.asarray(values, dtype=float)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"Expected {name} with a last axis of size 3, got shape {arr.shape}")
    return arr


def apply_matrix(values: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Multiply every triplet along the last axis by a 3x3 matrix."""

    return np.dot(values, np.asarray(matrix).T)
