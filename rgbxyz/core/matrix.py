"""
Derivation of RGB working space <-> XYZ matrices.

Implements the closed-form derivation from primaries and reference white
described at http://www.brucelindbloom.com/Eqn_RGB_XYZ_Matrix.html.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Tuple

import numpy as np

from rgbxyz.core.colors import Chromaticity, RGBWorkingSpace
from rgbxyz.core.errors import SingularMatrixError

logger = logging.getLogger(__name__)

# Matrices worse conditioned than this are treated as singular.
MAX_CONDITION_NUMBER = 1e12


def invert_matrix(matrix: np.ndarray) -> np.ndarray:
    """Invert a 3x3 matrix, raising SingularMatrixError when impossible."""

    matrix = np.asarray(matrix, dtype=float)
    if not np.isfinite(matrix).all():
        raise SingularMatrixError("Matrix contains non-finite entries")

    with np.errstate(divide="ignore", invalid="ignore"):
        condition = np.linalg.cond(matrix)
    if not np.isfinite(condition) or condition > MAX_CONDITION_NUMBER:
        raise SingularMatrixError(f"Matrix is singular or ill-conditioned:\n{matrix}")

    try:
        return np.linalg.inv(matrix)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(f"Matrix is singular:\n{matrix}") from exc


def _primary_xyz(chromaticity: Chromaticity) -> Tuple[float, float, float]:
    """Unnormalized tristimulus values (Y = 1) of a primary."""

    x, y = chromaticity.x, chromaticity.y
    if y == 0:
        raise SingularMatrixError(f"Primary chromaticity {chromaticity} has y = 0")
    return x / y, 1.0, (1.0 - x - y) / y


def rgb_to_xyz_matrix(working_space: RGBWorkingSpace) -> np.ndarray:
    """
    Derive M such that ``XYZ = M @ RGB`` for linear RGB.

    Parameters
    ----------
    working_space : RGBWorkingSpace
        Source of the primaries and the reference white W.

    Returns
    -------
    np.ndarray
        3x3 matrix whose columns are the primaries' XYZ vectors scaled so that
        RGB (1, 1, 1) maps onto W.
    """

    # Columns: raw XYZ of the red, green and blue primaries
    raw = np.column_stack([_primary_xyz(primary) for primary in working_space.primaries])
    scale = invert_matrix(raw) @ working_space.reference_white.vector
    return raw * scale[np.newaxis, :]


def xyz_to_rgb_matrix(working_space: RGBWorkingSpace) -> np.ndarray:
    """Inverse of :func:`rgb_to_xyz_matrix`."""

    return invert_matrix(rgb_to_xyz_matrix(working_space))


class WorkingSpaceMatrixCache:
    """
    Lazily populated store of derived matrices keyed by working space value.

    Entries are written once per key under a lock and returned as read-only
    arrays, so cached matrices can be shared between threads.
    """

    def __init__(self) -> None:
        self._entries: Dict[RGBWorkingSpace, Tuple[np.ndarray, np.ndarray]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, working_space: RGBWorkingSpace) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``(rgb_to_xyz, xyz_to_rgb)`` for the working space."""

        entry = self._entries.get(working_space)
        if entry is not None:
            return entry

        with self._lock:
            entry = self._entries.get(working_space)
            if entry is None:
                logger.debug("Deriving RGB/XYZ matrices for %s", working_space)
                forward = rgb_to_xyz_matrix(working_space)
                inverse = invert_matrix(forward)
                forward.setflags(write=False)
                inverse.setflags(write=False)
                entry = (forward, inverse)
                self._entries[working_space] = entry
        return entry

    def rgb_to_xyz(self, working_space: RGBWorkingSpace) -> np.ndarray:
        return self.get(working_space)[0]

    def xyz_to_rgb(self, working_space: RGBWorkingSpace) -> np.ndarray:
        return self.get(working_space)[1]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
