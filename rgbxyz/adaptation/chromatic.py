"""
Von Kries-type chromatic adaptation.

A tristimulus vector measured under a source reference white is mapped to its
corresponding vector under a destination reference white by scaling in a
cone response domain. Methods differ only in the cone response matrix MA.
See http://www.brucelindbloom.com/Eqn_ChromAdapt.html.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from rgbxyz.core.colors import ReferenceWhite, XYZColor
from rgbxyz.core.errors import DivisionByZeroError
from rgbxyz.core.matrix import invert_matrix
from rgbxyz.utils.color import apply_matrix, as_triplets

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdaptationMethod:
    """
    Cone response domain definition (``cone = matrix @ XYZ``).

    Methods compare by their matrix; the name is only a label.
    """

    name: str = field(compare=False)
    matrix: np.ndarray = field(repr=False, compare=False)
    key: Tuple[float, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        matrix = np.array(self.matrix, dtype=float)
        if matrix.shape != (3, 3):
            raise ValueError(f"Cone response matrix must be 3x3, got shape {matrix.shape}")
        matrix.setflags(write=False)
        object.__setattr__(self, "matrix", matrix)
        object.__setattr__(self, "key", tuple(matrix.ravel().tolist()))


BRADFORD = AdaptationMethod(
    "bradford",
    [
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ],
)

VON_KRIES = AdaptationMethod(
    "von_kries",
    [
        [0.40024, 0.70760, -0.08081],
        [-0.22630, 1.16532, 0.04570],
        [0.00000, 0.00000, 0.91822],
    ],
)

XYZ_SCALING = AdaptationMethod("xyz_scaling", np.eye(3))


class ChromaticAdaptation:
    """
    Chromatic adaptation transform parameterized by an adaptation method.

    The transform is ``MA^-1 @ diag(cone_D / cone_S) @ MA`` and is not
    clipped to any gamut.
    """

    def __init__(self, method: AdaptationMethod = BRADFORD) -> None:
        self.method = method
        self._ma = method.matrix
        self._ma_inv = invert_matrix(self._ma)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.method.name!r})"

    def adaptation_matrix(
        self,
        source_white: ReferenceWhite,
        destination_white: ReferenceWhite,
    ) -> np.ndarray:
        """Full 3x3 adaptation transform from source to destination white."""

        if source_white == destination_white:
            return np.eye(3)

        cone_source = self._ma @ source_white.vector
        cone_destination = self._ma @ destination_white.vector

        if np.any(cone_source == 0):
            raise DivisionByZeroError(
                f"Reference white {source_white} has a zero cone response "
                f"under {self.method.name}: {cone_source}"
            )

        scaling = np.diag(cone_destination / cone_source)
        return self._ma_inv @ scaling @ self._ma

    def transform(
        self,
        source_vector,
        source_white: ReferenceWhite,
        destination_white: ReferenceWhite,
    ) -> np.ndarray:
        """
        Adapt tristimulus values onto the destination white.

        Parameters
        ----------
        source_vector : array_like
            XYZ triplet or array of shape (..., 3) under ``source_white``.
        """

        values = as_triplets(source_vector, "XYZ values")
        if source_white == destination_white:
            return values.copy()

        logger.debug(
            "Adapting %s -> %s using %s",
            source_white.name or source_white,
            destination_white.name or destination_white,
            self.method.name,
        )
        return apply_matrix(values, self.adaptation_matrix(source_white, destination_white))

    def transform_color(self, color: XYZColor, destination_white: ReferenceWhite) -> XYZColor:
        """Adapt an XYZ color, tagging the result with the destination white."""

        if color.reference_white == destination_white:
            return XYZColor(color.x, color.y, color.z, destination_white)

        adapted = self.transform(color.vector, color.reference_white, destination_white)
        return XYZColor.from_vector(adapted, destination_white)
