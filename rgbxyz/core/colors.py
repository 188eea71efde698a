"""
Immutable color value types and working space descriptors.

All descriptors compare and hash by value. Display names are excluded from
equality so that two reference whites with identical tristimulus values are
interchangeable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class Chromaticity:
    """CIE xy chromaticity coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class RGBPrimaries:
    """Chromaticities of the red, green and blue primaries of a working space."""

    red: Chromaticity
    green: Chromaticity
    blue: Chromaticity

    def __iter__(self):
        return iter((self.red, self.green, self.blue))


@dataclass(frozen=True)
class ReferenceWhite:
    """XYZ tristimulus values of a white point (Y conventionally 1)."""

    x: float
    y: float
    z: float
    name: str = field(default="", compare=False)

    @property
    def vector(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_chromaticity(cls, chromaticity: Chromaticity, name: str = "") -> "ReferenceWhite":
        """Build a white point with Y = 1 from xy coordinates."""

        x, y = chromaticity.x, chromaticity.y
        return cls(x / y, 1.0, (1.0 - x - y) / y, name=name)


@dataclass(frozen=True, eq=False)
class CompandingFunction:
    """
    Pair of transfer functions applied componentwise.

    ``forward`` maps a linear value to a companded value, ``inverse`` undoes
    it. Both only need to accept a single float. Catalog curves that also
    accept numpy arrays set ``vectorized`` so whole arrays go through one
    call.

    ``parameters`` holds the constants of a parametric curve (e.g. the
    exponent of a gamma curve). When present, ``(name, parameters)`` defines
    equality, so independently built curves with the same constants are
    equal. Otherwise equality also requires the same two callables.
    """

    name: str
    forward: Callable = field(repr=False)
    inverse: Callable = field(repr=False)
    parameters: Tuple[float, ...] = ()
    vectorized: bool = field(default=False, repr=False)

    def _key(self) -> tuple:
        if self.parameters:
            return (self.name, tuple(self.parameters))
        return (self.name, self.forward, self.inverse)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CompandingFunction):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def compand(self, values) -> np.ndarray:
        """Apply ``forward`` to every component of ``values``."""

        return self._apply(self.forward, values)

    def uncompand(self, values) -> np.ndarray:
        """Apply ``inverse`` to every component of ``values``."""

        return self._apply(self.inverse, values)

    def _apply(self, function: Callable, values) -> np.ndarray:
        values = np.asarray(values, dtype=float)
        if self.vectorized:
            return np.asarray(function(values), dtype=float)

        components = [float(function(float(v))) for v in values.ravel()]
        return np.array(components, dtype=float).reshape(values.shape)


@dataclass(frozen=True)
class RGBWorkingSpace:
    """RGB working space: primaries, reference white and companding."""

    primaries: RGBPrimaries
    reference_white: ReferenceWhite
    companding: CompandingFunction
    name: str = field(default="", compare=False)

    def __str__(self) -> str:
        return self.name or repr(self)


@dataclass(frozen=True)
class RGBColor:
    """
    Companded RGB color bound to a working space.

    Components are clamped to [0, 1] on construction.
    """

    r: float
    g: float
    b: float
    working_space: RGBWorkingSpace

    def __post_init__(self) -> None:
        for channel in ("r", "g", "b"):
            value = float(getattr(self, channel))
            object.__setattr__(self, channel, min(max(value, 0.0), 1.0))

    @property
    def vector(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b], dtype=float)

    @classmethod
    def from_vector(cls, vector: Sequence[float], working_space: RGBWorkingSpace) -> "RGBColor":
        r, g, b = (float(v) for v in vector)
        return cls(r, g, b, working_space)


@dataclass(frozen=True)
class XYZColor:
    """CIE XYZ color, only meaningful together with its reference white."""

    x: float
    y: float
    z: float
    reference_white: ReferenceWhite

    @property
    def vector(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_vector(cls, vector: Sequence[float], reference_white: ReferenceWhite) -> "XYZColor":
        x, y, z = (float(v) for v in vector)
        return cls(x, y, z, reference_white)
