"""
Exceptions raised by the RGB <-> XYZ conversion core.
"""

from __future__ import annotations


class ColorConversionError(Exception):
    """Base class for conversion failures caused by malformed input data."""


class SingularMatrixError(ColorConversionError, ValueError):
    """A 3x3 matrix required by the conversion cannot be inverted."""


class DivisionByZeroError(ColorConversionError, ZeroDivisionError):
    """A reference white has a zero cone response component."""
