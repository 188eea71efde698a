"""RGB <-> CIE XYZ conversion with chromatic adaptation.

Derives working space matrices from primaries and reference white, applies
companding around the linear transforms and adapts between reference whites
in a cone response domain.
"""

from rgbxyz.adaptation import (
    BRADFORD,
    VON_KRIES,
    XYZ_SCALING,
    AdaptationMethod,
    ChromaticAdaptation,
    create_adaptation,
)
from rgbxyz.core.colors import (
    Chromaticity,
    CompandingFunction,
    ReferenceWhite,
    RGBColor,
    RGBPrimaries,
    RGBWorkingSpace,
    XYZColor,
)
from rgbxyz.core.config import AdaptationMethodType, ConverterConfig, WorkingSpaceName
from rgbxyz.core.converter import RGBXYZConverter, convert_color
from rgbxyz.core.errors import ColorConversionError, DivisionByZeroError, SingularMatrixError
from rgbxyz.core.matrix import WorkingSpaceMatrixCache, rgb_to_xyz_matrix, xyz_to_rgb_matrix

__all__ = [
    "RGBXYZConverter",
    "ConverterConfig",
    "AdaptationMethodType",
    "WorkingSpaceName",
    "convert_color",
    "Chromaticity",
    "CompandingFunction",
    "ReferenceWhite",
    "RGBColor",
    "RGBPrimaries",
    "RGBWorkingSpace",
    "XYZColor",
    "AdaptationMethod",
    "ChromaticAdaptation",
    "BRADFORD",
    "VON_KRIES",
    "XYZ_SCALING",
    "create_adaptation",
    "WorkingSpaceMatrixCache",
    "rgb_to_xyz_matrix",
    "xyz_to_rgb_matrix",
    "ColorConversionError",
    "SingularMatrixError",
    "DivisionByZeroError",
]

try:  # Optional PyTorch acceleration
    from rgbxyz.torch.converter import TorchRGBXYZConverter  # type: ignore

    __all__.append("TorchRGBXYZConverter")
except ImportError:  # pragma: no cover - torch not installed
    TorchRGBXYZConverter = None  # type: ignore

__version__ = "0.1.0"
