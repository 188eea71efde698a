"""
RGB <-> XYZ conversion of image tensors with torch.

Matrices are derived (and cached) by :class:`RGBXYZConverter` in float64 and
moved to the target device.
"""

from __future__ import annotations

import logging
from typing import Optional

import torch

from rgbxyz.core.colors import ReferenceWhite, RGBWorkingSpace
from rgbxyz.core.config import ConverterConfig
from rgbxyz.core.converter import RGBXYZConverter
from rgbxyz.torch.common import ensure_tensor, from_nchw, to_nchw
from rgbxyz.torch.companding import torch_companding

logger = logging.getLogger(__name__)


class TorchRGBXYZConverter:
    """Torch equivalent of the RGBXYZConverter array methods."""

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        device: torch.device = torch.device("cpu"),
        dtype: torch.dtype = torch.float32,
    ) -> None:
        self.device = device
        self.dtype = dtype
        self.converter = RGBXYZConverter(config)
        logger.info("Torch converter on %s (%s)", device, dtype)

    def _tensor(self, matrix) -> torch.Tensor:
        # Cached matrices are read-only numpy arrays
        return torch.tensor(matrix.tolist(), dtype=self.dtype, device=self.device)

    def _matmul_channel(self, mat: torch.Tensor, img: torch.Tensor) -> torch.Tensor:
        """
        Multiply a 3x3 matrix with an image tensor in NCHW format.
        """

        # Reshape: (B, C, H, W) -> (B, H, W, C)
        img_swapped = img.permute(0, 2, 3, 1)
        result = torch.tensordot(img_swapped, mat.T, dims=([3], [0]))
        return result.permute(0, 3, 1, 2)

    def rgb_to_xyz(
        self,
        rgb,
        working_space: RGBWorkingSpace,
        target_reference_white: Optional[ReferenceWhite] = None,
    ) -> torch.Tensor:
        """
        Convert a companded RGB image to XYZ.

        Parameters
        ----------
        rgb : torch.Tensor
            (H, W, 3), (3, H, W) or (N, 3, H, W)
        """

        img, fmt = to_nchw(ensure_tensor(rgb, self.device, self.dtype))
        _, inverse = torch_companding(working_space.companding)

        matrix = self.converter.rgb_to_xyz_matrix(working_space)
        if target_reference_white is not None and target_reference_white != working_space.reference_white:
            adapt = self.converter.chromatic_adaptation.adaptation_matrix(
                working_space.reference_white, target_reference_white
            )
            matrix = adapt @ matrix

        xyz = self._matmul_channel(self._tensor(matrix), inverse(torch.clamp(img, 0.0, 1.0)))
        return from_nchw(xyz, fmt)

    def xyz_to_rgb(
        self,
        xyz,
        reference_white: ReferenceWhite,
        working_space: Optional[RGBWorkingSpace] = None,
    ) -> torch.Tensor:
        """Convert an XYZ image under ``reference_white`` to clamped companded RGB."""

        working_space = working_space or self.converter.default_working_space
        img, fmt = to_nchw(ensure_tensor(xyz, self.device, self.dtype))
        forward, _ = torch_companding(working_space.companding)

        matrix = self.converter.xyz_to_rgb_matrix(working_space)
        if reference_white != working_space.reference_white:
            adapt = self.converter.chromatic_adaptation.adaptation_matrix(
                reference_white, working_space.reference_white
            )
            matrix = matrix @ adapt

        linear = self._matmul_channel(self._tensor(matrix), img)
        rgb = torch.clamp(forward(linear), 0.0, 1.0)
        return from_nchw(rgb, fmt)
