"""
GPU-accelerated RGB <-> XYZ conversion backed by PyTorch.
"""

from rgbxyz.torch.converter import TorchRGBXYZConverter

__all__ = ["TorchRGBXYZConverter"]
