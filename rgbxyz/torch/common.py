"""
Shared helpers for the torch-based conversion path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import torch


@dataclass(frozen=True)
class TensorFormat:
    """Bookkeeping for the caller's tensor layout."""

    original_shape: Tuple[int, ...]
    channel_first: bool
    batched: bool


def ensure_tensor(
    data,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float32,
) -> torch.Tensor:
    """
    Convert input data to a torch tensor on the requested device.
    """

    if isinstance(data, torch.Tensor):
        tensor = data.to(dtype=dtype)
        if device is not None:
            tensor = tensor.to(device)
        return tensor

    return torch.as_tensor(data, dtype=dtype, device=device)


def to_nchw(img: torch.Tensor) -> Tuple[torch.Tensor, TensorFormat]:
    """
    Reshape a color image tensor to NCHW.

    Accepts HxWx3, 3xHxW and Nx3xHxW. A leading dimension of 3 is read as
    channel-first.
    """

    if img.dim() == 3:
        batched = False
        if img.shape[0] == 3:
            channel_first = True
            img_cf = img
        elif img.shape[-1] == 3:
            channel_first = False
            img_cf = img.permute(2, 0, 1)
        else:
            raise ValueError(f"Expected 3 color channels, got shape {tuple(img.shape)}")
        img_cf = img_cf.unsqueeze(0)
    elif img.dim() == 4:
        if img.shape[1] != 3:
            raise ValueError(f"Expected N x 3 x H x W tensor, got shape {tuple(img.shape)}")
        batched = True
        channel_first = True
        img_cf = img
    else:
        raise ValueError(f"Unsupported tensor rank {img.dim()} for image input.")

    fmt = TensorFormat(original_shape=tuple(img.shape), channel_first=channel_first, batched=batched)
    return img_cf, fmt


def from_nchw(img: torch.Tensor, fmt: TensorFormat) -> torch.Tensor:
    """
    Convert an NCHW tensor back to the original layout.
    """

    if img.dim() != 4:
        raise ValueError("Expected NCHW tensor with a batch dimension.")

    if fmt.batched:
        return img

    img = img.squeeze(0)

    if fmt.channel_first:
        return img

    return img.permute(1, 2, 0)
