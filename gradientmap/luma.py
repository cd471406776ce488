"""
Perceptual brightness (luma) with ITU-R BT.709 weights.

Both functions evaluate ``(0.2126 * r + 0.7152 * g + 0.0722 * b) / 255`` in
float64 in the same order, so scalar and array results agree bit for bit.
"""

import numpy as np
from numpy import ndarray as NDArray
from .types.pixel_format import RED, GREEN, BLUE

LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722
CHANNEL_MAX = 255.0


def luma(r: int, g: int, b: int) -> float:
    """Luma of a single 8-bit RGB triple, in ``[0, 1]``."""
    return (LUMA_R * r + LUMA_G * g + LUMA_B * b) / CHANNEL_MAX


def luma_array(rgb: NDArray) -> NDArray:
    """
    Luma for an array whose last axis holds at least R, G, B.

    Args:
        rgb: Array of shape (..., C) with C >= 3, any numeric dtype

    Returns:
        float64 array of shape (...) in ``[0, 1]``
    """
    rgb = np.asarray(rgb)
    if rgb.shape[-1] < 3:
        raise ValueError(f"Expected at least 3 channels, got shape {rgb.shape}")
    r = rgb[..., RED].astype(np.float64)
    g = rgb[..., GREEN].astype(np.float64)
    b = rgb[..., BLUE].astype(np.float64)
    return (LUMA_R * r + LUMA_G * g + LUMA_B * b) / CHANNEL_MAX
