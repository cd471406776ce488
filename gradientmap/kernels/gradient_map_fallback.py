"""
Gradient-map kernel - numpy fallback implementation.

Vectorized over a ``(height, width, pixel_size)`` region view. Arithmetic is
evaluated in float64 in exactly the order used by the compiled kernel and by
``GradientMap.map_pixel``, so all three agree bit for bit.
"""

import numpy as np
from numpy import ndarray as NDArray

from ..luma import LUMA_R, LUMA_G, LUMA_B, CHANNEL_MAX
from ..types.pixel_format import RED, GREEN, BLUE, ALPHA


def to_channel(values: NDArray) -> NDArray:
    """Round half to even and narrow to uint8."""
    return np.clip(np.rint(values), 0, 255).astype(np.uint8)


def apply_gradient_map(region: NDArray, start: NDArray, end: NDArray) -> None:
    """
    Recolor ``region`` in place.

    Args:
        region: Writable uint8 array (H, W, 3|4); a 4th channel is left untouched
        start: float64 RGBA of the bright end of the gradient
        end: float64 RGBA of the dark end of the gradient
    """
    if region.size == 0:
        return

    r = region[..., RED].astype(np.float64)
    g = region[..., GREEN].astype(np.float64)
    b = region[..., BLUE].astype(np.float64)

    luma = (LUMA_R * r + LUMA_G * g + LUMA_B * b) / CHANNEL_MAX
    inv_luma = 1.0 - luma
    fade = (luma * start[ALPHA] + inv_luma * end[ALPHA]) / CHANNEL_MAX
    inv_fade = 1.0 - fade

    for channel, original in ((RED, r), (GREEN, g), (BLUE, b)):
        mapped = luma * start[channel] + inv_luma * end[channel]
        region[..., channel] = to_channel(fade * mapped + inv_fade * original)
