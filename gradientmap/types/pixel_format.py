from enum import Enum
from ..errors import UnsupportedPixelFormatError

# Byte index of each channel inside a pixel. Buffers are laid out R, G, B[, A]
# like numpy/Pillow (H, W, C) arrays.
RED = 0
GREEN = 1
BLUE = 2
ALPHA = 3


class PixelFormat(str, Enum):
    RGB24 = "rgb24"     # 3 bytes per pixel, no alpha
    RGB32 = "rgb32"     # 4 bytes per pixel, 4th byte unused
    ARGB32 = "argb32"   # 4 bytes per pixel, 4th byte alpha

    @property
    def pixel_size(self) -> int:
        return pixel_sizes[self]

    @property
    def has_alpha(self) -> bool:
        return self is PixelFormat.ARGB32


pixel_sizes = {
    PixelFormat.RGB24: 3,
    PixelFormat.RGB32: 4,
    PixelFormat.ARGB32: 4,
}

SUPPORTED_FORMATS = frozenset(pixel_sizes)


def format_for_channels(channels: int) -> PixelFormat:
    """Guess the pixel format of an ``(H, W, channels)`` uint8 array."""
    if channels == 3:
        return PixelFormat.RGB24
    if channels == 4:
        return PixelFormat.ARGB32
    raise UnsupportedPixelFormatError(f"Expected 3 or 4 channels, got {channels}")
