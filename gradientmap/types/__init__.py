from .pixel_format import (
    PixelFormat,
    SUPPORTED_FORMATS,
    pixel_sizes,
    format_for_channels,
    RED,
    GREEN,
    BLUE,
    ALPHA,
)
from .rectangle import Rectangle

__all__ = [
    "PixelFormat",
    "SUPPORTED_FORMATS",
    "pixel_sizes",
    "format_for_channels",
    "RED",
    "GREEN",
    "BLUE",
    "ALPHA",
    "Rectangle",
]
