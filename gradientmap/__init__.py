"""gradientmap: recolor raster images in place with a two-stop gradient map."""

from .colors.color import Color, WHITE, BLACK, TRANSPARENT
from .types.pixel_format import PixelFormat, SUPPORTED_FORMATS, RED, GREEN, BLUE, ALPHA
from .types.rectangle import Rectangle
from .buffer.pixel_buffer import PixelBufferView
from .luma import luma_array
from .kernels import Backend, available_backends, get_backend
from .gradient_map import GradientMap, DEFAULT_GRADIENT_START, DEFAULT_GRADIENT_END
from .errors import (
    GradientMapError,
    UnsupportedPixelFormatError,
    RegionOutOfBoundsError,
    ReadOnlyBufferError,
)

__version__ = "1.0.0"

__all__ = [
    # colors
    "Color",
    "WHITE",
    "BLACK",
    "TRANSPARENT",
    # layout
    "PixelFormat",
    "SUPPORTED_FORMATS",
    "RED",
    "GREEN",
    "BLUE",
    "ALPHA",
    "Rectangle",
    "PixelBufferView",
    # transform
    "luma_array",
    "GradientMap",
    "DEFAULT_GRADIENT_START",
    "DEFAULT_GRADIENT_END",
    "Backend",
    "available_backends",
    "get_backend",
    # errors
    "GradientMapError",
    "UnsupportedPixelFormatError",
    "RegionOutOfBoundsError",
    "ReadOnlyBufferError",
    "__version__",
]
