from .pixel_buffer import PixelBufferView, RegionInput

__all__ = [
    "PixelBufferView",
    "RegionInput",
]
