"""Exceptions raised while validating gradient-map inputs."""


class GradientMapError(Exception):
    """Base class for gradientmap errors."""


class UnsupportedPixelFormatError(GradientMapError, ValueError):
    """Pixel size or pixel format outside the supported set."""


class RegionOutOfBoundsError(GradientMapError, ValueError):
    """Region, stride or offset does not fit the image or the underlying buffer."""


class ReadOnlyBufferError(GradientMapError, TypeError):
    """The pixel buffer cannot be written in place."""
