from __future__ import annotations
from typing import Any, Optional, Tuple, Union
import numpy as np
from numpy import ndarray as NDArray

from ..errors import ReadOnlyBufferError, RegionOutOfBoundsError, UnsupportedPixelFormatError
from ..types.pixel_format import PixelFormat, format_for_channels
from ..types.rectangle import Rectangle

RegionInput = Union[Rectangle, Tuple[int, int, int, int]]


def _as_byte_array(buffer: Any) -> NDArray:
    """Flat, writable uint8 array sharing memory with ``buffer``."""
    try:
        mv = memoryview(buffer)
    except TypeError as exc:
        raise TypeError(
            f"Pixel buffer must support the buffer protocol, got {type(buffer).__name__}"
        ) from exc
    if mv.readonly:
        raise ReadOnlyBufferError("Pixel buffer is read-only; the gradient map mutates it in place")
    if not mv.c_contiguous:
        raise ValueError("Pixel buffer must be C-contiguous")
    return np.frombuffer(mv.cast('B'), dtype=np.uint8)


class PixelBufferView:
    """
    Non-owning, writable view of a strided 8-bit pixel buffer and a region in it.

    The view borrows ``buffer`` for as long as it lives and never reallocates
    or converts it. Row ``y`` of the image starts at byte
    ``offset + y * stride``; pixel ``x`` of that row starts ``x * pixel_size``
    bytes later. Bytes between ``image_width * pixel_size`` and ``stride`` are
    row padding and are never part of the region.

    All geometry is validated once, here. Per-channel accesses through
    :meth:`channel_offset` are only re-checked while assertions are enabled.

    Args:
        buffer: Writable object supporting the buffer protocol
        stride: Bytes per image row
        pixel_size: 3 or 4
        image_width: Image width in pixels
        image_height: Image height in pixels
        region: Target rectangle; the whole image when omitted
        offset: Byte offset of pixel (0, 0) inside ``buffer``
    """
    __slots__ = (
        '_data', 'stride', 'pixel_size', 'image_width', 'image_height', 'region', 'offset',
    )

    def __init__(
        self,
        buffer: Any,
        stride: int,
        pixel_size: int,
        image_width: int,
        image_height: int,
        region: Optional[RegionInput] = None,
        offset: int = 0,
    ) -> None:
        if pixel_size not in (3, 4):
            raise UnsupportedPixelFormatError(f"Pixel size must be 3 or 4 bytes, got {pixel_size}")
        if image_width < 0 or image_height < 0:
            raise RegionOutOfBoundsError(
                f"Image extents must be non-negative, got {image_width}x{image_height}"
            )
        if stride < image_width * pixel_size:
            raise RegionOutOfBoundsError(
                f"Stride {stride} is smaller than a row of {image_width} pixels "
                f"({image_width * pixel_size} bytes)"
            )
        if offset < 0:
            raise RegionOutOfBoundsError(f"Offset must be non-negative, got {offset}")

        region = Rectangle.full(image_width, image_height) if region is None else Rectangle(*region)
        if not region.fits_within(image_width, image_height):
            raise RegionOutOfBoundsError(
                f"Region {tuple(region)} exceeds image bounds {image_width}x{image_height}"
            )

        data = _as_byte_array(buffer)
        if not region.is_empty:
            last_byte = (
                offset
                + (region.bottom - 1) * stride
                + region.right * pixel_size
            )
            if last_byte > data.size:
                raise RegionOutOfBoundsError(
                    f"Region needs {last_byte} bytes but the buffer holds {data.size}"
                )

        self._data = data
        self.stride = stride
        self.pixel_size = pixel_size
        self.image_width = image_width
        self.image_height = image_height
        self.region = region
        self.offset = offset

    @classmethod
    def from_array(cls, image: NDArray, region: Optional[RegionInput] = None) -> PixelBufferView:
        """
        View over a C-contiguous ``(H, W, 3|4)`` uint8 array.

        Writes through the view land in ``image``.
        """
        if image.ndim != 3:
            raise ValueError(f"Expected image (H, W, 3|4), got shape {image.shape}")
        if image.dtype != np.uint8:
            raise TypeError(f"Expected uint8 dtype, got {image.dtype}")
        pixel_size = format_for_channels(image.shape[2]).pixel_size
        if not image.flags.c_contiguous:
            raise ValueError("Image array must be C-contiguous")
        height, width = image.shape[:2]
        return cls(
            image,
            stride=width * pixel_size,
            pixel_size=pixel_size,
            image_width=width,
            image_height=height,
            region=region,
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def data(self) -> NDArray:
        """The whole borrowed buffer as a flat uint8 array."""
        return self._data

    @property
    def pixel_format(self) -> PixelFormat:
        """Best guess of the layout; 4-byte views are reported as ``ARGB32``."""
        return format_for_channels(self.pixel_size)

    @property
    def region_start(self) -> int:
        """Byte offset of the region's top-left pixel."""
        return self.offset + self.region.top * self.stride + self.region.left * self.pixel_size

    @property
    def row_padding(self) -> int:
        """Bytes to skip after the last region pixel of a row to reach the next row."""
        return self.stride - self.region.width * self.pixel_size

    def channel_offset(self, x: int, y: int, channel: int) -> int:
        """Absolute byte offset of ``channel`` of pixel ``(x, y)`` (image coordinates)."""
        assert self.region.contains(x, y), f"Pixel ({x}, {y}) outside region {tuple(self.region)}"
        assert 0 <= channel < self.pixel_size, f"Channel {channel} outside pixel of {self.pixel_size} bytes"
        return self.offset + y * self.stride + x * self.pixel_size + channel

    def region_array(self) -> NDArray:
        """
        Zero-copy ``(height, width, pixel_size)`` view of the region bytes.

        Row padding is skipped by the row stride, so it is neither read nor
        written through the returned array.
        """
        region = self.region
        if region.is_empty:
            return np.empty((region.height, region.width, self.pixel_size), dtype=np.uint8)
        return np.ndarray(
            shape=(region.height, region.width, self.pixel_size),
            dtype=np.uint8,
            buffer=self._data,
            offset=self.region_start,
            strides=(self.stride, self.pixel_size, 1),
        )

    def __repr__(self) -> str:
        return (
            f"PixelBufferView(image={self.image_width}x{self.image_height}, "
            f"stride={self.stride}, pixel_size={self.pixel_size}, "
            f"region={tuple(self.region)}, offset={self.offset})"
        )
