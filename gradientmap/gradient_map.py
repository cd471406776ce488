"""
Gradient map: recolor pixels by brightness with a two-stop gradient.

Each pixel's luma picks a color on the line from ``end`` (luma 0) to
``start`` (luma 1). The gradient colors' alpha, interpolated the same way,
sets how strongly that color replaces the original:

    luma   = (0.2126 r + 0.7152 g + 0.0722 b) / 255
    fade   = (luma * start.a + (1 - luma) * end.a) / 255
    mapped = luma * start.c + (1 - luma) * end.c
    c'     = round(fade * mapped + (1 - fade) * c)

Rounding is half to even. A pixel's own alpha byte is never modified.

Usage:
    >>> import numpy as np
    >>> from gradientmap import GradientMap, Color
    >>> image = np.zeros((2, 2, 4), dtype=np.uint8)
    >>> GradientMap(start=Color(255, 255, 255), end=Color(43, 26, 1, 200)).apply_array(image)
"""
from __future__ import annotations
from typing import ClassVar, FrozenSet, Optional, Tuple, Union
from boundednumbers import clamp
from numpy import ndarray as NDArray

from .buffer.pixel_buffer import PixelBufferView, RegionInput
from .colors.color import Color, ColorInput, WHITE, BLACK
from .errors import UnsupportedPixelFormatError
from .kernels import Backend, run_gradient_map
from .luma import luma as pixel_luma, CHANNEL_MAX
from .types.pixel_format import PixelFormat, SUPPORTED_FORMATS

DEFAULT_GRADIENT_START = WHITE
DEFAULT_GRADIENT_END = BLACK


class GradientMap:
    """
    Immutable gradient-map configuration.

    Args:
        start: Color for the brightest pixels (luma 1)
        end: Color for the darkest pixels (luma 0)
    """
    __slots__ = ('_start', '_end', '_is_frozen')

    supported_formats: ClassVar[FrozenSet[PixelFormat]] = SUPPORTED_FORMATS

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        start: ColorInput = DEFAULT_GRADIENT_START,
        end: ColorInput = DEFAULT_GRADIENT_END,
    ) -> None:
        self._start = Color.coerce(start)
        self._end = Color.coerce(end)
        super().__setattr__('_is_frozen', True)

    @property
    def start(self) -> Color:
        return self._start

    @property
    def end(self) -> Color:
        return self._end

    def with_colors(
        self,
        start: Optional[ColorInput] = None,
        end: Optional[ColorInput] = None,
    ) -> GradientMap:
        """Copy with one or both gradient colors replaced."""
        return GradientMap(
            start=self._start if start is None else start,
            end=self._end if end is None else end,
        )

    @classmethod
    def check_format(cls, pixel_format: Union[PixelFormat, str]) -> PixelFormat:
        """Return ``pixel_format`` as a PixelFormat, or raise if it is not supported."""
        try:
            fmt = PixelFormat(pixel_format)
        except ValueError as exc:
            raise UnsupportedPixelFormatError(f"Unknown pixel format: {pixel_format!r}") from exc
        if fmt not in cls.supported_formats:
            raise UnsupportedPixelFormatError(f"Gradient map does not support {fmt.value}")
        return fmt

    def map_pixel(self, r: int, g: int, b: int) -> Tuple[int, int, int]:
        """Gradient-mapped RGB for one pixel; matches the buffer kernels exactly."""
        start, end = self._start, self._end
        luma = pixel_luma(r, g, b)
        inv_luma = 1.0 - luma
        fade = (luma * start.alpha + inv_luma * end.alpha) / CHANNEL_MAX
        inv_fade = 1.0 - fade

        out = []
        for original, s, e in zip((r, g, b), start.rgb, end.rgb):
            mapped = luma * s + inv_luma * e
            out.append(int(clamp(round(fade * mapped + inv_fade * original), 0, 255)))
        return out[0], out[1], out[2]

    def apply(
        self,
        view: PixelBufferView,
        pixel_format: Optional[Union[PixelFormat, str]] = None,
        backend: Optional[Union[Backend, str]] = None,
    ) -> None:
        """
        Recolor the view's region in place.

        Only the R, G, B bytes of pixels inside ``view.region`` are written.

        Args:
            view: Borrowed pixel buffer and region
            pixel_format: When given, checked against :attr:`supported_formats`
                and against the view's pixel size before anything is written
            backend: Force a kernel backend (``"cython"`` or ``"numpy"``)
        """
        if pixel_format is not None:
            fmt = self.check_format(pixel_format)
            if fmt.pixel_size != view.pixel_size:
                raise UnsupportedPixelFormatError(
                    f"{fmt.value} uses {fmt.pixel_size} bytes per pixel, "
                    f"view has {view.pixel_size}"
                )
        run_gradient_map(view, self._start.rgba, self._end.rgba, backend=backend)

    def apply_array(
        self,
        image: NDArray,
        region: Optional[RegionInput] = None,
        backend: Optional[Union[Backend, str]] = None,
    ) -> None:
        """Recolor a C-contiguous ``(H, W, 3|4)`` uint8 array in place."""
        self.apply(PixelBufferView.from_array(image, region=region), backend=backend)

    def __eq__(self, other) -> bool:
        if isinstance(other, GradientMap):
            return (self._start, self._end) == (other._start, other._end)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"GradientMap(start={self._start!r}, end={self._end!r})"
