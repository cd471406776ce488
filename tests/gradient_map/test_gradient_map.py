import numpy as np
import pytest

from gradientmap import (
    Color,
    GradientMap,
    PixelBufferView,
    PixelFormat,
    DEFAULT_GRADIENT_START,
    DEFAULT_GRADIENT_END,
)
from gradientmap.errors import UnsupportedPixelFormatError


def test_defaults():
    gmap = GradientMap()
    assert gmap.start == DEFAULT_GRADIENT_START == Color(255, 255, 255, 255)
    assert gmap.end == DEFAULT_GRADIENT_END == Color(0, 0, 0, 255)


def test_accepts_color_like_inputs():
    gmap = GradientMap(start=(10, 20, 30), end="#2b1a01c8")
    assert gmap.start == Color(10, 20, 30, 255)
    assert gmap.end == Color.from_argb(200, 43, 26, 1)


def test_immutable():
    gmap = GradientMap()
    with pytest.raises(AttributeError):
        gmap._start = Color(0, 0, 0)


def test_with_colors():
    gmap = GradientMap()
    changed = gmap.with_colors(end=Color(1, 2, 3))
    assert changed.start == gmap.start
    assert changed.end == Color(1, 2, 3)
    assert gmap.end == DEFAULT_GRADIENT_END


def test_value_semantics():
    assert GradientMap() == GradientMap(Color(255, 255, 255), Color(0, 0, 0))
    assert GradientMap() != GradientMap(end=Color(0, 0, 1))
    assert hash(GradientMap()) == hash(GradientMap())
    assert "GradientMap(start=Color(r=255" in repr(GradientMap())


@pytest.mark.parametrize("fmt", [PixelFormat.RGB24, PixelFormat.RGB32, PixelFormat.ARGB32, "rgb24", "argb32"])
def test_check_format_accepts_supported(fmt):
    assert GradientMap.check_format(fmt) in GradientMap.supported_formats


@pytest.mark.parametrize("fmt", ["rgb48", "gray8", ""])
def test_check_format_rejects_unknown(fmt):
    with pytest.raises(UnsupportedPixelFormatError):
        GradientMap.check_format(fmt)


def test_apply_rejects_format_size_mismatch():
    raw = bytearray(range(8))
    view = PixelBufferView(raw, 4, 4, 1, 2)
    with pytest.raises(UnsupportedPixelFormatError):
        GradientMap().apply(view, pixel_format=PixelFormat.RGB24)
    assert list(raw) == list(range(8))


@pytest.mark.parametrize("fmt", [PixelFormat.RGB32, PixelFormat.ARGB32])
def test_apply_with_matching_format(backend, fmt):
    raw = bytearray([0, 0, 0, 77, 255, 255, 255, 99])
    view = PixelBufferView(raw, 8, 4, 2, 1)
    GradientMap(start=Color(200, 100, 50), end=Color(20, 40, 60)).apply(view, pixel_format=fmt, backend=backend)
    assert list(raw) == [20, 40, 60, 77, 200, 100, 50, 99]


def test_map_pixel_returns_ints():
    result = GradientMap().map_pixel(12, 200, 7)
    assert len(result) == 3
    assert all(type(v) is int for v in result)


def test_apply_array(backend):
    image = np.array([[[255, 255, 255], [0, 0, 0]]], dtype=np.uint8)
    GradientMap(start=Color(9, 8, 7), end=Color(1, 2, 3)).apply_array(image, backend=backend)
    assert image.tolist() == [[[9, 8, 7], [1, 2, 3]]]


def test_apply_array_region(backend):
    image = np.zeros((3, 3, 3), dtype=np.uint8)
    GradientMap(end=Color(5, 6, 7)).apply_array(image, region=(1, 1, 1, 1), backend=backend)
    assert image[1, 1].tolist() == [5, 6, 7]
    image[1, 1] = 0
    assert not image.any()
