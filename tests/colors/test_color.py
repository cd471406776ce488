import numpy as np
import pytest

from gradientmap.colors import Color, WHITE, BLACK, TRANSPARENT


def test_default_alpha_is_opaque():
    c = Color(10, 20, 30)
    assert c.rgba == (10, 20, 30, 255)
    assert c.is_opaque


def test_channel_accessors():
    c = Color(1, 2, 3, 4)
    assert (c.r, c.g, c.b, c.alpha, c.a) == (1, 2, 3, 4, 4)
    assert c.rgb == (1, 2, 3)
    assert tuple(c) == (1, 2, 3, 4)
    assert c[3] == 4
    assert len(c) == 4


def test_channels_are_clamped():
    assert Color(300, -5, 255, 1000).rgba == (255, 0, 255, 255)


def test_numpy_integers_accepted():
    c = Color(np.uint8(200), np.int64(3), 0, np.uint8(7))
    assert c.rgba == (200, 3, 0, 7)
    assert all(type(v) is int for v in c.rgba)


@pytest.mark.parametrize("bad", [1.5, "10", None, True])
def test_non_integer_channels_rejected(bad):
    with pytest.raises(TypeError):
        Color(bad, 0, 0)


def test_immutable():
    c = Color(1, 2, 3)
    with pytest.raises(AttributeError):
        c._value = (0, 0, 0, 0)
    with pytest.raises(AttributeError):
        c.extra = 1


def test_from_argb_takes_alpha_first():
    assert Color.from_argb(200, 43, 26, 1).rgba == (43, 26, 1, 200)


@pytest.mark.parametrize("text, expected", [
    ("#ffffff", (255, 255, 255, 255)),
    ("000000", (0, 0, 0, 255)),
    ("#2b1a01c8", (43, 26, 1, 200)),
    ("#f0a", (255, 0, 170, 255)),
    ("  #0A0b0C  ", (10, 11, 12, 255)),
])
def test_from_hex(text, expected):
    assert Color.from_hex(text).rgba == expected


@pytest.mark.parametrize("text", ["#12345", "#gg0000", "", "#123456789"])
def test_from_hex_invalid(text):
    with pytest.raises(ValueError):
        Color.from_hex(text)


def test_to_hex():
    assert Color(43, 26, 1, 200).to_hex() == "#2b1a01c8"
    assert Color.from_hex(Color(1, 2, 3, 4).to_hex()) == Color(1, 2, 3, 4)


def test_with_alpha_returns_new_color():
    c = Color(5, 6, 7)
    faded = c.with_alpha(100)
    assert faded.rgba == (5, 6, 7, 100)
    assert c.alpha == 255


def test_coerce():
    c = Color(1, 2, 3, 4)
    assert Color.coerce(c) is c
    assert Color.coerce((1, 2, 3)) == Color(1, 2, 3, 255)
    assert Color.coerce([1, 2, 3, 4]) == c
    assert Color.coerce(np.array([1, 2, 3, 4], dtype=np.uint8)) == c
    assert Color.coerce("#01020304") == c


def test_coerce_rejects_bad_shapes():
    with pytest.raises(ValueError):
        Color.coerce((1, 2))
    with pytest.raises(ValueError):
        Color.coerce(np.zeros((2, 4), dtype=np.uint8))


def test_value_semantics():
    assert Color(1, 2, 3) == Color(1, 2, 3, 255)
    assert Color(1, 2, 3) != Color(1, 2, 3, 254)
    assert len({Color(1, 2, 3), Color(1, 2, 3), Color(3, 2, 1)}) == 2
    assert Color(1, 2, 3) != (1, 2, 3, 255)


def test_named_colors():
    assert WHITE.rgba == (255, 255, 255, 255)
    assert BLACK.rgba == (0, 0, 0, 255)
    assert TRANSPARENT.alpha == 0


def test_as_array():
    arr = Color(1, 2, 3, 4).as_array()
    assert arr.dtype == np.float64
    assert np.array_equal(arr, [1.0, 2.0, 3.0, 4.0])
