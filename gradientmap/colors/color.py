from __future__ import annotations
from typing import ClassVar, Iterator, Tuple, Union
from numbers import Integral
from boundednumbers import clamp
import numpy as np

ChannelTuple = Tuple[int, int, int, int]
ColorInput = Union["Color", str, Tuple[int, ...], list, np.ndarray]


class Color:
    """
    Immutable 8-bit RGBA color.

    Channels are clamped into ``[0, 255]``. Non-integral channel values are
    rejected, not rounded.

    >>> Color(255, 128, 0).rgba
    (255, 128, 0, 255)
    >>> Color.from_argb(200, 43, 26, 1).rgba
    (43, 26, 1, 200)
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    maxima: ClassVar[ChannelTuple] = (255, 255, 255, 255)
    null_value: ClassVar[ChannelTuple] = (0, 0, 0, 0)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: int, g: int, b: int, a: int = 255) -> None:
        channels = (r, g, b, a)
        for v in channels:
            if not isinstance(v, (Integral, np.integer)) or isinstance(v, bool):
                raise TypeError(f"Color channels must be integers, got {v!r}")

        self._value = tuple(
            int(clamp(int(v), 0, m)) for v, m in zip(channels, self.maxima)
        )
        super().__setattr__('_is_frozen', True)

    # ------------------ ALTERNATE CONSTRUCTORS ------------------
    @classmethod
    def coerce(cls, color: ColorInput) -> Color:
        """Accept a Color, a hex string, or a 3/4-element sequence or array of channels."""
        if isinstance(color, Color):
            return color
        if isinstance(color, str):
            return cls.from_hex(color)
        if isinstance(color, np.ndarray):
            if color.ndim != 1:
                raise ValueError("Color array must be 1-dimensional.")
            color = tuple(color.tolist())
        values = tuple(color)
        if len(values) not in (3, 4):
            raise ValueError(f"Color expects 3 or 4 channels, got {len(values)}")
        return cls(*values)

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> Color:
        """Build a color with alpha first, as in ``Color.FromArgb(a, r, g, b)``."""
        return cls(r, g, b, a)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` (leading ``#`` optional)."""
        digits = text.strip().lstrip('#')
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {text!r}")
        try:
            values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError as exc:
            raise ValueError(f"Invalid hex color: {text!r}") from exc
        return cls(*values)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelTuple:
        return self._value

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @property
    def alpha(self) -> int:
        return self._value[3]

    a = alpha

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self._value[:3]

    @property
    def rgba(self) -> ChannelTuple:
        return self._value

    @property
    def is_opaque(self) -> bool:
        return self._value[3] == 255

    def with_alpha(self, alpha: int) -> Color:
        """Return a new color with the alpha channel replaced."""
        return self.__class__(*self._value[:3], alpha)

    def to_hex(self) -> str:
        return '#' + ''.join(f"{v:02x}" for v in self._value)

    def as_array(self) -> np.ndarray:
        return np.array(self._value, dtype=np.float64)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, Color):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"Color(r={r}, g={g}, b={b}, a={a})"


WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)
TRANSPARENT = Color(0, 0, 0, 0)
