"""RGB colours with a few named presets."""

from __future__ import annotations

import math
import random as _random
from functools import total_ordering
from typing import ClassVar

__all__ = ["Color"]


@total_ordering
class Color:
    """An immutable 24-bit RGB colour. Defaults to black."""

    __slots__ = ("_rgb",)

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    CYAN: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    GRAY: ClassVar[Color]

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0) -> None:
        if not all(0 <= c < 256 for c in (red, green, blue)):
            raise ValueError("Color values out of range.")
        self._rgb = (int(red) << 16) + (int(green) << 8) + int(blue)

    @property
    def red(self) -> int:
        return (self._rgb >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self._rgb >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self._rgb & 0xFF

    def to_rgb(self) -> int:
        """Return the colour as a 0xRRGGBB integer."""
        return self._rgb

    def to_html(self) -> str:
        """Return the colour as an HTML hex string such as ``#a0b0c0``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        """Build a colour from a 0xRRGGBB integer."""
        if hex_value < 0 or hex_value > 0xFFFFFF:
            raise ValueError("Color.from_hex(): Value out of range.")
        return cls((hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color:
        """Build a colour from hue, saturation and value, each in [0, 1]."""
        if not (0 <= h <= 1 and 0 <= s <= 1 and 0 <= v <= 1):
            raise ValueError("Color.from_hsv(): Values out of range.")

        def channel(n: int) -> float:
            k = math.fmod(n + h * 6, 6)
            return v - v * s * max(0.0, min(k, 4 - k, 1.0))

        return cls(int(255 * channel(5)), int(255 * channel(3)), int(255 * channel(1)))

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Color:
        """Return a randomly chosen colour."""
        source = rng if rng is not None else _random
        return cls(source.randint(0, 255), source.randint(0, 255), source.randint(0, 255))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb == other._rgb

    def __lt__(self, other: Color) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb < other._rgb

    def __hash__(self) -> int:
        return hash(self._rgb)

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"

    def __str__(self) -> str:
        for name in _PRESET_NAMES:
            if getattr(Color, name) == self:
                return f"Color.{name}"
        return self.to_html()


_PRESETS = {
    "BLACK": 0x000000,
    "BLUE": 0x0000FF,
    "CYAN": 0x00FFFF,
    "GRAY": 0x808080,
    "GREEN": 0x00FF00,
    "MAGENTA": 0xFF00FF,
    "RED": 0xFF0000,
    "WHITE": 0xFFFFFF,
    "YELLOW": 0xFFFF00,
}
_PRESET_NAMES = tuple(_PRESETS)

for _name, _value in _PRESETS.items():
    setattr(Color, _name, Color.from_hex(_value))