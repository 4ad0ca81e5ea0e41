"""Styled fonts: family, style, size and colour."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from enum import Enum

from .color import Color

__all__ = ["FontFamily", "FontStyle", "Font"]


class FontFamily(Enum):
    SERIF = "serif"
    SANS_SERIF = "sans_serif"
    MONOSPACE = "monospace"
    UNICODE_SERIF = "unicode_serif"
    UNICODE_SANS_SERIF = "unicode_sans_serif"
    UNICODE_MONOSPACE = "unicode_monospace"


class FontStyle(Enum):
    NORMAL = "<normal>"
    BOLD = "BOLD"
    ITALIC = "ITALIC"
    BOLD_ITALIC = "BOLDITALIC"


def _family_name(family: FontFamily) -> str:
    mac = sys.platform == "darwin"
    windows = sys.platform == "win32"
    if family is FontFamily.SERIF:
        return "Didot" if mac else "Serif"
    if family is FontFamily.SANS_SERIF:
        return "Helvetica" if mac else "Sans Serif"
    if family is FontFamily.MONOSPACE:
        return "Monaco" if mac else "Monospace"
    if family is FontFamily.UNICODE_SERIF:
        if mac:
            return "Times"
        return "Times New Roman" if windows else "Serif"
    if family is FontFamily.UNICODE_SANS_SERIF:
        if mac:
            return "Lucida Grande"
        return "Lucida Sans Unicode" if windows else "Sans Serif"
    if family is FontFamily.UNICODE_MONOSPACE:
        if mac:
            return "Lucida Grande"
        return "Lucida Sans Unicode" if windows else "Monospace"
    raise ValueError("Unknown font family.")


@dataclass(frozen=True)
class Font:
    """An immutable styled font."""

    family: FontFamily = FontFamily.SANS_SERIF
    style: FontStyle = FontStyle.NORMAL
    size: int = 13
    color: Color = field(default_factory=lambda: Color.BLACK)

    def with_family(self, family: FontFamily) -> Font:
        return replace(self, family=family)

    def with_style(self, style: FontStyle) -> Font:
        return replace(self, style=style)

    def with_size(self, size: int) -> Font:
        return replace(self, size=size)

    def with_color(self, color: Color) -> Font:
        return replace(self, color=color)

    def library_string(self) -> str:
        """Return the font as a ``Family-STYLE-size`` string for the drawing layer."""
        result = _family_name(self.family)
        if self.style is not FontStyle.NORMAL:
            result += f"-{self.style.value}"
        return f"{result}-{self.size}"