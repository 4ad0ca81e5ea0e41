"""A text console whose output is kept as styled runs and rendered as HTML."""

from __future__ import annotations

import html
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from enum import IntFlag

from .color import Color

__all__ = ["TextStyle", "Style", "StyledConsole", "DEFAULT_FONT_SIZE"]

DEFAULT_FONT_SIZE = 11

_HTML_HEADER = """
         <html>
            <head></head>
            <body style="background-color:white;color:black;">
                <pre>"""

_HTML_FOOTER = """</pre>
            </body>
        </html>
    """


class TextStyle(IntFlag):
    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = BOLD | ITALIC


@dataclass(frozen=True)
class Style:
    """The colour, weight/slant and point size of a run of text."""

    color: Color = field(default_factory=lambda: Color.BLACK)
    font_style: TextStyle = TextStyle.NORMAL
    size: int = DEFAULT_FONT_SIZE

    def css(self) -> str:
        parts = [f"color:{self.color.to_html()};"]
        if self.font_style & TextStyle.BOLD:
            parts.append("font-weight:bold;")
        if self.font_style & TextStyle.ITALIC:
            parts.append("font-style:italic;")
        parts.append(f"font-size:{self.size}pt;")
        return "".join(parts)


class StyledConsole:
    """A writable text sink that remembers the style each piece was written in."""

    def __init__(self) -> None:
        self._style = Style()
        self._buffer: list[str] = []
        self._contents: list[tuple[Style, str]] = []

    @property
    def style(self) -> Style:
        return self._style

    @property
    def contents(self) -> list[tuple[Style, str]]:
        """Every styled run written so far, oldest first."""
        self._flush_buffer()
        return list(self._contents)

    def write(self, text: str) -> int:
        """Append text in the current style; returns the number of characters."""
        self._buffer.append(text)
        return len(text)

    def flush(self) -> None:
        """Move buffered text into the list of styled runs."""
        self._flush_buffer()

    def set_style(
        self,
        color: Color | None = None,
        style: TextStyle = TextStyle.NORMAL,
        size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        """Use the given style for text written from now on."""
        self._flush_buffer()
        self._style = Style(
            color if color is not None else Color.BLACK, TextStyle(style), size
        )

    def clear(self) -> None:
        """Forget everything written so far."""
        self._flush_buffer()
        self._contents.clear()

    def render_html(self) -> str:
        """Return the whole console as an HTML document."""
        self._flush_buffer()
        spans = "".join(
            f'<span style="{style.css()}">{html.escape(text, quote=True)}</span>'
            for style, text in self._contents
        )
        return _HTML_HEADER + spans + _HTML_FOOTER

    @contextmanager
    def styled(
        self,
        color: Color | None = None,
        style: TextStyle | None = None,
        size: int | None = None,
    ) -> Iterator[StyledConsole]:
        """Temporarily change the style; arguments left as None keep their value."""
        previous = self._style
        changes = {}
        if color is not None:
            changes["color"] = color
        if style is not None:
            changes["font_style"] = TextStyle(style)
        if size is not None:
            changes["size"] = size
        self._flush_buffer()
        self._style = replace(previous, **changes)
        try:
            yield self
        finally:
            self._flush_buffer()
            self._style = previous

    def _flush_buffer(self) -> None:
        text = "".join(self._buffer)
        self._buffer.clear()
        if text:
            self._contents.append((self._style, text))