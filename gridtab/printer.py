"""ANSI styling and aligned rendering of cell content."""

from __future__ import annotations

from collections.abc import Iterable

from gridtab.format import Format
from gridtab.styles import Color, FontStyle

_RESET = "\033[00m"

_FOREGROUND = {
    Color.grey: "\033[30m",
    Color.red: "\033[31m",
    Color.green: "\033[32m",
    Color.yellow: "\033[33m",
    Color.blue: "\033[34m",
    Color.magenta: "\033[35m",
    Color.cyan: "\033[36m",
    Color.white: "\033[37m",
}

_BACKGROUND = {
    Color.grey: "\033[40m",
    Color.red: "\033[41m",
    Color.green: "\033[42m",
    Color.yellow: "\033[43m",
    Color.blue: "\033[44m",
    Color.magenta: "\033[45m",
    Color.cyan: "\033[46m",
    Color.white: "\033[47m",
}

_FONT_STYLE = {
    FontStyle.bold: "\033[1m",
    FontStyle.dark: "\033[2m",
    FontStyle.italic: "\033[3m",
    FontStyle.underline: "\033[4m",
    FontStyle.blink: "\033[5m",
    FontStyle.reverse: "\033[7m",
    FontStyle.concealed: "\033[8m",
    FontStyle.crossed: "\033[9m",
}


def foreground_code(color: Color) -> str:
    """Escape sequence for a text colour; empty for ``Color.none``."""
    return _FOREGROUND.get(color, "")


def background_code(color: Color) -> str:
    """Escape sequence for a background colour; empty for ``Color.none``."""
    return _BACKGROUND.get(color, "")


def font_style_code(style: FontStyle) -> str:
    """Escape sequence for a font style."""
    return _FONT_STYLE.get(style, "")


def apply_element_style(
    foreground: Color, background: Color, font_style: Iterable[FontStyle]
) -> str:
    """Escape sequences that switch on the given colours and styles."""
    return (
        foreground_code(foreground)
        + background_code(background)
        + "".join(font_style_code(style) for style in font_style)
    )


def reset_element_style() -> str:
    """Escape sequence that resets every colour and style."""
    return _RESET


def _styled(content: str, format: Format) -> str:
    settings = format.settings
    foreground = settings.font_color or Color.none
    background = settings.font_background_color or Color.none
    styles = settings.font_style or []
    # Font styles apply to the text only; padding keeps just the colours.
    return (
        apply_element_style(foreground, background, styles)
        + content
        + reset_element_style()
        + apply_element_style(foreground, background, ())
    )


def content_left_aligned(
    content: str, format: Format, text_with_padding_size: int, column_width: int
) -> str:
    """Styled *content* followed by the spaces that fill the column."""
    return _styled(content, format) + " " * max(column_width - text_with_padding_size, 0)


def content_center_aligned(
    content: str, format: Format, text_with_padding_size: int, column_width: int
) -> str:
    """Styled *content* centred in the column; an odd space goes in front."""
    spaces = column_width - text_with_padding_size
    if spaces < 0:
        raise ValueError("content is wider than the column")
    before = spaces - spaces // 2
    return " " * before + _styled(content, format) + " " * (spaces - before)


def content_right_aligned(
    content: str, format: Format, text_with_padding_size: int, column_width: int
) -> str:
    """The spaces that fill the column followed by styled *content*."""
    return " " * max(column_width - text_with_padding_size, 0) + _styled(content, format)