"""Formatting settings for tables, rows, columns and cells."""

from __future__ import annotations

import copy
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, fields
from enum import Flag

from gridtab.styles import Color, FontAlign, FontStyle


class TrimMode(Flag):
    """Which ends of a cell's lines have whitespace trimmed."""

    none = 0
    left = 1
    right = 2
    both = left | right


@dataclass
class _Settings:
    """Every format attribute; None means "not set here, inherit it"."""

    width: int | None = None
    height: int | None = None

    font_align: FontAlign | None = None
    font_style: list[FontStyle] | None = None
    font_color: Color | None = None
    font_background_color: Color | None = None

    padding_left: int | None = None
    padding_top: int | None = None
    padding_right: int | None = None
    padding_bottom: int | None = None

    show_border_top: bool | None = None
    border_top: str | None = None
    border_top_color: Color | None = None
    border_top_background_color: Color | None = None

    show_border_bottom: bool | None = None
    border_bottom: str | None = None
    border_bottom_color: Color | None = None
    border_bottom_background_color: Color | None = None

    show_border_left: bool | None = None
    border_left: str | None = None
    border_left_color: Color | None = None
    border_left_background_color: Color | None = None

    show_border_right: bool | None = None
    border_right: str | None = None
    border_right_color: Color | None = None
    border_right_background_color: Color | None = None

    corner_top_left: str | None = None
    corner_top_left_color: Color | None = None
    corner_top_left_background_color: Color | None = None

    corner_top_right: str | None = None
    corner_top_right_color: Color | None = None
    corner_top_right_background_color: Color | None = None

    corner_bottom_left: str | None = None
    corner_bottom_left_color: Color | None = None
    corner_bottom_left_background_color: Color | None = None

    corner_bottom_right: str | None = None
    corner_bottom_right_color: Color | None = None
    corner_bottom_right_background_color: Color | None = None

    column_separator: str | None = None
    column_separator_color: Color | None = None
    column_separator_background_color: Color | None = None

    multi_byte_characters: bool | None = None
    locale: str | None = None
    trim_mode: TrimMode | None = None


_SIDES = ("left", "right", "top", "bottom")
_CORNERS = ("top_left", "top_right", "bottom_left", "bottom_right")


def _size(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValueError(f"expected a non-negative integer, got {value!r}")
    return value


class Format:
    """A chainable set of formatting attributes.

    The values live in :attr:`settings`; an attribute left as None is taken
    from a lower-precedence format when formats are merged.
    """

    def __init__(self) -> None:
        self.settings = _Settings()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Format):
            return NotImplemented
        return self.settings == other.settings

    def __repr__(self) -> str:
        return f"Format({self.settings!r})"

    def __deepcopy__(self, memo: dict) -> Format:
        result = Format()
        result.settings = copy.deepcopy(self.settings, memo)
        return result

    def _set(self, **values: object) -> Format:
        for name, value in values.items():
            setattr(self.settings, name, value)
        return self

    # Size

    def width(self, value: int) -> Format:
        return self._set(width=_size(value))

    def height(self, value: int) -> Format:
        return self._set(height=_size(value))

    # Padding

    def padding(self, value: int) -> Format:
        value = _size(value)
        return self._set(**{f"padding_{side}": value for side in _SIDES})

    def padding_left(self, value: int) -> Format:
        return self._set(padding_left=_size(value))

    def padding_right(self, value: int) -> Format:
        return self._set(padding_right=_size(value))

    def padding_top(self, value: int) -> Format:
        return self._set(padding_top=_size(value))

    def padding_bottom(self, value: int) -> Format:
        return self._set(padding_bottom=_size(value))

    # Border

    def border(self, value: str) -> Format:
        return self._set(**{f"border_{side}": value for side in _SIDES})

    def border_color(self, value: Color) -> Format:
        return self._set(**{f"border_{side}_color": value for side in _SIDES})

    def border_background_color(self, value: Color) -> Format:
        return self._set(**{f"border_{side}_background_color": value for side in _SIDES})

    def border_left(self, value: str) -> Format:
        return self._set(border_left=value)

    def border_left_color(self, value: Color) -> Format:
        return self._set(border_left_color=value)

    def border_left_background_color(self, value: Color) -> Format:
        return self._set(border_left_background_color=value)

    def border_right(self, value: str) -> Format:
        return self._set(border_right=value)

    def border_right_color(self, value: Color) -> Format:
        return self._set(border_right_color=value)

    def border_right_background_color(self, value: Color) -> Format:
        return self._set(border_right_background_color=value)

    def border_top(self, value: str) -> Format:
        return self._set(border_top=value)

    def border_top_color(self, value: Color) -> Format:
        return self._set(border_top_color=value)

    def border_top_background_color(self, value: Color) -> Format:
        return self._set(border_top_background_color=value)

    def border_bottom(self, value: str) -> Format:
        return self._set(border_bottom=value)

    def border_bottom_color(self, value: Color) -> Format:
        return self._set(border_bottom_color=value)

    def border_bottom_background_color(self, value: Color) -> Format:
        return self._set(border_bottom_background_color=value)

    def show_border(self) -> Format:
        return self._set(**{f"show_border_{side}": True for side in _SIDES})

    def hide_border(self) -> Format:
        return self._set(**{f"show_border_{side}": False for side in _SIDES})

    def show_border_top(self) -> Format:
        return self._set(show_border_top=True)

    def hide_border_top(self) -> Format:
        return self._set(show_border_top=False)

    def show_border_bottom(self) -> Format:
        return self._set(show_border_bottom=True)

    def hide_border_bottom(self) -> Format:
        return self._set(show_border_bottom=False)

    def show_border_left(self) -> Format:
        return self._set(show_border_left=True)

    def hide_border_left(self) -> Format:
        return self._set(show_border_left=False)

    def show_border_right(self) -> Format:
        return self._set(show_border_right=True)

    def hide_border_right(self) -> Format:
        return self._set(show_border_right=False)

    # Corner

    def corner(self, value: str) -> Format:
        return self._set(**{f"corner_{c}": value for c in _CORNERS})

    def corner_color(self, value: Color) -> Format:
        return self._set(**{f"corner_{c}_color": value for c in _CORNERS})

    def corner_background_color(self, value: Color) -> Format:
        return self._set(**{f"corner_{c}_background_color": value for c in _CORNERS})

    def corner_top_left(self, value: str) -> Format:
        return self._set(corner_top_left=value)

    def corner_top_left_color(self, value: Color) -> Format:
        return self._set(corner_top_left_color=value)

    def corner_top_left_background_color(self, value: Color) -> Format:
        return self._set(corner_top_left_background_color=value)

    def corner_top_right(self, value: str) -> Format:
        return self._set(corner_top_right=value)

    def corner_top_right_color(self, value: Color) -> Format:
        return self._set(corner_top_right_color=value)

    def corner_top_right_background_color(self, value: Color) -> Format:
        return self._set(corner_top_right_background_color=value)

    def corner_bottom_left(self, value: str) -> Format:
        return self._set(corner_bottom_left=value)

    def corner_bottom_left_color(self, value: Color) -> Format:
        return self._set(corner_bottom_left_color=value)

    def corner_bottom_left_background_color(self, value: Color) -> Format:
        return self._set(corner_bottom_left_background_color=value)

    def corner_bottom_right(self, value: str) -> Format:
        return self._set(corner_bottom_right=value)

    def corner_bottom_right_color(self, value: Color) -> Format:
        return self._set(corner_bottom_right_color=value)

    def corner_bottom_right_background_color(self, value: Color) -> Format:
        return self._set(corner_bottom_right_background_color=value)

    # Column separator

    def column_separator(self, value: str) -> Format:
        return self._set(column_separator=value)

    def column_separator_color(self, value: Color) -> Format:
        return self._set(column_separator_color=value)

    def column_separator_background_color(self, value: Color) -> Format:
        return self._set(column_separator_background_color=value)

    # Font

    def font_align(self, value: FontAlign) -> Format:
        return self._set(font_align=value)

    def font_style(self, styles: Iterable[FontStyle]) -> Format:
        """Add *styles* to the font styles already set."""
        if self.settings.font_style is None:
            self.settings.font_style = list(styles)
        else:
            self.settings.font_style.extend(styles)
        return self

    def font_color(self, value: Color) -> Format:
        return self._set(font_color=value)

    def font_background_color(self, value: Color) -> Format:
        return self._set(font_background_color=value)

    def color(self, value: Color) -> Format:
        """Set the colour of the font, the borders and the corners."""
        return self.font_color(value).border_color(value).corner_color(value)

    def background_color(self, value: Color) -> Format:
        """Set the background colour of the font, the borders and the corners."""
        return (
            self.font_background_color(value)
            .border_background_color(value)
            .corner_background_color(value)
        )

    # Internationalisation

    def multi_byte_characters(self, value: bool) -> Format:
        return self._set(multi_byte_characters=bool(value))

    def locale(self, value: str) -> Format:
        return self._set(locale=value)

    def trim_mode(self, value: TrimMode) -> Format:
        return self._set(trim_mode=value)

    def set_defaults(self) -> Format:
        """Fill every attribute except width and height with its default."""
        none = Color.none
        s = self.settings
        s.font_align = FontAlign.left
        s.font_style = []
        s.font_color = s.font_background_color = none
        s.padding_left = s.padding_right = 1
        s.padding_top = s.padding_bottom = 0
        s.border_top = s.border_bottom = "-"
        s.border_left = s.border_right = "|"
        for side in _SIDES:
            setattr(s, f"show_border_{side}", True)
            setattr(s, f"border_{side}_color", none)
            setattr(s, f"border_{side}_background_color", none)
        for corner in _CORNERS:
            setattr(s, f"corner_{corner}", "+")
            setattr(s, f"corner_{corner}_color", none)
            setattr(s, f"corner_{corner}_background_color", none)
        s.column_separator = "|"
        s.column_separator_color = s.column_separator_background_color = none
        s.multi_byte_characters = False
        s.locale = ""
        s.trim_mode = TrimMode.both
        return self

    @staticmethod
    def merge(first: Format, second: Format) -> Format:
        """Combine two formats, *first* taking precedence over *second*.

        Font styles are the exception: when *first* sets any, the result
        holds the union of both formats' styles, in style order.
        """
        result = Format()
        for field in fields(_Settings):
            name = field.name
            chosen = getattr(first.settings, name)
            if chosen is None:
                chosen = getattr(second.settings, name)
            setattr(result.settings, name, chosen)

        first_styles = first.settings.font_style
        second_styles = second.settings.font_style
        if first_styles is not None:
            union = Counter(first_styles) | Counter(second_styles or ())
            result.settings.font_style = sorted(union.elements(), key=lambda s: s.value)
        elif second_styles is not None:
            result.settings.font_style = list(second_styles)
        return result