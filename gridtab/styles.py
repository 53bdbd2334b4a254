"""Colours, alignments and font styles that a table element can carry."""

from __future__ import annotations

from enum import Enum


class Color(Enum):
    """Terminal colour of text, borders or corners; ``none`` leaves it unchanged."""

    none = 0
    grey = 1
    red = 2
    green = 3
    yellow = 4
    blue = 5
    magenta = 6
    cyan = 7
    white = 8


class FontAlign(Enum):
    """Horizontal alignment of the text inside a cell."""

    left = 0
    right = 1
    center = 2


class FontStyle(Enum):
    """Font attribute applied to cell text.

    The values follow declaration order, so styles can be sorted and merged
    in a stable way.
    """

    bold = 0
    dark = 1
    italic = 2
    underline = 3
    blink = 4
    reverse = 5
    concealed = 6
    crossed = 7