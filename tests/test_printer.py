import re

import pytest

from gridtab.format import Format
from gridtab.printer import (
    apply_element_style,
    background_code,
    content_center_aligned,
    content_left_aligned,
    content_right_aligned,
    font_style_code,
    foreground_code,
    reset_element_style,
)
from gridtab.styles import Color, FontStyle

_ANSI = re.compile(r"\033\[[0-9;]*m")


def _plain(text):
    return _ANSI.sub("", text)


def _defaults():
    return Format().set_defaults()


def test_none_colour_has_no_code():
    assert foreground_code(Color.none) == ""
    assert background_code(Color.none) == ""


def test_colour_codes_are_distinct_escapes():
    colours = [c for c in Color if c is not Color.none]
    fg = [foreground_code(c) for c in colours]
    bg = [background_code(c) for c in colours]
    assert len(set(fg)) == len(colours)
    assert len(set(bg)) == len(colours)
    assert set(fg).isdisjoint(bg)
    assert all(_ANSI.fullmatch(code) for code in fg + bg)


def test_font_style_codes_are_distinct_escapes():
    codes = [font_style_code(s) for s in FontStyle]
    assert len(set(codes)) == len(codes)
    assert all(_ANSI.fullmatch(code) for code in codes)


def test_apply_element_style_concatenates():
    result = apply_element_style(Color.red, Color.blue, [FontStyle.bold, FontStyle.italic])
    assert result == (
        foreground_code(Color.red)
        + background_code(Color.blue)
        + font_style_code(FontStyle.bold)
        + font_style_code(FontStyle.italic)
    )


def test_apply_element_style_empty():
    assert apply_element_style(Color.none, Color.none, []) == ""


def test_reset_is_escape():
    code = reset_element_style()
    assert code.startswith("\033[")
    assert code.endswith("m")
    assert _plain(code) == ""
    others = [foreground_code(c) for c in Color] + [font_style_code(s) for s in FontStyle]
    assert code not in others


def test_left_aligned_default_format():
    result = content_left_aligned("ab", _defaults(), 4, 6)
    assert result == "ab" + reset_element_style() + "  "


def test_left_aligned_no_fill_when_full():
    result = content_left_aligned("abc", _defaults(), 5, 5)
    assert result == "abc" + reset_element_style()


def test_right_aligned_places_spaces_first():
    result = content_right_aligned("xy", _defaults(), 4, 9)
    plain = _plain(result)
    assert plain.strip() == "xy"
    assert plain.endswith("xy")
    assert len(plain) - len(plain.lstrip(" ")) == 9 - 4


def test_center_even_split():
    plain = _plain(content_center_aligned("mid", _defaults(), 5, 9))
    leading = len(plain) - len(plain.lstrip(" "))
    trailing = len(plain) - len(plain.rstrip(" "))
    assert plain.strip() == "mid"
    assert leading == trailing
    assert leading + trailing == 9 - 5


def test_center_odd_puts_extra_space_before():
    plain = _plain(content_center_aligned("mid", _defaults(), 5, 10))
    leading = len(plain) - len(plain.lstrip(" "))
    trailing = len(plain) - len(plain.rstrip(" "))
    assert leading == trailing + 1
    assert leading + trailing == 10 - 5


def test_center_rejects_overflow():
    with pytest.raises(ValueError):
        content_center_aligned("toolong", _defaults(), 9, 5)


def test_font_style_applies_to_text_only():
    fmt = _defaults().font_style([FontStyle.bold]).font_color(Color.green)
    result = content_left_aligned("t", fmt, 1, 3)
    bold = font_style_code(FontStyle.bold)
    green = foreground_code(Color.green)
    head, tail = result.split(reset_element_style())
    assert head == green + bold + "t"
    assert bold not in tail
    assert tail.startswith(green)
    assert _plain(tail) == " " * (3 - 1)