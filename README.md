# gridtab

Building blocks for aligned, formatted and colourised text tables in the terminal.

The package is made up of these modules:

- `gridtab.styles` has the `Color`, `FontAlign` and `FontStyle` enums.
- `gridtab.format` has `Format`, a chainable style description that can be layered by merging. It also has the `TrimMode` flag.
- `gridtab.text` measures, trims, splits and word-wraps cell text.
- `gridtab.row` has `Cell` and `Row`, and works out how tall a row must be.
- `gridtab.printer` produces ANSI escape sequences and aligned, styled cell content.
- `gridtab.asciidoc` has `AsciiDocExporter`, which renders rows as an AsciiDoc table.

## Installation

```
pip install gridtab
```

## Formatting

`Format` methods return the format itself, so you can chain settings:

```python
from gridtab.format import Format
from gridtab.styles import Color, FontAlign, FontStyle

fmt = (
    Format()
    .font_align(FontAlign.center)
    .font_style([FontStyle.bold])
    .font_color(Color.yellow)
    .padding(0)
    .corner("+")
)
```

Settings are stored in `fmt.settings`. A setting that was never made is `None`.

Sizes such as width, height and padding must be non-negative integers. Any other value raises `ValueError`.

`font_style()` adds to the styles that are already set; it does not replace them. `color()` sets the font, border and corner colour in one call, and `background_color()` does the same for the background.

You can layer formats with `Format.merge(first, second)`:

- Each setting comes from `first` if it is set there, and otherwise from `second`.
- Font styles are the exception. When `first` sets any, the result holds the union of both sets of styles, in style order.

`set_defaults()` fills in every setting except width and height:

- left alignment
- no font styles or colours
- one space of left and right padding, and no top or bottom padding
- `-` for top and bottom borders, `|` for side borders, all borders shown
- `+` corners
- `|` column separator
- multi-byte support off, an empty locale, and `TrimMode.both`

## Text helpers

```python
from gridtab.text import word_wrap, split_lines, sequence_length

wrapped = word_wrap("Long sentences automatically word-wrap", 10, "", False)
lines = split_lines(wrapped, "\n", "", False)
```

`word_wrap` breaks lines at spaces, tabs and dashes. A dash stays attached to the word before it.

A word too long for a line of its own is split, and every piece except the last ends in `-`. If `width` is too small to split a word at all, `ValueError` is raised.

`split_lines` drops a trailing piece that takes up no columns.

`sequence_length(text, locale, multi_byte)` counts characters. When `multi_byte` is true it measures terminal display width instead, using `wcwidth`, so wide and combining characters are measured correctly. If the text holds a character that is not printable, it falls back to the character count. The `locale` argument is accepted but does not affect the result.

`trim`, `trim_left`, `trim_right`, `index_of_any` and `explode_string` are also available.

## Rows and cells

```python
from gridtab.row import Row
from gridtab.styles import FontStyle

row = Row(["Command", "Description"])
row[0].format().font_style([FontStyle.bold])
height = row.computed_height([12, 10])
```

A cell's `effective_format` is its own format, merged over its row's format, merged over the defaults.

`cell_height` adds together three things:

- the top padding
- the number of lines in the wrapped text
- the bottom padding

Text that already contains line breaks is used as it is, without wrapping.

`configured_height()` returns the largest height set explicitly on any cell, or 0 if none is set.

## Printer helpers

`apply_element_style`, `reset_element_style`, `foreground_code`, `background_code` and `font_style_code` return ANSI escape sequences as strings.

`content_left_aligned`, `content_center_aligned` and `content_right_aligned` return styled content padded with spaces to the column width. Font styles apply only to the text; the padding keeps just the colours.

When centring, an odd leftover space goes in front of the text. Centring content that is wider than the column raises `ValueError`.

## AsciiDoc export

```python
from gridtab.asciidoc import AsciiDocExporter
from gridtab.row import Row

text = AsciiDocExporter().dump([Row(["Name", "Value"]), Row(["a", "1"])])
```

This produces:

```
[cols="<,<"]
|===
|Name|Value

|a|1
|===
```

The alignment of the first row's cells sets the `cols` header. Bold cells are wrapped in `*` and italic cells in `_`. Exporting an empty list of rows raises `ValueError`.

## What is not included

gridtab has no table object. It does not lay out whole tables: it does not compute column widths, and it does not draw borders, corners or separators around a grid of rows.

It has no Markdown or LaTeX exporters, and no command-line tool. The modules above are the pieces such a renderer would be built from.

## Running the tests

```
pip install -e .[test]
pytest
```