"""Text measurement, trimming, splitting and word wrapping for table cells."""

from __future__ import annotations

from collections.abc import Iterable

from wcwidth import wcswidth

# The characters that C-locale ``isspace`` accepts.
_C_SPACE = " \t\n\v\f\r"

_WRAP_SEPARATORS = (" ", "-", "\t")


def display_width(text: str, max_width: int) -> int:
    """Return the terminal column width of at most *max_width* characters of *text*.

    An empty string is 0 columns wide; -1 is returned when a measured
    character is not printable.
    """
    if not text:
        return 0
    return wcswidth(text, max_width)


def sequence_length(text: str, locale: str = "", multi_byte: bool = False) -> int:
    """Return how many columns *text* takes up.

    Without multi-byte support this is the number of characters. With it the
    display width is used, falling back to the number of characters when the
    text holds something that is not printable. *locale* is accepted for
    symmetry with cell formats; width measurement does not depend on it.
    """
    if not multi_byte:
        return len(text)
    width = display_width(text, len(text))
    return width if width >= 0 else len(text)


def trim_left(text: str) -> str:
    """Strip ASCII whitespace from the start of *text*."""
    return text.lstrip(_C_SPACE)


def trim_right(text: str) -> str:
    """Strip ASCII whitespace from the end of *text*."""
    return text.rstrip(_C_SPACE)


def trim(text: str) -> str:
    """Strip ASCII whitespace from both ends of *text*."""
    return trim_left(trim_right(text))


def index_of_any(text: str, start: int, separators: Iterable[str]) -> int | None:
    """Return the lowest index at or after *start* where any separator occurs, or None."""
    found = [index for sep in separators if (index := text.find(sep, start)) != -1]
    return min(found, default=None)


def explode_string(text: str, separators: Iterable[str]) -> list[str]:
    """Split *text* into words at the given separators.

    A whitespace separator becomes a word of its own; any other separator
    (such as a dash) stays attached to the word before it.
    """
    seps = list(separators)
    if any(not sep for sep in seps):
        raise ValueError("separators must not be empty")
    words: list[str] = []
    start = 0
    while True:
        index = index_of_any(text, start, seps)
        if index is None:
            words.append(text[start:])
            return words
        word = text[start:index]
        next_char = text[index]
        if next_char in _C_SPACE:
            words.extend((word, next_char))
        else:
            words.append(word + next_char)
        start = index + 1


def word_wrap(text: str, width: int, locale: str = "", multi_byte: bool = False) -> str:
    """Insert line breaks into *text* so that no line is wider than *width*.

    Words too long for a line of their own are split, each piece but the
    last ending in a dash. Raises ValueError when a word must be split but
    *width* leaves no room for any of it.
    """
    parts: list[str] = []
    line_length = 0
    for word in explode_string(text, _WRAP_SEPARATORS):
        if line_length + sequence_length(word, locale, multi_byte) > width:
            # Only break when the current line holds text, so wrapped
            # whitespace never produces empty lines.
            if line_length > 0:
                parts.append("\n")
                line_length = 0
            while sequence_length(word, locale, multi_byte) > width:
                if width < 2:
                    raise ValueError(f"cannot split {word!r} to fit a width of {width}")
                parts.append(word[: width - 1] + "-\n")
                word = word[width - 1 :]
            word = trim_left(word)
        parts.append(word)
        line_length += sequence_length(word, locale, multi_byte)
    return "".join(parts)


def split_lines(
    text: str, delimiter: str, locale: str = "", multi_byte: bool = False
) -> list[str]:
    """Split *text* at *delimiter*, dropping a trailing piece that takes no columns."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    *lines, last = text.split(delimiter)
    if sequence_length(last, locale, multi_byte):
        lines.append(last)
    return lines