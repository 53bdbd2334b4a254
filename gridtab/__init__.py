"""Styles, formats, text wrapping, row sizing, ANSI printing helpers and AsciiDoc export for text tables."""

__version__ = "0.1.0"

__all__ = ["styles", "text", "format", "row", "printer", "asciidoc"]