"""Exporting rows of cells as an AsciiDoc table."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from gridtab.row import Cell, Row
from gridtab.styles import FontAlign, FontStyle

_ALIGN_MARKS = {
    FontAlign.left: "<",
    FontAlign.center: "^",
    FontAlign.right: ">",
}


class Exporter(ABC):
    """Turns table rows into text in some markup."""

    @abstractmethod
    def dump(self, rows: Sequence[Row]) -> str:
        """Return the rendered markup for *rows*."""


class AsciiDocExporter(Exporter):
    """Renders rows as an AsciiDoc table; the first row is the header."""

    def dump(self, rows: Sequence[Row]) -> str:
        if not rows:
            raise ValueError("cannot export a table without rows")
        parts = [self._alignment_header(rows[0]), "\n"]
        for index, row in enumerate(rows):
            parts.extend(f"|{self._formatted_cell(cell)}" for cell in row)
            parts.append("\n")
            if index == 0:
                parts.append("\n")
        parts.append("|===")
        return "".join(parts)

    @staticmethod
    def _formatted_cell(cell: Cell) -> str:
        styles = cell.effective_format.settings.font_style or []
        text = cell.text
        if FontStyle.italic in styles:
            text = f"_{text}_"
        if FontStyle.bold in styles:
            text = f"*{text}*"
        return text

    @staticmethod
    def _alignment_header(header: Row) -> str:
        marks = ",".join(
            _ALIGN_MARKS.get(cell.effective_format.settings.font_align, "")
            for cell in header
        )
        return f'[cols="{marks}"]\n|==='