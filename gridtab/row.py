"""Cells and rows of a table, and how tall a row has to be."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from gridtab.format import Format
from gridtab.text import word_wrap


class Cell:
    """One cell of a row: its text and its own format."""

    def __init__(self, text: str = "", row: Row | None = None) -> None:
        self.text = text
        self.row = row
        self._format = Format()

    def __repr__(self) -> str:
        return f"Cell({self.text!r})"

    def format(self) -> Format:
        """Return the cell's own format, for chained configuration."""
        return self._format

    @property
    def effective_format(self) -> Format:
        """The cell's format merged over its row's format and the defaults."""
        base = Format().set_defaults()
        if self.row is not None:
            base = Format.merge(self.row.format(), base)
        return Format.merge(self._format, base)


class Row:
    """An ordered collection of cells sharing a row-level format."""

    def __init__(self, cells: Iterable[Cell | str] = ()) -> None:
        self._cells: list[Cell] = []
        self._format: Format | None = None
        for cell in cells:
            self.add_cell(cell)

    def __repr__(self) -> str:
        return f"Row({self._cells!r})"

    def add_cell(self, cell: Cell | str) -> Cell:
        """Append *cell* (a Cell or plain text) and return the stored Cell."""
        if isinstance(cell, str):
            cell = Cell(cell)
        cell.row = self
        self._cells.append(cell)
        return cell

    def cell(self, index: int) -> Cell:
        return self._cells[index]

    def __getitem__(self, index: int) -> Cell:
        return self.cell(index)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def format(self) -> Format:
        """Return the row-level format, creating it on first use."""
        if self._format is None:
            self._format = Format()
        return self._format

    def configured_height(self) -> int:
        """The largest height explicitly configured on any cell, or 0."""
        heights = (cell.effective_format.settings.height for cell in self._cells)
        return max((h for h in heights if h is not None), default=0)

    def computed_height(self, column_widths: Sequence[int]) -> int:
        """The height the row needs so every cell's content fits its column."""
        if len(column_widths) < len(self._cells):
            raise IndexError("fewer column widths than cells in the row")
        return max(
            (
                self.cell_height(index, width)
                for index, width in zip(range(len(self._cells)), column_widths)
            ),
            default=0,
        )

    def cell_height(self, cell_index: int, column_width: int) -> int:
        """Padding above, wrapped text lines and padding below for one cell."""
        cell = self._cells[cell_index]
        settings = cell.effective_format.settings
        horizontal_padding = settings.padding_left + settings.padding_right
        if column_width > horizontal_padding:
            column_width -= horizontal_padding

        text = cell.text
        if "\n" in text:
            # Embedded line breaks are respected as they are.
            wrapped = text
        else:
            wrapped = word_wrap(
                text, column_width, settings.locale, settings.multi_byte_characters
            )

        lines = wrapped.count("\n")
        if wrapped and not wrapped.endswith("\n"):
            lines += 1
        return settings.padding_top + lines + settings.padding_bottom