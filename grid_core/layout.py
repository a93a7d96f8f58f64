"""Resolved grid layouts and their text rendering."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .cell import Cell
from .constants import ALIGN_RIGHT, LEFT_TO_RIGHT
from .options import GridOptions


class Layout:
    """
    A grid's cells arranged into rows and columns.

    Layouts are produced by Grid.fit_into_columns and Grid.fit_into_width and hold a
    snapshot of the grid's cells, so adding cells to the grid afterwards does not
    change an existing layout.
    """

    def __init__(self, cells: Sequence[Cell], options: GridOptions, num_rows: int, widths: Sequence[int]) -> None:
        if not widths:
            raise ValueError("A layout needs at least one column")
        self._cells = tuple(cells)
        self.options = options
        self.num_rows = num_rows
        self.widths = tuple(widths)

    @property
    def num_columns(self) -> int:
        return len(self.widths)

    @property
    def total_width(self) -> int:
        """Width of a full row: every column plus the separators between them."""
        return sum(self.widths) + (self.num_columns - 1) * self.options.filling.width

    def column_width(self, column: int) -> int:
        return self.widths[column]

    def _index(self, row: int, column: int) -> int:
        if self.options.direction == LEFT_TO_RIGHT:
            return row * self.num_columns + column
        return row + self.num_rows * column

    def cell_at(self, row: int, column: int) -> Cell | None:
        """
        Return the cell occupying a slot, or None for an empty slot.

        Raises:
            IndexError: If the row or column is outside the layout.
        """
        if not 0 <= row < self.num_rows or not 0 <= column < self.num_columns:
            raise IndexError(f"Slot ({row}, {column}) is outside a {self.num_rows}x{self.num_columns} layout")
        index = self._index(row, column)
        if index >= len(self._cells):
            return None
        return self._cells[index]

    def rows(self) -> Iterator[list[tuple[int, Cell]]]:
        """Yield each row as a list of (column, cell) pairs, skipping empty slots."""
        for row in range(self.num_rows):
            populated = []
            for column in range(self.num_columns):
                cell = self.cell_at(row, column)
                if cell is not None:
                    populated.append((column, cell))
            yield populated

    def _render_row(self, populated: list[tuple[int, Cell]]) -> str:
        separator = self.options.filling.render()
        pad_left = self.options.alignment == ALIGN_RIGHT
        parts = []
        for position, (column, cell) in enumerate(populated):
            padding = " " * (self.widths[column] - cell.width)
            is_last = position == len(populated) - 1
            if pad_left:
                parts.append(padding + cell.text)
            elif is_last:
                # No trailing padding on the final cell of a row
                parts.append(cell.text)
            else:
                parts.append(cell.text + padding)
            if not is_last:
                parts.append(separator)
        return "".join(parts)

    def render(self) -> str:
        """Render the layout as newline-joined rows."""
        return "\n".join(self._render_row(populated) for populated in self.rows())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Layout(num_rows={self.num_rows}, widths={list(self.widths)})"
