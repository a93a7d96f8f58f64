"""Grid fitting: pack cells into the fewest rows for a column count or width."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator

from .cell import Cell
from .constants import LEFT_TO_RIGHT
from .layout import Layout
from .options import GridOptions

logger = logging.getLogger("termgrid")


def _require_positive_int(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


class Grid:
    """
    An ordered collection of cells plus the options used to lay them out.

    Example:
        >>> from grid_core import LEFT_TO_RIGHT, Cell, Grid, GridOptions, Spaces
        >>> grid = Grid(GridOptions(filling=Spaces(1), direction=LEFT_TO_RIGHT))
        >>> for word in ["one", "two", "three"]:
        ...     grid.add(Cell.from_text(word))
        >>> print(grid.fit_into_width(24))
        one two three
    """

    def __init__(self, options: GridOptions | None = None) -> None:
        self.options = options if options is not None else GridOptions()
        self._cells: list[Cell] = []

    def add(self, cell: Cell) -> None:
        """Append a cell to the end of the grid."""
        if not isinstance(cell, Cell):
            raise TypeError(f"Grid cells must be Cell instances, got {type(cell).__name__}")
        self._cells.append(cell)

    def extend(self, cells: Iterable[Cell]) -> None:
        for cell in cells:
            self.add(cell)

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def fit_into_columns(self, column_count: int) -> Layout:
        """
        Lay the cells out in the given number of columns, with no maximum width.

        A column count larger than the number of cells gives one cell per column.

        Args:
            column_count: Positive number of columns.

        Returns:
            Layout: The arrangement; the last row may be short.

        Raises:
            ValueError: If column_count is not a positive integer.
        """
        _require_positive_int(column_count, "column_count")
        return self._layout(min(column_count, max(len(self._cells), 1)))

    def fit_into_width(self, max_width: int) -> Layout | None:
        """
        Find the layout with the most columns whose rows fit in max_width.

        The width budget includes separators. Returns None when no layout fits,
        which happens exactly when some cell is wider than max_width; printing one
        cell per line is then left to the caller.

        Raises:
            ValueError: If max_width is not a positive integer.
        """
        _require_positive_int(max_width, "max_width")

        cells = self._cells
        if not cells:
            return self._layout(1)

        widest = max(cell.width for cell in cells)
        if widest > max_width:
            logger.debug(f"No layout fits in width {max_width}: widest cell is {widest}")
            return None

        separator_width = self.options.filling.width
        upper_bound = len(cells)
        if separator_width > 0:
            upper_bound = min(upper_bound, max_width // separator_width + 1)
        if self.options.direction == LEFT_TO_RIGHT:
            # Every column holds a cell, so k columns need k * narrowest + (k - 1) * separator_width
            narrowest = min(cell.width for cell in cells)
            if narrowest + separator_width > 0:
                upper_bound = min(upper_bound, (max_width + separator_width) // (narrowest + separator_width))

        # Feasibility is not monotone for top_to_bottom, so check every candidate exactly
        for num_columns in range(upper_bound, 0, -1):
            layout = self._layout(num_columns)
            if layout.total_width <= max_width:
                logger.debug(
                    f"Fitted {len(cells)} cells into {num_columns} columns "
                    f"x {layout.num_rows} rows (width {layout.total_width}/{max_width})"
                )
                return layout

        # Unreachable: a single column is never wider than the widest cell
        return None

    def _layout(self, num_columns: int) -> Layout:
        num_rows = math.ceil(len(self._cells) / num_columns)
        return Layout(self._cells, self.options, num_rows, self._column_widths(num_rows, num_columns))

    def _column_widths(self, num_rows: int, num_columns: int) -> list[int]:
        widths = [0] * num_columns
        left_to_right = self.options.direction == LEFT_TO_RIGHT
        for index, cell in enumerate(self._cells):
            column = index % num_columns if left_to_right else index // num_rows
            widths[column] = max(widths[column], cell.width)
        return widths
