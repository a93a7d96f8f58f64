"""Grid configuration: column filling, traversal direction and alignment."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import (
    DEFAULT_ALIGNMENT,
    DEFAULT_DIRECTION,
    VALID_ALIGNMENTS,
    VALID_DIRECTIONS,
)
from .width import display_width


@dataclass(frozen=True)
class Spaces:
    """Fill the gap between columns with a fixed number of spaces."""

    count: int

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 0:
            raise ValueError(f"Spaces count must be a non-negative integer, got {self.count!r}")

    @property
    def width(self) -> int:
        return self.count

    def render(self) -> str:
        return " " * self.count


@dataclass(frozen=True)
class Text:
    """Separate columns with an arbitrary string, such as ' | '."""

    separator: str

    def __post_init__(self):
        if not isinstance(self.separator, str):
            raise ValueError(f"Text separator must be a string, got {self.separator!r}")

    @property
    def width(self) -> int:
        return display_width(self.separator)

    def render(self) -> str:
        return self.separator


@dataclass(frozen=True)
class GridOptions:
    """
    User-assignable options for a grid, fixed once the grid is created.

    Attributes:
        filling: Separator placed between two columns, either Spaces or Text.
        direction: 'left_to_right' fills rows first (like a typewriter);
            'top_to_bottom' fills columns first (like ``ls``).
        alignment: 'left' pads cells on the right, 'right' pads them on the left.
    """

    filling: Spaces | Text = field(default_factory=lambda: Spaces(2))
    direction: str = DEFAULT_DIRECTION
    alignment: str = DEFAULT_ALIGNMENT

    def __post_init__(self):
        if not isinstance(self.filling, (Spaces, Text)):
            raise ValueError(f"filling must be Spaces or Text, got {self.filling!r}")
        if self.direction not in VALID_DIRECTIONS:
            allowed = ', '.join(VALID_DIRECTIONS)
            raise ValueError(f"Invalid direction '{self.direction}'. Use one of: {allowed}.")
        if self.alignment not in VALID_ALIGNMENTS:
            allowed = ', '.join(VALID_ALIGNMENTS)
            raise ValueError(f"Invalid alignment '{self.alignment}'. Use one of: {allowed}.")
