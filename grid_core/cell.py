"""Cell values: a piece of text paired with its pre-computed display width."""

from __future__ import annotations

from dataclasses import dataclass

from .width import display_width


@dataclass(frozen=True)
class Cell:
    """
    A string and the number of terminal columns it occupies.

    The width is trusted verbatim by the layout engine, so callers may supply their
    own value (for example to skip over escape sequences embedded in the text).

    Attributes:
        text: The string to display when the cell is rendered.
        width: Pre-computed display width, a non-negative integer.
    """

    text: str
    width: int

    def __post_init__(self):
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValueError(f"Cell width must be an integer, got {self.width!r}")
        if self.width < 0:
            raise ValueError(f"Cell width must be non-negative, got {self.width}")

    @classmethod
    def from_text(cls, text: str) -> "Cell":
        """Build a cell whose width is the Unicode display width of the text."""
        return cls(text=text, width=display_width(text))
