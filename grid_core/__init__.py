"""Core grid layout engine for termgrid."""

from .cell import Cell
from .config import GridConfigService, load_grid_options, options_from_settings
from .constants import (
    ALIGN_LEFT,
    ALIGN_RIGHT,
    LEFT_TO_RIGHT,
    TOP_TO_BOTTOM,
    VALID_ALIGNMENTS,
    VALID_DIRECTIONS,
)
from .grid import Grid
from .layout import Layout
from .options import GridOptions, Spaces, Text
from .width import display_width

__all__ = [
    "ALIGN_LEFT",
    "ALIGN_RIGHT",
    "Cell",
    "display_width",
    "Grid",
    "GridConfigService",
    "GridOptions",
    "Layout",
    "LEFT_TO_RIGHT",
    "load_grid_options",
    "options_from_settings",
    "Spaces",
    "Text",
    "TOP_TO_BOTTOM",
    "VALID_ALIGNMENTS",
    "VALID_DIRECTIONS",
]
