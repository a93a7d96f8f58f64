"""Core constants shared across layout and configuration helpers."""

LEFT_TO_RIGHT = "left_to_right"
TOP_TO_BOTTOM = "top_to_bottom"
VALID_DIRECTIONS = (LEFT_TO_RIGHT, TOP_TO_BOTTOM)
DEFAULT_DIRECTION = TOP_TO_BOTTOM

ALIGN_LEFT = "left"
ALIGN_RIGHT = "right"
VALID_ALIGNMENTS = (ALIGN_LEFT, ALIGN_RIGHT)
DEFAULT_ALIGNMENT = ALIGN_LEFT

DEFAULT_GRID_SETTINGS = {
    'direction': DEFAULT_DIRECTION,
    'separator_width': 2,
    'separator': None,
    'alignment': DEFAULT_ALIGNMENT,
    'width': 80,
}
