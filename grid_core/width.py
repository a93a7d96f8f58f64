"""Display-width measurement for strings shown in a monospaced terminal."""

from __future__ import annotations

import unicodedata


def char_width(ch: str) -> int:
    """Return the number of terminal columns a single character occupies."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) in ("Cc", "Cf"):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def display_width(text: str) -> int:
    """
    Measure the display width of a string.

    Wide and full-width East Asian characters count as two columns; combining marks
    and control/format characters count as zero.

    Args:
        text: String to measure.

    Returns:
        int: Number of fixed-width columns the string occupies.
    """
    return sum(char_width(ch) for ch in text)
