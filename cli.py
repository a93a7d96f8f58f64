"""
CLI utilities for termgrid.

Handles command-line argument parsing, input reading and grid formatting.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from grid_core.cell import Cell
from grid_core.config import GridConfigService, options_from_settings
from grid_core.constants import DEFAULT_GRID_SETTINGS, VALID_ALIGNMENTS, VALID_DIRECTIONS
from grid_core.grid import Grid
from grid_core.options import GridOptions

logger = logging.getLogger("termgrid")

__version__ = "1.0.0"


class CLIError(ValueError):
    """User-facing CLI validation error with optional hint text."""

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class FriendlyArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises CLIError instead of exiting immediately."""

    def error(self, message: str) -> None:
        hint = None
        if "not allowed with argument" in message:
            hint = "Use either --width N or --columns N, not both."
        elif "invalid choice" in message and "direction" in message:
            hint = f"Use one of: {', '.join(VALID_DIRECTIONS)}."
        elif "positive integer" in message:
            hint = "Widths and column counts must be whole numbers greater than zero."
        usage = self.format_usage().strip()
        raise CLIError(f"Argument error: {message}\n{usage}", hint=hint)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a positive integer")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"'{value}' is not a positive integer")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a non-negative integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"'{value}' is not a non-negative integer")
    return number


def _resolve_grid_defaults() -> tuple[Path, dict]:
    """Resolve config path and grid setting defaults from CLI pre-parse."""
    config_probe = argparse.ArgumentParser(add_help=False)
    config_probe.add_argument("--config", type=Path, default=Path("config.yaml"))
    probe_args, _ = config_probe.parse_known_args()
    config_path = probe_args.config

    if "--help" in sys.argv or "-h" in sys.argv:
        return config_path, DEFAULT_GRID_SETTINGS.copy()

    try:
        settings = GridConfigService(config_path).load_grid_settings()
    except (ValueError, OSError, yaml.YAMLError) as exc:
        raise CLIError(
            f"Failed to load grid settings from {config_path}: {exc}",
            "Fix the grid section of config.yaml or provide a valid --config path.",
        )

    return config_path, settings


def parse_args() -> argparse.Namespace:
    """
    Parse command-line arguments for termgrid.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    config_path_default, settings = _resolve_grid_defaults()

    parser = FriendlyArgumentParser(
        description="Arrange lines of text into a compact grid of columns.",
        epilog="""
Examples:
  ls | %(prog)s --width 80                 # Fit into 80 columns, top to bottom
  %(prog)s words.txt --columns 4           # Exactly 4 columns
  %(prog)s words.txt -d left_to_right -S ' | '
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Files to read lines from (default: standard input)"
    )

    # Sizing (mutually exclusive)
    size_group = parser.add_argument_group("sizing (choose one)")
    size_exclusive = size_group.add_mutually_exclusive_group()
    size_exclusive.add_argument(
        "-w", "--width",
        type=_positive_int,
        default=settings['width'],
        help=f"Maximum total width, separators included (default: {settings['width']})"
    )
    size_exclusive.add_argument(
        "-c", "--columns",
        type=_positive_int,
        default=None,
        help="Exact number of columns, with no width limit"
    )

    # Layout options
    layout_group = parser.add_argument_group("layout options")
    layout_group.add_argument(
        "-d", "--direction",
        choices=VALID_DIRECTIONS,
        default=settings['direction'],
        help=f"Fill order for cells (default: {settings['direction']})"
    )
    layout_group.add_argument(
        "-s", "--separator-width",
        type=_non_negative_int,
        default=settings['separator_width'],
        help=f"Number of spaces between columns (default: {settings['separator_width']})"
    )
    layout_group.add_argument(
        "-S", "--separator",
        type=str,
        default=settings['separator'],
        help="Separator string between columns; overrides --separator-width"
    )
    layout_group.add_argument(
        "--align",
        dest="alignment",
        choices=VALID_ALIGNMENTS,
        default=settings['alignment'],
        help=f"Cell alignment within a column (default: {settings['alignment']})"
    )

    # Advanced options
    advanced_group = parser.add_argument_group("advanced options")
    advanced_group.add_argument(
        "--config",
        type=Path,
        default=config_path_default,
        help=f"Path to config YAML file (default: {config_path_default})"
    )
    advanced_group.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress console output except errors (log file unaffected)"
    )
    advanced_group.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose console output (DEBUG level, log file always at DEBUG)"
    )

    return parser.parse_args()


def resolve_grid_options(args: argparse.Namespace) -> GridOptions:
    """Build GridOptions from parsed CLI arguments."""
    settings = {
        'direction': args.direction,
        'separator_width': args.separator_width,
        'separator': args.separator,
        'alignment': args.alignment,
    }
    try:
        return options_from_settings(settings)
    except ValueError as exc:
        raise CLIError(str(exc)) from exc


def read_lines(paths: list[Path]) -> list[str]:
    """
    Read non-empty lines from the given files, or from stdin when none are given.

    Raises:
        CLIError: If a file cannot be read or the input is not valid UTF-8.
    """
    lines: list[str] = []
    if not paths:
        try:
            lines.extend(sys.stdin.read().splitlines())
        except UnicodeDecodeError as exc:
            raise CLIError(f"Cannot decode standard input: {exc}", "Input must be UTF-8 encoded text.")
    for path in paths:
        try:
            lines.extend(path.read_text(encoding="utf-8").splitlines())
        except UnicodeDecodeError as exc:
            raise CLIError(f"Cannot decode '{path}': {exc}", "Input files must be UTF-8 encoded text.")
        except OSError as exc:
            raise CLIError(f"Cannot read '{path}': {exc.strerror or exc}", "Check the file path and permissions.")
    return [line for line in lines if line]


def build_grid(lines: list[str], options: GridOptions) -> Grid:
    """Create a grid holding one cell per line, measured by display width."""
    grid = Grid(options)
    grid.extend(Cell.from_text(line) for line in lines)
    return grid


def format_grid(grid: Grid, width: int | None = None, columns: int | None = None) -> str:
    """
    Format a grid by column count or by maximum width.

    When nothing fits into the width, falls back to one cell per line.

    Args:
        grid: Grid to format.
        width: Maximum total width (ignored when columns is given).
        columns: Exact number of columns.

    Returns:
        str: The rendered text, without a trailing newline.
    """
    if columns is not None:
        return grid.fit_into_columns(columns).render()

    if width is None:
        width = DEFAULT_GRID_SETTINGS['width']

    layout = grid.fit_into_width(width)
    if layout is None:
        logger.warning(f"Some lines are wider than {width} columns; printing one per line")
        return "\n".join(cell.text for cell in grid)

    logger.debug(f"Using {layout.num_columns} columns for {len(grid)} cells")
    return layout.render()
