"""
termgrid: arrange lines of text into a compact grid.

Main entry point for the termgrid command. Reads lines, lays them out with the
grid_core engine and prints the result.
"""

import logging
import sys

import yaml

from cli import CLIError, build_grid, format_grid, parse_args, read_lines, resolve_grid_options
from logging_config import setup_logging, get_logger


def _configure_console_logging(args, logger) -> None:
    """Apply console verbosity rules based on CLI flags."""
    termgrid_logger = logging.getLogger("termgrid")
    if args.verbose:
        for handler in termgrid_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled (console output at DEBUG level)")
    elif args.quiet:
        for handler in termgrid_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(logging.ERROR)


def main() -> int:
    """
    Main entry point for termgrid.

    Parses command-line arguments, reads the input lines and prints them as a grid.
    Returns 2 on argument, config or input errors.
    """
    try:
        args = parse_args()
    except CLIError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    # Initialize logging
    try:
        setup_logging(args.config)
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"ERROR: Invalid logging configuration in {args.config}: {e}", file=sys.stderr)
        return 2
    logger = get_logger("termgrid")

    _configure_console_logging(args, logger)

    try:
        options = resolve_grid_options(args)
        lines = read_lines(args.files)
    except CLIError as e:
        logger.error(str(e))
        return 2

    logger.debug(f"Read {len(lines)} lines; options: {options}")
    grid = build_grid(lines, options)
    output = format_grid(grid, width=args.width, columns=args.columns)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
