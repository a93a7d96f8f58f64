"""Configuration helpers that turn the config.yaml grid section into options."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .constants import DEFAULT_GRID_SETTINGS, VALID_ALIGNMENTS, VALID_DIRECTIONS
from .options import GridOptions, Spaces, Text

logger = logging.getLogger("termgrid")


def _load_config(config_path: Path) -> dict:
    """Read a YAML config file; a missing file means an empty config."""
    if not config_path.exists():
        logger.debug(f"Config file {config_path} not found; using defaults")
        return {}
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Invalid config in {config_path}; expected mapping at top level.")
    return config


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class GridConfigService:
    """Stateful access wrapper for grid config helpers."""

    def __init__(self, config_file: Path = Path("config.yaml")) -> None:
        self.config_file = config_file

    def load_grid_settings(self) -> dict:
        config = _load_config(self.config_file)

        grid_config = config.get('grid', {})
        if grid_config is None:
            grid_config = {}
        if not isinstance(grid_config, dict):
            raise ValueError(f"Invalid grid section in {self.config_file}; expected mapping.")

        settings = DEFAULT_GRID_SETTINGS.copy()
        settings.update(grid_config)

        if settings['direction'] not in VALID_DIRECTIONS:
            allowed = ', '.join(VALID_DIRECTIONS)
            raise ValueError(f"Invalid grid.direction '{settings['direction']}' in {self.config_file}. Use one of: {allowed}.")
        if settings['alignment'] not in VALID_ALIGNMENTS:
            allowed = ', '.join(VALID_ALIGNMENTS)
            raise ValueError(f"Invalid grid.alignment '{settings['alignment']}' in {self.config_file}. Use one of: {allowed}.")
        if not _is_int(settings['separator_width']) or settings['separator_width'] < 0:
            raise ValueError("grid.separator_width must be a non-negative integer")
        if settings['separator'] is not None and not isinstance(settings['separator'], str):
            raise ValueError("grid.separator must be a string when set")
        if not _is_int(settings['width']) or settings['width'] <= 0:
            raise ValueError("grid.width must be a positive integer")

        return settings

    def load_grid_options(self) -> GridOptions:
        return options_from_settings(self.load_grid_settings())

    def load_default_width(self) -> int:
        return self.load_grid_settings()['width']


def options_from_settings(settings: dict) -> GridOptions:
    """
    Build GridOptions from a validated grid settings mapping.

    A string 'separator' takes precedence over 'separator_width'.
    """
    if settings.get('separator') is not None:
        filling = Text(settings['separator'])
    else:
        filling = Spaces(settings['separator_width'])
    return GridOptions(
        filling=filling,
        direction=settings['direction'],
        alignment=settings['alignment'],
    )


def load_grid_options(config_path: Path = Path("config.yaml")) -> GridOptions:
    """Load GridOptions from the grid section of a config file."""
    return GridConfigService(config_path).load_grid_options()
