# Test CLI utilities
import io
import logging
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from cli import (
    CLIError,
    build_grid,
    format_grid,
    parse_args,
    read_lines,
    resolve_grid_options,
)
from grid_core.constants import LEFT_TO_RIGHT, TOP_TO_BOTTOM
from grid_core.options import GridOptions, Spaces, Text

PROJECT_ROOT = Path(__file__).resolve().parent.parent
NUMBER_WORDS = [
    "one", "two", "three", "four", "five", "six",
    "seven", "eight", "nine", "ten", "eleven", "twelve",
]


@pytest.fixture
def empty_cwd(tmp_path, monkeypatch):
    """Run from a directory without config.yaml so built-in defaults apply."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_cli_help():
    result = subprocess.run(
        [sys.executable, '-m', 'termgrid', '--help'],
        capture_output=True, text=True, cwd=PROJECT_ROOT,
    )
    assert result.returncode == 0
    assert 'usage' in result.stdout.lower()


# Test parse_args function
def test_parse_args_default(empty_cwd):
    with patch('sys.argv', ['termgrid.py']):
        args = parse_args()
        assert args.files == []
        assert args.width == 80
        assert args.columns is None
        assert args.direction == TOP_TO_BOTTOM
        assert args.separator_width == 2
        assert args.separator is None
        assert args.alignment == 'left'


def test_parse_args_with_width_and_files(empty_cwd):
    with patch('sys.argv', ['termgrid.py', '--width', '40', 'a.txt', 'b.txt']):
        args = parse_args()
        assert args.width == 40
        assert args.files == [Path('a.txt'), Path('b.txt')]


def test_parse_args_with_columns(empty_cwd):
    with patch('sys.argv', ['termgrid.py', '-c', '3', '-d', 'left_to_right']):
        args = parse_args()
        assert args.columns == 3
        assert args.direction == LEFT_TO_RIGHT


def test_parse_args_width_and_columns_conflict(empty_cwd):
    with patch('sys.argv', ['termgrid.py', '--width', '40', '--columns', '3']):
        with pytest.raises(CLIError) as exc_info:
            parse_args()
    assert "--width N or --columns N" in str(exc_info.value)


@pytest.mark.parametrize("value", ["0", "-3", "wide"])
def test_parse_args_invalid_width(empty_cwd, value):
    with patch('sys.argv', ['termgrid.py', '--width', value]):
        with pytest.raises(CLIError) as exc_info:
            parse_args()
    assert "Argument error" in str(exc_info.value)


def test_parse_args_invalid_direction(empty_cwd):
    with patch('sys.argv', ['termgrid.py', '--direction', 'diagonal']):
        with pytest.raises(CLIError) as exc_info:
            parse_args()
    assert "left_to_right" in str(exc_info.value)


def test_parse_args_defaults_from_config(tmp_path):
    config_file = tmp_path / "custom.yaml"
    config_file.write_text(
        "grid:\n"
        "  direction: left_to_right\n"
        "  separator: ' | '\n"
        "  width: 100\n"
    )
    with patch('sys.argv', ['termgrid.py', '--config', str(config_file)]):
        args = parse_args()
        assert args.config == config_file
        assert args.width == 100
        assert args.direction == LEFT_TO_RIGHT
        assert args.separator == ' | '


def test_parse_args_invalid_config(tmp_path):
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("grid:\n  width: -1\n")
    with patch('sys.argv', ['termgrid.py', '--config', str(config_file)]):
        with pytest.raises(CLIError) as exc_info:
            parse_args()
    assert "Failed to load grid settings" in str(exc_info.value)
    assert exc_info.value.hint is not None


# Test option resolution
def test_resolve_grid_options_spaces(empty_cwd):
    with patch('sys.argv', ['termgrid.py', '-s', '3', '--align', 'right']):
        options = resolve_grid_options(parse_args())
    assert options == GridOptions(filling=Spaces(3), direction=TOP_TO_BOTTOM, alignment='right')


def test_resolve_grid_options_separator_wins(empty_cwd):
    with patch('sys.argv', ['termgrid.py', '-s', '3', '-S', ' : ']):
        options = resolve_grid_options(parse_args())
    assert options.filling == Text(" : ")


# Test input reading
def test_read_lines_from_files_skips_blank_lines(tmp_path):
    first = tmp_path / "first.txt"
    first.write_text("alpha\n\nbeta\n", encoding="utf-8")
    second = tmp_path / "second.txt"
    second.write_text("gamma\n", encoding="utf-8")
    assert read_lines([first, second]) == ["alpha", "beta", "gamma"]


def test_read_lines_from_stdin(monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO("x\ny\n\nz\n"))
    assert read_lines([]) == ["x", "y", "z"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(CLIError) as exc_info:
        read_lines([tmp_path / "missing.txt"])
    assert "Cannot read" in str(exc_info.value)


# Test formatting
def test_format_grid_fits_width():
    grid = build_grid(NUMBER_WORDS, GridOptions(filling=Spaces(1), direction=LEFT_TO_RIGHT))
    assert format_grid(grid, width=24) == (
        "one  two three  four\n"
        "five six seven  eight\n"
        "nine ten eleven twelve"
    )


def test_format_grid_columns_take_precedence():
    grid = build_grid(["a", "b", "c"], GridOptions(filling=Spaces(1), direction=LEFT_TO_RIGHT))
    assert format_grid(grid, width=1, columns=3) == "a b c"


def test_format_grid_falls_back_to_one_per_line(caplog):
    grid = build_grid(["short", "a" * 30], GridOptions())
    with caplog.at_level(logging.WARNING, logger="termgrid"):
        output = format_grid(grid, width=10)
    assert output == "short\n" + "a" * 30
    assert "wider than 10 columns" in caplog.text


def test_format_grid_empty():
    assert format_grid(build_grid([], GridOptions()), width=10) == ""


def test_read_lines_invalid_utf8_file(tmp_path):
    bad_file = tmp_path / "bad.txt"
    bad_file.write_bytes(b"\xff")
    with pytest.raises(CLIError) as exc_info:
        read_lines([bad_file])
    assert exc_info.value.hint == "Input files must be UTF-8 encoded text."


def test_read_lines_invalid_utf8_stdin(monkeypatch):
    stdin = io.TextIOWrapper(io.BytesIO(b"ok\n\xff\n"), encoding="utf-8")
    monkeypatch.setattr('sys.stdin', stdin)
    with pytest.raises(CLIError) as exc_info:
        read_lines([])
    assert "standard input" in str(exc_info.value)
