"""
Maze Parser for the maze solver.

Loads maze text files and turns them into a Maze grid.

The grid width is the length of the first line. Every later line must have
the same length; a ragged line is a malformed maze. Cell symbols are not
checked here, the exporter rejects unknown ones.
"""

import logging
from pathlib import Path
from typing import Iterable

from .errors import MazeParseError, RaggedRowError
from .maze_engine import Maze

logger = logging.getLogger(__name__)


def parse_maze_lines(lines: Iterable[str]) -> Maze:
    """
    Build a Maze from a sequence of text lines.

    Args:
        lines: One maze row per line. A trailing newline and then one
            carriage return are stripped; any other character stays
            in the row.

    Returns:
        Maze with one row per line.

    Raises:
        RaggedRowError: If a line's length differs from the first line's.
    """
    cells: list[str] = []
    cols = 0

    for line_number, line in enumerate(lines, start=1):
        row = line.removesuffix("\n").removesuffix("\r")
        if line_number == 1:
            cols = len(row)
        elif len(row) != cols:
            raise RaggedRowError(line_number, expected=cols, actual=len(row))
        cells.append(row)

    return Maze(rows=len(cells), cols=cols, cells=tuple(cells))


def parse_maze_text(maze_text: str) -> Maze:
    """
    Parse multi-line maze text.

    Rows are split on newlines only, so control characters such as form feeds
    stay inside a row and are rejected as unknown symbols on export.
    """
    lines = maze_text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return parse_maze_lines(lines)


def load_maze_file(file_path: Path | str) -> Maze:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.

    Returns:
        Parsed Maze.

    Raises:
        MazeParseError: If the file is missing or cannot be read.
        RaggedRowError: If the maze is not rectangular.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise MazeParseError(f"Maze file not found: {file_path}", path=file_path)

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}", path=file_path)

    try:
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            maze_text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}", path=file_path) from e

    maze = parse_maze_text(maze_text)
    logger.info(f"Loaded maze {file_path} ({maze.cols}x{maze.rows})")
    return maze
