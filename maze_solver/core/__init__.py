# Core module
from .errors import (
    EndpointMismatchError,
    MazeExportError,
    MazeIntegrityError,
    MazeIOError,
    MazeParseError,
    MissingStartError,
    RaggedRowError,
    UnknownCellError,
)
from .maze_engine import CellType, Direction, Maze, Position
from .maze_parser import load_maze_file, parse_maze_lines, parse_maze_text
from .path_finder import SolveResult, construct_path, solve_maze

__all__ = [
    "CellType",
    "Direction",
    "Maze",
    "Position",
    "SolveResult",
    "solve_maze",
    "construct_path",
    "parse_maze_lines",
    "parse_maze_text",
    "load_maze_file",
    "MazeIOError",
    "MazeParseError",
    "MazeExportError",
    "MazeIntegrityError",
    "MissingStartError",
    "UnknownCellError",
    "RaggedRowError",
    "EndpointMismatchError",
]
