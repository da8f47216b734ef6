"""
Maze model for the maze solver.

Maze Format:
    S = Start position
    G = Goal
    # = Wall (impassable)
    . = Open path

Positions are (row, col), zero-indexed, row increasing downward and col
increasing rightward. Exported documents use x = col, y = row.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from .errors import MissingStartError, UnknownCellError


class CellType(Enum):
    """Types of cells in the maze, with their export codes."""

    START = ("S", 0)
    GOAL = ("G", 1)
    OPEN = (".", 2)
    WALL = ("#", 3)

    def __init__(self, symbol: str, code: int):
        self.symbol = symbol
        self.code = code

    @classmethod
    def from_char(cls, char: str) -> "CellType":
        """Convert character to CellType."""
        for cell in cls:
            if cell.symbol == char:
                return cell
        raise UnknownCellError(char)

    @classmethod
    def from_code(cls, code: int) -> "CellType":
        """Convert export code back to CellType."""
        for cell in cls:
            if cell.code == code:
                return cell
        raise UnknownCellError(code)


class Direction(Enum):
    """Movement directions, in neighbour generation order."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (d_row, d_col) for this direction."""
        deltas = {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }
        return deltas[self]


@dataclass(frozen=True)
class Position:
    """2D position in the maze."""

    row: int
    col: int

    def move(self, direction: Direction) -> "Position":
        """Return new position after moving in direction."""
        d_row, d_col = direction.delta
        return Position(self.row + d_row, self.col + d_col)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.col, "y": self.row}

    def __str__(self) -> str:
        return f"row {self.row}, col {self.col}"


@dataclass(frozen=True)
class Maze:
    """Rectangular grid of cell symbols. Immutable once parsed."""

    rows: int
    cols: int
    cells: tuple[str, ...]

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def get_char(self, pos: Position) -> str:
        """Get the raw symbol at position."""
        return self.cells[pos.row][pos.col]

    def is_wall(self, pos: Position) -> bool:
        return self.get_char(pos) == CellType.WALL.symbol

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Position(row, col)

    def _find(self, symbol: str) -> Optional[Position]:
        for row, line in enumerate(self.cells):
            col = line.find(symbol)
            if col != -1:
                return Position(row, col)
        return None

    def find_start(self) -> Position:
        """
        Locate the start cell, scanning rows top-to-bottom, left-to-right.

        Raises:
            MissingStartError: If no cell holds the start symbol.
        """
        start = self._find(CellType.START.symbol)
        if start is None:
            raise MissingStartError()
        return start

    def find_goal(self) -> Optional[Position]:
        """Locate the goal cell, or None if the maze has none."""
        return self._find(CellType.GOAL.symbol)

    def render(self, route: Optional[Iterable[Position]] = None) -> str:
        """
        Generate ASCII visualization of maze.

        Args:
            route: If provided, marks the route's intermediate cells with '*'.

        Returns:
            ASCII string representation.
        """
        marked = set(route) if route else set()
        lines = []
        for row, line in enumerate(self.cells):
            chars = []
            for col, char in enumerate(line):
                if char == CellType.OPEN.symbol and Position(row, col) in marked:
                    chars.append("*")
                else:
                    chars.append(char)
            lines.append("".join(chars))
        return "\n".join(lines)
