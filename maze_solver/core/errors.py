"""
Exceptions raised by the maze solver.

Two tiers:
    MazeIOError         - the maze could not be read or the result could not
                          be written. Recoverable: the caller logs and exits.
    MazeIntegrityError  - the input was never a well-formed maze. Fatal: the
                          run stops without writing any output.
"""

from pathlib import Path
from typing import Optional


class MazeIOError(Exception):
    """Base class for recoverable I/O failures."""

    def __init__(self, message: str, path: Optional[Path | str] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class MazeParseError(MazeIOError):
    """Exception raised when a maze source cannot be opened or read."""

    pass


class MazeExportError(MazeIOError):
    """Exception raised when the result document cannot be written."""

    pass


class MazeIntegrityError(Exception):
    """Base class for fatal input-integrity faults."""

    pass


class MissingStartError(MazeIntegrityError):
    """Exception raised when the maze has no start cell."""

    def __init__(self, message: str = "No starting point 'S' found in the maze"):
        super().__init__(message)


class UnknownCellError(MazeIntegrityError):
    """Exception raised for a cell symbol outside the four legal classes."""

    def __init__(self, symbol, position=None):
        if position is not None:
            message = f"Unknown cell type {symbol!r} at {position}"
        else:
            message = f"Unknown cell type {symbol!r}"
        super().__init__(message)
        self.symbol = symbol
        self.position = position


class RaggedRowError(MazeIntegrityError):
    """Exception raised when a row's width differs from the first row."""

    def __init__(self, line_number: int, expected: int, actual: int):
        super().__init__(
            f"Line {line_number} has {actual} cells, expected {expected} "
            f"(width of the first line)"
        )
        self.line_number = line_number
        self.expected = expected
        self.actual = actual


class EndpointMismatchError(MazeIntegrityError):
    """Exception raised when scanned start/goal disagree with the route."""

    pass
