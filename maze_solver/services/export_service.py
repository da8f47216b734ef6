"""Export service for writing a solved maze as a JSON document."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from maze_solver.core.errors import (
    EndpointMismatchError,
    MazeExportError,
    MazeParseError,
    UnknownCellError,
)
from maze_solver.core.maze_engine import CellType, Maze, Position
from maze_solver.schemas.maze import MazeCell, MazeDocument, MazePosition

logger = logging.getLogger(__name__)


def classify_cell(char: str) -> int:
    """Map a cell symbol to its export code (S=0, G=1, .=2, #=3)."""
    return CellType.from_char(char).code


def _to_schema(pos: Position) -> MazePosition:
    return MazePosition(**pos.to_dict())


def build_document(
    width: int,
    height: int,
    maze: Maze,
    route: list[Position],
    include_endpoints: bool = False,
) -> MazeDocument:
    """
    Build the export document for a maze and its route.

    Args:
        width: Grid column count.
        height: Grid row count.
        maze: Parsed maze.
        route: Route ordered start to goal.
        include_endpoints: Also emit start and goal located by scanning the grid.

    Returns:
        MazeDocument ready to serialize.

    Raises:
        UnknownCellError: If a cell holds a symbol outside S, G, '.', '#'.
        EndpointMismatchError: If the scanned start/goal disagree with the route.
    """
    cells = []
    for pos in maze.positions():
        char = maze.get_char(pos)
        try:
            code = classify_cell(char)
        except UnknownCellError:
            raise UnknownCellError(char, position=pos) from None
        cells.append(MazeCell(x=pos.col, y=pos.row, type=code))

    endpoints = {}
    if include_endpoints:
        start = maze.find_start()
        goal = maze.find_goal()
        if not route or route[0] != start or route[-1] != goal:
            raise EndpointMismatchError(
                f"Scanned start {start} and goal {goal} do not match the route endpoints"
            )
        endpoints = {"start": _to_schema(start), "goal": _to_schema(goal)}

    return MazeDocument(
        width=width,
        height=height,
        maze=cells,
        solution=[_to_schema(pos) for pos in route],
        **endpoints,
    )


def serialize_document(document: MazeDocument, indent: int = 2) -> str:
    """Serialize to pretty-printed JSON, omitting unset start/goal."""
    return document.model_dump_json(indent=indent, exclude_none=True)


def write_document(
    document: MazeDocument,
    output_path: Path | str,
    indent: int = 2,
) -> int:
    """
    Write the document to a file.

    Returns:
        Number of bytes written.

    Raises:
        MazeExportError: If the file cannot be created or written.
    """
    output_path = Path(output_path)
    payload = serialize_document(document, indent=indent).encode("utf-8")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "wb") as f:
            f.write(payload)
    except OSError as e:
        raise MazeExportError(
            f"Failed to write maze document: {e}", path=output_path
        ) from e

    logger.info(f"Wrote maze document {output_path} ({len(payload)} bytes)")
    return len(payload)


def load_document(input_path: Path | str) -> MazeDocument:
    """
    Read a previously exported document.

    Raises:
        MazeParseError: If the file cannot be read or is not a valid document.
    """
    input_path = Path(input_path)
    try:
        return MazeDocument.model_validate_json(input_path.read_bytes())
    except OSError as e:
        raise MazeParseError(f"Failed to read maze document: {e}", path=input_path) from e
    except ValidationError as e:
        raise MazeParseError(f"Invalid maze document: {e}", path=input_path) from e


def export_maze(
    maze: Maze,
    route: list[Position],
    output_path: Path | str,
    include_endpoints: bool = False,
    indent: int = 2,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> MazeDocument:
    """Build the document for a solved maze and write it to output_path."""
    document = build_document(
        maze.cols if width is None else width,
        maze.rows if height is None else height,
        maze,
        route,
        include_endpoints=include_endpoints,
    )
    write_document(document, output_path, indent=indent)
    return document
