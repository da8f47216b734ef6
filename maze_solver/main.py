"""Maze Solver - command-line entry point.

Reads a maze text file, solves it with a depth-first search and writes the
grid and route as JSON.

Exit codes:
    0  route found and exported, or no route exists
    1  the maze could not be read, the document could not be written,
       or the configuration is invalid
    2  the maze is malformed (no start, unknown symbol, ragged rows)
"""

import argparse
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from maze_solver.config import Settings, get_settings
from maze_solver.core import (
    MazeIntegrityError,
    MazeIOError,
    load_maze_file,
    solve_maze,
)
from maze_solver.services.export_service import export_maze

logger = logging.getLogger("maze_solver")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_MALFORMED = 2


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze-solver",
        description="Solve a text maze and export it with its route as JSON.",
    )
    parser.add_argument("input", nargs="?", help="maze text file (default: MAZE_INPUT_PATH)")
    parser.add_argument("-o", "--output", help="JSON destination (default: MAZE_OUTPUT_PATH)")
    parser.add_argument(
        "--with-endpoints",
        action="store_true",
        default=None,
        help="include explicit start and goal coordinates",
    )
    parser.add_argument("--indent", type=int, help="JSON indent")
    parser.add_argument("--log-level", help="logging level name")
    parser.add_argument(
        "--show-maze",
        action="store_true",
        default=None,
        help="log the maze before and after solving",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Overlay command-line options on the environment settings."""
    overrides = {
        "input_path": args.input,
        "output_path": args.output,
        "include_endpoints": args.with_endpoints,
        "json_indent": args.indent,
        "log_level": args.log_level,
        "show_maze": args.show_maze,
    }
    base = get_settings().model_dump()
    base.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**base)


def run(argv: Optional[list[str]] = None) -> int:
    """Run one solve. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ValidationError as e:
        configure_logging("INFO")
        logger.error(f"Invalid configuration: {e}")
        return EXIT_ERROR

    configure_logging(settings.log_level)

    try:
        maze = load_maze_file(settings.input_path)
        if settings.show_maze:
            logger.info(f"Original maze:\n{maze.render()}")

        result = solve_maze(maze)
        if not result.found:
            logger.warning("No path found.")
            return EXIT_OK

        if settings.show_maze:
            logger.info(f"Solved maze:\n{maze.render(result.route)}")

        export_maze(
            maze,
            result.route,
            settings.output_path,
            include_endpoints=settings.include_endpoints,
            indent=settings.json_indent,
        )
    except MazeIOError as e:
        logger.error(str(e))
        return EXIT_ERROR
    except MazeIntegrityError as e:
        logger.critical(f"Malformed maze {settings.input_path}: {e}")
        return EXIT_MALFORMED

    logger.info("JSON file created successfully.")
    return EXIT_OK


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
