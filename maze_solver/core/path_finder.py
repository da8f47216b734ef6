"""
Depth-first path finder.

Neighbours are generated up, down, left, right and pushed onto a LIFO
frontier, so they are explored right, left, down, up. The first route that
reaches the goal is returned; it is not necessarily the shortest.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .maze_engine import CellType, Direction, Maze, Position

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    """Result of a search."""

    route: Optional[list[Position]]
    visited_count: int = 0

    @property
    def found(self) -> bool:
        return self.route is not None


def solve_maze(maze: Maze) -> SolveResult:
    """
    Search the maze from its start cell to its goal cell.

    Args:
        maze: Parsed maze.

    Returns:
        SolveResult whose route runs start to goal, or None if the goal
        cannot be reached.

    Raises:
        MissingStartError: If the maze has no start cell.
    """
    start = maze.find_start()
    visited: set[Position] = {start}
    stack: list[Position] = [start]
    parents: dict[Position, Position] = {}

    while stack:
        current = stack.pop()
        if maze.get_char(current) == CellType.GOAL.symbol:
            route = construct_path(current, parents)
            logger.info(
                f"Route found: {len(route)} steps, {len(visited)} cells visited"
            )
            return SolveResult(route=route, visited_count=len(visited))

        for direction in Direction:
            neighbour = current.move(direction)
            if (
                maze.in_bounds(neighbour)
                and not maze.is_wall(neighbour)
                and neighbour not in visited
            ):
                stack.append(neighbour)
                visited.add(neighbour)
                parents[neighbour] = current

    logger.info(f"No route found after visiting {len(visited)} cells")
    return SolveResult(route=None, visited_count=len(visited))


def construct_path(
    goal: Position,
    parents: dict[Position, Position],
) -> list[Position]:
    """
    Walk the predecessor map back from the goal and return the route
    ordered start to goal.
    """
    path = []
    current = goal
    while current in parents:
        path.append(current)
        current = parents[current]
    path.append(current)
    path.reverse()
    return path
