"""Tests for the depth-first path finder."""

import pytest

from maze_solver.core.errors import MissingStartError
from maze_solver.core.maze_engine import Maze, Position
from maze_solver.core.maze_parser import parse_maze_text
from maze_solver.core.path_finder import construct_path, solve_maze


SIMPLE_MAZE = """S..#
.#.#
..G#"""

ENCLOSED_MAZE = """S.#.
..#G
..##"""

# The goal is two steps away going down, but the search prefers right.
DETOUR_MAZE = """S..
.#.
G.."""


def assert_valid_route(maze: Maze, route: list[Position]) -> None:
    """Check the route invariants: endpoints, adjacency, no repeats, no walls."""
    assert route[0] == maze.find_start()
    assert route[-1] == maze.find_goal()
    assert len(set(route)) == len(route)
    for pos in route:
        assert maze.in_bounds(pos)
        assert not maze.is_wall(pos)
    for a, b in zip(route, route[1:]):
        assert abs(a.row - b.row) + abs(a.col - b.col) == 1


class TestSolveMaze:
    """Tests for solve_maze."""

    def test_simple_maze_route(self):
        maze = parse_maze_text(SIMPLE_MAZE)
        result = solve_maze(maze)

        assert result.found
        assert result.route == [
            Position(0, 0),
            Position(0, 1),
            Position(0, 2),
            Position(1, 2),
            Position(2, 2),
        ]
        assert result.visited_count == 6
        assert_valid_route(maze, result.route)

    def test_route_is_not_necessarily_shortest(self):
        maze = parse_maze_text(DETOUR_MAZE)
        result = solve_maze(maze)

        assert result.route == [
            Position(0, 0),
            Position(0, 1),
            Position(0, 2),
            Position(1, 2),
            Position(2, 2),
            Position(2, 1),
            Position(2, 0),
        ]
        assert_valid_route(maze, result.route)

    def test_enclosed_goal_has_no_route(self):
        result = solve_maze(parse_maze_text(ENCLOSED_MAZE))

        assert not result.found
        assert result.route is None
        assert result.visited_count == 6

    def test_goal_next_to_start(self):
        result = solve_maze(parse_maze_text("SG"))
        assert result.route == [Position(0, 0), Position(0, 1)]

    def test_missing_start_raises(self):
        with pytest.raises(MissingStartError):
            solve_maze(parse_maze_text("..G\n..."))

    def test_empty_maze_raises_missing_start(self):
        with pytest.raises(MissingStartError):
            solve_maze(parse_maze_text(""))

    def test_missing_goal_has_no_route(self):
        result = solve_maze(parse_maze_text("S..\n..."))
        assert not result.found
        assert result.visited_count == 6

    def test_unknown_symbols_are_traversable(self):
        result = solve_maze(parse_maze_text("S?G"))
        assert result.route == [Position(0, 0), Position(0, 1), Position(0, 2)]

    def test_larger_maze(self):
        maze = parse_maze_text(
            "S.#......\n"
            ".##.####.\n"
            "...#...#.\n"
            "#.##.#.#.\n"
            "#....#..G"
        )
        result = solve_maze(maze)

        assert result.found
        assert_valid_route(maze, result.route)


class TestConstructPath:
    """Tests for route reconstruction."""

    def test_start_equals_goal(self):
        assert construct_path(Position(1, 1), {}) == [Position(1, 1)]

    def test_walks_back_to_origin(self):
        parents = {
            Position(0, 1): Position(0, 0),
            Position(1, 1): Position(0, 1),
            Position(1, 0): Position(0, 0),
        }
        assert construct_path(Position(1, 1), parents) == [
            Position(0, 0),
            Position(0, 1),
            Position(1, 1),
        ]
