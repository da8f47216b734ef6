"""Maze document schemas for the exported JSON."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from maze_solver.core.maze_engine import CellType


class MazePosition(BaseModel):
    """Schema for a position in the maze (x = column, y = row)."""

    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)


class MazeCell(MazePosition):
    """Schema for a classified grid cell."""

    type: int = Field(..., ge=0, le=3)


class MazeDocument(BaseModel):
    """Schema for the exported maze and its solution."""

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    start: Optional[MazePosition] = None
    goal: Optional[MazePosition] = None
    maze: list[MazeCell]
    solution: list[MazePosition]

    @model_validator(mode="after")
    def check_grid(self) -> "MazeDocument":
        """Every cell of the width x height grid appears exactly once."""
        if len(self.maze) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} cells for a "
                f"{self.width}x{self.height} grid, got {len(self.maze)}"
            )

        points = [p for p in (self.start, self.goal) if p is not None]
        for pos in [*self.maze, *self.solution, *points]:
            if pos.x >= self.width or pos.y >= self.height:
                raise ValueError(
                    f"Position x={pos.x}, y={pos.y} is outside the "
                    f"{self.width}x{self.height} grid"
                )

        seen = {(cell.x, cell.y) for cell in self.maze}
        if len(seen) != len(self.maze):
            raise ValueError("Duplicate cell coordinates in maze")
        return self

    def to_grid_lines(self) -> list[str]:
        """Decode the cell codes back into maze text rows."""
        grid = [[""] * self.width for _ in range(self.height)]
        for cell in self.maze:
            grid[cell.y][cell.x] = CellType.from_code(cell.type).symbol
        return ["".join(row) for row in grid]
