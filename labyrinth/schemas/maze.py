"""Maze schemas for the presentation boundary."""

from typing import Optional

from pydantic import BaseModel, Field

from labyrinth.core.maze_navigator import MoveResult
from labyrinth.core.maze_types import Grid, Position


class MazeCreateRequest(BaseModel):
    """Schema for requesting a new maze."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    seed: Optional[int] = None


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)

    @classmethod
    def from_position(cls, position: Position) -> "MazePosition":
        return cls(x=position.x, y=position.y)

    def to_position(self) -> Position:
        return Position(self.x, self.y)


class MazeSnapshot(BaseModel):
    """Schema for the maze state a renderer needs.

    cells[row][col] holds [top, right, bottom, left]; a False flag is a
    wall panel to draw on that edge.
    """

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    cells: list[list[list[bool]]]
    position: MazePosition
    start: MazePosition
    goal: MazePosition

    @classmethod
    def from_grid(cls, grid: Grid, position: Position) -> "MazeSnapshot":
        return cls(
            width=grid.width,
            height=grid.height,
            cells=grid.to_lists(),
            position=MazePosition.from_position(position),
            start=MazePosition.from_position(grid.start),
            goal=MazePosition.from_position(grid.goal),
        )


class MoveRequest(BaseModel):
    """Schema for move request."""

    direction: str = Field(..., pattern="(?i)^(up|right|down|left|north|east|south|west)$")


class MoveResponse(BaseModel):
    """Schema for move response."""

    status: str = Field(..., pattern="^(blocked|moved|goal_reached)$")
    position: MazePosition
    message: Optional[str] = None

    @classmethod
    def from_result(cls, result: MoveResult, message: Optional[str] = None) -> "MoveResponse":
        return cls(
            status=result.status,
            position=MazePosition.from_position(result.position),
            message=message,
        )
