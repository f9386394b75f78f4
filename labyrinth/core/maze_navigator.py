"""
Maze Navigator for Labyrinth.

Decides whether a single cardinal move is legal on a generated grid.
A move is blocked when the current cell's wall in that direction is
closed, or when the destination would leave the grid. Either condition
alone is enough.

The navigator never mutates anything: the caller owns the player
position and applies the returned MoveResult itself.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Union

from .maze_types import Direction, Grid, MazeError, Position, neighbour


class PositionOutOfBoundsError(MazeError):
    """Exception raised when a position handed to the navigator is off the grid."""

    pass


MoveStatus = Literal["blocked", "moved", "goal_reached"]


@dataclass(frozen=True)
class MoveResult:
    """Result of a move request."""
    status: MoveStatus
    position: Position

    @classmethod
    def blocked(cls, position: Position) -> "MoveResult":
        return cls(status="blocked", position=position)

    @classmethod
    def moved(cls, position: Position) -> "MoveResult":
        return cls(status="moved", position=position)

    @classmethod
    def goal_reached(cls, position: Position) -> "MoveResult":
        return cls(status="goal_reached", position=position)

    @property
    def is_blocked(self) -> bool:
        return self.status == "blocked"

    @property
    def is_goal(self) -> bool:
        return self.status == "goal_reached"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "status": self.status,
            "position": self.position.to_dict(),
        }


def _coerce_direction(direction: Union[Direction, str]) -> Direction:
    if isinstance(direction, Direction):
        return direction
    if not isinstance(direction, str):
        raise ValueError(
            f"Direction must be a Direction or its name, got {type(direction).__name__}"
        )
    return Direction.from_str(direction)


def try_move(
    grid: Grid,
    position: Position,
    direction: Union[Direction, str],
) -> MoveResult:
    """
    Validate one move from position in direction.

    Args:
        grid: Generated maze grid.
        position: Current player position.
        direction: Direction to move, as a Direction or its name.

    Returns:
        MoveResult.blocked with the unchanged position, or
        MoveResult.moved / MoveResult.goal_reached with the destination.

    Raises:
        PositionOutOfBoundsError: If position is not inside the grid.
        ValueError: If direction is an unknown name or not a string.
    """
    if not grid.in_bounds(position.x, position.y):
        raise PositionOutOfBoundsError(
            f"Position ({position.x}, {position.y}) is outside a "
            f"{grid.width}x{grid.height} maze"
        )
    direction = _coerce_direction(direction)

    # Wall check
    if not grid.is_open(position, direction):
        return MoveResult.blocked(position)

    # Bounds check
    target = neighbour(grid, position, direction)
    if target is None:
        return MoveResult.blocked(position)

    if target == grid.goal:
        return MoveResult.goal_reached(target)
    return MoveResult.moved(target)


def available_moves(grid: Grid, position: Position) -> list[Direction]:
    """List the directions that are not blocked from position."""
    return [
        direction
        for direction in Direction
        if not try_move(grid, position, direction).is_blocked
    ]


class MazeNavigator:
    """
    Move validation bound to a single grid.

    Example usage:
        navigator = MazeNavigator(grid)
        result = navigator.try_move(Position(0, 0), Direction.RIGHT)
        if not result.is_blocked:
            position = result.position
    """

    def __init__(self, grid: Grid):
        self.grid = grid

    def try_move(
        self,
        position: Position,
        direction: Union[Direction, str],
    ) -> MoveResult:
        """Validate one move on this navigator's grid."""
        return try_move(self.grid, position, direction)

    def available_moves(self, position: Position) -> list[Direction]:
        """List the directions that are not blocked from position."""
        return available_moves(self.grid, position)

    def is_goal(self, position: Optional[Position]) -> bool:
        """Check whether position is the goal cell."""
        return position == self.grid.goal
