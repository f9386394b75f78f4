"""Labyrinth - perfect maze generation and move validation."""

from labyrinth.core import (
    Direction,
    Grid,
    InvalidDimensionsError,
    MazeError,
    MazeGenerator,
    MazeNavigator,
    MoveResult,
    Position,
    PositionOutOfBoundsError,
    generate,
    try_move,
)

__version__ = "1.0.0"

__all__ = [
    "Direction",
    "Grid",
    "InvalidDimensionsError",
    "MazeError",
    "MazeGenerator",
    "MazeNavigator",
    "MoveResult",
    "Position",
    "PositionOutOfBoundsError",
    "generate",
    "try_move",
]
