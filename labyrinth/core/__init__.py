# Core module
from .maze_types import Cell, Direction, Grid, MazeError, Position
from .maze_generator import (
    InvalidDimensionsError,
    MazeGenerator,
    generate,
    validate_dimensions,
)
from .maze_navigator import (
    MazeNavigator,
    MoveResult,
    PositionOutOfBoundsError,
    available_moves,
    try_move,
)

__all__ = [
    "Cell",
    "Direction",
    "Grid",
    "MazeError",
    "Position",
    "InvalidDimensionsError",
    "MazeGenerator",
    "generate",
    "validate_dimensions",
    "MazeNavigator",
    "MoveResult",
    "PositionOutOfBoundsError",
    "available_moves",
    "try_move",
]
