# Schemas module
from .maze import (
    MazeCreateRequest,
    MazePosition,
    MazeSnapshot,
    MoveRequest,
    MoveResponse,
)

__all__ = [
    "MazeCreateRequest",
    "MazePosition",
    "MazeSnapshot",
    "MoveRequest",
    "MoveResponse",
]
