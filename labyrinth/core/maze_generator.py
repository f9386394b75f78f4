"""
Maze Generator for Labyrinth.

Builds perfect mazes with a randomized recursive backtracker:
a depth-first walk that carves a passage into a random unvisited
neighbour and backtracks along an explicit path stack when stuck.

The result is a spanning tree over all cells, so there is exactly
one route between any two cells and width * height - 1 open walls.
"""

import logging
import random
from typing import Union

from .maze_types import CLOSED_CELL, Direction, Grid, MazeError

logger = logging.getLogger(__name__)

RandomSource = Union[random.Random, int, None]

# Candidate order for neighbour collection: up, right, down, left
NEIGHBOUR_ORDER = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


class InvalidDimensionsError(MazeError):
    """Exception raised when a maze is requested with unusable dimensions."""

    pass


def _resolve_rng(rng: RandomSource) -> random.Random:
    """Turn a seed, an RNG, or None into a random.Random instance."""
    if rng is None:
        return random.Random()
    if isinstance(rng, random.Random):
        return rng
    if isinstance(rng, int) and not isinstance(rng, bool):
        return random.Random(rng)
    raise TypeError(f"rng must be a random.Random, an int seed or None, got {type(rng).__name__}")


def validate_dimensions(width: int, height: int) -> None:
    """
    Check that width and height describe a usable grid.

    Raises:
        InvalidDimensionsError: If either dimension is not a positive integer.
    """
    for label, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensionsError(
                f"Maze {label} must be an integer, got {type(value).__name__}"
            )
        if value <= 0:
            raise InvalidDimensionsError(
                f"Maze {label} must be greater than 0, got {value}"
            )


class MazeGenerator:
    """
    Randomized depth-first maze generator.

    Example usage:
        generator = MazeGenerator(rng=42)
        grid = generator.generate(10, 10)
    """

    def __init__(self, rng: RandomSource = None):
        """
        Initialize the generator with a random source.

        Args:
            rng: A random.Random instance, an int seed, or None for a fresh RNG.
        """
        self.rng = _resolve_rng(rng)

    def generate(self, width: int, height: int) -> Grid:
        """
        Generate a perfect maze.

        Args:
            width: Number of columns (> 0).
            height: Number of rows (> 0).

        Returns:
            Immutable Grid whose open walls form a spanning tree.

        Raises:
            InvalidDimensionsError: If width or height is not a positive integer.
            MazeError: If the walk ends before every cell is connected.
        """
        validate_dimensions(width, height)

        cells = [[list(CLOSED_CELL) for _ in range(width)] for _ in range(height)]
        visited = [[False] * width for _ in range(height)]

        start = (self.rng.randrange(height), self.rng.randrange(width))
        visited[start[0]][start[1]] = True
        path = [start]
        current = start
        visited_count = 1
        openings = 0
        total_cells = width * height

        logger.debug(
            f"Generating {width}x{height} maze from cell (row={start[0]}, col={start[1]})"
        )

        while visited_count < total_cells:
            row, col = current
            candidates = []
            for direction in NEIGHBOUR_ORDER:
                dx, dy = direction.delta
                next_row, next_col = row + dy, col + dx
                if 0 <= next_row < height and 0 <= next_col < width and not visited[next_row][next_col]:
                    candidates.append((next_row, next_col, direction))

            if candidates:
                next_row, next_col, direction = candidates[self.rng.randrange(len(candidates))]
                # Open the shared wall on both sides
                cells[row][col][direction.wall_index] = True
                cells[next_row][next_col][direction.opposite.wall_index] = True
                openings += 1

                visited[next_row][next_col] = True
                visited_count += 1
                current = (next_row, next_col)
                path.append(current)
            else:
                # Dead end: drop it and resume from the cell below it on the path
                path.pop()
                if not path:
                    break
                current = path[-1]

        if openings != total_cells - 1:
            raise MazeError(
                f"Generated maze is not a spanning tree: "
                f"{openings} openings for {total_cells} cells"
            )
        logger.debug(f"Maze generated with {openings} openings")

        return Grid(cells)


def generate(width: int, height: int, rng: RandomSource = None) -> Grid:
    """
    Generate a perfect maze of width x height cells.

    Args:
        width: Number of columns (> 0).
        height: Number of rows (> 0).
        rng: A random.Random instance, an int seed, or None.

    Returns:
        Immutable Grid.

    Raises:
        InvalidDimensionsError: If width or height is not a positive integer.
    """
    return MazeGenerator(rng).generate(width, height)
