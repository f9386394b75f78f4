"""
Labyrinth maze value types.

Shared data model for generation and navigation:
- Direction (cardinal moves and their wall indices)
- Position (the player's cell)
- Grid (immutable per-cell wall flags)

Wall Format:
    Each cell holds four flags ordered [top, right, bottom, left].
    True  = open (passable)
    False = wall present
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


Cell = tuple[bool, bool, bool, bool]

CLOSED_CELL: Cell = (False, False, False, False)


class MazeError(ValueError):
    """Base exception for maze generation and navigation errors."""

    pass


class Direction(Enum):
    """Movement directions, valued by their wall index in a Cell."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        deltas = {
            Direction.UP: (0, -1),
            Direction.RIGHT: (1, 0),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
        }
        return deltas[self]

    @property
    def wall_index(self) -> int:
        """Index of this direction's flag in a Cell."""
        return self.value

    @property
    def opposite(self) -> "Direction":
        """Direction pointing back the way we came."""
        return Direction((self.value + 2) % 4)

    @classmethod
    def from_str(cls, name: str) -> "Direction":
        """
        Parse a symbolic direction name.

        Accepts the enum names (up, right, down, left) in any case, plus the
        compass aliases north, east, south and west.

        Raises:
            ValueError: If the name is not a known direction.
        """
        mapping = {
            "up": cls.UP,
            "north": cls.UP,
            "right": cls.RIGHT,
            "east": cls.RIGHT,
            "down": cls.DOWN,
            "south": cls.DOWN,
            "left": cls.LEFT,
            "west": cls.LEFT,
        }
        key = name.strip().lower()
        if key not in mapping:
            raise ValueError(
                f"Unknown direction '{name}'. "
                f"Must be one of: {', '.join(sorted(mapping))}"
            )
        return mapping[key]


@dataclass(frozen=True)
class Position:
    """2D position in the maze. x is the column, y is the row."""
    x: int
    y: int

    def move(self, direction: Direction) -> "Position":
        """Return new position after moving in direction."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}


class Grid:
    """
    Immutable maze grid of per-cell wall flags.

    Cells are addressed as cells[row][col]. Instances are produced by
    the generator and are safe to share between any number of readers.
    """

    __slots__ = ("_cells", "_width", "_height")

    def __init__(self, cells: list[list[list[bool]]]):
        """
        Freeze a rectangular list-of-rows of wall flags.

        Args:
            cells: Rows of cells, each cell a 4-item [top, right, bottom, left].

        Raises:
            MazeError: If the rows are empty, ragged, or a cell is malformed.
        """
        if not cells or not cells[0]:
            raise MazeError("Grid must have at least one row and one column")

        width = len(cells[0])
        frozen = []
        for row in cells:
            if len(row) != width:
                raise MazeError("Grid rows must all have the same width")
            frozen_row = []
            for cell in row:
                if len(cell) != 4:
                    raise MazeError("Each cell must have exactly four wall flags")
                frozen_row.append(tuple(bool(flag) for flag in cell))
            frozen.append(tuple(frozen_row))

        self._cells: tuple[tuple[Cell, ...], ...] = tuple(frozen)
        self._width = width
        self._height = len(frozen)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> tuple[tuple[Cell, ...], ...]:
        """Rows of cells, indexed [row][col]."""
        return self._cells

    @property
    def start(self) -> Position:
        """Fixed start cell (0, 0)."""
        return Position(0, 0)

    @property
    def goal(self) -> Position:
        """Goal cell in the far corner, (width - 1, height - 1)."""
        return Position(self._width - 1, self._height - 1)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside the grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    def cell(self, x: int, y: int) -> Cell:
        """Get wall flags of the cell at column x, row y."""
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self._width}x{self._height} grid")
        return self._cells[y][x]

    def is_open(self, position: Position, direction: Direction) -> bool:
        """Check the wall flag on the given side of a cell."""
        return self.cell(position.x, position.y)[direction.wall_index]

    def open_passages(self) -> Iterator[tuple[Position, Position]]:
        """
        Yield every open wall-pair once.

        Only right and down flags are inspected, so each shared wall between
        two cells is reported a single time.
        """
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                if cell[Direction.RIGHT.wall_index] and x + 1 < self._width:
                    yield Position(x, y), Position(x + 1, y)
                if cell[Direction.DOWN.wall_index] and y + 1 < self._height:
                    yield Position(x, y), Position(x, y + 1)

    def to_lists(self) -> list[list[list[bool]]]:
        """Return a mutable copy of the wall flags."""
        return [[list(cell) for cell in row] for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"


def neighbour(grid: Grid, position: Position, direction: Direction) -> Optional[Position]:
    """Adjacent position in direction, or None when it falls off the grid."""
    target = position.move(direction)
    if not grid.in_bounds(target.x, target.y):
        return None
    return target
