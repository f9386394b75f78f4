"""Game session service tracking a single player through one maze."""

import logging
from typing import Optional, Union

from labyrinth.config import Settings, get_settings
from labyrinth.core.maze_generator import generate
from labyrinth.core.maze_navigator import MazeNavigator, MoveResult
from labyrinth.core.maze_types import Direction, Grid, Position
from labyrinth.schemas.maze import (
    MazeCreateRequest,
    MazeSnapshot,
    MoveRequest,
    MoveResponse,
)

logger = logging.getLogger(__name__)

MOVE_MESSAGES = {
    "blocked": "Cannot move {direction} - wall blocking",
    "goal_reached": "Congrats, you reached the goal!",
}


class GameSession:
    """
    Owns the player position for one maze and applies move results.

    The navigator only reports outcomes. This session accepts moved
    results, ignores blocked ones, and sends the player back to the
    start after the goal is reached.

    Example usage:
        game = GameSession(width=10, height=10, seed=7)
        result = game.move(Direction.RIGHT)
        snapshot = game.snapshot()
    """

    def __init__(
        self,
        grid: Optional[Grid] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        seed: Optional[int] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the session, generating a maze unless one is given.

        Args:
            grid: Pre-generated grid. When set, width, height and seed are ignored.
            width: Maze width. Defaults to settings.maze_width.
            height: Maze height. Defaults to settings.maze_height.
            seed: RNG seed. Defaults to settings.maze_seed.
            settings: Settings override. Defaults to get_settings().

        Raises:
            InvalidDimensionsError: If the maze dimensions are invalid.
        """
        self.settings = settings or get_settings()

        if grid is None:
            width = self.settings.maze_width if width is None else width
            height = self.settings.maze_height if height is None else height
            seed = self.settings.maze_seed if seed is None else seed
            grid = generate(width, height, seed)
            logger.info(f"Created {width}x{height} maze (seed={seed})")

        self.grid = grid
        self.navigator = MazeNavigator(grid)
        self.position: Position = grid.start
        self.move_count: int = 0
        self.goals_reached: int = 0

    @classmethod
    def from_request(
        cls,
        request: MazeCreateRequest,
        settings: Optional[Settings] = None,
    ) -> "GameSession":
        """Start a session on a new maze described by a validated request."""
        return cls(
            width=request.width,
            height=request.height,
            seed=request.seed,
            settings=settings,
        )

    def move(self, direction: Union[Direction, str]) -> MoveResult:
        """
        Request one move and apply its outcome.

        Args:
            direction: Direction to move, as a Direction or its name.

        Returns:
            The navigator's MoveResult. For goal_reached the result carries
            the goal position, while the session itself is already reset.
        """
        result = self.navigator.try_move(self.position, direction)

        if result.is_blocked:
            logger.debug(f"Move {direction} blocked at {self.position.to_dict()}")
            return result

        self.move_count += 1

        if result.is_goal:
            self.goals_reached += 1
            logger.info(
                f"Goal {result.position.to_dict()} reached after {self.move_count} moves"
            )
            self.reset()
            return result

        self.position = result.position
        return result

    def handle_move_request(self, request: MoveRequest) -> MoveResponse:
        """Apply a validated move request and describe the outcome."""
        direction = Direction.from_str(request.direction)
        result = self.move(direction)
        template = MOVE_MESSAGES.get(result.status)
        message = template.format(direction=direction.name.lower()) if template else None
        return MoveResponse.from_result(result, message=message)

    def reset(self) -> None:
        """Put the player back on the start cell."""
        self.position = self.grid.start

    def snapshot(self) -> MazeSnapshot:
        """Current maze and player state for a renderer."""
        return MazeSnapshot.from_grid(self.grid, self.position)
