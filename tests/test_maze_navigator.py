"""Tests for move validation."""

import pytest

from labyrinth.core.maze_generator import generate
from labyrinth.core.maze_navigator import (
    MazeNavigator,
    MoveResult,
    PositionOutOfBoundsError,
    available_moves,
    try_move,
)
from labyrinth.core.maze_types import Direction, Grid, MazeError, Position


class TestDirection:
    """Tests for Direction helpers."""

    def test_wall_indices(self):
        """Test that wall indices follow [top, right, bottom, left]."""
        assert [d.wall_index for d in Direction] == [0, 1, 2, 3]
        assert [d.name for d in Direction] == ["UP", "RIGHT", "DOWN", "LEFT"]

    def test_deltas(self):
        """Test that up decreases the row and right increases the column."""
        assert Direction.UP.delta == (0, -1)
        assert Direction.RIGHT.delta == (1, 0)
        assert Direction.DOWN.delta == (0, 1)
        assert Direction.LEFT.delta == (-1, 0)

    def test_opposite(self):
        """Test that opposites pair up."""
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.LEFT.opposite is Direction.RIGHT
        for direction in Direction:
            assert direction.opposite.opposite is direction

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("up", Direction.UP),
            ("NORTH", Direction.UP),
            ("Right", Direction.RIGHT),
            ("east", Direction.RIGHT),
            (" down ", Direction.DOWN),
            ("south", Direction.DOWN),
            ("left", Direction.LEFT),
            ("west", Direction.LEFT),
        ],
    )
    def test_from_str(self, name, expected):
        """Test parsing of symbolic direction names."""
        assert Direction.from_str(name) is expected

    def test_from_str_unknown(self):
        """Test that unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.from_str("diagonal")


class TestTryMove:
    """Tests for the move decision rule on a hand-built maze."""

    def test_open_wall_moves(self, small_grid):
        """Test that an open wall leads to the neighbouring cell."""
        result = try_move(small_grid, Position(0, 0), Direction.RIGHT)
        assert result == MoveResult.moved(Position(1, 0))
        assert not result.is_blocked
        assert not result.is_goal

    def test_closed_wall_blocks(self, small_grid):
        """Test that a closed wall blocks and keeps the position."""
        result = try_move(small_grid, Position(0, 1), Direction.RIGHT)
        assert result.is_blocked
        assert result.position == Position(0, 1)

    def test_edge_blocks(self, small_grid):
        """Test that moving off the grid from the start is blocked."""
        assert try_move(small_grid, Position(0, 0), Direction.UP).is_blocked
        assert try_move(small_grid, Position(0, 0), Direction.LEFT).is_blocked

    def test_goal_reached(self, small_grid):
        """Test that stepping onto the goal reports goal_reached."""
        result = try_move(small_grid, Position(1, 0), Direction.DOWN)
        assert result.status == "goal_reached"
        assert result.is_goal
        assert result.position == Position(1, 1)

    def test_leaving_goal_is_plain_move(self, small_grid):
        """Test that moving away from the goal is a normal move."""
        result = try_move(small_grid, Position(1, 1), Direction.UP)
        assert result == MoveResult.moved(Position(1, 0))

    def test_open_flag_on_boundary_still_blocked(self):
        """Test that bounds are checked even when the wall flag is open."""
        grid = Grid([[[True, True, True, True]]])
        for direction in Direction:
            result = try_move(grid, Position(0, 0), direction)
            assert result == MoveResult.blocked(Position(0, 0))

    def test_open_boundary_flag_beside_real_passage(self):
        """Test that an open edge flag blocks while the real passage works."""
        grid = Grid([[[True, True, False, False], [False, False, False, True]]])
        assert try_move(grid, Position(0, 0), Direction.UP).is_blocked
        assert try_move(grid, Position(0, 0), Direction.RIGHT).is_goal

    def test_accepts_direction_name(self, small_grid):
        """Test that string directions are parsed."""
        assert try_move(small_grid, Position(0, 0), "down") == MoveResult.moved(Position(0, 1))

    def test_unknown_direction_name(self, small_grid):
        """Test that an unknown direction name raises ValueError."""
        with pytest.raises(ValueError):
            try_move(small_grid, Position(0, 0), "sideways")

    @pytest.mark.parametrize("direction", [0, 2.5, None, ("up",)])
    def test_non_string_direction(self, small_grid, direction):
        """Test that a direction that is neither a Direction nor a name raises ValueError."""
        with pytest.raises(ValueError, match="must be a Direction or its name"):
            try_move(small_grid, Position(0, 0), direction)

    @pytest.mark.parametrize("position", [Position(-1, 0), Position(0, 2), Position(2, 0), Position(5, 5)])
    def test_position_out_of_bounds(self, small_grid, position):
        """Test that an off-grid starting position raises an error."""
        with pytest.raises(PositionOutOfBoundsError, match="outside"):
            try_move(small_grid, position, Direction.RIGHT)

    def test_position_error_is_maze_error(self, small_grid):
        """Test the error hierarchy of PositionOutOfBoundsError."""
        with pytest.raises(MazeError):
            try_move(small_grid, Position(9, 9), Direction.UP)

    def test_to_dict(self, small_grid):
        """Test MoveResult.to_dict()."""
        result = try_move(small_grid, Position(1, 0), Direction.DOWN)
        assert result.to_dict() == {"status": "goal_reached", "position": {"x": 1, "y": 1}}


class TestGeneratedMazes:
    """Navigator properties over generated mazes."""

    def test_start_closed_walls_block(self):
        """Test that every closed wall at (0, 0) blocks."""
        for seed in range(20):
            grid = generate(5, 5, seed)
            start = Position(0, 0)
            for direction in Direction:
                if not grid.cell(0, 0)[direction.wall_index]:
                    result = try_move(grid, start, direction)
                    assert result.is_blocked
                    assert result.position == start

    def test_results_stay_in_bounds(self):
        """Test that no result ever leaves the grid."""
        grid = generate(6, 4, 11)
        for y in range(grid.height):
            for x in range(grid.width):
                for direction in Direction:
                    result = try_move(grid, Position(x, y), direction)
                    assert grid.in_bounds(result.position.x, result.position.y)

    def test_goal_iff_destination_is_goal(self):
        """Test that goal_reached appears exactly when landing on the goal."""
        grid = generate(5, 5, 8)
        for y in range(grid.height):
            for x in range(grid.width):
                for direction in Direction:
                    result = try_move(grid, Position(x, y), direction)
                    if result.is_blocked:
                        continue
                    assert result.is_goal == (result.position == grid.goal)

    def test_repeatable(self):
        """Test that the same arguments always give the same result."""
        grid = generate(4, 4, 2)
        for y in range(grid.height):
            for x in range(grid.width):
                for direction in Direction:
                    first = try_move(grid, Position(x, y), direction)
                    assert try_move(grid, Position(x, y), direction) == first

    def test_three_by_three_reaches_goal_on_last_step(self, path_finder):
        """Test walking the solution of a 3x3 maze to the goal."""
        for seed in range(20):
            grid = generate(3, 3, seed)
            path = path_finder(grid, Position(0, 0), Position(2, 2))
            assert path

            position = Position(0, 0)
            for step, direction in enumerate(path, start=1):
                result = try_move(grid, position, direction)
                assert not result.is_blocked
                if step < len(path):
                    assert result.status == "moved"
                else:
                    assert result.status == "goal_reached"
                    assert result.position == Position(2, 2)
                position = result.position


class TestMazeNavigator:
    """Tests for the grid-bound navigator."""

    def test_try_move(self, small_grid):
        """Test that the navigator delegates to try_move."""
        navigator = MazeNavigator(small_grid)
        assert navigator.try_move(Position(0, 0), Direction.RIGHT) == try_move(
            small_grid, Position(0, 0), Direction.RIGHT
        )

    def test_available_moves(self, small_grid):
        """Test listing the unblocked directions."""
        navigator = MazeNavigator(small_grid)
        assert navigator.available_moves(Position(0, 0)) == [Direction.RIGHT, Direction.DOWN]
        assert navigator.available_moves(Position(0, 1)) == [Direction.UP]
        assert available_moves(small_grid, Position(1, 0)) == [Direction.DOWN, Direction.LEFT]

    def test_is_goal(self, small_grid):
        """Test goal detection."""
        navigator = MazeNavigator(small_grid)
        assert navigator.is_goal(Position(1, 1))
        assert not navigator.is_goal(Position(0, 0))
        assert not navigator.is_goal(None)
