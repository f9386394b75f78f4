"""Pytest configuration and fixtures."""

from collections import deque

import pytest

from labyrinth.config import Settings, get_settings
from labyrinth.core.maze_types import Direction, Grid, Position


# 2x2 maze, goal at (1, 1):
#   (0,0) <-> (1,0), (0,0) <-> (0,1), (1,0) <-> (1,1)
SMALL_MAZE_CELLS = [
    [[False, True, True, False], [False, False, True, True]],
    [[True, False, False, False], [True, False, False, False]],
]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def small_grid() -> Grid:
    """Hand-built 2x2 perfect maze."""
    return Grid(SMALL_MAZE_CELLS)


@pytest.fixture
def settings() -> Settings:
    """Settings with a small fixed maze."""
    return Settings(maze_width=4, maze_height=3, maze_seed=1234)


def solve_path(grid: Grid, start: Position, target: Position) -> list[Direction]:
    """Shortest list of directions from start to target along open walls."""
    if start == target:
        return []

    queue = deque([(start, [])])
    visited = {start}

    while queue:
        pos, path = queue.popleft()
        for direction in Direction:
            if not grid.is_open(pos, direction):
                continue
            new_pos = pos.move(direction)
            if new_pos in visited or not grid.in_bounds(new_pos.x, new_pos.y):
                continue

            new_path = path + [direction]
            if new_pos == target:
                return new_path

            visited.add(new_pos)
            queue.append((new_pos, new_path))

    return []


@pytest.fixture
def path_finder():
    """BFS path finder over a grid's open walls."""
    return solve_path
