"""Tests for the A* planner and its path reconstruction."""

from collections import deque
from random import Random
from typing import Optional

import pytest

from grid_planner.core.errors import InvalidInputError, PathReconstructionError
from grid_planner.core.grid import CellState, Grid, generate_grid
from grid_planner.core.motion import get_motion
from grid_planner.core.node import Node, node_id
from grid_planner.search import a_star as a_star_module
from grid_planner.search.a_star import AStar, plan
from grid_planner.search.closed_list import ClosedList


def _bfs_distance(grid: Grid, start: Node, goal: Node) -> Optional[int]:
    """Independent shortest-path length in steps, ``None`` if unreachable."""

    n = grid.n
    seen = {start.coords}
    queue = deque([(start.coords, 0)])
    while queue:
        (x, y), dist = queue.popleft()
        if (x, y) == goal.coords:
            return dist
        for m in get_motion():
            nx, ny = x + m.x, y + m.y
            if 0 <= nx < n and 0 <= ny < n and (nx, ny) not in seen and grid.is_free(nx, ny):
                seen.add((nx, ny))
                queue.append(((nx, ny), dist + 1))
    return None


def _assert_valid_path(grid: Grid, path, start: Node, goal: Node) -> None:
    assert path[0] == goal
    assert path[-1] == start
    steps = {(m.x, m.y) for m in get_motion()}
    for a, b in zip(path, path[1:]):
        assert (b.x - a.x, b.y - a.y) in steps
    for node in path:
        assert grid.get(node.x, node.y) != CellState.OBSTACLE


def test_three_by_three_free_grid():
    grid = Grid.empty(3)
    found, path = AStar(grid).plan(Node(0, 0), Node(2, 2))
    assert found
    assert len(path) == 5
    _assert_valid_path(grid, path, Node(0, 0), Node(2, 2))
    # reversed path runs start to goal
    assert list(reversed(path))[0] == Node(0, 0)


def test_start_equals_goal():
    found, path = AStar(Grid.empty(4)).plan(Node(1, 2), Node(1, 2))
    assert found
    assert path == [Node(1, 2)]


def test_wall_blocks_path():
    cells = [[0] * 5 for _ in range(5)]
    for y in range(5):
        cells[2][y] = CellState.OBSTACLE
    grid = Grid(cells)
    found, path = AStar(grid).plan(Node(0, 0), Node(4, 4))
    assert found is False
    assert path == []


def test_path_goes_around_obstacle():
    grid = Grid(
        [
            [0, 0, 0],
            [1, 1, 0],
            [0, 0, 0],
        ]
    )
    start, goal = Node(2, 0), Node(0, 0)
    found, path = AStar(grid).plan(start, goal)
    assert found
    _assert_valid_path(grid, path, start, goal)
    assert len(path) == 7


def test_parent_links_and_costs():
    start, goal = Node(0, 0), Node(0, 3)
    found, path = AStar(Grid.empty(4)).plan(start, goal)
    assert found
    for child, parent in zip(path, path[1:]):
        assert child.pid == parent.id
        assert child.cost == parent.cost + 1
    assert path[0].cost == 3


@pytest.mark.parametrize("seed", range(25))
def test_matches_bfs_on_random_grids(seed: int):
    rng = Random(seed)
    n = rng.randint(2, 9)
    grid = generate_grid(n, rng, obstacle_probability=0.3)
    start = Node(rng.randrange(n), rng.randrange(n))
    goal = Node(rng.randrange(n), rng.randrange(n))
    grid.set(start.x, start.y, CellState.FREE)
    grid.set(goal.x, goal.y, CellState.FREE)

    found, path = AStar(grid).plan(start, goal)
    expected = _bfs_distance(grid, start, goal)
    if expected is None:
        assert (found, path) == (False, [])
    else:
        assert found
        assert len(path) == expected + 1
        _assert_valid_path(grid, path, start, goal)


def test_repeated_calls_are_deterministic():
    rng = Random(42)
    grid = generate_grid(12, rng, obstacle_probability=0.2)
    start, goal = Node(0, 0), Node(11, 11)
    grid.set(0, 0, CellState.FREE)
    grid.set(11, 11, CellState.FREE)
    planner = AStar(grid)
    first = planner.plan(start, goal)
    second = planner.plan(start, goal)
    third = AStar(grid).plan(start, goal)
    coords = lambda result: (result[0], [n.coords for n in result[1]])
    assert coords(first) == coords(second) == coords(third)


def test_original_grid_is_untouched():
    grid = Grid.empty(4)
    before = grid.copy()
    planner = AStar(grid)
    planner.plan(Node(0, 0), Node(3, 3))
    assert grid == before
    assert planner.grid.get(0, 0) == CellState.VISITED
    assert planner.grid.get(3, 3) == CellState.VISITED


def test_out_of_bounds_input_rejected():
    planner = AStar(Grid.empty(3))
    with pytest.raises(InvalidInputError):
        planner.plan(Node(-1, 0), Node(2, 2))
    with pytest.raises(InvalidInputError):
        planner.plan(Node(0, 0), Node(3, 0))


def test_expansion_budget_reports_not_found(caplog):
    planner = AStar(Grid.empty(10), max_expansions=3)
    with caplog.at_level("WARNING", logger="grid_planner.search.a_star"):
        found, path = planner.plan(Node(0, 0), Node(9, 9))
    assert (found, path) == (False, [])
    assert planner.last_stats.budget_exhausted
    assert planner.last_stats.expanded == 3
    assert "budget" in caplog.text


def test_stats_recorded():
    planner = AStar(Grid.empty(5))
    found, path = planner.plan(Node(0, 0), Node(4, 0))
    stats = planner.last_stats
    assert stats.found is found is True
    assert stats.path_length == len(path) == 5
    assert stats.expanded >= 5
    assert stats.pushed >= stats.expanded
    assert stats.duration >= 0


def test_plan_wrapper():
    found, path = plan(Grid.empty(2), Node(0, 0), Node(1, 1))
    assert found and len(path) == 3


def test_broken_parent_link_raises():
    n = 3
    closed = ClosedList(n)
    start = Node(0, 0, id=node_id(0, 0, n), pid=node_id(0, 0, n))
    goal = Node(0, 2, cost=2, id=node_id(0, 2, n), pid=node_id(0, 1, n))
    closed.add(start)
    closed.add(goal)
    planner = AStar(Grid.empty(n))
    with pytest.raises(PathReconstructionError):
        planner._reconstruct(closed, start, goal)


def test_reconstruction_error_surfaces_from_plan(monkeypatch):
    class LossyClosedList(ClosedList):
        def find_by_id(self, id_):
            return None

    monkeypatch.setattr(a_star_module, "ClosedList", LossyClosedList)
    with pytest.raises(PathReconstructionError):
        AStar(Grid.empty(3)).plan(Node(0, 0), Node(0, 2))
