"""Square occupancy grid and a seeded obstacle generator."""

from __future__ import annotations

from enum import IntEnum
from random import Random
from typing import Iterator, List, Optional, Sequence

from .errors import InvalidInputError
from .node import Node, is_outside_boundary


class CellState(IntEnum):
    """Possible values stored in a grid cell."""

    FREE = 0
    OBSTACLE = 1
    VISITED = 2
    PATH = 3


class Grid:
    """``n`` × ``n`` occupancy grid indexed as ``cells[x][y]``."""

    def __init__(self, cells: Sequence[Sequence[int]]):
        n = len(cells)
        if n == 0:
            raise InvalidInputError("grid must have at least one row")
        if any(len(row) != n for row in cells):
            raise InvalidInputError("grid must be square")
        self.n: int = n
        self.cells: List[List[int]] = [[int(v) for v in row] for row in cells]

    @classmethod
    def empty(cls, n: int) -> "Grid":
        """Return an obstacle-free grid of size ``n``."""

        return cls([[CellState.FREE] * n for _ in range(n)])

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def get(self, x: int, y: int) -> int:
        return self.cells[x][y]

    def set(self, x: int, y: int, state: int) -> None:
        self.cells[x][y] = int(state)

    def is_free(self, x: int, y: int) -> bool:
        return self.cells[x][y] == CellState.FREE

    def contains(self, node: Node) -> bool:
        return not is_outside_boundary(node, self.n)

    def copy(self) -> "Grid":
        return Grid(self.cells)

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[List[int]]:
        return iter(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid(n={self.n})"


def generate_grid(
    n: int,
    rng: Optional[Random] = None,
    obstacle_probability: Optional[float] = None,
) -> Grid:
    """Return an ``n`` × ``n`` grid with randomly placed obstacles.

    Parameters
    ----------
    n:
        Grid dimension.
    rng:
        Random source. Pass a seeded :class:`random.Random` for
        reproducible grids.
    obstacle_probability:
        Chance that a cell is an obstacle. Defaults to ``1 / n``.
    """

    if n <= 0:
        raise InvalidInputError(f"grid size must be positive, got {n}")
    rnd = rng if rng is not None else Random()
    p = 1.0 / n if obstacle_probability is None else obstacle_probability
    cells = [
        [CellState.OBSTACLE if rnd.random() < p else CellState.FREE for _ in range(n)]
        for _ in range(n)
    ]
    return Grid(cells)


__all__ = ["CellState", "Grid", "generate_grid"]
