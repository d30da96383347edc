"""A* search over a square occupancy grid."""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Tuple

from ..core.errors import InvalidInputError, PathReconstructionError
from ..core.grid import CellState, Grid
from ..core.motion import get_motion
from ..core.node import (
    Node,
    identity_key,
    is_outside_boundary,
    manhattan,
    node_id,
    same_coordinates,
)
from ..utils.observer import SearchStats
from .closed_list import ClosedList
from .lazy_pq import LazyPQ, NodeKeyPair


logger = logging.getLogger(__name__)

PlanResult = Tuple[bool, List[Node]]


class AStar:
    """Shortest-path planner for 4-connected unit-cost grids.

    The planner keeps the grid it was built with untouched; every call to
    :meth:`plan` searches a private copy on which expanded cells are marked
    :attr:`CellState.VISITED`. The copy from the latest call is kept in
    :attr:`grid` for inspection.
    """

    def __init__(self, grid: Grid, max_expansions: Optional[int] = None) -> None:
        self.original_grid = grid
        self.n = grid.n
        self.grid: Grid = grid.copy()
        self.max_expansions = max_expansions
        self.last_stats: SearchStats = SearchStats()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def plan(self, start: Node, goal: Node) -> PlanResult:
        """Search from ``start`` to ``goal``.

        Returns ``(found, path)`` where ``path`` runs from goal back to
        start, or is empty when the goal cannot be reached.
        """

        self._validate(start, goal)
        began = time.perf_counter()
        stats = SearchStats()
        self.last_stats = stats
        self.grid = self.original_grid.copy()

        open_list = LazyPQ()
        closed_list = ClosedList(self.n)
        motion = get_motion()

        first = Node(start.x, start.y, start.cost, start.h_cost)
        first.id = node_id(first.x, first.y, self.n)
        first.pid = first.id
        open_list.push(first)
        stats.pushed += 1

        result: PlanResult = (False, [])
        while open_list:
            if self.max_expansions is not None and stats.expanded >= self.max_expansions:
                stats.budget_exhausted = True
                logger.warning(
                    "Expansion budget of %d exhausted before reaching %s",
                    self.max_expansions,
                    identity_key(goal),
                )
                break

            current = open_list.pop().node
            current.id = node_id(current.x, current.y, self.n)
            stats.expanded += 1

            if same_coordinates(current, goal):
                closed_list.add(current)
                self.grid.set(current.x, current.y, CellState.VISITED)
                result = (True, self._reconstruct(closed_list, start, goal))
                break

            self.grid.set(current.x, current.y, CellState.VISITED)
            for m in motion:
                new_point = current + m
                new_point.id = node_id(new_point.x, new_point.y, self.n)
                new_point.pid = current.id
                new_point.h_cost = manhattan(new_point, goal)
                if same_coordinates(new_point, goal):
                    stats.pushed += self._push(open_list, new_point)
                    break
                if is_outside_boundary(new_point, self.n):
                    continue
                if self.grid.get(new_point.x, new_point.y) != CellState.FREE:
                    continue  # obstacle or visited
                stats.pushed += self._push(open_list, new_point)
            closed_list.add(current)

        stats.found, path = result
        stats.path_length = len(path)
        stats.duration = time.perf_counter() - began
        logger.debug(
            "A* %s -> %s: found=%s after %d expansions",
            identity_key(start),
            identity_key(goal),
            stats.found,
            stats.expanded,
        )
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _validate(self, start: Node, goal: Node) -> None:
        if any(len(row) != self.n for row in self.original_grid):
            raise InvalidInputError("grid must be square")
        for name, node in (("start", start), ("goal", goal)):
            if is_outside_boundary(node, self.n):
                raise InvalidInputError(
                    f"{name} {identity_key(node)} is outside the {self.n}x{self.n} grid"
                )

    @staticmethod
    def _push(open_list: LazyPQ, node: Node) -> int:
        """Queue ``node`` unless a no-worse entry for its cell is queued."""

        entry = NodeKeyPair.from_node(node)
        queued = open_list.get(entry.identity)
        if queued is not None and queued.key <= entry.key:
            return 0
        open_list.insert(entry)
        return 1

    def _reconstruct(
        self, closed_list: ClosedList, start: Node, goal: Node
    ) -> List[Node]:
        """Walk parent links from ``goal`` back to ``start``."""

        current = closed_list.find(goal)
        if current is None:
            logger.error("Goal %s missing from closed list", identity_key(goal))
            raise PathReconstructionError(
                f"goal {identity_key(goal)} was not expanded"
            )

        path: List[Node] = []
        while not same_coordinates(current, start):
            path.append(current)
            parent = closed_list.find_by_id(current.pid)
            if parent is None or len(path) > len(closed_list):
                logger.error(
                    "Error in calculating path: parent %d of %s not resolvable",
                    current.pid,
                    identity_key(current),
                )
                raise PathReconstructionError(
                    f"parent {current.pid} of {identity_key(current)} "
                    "is not in the closed list"
                )
            current = parent
        path.append(current)
        return path


def plan(grid: Grid, start: Node, goal: Node, max_expansions: Optional[int] = None) -> PlanResult:
    """Convenience wrapper running a single :class:`AStar` search."""

    return AStar(grid, max_expansions=max_expansions).plan(start, goal)


__all__ = ["AStar", "PlanResult", "plan"]
