"""Grid cell / search node value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


Coord = Tuple[int, int]
RankKey = Tuple[float, float]


@dataclass(eq=False)
class Node:
    """A grid cell together with the bookkeeping A* needs.

    ``cost`` is the accumulated cost from the start, ``h_cost`` the
    heuristic estimate to the goal, ``id`` the identity derived from the
    coordinates (``x * n + y``) and ``pid`` the id of the node that
    generated this one.

    Two nodes are the same place iff their coordinates match; the cost and
    id fields never take part in equality or hashing.
    """

    x: int
    y: int
    cost: float = 0
    h_cost: float = 0
    id: int = 0
    pid: int = 0

    def __add__(self, other: "Node") -> "Node":
        return Node(self.x + other.x, self.y + other.y, self.cost + other.cost)

    def __sub__(self, other: "Node") -> "Node":
        return Node(self.x - other.x, self.y - other.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    @property
    def coords(self) -> Coord:
        return (self.x, self.y)

    @property
    def total_cost(self) -> float:
        return self.cost + self.h_cost


def same_coordinates(a: Node, b: Node) -> bool:
    """Return ``True`` when ``a`` and ``b`` refer to the same cell."""

    return a.x == b.x and a.y == b.y


def is_outside_boundary(node: Node, n: int) -> bool:
    """Return ``True`` if ``node`` lies outside an ``n`` × ``n`` grid."""

    return node.x < 0 or node.y < 0 or node.x >= n or node.y >= n


def identity_key(node: Node) -> Coord:
    """Key used for set membership: the cell coordinates."""

    return (node.x, node.y)


def ranking_key(node: Node) -> RankKey:
    """Key used for frontier ordering.

    Lower total cost ranks first; on equal total cost the node with the
    smaller heuristic (closer to the goal, further from the start) ranks
    first.
    """

    return (node.cost + node.h_cost, node.h_cost)


def manhattan(a: Node, b: Node) -> int:
    """Manhattan distance between two cells, admissible for 4-connected moves."""

    return abs(a.x - b.x) + abs(a.y - b.y)


def node_id(x: int, y: int, n: int) -> int:
    return x * n + y


def coordinates_from_id(id_: int, n: int) -> Coord:
    return (id_ // n, id_ % n)


__all__ = [
    "Coord",
    "Node",
    "RankKey",
    "coordinates_from_id",
    "identity_key",
    "is_outside_boundary",
    "manhattan",
    "node_id",
    "ranking_key",
    "same_coordinates",
]
