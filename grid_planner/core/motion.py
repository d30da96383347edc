"""Single-step motion model for grid search."""

from __future__ import annotations

from typing import List

from .node import Node


def get_motion() -> List[Node]:
    """Return the four cardinal unit-cost moves as ``(dx, dy, cost)`` nodes.

    Diagonal moves are left out on purpose: the Manhattan heuristic used by
    the planners overestimates the remaining cost once diagonals are
    allowed, so adding them requires a different heuristic first.
    """

    return [
        Node(0, 1, 1),
        Node(1, 0, 1),
        Node(0, -1, 1),
        Node(-1, 0, 1),
    ]


__all__ = ["get_motion"]
