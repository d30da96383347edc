"""search package."""

from .a_star import AStar, plan
from .closed_list import ClosedList
from .lazy_pq import LazyPQ, NodeKeyPair

__all__ = ["AStar", "ClosedList", "LazyPQ", "NodeKeyPair", "plan"]
