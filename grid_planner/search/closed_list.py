"""Closed list of expanded nodes keyed by cell coordinates."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from ..core.node import Coord, Node, coordinates_from_id, identity_key


class ClosedList:
    """Set of expanded nodes with lookup by coordinates or node id.

    Adding a node whose cell is already present keeps the first entry.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self._nodes: Dict[Coord, Node] = {}

    def add(self, node: Node) -> bool:
        """Record ``node``. Returns ``False`` if its cell was already closed."""

        key = identity_key(node)
        if key in self._nodes:
            return False
        self._nodes[key] = node
        return True

    def find(self, node: Node) -> Optional[Node]:
        """Return the closed entry for the cell of ``node``."""

        return self._nodes.get(identity_key(node))

    def find_by_id(self, id_: int) -> Optional[Node]:
        """Return the closed entry whose identity is ``id_``."""

        if id_ < 0:
            return None
        return self._nodes.get(coordinates_from_id(id_, self.n))

    def __contains__(self, node: Node) -> bool:
        return identity_key(node) in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())


__all__ = ["ClosedList"]
