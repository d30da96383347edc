"""Priority queue with lazy deletion used as the A* open list."""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Dict, Iterator, List, Optional, Tuple

from ..core.node import Coord, Node, RankKey, identity_key, ranking_key


@dataclass(frozen=True)
class NodeKeyPair:
    """Frontier entry pairing a ranking key with the node it ranks."""

    key: RankKey
    node: Node

    @classmethod
    def from_node(cls, node: Node) -> "NodeKeyPair":
        return cls(ranking_key(node), node)

    @property
    def identity(self) -> Coord:
        return identity_key(self.node)


class LazyPQ:
    """Min-priority queue supporting update and removal by node identity.

    Two structures are kept. ``_entries`` maps every live identity to its
    authoritative :class:`NodeKeyPair`. ``_heap`` holds every pair ever
    inserted, including ones that were later superseded or removed; those
    stale copies are discarded only when they surface at the top.

    Ordering is by ``key`` (total cost, then smaller heuristic first) and
    falls back to insertion order so equal keys never compare nodes.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[RankKey, int, NodeKeyPair]] = []
        self._entries: Dict[Coord, NodeKeyPair] = {}
        self._counter = count()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def insert(self, entry: NodeKeyPair) -> None:
        """Add ``entry``, replacing any live entry for the same identity."""

        self._entries[entry.identity] = entry
        heappush(self._heap, (entry.key, next(self._counter), entry))

    def push(self, node: Node) -> None:
        """Shortcut for ``insert(NodeKeyPair.from_node(node))``."""

        self.insert(NodeKeyPair.from_node(node))

    def top(self) -> Optional[NodeKeyPair]:
        """Return the best live entry without removing it."""

        self._discard_stale()
        if not self._heap:
            return None
        return self._entries[self._heap[0][2].identity]

    def pop(self) -> Optional[NodeKeyPair]:
        """Remove and return the best live entry, or ``None`` if empty."""

        self._discard_stale()
        if not self._heap:
            return None
        _, _, entry = heappop(self._heap)
        return self._entries.pop(entry.identity)

    def remove(self, entry: NodeKeyPair) -> None:
        """Forget the identity of ``entry``; its heap copies become stale."""

        self._entries.pop(entry.identity, None)

    def get(self, identity: Coord) -> Optional[NodeKeyPair]:
        """Return the live entry for ``identity`` if there is one."""

        return self._entries.get(identity)

    def contains(self, entry: NodeKeyPair) -> bool:
        return entry.identity in self._entries

    def clear(self) -> None:
        self._heap.clear()
        self._entries.clear()

    def size(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def heap_size(self) -> int:
        """Number of heap slots, stale copies included."""

        return len(self._heap)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, entry: NodeKeyPair) -> bool:
        return self.contains(entry)

    def __iter__(self) -> Iterator[NodeKeyPair]:
        return iter(list(self._entries.values()))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _discard_stale(self) -> None:
        heap = self._heap
        while heap:
            key, _, entry = heap[0]
            live = self._entries.get(entry.identity)
            if live is not None and live.key == key:
                return
            heappop(heap)


__all__ = ["LazyPQ", "NodeKeyPair"]
