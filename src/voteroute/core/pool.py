"""
Consumable edge pool.

Reconstruction never revisits an edge: once an edge has been matched it is
taken out of the pool for the rest of the request. Instead of deleting from
a list (and reindexing on every removal) the pool keeps the original
sequence and a set of consumed positions, so pool order stays stable for
first-match lookups.
"""

from typing import Iterable, Iterator, List, Set, Tuple

from .types import ConnectionEdge


class EdgePool:
    """
    Ordered, request-local pool of connection edges.

    Positions refer to the order edges were supplied in and never shift.
    """

    def __init__(self, edges: Iterable[ConnectionEdge]):
        self._edges: List[ConnectionEdge] = list(edges)
        self._consumed: Set[int] = set()

    def __len__(self) -> int:
        """Number of edges still available."""
        return len(self._edges) - len(self._consumed)

    @property
    def total(self) -> int:
        return len(self._edges)

    def consume(self, position: int) -> ConnectionEdge:
        """Take the edge at `position` out of the pool and return it."""
        if position in self._consumed:
            raise KeyError(f"Edge at position {position} already consumed")
        self._consumed.add(position)
        return self._edges[position]

    def live(self) -> Iterator[Tuple[int, ConnectionEdge]]:
        """Iterate available edges head to tail."""
        for position, edge in enumerate(self._edges):
            if position not in self._consumed:
                yield position, edge

    def live_reversed(self) -> Iterator[Tuple[int, ConnectionEdge]]:
        """Iterate available edges tail to head."""
        for position in range(len(self._edges) - 1, -1, -1):
            if position not in self._consumed:
                yield position, self._edges[position]

    def all(self) -> Iterator[ConnectionEdge]:
        """Iterate every supplied edge, consumed or not, in pool order."""
        return iter(self._edges)
