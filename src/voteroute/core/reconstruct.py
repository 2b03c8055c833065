"""
Vote propagation path reconstruction.

Given the relay connection edges observed around a vote and the vote's
origin, rebuild the order in which the vote spread hop by hop.

The traversal is a ring-by-ring breadth-first expansion over a consumable
edge pool:

- The origin is emitted first, at level 0.
- Each origin link with a known peer becomes a pending connection.
- Every ring dequeues the connections pending at its start, emits their
  peers at the ring's level, and pulls the peer's outgoing edges from the
  pool into the queue. Edges pointing back at the peer are discarded.

There is no visited set. A node reachable over several unconsumed edges
appears once per edge, which is how multi-path propagation shows up.
"""

import logging
from collections import deque
from typing import AbstractSet, Deque, Iterable, List, Tuple

from .exceptions import InvalidInput, UnresolvedReference
from .pool import EdgePool
from .types import ConnectionEdge, OriginObservation, PropagationRecord

logger = logging.getLogger(__name__)


def resolve_relay_names(link: ConnectionEdge, pool: EdgePool) -> Tuple[str, str]:
    """
    Best-effort relay names for both sides of `link`.

    Scans the pool head to tail and stops at the first edge sharing a guid
    with either side, so at most one side is resolved. Ties are decided by
    pool order.

    Returns:
        (origin_relay, peer_relay), either of which may be "".
    """
    origin_relay = ""
    peer_relay = ""
    for edge in pool.all():
        if edge.other_guid == link.other_guid:
            peer_relay = edge.other_relay
            break
        if edge.guid == link.other_guid:
            peer_relay = edge.relay
            break
        if edge.other_guid == link.guid:
            origin_relay = edge.other_relay
            break
        if edge.guid == link.guid:
            origin_relay = edge.relay
            break

    if not origin_relay:
        logger.debug(UnresolvedReference(link.guid, "origin"))
    if not peer_relay:
        logger.debug(UnresolvedReference(link.other_guid, "peer"))
    return origin_relay, peer_relay


class PathReconstructor:
    """
    One-shot reconstruction over a request-local edge pool.

    An instance owns its pool and queue; call `run()` once.
    """

    def __init__(self, edges: Iterable[ConnectionEdge], origin: OriginObservation,
                 seen_relay_names: AbstractSet[str] = frozenset()):
        if origin is None:
            raise InvalidInput("No origin observation to trace the vote from")
        self.origin = origin
        self.seen_relay_names = seen_relay_names
        self.pool = EdgePool(edges)
        self.dequeues = 0
        # Pending hops paired with the position of the record that queued them.
        self._pending: Deque[Tuple[ConnectionEdge, int]] = deque()
        self._records: List[PropagationRecord] = []

    def run(self) -> List[PropagationRecord]:
        self._emit_root()
        self._seed()

        level = 0
        while self._pending:
            ring = len(self._pending)
            level += 1
            logger.debug(f"Ring {level}: {ring} pending, {len(self.pool)}/{self.pool.total} edges left")
            for _ in range(ring):
                conn, parent_index = self._pending.popleft()
                self._expand(conn, parent_index, level)

        return self._records

    # =========================================================================
    # Seeding
    # =========================================================================

    def _emit_root(self) -> None:
        self._records.append(PropagationRecord(
            level=0,
            parent_guid=None,
            node_guid=self.origin.guid,
            node_name=self.origin.name,
            relay_name=self.origin.relay,
            coordinates=self.origin.coordinates,
            seen=True,
        ))

    def _origin_links(self) -> List[Tuple[int | None, ConnectionEdge]]:
        """
        The origin's own links, paired with their pool position.

        Explicit links are not pool edges and carry no position. Otherwise
        links are the pool edges leaving the origin.
        """
        if self.origin.links is not None:
            return [(None, link) for link in self.origin.links]
        return [(position, edge) for position, edge in self.pool.live()
                if edge.guid == self.origin.guid]

    def _seed(self) -> None:
        links = self._origin_links()

        # Relay names resolve against the full pool, before consumption.
        for _, link in links:
            if not link.has_peer():
                continue
            origin_relay, peer_relay = resolve_relay_names(link, self.pool)
            self._pending.append((link.model_copy(update={
                "relay": origin_relay,
                "other_relay": peer_relay,
            }), 0))

        for position, _ in links:
            if position is not None:
                self.pool.consume(position)

    # =========================================================================
    # Expansion
    # =========================================================================

    def _expand(self, conn: ConnectionEdge, parent_index: int, level: int) -> None:
        self.dequeues += 1
        peer = conn.other_guid
        index = len(self._records)

        self._records.append(PropagationRecord(
            level=level,
            parent_guid=conn.guid,
            parent_index=parent_index,
            node_guid=peer,
            node_name=conn.other_name,
            relay_name=conn.other_relay,
            coordinates=conn.other_coordinates,
            seen=conn.other_relay in self.seen_relay_names,
        ))

        queued = 0
        dropped = 0
        for position, edge in self.pool.live_reversed():
            if edge.guid == peer:
                self.pool.consume(position)
                # Rows without a destination end here.
                if edge.has_peer():
                    self._pending.append((edge, index))
                    queued += 1
            elif edge.other_guid == peer:
                self.pool.consume(position)
                dropped += 1

        if queued or dropped:
            logger.debug(f"Expanded {peer}: queued {queued}, dropped {dropped} backward links")


def reconstruct(edges: Iterable[ConnectionEdge], origin: OriginObservation,
                seen_relay_names: AbstractSet[str] = frozenset()) -> List[PropagationRecord]:
    """
    Reconstruct the propagation route of a vote.

    Args:
        edges: Candidate connection edges, in store order. Duplicates and
            mirrored pairs are fine.
        origin: The vote observation to trace from.
        seen_relay_names: Relay names known to have received the vote.
            Only used to flag records.

    Returns:
        Records in dequeue order; every parent precedes its children.

    Raises:
        InvalidInput: If `origin` is None.
    """
    return PathReconstructor(edges, origin, seen_relay_names).run()
