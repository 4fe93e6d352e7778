"""
Endpoint Index
Maps a position to the live segment ids touching it.

A segment id may be reachable from two positions (its start and its end),
and one position may hold several ids. Consuming an id removes it from
every bucket it was registered under, so a segment taken at one endpoint
can never be found again at the other.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Set

from .model import Position, Segment


class EndpointIndex:
    """
    Multi-key, multi-value map from Position to live segment ids.
    """

    def __init__(self) -> None:
        self._buckets: Dict[Position, Set[int]] = {}
        self._owners: Dict[int, Set[Position]] = {}
        self.queries = 0

    def insert(self, position: Position, segment_id: int) -> None:
        self._buckets.setdefault(position, set()).add(segment_id)
        self._owners.setdefault(segment_id, set()).add(position)

    def register(self, segment_id: int, segment: Segment) -> None:
        """Register a segment under both endpoints (once for a closed segment)."""
        self.insert(segment.start, segment_id)
        if segment.end != segment.start:
            self.insert(segment.end, segment_id)

    def peek(self, position: Position) -> Optional[int]:
        bucket = self._buckets.get(position)
        if not bucket:
            return None
        # Lowest id wins so that ambiguous junctions resolve deterministically
        return min(bucket)

    def consume_one(self, position: Position) -> Optional[int]:
        """
        Take the lowest live id registered at `position`, or None.

        The id is removed from all buckets it is registered under.
        """
        self.queries += 1
        segment_id = self.peek(position)
        if segment_id is None:
            return None

        for owner in self._owners.pop(segment_id):
            bucket = self._buckets[owner]
            bucket.discard(segment_id)
            if not bucket:
                del self._buckets[owner]

        return segment_id

    def is_empty(self) -> bool:
        return not self._owners

    def live_ids(self) -> List[int]:
        return sorted(self._owners)

    def __len__(self) -> int:
        return len(self._owners)

    def __contains__(self, segment_id: object) -> bool:
        return segment_id in self._owners

    def __repr__(self) -> str:
        return f"EndpointIndex(live={self.live_ids()!r}, positions={len(self._buckets)})"
