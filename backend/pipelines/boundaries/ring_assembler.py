"""
Ring Assembler
Splices an unordered set of boundary segments into one closed ring.

The first segment seeds the working ring. Every other segment is indexed
by its endpoints and consumed exactly once: at each step the segment
touching the current ring end is taken from the index and appended,
reversed when it points the other way. Junctions shared by three or more
segments resolve to the lowest segment id.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from .endpoint_index import EndpointIndex
from .errors import MissingBoundaryMembers, NoMatchingSegment, NonContinuousPath
from .model import Position, Ring, Segment

logger = logging.getLogger(__name__)

SEED_INDEX = 0


def splice(ring: List[Position], candidate: Segment) -> None:
    """
    Append `candidate` to the working ring in place.

    The shared endpoint is not duplicated.
    """
    ring_end = ring[-1]
    if candidate.start == ring_end:
        ring.extend(candidate.positions[1:])
    elif candidate.end == ring_end:
        ring.extend(reversed(candidate.positions[:-1]))
    else:
        raise NonContinuousPath(
            "segments do not form a continuous path",
            cause=f"ring ends at {ring_end!r}, candidate spans {candidate.start!r}..{candidate.end!r}",
        )


class RingAssembler:
    """
    One assembly call over a fixed list of segments.

    The assembler owns its endpoint index and working ring; nothing
    survives between calls.
    """

    def __init__(self, segments: Sequence[Segment]):
        self.segments = list(segments)
        self.index = EndpointIndex()
        self.consumed: List[int] = []

    def assemble(self) -> Ring:
        if not self.segments:
            raise MissingBoundaryMembers("no segments to assemble")

        seed = self.segments[SEED_INDEX]
        self.consumed.append(SEED_INDEX)

        for segment_id, segment in enumerate(self.segments):
            if segment_id != SEED_INDEX:
                self.index.register(segment_id, segment)

        ring: List[Position] = list(seed.positions)

        while not self.index.is_empty():
            current_end = ring[-1]
            next_id = self.index.consume_one(current_end)
            if next_id is None:
                raise NoMatchingSegment(
                    "no more matching segments found",
                    cause=f"{len(self.index)} segment(s) left, none touching {current_end!r}",
                )
            splice(ring, self.segments[next_id])
            self.consumed.append(next_id)

        logger.debug(
            f"🔗 Assembled {len(self.consumed)} segment(s) into {len(ring)} positions "
            f"({self.index.queries} index queries)"
        )
        # Ring() enforces closure and raises UnclosedRing otherwise
        return Ring(ring)


def assemble_ring(segments: Sequence[Segment]) -> Ring:
    """Create a continuous closed ring from unordered segments."""
    return RingAssembler(segments).assemble()


__all__ = ["RingAssembler", "assemble_ring", "splice"]
