"""
Boundary-to-Ring Assembly
Resolves a relation's outer members to segments and builds its exterior ring.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from config.settings import BOUNDARY_OUTER_ROLE
from pipelines.osm.dataset import ElementType, Member, OsmDataset, Relation

from .errors import BoundaryError, DegenerateSegment, MissingBoundaryMembers, UnresolvedMember
from .model import Position, Ring, Segment
from .orientation import normalize_orientation
from .ring_assembler import assemble_ring

logger = logging.getLogger(__name__)


def resolve_member(member: Member, dataset: OsmDataset) -> Segment:
    """Positions of the way behind `member`, in way order."""
    if member.type is not ElementType.WAY:
        # Nested relations and node members are not part of a simple exterior ring
        raise UnresolvedMember(
            f"outer member {member.type.value} {member.ref} is not a way",
            cause="nested relations are not supported",
        )

    way = dataset.way(member.ref)
    if way is None:
        raise UnresolvedMember(f"way {member.ref} is missing from the dataset")

    positions: List[Position] = []
    for node_id in way.node_ids:
        node = dataset.node(node_id)
        if node is None:
            raise UnresolvedMember(f"node {node_id} of way {way.id} is missing from the dataset")
        positions.append(Position(node.lon, node.lat))

    if len(positions) < 2:
        raise DegenerateSegment(f"way {way.id} has {len(positions)} position(s), need at least 2")
    return Segment(positions)


def collect_outer_segments(relation: Relation, dataset: OsmDataset, outer_role: str = BOUNDARY_OUTER_ROLE) -> List[Segment]:
    segments: List[Segment] = []
    skipped = 0
    for member in relation.members:
        if member.role != outer_role:
            # Inner rings are not reconstructed
            skipped += 1
            continue
        segments.append(resolve_member(member, dataset))

    if skipped:
        logger.debug(f"Relation {relation.id}: discarded {skipped} non-outer member(s)")
    if not segments:
        raise MissingBoundaryMembers(f"relation {relation.id} has no '{outer_role}' members")
    return segments


def build_outer_ring(
    relation: Relation,
    dataset: OsmDataset,
    outer_role: Optional[str] = None,
) -> Ring:
    """
    Exterior ring of `relation`, closed and wound counter-clockwise.

    Raises a BoundaryError subclass tagged with the relation id.
    """
    try:
        segments = collect_outer_segments(relation, dataset, outer_role or BOUNDARY_OUTER_ROLE)
        ring = assemble_ring(segments)
        return normalize_orientation(ring)
    except BoundaryError as e:
        e.with_area(relation.id)
        raise
