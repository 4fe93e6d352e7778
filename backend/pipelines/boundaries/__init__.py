"""
Boundaries Module
Ring reconstruction and polygon extraction for administrative areas
"""
from .boundary_builder import build_outer_ring, collect_outer_segments
from .endpoint_index import EndpointIndex
from .errors import (
    AreaFailure,
    BoundaryError,
    DegenerateSegment,
    InvalidTag,
    MissingBoundaryMembers,
    MissingTag,
    NoMatchingSegment,
    NonContinuousPath,
    UnclosedRing,
    UnresolvedMember,
)
from .model import Position, Ring, Segment
from .orientation import is_clockwise, normalize_orientation, signed_area
from .pipeline import BoundaryPipeline, ExtractionResult
from .ring_assembler import RingAssembler, assemble_ring

__all__ = [
    "AreaFailure",
    "BoundaryError",
    "BoundaryPipeline",
    "DegenerateSegment",
    "EndpointIndex",
    "ExtractionResult",
    "InvalidTag",
    "MissingBoundaryMembers",
    "MissingTag",
    "NoMatchingSegment",
    "NonContinuousPath",
    "Position",
    "Ring",
    "RingAssembler",
    "Segment",
    "UnclosedRing",
    "UnresolvedMember",
    "assemble_ring",
    "build_outer_ring",
    "collect_outer_segments",
    "is_clockwise",
    "normalize_orientation",
    "signed_area",
]
