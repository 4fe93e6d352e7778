"""
Boundary Extraction Errors
Per-area failure kinds raised while turning a relation into a polygon.

Every error here is local to one area: the pipeline catches it, records an
AreaFailure and moves on to the next area. None of them is retried since
the result is fully determined by the input.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


class BoundaryError(Exception):
    """Base class for all per-area boundary failures."""

    kind = "boundary_error"

    def __init__(self, message: str, *, area_id: Optional[int] = None, cause: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.area_id = area_id
        self.cause = cause

    def with_area(self, area_id: int) -> "BoundaryError":
        if self.area_id is None:
            self.area_id = area_id
        return self

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class MissingBoundaryMembers(BoundaryError):
    """The area has no outer-role members to build a ring from."""

    kind = "missing_boundary_members"


class UnresolvedMember(BoundaryError):
    """A referenced way or node is absent from the decoded dataset."""

    kind = "unresolved_member"


class DegenerateSegment(BoundaryError):
    """A resolved member yields fewer than 2 positions."""

    kind = "degenerate_segment"


class NoMatchingSegment(BoundaryError):
    """The ring's current end has no remaining candidate segment."""

    kind = "no_matching_segment"


class NonContinuousPath(BoundaryError):
    """A candidate returned by the index shares no endpoint with the ring end."""

    kind = "non_continuous_path"


class UnclosedRing(BoundaryError):
    """All segments were consumed but the ring does not close."""

    kind = "unclosed_ring"


class MissingTag(BoundaryError):
    """A tag required for the output feature is absent."""

    kind = "missing_tag"


class InvalidTag(BoundaryError):
    """A tag required for the output feature has an unusable value."""

    kind = "invalid_tag"


@dataclass(frozen=True)
class AreaFailure:
    """
    Reportable record of one skipped area.
    """

    area_id: Optional[int]
    kind: str
    message: str
    name: Optional[str] = None

    @classmethod
    def from_error(cls, error: BoundaryError, name: Optional[str] = None) -> "AreaFailure":
        return cls(area_id=error.area_id, kind=error.kind, message=str(error), name=name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "area_id": self.area_id,
            "kind": self.kind,
            "message": self.message,
            "name": self.name,
        }
