from __future__ import annotations

from typing import Dict, List, Tuple

import pytest

from pipelines.osm.dataset import ElementType, Member, Node, OsmDataset, Relation, Way

from .boundary_builder import build_outer_ring, collect_outer_segments
from .errors import DegenerateSegment, MissingBoundaryMembers, NoMatchingSegment, UnresolvedMember
from .model import Position
from .orientation import is_clockwise

# Unit square corners on the fixed-point grid
CORNERS: Dict[int, Tuple[int, int]] = {
    1: (0, 0),
    2: (10, 0),
    3: (10, 10),
    4: (0, 10),
}


def _dataset(ways: Dict[int, List[int]]) -> OsmDataset:
    dataset = OsmDataset()
    for node_id, (lon, lat) in CORNERS.items():
        dataset.add(Node(id=node_id, lat=lat, lon=lon))
    for way_id, node_ids in ways.items():
        dataset.add(Way(id=way_id, node_ids=tuple(node_ids)))
    return dataset


def _relation(*members: Tuple[int, str], relation_id: int = 100) -> Relation:
    return Relation(
        id=relation_id,
        members=tuple(Member(type=ElementType.WAY, ref=ref, role=role) for ref, role in members),
    )


def test_clockwise_boundary_is_normalized() -> None:
    # 1 -> 4 -> 3 -> 2 is clockwise
    dataset = _dataset({10: [1, 4], 11: [4, 3, 2], 12: [2, 1]})
    ring = build_outer_ring(_relation((10, "outer"), (12, "outer"), (11, "outer")), dataset)

    assert ring.start == ring.end
    assert not is_clockwise(ring.positions)
    assert set(ring.positions) == {Position(lon, lat) for lon, lat in CORNERS.values()}


def test_inner_members_are_discarded() -> None:
    dataset = _dataset({10: [1, 2, 3], 11: [3, 4, 1], 20: [2, 4]})
    relation = _relation((10, "outer"), (20, "inner"), (11, "outer"))

    segments = collect_outer_segments(relation, dataset)

    assert len(segments) == 2
    assert len(build_outer_ring(relation, dataset)) == 5


def test_no_outer_members() -> None:
    dataset = _dataset({20: [1, 2, 3, 1]})
    with pytest.raises(MissingBoundaryMembers) as exc:
        build_outer_ring(_relation((20, "inner")), dataset)
    assert exc.value.area_id == 100


def test_missing_way_is_unresolved() -> None:
    dataset = _dataset({10: [1, 2, 3]})
    with pytest.raises(UnresolvedMember) as exc:
        build_outer_ring(_relation((10, "outer"), (99, "outer")), dataset)
    assert exc.value.area_id == 100
    assert "way 99" in str(exc.value)


def test_missing_node_is_unresolved() -> None:
    dataset = _dataset({10: [1, 2, 42, 1]})
    with pytest.raises(UnresolvedMember):
        build_outer_ring(_relation((10, "outer")), dataset)


def test_nested_relation_member_is_unresolved() -> None:
    dataset = _dataset({})
    relation = Relation(id=5, members=(Member(type=ElementType.RELATION, ref=6, role="outer"),))
    with pytest.raises(UnresolvedMember) as exc:
        build_outer_ring(relation, dataset)
    assert exc.value.area_id == 5


def test_single_node_way_is_degenerate() -> None:
    dataset = _dataset({10: [1]})
    with pytest.raises(DegenerateSegment):
        build_outer_ring(_relation((10, "outer")), dataset)


def test_gap_in_boundary_reports_no_matching_segment() -> None:
    dataset = _dataset({10: [1, 2], 11: [3, 4]})
    with pytest.raises(NoMatchingSegment) as exc:
        build_outer_ring(_relation((10, "outer"), (11, "outer"), relation_id=7), dataset)
    assert exc.value.area_id == 7
