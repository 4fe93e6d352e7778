from __future__ import annotations

import pytest

from .errors import MissingBoundaryMembers, NoMatchingSegment, NonContinuousPath, UnclosedRing
from .model import Position, Segment
from .ring_assembler import RingAssembler, assemble_ring, splice

P1 = Position(0, 0)
P2 = Position(10, 0)
P3 = Position(20, 0)
P4 = Position(30, 0)

# Corners of a unit square, counter-clockwise
A = Position(0, 0)
B = Position(10, 0)
C = Position(10, 10)
D = Position(0, 10)


@pytest.mark.parametrize(
    "points",
    [
        [P1, P1],
        [P1, P2, P1],
        [P1, P2, P3, P1],
    ],
)
def test_single_closed_segment_is_returned_unchanged(points) -> None:
    assembler = RingAssembler([Segment(points)])
    ring = assembler.assemble()

    assert ring.positions == tuple(points)
    assert assembler.index.queries == 0
    assert assembler.consumed == [0]


def test_segment_and_its_reverse_close() -> None:
    ring = assemble_ring([Segment([P1, P2]), Segment([P2, P1])])
    assert ring.positions == (P1, P2, P1)


def test_same_direction_segment_is_spliced_reversed() -> None:
    ring = assemble_ring([Segment([P1, P2]), Segment([P1, P2])])
    assert ring.positions == (P1, P2, P1)


def test_shuffled_square_with_mixed_directions() -> None:
    segments = [Segment([A, B]), Segment([C, D]), Segment([A, D]), Segment([C, B])]
    ring = assemble_ring(segments)

    assert ring.positions == (A, B, C, D, A)


def test_point_count_collapses_shared_endpoints() -> None:
    m1 = Position(5, 0)
    m2 = Position(10, 5)
    m3 = Position(5, 10)
    segments = [
        Segment([A, m1, B]),
        Segment([D, m3, C]),
        Segment([B, m2, C]),
        Segment([D, A]),
    ]
    ring = assemble_ring(segments)

    expected = sum(len(s) for s in segments) - (len(segments) - 1)
    assert len(ring) == expected
    assert ring.start == ring.end
    assert set(ring.positions) == {A, m1, B, m2, C, m3, D}


def test_disjoint_segments_fail_with_no_matching_segment() -> None:
    with pytest.raises(NoMatchingSegment):
        assemble_ring([Segment([P1, P2]), Segment([P3, P4])])


def test_open_chain_fails_with_unclosed_ring() -> None:
    with pytest.raises(UnclosedRing):
        assemble_ring([Segment([P1, P2]), Segment([P2, P3])])


def test_single_open_segment_fails_with_unclosed_ring() -> None:
    with pytest.raises(UnclosedRing):
        assemble_ring([Segment([P1, P2, P3])])


def test_empty_input_fails_with_missing_members() -> None:
    with pytest.raises(MissingBoundaryMembers):
        assemble_ring([])


def test_junction_segments_are_consumed_exactly_once() -> None:
    # Two loops touching at O form a figure eight
    o = Position(0, 0)
    a, b = Position(10, 10), Position(10, -10)
    c, d = Position(-10, 10), Position(-10, -10)
    segments = [
        Segment([o, a]),
        Segment([a, b]),
        Segment([b, o]),
        Segment([o, c]),
        Segment([c, d]),
        Segment([d, o]),
    ]
    assembler = RingAssembler(segments)
    ring = assembler.assemble()

    assert sorted(assembler.consumed) == list(range(len(segments)))
    assert len(set(assembler.consumed)) == len(segments)
    assert assembler.index.is_empty()
    assert ring.start == ring.end == o
    assert len(ring) == sum(len(s) for s in segments) - (len(segments) - 1)


def test_assembly_is_deterministic() -> None:
    segments = [Segment([A, B]), Segment([C, D]), Segment([A, D]), Segment([C, B])]
    assert assemble_ring(segments).positions == assemble_ring(list(segments)).positions


def test_splice_rejects_non_touching_candidate() -> None:
    ring = [P1, P2]
    with pytest.raises(NonContinuousPath):
        splice(ring, Segment([P3, P4]))
    assert ring == [P1, P2]
