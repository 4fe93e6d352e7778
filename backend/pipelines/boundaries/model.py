from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from pipelines.osm.dataset import COORDINATE_SCALE

from .errors import DegenerateSegment, UnclosedRing


@dataclass(frozen=True)
class Position:
    """
    Exact 2D coordinate on the fixed-point grid.

    x is longitude and y is latitude, both in 1e-7 degrees. Equality and
    hashing are exact, so positions are safe to use as dictionary keys.
    """

    x: int
    y: int

    @classmethod
    def from_degrees(cls, lon: float, lat: float) -> "Position":
        return cls(round(lon * COORDINATE_SCALE), round(lat * COORDINATE_SCALE))

    def to_degrees(self) -> Tuple[float, float]:
        return self.x / COORDINATE_SCALE, self.y / COORDINATE_SCALE

    def __repr__(self) -> str:
        return f"[{self.x}, {self.y}]"


class Segment:
    """
    Ordered, immutable sequence of at least two positions.
    """

    __slots__ = ("_positions",)

    def __init__(self, positions: Iterable[Position]):
        points = tuple(positions)
        if len(points) < 2:
            raise DegenerateSegment(
                "cannot construct segment with less than two positions",
                cause=f"got {len(points)}",
            )
        self._positions: Tuple[Position, ...] = points

    @property
    def positions(self) -> Tuple[Position, ...]:
        return self._positions

    @property
    def start(self) -> Position:
        return self._positions[0]

    @property
    def end(self) -> Position:
        return self._positions[-1]

    @property
    def is_closed(self) -> bool:
        return self.start == self.end

    def reversed(self) -> "Segment":
        return type(self)(reversed(self._positions))

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __getitem__(self, index):
        return self._positions[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self._positions == other._positions

    def __hash__(self) -> int:
        return hash(self._positions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._positions)!r})"


class Ring(Segment):
    """
    A segment whose first and last positions are equal.
    """

    __slots__ = ()

    def __init__(self, positions: Iterable[Position]):
        super().__init__(positions)
        if not self.is_closed:
            raise UnclosedRing(
                "ends of the segments don't form a ring",
                cause=f"start {self.start!r} != end {self.end!r}",
            )

    def coordinates(self) -> List[List[float]]:
        """Exterior ring as [lon, lat] float pairs, first == last."""
        return [list(p.to_degrees()) for p in self]


def segment_from_degrees(coords: Sequence[Tuple[float, float]]) -> Segment:
    return Segment(Position.from_degrees(lon, lat) for lon, lat in coords)
