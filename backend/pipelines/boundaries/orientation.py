"""
Orientation Normalizer
Winding direction of a ring via the shoelace formula.
"""
from __future__ import annotations

import logging
from typing import Sequence

from .model import Position, Ring

logger = logging.getLogger(__name__)


def signed_area(positions: Sequence[Position]) -> int:
    """
    Twice the signed area under the ring, treating it cyclically.

    Positive means clockwise in an x-right/y-up frame.
    """
    n = len(positions)
    total = 0
    for i in range(n):
        cur = positions[i]
        nxt = positions[(i + 1) % n]
        total += (nxt.x - cur.x) * (nxt.y + cur.y)
    return total


def is_clockwise(positions: Sequence[Position]) -> bool:
    # Zero area (fewer than 3 distinct points) counts as counter-clockwise
    return signed_area(positions) > 0


def normalize_orientation(ring: Ring) -> Ring:
    """Return the ring wound counter-clockwise (right-hand rule)."""
    if is_clockwise(ring.positions):
        logger.debug("🔄 Reversing clockwise ring")
        return Ring(reversed(ring.positions))
    return ring
