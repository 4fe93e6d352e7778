"""
Central configuration for backend settings.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import FrozenSet


def _parse_levels(raw: str) -> FrozenSet[str]:
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


# Admin levels that qualify as target boundaries
BOUNDARY_ADMIN_LEVELS: FrozenSet[str] = _parse_levels(os.getenv("BOUNDARY_ADMIN_LEVELS", "2,4,6,7,8"))

# Tag carrying the official regional key (Amtlicher Regionalschlüssel)
BOUNDARY_REGION_KEY_TAG: str = os.getenv("BOUNDARY_REGION_KEY_TAG", "de:regionalschluessel")

# Member role that contributes to the exterior ring
BOUNDARY_OUTER_ROLE: str = os.getenv("BOUNDARY_OUTER_ROLE", "outer")


@dataclass(frozen=True)
class BoundarySettings:
    """
    Snapshot of the boundary extraction settings.

    Passed explicitly into filters and feature construction so callers
    (and tests) can override values without touching the environment.
    """

    admin_levels: FrozenSet[str] = BOUNDARY_ADMIN_LEVELS
    region_key_tag: str = BOUNDARY_REGION_KEY_TAG
    outer_role: str = BOUNDARY_OUTER_ROLE


def get_settings() -> BoundarySettings:
    return BoundarySettings()
