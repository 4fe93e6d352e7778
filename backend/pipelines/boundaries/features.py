"""
Polygon Feature Construction
Turns an assembled boundary into a GeoJSON Feature with its identifying tags.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from shapely.geometry import Polygon
from shapely.validation import explain_validity

from config.settings import BoundarySettings, get_settings
from pipelines.osm.dataset import OsmDataset, Relation

from .boundary_builder import build_outer_ring
from .errors import InvalidTag, MissingTag
from .model import Ring

logger = logging.getLogger(__name__)


def _require_tag(relation: Relation, key: str) -> str:
    value = relation.tags.get(key)
    if value is None:
        raise MissingTag(f"'{key}' is missing", area_id=relation.id)
    return value


def display_name(relation: Relation) -> str:
    name = _require_tag(relation, "name")
    prefix = relation.tags.get("name:prefix")
    return f"{prefix} {name}" if prefix else name


def feature_properties(relation: Relation, settings: BoundarySettings) -> Dict[str, Any]:
    name = display_name(relation)
    admin_level_raw = _require_tag(relation, "admin_level")
    if not (admin_level_raw.isascii() and admin_level_raw.isdigit()):
        raise InvalidTag(
            f"cannot convert object '{name}' to feature",
            area_id=relation.id,
            cause=f"admin_level {admin_level_raw!r} is not an integer",
        )
    admin_level = int(admin_level_raw)
    if not 0 <= admin_level <= 255:
        raise InvalidTag(
            f"cannot convert object '{name}' to feature",
            area_id=relation.id,
            cause=f"admin_level {admin_level} out of range",
        )

    return {
        "name": name,
        "adminLevel": admin_level,
        "ars": _require_tag(relation, settings.region_key_tag),
    }


def polygon_geometry(ring: Ring) -> Dict[str, Any]:
    return {"type": "Polygon", "coordinates": [ring.coordinates()]}


def validate_polygon(ring: Ring, area_id: Optional[int] = None) -> List[str]:
    """
    Geometry warnings for an assembled ring. Never fails the area.
    """
    warnings: List[str] = []
    # shapely needs at least 4 coordinates for a linear ring
    if len(ring) < 4:
        warnings.append(f"Ring has only {len(ring)} positions")
    else:
        polygon = Polygon(ring.coordinates())
        if not polygon.is_valid:
            warnings.append(f"Invalid polygon: {explain_validity(polygon)}")

    for warning in warnings:
        logger.warning(f"⚠️ Relation {area_id}: {warning}")
    return warnings


def to_feature(
    relation: Relation,
    dataset: OsmDataset,
    settings: Optional[BoundarySettings] = None,
) -> Dict[str, Any]:
    """
    GeoJSON Feature for one qualifying area.

    Raises a BoundaryError subclass when tags or geometry are unusable.
    """
    settings = settings or get_settings()
    properties = feature_properties(relation, settings)
    ring = build_outer_ring(relation, dataset, settings.outer_role)
    validate_polygon(ring, relation.id)

    return {
        "type": "Feature",
        "id": relation.id,
        "geometry": polygon_geometry(ring),
        "properties": properties,
    }
