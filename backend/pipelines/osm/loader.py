"""
OSM Dataset Loader
Reads OSM JSON element lists (Overpass "out json" layout) into an OsmDataset
and writes relations back out as raw JSON lines.
"""
from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, IO, Iterable, Optional, Tuple, Union

from .dataset import COORDINATE_SCALE, ElementType, Member, Node, OsmDataset, Relation, RelationPredicate, Way

logger = logging.getLogger(__name__)


class DatasetFormatError(ValueError):
    """The input cannot be decoded into a dataset. Fatal for the run."""


def _require(element: Dict[str, Any], key: str) -> Any:
    if key not in element:
        raise DatasetFormatError(f"{element.get('type', 'element')} {element.get('id', '?')} is missing '{key}'")
    return element[key]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _fixed_point(element: Dict[str, Any], key: str) -> int:
    """Coordinate on the 1e-7 grid, from 'decimicro_<key>' or a degree value."""
    scaled = element.get(f"decimicro_{key}")
    if scaled is not None:
        if not _is_int(scaled):
            raise DatasetFormatError(f"node {element.get('id', '?')} has non-integer decimicro_{key}: {scaled!r}")
        return scaled
    value = _require(element, key)
    try:
        degrees = float(value)
    except (TypeError, ValueError) as e:
        raise DatasetFormatError(f"node {element.get('id', '?')} has invalid {key}: {value!r}") from e
    if not math.isfinite(degrees * COORDINATE_SCALE):
        raise DatasetFormatError(f"node {element.get('id', '?')} has non-finite {key}: {value!r}")
    return round(degrees * COORDINATE_SCALE)


def _node_refs(element: Dict[str, Any]) -> Tuple[int, ...]:
    refs = _require(element, "nodes")
    if not isinstance(refs, list) or not all(_is_int(n) for n in refs):
        raise DatasetFormatError(f"way {element.get('id', '?')} must list integer node ids")
    return tuple(refs)


def _tags(element: Dict[str, Any]) -> Dict[str, str]:
    tags = element.get("tags") or {}
    if not isinstance(tags, dict):
        raise DatasetFormatError(f"{element.get('type')} {element.get('id')} has non-object tags")
    return {str(k): str(v) for k, v in tags.items()}


def _parse_member(raw: Dict[str, Any], relation_id: int) -> Member:
    if not isinstance(raw, dict):
        raise DatasetFormatError(f"relation {relation_id} has non-object member {raw!r}")
    try:
        member_type = ElementType(_require(raw, "type"))
    except DatasetFormatError:
        raise
    except ValueError as e:
        raise DatasetFormatError(f"relation {relation_id} has member of unknown type {raw.get('type')!r}") from e
    return Member(type=member_type, ref=int(_require(raw, "ref")), role=str(raw.get("role") or ""))


def _members(element: Dict[str, Any], relation_id: int) -> Tuple[Member, ...]:
    members = _require(element, "members")
    if not isinstance(members, list):
        raise DatasetFormatError(f"relation {relation_id} must list its members")
    return tuple(_parse_member(m, relation_id) for m in members)


def parse_element(element: Dict[str, Any]) -> Union[Node, Way, Relation]:
    if not isinstance(element, dict):
        raise DatasetFormatError(f"element must be an object, got {type(element).__name__}")

    element_type = element.get("type")
    element_id = int(_require(element, "id"))

    if element_type == ElementType.NODE.value:
        return Node(
            id=element_id,
            lat=_fixed_point(element, "lat"),
            lon=_fixed_point(element, "lon"),
            tags=_tags(element),
        )
    if element_type == ElementType.WAY.value:
        return Way(
            id=element_id,
            node_ids=_node_refs(element),
            tags=_tags(element),
        )
    if element_type == ElementType.RELATION.value:
        return Relation(
            id=element_id,
            members=_members(element, element_id),
            tags=_tags(element),
        )
    raise DatasetFormatError(f"unknown element type {element_type!r} for id {element_id}")


def parse_elements(payload: Union[Dict[str, Any], Iterable[Dict[str, Any]]]) -> OsmDataset:
    """
    Build a dataset from an OSM JSON document or a bare element list.
    """
    if isinstance(payload, dict):
        if "elements" not in payload:
            raise DatasetFormatError("missing 'elements' field")
        elements = payload["elements"]
    else:
        elements = payload

    if not isinstance(elements, list):
        raise DatasetFormatError("'elements' must be a list")

    dataset = OsmDataset()
    for element in elements:
        try:
            dataset.add(parse_element(element))
        except DatasetFormatError:
            raise
        except (TypeError, ValueError, OverflowError) as e:
            raise DatasetFormatError(f"malformed element: {e}") from e

    logger.info(f"📦 Decoded dataset: {dataset.counts()}")
    return dataset


def load_dataset(path: Union[str, Path], predicate: Optional[RelationPredicate] = None) -> OsmDataset:
    """
    Load a dataset from disk, optionally reduced to the relations matching
    `predicate` and their dependencies.

    OSError propagates to the caller; it is fatal for a run.
    """
    path = Path(path)
    logger.info(f"📁 Unpacking relations from {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetFormatError(f"{path} is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise DatasetFormatError(f"{path} is not UTF-8 encoded: {e}") from e

    dataset = parse_elements(payload)
    if predicate is not None:
        dataset = dataset.subset(predicate)
        logger.info(f"🔍 Filtered dataset: {dataset.counts()}")
    return dataset


def relation_to_dict(relation: Relation) -> Dict[str, Any]:
    return {
        "type": ElementType.RELATION.value,
        "id": relation.id,
        "members": [
            {"type": m.type.value, "ref": m.ref, "role": m.role}
            for m in relation.members
        ],
        "tags": dict(relation.tags),
    }


def write_raw(relations: Iterable[Relation], out: IO[str]) -> int:
    """Write relations as JSON lines. Returns the number written."""
    written = 0
    for relation in relations:
        out.write(json.dumps(relation_to_dict(relation), ensure_ascii=False))
        out.write("\n")
        written += 1
    return written
