from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Dict, Optional

from config.settings import BoundarySettings, get_settings

from .dataset import Relation, RelationPredicate


class AreaFilter(str, Enum):
    ALL = "all"
    ADMINISTRATIVE = "administrative"


def all_relations(relation: Relation) -> bool:
    return True


def administrative_boundary(relation: Relation, settings: BoundarySettings) -> bool:
    """Named administrative boundary with a region key and a target admin level."""
    tags = relation.tags
    return (
        "name" in tags
        and tags.get("type") == "boundary"
        and tags.get("boundary") == "administrative"
        and settings.region_key_tag in tags
        and tags.get("admin_level") in settings.admin_levels
    )


def area_predicate(area_filter: AreaFilter, settings: Optional[BoundarySettings] = None) -> RelationPredicate:
    settings = settings or get_settings()
    strategies: Dict[AreaFilter, RelationPredicate] = {
        AreaFilter.ALL: all_relations,
        AreaFilter.ADMINISTRATIVE: lambda relation: administrative_boundary(relation, settings),
    }
    return strategies[area_filter]


def parse_area_filter(value: str | AreaFilter) -> AreaFilter:
    if isinstance(value, AreaFilter):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unknown area filter: {value!r}")
    norm = value.strip().lower()
    for area_filter in AreaFilter:
        if area_filter.value == norm:
            return area_filter
    raise ValueError(f"Unknown area filter: {value!r}")


def by_query(query: str) -> RelationPredicate:
    """
    Match relations by name with a regex, or a case-insensitive substring
    when `query` is not a valid pattern.
    """
    try:
        regex: Optional[re.Pattern[str]] = re.compile(query)
    except re.error:
        regex = None
    needle = query.lower()

    def matches(relation: Relation) -> bool:
        name = relation.name
        if name is None:
            return False
        if regex is not None:
            return regex.search(name) is not None
        return needle in name.lower()

    return matches


def all_of(*predicates: RelationPredicate) -> Callable[[Relation], bool]:
    def combined(relation: Relation) -> bool:
        return all(predicate(relation) for predicate in predicates)

    return combined
