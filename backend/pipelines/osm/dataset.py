"""
Decoded OSM Dataset
In-memory nodes, ways and relations keyed by their stable identifiers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

# Node coordinates are fixed-point integers scaled by 1e7 ("decimicro" degrees)
COORDINATE_SCALE = 10_000_000


class ElementType(str, Enum):
    NODE = "node"
    WAY = "way"
    RELATION = "relation"


@dataclass(frozen=True)
class Node:
    """Map point; lat/lon stored as integers scaled by 1e7."""

    id: int
    lat: int
    lon: int
    tags: Dict[str, str] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Way:
    id: int
    node_ids: Tuple[int, ...]
    tags: Dict[str, str] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Member:
    type: ElementType
    ref: int
    role: str = ""


@dataclass(frozen=True)
class Relation:
    id: int
    members: Tuple[Member, ...]
    tags: Dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def name(self) -> Optional[str]:
        return self.tags.get("name")


RelationPredicate = Callable[[Relation], bool]


@dataclass
class OsmDataset:
    """
    Decoded map dataset handed to the boundary pipeline.
    """

    nodes: Dict[int, Node] = field(default_factory=dict)
    ways: Dict[int, Way] = field(default_factory=dict)
    relations: Dict[int, Relation] = field(default_factory=dict)

    def add(self, element) -> None:
        if isinstance(element, Node):
            self.nodes[element.id] = element
        elif isinstance(element, Way):
            self.ways[element.id] = element
        elif isinstance(element, Relation):
            self.relations[element.id] = element
        else:
            raise TypeError(f"Unsupported element: {element!r}")

    def node(self, node_id: int) -> Optional[Node]:
        return self.nodes.get(node_id)

    def way(self, way_id: int) -> Optional[Way]:
        return self.ways.get(way_id)

    def relation(self, relation_id: int) -> Optional[Relation]:
        return self.relations.get(relation_id)

    def relations_sorted(self, predicate: Optional[RelationPredicate] = None) -> Iterable[Relation]:
        """Relations in ascending id order, optionally filtered."""
        for relation_id in sorted(self.relations):
            relation = self.relations[relation_id]
            if predicate is None or predicate(relation):
                yield relation

    def subset(self, predicate: RelationPredicate) -> "OsmDataset":
        """
        Relations matching `predicate` plus every element they depend on.

        Member relations are followed transitively; references to absent
        elements are kept out (they stay unresolved downstream).
        """
        result = OsmDataset()
        pending: List[int] = [r.id for r in self.relations_sorted(predicate)]
        seen: Set[int] = set()

        while pending:
            relation_id = pending.pop()
            if relation_id in seen:
                continue
            seen.add(relation_id)
            relation = self.relations.get(relation_id)
            if relation is None:
                continue
            result.add(relation)
            for member in relation.members:
                if member.type is ElementType.RELATION:
                    pending.append(member.ref)
                elif member.type is ElementType.WAY:
                    way = self.ways.get(member.ref)
                    if way is None:
                        continue
                    result.add(way)
                    for node_id in way.node_ids:
                        node = self.nodes.get(node_id)
                        if node is not None:
                            result.add(node)
                elif member.type is ElementType.NODE:
                    node = self.nodes.get(member.ref)
                    if node is not None:
                        result.add(node)

        return result

    def counts(self) -> Dict[str, int]:
        return {
            "nodes": len(self.nodes),
            "ways": len(self.ways),
            "relations": len(self.relations),
        }
