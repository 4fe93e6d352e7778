"""
Dataset statistics: how many relations carry each boundary type.
"""
from __future__ import annotations

from collections import Counter
from typing import IO, List, Optional, Tuple

from .dataset import OsmDataset, RelationPredicate


def boundary_type_counts(dataset: OsmDataset, predicate: Optional[RelationPredicate] = None) -> List[Tuple[str, int]]:
    counts = Counter(
        relation.tags["boundary"]
        for relation in dataset.relations_sorted(predicate)
        if "boundary" in relation.tags
    )
    # Most frequent first; ties by name keep the report stable
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def write_stats(counts: List[Tuple[str, int]], out: IO[str]) -> None:
    for boundary_type, count in counts:
        out.write(f"{boundary_type} {count}\n")
