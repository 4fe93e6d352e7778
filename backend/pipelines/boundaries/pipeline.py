"""
Boundary Extraction Pipeline
Converts every qualifying relation of a dataset into a polygon feature
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from config.settings import BoundarySettings, get_settings
from pipelines.osm.dataset import OsmDataset, RelationPredicate
from pipelines.osm.filters import AreaFilter, area_predicate

from .errors import AreaFailure, BoundaryError
from .features import to_feature

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """
    Features for the areas that assembled, failures for the ones that did not.
    """

    features: List[Dict[str, Any]] = field(default_factory=list)
    failures: List[AreaFailure] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.failures


class BoundaryPipeline:
    """
    Sequential pass over the relations of a dataset.

    Each area is isolated: a BoundaryError is logged with its cause,
    recorded as an AreaFailure, and processing continues with the next area.
    """

    def __init__(
        self,
        area_filter: Optional[RelationPredicate] = None,
        settings: Optional[BoundarySettings] = None,
    ):
        self.settings = settings or get_settings()
        self.area_filter = area_filter or area_predicate(AreaFilter.ADMINISTRATIVE, self.settings)

    def iter_features(self, dataset: OsmDataset, failures: Optional[List[AreaFailure]] = None) -> Iterator[Dict[str, Any]]:
        """
        Yield features one by one; failures are appended to `failures` when given.
        """
        for relation in dataset.relations_sorted(self.area_filter):
            try:
                yield to_feature(relation, dataset, self.settings)
            except BoundaryError as e:
                e.with_area(relation.id)
                logger.error(f"❌ Relation {relation.id} ({relation.name or 'unnamed'}): {e}")
                if failures is not None:
                    failures.append(AreaFailure.from_error(e, name=relation.name))

    def process(self, dataset: OsmDataset) -> ExtractionResult:
        start = time.perf_counter()
        result = ExtractionResult()
        result.features.extend(self.iter_features(dataset, result.failures))

        failures_by_kind: Dict[str, int] = {}
        for failure in result.failures:
            failures_by_kind[failure.kind] = failures_by_kind.get(failure.kind, 0) + 1

        result.summary = {
            "total_areas": len(result.features) + len(result.failures),
            "assembled": len(result.features),
            "failed": len(result.failures),
            "failures_by_kind": failures_by_kind,
            "elapsed_seconds": round(time.perf_counter() - start, 3),
        }
        logger.info(
            f"✅ Extracted {len(result.features)} boundary polygon(s), "
            f"{len(result.failures)} area(s) skipped"
        )
        return result
