from __future__ import annotations

import json
from typing import Any, Dict, IO, Iterable, List


def write_geojson_lines(features: Iterable[Dict[str, Any]], out: IO[str]) -> int:
    """Write one compact GeoJSON Feature per line. Returns the number written."""
    written = 0
    for feature in features:
        out.write(json.dumps(feature, ensure_ascii=False, separators=(",", ":")))
        out.write("\n")
        written += 1
    return written


def feature_collection(features: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"type": "FeatureCollection", "features": features}
