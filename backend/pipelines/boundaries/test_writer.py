from __future__ import annotations

import io
import json

from .writer import feature_collection, write_geojson_lines


def test_one_feature_per_line() -> None:
    features = [
        {"type": "Feature", "id": 1, "geometry": None, "properties": {"name": "Köln"}},
        {"type": "Feature", "id": 2, "geometry": None, "properties": {"name": "Bonn"}},
    ]
    out = io.StringIO()

    assert write_geojson_lines(features, out) == 2
    lines = out.getvalue().splitlines()
    assert [json.loads(line)["id"] for line in lines] == [1, 2]
    assert "Köln" in lines[0]


def test_feature_collection_wraps_features() -> None:
    assert feature_collection([]) == {"type": "FeatureCollection", "features": []}
