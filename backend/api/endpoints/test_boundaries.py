from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.router import api_router

ADMIN_TAGS = {
    "type": "boundary",
    "boundary": "administrative",
    "admin_level": "6",
    "de:regionalschluessel": "057110000000",
}

ELEMENTS = [
    {"type": "node", "id": 1, "lat": 51.0, "lon": 8.0},
    {"type": "node", "id": 2, "lat": 51.0, "lon": 8.5},
    {"type": "node", "id": 3, "lat": 51.5, "lon": 8.5},
    {"type": "way", "id": 10, "nodes": [1, 2, 3]},
    {"type": "way", "id": 11, "nodes": [1, 3]},
    {
        "type": "relation",
        "id": 62,
        "members": [
            {"type": "way", "ref": 10, "role": "outer"},
            {"type": "way", "ref": 11, "role": "outer"},
            {"type": "way", "ref": 12, "role": "inner"},
        ],
        "tags": dict(ADMIN_TAGS, name="Bielefeld"),
    },
    {
        "type": "relation",
        "id": 63,
        "members": [{"type": "way", "ref": 10, "role": "outer"}],
        "tags": dict(ADMIN_TAGS, name="Gütersloh"),
    },
]


def _client() -> TestClient:
    app = FastAPI()
    app.include_router(api_router)
    return TestClient(app)


def test_extract_returns_features_and_failures() -> None:
    response = _client().post("/api/boundaries/extract", json={"elements": ELEMENTS})

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "FeatureCollection"
    assert [f["id"] for f in body["features"]] == [62]
    assert body["features"][0]["properties"]["name"] == "Bielefeld"
    assert body["failures"] == [
        {
            "area_id": 63,
            "kind": "unclosed_ring",
            "message": body["failures"][0]["message"],
            "name": "Gütersloh",
        }
    ]
    assert body["summary"]["assembled"] == 1


def test_extract_with_query() -> None:
    response = _client().post(
        "/api/boundaries/extract",
        json={"elements": ELEMENTS, "query": "Güter"},
    )
    body = response.json()
    assert body["features"] == []
    assert [f["area_id"] for f in body["failures"]] == [63]


def test_extract_rejects_unknown_filter() -> None:
    response = _client().post("/api/boundaries/extract", json={"elements": ELEMENTS, "filter": "postal"})
    assert response.status_code == 400


def test_extract_rejects_malformed_elements() -> None:
    response = _client().post("/api/boundaries/extract", json={"elements": [{"type": "node", "id": 1}]})
    assert response.status_code == 400


def test_stats() -> None:
    response = _client().post("/api/boundaries/stats", json={"elements": ELEMENTS, "all": True})
    assert response.status_code == 200
    assert response.json()["counts"] == [{"boundary": "administrative", "count": 2}]


def test_filters_and_health() -> None:
    client = _client()
    filters = client.get("/api/boundaries/filters").json()
    assert filters["default"] == "administrative"

    health = client.get("/api/health").json()
    assert health["status"] == "healthy"


def test_extract_rejects_non_object_member() -> None:
    elements = [{"type": "relation", "id": 1, "members": ["way"]}]
    response = _client().post("/api/boundaries/extract", json={"elements": elements})
    assert response.status_code == 400
