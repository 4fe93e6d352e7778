"""
Boundary Extraction API Endpoints
"""
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
import logging

from pipelines.boundaries.pipeline import BoundaryPipeline
from pipelines.boundaries.writer import feature_collection
from pipelines.osm.filters import AreaFilter, all_of, area_predicate, by_query, parse_area_filter
from pipelines.osm.loader import DatasetFormatError, parse_elements
from pipelines.osm.stats import boundary_type_counts

logger = logging.getLogger(__name__)
router = APIRouter()


class ExtractRequest(BaseModel):
    """Request model for boundary extraction"""
    elements: List[Dict[str, Any]]
    filter: str = AreaFilter.ADMINISTRATIVE.value
    query: Optional[str] = None


class StatsRequest(BaseModel):
    """Request model for boundary statistics"""
    elements: List[Dict[str, Any]]
    all: bool = Field(False, description="Count all relations, using minimal filters")


class BoundaryTypeCount(BaseModel):
    boundary: str
    count: int


class StatsResponse(BaseModel):
    status: str
    counts: List[BoundaryTypeCount]


@router.post("/extract")
async def extract_boundaries(request: ExtractRequest) -> Dict[str, Any]:
    """
    Assemble boundary polygons for every qualifying relation in the payload
    """
    try:
        area_filter = parse_area_filter(request.filter)
        dataset = parse_elements(request.elements)
    except (ValueError, DatasetFormatError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    predicate = area_predicate(area_filter)
    if request.query:
        predicate = all_of(predicate, by_query(request.query))

    result = BoundaryPipeline(area_filter=predicate).process(dataset)

    response = feature_collection(result.features)
    response["failures"] = [failure.to_dict() for failure in result.failures]
    response["summary"] = result.summary
    return response


@router.post("/stats", response_model=StatsResponse)
async def boundary_stats(request: StatsRequest) -> StatsResponse:
    """
    Count relations per boundary type
    """
    try:
        dataset = parse_elements(request.elements)
    except DatasetFormatError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    predicate = area_predicate(AreaFilter.ALL if request.all else AreaFilter.ADMINISTRATIVE)
    counts = boundary_type_counts(dataset, predicate)
    return StatsResponse(
        status="success",
        counts=[BoundaryTypeCount(boundary=b, count=c) for b, c in counts],
    )


@router.get("/filters")
async def get_area_filters() -> Dict[str, Any]:
    """
    Get available area filters
    """
    return {
        "status": "success",
        "filters": {
            AreaFilter.ALL.value: "Every relation in the dataset",
            AreaFilter.ADMINISTRATIVE.value: "Named administrative boundaries with a region key and target admin level",
        },
        "default": AreaFilter.ADMINISTRATIVE.value,
    }
