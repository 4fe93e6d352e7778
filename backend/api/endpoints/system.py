"""
System Management Endpoints
==========================

Health check for the boundary extraction service.
"""

from fastapi import APIRouter
from pydantic import BaseModel
from typing import List
import logging
import time

from config.settings import get_settings

logger = logging.getLogger(__name__)
router = APIRouter()

_STARTED_AT = time.time()


class HealthResponse(BaseModel):
    """Response model for health check endpoints"""
    status: str
    uptime_seconds: float
    admin_levels: List[str]
    region_key_tag: str


@router.get("/health", response_model=HealthResponse)
async def check_system_health():
    """Cheap liveness check with the active extraction settings."""
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        uptime_seconds=round(time.time() - _STARTED_AT, 1),
        admin_levels=sorted(settings.admin_levels, key=lambda level: (len(level), level)),
        region_key_tag=settings.region_key_tag,
    )
