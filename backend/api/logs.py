from fastapi import APIRouter, Query
from services.logging_service import get_ring_handler


router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("/recent")
def get_recent_logs(limit: int = Query(500, ge=1, le=5000)):
    ring = get_ring_handler()
    return {"logs": ring.get_recent(limit)}
