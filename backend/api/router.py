"""
Central API Router
Combines all API endpoints into a single router for main.py
"""
from fastapi import APIRouter
from api.endpoints import boundaries, system
from api import logs

# Create the main API router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(boundaries.router, prefix="/api/boundaries", tags=["boundaries"])
api_router.include_router(system.router, prefix="/api", tags=["system"])
api_router.include_router(logs.router)

# Add a root endpoint for API discovery
@api_router.get("/api")
async def api_root():
    """API root endpoint for discovery"""
    return {
        "message": "Boundary Rings API v1.0",
        "documentation": "/docs",
        "endpoints": {
            "extract": "/api/boundaries/extract - Assemble boundary polygons from OSM JSON elements",
            "stats": "/api/boundaries/stats - Count relations per boundary type",
            "filters": "/api/boundaries/filters - Available area filters",
            "health": "/api/health - System health check",
            "logs": "/logs/recent - Recent log records",
        },
    }
