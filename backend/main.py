"""
Main FastAPI Application
=======================

Entry point for the Boundary Rings API server.
"""

import uvicorn
import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dotenv import load_dotenv
load_dotenv()  # Load .env file

from api.router import api_router
from services.logging_service import init_logging, setup_console_logging

# Initialize logging
setup_console_logging()
try:
    # Add rotating file + ring buffer handlers
    init_logging()
except OSError as e:
    # Do not fail startup if file logging isn't available
    logging.getLogger(__name__).warning(f"⚠️ File logging unavailable: {e}")
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Boundary Rings API",
    description="Administrative boundary polygon extraction from OSM data",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router)

logger.info("🚀 Boundary Rings API ready")


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=False,
    )
