"""
TripStats - Trip Reporting Service
FastAPI Application Entry Point

API Routes:
- /api/reports/analysis - Fleet-wide cash / non-cash statistics
- /api/reports/drivers  - Per-driver report
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from tripstats.config import get_settings
from tripstats.api.reports import router as reports_router

settings = get_settings()
logger = logging.getLogger("tripstats")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(f"Starting up, trip API at {settings.trip_api_base_url}")
    
    yield
    
    # Shutdown
    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title="TripStats",
    description="Fleet analysis and driver reports over the trip data API",
    version="0.1.0",
    lifespan=lifespan,
)

# Reports: /api/reports/*
# - GET /analysis
# - GET /drivers
app.include_router(reports_router, prefix="/api/reports", tags=["reports"])

# ============================================
# HEALTH ENDPOINTS
# ============================================


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "name": "TripStats",
        "version": "0.1.0",
        "status": "running",
        "api_docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Detailed health check"""
    return {
        "status": "healthy",
        "trip_api": settings.trip_api_base_url,
        "api_routes": {
            "analysis": "/api/reports/analysis",
            "drivers": "/api/reports/drivers"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        reload=settings.debug
    )
