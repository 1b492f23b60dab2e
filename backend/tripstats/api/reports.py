"""
Report endpoints
Fleet analysis and per-driver report over the trip data API
"""
from typing import AsyncIterator

from fastapi import APIRouter, HTTPException, Depends

from tripstats.clients.trip_api import TripApiClient, TripDataSource
from tripstats.schemas.reports import FleetSummary, DriverReport
from tripstats.services.fleet_analysis import FleetAnalysisService
from tripstats.services.driver_report import DriverReportService

router = APIRouter()


async def get_trip_source() -> AsyncIterator[TripDataSource]:
    """
    Dependency that provides a trip data source.
    One client per request, closed afterwards.
    """
    async with TripApiClient() as client:
        yield client


@router.get("/analysis", response_model=FleetSummary)
async def get_fleet_analysis(
    source: TripDataSource=Depends(get_trip_source)
):
    """
    Fleet-wide cash / non-cash statistics and top drivers
    """
    summary = await FleetAnalysisService(source).compute_fleet_analysis()
    if summary is None:
        raise HTTPException(status_code=503, detail="Data is not available")
    return summary


@router.get("/drivers", response_model=DriverReport)
async def get_driver_report(
    source: TripDataSource=Depends(get_trip_source)
):
    """
    Per-driver trip history, vehicles and earnings
    """
    try:
        return await DriverReportService(source).compute_driver_report()
    except Exception as e:
        raise HTTPException(status_code=502, detail=f"Driver report failed: {e}")
