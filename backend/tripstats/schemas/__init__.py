"""TripStats Schemas"""
from tripstats.schemas.trips import (
    TripRecord,
    DriverInfo,
    VehicleInfo,
)
from tripstats.schemas.reports import (
    RankedDriver,
    FleetSummary,
    TripView,
    DriverAggregate,
    DriverReport,
)

__all__ = [
    "TripRecord",
    "DriverInfo",
    "VehicleInfo",
    "RankedDriver",
    "FleetSummary",
    "TripView",
    "DriverAggregate",
    "DriverReport",
]
