"""
TripStats Report Schemas
Response models for the fleet analysis and the driver report
"""

from typing import Any
from pydantic import BaseModel, Field, ConfigDict


# ============================================
# FLEET ANALYSIS SCHEMAS
# ============================================

class RankedDriver(BaseModel):
    """Driver picked by a fleet ranking, with display fields from the driver service"""
    name: Any = None
    email: Any = None
    phone: Any = None
    no_of_trips: int = Field(alias="noOfTrips")
    total_amount_earned: float = Field(alias="totalAmountEarned")
    
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class FleetSummary(BaseModel):
    """Fleet-wide trip statistics"""
    no_of_cash_trips: int = Field(alias="noOfCashTrips")
    no_of_non_cash_trips: int = Field(alias="noOfNonCashTrips")
    billed_total: float = Field(alias="billedTotal")
    cash_billed_total: float = Field(alias="cashBilledTotal")
    non_cash_billed_total: float = Field(alias="nonCashBilledTotal")
    no_of_drivers_with_more_than_one_vehicle: int = Field(
        alias="noOfDriversWithMoreThanOneVehicle"
    )
    most_trips_by_driver: RankedDriver = Field(alias="mostTripsByDriver")
    highest_earning_driver: RankedDriver = Field(alias="highestEarningDriver")
    
    model_config = ConfigDict(populate_by_name=True, frozen=True)


# ============================================
# DRIVER REPORT SCHEMAS
# ============================================

class TripView(BaseModel):
    """Trimmed trip kept in a driver's history"""
    user: Any = None
    created: Any = None
    pickup: Any = None
    destination: Any = None
    billed: float = 0.0
    is_cash: Any = Field(default=None, alias="isCash")
    
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class DriverAggregate(BaseModel):
    """Per-driver totals built from the trips' embedded driver fields"""
    driver_id: str | int | None = Field(default=None, alias="driverID")
    name: Any = None
    email: Any = None
    phone: Any = None
    no_of_trips: int = Field(default=0, alias="noOfTrips")
    total_amount_earned: float = Field(default=0.0, alias="totalAmountEarned")
    cash_trips: int = Field(default=0, alias="cashTrips")
    non_cash_trips: int = Field(default=0, alias="nonCashTrips")
    cash_billed_total: float = Field(default=0.0, alias="cashBilledTotal")
    non_cash_billed_total: float = Field(default=0.0, alias="nonCashBilledTotal")
    vehicles: list[str] = Field(default_factory=list)
    trips: list[TripView] = Field(default_factory=list)
    
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class DriverReport(BaseModel):
    """All driver aggregates plus the derived rankings"""
    drivers: list[DriverAggregate] = Field(default_factory=list)
    no_of_drivers_with_more_than_one_vehicle: int = Field(
        default=0, alias="noOfDriversWithMoreThanOneVehicle"
    )
    most_trips_by_driver: DriverAggregate | None = Field(default=None, alias="mostTripsByDriver")
    highest_earning_driver: DriverAggregate | None = Field(default=None, alias="highestEarningDriver")
    
    model_config = ConfigDict(populate_by_name=True, frozen=True)
