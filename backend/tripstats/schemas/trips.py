"""
TripStats Source Schemas
Pydantic models for payloads returned by the trip data API

Trip records are taken as received: only `driverID` is typed, every other
field keeps its raw encoding so the report services can apply their own
coercion rules.
"""

from typing import Any
from pydantic import BaseModel, Field, ConfigDict, field_validator


# ============================================
# TRIP SCHEMAS
# ============================================

class TripRecord(BaseModel):
    """One billed ride as delivered by the trip data API"""
    driver_id: str | int | None = Field(default=None, alias="driverID")
    is_cash: Any = Field(default=None, alias="isCash")
    billed_amount: Any = Field(default=None, alias="billedAmount")

    # Driver snapshot embedded in the trip
    driver_name: Any = Field(default=None, alias="driverName")
    driver_email: Any = Field(default=None, alias="driverEmail")
    driver_phone: Any = Field(default=None, alias="driverPhone")

    # Ride details
    user_name: Any = Field(default=None, alias="userName")
    date_created: Any = Field(default=None, alias="dateCreated")
    pickup_address: Any = Field(default=None, alias="pickupAddress")
    destination_address: Any = Field(default=None, alias="destinationAddress")

    # Vehicle snapshot
    vehicle_plate: Any = Field(default=None, alias="vehiclePlate")
    vehicle_manufacturer: Any = Field(default=None, alias="vehicleManufacturer")

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )


# ============================================
# DRIVER / VEHICLE SCHEMAS
# ============================================

class DriverInfo(BaseModel):
    """Driver details from the driver lookup service"""
    name: Any = None
    email: Any = None
    phone: Any = None
    vehicle_ids: list[Any] = Field(default_factory=list, alias="vehicleID")

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    @field_validator("vehicle_ids", mode="before")
    @classmethod
    def null_vehicles_as_empty(cls, value: Any) -> Any:
        """A null vehicleID means the driver has no vehicles"""
        return [] if value is None else value


class VehicleInfo(BaseModel):
    """Vehicle details from the vehicle lookup service"""
    manufacturer: str | None = None
    plate: str | None = None

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )
