"""
Shared fixtures for the TripStats test suite
"""

from typing import Any, Dict, Iterable, List, Optional

import pytest

from tripstats.schemas.trips import TripRecord, DriverInfo, VehicleInfo


def make_trip(
    driver_id: Any,
    billed: Any = 0,
    is_cash: Any = True,
    plate: Optional[str] = None,
    manufacturer: Optional[str] = None,
    **extra: Any
) -> TripRecord:
    """Build a trip the way the trip API would send it"""
    payload = {
        "driverID": driver_id,
        "isCash": is_cash,
        "billedAmount": billed,
        "driverName": f"Driver {driver_id}",
        "driverEmail": f"driver{driver_id}@example.com",
        "driverPhone": "555-0100",
        "userName": "rider",
        "dateCreated": "2024-03-01T10:00:00Z",
        "pickupAddress": "1 Pickup Rd",
        "destinationAddress": "2 Dropoff Ave",
        "vehiclePlate": plate,
        "vehicleManufacturer": manufacturer,
    }
    payload.update(extra)
    return TripRecord.model_validate(payload)


def make_driver(name: str, vehicle_ids: Iterable[Any] = ()) -> DriverInfo:
    return DriverInfo.model_validate({
        "name": name,
        "email": f"{name.lower()}@example.com",
        "phone": "555-0199",
        "vehicleID": list(vehicle_ids),
    })


class FakeTripSource:
    """In-memory TripDataSource that records driver lookups"""
    
    def __init__(
        self,
        trips: List[TripRecord],
        drivers: Optional[Dict[Any, DriverInfo]] = None,
        trips_error: Optional[Exception] = None,
        failing_drivers: Iterable[Any] = (),
    ):
        self.trips = trips
        self.drivers = drivers or {}
        self.trips_error = trips_error
        self.failing_drivers = set(failing_drivers)
        self.trip_calls = 0
        self.driver_calls: List[Any] = []
    
    async def fetch_trips(self) -> List[TripRecord]:
        self.trip_calls += 1
        if self.trips_error is not None:
            raise self.trips_error
        return list(self.trips)
    
    async def fetch_driver(self, driver_id: Any) -> DriverInfo:
        self.driver_calls.append(driver_id)
        if driver_id in self.failing_drivers:
            raise LookupError(f"driver {driver_id} not found")
        return self.drivers[driver_id]
    
    async def fetch_vehicle(self, vehicle_id: Any) -> VehicleInfo:
        return VehicleInfo(plate=str(vehicle_id))


@pytest.fixture
def ranking_source() -> FakeTripSource:
    """D1: 3 trips worth 100 in total; D2: 5 trips worth 50 in total"""
    trips = [
        make_trip("D1", 40, is_cash=True),
        make_trip("D2", 10, is_cash=False),
        make_trip("D2", "10", is_cash=True),
        make_trip("D1", "30.00", is_cash=False),
        make_trip("D2", 10, is_cash=False),
        make_trip("D2", 10, is_cash=True),
        make_trip("D1", 30, is_cash=True),
        make_trip("D2", 10, is_cash=False),
    ]
    drivers = {
        "D1": make_driver("Ada", ["v1"]),
        "D2": make_driver("Bo", ["v2", "v3"]),
    }
    return FakeTripSource(trips, drivers)
