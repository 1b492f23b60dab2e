"""
TripStats Driver Report Service
Per-driver breakdown built only from the driver fields embedded in trips

Unlike the fleet analysis, no driver lookups are made here, and errors are
logged and re-raised to the caller.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set
import logging
import math

from tripstats.clients.trip_api import TripDataSource
from tripstats.schemas.trips import TripRecord
from tripstats.schemas.reports import DriverAggregate, DriverReport, TripView
from tripstats.services.billing import normalize_billed_amount

logger = logging.getLogger(__name__)


def _counts_as_cash(value: Any) -> bool:
    """
    isCash truthiness as JSON clients read it: empty lists and objects count
    as cash, NaN does not
    """
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


@dataclass
class _DriverTally:
    """Running totals for one driver while folding over the trips"""
    driver_id: Any
    name: Any
    email: Any
    phone: Any
    no_of_trips: int = 0
    total_amount_earned: float = 0.0
    cash_trips: int = 0
    non_cash_trips: int = 0
    cash_billed_total: float = 0.0
    non_cash_billed_total: float = 0.0
    vehicles: Set[str] = field(default_factory=set)
    trips: List[TripView] = field(default_factory=list)
    
    @classmethod
    def from_trip(cls, trip: TripRecord) -> "_DriverTally":
        return cls(
            driver_id=trip.driver_id,
            name=trip.driver_name,
            email=trip.driver_email,
            phone=trip.driver_phone,
        )
    
    def add(self, trip: TripRecord) -> None:
        billed = normalize_billed_amount(trip.billed_amount)
        
        if _counts_as_cash(trip.is_cash):
            self.cash_trips += 1
            self.cash_billed_total += billed
        else:
            self.non_cash_trips += 1
            self.non_cash_billed_total += billed
        
        self.total_amount_earned += billed
        self.no_of_trips += 1
        self.trips.append(TripView(
            user=trip.user_name,
            created=trip.date_created,
            pickup=trip.pickup_address,
            destination=trip.destination_address,
            billed=billed,
            is_cash=trip.is_cash,
        ))
        
        if trip.vehicle_plate and trip.vehicle_manufacturer:
            self.vehicles.add(f"{trip.vehicle_plate}-{trip.vehicle_manufacturer}")
    
    def finalize(self) -> DriverAggregate:
        return DriverAggregate(
            driver_id=self.driver_id,
            name=self.name,
            email=self.email,
            phone=self.phone,
            no_of_trips=self.no_of_trips,
            total_amount_earned=self.total_amount_earned,
            cash_trips=self.cash_trips,
            non_cash_trips=self.non_cash_trips,
            cash_billed_total=self.cash_billed_total,
            non_cash_billed_total=self.non_cash_billed_total,
            vehicles=sorted(self.vehicles),
            trips=self.trips,
        )


def build_driver_aggregates(trips: List[TripRecord]) -> List[DriverAggregate]:
    """
    Fold the trips into one aggregate per driver ID
    
    Aggregates are returned in order of each driver's first trip; display
    fields come from that first trip.
    """
    tallies: Dict[Any, _DriverTally] = {}
    for trip in trips:
        tally = tallies.get(trip.driver_id)
        if tally is None:
            tally = tallies[trip.driver_id] = _DriverTally.from_trip(trip)
        tally.add(trip)
    
    return [tally.finalize() for tally in tallies.values()]


class DriverReportService:
    """
    Computes the driver report from a trip data source
    """
    
    def __init__(self, source: TripDataSource):
        self.source = source
    
    async def compute_driver_report(self) -> DriverReport:
        """
        Build the driver report
        
        Raises:
            Whatever the trip data source raised, after logging it
        """
        try:
            trips = await self.source.fetch_trips()
            drivers = build_driver_aggregates(trips)
            
            # max() keeps the first aggregate on ties
            most_trips = max(drivers, key=lambda d: d.no_of_trips, default=None)
            highest_earning = max(drivers, key=lambda d: d.total_amount_earned, default=None)
            
            report = DriverReport(
                drivers=drivers,
                no_of_drivers_with_more_than_one_vehicle=sum(
                    1 for driver in drivers if len(driver.vehicles) > 1
                ),
                most_trips_by_driver=most_trips,
                highest_earning_driver=highest_earning,
            )
        except Exception:
            logger.exception("An error occurred while fetching or processing data")
            raise
        
        logger.info(f"Driver report complete: {len(drivers)} drivers from {len(trips)} trips")
        return report
