"""
TripStats Fleet Analysis Service
Fleet-wide trip statistics enriched with the driver lookup service

This service:
1. Counts and sums cash / non-cash trips
2. Looks up every driver concurrently to count multi-vehicle drivers
3. Picks the driver with the most trips and the highest-earning driver,
   taking their display fields from the driver lookup service

Any failure is logged and turned into a None result; callers never see the
underlying exception.
"""

from typing import Any, Dict, List, Optional, Tuple
import asyncio
import logging

from tripstats.clients.trip_api import TripDataSource
from tripstats.schemas.trips import TripRecord, DriverInfo
from tripstats.schemas.reports import FleetSummary, RankedDriver
from tripstats.services.billing import sum_billed

logger = logging.getLogger(__name__)


class FleetAnalysisService:
    """
    Computes the fleet summary from a trip data source
    """
    
    def __init__(self, source: TripDataSource):
        self.source = source
    
    async def compute_fleet_analysis(self) -> Optional[FleetSummary]:
        """
        Build the fleet summary
        
        Returns:
            FleetSummary, or None if the trip data (or a ranked driver's
            details) could not be fetched
        """
        try:
            summary = await self._build_summary()
        except Exception as e:
            logger.error(f"Data is not available: {e!r}")
            return None
        
        logger.info(
            f"Fleet analysis complete: "
            f"{summary.no_of_cash_trips} cash / {summary.no_of_non_cash_trips} non-cash trips, "
            f"billed {summary.billed_total}"
        )
        return summary
    
    async def _build_summary(self) -> FleetSummary:
        trips = await self.source.fetch_trips()
        if not trips:
            raise LookupError("trip data source returned no trips")
        
        # 1. Cash / non-cash split (only real booleans count)
        cash_trips = [trip for trip in trips if trip.is_cash is True]
        non_cash_trips = [trip for trip in trips if trip.is_cash is False]
        
        # 2. Billed sums; the cash total is reported unrounded
        billed_total = round(sum_billed(trips), 2)
        cash_billed_total = sum_billed(cash_trips)
        non_cash_billed_total = round(sum_billed(non_cash_trips), 2)
        
        # 3. Multi-vehicle drivers among the drivers we could look up
        trips_by_driver = _group_by_driver(trips)
        drivers = await self._fetch_drivers_settled(list(trips_by_driver))
        multi_vehicle_drivers = sum(1 for driver in drivers if len(driver.vehicle_ids) > 1)
        
        # 4. Most trips: stable sort, so ties go to the driver seen first
        by_trip_count = sorted(
            trips_by_driver.items(),
            key=lambda item: len(item[1]),
            reverse=True
        )
        most_trips_id, most_trips = by_trip_count[0]
        most_trips_info = await self.source.fetch_driver(most_trips_id)
        
        # 5. Highest earning driver, same tie-break
        earnings = _earnings_by_driver(trips_by_driver)
        earnings.sort(key=lambda entry: entry[1], reverse=True)
        top_earner_id, top_earner_total, top_earner_trips = earnings[0]
        top_earner_info = await self.source.fetch_driver(top_earner_id)
        
        return FleetSummary(
            no_of_cash_trips=len(cash_trips),
            no_of_non_cash_trips=len(non_cash_trips),
            billed_total=billed_total,
            cash_billed_total=cash_billed_total,
            non_cash_billed_total=non_cash_billed_total,
            no_of_drivers_with_more_than_one_vehicle=multi_vehicle_drivers,
            most_trips_by_driver=_ranked_driver(
                most_trips_info, len(most_trips), sum_billed(most_trips)
            ),
            highest_earning_driver=_ranked_driver(
                top_earner_info, top_earner_trips, top_earner_total
            ),
        )
    
    async def _fetch_drivers_settled(self, driver_ids: List[Any]) -> List[DriverInfo]:
        """
        Look up all drivers concurrently and keep the ones that resolved.
        A failed lookup never cancels the others.
        """
        results = await asyncio.gather(
            *(self.source.fetch_driver(driver_id) for driver_id in driver_ids),
            return_exceptions=True
        )
        
        drivers = [result for result in results if not isinstance(result, BaseException)]
        failed = len(results) - len(drivers)
        if failed:
            logger.debug(f"Driver lookup failed for {failed} of {len(results)} drivers")
        return drivers


def _group_by_driver(trips: List[TripRecord]) -> Dict[Any, List[TripRecord]]:
    """Trips per driver ID, keyed in order of first appearance"""
    grouped: Dict[Any, List[TripRecord]] = {}
    for trip in trips:
        grouped.setdefault(trip.driver_id, []).append(trip)
    return grouped


def _earnings_by_driver(
    trips_by_driver: Dict[Any, List[TripRecord]]
) -> List[Tuple[Any, float, int]]:
    """(driver ID, total billed, trip count) per driver, unrounded"""
    return [
        (driver_id, sum_billed(driver_trips), len(driver_trips))
        for driver_id, driver_trips in trips_by_driver.items()
    ]


def _ranked_driver(info: DriverInfo, no_of_trips: int, total: float) -> RankedDriver:
    return RankedDriver(
        name=info.name,
        email=info.email,
        phone=info.phone,
        no_of_trips=no_of_trips,
        total_amount_earned=total,
    )
