"""
TripStats Trip API Client
Async access to the external trip, driver and vehicle lookup services

The report services only depend on the TripDataSource protocol; TripApiClient
is the HTTP implementation used by the API layer.
"""

from typing import Any, List, Optional, Protocol
import logging

import httpx

from tripstats.config import Settings, get_settings
from tripstats.schemas.trips import TripRecord, DriverInfo, VehicleInfo

logger = logging.getLogger(__name__)


class TripDataSource(Protocol):
    """Capabilities the report services consume"""
    
    async def fetch_trips(self) -> List[TripRecord]:
        ...
    
    async def fetch_driver(self, driver_id: Any) -> DriverInfo:
        ...
    
    async def fetch_vehicle(self, vehicle_id: Any) -> VehicleInfo:
        ...


class TripApiClient:
    """
    HTTP client for the trip data API
    
    Use as an async context manager. A caller-supplied httpx.AsyncClient is
    used as-is and left open on exit.
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.settings.trip_api_base_url,
            timeout=self.settings.trip_api_timeout_seconds,
        )
    
    async def __aenter__(self) -> "TripApiClient":
        return self
    
    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
    
    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
    
    async def fetch_trips(self) -> List[TripRecord]:
        """Fetch the full, unfiltered trip list"""
        payload = await self._get_json(self.settings.trips_path)
        
        # Accept either a bare list or an envelope {"data": [...]}
        if isinstance(payload, dict):
            payload = payload.get("data", [])
        
        trips = [TripRecord.model_validate(item) for item in payload]
        logger.debug(f"Fetched {len(trips)} trips")
        return trips
    
    async def fetch_driver(self, driver_id: Any) -> DriverInfo:
        """Fetch one driver; raises httpx.HTTPStatusError for unknown drivers"""
        payload = await self._get_json(f"{self.settings.drivers_path}/{driver_id}")
        return DriverInfo.model_validate(payload)
    
    async def fetch_vehicle(self, vehicle_id: Any) -> VehicleInfo:
        """Fetch one vehicle; raises httpx.HTTPStatusError for unknown vehicles"""
        payload = await self._get_json(f"{self.settings.vehicles_path}/{vehicle_id}")
        return VehicleInfo.model_validate(payload)
    
    async def _get_json(self, path: str) -> Any:
        response = await self._client.get(path)
        response.raise_for_status()
        return response.json()
