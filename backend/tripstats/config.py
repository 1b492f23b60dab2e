"""
TripStats Configuration
Loads settings from environment variables
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    # Trip data API (trips, drivers, vehicles)
    trip_api_base_url: str = "http://127.0.0.1:3000"
    trip_api_timeout_seconds: float = 30.0
    trips_path: str = "/trips"
    drivers_path: str = "/drivers"
    vehicles_path: str = "/vehicles"
    
    # Server
    backend_host: str = "0.0.0.0"
    backend_port: int = 8000
    debug: bool = True
    
    # Logging
    log_level: str = "INFO"
    
    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()
