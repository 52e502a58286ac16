"""Services for talking to the weather API and holding board state."""

from .api_client import ApiError, WeatherApiClient
from .mock_api import MockWeatherApi
from .store import (
    DataLoadError,
    DataStore,
    MutationError,
    NonCriticalLoadError,
    StoreError,
)

__all__ = [
    "ApiError",
    "DataLoadError",
    "DataStore",
    "MockWeatherApi",
    "MutationError",
    "NonCriticalLoadError",
    "StoreError",
    "WeatherApiClient",
]
