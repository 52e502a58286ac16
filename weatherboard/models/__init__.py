"""Data models for the weather board."""

from .config import ApiConfig, Config, Settings
from .favorite import FavoriteRecord
from .filters import EventFilter, FilterCriteria
from .weather import PERIOD_ORDER, EventRecommendation, PeriodWeather, WeatherRecord

__all__ = [
    "PERIOD_ORDER",
    "ApiConfig",
    "Config",
    "EventFilter",
    "EventRecommendation",
    "FavoriteRecord",
    "FilterCriteria",
    "PeriodWeather",
    "Settings",
    "WeatherRecord",
]
