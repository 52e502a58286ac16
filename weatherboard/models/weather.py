"""Weather data models."""

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Display order for the per-period breakdown
PERIOD_ORDER = ("morning", "afternoon", "night")


class EventRecommendation(str, Enum):
    """Suitability of an area's weather for outdoor events."""

    SUITABLE = "suitable"
    CAUTION = "caution"
    UNSUITABLE = "unsuitable"


class PeriodWeather(BaseModel):
    """Weather for one period of the day."""

    model_config = ConfigDict(frozen=True)

    temp: int
    condition: str
    humidity: int = Field(ge=0, le=100)
    wind: int


class WeatherRecord(BaseModel):
    """Weather report for a single area of the city."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    area: str
    temperature: int
    condition: str
    humidity: int = Field(ge=0, le=100)
    wind_speed: int = Field(alias="windSpeed")
    event_recommendation: EventRecommendation = Field(alias="eventRecommendation")
    time_weather: dict[str, PeriodWeather] = Field(default_factory=dict, alias="timeWeather")

    @property
    def ordered_periods(self) -> Iterator[tuple[str, PeriodWeather]]:
        """Periods present on this record, morning first."""
        for period in PERIOD_ORDER:
            if period in self.time_weather:
                yield period, self.time_weather[period]
