"""Search and filter criteria for the weather grid."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .weather import WeatherRecord


class EventFilter(str, Enum):
    """Event recommendation filter, including the catch-all."""

    ALL = "all"
    SUITABLE = "suitable"
    CAUTION = "caution"
    UNSUITABLE = "unsuitable"


class FilterCriteria(BaseModel):
    """Current search term and event filter."""

    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    event_filter: EventFilter = EventFilter.ALL

    def matches(self, record: WeatherRecord) -> bool:
        """Return True if the record satisfies both the search and the filter."""
        matches_search = self.search_term.lower() in record.area.lower()
        matches_event = (
            self.event_filter == EventFilter.ALL
            or record.event_recommendation.value == self.event_filter.value
        )
        return matches_search and matches_event
