"""In-memory store for weather records, favorites and the filtered view."""

import logging
from collections.abc import Callable, Iterable

from ..models.favorite import FavoriteRecord
from ..models.filters import EventFilter, FilterCriteria
from ..models.weather import WeatherRecord
from .api_client import ApiError, WeatherApiClient

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class StoreError(Exception):
    """Base class for store failures."""


class DataLoadError(StoreError):
    """The weather collection could not be loaded."""


class NonCriticalLoadError(StoreError):
    """Favorites could not be loaded; the board works without them."""


class MutationError(StoreError):
    """A favorite could not be created or deleted."""


def filter_records(
    records: Iterable[WeatherRecord], criteria: FilterCriteria
) -> list[WeatherRecord]:
    """Return the records matching the criteria, in their original order."""
    return [record for record in records if criteria.matches(record)]


class DataStore:
    """Holds the fetched weather and favorites and derives the filtered view.

    Favorites are only changed after the API confirms the change. Toggling
    the same record twice before the first request returns is not guarded.
    """

    def __init__(self, client: WeatherApiClient):
        self.client = client
        self.weathers: list[WeatherRecord] = []
        self.favorites: list[FavoriteRecord] = []
        self.filtered: list[WeatherRecord] = []
        self.criteria = FilterCriteria()
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked after every state change."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a previously registered callback."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    async def load_weather(self) -> list[WeatherRecord]:
        """Fetch all weather records and reset the filtered view."""
        try:
            weathers = await self.client.list_weather()
        except ApiError as e:
            logger.error(f"Error loading weather data: {e}")
            raise DataLoadError(f"Failed to fetch weather data: {e}") from e

        self.weathers = weathers
        self.criteria = FilterCriteria()
        self.filtered = list(weathers)
        logger.debug(f"Loaded {len(weathers)} weather records")
        self._notify()
        return self.weathers

    async def load_favorites(self) -> list[FavoriteRecord]:
        """Fetch all favorites."""
        try:
            favorites = await self.client.list_favorites()
        except ApiError as e:
            logger.warning(f"Error loading favorites: {e}")
            raise NonCriticalLoadError(f"Failed to fetch favorites: {e}") from e

        self.favorites = favorites
        logger.debug(f"Loaded {len(favorites)} favorites")
        self._notify()
        return self.favorites

    def apply_filter(
        self, search_term: str = "", event_filter: EventFilter | str = EventFilter.ALL
    ) -> list[WeatherRecord]:
        """Update the criteria and recompute the filtered view."""
        self.criteria = FilterCriteria(
            search_term=search_term, event_filter=EventFilter(event_filter)
        )
        self.filtered = filter_records(self.weathers, self.criteria)
        self._notify()
        return self.filtered

    def get_weather(self, weather_id: str) -> WeatherRecord | None:
        """Look up a loaded weather record by id."""
        return next((w for w in self.weathers if w.id == weather_id), None)

    def favorite_for(self, weather_id: str) -> FavoriteRecord | None:
        """Return the favorite pointing at a weather record, if any."""
        return next((f for f in self.favorites if f.weather_id == weather_id), None)

    def is_favorited(self, weather_id: str) -> bool:
        """Return True if the weather record is a favorite."""
        return self.favorite_for(weather_id) is not None

    async def toggle_favorite(self, weather_id: str) -> FavoriteRecord | None:
        """Add or remove the favorite for a weather record.

        Returns the new favorite when one was created, None when one was
        removed.
        """
        existing = self.favorite_for(weather_id)

        if existing:
            try:
                await self.client.delete_favorite(existing.id)
            except ApiError as e:
                logger.error(f"Error removing favorite {existing.id}: {e}")
                raise MutationError(f"Failed to remove {existing.area_name} from favorites") from e

            self.favorites = [f for f in self.favorites if f.id != existing.id]
            logger.info(f"Removed {existing.area_name} from favorites")
            self._notify()
            return None

        weather = self.get_weather(weather_id)
        if weather is None:
            raise MutationError(f"Unknown weather record: {weather_id}")

        try:
            favorite = await self.client.create_favorite(weather.id, weather.area)
        except ApiError as e:
            logger.error(f"Error adding favorite for {weather.area}: {e}")
            raise MutationError(f"Failed to add {weather.area} to favorites") from e

        self.favorites = [*self.favorites, favorite]
        logger.info(f"Added {weather.area} to favorites")
        self._notify()
        return favorite

    async def remove_favorite(self, favorite_id: str) -> None:
        """Delete a favorite by its id."""
        try:
            await self.client.delete_favorite(favorite_id)
        except ApiError as e:
            logger.error(f"Error removing favorite {favorite_id}: {e}")
            raise MutationError("Failed to remove favorite") from e

        self.favorites = [f for f in self.favorites if f.id != favorite_id]
        self._notify()
