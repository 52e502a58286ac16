"""Weather board Textual application."""

import logging
from pathlib import Path

import httpx
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Header, Input, Select

from .components import DetailScreen, ErrorDialog, FavoritesPanel, StatusBar, WeatherGrid
from .models.config import Config
from .models.filters import EventFilter
from .services.api_client import WeatherApiClient
from .services.mock_api import MockWeatherApi
from .services.store import DataLoadError, DataStore, MutationError, NonCriticalLoadError

logger = logging.getLogger(__name__)

FILTER_OPTIONS = [
    ("All events", EventFilter.ALL.value),
    ("Suitable", EventFilter.SUITABLE.value),
    ("Caution", EventFilter.CAUTION.value),
    ("Unsuitable", EventFilter.UNSUITABLE.value),
]


class WeatherBoardApp(App):
    """Weather cards for the areas of the city, with search, filter and favorites."""

    TITLE = "Weather Board"
    SUB_TITLE = "Kigali"

    CSS = """
    #controls {
        height: 3;
    }

    #search {
        width: 1fr;
    }

    #event-filter {
        width: 24;
    }

    #main {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "reload", "Reload"),
        Binding("slash", "focus_search", "Search"),
        Binding("f", "focus_filter", "Filter"),
    ]

    def __init__(
        self,
        config_path: Path | str = "config.json",
        config: Config | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__()
        self.config = config or Config.load_or_default(config_path)
        self._weather_loaded = False

        api = self.config.api
        if transport is None and api.mock:
            logger.info("Using mock weather API")
            transport = MockWeatherApi(latency=api.latency_ms / 1000).transport()

        client = WeatherApiClient(
            base_url=api.base_url, timeout=api.timeout_seconds, transport=transport
        )
        self.store = DataStore(client)

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="controls"):
            yield Input(placeholder="Search areas...", id="search")
            yield Select(
                FILTER_OPTIONS,
                value=EventFilter.ALL.value,
                allow_blank=False,
                id="event-filter",
            )
        with Horizontal(id="main"):
            yield WeatherGrid()
            yield FavoritesPanel()
        yield StatusBar()

    def on_mount(self) -> None:
        # The main screen stays at the bottom of the stack while dialogs are open
        self.grid = self.query_one(WeatherGrid)
        self.favorites_panel = self.query_one(FavoritesPanel)
        self.status_bar = self.query_one(StatusBar)
        self.search_input = self.query_one("#search", Input)
        self.filter_select = self.query_one("#event-filter", Select)

        self.store.subscribe(self._on_store_changed)

        interval = self.config.settings.refresh_interval_minutes
        if interval > 0:
            self.set_interval(interval * 60, self.action_reload)
            self.status_bar.set_refresh_interval(interval)

        self.action_reload()

    def on_unmount(self) -> None:
        self.store.unsubscribe(self._on_store_changed)

    def _on_store_changed(self) -> None:
        self.call_later(self._render_views)

    async def _render_views(self) -> None:
        """Re-render the grid and favorites from the store."""
        if self._weather_loaded:
            await self.grid.update_cards(self.store.filtered, self.store.favorites)
        await self.favorites_panel.update_favorites(self.store.favorites)
        self.status_bar.set_counts(
            len(self.store.filtered), len(self.store.weathers), len(self.store.favorites)
        )

    def action_reload(self) -> None:
        """Reload weather and favorites."""
        self.run_worker(self.load_data(), group="load", exclusive=True)

    async def load_data(self) -> None:
        """Load weather, then favorites."""
        self.grid.set_loading()
        self.status_bar.set_activity("Loading weather...")

        try:
            await self.store.load_weather()
        except DataLoadError:
            self._weather_loaded = False
            self.grid.set_error("Failed to load weather data. Press r to try again.")
            self.status_bar.clear_activity()
            return

        self._weather_loaded = True
        self.status_bar.set_last_refresh()

        try:
            await self.store.load_favorites()
        except NonCriticalLoadError:
            logger.warning("Continuing without favorites")

        # Keep whatever the user has already typed or selected
        self._apply_filter()
        self.status_bar.clear_activity()

    def _apply_filter(self) -> None:
        if not self._weather_loaded:
            return
        search_term = self.search_input.value
        event_filter = self.filter_select.value
        self.store.apply_filter(search_term, str(event_filter))

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search":
            self._apply_filter()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "event-filter":
            self._apply_filter()

    def on_weather_grid_detail_requested(self, message: WeatherGrid.DetailRequested) -> None:
        record = self.store.get_weather(message.weather_id)
        if record is None:
            logger.warning(f"No weather record for {message.weather_id}")
            return
        self.push_screen(DetailScreen(record))

    def on_weather_grid_favorite_toggled(self, message: WeatherGrid.FavoriteToggled) -> None:
        self.run_worker(self._toggle_favorite(message.weather_id), group="favorites")

    def on_favorites_panel_remove_requested(
        self, message: FavoritesPanel.RemoveRequested
    ) -> None:
        self.run_worker(self._remove_favorite(message.favorite_id), group="favorites")

    async def _toggle_favorite(self, weather_id: str) -> None:
        try:
            await self.store.toggle_favorite(weather_id)
        except MutationError as e:
            logger.error(f"Toggle favorite failed: {e}")
            self.push_screen(ErrorDialog("Failed to update favorites. Please try again."))

    async def _remove_favorite(self, favorite_id: str) -> None:
        try:
            await self.store.remove_favorite(favorite_id)
        except MutationError as e:
            logger.error(f"Remove favorite failed: {e}")
            self.push_screen(ErrorDialog("Failed to remove favorite. Please try again."))

    def action_focus_search(self) -> None:
        self.search_input.focus()

    def action_focus_filter(self) -> None:
        self.filter_select.focus()
