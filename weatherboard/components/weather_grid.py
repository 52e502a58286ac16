"""Weather grid component showing one card per area."""

from collections.abc import Iterable, Sequence

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Horizontal, Vertical, VerticalScroll
from textual.dom import DOMNode
from textual.message import Message
from textual.widgets import Button, Label, Static

from ..models.favorite import FavoriteRecord
from ..models.weather import WeatherRecord
from .render import (
    escape_markup,
    favorite_glyph,
    render_card_body,
    render_card_title,
    render_cards,
)


class FavoriteButton(Button):
    """Heart toggle on a weather card."""

    def __init__(self, weather_id: str, is_favorited: bool) -> None:
        super().__init__(
            favorite_glyph(is_favorited),
            id=f"favorite-{weather_id}",
            classes="favorite-btn favorited" if is_favorited else "favorite-btn",
        )
        self.weather_id = weather_id
        self.tooltip = "Remove from favorites" if is_favorited else "Add to favorites"


class WeatherCard(Vertical, can_focus=True):
    """A single area's weather card."""

    BINDINGS = [
        Binding("enter", "open_detail", "Details", show=True),
        Binding("space", "toggle_favorite", "Favorite", show=True),
    ]

    def __init__(self, record: WeatherRecord, is_favorited: bool) -> None:
        super().__init__(
            id=f"card-{record.id}",
            classes=f"weather-card {record.event_recommendation.value}",
        )
        self.record = record
        self.is_favorited = is_favorited

    @property
    def weather_id(self) -> str:
        return self.record.id

    def compose(self) -> ComposeResult:
        with Horizontal(classes="card-header"):
            yield Label(render_card_title(self.record), classes="area-name")
            yield FavoriteButton(self.record.id, self.is_favorited)
        yield Static(render_card_body(self.record), classes="card-body")

    def action_open_detail(self) -> None:
        self.post_message(WeatherGrid.DetailRequested(self.weather_id))

    def action_toggle_favorite(self) -> None:
        self.post_message(WeatherGrid.FavoriteToggled(self.weather_id))


def find_card(node: DOMNode | None) -> WeatherCard | None:
    """Return the card containing a node, if any."""
    if node is None:
        return None
    for ancestor in node.ancestors_with_self:
        if isinstance(ancestor, WeatherCard):
            return ancestor
    return None


class WeatherGrid(VerticalScroll):
    """Grid of weather cards with loading, error and empty states.

    Card interaction is handled here for every card: pressing a heart
    posts FavoriteToggled, clicking anywhere else on a card posts
    DetailRequested.
    """

    DEFAULT_CSS = """
    WeatherGrid {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    WeatherGrid #grid-status {
        width: 100%;
        padding: 2;
        text-align: center;
    }

    WeatherGrid #grid-status.error {
        color: $error;
    }

    WeatherGrid #grid-cards {
        grid-size: 3;
        grid-gutter: 1;
        height: auto;
    }

    WeatherGrid WeatherCard {
        height: auto;
        border: round $surface-lighten-2;
        padding: 0 1;
    }

    WeatherGrid WeatherCard.suitable {
        border: round $success;
    }

    WeatherGrid WeatherCard.caution {
        border: round $warning;
    }

    WeatherGrid WeatherCard.unsuitable {
        border: round $error;
    }

    WeatherGrid WeatherCard:focus {
        border: double $accent;
    }

    WeatherGrid .card-header {
        height: 1;
    }

    WeatherGrid .area-name {
        width: 1fr;
    }

    WeatherGrid FavoriteButton {
        min-width: 4;
        width: auto;
        height: 1;
        border: none;
        background: transparent;
    }
    """

    class FavoriteToggled(Message):
        """Message sent when a card's favorite toggle is pressed."""

        def __init__(self, weather_id: str) -> None:
            super().__init__()
            self.weather_id = weather_id

    class DetailRequested(Message):
        """Message sent when a card is selected for its detail view."""

        def __init__(self, weather_id: str) -> None:
            super().__init__()
            self.weather_id = weather_id

    def compose(self) -> ComposeResult:
        yield Label("Loading weather data...", id="grid-status")
        yield Grid(id="grid-cards")

    def on_mount(self) -> None:
        self.query_one("#grid-cards", Grid).display = False

    def _show_status(self, message: str, error: bool = False) -> None:
        status = self.query_one("#grid-status", Label)
        status.update(message)
        status.set_class(error, "error")
        status.display = True
        self.query_one("#grid-cards", Grid).display = False

    def set_loading(self) -> None:
        """Show the loading message."""
        self._show_status("[dim]Loading weather data...[/dim]")

    def set_error(self, error: str) -> None:
        """Show an error and hide the cards."""
        self._show_status(f"[red]{escape_markup(error)}[/red]", error=True)

    async def update_cards(
        self, records: Sequence[WeatherRecord], favorites: Iterable[FavoriteRecord]
    ) -> None:
        """Replace the cards with the given records."""
        cards = self.query_one("#grid-cards", Grid)
        await cards.remove_children()

        if not records:
            self._show_status(render_cards(records, favorites))
            return

        self.query_one("#grid-status", Label).display = False
        cards.display = True
        favorite_ids = {favorite.weather_id for favorite in favorites}
        await cards.mount_all(WeatherCard(record, record.id in favorite_ids) for record in records)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, FavoriteButton):
            event.stop()
            self.post_message(self.FavoriteToggled(event.button.weather_id))

    def on_click(self, event: events.Click) -> None:
        card = find_card(event.widget)
        if card is not None:
            self.post_message(self.DetailRequested(card.weather_id))
