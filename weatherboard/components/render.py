"""Text projection of weather records and favorites as Rich markup."""

from collections.abc import Iterable, Sequence

from rich.markup import escape

from ..models.favorite import FavoriteRecord
from ..models.weather import EventRecommendation, WeatherRecord

FAVORITED_GLYPH = "❤️"
NOT_FAVORITED_GLYPH = "🤍"

EMPTY_CARDS_MESSAGE = (
    "[bold]No weather data found[/bold]\n[dim]Try adjusting your search or filter criteria[/dim]"
)
EMPTY_FAVORITES_MESSAGE = "[dim]No favorites added yet[/dim]"

RECOMMENDATION_COLORS = {
    EventRecommendation.SUITABLE: "green",
    EventRecommendation.CAUTION: "yellow",
    EventRecommendation.UNSUITABLE: "red",
}


def escape_markup(text: str) -> str:
    """Escape Rich markup characters in user content."""
    return escape(text)


def favorite_glyph(is_favorited: bool) -> str:
    """Heart shown on a card's favorite toggle."""
    return FAVORITED_GLYPH if is_favorited else NOT_FAVORITED_GLYPH


def render_recommendation(recommendation: EventRecommendation) -> str:
    """Upper-cased recommendation coloured by its value."""
    color = RECOMMENDATION_COLORS[recommendation]
    return f"[bold {color}]{recommendation.value.upper()}[/bold {color}]"


def render_card_body(record: WeatherRecord) -> str:
    """Temperature, condition, humidity, wind and recommendation lines of a card."""
    return (
        f"[bold]{record.temperature}°C[/bold]  {escape_markup(record.condition)}\n"
        f"💧 {record.humidity}%  💨 {record.wind_speed} km/h\n"
        f"{render_recommendation(record.event_recommendation)}"
    )


def render_card_title(record: WeatherRecord) -> str:
    """Area name heading a card."""
    return f"[bold]{escape_markup(record.area)}[/bold]"


def render_card(record: WeatherRecord, is_favorited: bool) -> str:
    """Render one weather card."""
    header = f"{render_card_title(record)}  {favorite_glyph(is_favorited)}"
    return f"{header}\n{render_card_body(record)}"


def render_cards(records: Sequence[WeatherRecord], favorites: Iterable[FavoriteRecord]) -> str:
    """Render the filtered records as cards, or an empty-state message."""
    if not records:
        return EMPTY_CARDS_MESSAGE

    favorite_ids = {favorite.weather_id for favorite in favorites}
    return "\n\n".join(render_card(record, record.id in favorite_ids) for record in records)


def render_favorite_row(favorite: FavoriteRecord) -> str:
    """Area name shown on a favorites row."""
    return escape_markup(favorite.area_name)


def render_favorites(favorites: Sequence[FavoriteRecord]) -> str:
    """Render the favorites list, one area per line."""
    if not favorites:
        return EMPTY_FAVORITES_MESSAGE
    return "\n".join(f"• {render_favorite_row(favorite)}" for favorite in favorites)


def render_detail(record: WeatherRecord) -> str:
    """Render the per-period breakdown for a record."""
    blocks = [f"[bold]{escape_markup(record.area)} - Detailed Weather[/bold]"]
    for period, weather in record.ordered_periods:
        blocks.append(
            f"[bold underline]{period.capitalize()}[/bold underline]\n"
            f"Temperature: {weather.temp}°C\n"
            f"Condition: {escape_markup(weather.condition)}\n"
            f"Humidity: {weather.humidity}%\n"
            f"Wind: {weather.wind} km/h"
        )
    return "\n\n".join(blocks)
