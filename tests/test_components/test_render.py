"""Tests for text rendering of cards, favorites and details."""

from weatherboard.components.render import (
    EMPTY_CARDS_MESSAGE,
    EMPTY_FAVORITES_MESSAGE,
    FAVORITED_GLYPH,
    NOT_FAVORITED_GLYPH,
    escape_markup,
    render_card,
    render_cards,
    render_detail,
    render_favorites,
)
from rich.text import Text

from weatherboard.models.favorite import FavoriteRecord
from weatherboard.models.weather import WeatherRecord


def favorite(weather_id, area_name, favorite_id="1"):
    return FavoriteRecord(id=favorite_id, weather_id=weather_id, area_name=area_name)


class TestRenderCards:
    """Tests for render_cards."""

    def test_empty_state(self):
        assert render_cards([], []) == EMPTY_CARDS_MESSAGE
        assert "No weather data found" in EMPTY_CARDS_MESSAGE

    def test_one_card_per_record(self, weather_records):
        text = render_cards(weather_records, [])
        for record in weather_records:
            assert record.area in text
        assert text.count(NOT_FAVORITED_GLYPH) == 8
        assert FAVORITED_GLYPH not in text

    def test_favorited_glyph(self, weather_records):
        text = render_cards(weather_records[:2], [favorite("2", "Gasabo")])
        nyarugenge, gasabo = text.split("\n\n")
        assert NOT_FAVORITED_GLYPH in nyarugenge
        assert FAVORITED_GLYPH in gasabo

    def test_card_contents(self, weather_records):
        card = render_card(weather_records[3], is_favorited=False)
        assert "Kimironko" in card
        assert "21°C" in card
        assert "light rain" in card
        assert "85%" in card
        assert "20 km/h" in card
        assert "UNSUITABLE" in card

    def test_preserves_order(self, weather_records):
        reversed_records = list(reversed(weather_records))
        text = render_cards(reversed_records, [])
        positions = [text.index(record.area) for record in reversed_records]
        assert positions == sorted(positions)

    def test_idempotent(self, weather_records):
        favorites = [favorite("4", "Kimironko")]
        assert render_cards(weather_records, favorites) == render_cards(weather_records, favorites)

    def test_escapes_markup(self, seed_weather):
        seed_weather[0]["area"] = "[bold]Nyarugenge"
        record = WeatherRecord.model_validate(seed_weather[0])
        assert "[bold]Nyarugenge" in Text.from_markup(render_cards([record], [])).plain


class TestRenderFavorites:
    """Tests for render_favorites."""

    def test_empty_state(self):
        assert render_favorites([]) == EMPTY_FAVORITES_MESSAGE
        assert "No favorites added yet" in EMPTY_FAVORITES_MESSAGE

    def test_one_row_per_favorite(self):
        text = render_favorites([favorite("4", "Kimironko"), favorite("1", "Nyarugenge", "2")])
        assert text.splitlines() == ["• Kimironko", "• Nyarugenge"]


class TestRenderDetail:
    """Tests for render_detail."""

    def test_title(self, weather_records):
        assert render_detail(weather_records[0]).startswith(
            "[bold]Nyarugenge - Detailed Weather[/bold]"
        )

    def test_periods_in_canonical_order(self, seed_weather):
        time_weather = seed_weather[0]["timeWeather"]
        seed_weather[0]["timeWeather"] = {
            "night": time_weather["night"],
            "morning": time_weather["morning"],
            "afternoon": time_weather["afternoon"],
        }
        text = render_detail(WeatherRecord.model_validate(seed_weather[0]))
        assert text.index("Morning") < text.index("Afternoon") < text.index("Night")

    def test_period_values(self, weather_records):
        blocks = render_detail(weather_records[3]).split("\n\n")
        assert len(blocks) == 4
        afternoon = blocks[2]
        assert "Afternoon" in afternoon
        assert "Temperature: 24°C" in afternoon
        assert "Condition: light rain" in afternoon
        assert "Humidity: 80%" in afternoon
        assert "Wind: 25 km/h" in afternoon


class TestEscapeMarkup:
    """Tests for escape_markup."""

    def test_bracketed_text_survives(self):
        assert Text.from_markup(escape_markup("Area [North]")).plain == "Area [North]"

    def test_tag_like_text_is_not_applied(self):
        text = Text.from_markup(escape_markup("[red]Gasabo[/red]"))
        assert text.plain == "[red]Gasabo[/red]"
        assert not text.spans

    def test_trailing_backslash(self):
        markup = "[bold]" + escape_markup("C:\\") + "[/bold]"
        assert Text.from_markup(markup).plain == "C:\\"

    def test_plain_text_unchanged(self):
        assert escape_markup("Kicukiro") == "Kicukiro"
