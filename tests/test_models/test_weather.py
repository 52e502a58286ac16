"""Tests for weather, favorite and filter models."""

import pytest
from pydantic import ValidationError

from weatherboard.models.favorite import FavoriteRecord
from weatherboard.models.filters import EventFilter, FilterCriteria
from weatherboard.models.weather import EventRecommendation, WeatherRecord


class TestWeatherRecord:
    """Tests for WeatherRecord model."""

    def test_parses_wire_format(self, seed_weather):
        """Test camelCase payload fields map to attributes."""
        record = WeatherRecord.model_validate(seed_weather[3])
        assert record.id == "4"
        assert record.area == "Kimironko"
        assert record.wind_speed == 20
        assert record.event_recommendation == EventRecommendation.UNSUITABLE
        assert record.time_weather["afternoon"].wind == 25

    def test_accepts_field_names(self):
        """Test records can be built with snake_case names."""
        record = WeatherRecord(
            id="9",
            area="Kanombe",
            temperature=22,
            condition="clear",
            humidity=50,
            wind_speed=5,
            event_recommendation="caution",
        )
        assert record.time_weather == {}
        assert record.event_recommendation == EventRecommendation.CAUTION

    def test_dump_by_alias_round_trips_wire_names(self, seed_weather):
        """Test serialization uses the API's field names."""
        record = WeatherRecord.model_validate(seed_weather[0])
        data = record.model_dump(by_alias=True, mode="json")
        assert data == seed_weather[0]

    def test_frozen(self, weather_records):
        """Test records cannot be modified after fetching."""
        with pytest.raises(ValidationError):
            weather_records[0].temperature = 40

    def test_humidity_out_of_range(self, seed_weather):
        """Test humidity must be a percentage."""
        seed_weather[0]["humidity"] = 120
        with pytest.raises(ValidationError):
            WeatherRecord.model_validate(seed_weather[0])

    def test_unknown_recommendation_rejected(self, seed_weather):
        """Test recommendation must be one of the known values."""
        seed_weather[0]["eventRecommendation"] = "maybe"
        with pytest.raises(ValidationError):
            WeatherRecord.model_validate(seed_weather[0])

    def test_ordered_periods_canonical_order(self, seed_weather):
        """Test periods come out morning, afternoon, night regardless of input order."""
        time_weather = seed_weather[0]["timeWeather"]
        seed_weather[0]["timeWeather"] = {
            "night": time_weather["night"],
            "afternoon": time_weather["afternoon"],
            "morning": time_weather["morning"],
        }
        record = WeatherRecord.model_validate(seed_weather[0])
        assert [period for period, _ in record.ordered_periods] == [
            "morning",
            "afternoon",
            "night",
        ]

    def test_ordered_periods_skips_missing(self, seed_weather):
        """Test absent periods are skipped."""
        del seed_weather[0]["timeWeather"]["afternoon"]
        record = WeatherRecord.model_validate(seed_weather[0])
        assert [period for period, _ in record.ordered_periods] == ["morning", "night"]


class TestFavoriteRecord:
    """Tests for FavoriteRecord model."""

    def test_parses_wire_format(self):
        favorite = FavoriteRecord.model_validate(
            {"id": "1", "weatherId": "4", "areaName": "Kimironko"}
        )
        assert favorite.weather_id == "4"
        assert favorite.area_name == "Kimironko"

    def test_missing_weather_id(self):
        with pytest.raises(ValidationError):
            FavoriteRecord.model_validate({"id": "1", "areaName": "Kimironko"})


class TestFilterCriteria:
    """Tests for FilterCriteria model."""

    def test_defaults_match_everything(self, weather_records):
        criteria = FilterCriteria()
        assert criteria.event_filter == EventFilter.ALL
        assert all(criteria.matches(record) for record in weather_records)

    def test_search_is_case_insensitive_substring(self, weather_records):
        criteria = FilterCriteria(search_term="RUGEN")
        assert [r.area for r in weather_records if criteria.matches(r)] == ["Nyarugenge"]

    def test_event_filter(self, weather_records):
        criteria = FilterCriteria(event_filter="caution")
        assert [r.area for r in weather_records if criteria.matches(r)] == [
            "Kicukiro",
            "Gikondo",
        ]

    def test_both_predicates_required(self, weather_records):
        criteria = FilterCriteria(search_term="ki", event_filter=EventFilter.UNSUITABLE)
        assert [r.area for r in weather_records if criteria.matches(r)] == ["Kimironko"]

    def test_invalid_event_filter(self):
        with pytest.raises(ValidationError):
            FilterCriteria(event_filter="sometimes")
