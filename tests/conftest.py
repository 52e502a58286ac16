"""Pytest configuration and fixtures."""

import copy
import json
import tempfile
from pathlib import Path

import httpx
import pytest

from weatherboard.models.weather import WeatherRecord
from weatherboard.services.api_client import WeatherApiClient
from weatherboard.services.mock_api import SEED_WEATHER, MockWeatherApi
from weatherboard.services.store import DataStore


class RecordingTransport:
    """Wraps the mock API, recording requests and optionally failing them."""

    def __init__(self, api: MockWeatherApi):
        self.api = api
        self.requests: list[httpx.Request] = []
        self.fail_with: int | Exception | None = None

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.fail_with, Exception):
            raise self.fail_with
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"message": "failure"})
        return await self.api.handle(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def mutations(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method in ("POST", "DELETE")]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def seed_weather():
    """Raw seeded weather payloads."""
    return copy.deepcopy(SEED_WEATHER)


@pytest.fixture
def weather_records(seed_weather):
    """The eight seeded areas as models."""
    return [WeatherRecord.model_validate(item) for item in seed_weather]


@pytest.fixture
def mock_api():
    """Mock API without latency."""
    return MockWeatherApi(latency=0)


@pytest.fixture
def recorder(mock_api):
    return RecordingTransport(mock_api)


@pytest.fixture
def client(recorder):
    return WeatherApiClient(base_url="http://weather.test", transport=recorder.transport())


@pytest.fixture
def store(client):
    return DataStore(client)


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "api": {
            "base_url": "https://weather.example.com/",
            "timeout_seconds": 5,
            "mock": False,
            "latency_ms": 0,
        },
        "settings": {
            "refresh_interval_minutes": 10,
            "log_level": "DEBUG",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path
