"""In-process mock of the weather board API.

Serves the same routes as the real API from in-memory state, seeded with
weather for eight areas of Kigali, through an ``httpx.MockTransport``.
"""

import asyncio
import copy
import json
import logging
import re
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_LATENCY = 0.8  # seconds

SEED_WEATHER: list[dict[str, Any]] = [
    {
        "id": "1",
        "area": "Nyarugenge",
        "temperature": 24,
        "condition": "partly cloudy",
        "humidity": 65,
        "windSpeed": 12,
        "eventRecommendation": "suitable",
        "timeWeather": {
            "morning": {"temp": 20, "condition": "clear", "humidity": 70, "wind": 8},
            "afternoon": {"temp": 28, "condition": "partly cloudy", "humidity": 60, "wind": 15},
            "night": {"temp": 22, "condition": "clear", "humidity": 75, "wind": 10},
        },
    },
    {
        "id": "2",
        "area": "Gasabo",
        "temperature": 26,
        "condition": "sunny",
        "humidity": 58,
        "windSpeed": 15,
        "eventRecommendation": "suitable",
        "timeWeather": {
            "morning": {"temp": 22, "condition": "clear", "humidity": 65, "wind": 12},
            "afternoon": {"temp": 30, "condition": "sunny", "humidity": 50, "wind": 18},
            "night": {"temp": 24, "condition": "clear", "humidity": 70, "wind": 12},
        },
    },
    {
        "id": "3",
        "area": "Kicukiro",
        "temperature": 23,
        "condition": "overcast",
        "humidity": 72,
        "windSpeed": 8,
        "eventRecommendation": "caution",
        "timeWeather": {
            "morning": {"temp": 19, "condition": "cloudy", "humidity": 80, "wind": 6},
            "afternoon": {"temp": 27, "condition": "overcast", "humidity": 65, "wind": 10},
            "night": {"temp": 21, "condition": "cloudy", "humidity": 78, "wind": 8},
        },
    },
    {
        "id": "4",
        "area": "Kimironko",
        "temperature": 21,
        "condition": "light rain",
        "humidity": 85,
        "windSpeed": 20,
        "eventRecommendation": "unsuitable",
        "timeWeather": {
            "morning": {"temp": 18, "condition": "drizzle", "humidity": 90, "wind": 15},
            "afternoon": {"temp": 24, "condition": "light rain", "humidity": 80, "wind": 25},
            "night": {"temp": 19, "condition": "rain", "humidity": 88, "wind": 18},
        },
    },
    {
        "id": "5",
        "area": "Remera",
        "temperature": 25,
        "condition": "partly sunny",
        "humidity": 60,
        "windSpeed": 14,
        "eventRecommendation": "suitable",
        "timeWeather": {
            "morning": {"temp": 21, "condition": "cloudy", "humidity": 68, "wind": 10},
            "afternoon": {"temp": 29, "condition": "partly sunny", "humidity": 52, "wind": 18},
            "night": {"temp": 23, "condition": "clear", "humidity": 65, "wind": 12},
        },
    },
    {
        "id": "6",
        "area": "Gikondo",
        "temperature": 22,
        "condition": "cloudy",
        "humidity": 68,
        "windSpeed": 10,
        "eventRecommendation": "caution",
        "timeWeather": {
            "morning": {"temp": 19, "condition": "overcast", "humidity": 75, "wind": 8},
            "afternoon": {"temp": 25, "condition": "cloudy", "humidity": 62, "wind": 12},
            "night": {"temp": 20, "condition": "cloudy", "humidity": 72, "wind": 9},
        },
    },
    {
        "id": "7",
        "area": "Nyamirambo",
        "temperature": 27,
        "condition": "sunny",
        "humidity": 55,
        "windSpeed": 16,
        "eventRecommendation": "suitable",
        "timeWeather": {
            "morning": {"temp": 23, "condition": "clear", "humidity": 62, "wind": 12},
            "afternoon": {"temp": 31, "condition": "sunny", "humidity": 48, "wind": 20},
            "night": {"temp": 25, "condition": "clear", "humidity": 60, "wind": 14},
        },
    },
    {
        "id": "8",
        "area": "Kacyiru",
        "temperature": 20,
        "condition": "heavy rain",
        "humidity": 92,
        "windSpeed": 25,
        "eventRecommendation": "unsuitable",
        "timeWeather": {
            "morning": {"temp": 17, "condition": "rain", "humidity": 95, "wind": 20},
            "afternoon": {"temp": 23, "condition": "heavy rain", "humidity": 90, "wind": 30},
            "night": {"temp": 18, "condition": "rain", "humidity": 93, "wind": 22},
        },
    },
]

_WEATHER_ITEM = re.compile(r"^/api/weather/([^/]+)$")
_FAVORITE_ITEM = re.compile(r"^/api/favorites/([^/]+)$")


class MockWeatherApi:
    """Mock API server holding weather and favorites in memory."""

    def __init__(
        self,
        latency: float = DEFAULT_LATENCY,
        weathers: list[dict[str, Any]] | None = None,
    ):
        self.latency = latency
        self.weathers = copy.deepcopy(SEED_WEATHER if weathers is None else weathers)
        self.favorites: list[dict[str, str]] = []
        self._next_favorite_id = 1

    def transport(self) -> httpx.MockTransport:
        """Return an httpx transport that routes requests to this mock."""
        return httpx.MockTransport(self.handle)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        """Answer a single request after the simulated latency."""
        if self.latency > 0:
            await asyncio.sleep(self.latency)

        method = request.method
        path = request.url.path
        logger.debug(f"Mock API {method} {path}")

        if path == "/api/weather" and method == "GET":
            return httpx.Response(200, json={"weathers": self.weathers})

        weather_match = _WEATHER_ITEM.match(path)
        if weather_match and method == "GET":
            return self._get_weather(weather_match.group(1))

        if path == "/api/favorites":
            if method == "GET":
                return httpx.Response(200, json={"favorites": self.favorites})
            if method == "POST":
                return self._create_favorite(request)

        favorite_match = _FAVORITE_ITEM.match(path)
        if favorite_match and method == "DELETE":
            return self._delete_favorite(favorite_match.group(1))

        return httpx.Response(404, json={"error": f"No route for {method} {path}"})

    def _get_weather(self, weather_id: str) -> httpx.Response:
        for weather in self.weathers:
            if weather["id"] == weather_id:
                return httpx.Response(200, json={"weather": weather})
        return httpx.Response(404, json={"error": "Weather not found"})

    def _create_favorite(self, request: httpx.Request) -> httpx.Response:
        try:
            attrs = json.loads(request.content or b"{}")
        except json.JSONDecodeError:
            return httpx.Response(400, json={"error": "Invalid JSON body"})

        weather_id = str(attrs.get("weatherId", ""))
        if not weather_id:
            return httpx.Response(400, json={"error": "weatherId is required"})

        if any(f["weatherId"] == weather_id for f in self.favorites):
            return httpx.Response(200, json={"error": "Already in favorites"})

        favorite = {
            "id": str(self._next_favorite_id),
            "weatherId": weather_id,
            "areaName": str(attrs.get("areaName", "")),
        }
        self._next_favorite_id += 1
        self.favorites.append(favorite)
        return httpx.Response(201, json={"favorite": favorite})

    def _delete_favorite(self, favorite_id: str) -> httpx.Response:
        for favorite in self.favorites:
            if favorite["id"] == favorite_id:
                self.favorites.remove(favorite)
                return httpx.Response(200, json={"success": True})
        return httpx.Response(200, json={"error": "Favorite not found"})
