"""Client for the weather board REST API."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..models.favorite import FavoriteRecord
from ..models.weather import WeatherRecord

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """Raised when a request fails or the server answers with an error payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class WeatherApiClient:
    """Async client for the weather and favorites endpoints.

    Every failure, including a 200 response carrying an ``error`` field,
    is raised as ``ApiError``. Requests are never retried.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def _request(
        self, method: str, path: str, payload: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON object."""
        url = f"{self.base_url}{API_PREFIX}{path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, json=payload)
                response.raise_for_status()
                data = response.json()

        except httpx.TimeoutException as e:
            logger.warning(f"Timeout on {method} {path}")
            raise ApiError("Request timeout") from e

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"HTTP {status} on {method} {path}")
            raise ApiError(f"HTTP {status}", status_code=status) from e

        except httpx.HTTPError as e:
            logger.warning(f"Connection error on {method} {path}: {e}")
            raise ApiError(f"Connection error: {e}") from e

        except ValueError as e:
            logger.warning(f"Invalid JSON from {method} {path}: {e}")
            raise ApiError("Invalid JSON response") from e

        if not isinstance(data, dict):
            raise ApiError(f"Unexpected response from {path}", status_code=response.status_code)

        # The API reports some failures in the body with a success status
        if "error" in data:
            logger.info(f"{method} {path} rejected: {data['error']}")
            raise ApiError(str(data["error"]), status_code=response.status_code)

        return data

    async def list_weather(self) -> list[WeatherRecord]:
        """Fetch weather for every area."""
        data = await self._request("GET", "/weather")
        try:
            return [WeatherRecord.model_validate(item) for item in data.get("weathers") or []]
        except ValidationError as e:
            raise ApiError(f"Malformed weather data: {e}") from e

    async def get_weather(self, weather_id: str) -> WeatherRecord:
        """Fetch weather for a single area."""
        data = await self._request("GET", f"/weather/{weather_id}")
        try:
            return WeatherRecord.model_validate(data.get("weather", data))
        except ValidationError as e:
            raise ApiError(f"Malformed weather data: {e}") from e

    async def list_favorites(self) -> list[FavoriteRecord]:
        """Fetch all favorites."""
        data = await self._request("GET", "/favorites")
        try:
            return [FavoriteRecord.model_validate(item) for item in data.get("favorites") or []]
        except ValidationError as e:
            raise ApiError(f"Malformed favorites data: {e}") from e

    async def create_favorite(self, weather_id: str, area_name: str) -> FavoriteRecord:
        """Create a favorite and return the server's record."""
        data = await self._request(
            "POST", "/favorites", {"weatherId": weather_id, "areaName": area_name}
        )
        try:
            return FavoriteRecord.model_validate(data["favorite"])
        except (KeyError, ValidationError) as e:
            raise ApiError(f"Malformed favorite response: {e}") from e

    async def delete_favorite(self, favorite_id: str) -> None:
        """Delete a favorite by its id."""
        await self._request("DELETE", f"/favorites/{favorite_id}")
