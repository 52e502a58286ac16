"""Configuration models using Pydantic for validation."""

from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator


class ApiConfig(BaseModel):
    """Weather API connection settings."""

    base_url: str = "http://localhost:3000"
    timeout_seconds: float = 10.0
    mock: bool = True  # Serve requests from the in-process mock API
    latency_ms: int = Field(default=800, ge=0)  # Simulated mock latency

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that URL is a valid HTTP/HTTPS URL."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
        if not parsed.netloc:
            raise ValueError(f"Invalid URL '{v}': URL must have a valid host")
        return v.rstrip("/")

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class Settings(BaseModel):
    """General application settings."""

    refresh_interval_minutes: int = Field(default=0, ge=0)  # 0 disables auto-refresh
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class Config(BaseModel):
    """Main configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    settings: Settings = Field(default_factory=Settings)

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        import json

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls()
