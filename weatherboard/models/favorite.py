"""Favorite area model."""

from pydantic import BaseModel, ConfigDict, Field


class FavoriteRecord(BaseModel):
    """A user bookmark pointing at one weather record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    weather_id: str = Field(alias="weatherId")
    area_name: str = Field(alias="areaName")  # copied from the record when favorited
