"""UI components for the weather board."""

from .dialogs import DetailScreen, ErrorDialog
from .favorites_panel import FavoritesPanel
from .status_bar import StatusBar
from .weather_grid import WeatherCard, WeatherGrid

__all__ = [
    "DetailScreen",
    "ErrorDialog",
    "FavoritesPanel",
    "StatusBar",
    "WeatherCard",
    "WeatherGrid",
]
