"""Weather Board - weather cards, event recommendations and favorites for city areas."""

__version__ = "0.1.0"
