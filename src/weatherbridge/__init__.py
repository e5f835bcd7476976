"""Normalization layer between weather providers and a weather display."""

__version__ = "0.1.0"

from weatherbridge.bridge import WeatherBridge
from weatherbridge.cache import CacheStore
from weatherbridge.models import ImageryTimeline, Location, TileStyle, WeatherSnapshot
from weatherbridge.settings import BridgeSettings

__all__ = [
    "BridgeSettings",
    "CacheStore",
    "ImageryTimeline",
    "Location",
    "TileStyle",
    "WeatherBridge",
    "WeatherSnapshot",
]
