"""Canonical data model shared by every provider.

All upstream formats are normalized into these frozen pydantic models
before they reach the display layer.
"""

from weatherbridge.models.base import CanonicalModel
from weatherbridge.models.imagery import (
    COLOR_SCHEMES,
    ImageryFrame,
    ImageryTimeline,
    TileLayer,
    TileStyle,
)
from weatherbridge.models.location import Location
from weatherbridge.models.snapshot import (
    AirQuality,
    Alert,
    CurrentConditions,
    DailyForecast,
    Daypart,
    HourlyForecast,
    WeatherSnapshot,
)

__all__ = [
    "COLOR_SCHEMES",
    "AirQuality",
    "Alert",
    "CanonicalModel",
    "CurrentConditions",
    "DailyForecast",
    "Daypart",
    "HourlyForecast",
    "ImageryFrame",
    "ImageryTimeline",
    "Location",
    "TileLayer",
    "TileStyle",
    "WeatherSnapshot",
]
