"""Radar and satellite imagery: manifest client and animation timeline."""

from weatherbridge.imagery.api import RainViewerAPI
from weatherbridge.imagery.models import WeatherMaps
from weatherbridge.imagery.timeline import (
    TILE_BASE_URL,
    ImageryTimelineManager,
    build_satellite_timeline,
    build_timeline,
)

__all__ = [
    "TILE_BASE_URL",
    "ImageryTimelineManager",
    "RainViewerAPI",
    "WeatherMaps",
    "build_satellite_timeline",
    "build_timeline",
]
