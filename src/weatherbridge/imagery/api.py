"""RainViewer manifest client."""

from __future__ import annotations

from datetime import timedelta
from typing import Final

from weatherbridge.imagery.models import WeatherMaps
from weatherbridge.weather.client import ProviderClient

MAPS_URL: Final = "https://api.rainviewer.com/public/weather-maps.json"
MAPS_CACHE_KEY: Final = "weather_maps"


class RainViewerAPI(ProviderClient):
    """Fetches the RainViewer frame manifest.

    RainViewer needs no API key. The manifest changes every few minutes,
    so the default TTL is shorter than for forecast data.
    """

    provider_name = "RainViewer"
    default_ttl = timedelta(minutes=5)

    async def get_available_maps(self) -> WeatherMaps:
        """Get available weather maps (radar & satellite timestamps)."""
        return await self.fetch_with_cache(
            MAPS_URL, MAPS_CACHE_KEY, parse=WeatherMaps.model_validate
        )
