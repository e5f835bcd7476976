"""Entry point for the display layer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import timedelta
from types import TracebackType
from typing import Final

import httpx

from weatherbridge.cache import CacheStore
from weatherbridge.imagery import ImageryTimelineManager, RainViewerAPI
from weatherbridge.models import ImageryTimeline, Location, TileStyle, WeatherSnapshot
from weatherbridge.settings import BridgeSettings
from weatherbridge.weather.aggregator import SnapshotAggregator
from weatherbridge.weather.api import WeatherAPI
from weatherbridge.weather.client import StaleHandler

logger: Final = logging.getLogger(__name__)


class WeatherBridge:
    """Facade over the provider clients, aggregator and imagery timeline.

    This class wires together the whole core:
    - an OpenWeather client and a RainViewer client, each with its own
      cache store
    - the snapshot aggregator on top of the OpenWeather client
    - the imagery timeline manager on top of the RainViewer client

    Settings are read once here. All dependencies can be injected, which
    is how tests supply fake transports and pre-filled caches.
    """

    def __init__(
        self,
        settings: BridgeSettings,
        *,
        http_client: httpx.AsyncClient | None = None,
        weather_api: WeatherAPI | None = None,
        imagery_api: RainViewerAPI | None = None,
        on_stale: StaleHandler | None = None,
    ) -> None:
        """Build the provider clients from settings.

        Args:
            settings: Credentials, endpoints and cache policy
            http_client: Async client shared by both providers; each
                provider creates its own when omitted
            weather_api: Pre-built OpenWeather client
            imagery_api: Pre-built RainViewer client
            on_stale: Called whenever either provider serves stale data
        """
        self.settings = settings
        self.weather_api = weather_api or WeatherAPI(
            settings.api_key,
            settings.relay_url,
            units=settings.units,
            exclude=settings.exclude,
            cache=CacheStore(settings.cache_ttl),
            http_client=http_client,
            timeout=settings.timeout_seconds,
            on_stale=on_stale,
        )
        self.imagery_api = imagery_api or RainViewerAPI(
            settings.relay_url,
            cache=CacheStore(settings.imagery_ttl),
            http_client=http_client,
            timeout=settings.timeout_seconds,
            on_stale=on_stale,
        )
        self.aggregator = SnapshotAggregator(self.weather_api)
        self.imagery = ImageryTimelineManager(self.imagery_api, settings.tile_base_url)

    # ── weather ─────────────────────────────────────────────────────────────
    async def get_snapshot(self, location: Location) -> WeatherSnapshot:
        """Canonical snapshot for one location; fails if conditions fail."""
        return await self.aggregator.get_snapshot(location)

    async def get_batch_snapshots(
        self, locations: Sequence[Location] | None = None
    ) -> list[WeatherSnapshot | None]:
        """Snapshots for many locations, index-aligned, None for failures.

        Args:
            locations: Locations to fetch; the configured list when None
        """
        targets = self.settings.locations if locations is None else locations
        return await self.aggregator.get_batch_snapshots(targets)

    async def search_location(self, query: str, limit: int = 5) -> list[Location]:
        return await self.weather_api.search_location(query, limit)

    async def reverse_geocode(self, location: Location) -> Location:
        return await self.weather_api.reverse_geocode(location)

    # ── imagery ─────────────────────────────────────────────────────────────
    async def get_imagery_timeline(self) -> ImageryTimeline:
        """Radar animation frames; ``current`` is None when none are available."""
        return await self.imagery.get_timeline()

    def tile_url(
        self, timestamp: int, zoom: int, x: int, y: int, style: TileStyle | None = None
    ) -> str:
        """URL of one radar tile; see ``ImageryTimelineManager.tile_url``."""
        return self.imagery.tile_url(timestamp, zoom, x, y, style)

    # ── administration ──────────────────────────────────────────────────────
    def set_cache_ttl(self, ttl: timedelta) -> None:
        """Change the weather data freshness window for subsequent calls."""
        self.weather_api.set_cache_ttl(ttl)

    def clear_cache(self) -> None:
        """Drop cached weather and imagery data."""
        self.weather_api.clear_cache()
        self.imagery_api.clear_cache()

    async def aclose(self) -> None:
        """Close HTTP connections held by the providers."""
        await self.weather_api.aclose()
        await self.imagery_api.aclose()

    async def __aenter__(self) -> WeatherBridge:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
