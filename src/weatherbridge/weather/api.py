"""Weather API client for OpenWeather."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

import httpx
from pydantic import TypeAdapter

from weatherbridge.cache import CacheStore
from weatherbridge.models import Location
from weatherbridge.weather.client import DEFAULT_TIMEOUT, ProviderClient, StaleHandler
from weatherbridge.weather.models import (
    AirPollutionResponse,
    GeocodeResult,
    OneCallResponse,
)

logger = logging.getLogger(__name__)

# API endpoints
BASE_URL: Final = "https://api.openweathermap.org"
ONECALL_PATH: Final = "/data/3.0/onecall"
AQI_PATH: Final = "/data/2.5/air_pollution"
GEO_DIRECT_PATH: Final = "/geo/1.0/direct"
GEO_REVERSE_PATH: Final = "/geo/1.0/reverse"

_GEOCODE_LIST: Final = TypeAdapter(list[GeocodeResult])


def _to_locations(results: Sequence[GeocodeResult]) -> list[Location]:
    return [
        Location(lat=r.lat, lon=r.lon, name=r.name, state=r.state, country=r.country)
        for r in results
    ]


class WeatherAPI(ProviderClient):
    """OpenWeather API client for One Call, Air Pollution and Geocoding.

    Every request carries the static API key and goes through the relay
    prefix. Responses are validated into typed models and cached per
    request key; see ``ProviderClient`` for the cache and fallback rules.
    """

    provider_name = "OpenWeather"

    def __init__(
        self,
        api_key: str,
        relay_url: str = "",
        *,
        units: str = "imperial",
        exclude: Sequence[str] = ("minutely",),
        base_url: str = BASE_URL,
        cache: CacheStore | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        on_stale: StaleHandler | None = None,
    ) -> None:
        """Initialize the weather API client.

        Args:
            api_key: OpenWeather API key
            relay_url: Prefix prepended to every request URL
            units: ``imperial``, ``metric`` or ``standard``
            exclude: One Call blocks to leave out of the response
            base_url: OpenWeather host
            cache: Cache store owned by this client
            http_client: Optional shared async HTTP client
            timeout: Timeout for API requests in seconds
            on_stale: Called when a stale entry is served
        """
        super().__init__(
            relay_url,
            cache=cache,
            http_client=http_client,
            timeout=timeout,
            on_stale=on_stale,
        )
        self.api_key = api_key
        self.units = units
        self.exclude = ",".join(exclude)
        self.base_url = base_url.rstrip("/")

    async def get_one_call(self, location: Location) -> OneCallResponse:
        """Retrieve current conditions, forecasts and alerts for a location.

        Raises:
            TransportError: On network or HTTP failure with no cached fallback
            ParseError: When the response does not match the One Call schema
        """
        params = {
            "lat": location.lat,
            "lon": location.lon,
            "units": self.units,
            "exclude": self.exclude,
            "appid": self.api_key,
        }
        key = f"onecall_{location.lat}_{location.lon}_{self.units}_{self.exclude}"
        return await self.fetch_with_cache(
            self.base_url + ONECALL_PATH,
            key,
            params=params,
            parse=OneCallResponse.model_validate,
        )

    async def get_air_quality(self, location: Location) -> AirPollutionResponse:
        """Retrieve the current air pollution reading for a location."""
        params = {"lat": location.lat, "lon": location.lon, "appid": self.api_key}
        key = f"airquality_{location.lat}_{location.lon}"
        return await self.fetch_with_cache(
            self.base_url + AQI_PATH,
            key,
            params=params,
            parse=AirPollutionResponse.model_validate,
        )

    async def search_location(self, query: str, limit: int = 5) -> list[Location]:
        """Forward-geocode a free-text place name.

        Args:
            query: Place name such as ``Atlanta, GA, US``
            limit: Maximum number of matches

        Returns:
            Matching locations, best match first
        """
        params = {"q": query, "limit": limit, "appid": self.api_key}
        results = await self.fetch_with_cache(
            self.base_url + GEO_DIRECT_PATH,
            f"search_{query}_{limit}",
            params=params,
            parse=_GEOCODE_LIST.validate_python,
        )
        return _to_locations(results)

    async def reverse_geocode(self, location: Location, limit: int = 1) -> Location:
        """Name a coordinate pair.

        Returns:
            The best match, or ``location`` unchanged when nothing matched
        """
        params = {
            "lat": location.lat,
            "lon": location.lon,
            "limit": limit,
            "appid": self.api_key,
        }
        results = await self.fetch_with_cache(
            self.base_url + GEO_REVERSE_PATH,
            f"reverse_{location.lat}_{location.lon}_{limit}",
            params=params,
            parse=_GEOCODE_LIST.validate_python,
        )
        if not results:
            logger.info("No reverse geocoding match for %s", location.label)
            return location
        return _to_locations(results)[0]
