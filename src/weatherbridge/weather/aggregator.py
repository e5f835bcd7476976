"""Concurrent snapshot assembly for one or many locations."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Final

from weatherbridge.models import Location, WeatherSnapshot
from weatherbridge.weather.api import WeatherAPI
from weatherbridge.weather.models import AirPollutionResponse
from weatherbridge.weather.normalize import build_snapshot

logger: Final = logging.getLogger(__name__)


class SnapshotAggregator:
    """Fans requests out to the weather client and assembles snapshots.

    Conditions/forecast data is required: its failure propagates. Air
    quality is optional: its failure becomes ``air_quality=None``. In a
    batch, each location fails independently and shows up as None at its
    own index.
    """

    def __init__(self, weather_api: WeatherAPI) -> None:
        self.weather_api = weather_api

    async def get_snapshot(self, location: Location) -> WeatherSnapshot:
        """Fetch and normalize everything for one location.

        Raises:
            WeatherAPIError: When the conditions/forecast fetch fails
        """
        one_call, air = await asyncio.gather(
            self.weather_api.get_one_call(location),
            self.weather_api.get_air_quality(location),
            return_exceptions=True,
        )
        if isinstance(one_call, BaseException):
            raise one_call
        if isinstance(air, BaseException):
            if not isinstance(air, Exception):
                raise air
            logger.info("Air quality unavailable for %s: %s", location.label, air)
            air = None
        return build_snapshot(one_call, _as_air(air), location)

    async def get_batch_snapshots(
        self, locations: Sequence[Location]
    ) -> list[WeatherSnapshot | None]:
        """Fetch snapshots for several locations concurrently.

        Returns:
            One entry per input location, in input order; None where that
            location failed
        """
        outcomes = await asyncio.gather(
            *(self.get_snapshot(location) for location in locations),
            return_exceptions=True,
        )
        results: list[WeatherSnapshot | None] = []
        for location, outcome in zip(locations, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.error("Error fetching weather for %s: %s", location.label, outcome)
                results.append(None)
            else:
                results.append(outcome)
        return results


def _as_air(value: object) -> AirPollutionResponse | None:
    return value if isinstance(value, AirPollutionResponse) else None
