"""Canonical weather snapshot returned for one location."""

from __future__ import annotations

from typing import Final, Literal

from pydantic import Field

from weatherbridge.models.base import CanonicalModel
from weatherbridge.models.location import Location

MAX_HOURLY: Final = 48
MAX_DAILY: Final = 8


class CurrentConditions(CanonicalModel):
    """Observed conditions at the location."""

    temperature: int
    phrase: str
    icon_code: int
    relative_humidity: int
    dew_point: int
    pressure_altimeter: float | None = Field(..., description="Pressure in inHg, None when not reported")
    pressure_tendency_code: int = 0
    wind_direction_cardinal: str
    wind_speed: int
    wind_gust: int
    feels_like: int
    heat_index: int
    wind_chill: int
    visibility: float = Field(..., description="Visibility in miles")
    uv_index: float
    uv_description: str
    cloud_cover: int
    sunrise_time_local: str | None = None
    sunset_time_local: str | None = None
    valid_time_local: str


class HourlyForecast(CanonicalModel):
    """One hour of forecast."""

    valid_time_local: str
    temperature: int
    feels_like: int
    phrase: str
    icon_code: int
    precip_chance: int
    relative_humidity: int
    wind_direction_cardinal: str
    wind_speed: int
    wind_gust: int
    uv_index: float
    cloud_cover: int


class Daypart(CanonicalModel):
    """Day and night halves of a daily forecast, as (day, night) pairs."""

    name: tuple[str, str]
    icon_code: tuple[int, int]
    precip_chance: tuple[int, int]
    relative_humidity: tuple[int, int]
    wind_direction_cardinal: tuple[str, str]
    wind_speed: tuple[int, int]
    phrase: tuple[str, str]


class DailyForecast(CanonicalModel):
    """One day of forecast."""

    day_of_week: str
    valid_time_local: str
    temperature_max: int
    temperature_min: int
    narrative: str
    daypart: Daypart


class Alert(CanonicalModel):
    """A weather alert with a derived, approximate severity."""

    detail_key: str
    message_type_code: str
    event_description: str
    headline_text: str
    description: str
    severity_code: Literal[2, 3, 4]
    significance: str = "W"
    categories: tuple[str, ...] = ()
    issue_time: str
    expire_time: str
    source: str


class AirQuality(CanonicalModel):
    """Current air quality reading on the provider's 1-5 scale."""

    category_index: int
    category: str
    index: int
    primary_pollutant: str
    pollutants: dict[str, float | None]
    color: str = Field(..., description="Hex display color for the category")
    description: str = Field(..., description="Label such as 'Air Quality: Fair (2/5)'")


class WeatherSnapshot(CanonicalModel):
    """Everything the display needs for one location.

    ``hourly`` and ``daily`` are ordered by forecast offset, index 0 being
    the nearest interval. ``air_quality`` is None when that provider failed.
    """

    current: CurrentConditions
    hourly: tuple[HourlyForecast, ...] = Field(default=(), max_length=MAX_HOURLY)
    daily: tuple[DailyForecast, ...] = Field(default=(), max_length=MAX_DAILY)
    alerts: tuple[Alert, ...] = ()
    air_quality: AirQuality | None = None
    timezone: str
    location: Location
