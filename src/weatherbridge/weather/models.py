"""Typed models for OpenWeather responses.

Covers One Call 3.0, Air Pollution 2.5 and Geocoding 1.0. Only the fields
the normalizer reads are modelled; everything else is kept as extra data.
Fields that OpenWeather omits in some situations (gusts, visibility,
polar sunrise/sunset, alerts, ...) are optional so that a valid response
always parses.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────── primitives ──────────────────────────────────────


class WeatherCondition(BaseModel):
    """Weather condition information from OpenWeather."""

    id: int
    main: str = ""
    description: str = ""
    icon: str | None = None


class _ConditionsMixin(BaseModel):
    weather: list[WeatherCondition] = Field(default_factory=list)

    @property
    def weather_main(self) -> WeatherCondition | None:
        """Get the primary weather condition.

        Returns:
            First weather condition in the list or None if not available
        """
        return self.weather[0] if self.weather else None


# ─────────────────────────── One Call blocks ─────────────────────────────────


class Current(_ConditionsMixin):
    """Current weather conditions."""

    dt: int
    sunrise: int | None = None
    sunset: int | None = None
    temp: float
    feels_like: float | None = None
    pressure: float | None = None
    humidity: int | None = None
    dew_point: float | None = None
    uvi: float | None = None
    clouds: int | None = None
    visibility: int | None = None
    wind_speed: float | None = None
    wind_deg: float | None = None
    wind_gust: float | None = None

    model_config = ConfigDict(extra="allow")


class Hourly(_ConditionsMixin):
    """Hourly forecast data."""

    dt: int
    temp: float
    feels_like: float | None = None
    humidity: int | None = None
    uvi: float | None = None
    clouds: int | None = None
    wind_speed: float | None = None
    wind_deg: float | None = None
    wind_gust: float | None = None
    pop: float | None = None

    model_config = ConfigDict(extra="allow")


class DailyTemp(BaseModel):
    """Temperature variations throughout the day."""

    min: float
    max: float
    day: float | None = None
    night: float | None = None

    model_config = ConfigDict(extra="allow")


class Daily(_ConditionsMixin):
    """Daily forecast data."""

    dt: int
    temp: DailyTemp
    summary: str | None = None
    humidity: int | None = None
    wind_speed: float | None = None
    wind_deg: float | None = None
    pop: float | None = None

    model_config = ConfigDict(extra="allow")


class WeatherAlert(BaseModel):
    """Government weather alert attached to a One Call response."""

    sender_name: str = ""
    event: str = ""
    start: int
    end: int
    description: str = ""
    tags: list[str] | None = None


# ─────────────────────────── top-level responses ─────────────────────────────


class OneCallResponse(BaseModel):
    """Weather data container parsed from an OpenWeather One Call response.

    Organizes weather data into logical components (current, hourly, daily,
    alerts) and validates the structure of API responses.
    """

    lat: float
    lon: float
    timezone: str
    timezone_offset: int = 0
    current: Current
    hourly: list[Hourly] = Field(default_factory=list)
    daily: list[Daily] = Field(default_factory=list)
    alerts: list[WeatherAlert] | None = None


class AirPollutionMain(BaseModel):
    aqi: int


class AirPollutionEntry(BaseModel):
    """One timestamped air pollution reading."""

    dt: int | None = None
    main: AirPollutionMain
    components: dict[str, float] = Field(default_factory=dict)


class AirPollutionResponse(BaseModel):
    """OpenWeather Air Pollution API response."""

    coord: dict[str, float] | None = None
    entries: list[AirPollutionEntry] = Field(default_factory=list, alias="list")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def latest(self) -> AirPollutionEntry | None:
        """The current reading, None when the provider returned none."""
        return self.entries[0] if self.entries else None


class GeocodeResult(BaseModel):
    """A single forward or reverse geocoding match."""

    name: str
    lat: float
    lon: float
    country: str | None = None
    state: str | None = None
    local_names: dict[str, str] | None = None
