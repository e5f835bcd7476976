"""OpenWeather → canonical schema transformations.

Every function here is pure and total: any response that parsed into the
native models produces a canonical object. Missing optional values are
replaced by documented fallbacks, except pressure, which stays None.
"""

from __future__ import annotations

from collections.abc import Sequence

from weatherbridge.models import (
    AirQuality,
    Alert,
    CurrentConditions,
    DailyForecast,
    Daypart,
    HourlyForecast,
    Location,
    WeatherSnapshot,
)
from weatherbridge.models.snapshot import MAX_DAILY, MAX_HOURLY
from weatherbridge.utils import TimeUtils, capitalize_phrase, to_percentage
from weatherbridge.weather.models import (
    AirPollutionResponse,
    Current,
    Daily,
    Hourly,
    OneCallResponse,
    WeatherAlert,
    WeatherCondition,
)
from weatherbridge.weather.utils import (
    AirQualityScale,
    AlertClassifier,
    ConditionIcons,
    UnitConverter,
)

# Reported when the provider omits visibility (its own maximum, in miles).
# A missing pressure has no plausible stand-in and stays None.
DEFAULT_VISIBILITY_MILES = 10.0

_round = UnitConverter.round_int


def _describe(condition: WeatherCondition | None) -> tuple[str, int]:
    """Phrase and icon code for a condition, sentinel icon when missing."""
    if condition is None:
        return "", ConditionIcons.map_condition(None)
    return (
        capitalize_phrase(condition.description),
        ConditionIcons.map_condition(condition.id, condition.icon),
    )


def _gust(gust: float | None, speed: float | None) -> int:
    return _round(gust) if gust else _round(speed)


def transform_current(current: Current, timezone: str | None = None) -> CurrentConditions:
    """Normalize the current-conditions block."""
    phrase, icon_code = _describe(current.weather_main)
    feels_like = _round(current.feels_like, _round(current.temp))
    visibility = (
        UnitConverter.meters_to_miles(current.visibility)
        if current.visibility is not None
        else DEFAULT_VISIBILITY_MILES
    )
    return CurrentConditions(
        temperature=_round(current.temp),
        phrase=phrase,
        icon_code=icon_code,
        relative_humidity=current.humidity or 0,
        dew_point=_round(current.dew_point),
        pressure_altimeter=(
            UnitConverter.hpa_to_inhg(current.pressure) if current.pressure is not None else None
        ),
        pressure_tendency_code=0,
        wind_direction_cardinal=UnitConverter.deg_to_cardinal(current.wind_deg),
        wind_speed=_round(current.wind_speed),
        wind_gust=_gust(current.wind_gust, current.wind_speed),
        feels_like=feels_like,
        heat_index=feels_like,
        wind_chill=feels_like,
        visibility=visibility,
        uv_index=current.uvi or 0.0,
        uv_description=UnitConverter.uv_description(current.uvi),
        cloud_cover=current.clouds or 0,
        sunrise_time_local=TimeUtils.to_local_iso(current.sunrise, timezone),
        sunset_time_local=TimeUtils.to_local_iso(current.sunset, timezone),
        valid_time_local=TimeUtils.to_local_iso(current.dt, timezone),
    )


def transform_hourly(
    hourly: Sequence[Hourly], timezone: str | None = None
) -> tuple[HourlyForecast, ...]:
    """Normalize the hourly forecast, keeping at most 48 hours."""
    result = []
    for hour in hourly[:MAX_HOURLY]:
        phrase, icon_code = _describe(hour.weather_main)
        result.append(
            HourlyForecast(
                valid_time_local=TimeUtils.to_local_iso(hour.dt, timezone),
                temperature=_round(hour.temp),
                feels_like=_round(hour.feels_like, _round(hour.temp)),
                phrase=phrase,
                icon_code=icon_code,
                precip_chance=to_percentage(hour.pop),
                relative_humidity=hour.humidity or 0,
                wind_direction_cardinal=UnitConverter.deg_to_cardinal(hour.wind_deg),
                wind_speed=_round(hour.wind_speed),
                wind_gust=_gust(hour.wind_gust, hour.wind_speed),
                uv_index=hour.uvi or 0.0,
                cloud_cover=hour.clouds or 0,
            )
        )
    return tuple(result)


def transform_daily(
    daily: Sequence[Daily], timezone: str | None = None
) -> tuple[DailyForecast, ...]:
    """Normalize the daily forecast, keeping at most 8 days.

    Each day carries a single daypart pair. The provider has no separate
    night forecast, so both halves share the day's values except for the
    name and the day/night icon variant.
    """
    result = []
    for index, day in enumerate(daily[:MAX_DAILY]):
        condition = day.weather_main
        phrase, _ = _describe(condition)
        condition_id = condition.id if condition else None
        weekday = TimeUtils.day_of_week(day.dt, timezone)
        names = ("Today", "Tonight") if index == 0 else (weekday, f"{weekday} night")
        precip = to_percentage(day.pop)
        humidity = day.humidity or 0
        cardinal = UnitConverter.deg_to_cardinal(day.wind_deg)
        wind = _round(day.wind_speed)

        result.append(
            DailyForecast(
                day_of_week=weekday,
                valid_time_local=TimeUtils.to_local_iso(day.dt, timezone),
                temperature_max=_round(day.temp.max),
                temperature_min=_round(day.temp.min),
                narrative=day.summary or phrase,
                daypart=Daypart(
                    name=names,
                    icon_code=(
                        ConditionIcons.map_condition(condition_id, "01d"),
                        ConditionIcons.map_condition(condition_id, "01n"),
                    ),
                    precip_chance=(precip, precip),
                    relative_humidity=(humidity, humidity),
                    wind_direction_cardinal=(cardinal, cardinal),
                    wind_speed=(wind, wind),
                    phrase=(phrase, phrase),
                ),
            )
        )
    return tuple(result)


def transform_alerts(
    alerts: Sequence[WeatherAlert] | None, timezone: str | None = None
) -> tuple[Alert, ...]:
    """Normalize government alerts; no alerts yields an empty tuple."""
    if not alerts:
        return ()
    return tuple(
        Alert(
            detail_key=f"{alert.sender_name}_{alert.start}",
            message_type_code=AlertClassifier.message_type(alert.event),
            event_description=alert.event,
            headline_text=alert.event,
            description=alert.description,
            severity_code=AlertClassifier.severity(alert.tags),
            categories=tuple(alert.tags or ()),
            issue_time=TimeUtils.to_local_iso(alert.start, timezone),
            expire_time=TimeUtils.to_local_iso(alert.end, timezone),
            source=alert.sender_name,
        )
        for alert in alerts
    )


def transform_air_quality(air: AirPollutionResponse | None) -> AirQuality | None:
    """Normalize an air pollution reading, None when there is no reading."""
    entry = air.latest if air is not None else None
    if entry is None:
        return None

    components = entry.components
    aqi = entry.main.aqi
    category = AirQualityScale.category(aqi)
    return AirQuality(
        category_index=aqi,
        category=category,
        index=aqi,
        primary_pollutant=AirQualityScale.primary_pollutant(components),
        pollutants={
            "pm25": components.get("pm2_5"),
            "pm10": components.get("pm10"),
            "o3": components.get("o3"),
            "no2": components.get("no2"),
            "so2": components.get("so2"),
            "co": components.get("co"),
        },
        color=AirQualityScale.color(aqi),
        description=f"Air Quality: {category} ({aqi}/5)",
    )


def build_snapshot(
    one_call: OneCallResponse,
    air: AirPollutionResponse | None = None,
    location: Location | None = None,
) -> WeatherSnapshot:
    """Assemble a full snapshot from a One Call response and optional air data.

    Args:
        one_call: Conditions, forecasts and alerts
        air: Air pollution reading, None when unavailable
        location: The location that was requested; its name and exact
            coordinates are kept. Built from the response when None.
    """
    tz = one_call.timezone
    return WeatherSnapshot(
        current=transform_current(one_call.current, tz),
        hourly=transform_hourly(one_call.hourly, tz),
        daily=transform_daily(one_call.daily, tz),
        alerts=transform_alerts(one_call.alerts, tz),
        air_quality=transform_air_quality(air),
        timezone=tz,
        location=location or Location(lat=one_call.lat, lon=one_call.lon),
    )
