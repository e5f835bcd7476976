from typing import Any

import pytest
from pydantic import ValidationError

from weatherbridge.models import Location, WeatherSnapshot
from weatherbridge.weather.models import AirPollutionResponse, OneCallResponse
from weatherbridge.weather.normalize import build_snapshot


def test_location_bounds() -> None:
    Location(lat=90, lon=-180)
    with pytest.raises(ValidationError):
        Location(lat=91, lon=0)
    with pytest.raises(ValidationError):
        Location(lat=0, lon=180.5)


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        ({"name": "Atlanta", "state": "GA", "country": "US"}, "Atlanta, GA US"),
        ({"name": "Paris", "country": "FR"}, "Paris, FR"),
        ({"name": "Somewhere"}, "Somewhere"),
        ({}, "33.7,-84.4"),
    ],
)
def test_location_label(kwargs: dict[str, Any], expected: str) -> None:
    assert Location(lat=33.7, lon=-84.4, **kwargs).label == expected


def test_canonical_models_are_frozen() -> None:
    loc = Location(lat=1, lon=2)
    with pytest.raises(ValidationError):
        loc.lat = 3  # type: ignore[misc]


def test_one_call_tolerates_missing_optional_blocks() -> None:
    resp = OneCallResponse.model_validate(
        {"lat": 1.0, "lon": 2.0, "timezone": "UTC", "current": {"dt": 0, "temp": 10.0}}
    )
    assert resp.hourly == []
    assert resp.alerts is None
    assert resp.current.weather_main is None


def test_one_call_keeps_unknown_fields(onecall_json: dict[str, Any]) -> None:
    onecall_json["current"]["rain"] = {"1h": 0.5}
    resp = OneCallResponse.model_validate(onecall_json)
    assert resp.current.model_extra == {"rain": {"1h": 0.5}}


def test_air_pollution_list_alias(air_json: dict[str, Any]) -> None:
    resp = AirPollutionResponse.model_validate(air_json)
    assert resp.latest is not None
    assert resp.latest.components["o3"] == 68.66


def test_snapshot_rejects_oversized_forecasts(onecall_json: dict[str, Any]) -> None:
    snap = build_snapshot(OneCallResponse.model_validate(onecall_json))
    with pytest.raises(ValidationError):
        WeatherSnapshot(
            current=snap.current,
            hourly=snap.hourly * 25,
            timezone=snap.timezone,
            location=snap.location,
        )


def test_snapshot_json_dump(onecall_json: dict[str, Any]) -> None:
    data = build_snapshot(OneCallResponse.model_validate(onecall_json)).model_dump(mode="json")
    assert data["current"]["temperature"] == 69
    assert data["daily"][0]["daypart"]["name"] == ["Today", "Tonight"]
    assert data["air_quality"] is None
