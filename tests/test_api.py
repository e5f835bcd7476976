import asyncio
from typing import Any

import pytest

from weatherbridge.models import Location
from weatherbridge.weather.api import WeatherAPI
from weatherbridge.weather.errors import NotFoundError
from conftest import AQI_PATH, GEO_DIRECT_PATH, GEO_REVERSE_PATH, ONECALL_PATH, FakeUpstream

ATLANTA = Location(lat=33.749, lon=-84.388)


def test_get_one_call_sends_expected_params(
    weather_api: WeatherAPI, upstream: FakeUpstream, onecall_json: dict[str, Any]
) -> None:
    upstream.add(ONECALL_PATH, onecall_json)

    result = asyncio.run(weather_api.get_one_call(ATLANTA))

    params = upstream.requests[0].url.params
    assert params["lat"] == "33.749"
    assert params["lon"] == "-84.388"
    assert params["units"] == "imperial"
    assert params["exclude"] == "minutely"
    assert params["appid"] == "fake-api-key-123"
    assert result.current.temp == 68.5
    assert len(result.hourly) == 2


def test_get_air_quality(
    weather_api: WeatherAPI, upstream: FakeUpstream, air_json: dict[str, Any]
) -> None:
    upstream.add(AQI_PATH, air_json)

    result = asyncio.run(weather_api.get_air_quality(ATLANTA))

    assert result.latest is not None
    assert result.latest.main.aqi == 2
    assert "airquality_33.749_-84.388" in weather_api.cache


def test_conditions_and_air_cached_independently(
    weather_api: WeatherAPI,
    upstream: FakeUpstream,
    onecall_json: dict[str, Any],
    air_json: dict[str, Any],
) -> None:
    upstream.add(ONECALL_PATH, onecall_json).add(AQI_PATH, air_json)

    async def run() -> None:
        await weather_api.get_one_call(ATLANTA)
        await weather_api.get_air_quality(ATLANTA)
        await weather_api.get_one_call(Location(lat=40.0, lon=-74.0))

    asyncio.run(run())
    assert len(weather_api.cache) == 3
    assert upstream.count(ONECALL_PATH) == 2


def test_search_location(
    weather_api: WeatherAPI, upstream: FakeUpstream, geocode_json: list[dict[str, Any]]
) -> None:
    upstream.add(GEO_DIRECT_PATH, geocode_json)

    results = asyncio.run(weather_api.search_location("Atlanta", limit=2))

    assert [r.state for r in results] == ["Georgia", "Texas"]
    assert results[0].label == "Atlanta, Georgia US"
    assert results[0].lat == pytest.approx(33.7489924)
    assert upstream.requests[0].url.params["q"] == "Atlanta"
    assert upstream.requests[0].url.params["limit"] == "2"


def test_search_cache_key_includes_limit(
    weather_api: WeatherAPI, upstream: FakeUpstream, geocode_json: list[dict[str, Any]]
) -> None:
    upstream.add(GEO_DIRECT_PATH, geocode_json)

    async def run() -> None:
        await weather_api.search_location("Atlanta", limit=2)
        await weather_api.search_location("Atlanta", limit=2)
        await weather_api.search_location("Atlanta", limit=5)

    asyncio.run(run())
    assert upstream.count(GEO_DIRECT_PATH) == 2


def test_search_without_matches(weather_api: WeatherAPI, upstream: FakeUpstream) -> None:
    upstream.add(GEO_DIRECT_PATH, [])
    assert asyncio.run(weather_api.search_location("Nowhereville")) == []


def test_reverse_geocode(
    weather_api: WeatherAPI, upstream: FakeUpstream, geocode_json: list[dict[str, Any]]
) -> None:
    upstream.add(GEO_REVERSE_PATH, geocode_json[:1])

    result = asyncio.run(weather_api.reverse_geocode(ATLANTA))

    assert result.name == "Atlanta"
    assert result.country == "US"


def test_reverse_geocode_without_match_returns_input(
    weather_api: WeatherAPI, upstream: FakeUpstream
) -> None:
    upstream.add(GEO_REVERSE_PATH, [])
    assert asyncio.run(weather_api.reverse_geocode(ATLANTA)) == ATLANTA


def test_not_found(weather_api: WeatherAPI, upstream: FakeUpstream) -> None:
    upstream.add(GEO_DIRECT_PATH, {"cod": "404", "message": "city not found"}, status=404)

    with pytest.raises(NotFoundError, match="city not found"):
        asyncio.run(weather_api.search_location("???"))


def test_metric_units_and_custom_exclude(upstream: FakeUpstream, onecall_json: dict[str, Any]) -> None:
    upstream.add(ONECALL_PATH, onecall_json)
    api = WeatherAPI(
        "fake-api-key-123",
        units="metric",
        exclude=("minutely", "hourly"),
        http_client=upstream.client(),
    )

    asyncio.run(api.get_one_call(ATLANTA))

    params = upstream.requests[0].url.params
    assert params["units"] == "metric"
    assert params["exclude"] == "minutely,hourly"
    assert "onecall_33.749_-84.388_metric_minutely,hourly" in api.cache
