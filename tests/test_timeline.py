import asyncio
from typing import Any

import pytest

from weatherbridge.imagery import RainViewerAPI
from weatherbridge.imagery.models import MapFrame, RadarFrames, WeatherMaps
from weatherbridge.imagery.timeline import (
    ImageryTimelineManager,
    build_satellite_timeline,
    build_timeline,
)
from weatherbridge.models import ImageryFrame, ImageryTimeline, TileStyle
from conftest import MAPS_PATH, FakeClock, FakeUpstream

BASE = "https://tilecache.rainviewer.com/v2"


def _maps(past: list[int], nowcast: list[int]) -> WeatherMaps:
    return WeatherMaps(
        radar=RadarFrames(
            past=[MapFrame(time=t) for t in past],
            nowcast=[MapFrame(time=t) for t in nowcast],
        )
    )


def test_timeline_orders_past_then_forecast() -> None:
    timeline = build_timeline(_maps([200, 100], [400, 300]))

    assert timeline.timestamps == [100, 200, 300, 400]
    assert timeline.past == [100, 200]
    assert timeline.forecast == [300, 400]
    assert timeline.current == 200
    assert not timeline.is_empty


def test_timeline_without_past_frames_has_no_current() -> None:
    timeline = build_timeline(_maps([], [300, 400]))

    assert timeline.current is None
    assert timeline.is_empty
    assert timeline.forecast == [300, 400]


def test_empty_manifest() -> None:
    timeline = build_timeline(WeatherMaps())
    assert timeline.frames == ()
    assert timeline.current is None


def test_timeline_rejects_past_after_forecast() -> None:
    with pytest.raises(ValueError):
        ImageryTimeline(
            frames=(
                ImageryFrame(timestamp=300, is_past=False),
                ImageryFrame(timestamp=100, is_past=True),
            ),
            current=100,
        )


def test_satellite_timeline(maps_json: dict[str, Any]) -> None:
    timeline = build_satellite_timeline(WeatherMaps.model_validate(maps_json))
    assert len(timeline.frames) == 2
    assert all(frame.is_past for frame in timeline.frames)
    assert timeline.current == timeline.timestamps[-1]


def test_manager_fetches_and_caches_manifest(
    rainviewer_api: RainViewerAPI,
    upstream: FakeUpstream,
    clock: FakeClock,
    maps_json: dict[str, Any],
) -> None:
    upstream.add(MAPS_PATH, maps_json)
    manager = ImageryTimelineManager(rainviewer_api)

    async def run() -> ImageryTimeline:
        timeline = await manager.get_timeline()
        clock.advance(60)
        await manager.get_satellite_timeline()
        return timeline

    timeline = asyncio.run(run())
    assert timeline.timestamps == [1714727400, 1714728000, 1714728600, 1714729200, 1714729800]
    assert timeline.current == 1714728600
    assert upstream.count(MAPS_PATH) == 1


def test_manager_serves_stale_manifest(
    rainviewer_api: RainViewerAPI,
    upstream: FakeUpstream,
    clock: FakeClock,
    maps_json: dict[str, Any],
) -> None:
    upstream.add(MAPS_PATH, maps_json).add(MAPS_PATH, error=True)
    manager = ImageryTimelineManager(rainviewer_api)

    async def run() -> ImageryTimeline:
        await manager.get_timeline()
        clock.advance(301)
        return await manager.get_timeline()

    assert asyncio.run(run()).current == 1714728600
    assert upstream.count(MAPS_PATH) == 2


def test_is_available(
    rainviewer_api: RainViewerAPI, upstream: FakeUpstream, maps_json: dict[str, Any]
) -> None:
    upstream.add(MAPS_PATH, maps_json)
    assert asyncio.run(ImageryTimelineManager(rainviewer_api).is_available()) is True


def test_is_available_false_on_error(rainviewer_api: RainViewerAPI, upstream: FakeUpstream) -> None:
    upstream.add(MAPS_PATH, error=True)
    assert asyncio.run(ImageryTimelineManager(rainviewer_api).is_available()) is False


def test_animation_frames(
    rainviewer_api: RainViewerAPI, upstream: FakeUpstream, maps_json: dict[str, Any]
) -> None:
    upstream.add(MAPS_PATH, maps_json)
    layers = asyncio.run(
        ImageryTimelineManager(rainviewer_api).animation_frames(TileStyle(size=512, color=4))
    )

    assert len(layers) == 5
    assert layers[0].url == f"{BASE}/radar/1714727400/{{z}}/{{x}}/{{y}}/512/4_1.png"
    assert layers[0].tile_size == 512
    assert layers[0].z_index == 200
    assert layers[0].opacity == 0.6
    assert layers[0].max_zoom == 12


def test_tile_url_defaults(rainviewer_api: RainViewerAPI) -> None:
    manager = ImageryTimelineManager(rainviewer_api)
    assert manager.tile_url(1714728600, 6, 17, 25) == f"{BASE}/radar/1714728600/6/17/25/256/1_1.png"


def test_tile_url_with_style(rainviewer_api: RainViewerAPI) -> None:
    manager = ImageryTimelineManager(rainviewer_api, tile_base_url="https://tiles.example/v2/")
    url = manager.tile_url(100, 3, 1, 2, TileStyle(size=512, color=8, smooth=0))
    assert url == "https://tiles.example/v2/radar/100/3/1/2/512/8_0.png"


@pytest.mark.parametrize(
    "kwargs, segment, size",
    [
        ({"size": 300}, "1_1", 256),
        ({"color": 9}, "1_1", 256),
        ({"color": -1, "smooth": 5}, "1_1", 256),
        ({"smooth": True}, "1_1", 256),
        ({"smooth": False, "color": 0}, "0_0", 256),
        ({"size": "512"}, "1_1", 256),
    ],
)
def test_invalid_style_values_fall_back(kwargs: dict[str, Any], segment: str, size: int) -> None:
    style = TileStyle(**kwargs)
    assert style.segment == segment
    assert style.size == size


def test_satellite_and_coverage_urls(rainviewer_api: RainViewerAPI) -> None:
    manager = ImageryTimelineManager(rainviewer_api)
    assert manager.satellite_tile_url(100, 2, 1, 1) == f"{BASE}/satellite/100/2/1/1/256/0_0.png"
    assert manager.coverage_tile_url(100, 2, 1, 1, size=512) == f"{BASE}/coverage/100/2/1/1/512/0_0.png"


def test_satellite_layer_limits(rainviewer_api: RainViewerAPI) -> None:
    layer = ImageryTimelineManager(rainviewer_api).tile_layer(100, layer="satellite", opacity=0.3)
    assert layer.max_zoom == 5
    assert layer.opacity == 0.3
    assert layer.z_index == 100
