import json
from datetime import timedelta
from pathlib import Path
from typing import Any

import httpx
import pytest

from weatherbridge.cache import CacheStore
from weatherbridge.imagery import RainViewerAPI
from weatherbridge.weather.api import WeatherAPI

DATA_DIR = Path(__file__).parent / "data"

ONECALL_PATH = "/data/3.0/onecall"
AQI_PATH = "/data/2.5/air_pollution"
GEO_DIRECT_PATH = "/geo/1.0/direct"
GEO_REVERSE_PATH = "/geo/1.0/reverse"
MAPS_PATH = "/public/weather-maps.json"


def load_json(name: str) -> Any:
    return json.loads((DATA_DIR / name).read_text())


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstream:
    """Canned responses keyed by URL path; records every request.

    Each route holds a queue of responses. Responses are consumed in order
    and the last one repeats. A route may also require query parameters,
    and the most recently added matching route wins.
    """

    def __init__(self) -> None:
        self.routes: list[tuple[str, dict[str, str], list[dict[str, Any]]]] = []
        self.requests: list[httpx.Request] = []

    def add(
        self,
        path: str,
        json: Any = None,
        *,
        status: int = 200,
        text: str | None = None,
        error: bool = False,
        when: dict[str, str] | None = None,
    ) -> "FakeUpstream":
        response = {"json": json, "status": status, "text": text, "error": error}
        when = when or {}
        for route, params, queue in self.routes:
            if route == path and params == when:
                queue.append(response)
                return self
        self.routes.append((path, when, [response]))
        return self

    def _queue_for(self, request: httpx.Request) -> list[dict[str, Any]] | None:
        for route, params, queue in reversed(self.routes):
            if not request.url.path.endswith(route):
                continue
            if all(request.url.params.get(k) == v for k, v in params.items()):
                return queue
        return None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._queue_for(request)
        if queue is None:
            return httpx.Response(404, json={"message": f"no route for {request.url.path}"})
        canned = queue.pop(0) if len(queue) > 1 else queue[0]
        if canned["error"]:
            raise httpx.ConnectError("connection refused", request=request)
        if canned["text"] is not None:
            return httpx.Response(canned["status"], text=canned["text"])
        return httpx.Response(canned["status"], json=canned["json"])

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def count(self, path: str) -> int:
        return sum(1 for r in self.requests if r.url.path.endswith(path))


@pytest.fixture
def onecall_json() -> dict[str, Any]:
    return load_json("onecall_sample.json")


@pytest.fixture
def air_json() -> dict[str, Any]:
    return load_json("air_pollution_sample.json")


@pytest.fixture
def maps_json() -> dict[str, Any]:
    return load_json("weather_maps_sample.json")


@pytest.fixture
def geocode_json() -> list[dict[str, Any]]:
    return load_json("geocode_sample.json")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def weather_api(upstream: FakeUpstream, clock: FakeClock) -> WeatherAPI:
    return WeatherAPI(
        "fake-api-key-123",
        cache=CacheStore(timedelta(minutes=10), clock=clock),
        http_client=upstream.client(),
    )


@pytest.fixture
def rainviewer_api(upstream: FakeUpstream, clock: FakeClock) -> RainViewerAPI:
    return RainViewerAPI(
        cache=CacheStore(timedelta(minutes=5), clock=clock),
        http_client=upstream.client(),
    )
