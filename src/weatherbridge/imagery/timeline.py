"""Animation timelines and tile addressing for radar/satellite imagery."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final, Literal

from weatherbridge.imagery.api import RainViewerAPI
from weatherbridge.imagery.models import MapFrame, WeatherMaps
from weatherbridge.models import ImageryFrame, ImageryTimeline, TileLayer, TileStyle
from weatherbridge.weather.errors import WeatherAPIError

logger: Final = logging.getLogger(__name__)

TILE_BASE_URL: Final = "https://tilecache.rainviewer.com/v2"

Layer = Literal["radar", "satellite", "coverage"]

# Layers with a single fixed rendering style
_FIXED_STYLE: Final = "0_0"

_MAX_ZOOM: Final[dict[str, int]] = {"radar": 12, "satellite": 5, "coverage": 12}
_DEFAULT_OPACITY: Final[dict[str, float]] = {"radar": 0.6, "satellite": 0.5, "coverage": 0.6}
_DEFAULT_Z_INDEX: Final[dict[str, int]] = {"radar": 200, "satellite": 100, "coverage": 200}


def _frames(frames: Iterable[MapFrame], is_past: bool) -> list[ImageryFrame]:
    return [
        ImageryFrame(timestamp=t, is_past=is_past)
        for t in sorted(frame.time for frame in frames)
    ]


def build_timeline(maps: WeatherMaps) -> ImageryTimeline:
    """Radar timeline: past frames, then nowcast frames, each ascending.

    ``current`` is the latest past frame, or None when there are none.
    """
    past = _frames(maps.radar.past, is_past=True)
    forecast = _frames(maps.radar.nowcast, is_past=False)
    return ImageryTimeline(
        frames=tuple(past + forecast),
        current=past[-1].timestamp if past else None,
    )


def build_satellite_timeline(maps: WeatherMaps) -> ImageryTimeline:
    """Infrared satellite timeline; all satellite frames are observations."""
    frames = _frames(maps.satellite.infrared, is_past=True)
    return ImageryTimeline(
        frames=tuple(frames),
        current=frames[-1].timestamp if frames else None,
    )


class ImageryTimelineManager:
    """Turns the RainViewer manifest into animation timelines and tile URLs.

    Timeline methods go through ``RainViewerAPI`` and inherit its
    cache and stale fallback. Tile URL methods are pure string building.
    """

    def __init__(self, api: RainViewerAPI, tile_base_url: str = TILE_BASE_URL) -> None:
        self.api = api
        self.tile_base_url = tile_base_url.rstrip("/")

    # ── timelines ───────────────────────────────────────────────────────────
    async def get_timeline(self) -> ImageryTimeline:
        """Radar frames (past + nowcast) ready for animation."""
        return build_timeline(await self.api.get_available_maps())

    async def get_satellite_timeline(self) -> ImageryTimeline:
        """Infrared satellite frames ready for animation."""
        return build_satellite_timeline(await self.api.get_available_maps())

    async def is_available(self) -> bool:
        """Whether any radar frames are being served right now."""
        try:
            timeline = await self.get_timeline()
        except WeatherAPIError as exc:
            logger.error("Error checking radar availability: %s", exc)
            return False
        return bool(timeline.frames)

    async def animation_frames(self, style: TileStyle | None = None) -> list[TileLayer]:
        """One radar tile layer per timeline frame, in animation order."""
        timeline = await self.get_timeline()
        return [self.tile_layer(ts, style) for ts in timeline.timestamps]

    # ── tile addressing ─────────────────────────────────────────────────────
    def tile_url(
        self,
        timestamp: int,
        zoom: int | str,
        x: int | str,
        y: int | str,
        style: TileStyle | None = None,
        layer: Layer = "radar",
    ) -> str:
        """URL of one imagery tile.

        Args:
            timestamp: Frame timestamp from a timeline
            zoom: Zoom level (or ``{z}`` for a template)
            x: Tile column (or ``{x}``)
            y: Tile row (or ``{y}``)
            style: Radar rendering options; defaults when None
            layer: ``radar``, ``satellite`` or ``coverage``

        Returns:
            ``{base}/{layer}/{timestamp}/{zoom}/{x}/{y}/{size}/{style}.png``
        """
        style = style or TileStyle()
        segment = style.segment if layer == "radar" else _FIXED_STYLE
        return (
            f"{self.tile_base_url}/{layer}/{timestamp}/{zoom}/{x}/{y}/"
            f"{style.size}/{segment}.png"
        )

    def satellite_tile_url(
        self, timestamp: int, zoom: int, x: int, y: int, size: int = TileStyle.DEFAULT_SIZE
    ) -> str:
        """URL of an infrared satellite tile."""
        return self.tile_url(timestamp, zoom, x, y, TileStyle(size=size), layer="satellite")

    def coverage_tile_url(
        self, timestamp: int, zoom: int, x: int, y: int, size: int = TileStyle.DEFAULT_SIZE
    ) -> str:
        """URL of a radar coverage tile."""
        return self.tile_url(timestamp, zoom, x, y, TileStyle(size=size), layer="coverage")

    def tile_layer(
        self,
        timestamp: int,
        style: TileStyle | None = None,
        *,
        layer: Layer = "radar",
        opacity: float | None = None,
        z_index: int | None = None,
    ) -> TileLayer:
        """Map layer descriptor whose URL keeps ``{z}/{x}/{y}`` placeholders."""
        style = style or TileStyle()
        return TileLayer(
            url=self.tile_url(timestamp, "{z}", "{x}", "{y}", style, layer=layer),
            tile_size=style.size,
            opacity=_DEFAULT_OPACITY[layer] if opacity is None else opacity,
            z_index=_DEFAULT_Z_INDEX[layer] if z_index is None else z_index,
            max_zoom=_MAX_ZOOM[layer],
        )
