"""Canonical radar/satellite imagery types."""

from __future__ import annotations

from typing import Any, ClassVar, Final

from pydantic import Field, field_validator, model_validator

from weatherbridge.models.base import CanonicalModel

COLOR_SCHEMES: Final[dict[int, str]] = {
    0: "Original",
    1: "Universal Blue",
    2: "TITAN",
    3: "The Weather Channel",
    4: "Meteored",
    5: "NEXRAD Level III",
    6: "RAINBOW @ SELEX-SI",
    7: "Dark Sky",
    8: "Black & White",
}


class ImageryFrame(CanonicalModel):
    """One animation frame; ``is_past`` is False for nowcast frames."""

    timestamp: int
    is_past: bool


class ImageryTimeline(CanonicalModel):
    """Ordered animation frames plus the latest observed frame.

    All past frames precede all forecast frames and each group is sorted
    ascending. ``current`` is None when there are no past frames, which
    means no imagery is available.
    """

    frames: tuple[ImageryFrame, ...] = ()
    current: int | None = None

    @model_validator(mode="after")
    def check_ordering(self) -> ImageryTimeline:
        seen_forecast = False
        previous: dict[bool, int] = {}
        for frame in self.frames:
            if frame.is_past and seen_forecast:
                raise ValueError("past frames must precede forecast frames")
            seen_forecast = seen_forecast or not frame.is_past
            last = previous.get(frame.is_past)
            if last is not None and frame.timestamp < last:
                raise ValueError("frames must be ascending within each group")
            previous[frame.is_past] = frame.timestamp
        return self

    @property
    def timestamps(self) -> list[int]:
        """Frame timestamps in animation order."""
        return [frame.timestamp for frame in self.frames]

    @property
    def past(self) -> list[int]:
        return [frame.timestamp for frame in self.frames if frame.is_past]

    @property
    def forecast(self) -> list[int]:
        return [frame.timestamp for frame in self.frames if not frame.is_past]

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to show."""
        return self.current is None


class TileStyle(CanonicalModel):
    """Rendering options for radar tiles.

    Invalid values are replaced by the default instead of failing
    validation.
    """

    SIZES: ClassVar[tuple[int, ...]] = (256, 512)
    DEFAULT_SIZE: ClassVar[int] = 256
    DEFAULT_COLOR: ClassVar[int] = 1
    DEFAULT_SMOOTH: ClassVar[int] = 1

    size: int = Field(DEFAULT_SIZE, description="Tile edge in pixels (256 or 512)")
    color: int = Field(DEFAULT_COLOR, description="Color scheme index (0-8)")
    smooth: int = Field(DEFAULT_SMOOTH, description="Smoothing flag (0 or 1)")

    @field_validator("size", mode="before")
    @classmethod
    def validate_size(cls, v: Any) -> int:
        return v if _is_int(v) and v in cls.SIZES else cls.DEFAULT_SIZE

    @field_validator("color", mode="before")
    @classmethod
    def validate_color(cls, v: Any) -> int:
        return v if _is_int(v) and v in COLOR_SCHEMES else cls.DEFAULT_COLOR

    @field_validator("smooth", mode="before")
    @classmethod
    def validate_smooth(cls, v: Any) -> int:
        if isinstance(v, bool):
            return int(v)
        return v if _is_int(v) and v in (0, 1) else cls.DEFAULT_SMOOTH

    @property
    def segment(self) -> str:
        """URL path segment encoding color and smoothing, e.g. ``1_1``."""
        return f"{self.color}_{self.smooth}"

    @property
    def color_name(self) -> str:
        return COLOR_SCHEMES[self.color]


class TileLayer(CanonicalModel):
    """Slippy-map layer descriptor with a ``{z}/{x}/{y}`` URL template."""

    url: str
    tile_size: int
    opacity: float
    z_index: int
    max_zoom: int


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
