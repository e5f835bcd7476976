"""Typed models for the RainViewer weather-maps manifest."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MapFrame(BaseModel):
    """A single available frame: its timestamp and tile path prefix."""

    time: int
    path: str = ""


class RadarFrames(BaseModel):
    past: list[MapFrame] = Field(default_factory=list)
    nowcast: list[MapFrame] = Field(default_factory=list)


class SatelliteFrames(BaseModel):
    infrared: list[MapFrame] = Field(default_factory=list)


class WeatherMaps(BaseModel):
    """Manifest of radar and satellite frames currently served."""

    version: str | None = None
    generated: int | None = None
    host: str | None = None
    radar: RadarFrames = Field(default_factory=RadarFrames)
    satellite: SatelliteFrames = Field(default_factory=SatelliteFrames)

    model_config = ConfigDict(extra="allow")
