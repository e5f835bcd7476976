from __future__ import annotations

from pydantic import Field

from weatherbridge.models.base import CanonicalModel


class Location(CanonicalModel):
    """A geographic point, optionally labelled by geocoding.

    Coordinates are used verbatim in cache keys, so two locations that
    differ only in float formatting are cached separately.
    """

    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lon: float = Field(..., ge=-180, le=180, description="Longitude")
    name: str | None = Field(None, description="Display name of location")
    state: str | None = None
    country: str | None = None

    @property
    def coords(self) -> tuple[float, float]:
        """(lat, lon) pair."""
        return (self.lat, self.lon)

    @property
    def label(self) -> str:
        """Human-readable label such as ``Atlanta, GA US``, or the coordinates."""
        if not self.name:
            return f"{self.lat},{self.lon}"
        parts = [self.name]
        region = " ".join(p for p in (self.state, self.country) if p)
        if region:
            parts.append(region)
        return ", ".join(parts)
