"""Weather unit conversion utilities."""

from __future__ import annotations

import math
from typing import ClassVar, Final

# Millibar (hPa) to inches of mercury.
INHG_PER_HPA: Final = 0.02953
METERS_PER_MILE: Final = 1609.34


class UnitConverter:
    """Weather unit conversion utilities.

    Converts provider units into the display units of the canonical
    schema:
    - Pressure (hPa → inHg, 2 dp)
    - Visibility (m → mi, 1 dp)
    - Temperature and wind speed (rounded to whole numbers)

    Also includes conversions to user-friendly formats like
    cardinal directions and UV index descriptions.
    """

    # Wind direction constants
    DIRECTIONS: ClassVar[list[str]] = [
        "N",
        "NNE",
        "NE",
        "ENE",
        "E",
        "ESE",
        "SE",
        "SSE",
        "S",
        "SSW",
        "SW",
        "WSW",
        "W",
        "WNW",
        "NW",
        "NNW",
    ]
    CALM: ClassVar[str] = "CALM"

    # Upper bounds (exclusive) of each UV band
    UV_BANDS: ClassVar[list[tuple[float, str]]] = [
        (3, "Low"),
        (6, "Moderate"),
        (8, "High"),
        (11, "Very High"),
    ]

    @staticmethod
    def round_int(value: float | None, default: int = 0) -> int:
        """Round half up to an integer; ``default`` when the value is missing."""
        if value is None:
            return default
        return math.floor(value + 0.5)

    @staticmethod
    def hpa_to_inhg(hpa: float) -> float:
        """Convert pressure hPa → inches Hg (2 dp)."""
        return round(hpa * INHG_PER_HPA, 2)

    @staticmethod
    def meters_to_miles(meters: float) -> float:
        """Convert a distance in meters to miles (1 dp)."""
        return round(meters / METERS_PER_MILE, 1)

    @classmethod
    def deg_to_cardinal(cls, deg: float | None) -> str:
        """Convert wind bearing to 16-point compass direction, CALM when unknown."""
        if deg is None:
            return cls.CALM
        return cls.DIRECTIONS[int((deg % 360) / 22.5 + 0.5) % 16]

    @classmethod
    def uv_description(cls, uvi: float | None) -> str:
        """Describe a UV index; a missing reading counts as zero."""
        value = uvi or 0.0
        for limit, label in cls.UV_BANDS:
            if value < limit:
                return label
        return "Extreme"
