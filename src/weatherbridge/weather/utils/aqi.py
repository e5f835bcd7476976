"""Air quality index categories and pollutant helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar


class AirQualityScale:
    """OpenWeather's 1-5 air quality scale.

    1: Good, 2: Fair, 3: Moderate, 4: Poor, 5: Very Poor. Indices outside
    the scale map to ``UNKNOWN`` rather than raising.
    """

    CATEGORIES: ClassVar[list[str]] = ["Good", "Fair", "Moderate", "Poor", "Very Poor"]
    UNKNOWN: ClassVar[str] = "Unknown"

    # Color codes for AQI categories
    COLORS: ClassVar[dict[int, str]] = {
        1: "#4CAF50",  # Green
        2: "#8BC34A",  # Light Green
        3: "#FFC107",  # Amber
        4: "#FF9800",  # Orange
        5: "#F44336",  # Red
    }
    UNKNOWN_COLOR: ClassVar[str] = "#9E9E9E"

    # Candidates for the primary pollutant, in tie-break order
    PRIMARY_CANDIDATES: ClassVar[list[tuple[str, str]]] = [
        ("pm2_5", "PM2.5"),
        ("pm10", "PM10"),
        ("o3", "Ozone"),
        ("no2", "NO2"),
    ]

    @classmethod
    def category(cls, index: int | None) -> str:
        """Label for an AQI index, ``Unknown`` when outside 1-5."""
        if index is None or not 1 <= index <= len(cls.CATEGORIES):
            return cls.UNKNOWN
        return cls.CATEGORIES[index - 1]

    @classmethod
    def color(cls, index: int | None) -> str:
        """Hex color for an AQI index, grey when unknown."""
        if index is None:
            return cls.UNKNOWN_COLOR
        return cls.COLORS.get(index, cls.UNKNOWN_COLOR)

    @classmethod
    def primary_pollutant(cls, components: Mapping[str, float | None]) -> str:
        """Name of the candidate pollutant with the highest concentration.

        Missing readings count as zero; ties go to the earlier candidate,
        so an all-zero reading reports PM2.5.
        """
        best_name = cls.PRIMARY_CANDIDATES[0][1]
        best_value = float("-inf")
        for key, name in cls.PRIMARY_CANDIDATES:
            value = components.get(key) or 0.0
            if value > best_value:
                best_name, best_value = name, value
        return best_name
