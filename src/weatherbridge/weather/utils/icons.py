"""Condition code to icon code mapping."""

from __future__ import annotations

from typing import ClassVar, Final

# Icon code shown for conditions that have no mapping.
NOT_AVAILABLE_ICON: Final = 44


class ConditionIcons:
    """OpenWeather condition id to internal icon code mapping.

    OpenWeather condition ID ranges:
    2xx thunderstorm, 3xx drizzle, 5xx rain, 6xx snow, 7xx atmosphere,
    800 clear, 80x clouds.

    The table is finite and lossy. Clear and partly cloudy conditions have
    separate day and night icons, selected by the ``d``/``n`` suffix of
    the upstream icon string. Any id not listed resolves to
    ``NOT_AVAILABLE_ICON``.
    """

    _icon_map: ClassVar[dict[int, int]] = {
        # Thunderstorms (200-232)
        200: 38, 201: 38, 202: 38,
        210: 37, 211: 37, 212: 37,
        221: 37, 230: 38, 231: 38, 232: 38,
        # Drizzle (300-321)
        300: 9, 301: 9, 302: 9, 310: 9, 311: 9,
        312: 9, 313: 9, 314: 9, 321: 9,
        # Rain (500-531)
        500: 11, 501: 12, 502: 12, 503: 12, 504: 12,
        511: 10,  # freezing rain
        520: 11, 521: 11, 522: 12, 531: 12,
        # Snow (600-622)
        600: 14, 601: 16, 602: 41, 611: 10, 612: 10, 613: 10,
        615: 5, 616: 5, 620: 14, 621: 14, 622: 16,
        # Atmosphere (701-781)
        701: 20,  # mist
        711: 22,  # smoke
        721: 19,  # haze
        731: 19,  # dust
        741: 20,  # fog
        751: 19,  # sand
        761: 19,  # dust
        762: 19,  # ash
        771: 23,  # squall
        781: 0,  # tornado
        # Overcast
        804: 26,
    }

    # (day, night)
    _day_night_map: ClassVar[dict[int, tuple[int, int]]] = {
        800: (32, 31),  # clear
        801: (30, 33),  # few clouds
        802: (28, 27),  # scattered clouds
        803: (28, 27),  # broken clouds
    }

    @staticmethod
    def is_night(icon: str | None) -> bool:
        """Whether an OpenWeather icon string (e.g. ``01n``) is a night variant."""
        return bool(icon) and str(icon).strip().endswith("n")

    @classmethod
    def map_condition(cls, condition_id: int | str | None, icon: str | None = None) -> int:
        """Map an OpenWeather condition id to an icon code.

        Args:
            condition_id: Upstream condition id (e.g. 800)
            icon: Upstream icon string used only for the day/night choice

        Returns:
            Internal icon code, ``NOT_AVAILABLE_ICON`` when unmapped
        """
        try:
            code = int(str(condition_id).strip())
        except ValueError:
            return NOT_AVAILABLE_ICON

        if code in cls._day_night_map:
            day, night = cls._day_night_map[code]
            return night if cls.is_night(icon) else day
        return cls._icon_map.get(code, NOT_AVAILABLE_ICON)
