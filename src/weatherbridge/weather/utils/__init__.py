"""Static lookup tables and unit conversions."""

from weatherbridge.weather.utils.alerts import AlertClassifier
from weatherbridge.weather.utils.aqi import AirQualityScale
from weatherbridge.weather.utils.icons import NOT_AVAILABLE_ICON, ConditionIcons
from weatherbridge.weather.utils.units import UnitConverter

__all__ = [
    "AirQualityScale",
    "AlertClassifier",
    "ConditionIcons",
    "NOT_AVAILABLE_ICON",
    "UnitConverter",
]
