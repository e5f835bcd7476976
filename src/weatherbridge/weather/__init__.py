"""Weather package - OpenWeather client, models, normalizer and lookup tables.

Only leaf modules are re-exported here; import the client, normalizer and
aggregator from their own modules.
"""

from .errors import (
    AuthenticationError,
    ClientError,
    NetworkError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServerError,
    StaleServed,
    TransportError,
    WeatherAPIError,
)
from .models import (
    AirPollutionResponse,
    Current,
    Daily,
    GeocodeResult,
    Hourly,
    OneCallResponse,
    WeatherAlert,
)
from .utils import (
    AirQualityScale,
    AlertClassifier,
    ConditionIcons,
    UnitConverter,
)

# Define what gets imported with: from weatherbridge.weather import *
__all__ = [
    "AirPollutionResponse",
    "AirQualityScale",
    "AlertClassifier",
    "AuthenticationError",
    "ClientError",
    "ConditionIcons",
    "Current",
    "Daily",
    "GeocodeResult",
    "Hourly",
    "NetworkError",
    "NotFoundError",
    "OneCallResponse",
    "ParseError",
    "RateLimitError",
    "ServerError",
    "StaleServed",
    "TransportError",
    "UnitConverter",
    "WeatherAPIError",
    "WeatherAlert",
]
