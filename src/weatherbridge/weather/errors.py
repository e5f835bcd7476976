"""Exception classes for upstream provider interactions.

This module defines a hierarchy of exception classes for the failure modes
of the weather, air-quality, geocoding and imagery providers, plus the
``StaleServed`` record used to signal a degraded success.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Final, Optional

# Human‑readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check lat/lon or parameters",
    401: "Invalid or missing API key",
    403: "Account blocked / key revoked",
    404: "Coordinates returned no data",
    429: "Rate limit exceeded",
    500: "Provider internal error",
    502: "Bad gateway at provider or relay",
    503: "Service unavailable (maintenance)",
    504: "Gateway timeout",
}


class WeatherAPIError(Exception):
    """Error during a provider request or response parsing.

    Base class for everything the provider clients raise. Carries the
    HTTP status (or 0 when no response was received) and the raw
    response body when one was available.
    """

    def __init__(
        self, code: int, message: str, response: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code or 0 for non-HTTP failures
            message: Human-readable error message
            response: Optional raw API response for debugging
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.response: Optional[Dict[str, Any]] = response

    @property
    def is_client_error(self) -> bool:
        """Check if this is a client-side error (4xx).

        Returns:
            True for 400-499 status codes
        """
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a server-side error (5xx).

        Returns:
            True for 500-599 status codes
        """
        return self.code >= 500

    @classmethod
    def from_response(
        cls, response: Dict[str, Any], status_code: int = 0
    ) -> WeatherAPIError:
        """Create an error from an API response.

        Args:
            response: Decoded API response body (may be empty)
            status_code: HTTP status code

        Returns:
            Appropriate TransportError subclass
        """
        default = HTTP_ERROR_MAP.get(status_code)
        if 400 <= status_code < 500:
            if status_code == 401 or status_code == 403:
                return AuthenticationError(
                    status_code,
                    response.get("message", default or "Authentication failed"),
                    response,
                )
            elif status_code == 404:
                return NotFoundError(
                    status_code,
                    response.get("message", default or "Resource not found"),
                    response,
                )
            elif status_code == 429:
                return RateLimitError(
                    status_code,
                    response.get("message", default or "Rate limit exceeded"),
                    response,
                )
            return ClientError(
                status_code, response.get("message", default or "Client error"), response
            )
        elif status_code >= 500:
            return ServerError(
                status_code, response.get("message", default or "Server error"), response
            )

        return TransportError(
            status_code, response.get("message", "Unexpected response status"), response
        )


class TransportError(WeatherAPIError):
    """Raised when a request fails at the network or HTTP status level."""


class NetworkError(TransportError):
    """Raised when a network issue prevents API communication."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with network error details.

        Args:
            message: Description of the network error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error


class AuthenticationError(TransportError):
    """Raised when API authentication fails (invalid API key)."""

    pass


class NotFoundError(TransportError):
    """Raised when a requested resource doesn't exist."""

    pass


class RateLimitError(TransportError):
    """Raised when rate limits are exceeded."""

    pass


class ClientError(TransportError):
    """Raised for general 4xx client errors."""

    pass


class ServerError(TransportError):
    """Raised for 5xx server errors."""

    pass


class ParseError(WeatherAPIError):
    """Raised when API response parsing fails."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with parsing error details.

        Args:
            message: Description of the parsing error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error


@dataclass(frozen=True)
class StaleServed:
    """A cached value was returned after its refresh failed.

    Not an error: the caller got data, just older than the TTL.
    """

    key: str
    age_seconds: float
    error: WeatherAPIError
