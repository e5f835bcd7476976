"""Cache-aware HTTP client shared by every upstream provider."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import timedelta
from typing import Any, ClassVar, Final, TypeVar

import httpx
from pydantic import ValidationError

from weatherbridge.cache import CacheStore
from weatherbridge.weather.errors import (
    NetworkError,
    ParseError,
    StaleServed,
    WeatherAPIError,
)

logger: Final = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT: Final = 10.0

StaleHandler = Callable[[StaleServed], None]


class ProviderClient:
    """Base client: relay-routed GET requests behind a private cache.

    Subclasses describe endpoints and cache keys; this class owns the
    freshness check, the request, response validation and the
    stale-on-error fallback. Each instance owns its ``CacheStore``.

    No retries are performed. When a refresh fails and an older entry
    exists, the older entry is returned and a ``StaleServed`` record is
    passed to ``on_stale``.
    """

    provider_name: ClassVar[str] = "provider"
    default_ttl: ClassVar[timedelta] = timedelta(minutes=10)

    def __init__(
        self,
        relay_url: str = "",
        *,
        cache: CacheStore | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        on_stale: StaleHandler | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            relay_url: Prefix prepended to every upstream URL ("" for direct)
            cache: Store to use; a fresh one with ``default_ttl`` otherwise
            http_client: Shared async client; one is created and owned otherwise
            timeout: Per-request timeout in seconds
            on_stale: Called whenever a stale entry is served
        """
        self.relay_url = relay_url
        self.cache = cache if cache is not None else CacheStore(self.default_ttl)
        self.timeout = httpx.Timeout(timeout)
        self.on_stale = on_stale
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.timeout)

    # ── cache control ───────────────────────────────────────────────────────
    def set_cache_ttl(self, ttl: timedelta) -> None:
        """Change the freshness window for subsequent lookups."""
        self.cache.ttl = ttl

    def clear_cache(self) -> None:
        """Forget every cached response."""
        self.cache.clear()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    # ── fetching ────────────────────────────────────────────────────────────
    def build_url(self, url: str, params: Mapping[str, Any] | None = None) -> str:
        """Full request URL including query string and relay prefix."""
        target = str(httpx.URL(url, params=dict(params)) if params else httpx.URL(url))
        return f"{self.relay_url}{target}"

    async def fetch_with_cache(
        self,
        url: str,
        key: str,
        *,
        parse: Callable[[Any], T],
        params: Mapping[str, Any] | None = None,
    ) -> T:
        """Return the cached value for ``key`` or fetch, parse and cache it.

        Args:
            url: Upstream URL without relay prefix
            key: Cache key identifying this logical request
            parse: Converts decoded JSON into the cached value
            params: Query parameters

        Returns:
            The fresh, newly fetched, or (after a failure) stale value

        Raises:
            TransportError: Request failed and nothing is cached for ``key``
            ParseError: Response was malformed and nothing is cached for ``key``
        """
        if self.cache.is_fresh(key):
            logger.debug("Using cached %s data for %s", self.provider_name, key)
            return self.cache.get(key)

        try:
            value = await self._fetch(url, params, parse)
        except WeatherAPIError as exc:
            entry = self.cache.entry(key)
            if entry is None:
                raise
            age = self.cache.age(key) or 0.0
            logger.warning(
                "Serving stale %s data for %s (%.0fs old) after fetch error: %s",
                self.provider_name,
                key,
                age,
                exc,
            )
            if self.on_stale is not None:
                self.on_stale(StaleServed(key=key, age_seconds=age, error=exc))
            return entry.value

        self.cache.put(key, value)
        return value

    async def _fetch(
        self,
        url: str,
        params: Mapping[str, Any] | None,
        parse: Callable[[Any], T],
    ) -> T:
        try:
            resp = await self._http.get(self.build_url(url, params), timeout=self.timeout)
        except httpx.HTTPError as exc:
            logger.warning("%s network error: %s", self.provider_name, exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if not resp.is_success:
            try:
                body = resp.json()
            except ValueError:
                body = None
            if not isinstance(body, dict):
                body = {}
            error = WeatherAPIError.from_response(body, resp.status_code)
            logger.error(
                "%s API error: %s - %s", self.provider_name, resp.status_code, error.message
            )
            raise error

        try:
            return parse(resp.json())
        except ValueError as exc:
            # pydantic's ValidationError subclasses ValueError
            kind = "invalid" if isinstance(exc, ValidationError) else "malformed"
            raise ParseError(f"{self.provider_name} returned {kind} data: {exc}", exc) from exc
