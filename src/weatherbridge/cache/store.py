"""In-memory cache with TTL freshness and stale reads."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry:
    """A cached value and the clock reading taken when it was stored."""

    key: str
    value: Any
    fetched_at: float


class CacheStore:
    """Key to (value, timestamp) store with TTL-based freshness.

    Entries are never evicted. An entry older than the TTL is no longer
    fresh but is still returned by ``get`` so callers can fall back to it
    when a refresh fails. Memory is bounded only by the number of distinct
    keys the owning client asks for.

    Each provider client owns exactly one store; stores are not shared.
    """

    def __init__(self, ttl: timedelta = timedelta(minutes=10), clock: Clock = time.monotonic):
        """Create an empty store.

        Args:
            ttl: Freshness window for entries
            clock: Monotonic seconds source, injectable for tests
        """
        self._entries: dict[str, CacheEntry] = {}
        self._clock = clock
        self.ttl = ttl

    @property
    def ttl(self) -> timedelta:
        """Freshness window applied to every entry."""
        return self._ttl

    @ttl.setter
    def ttl(self, value: timedelta) -> None:
        if value.total_seconds() < 0:
            raise ValueError(f"Cache TTL cannot be negative, got {value}")
        self._ttl = value

    def get(self, key: str, default: Any = None) -> Any:
        """Return the cached value for ``key`` regardless of its age."""
        entry = self._entries.get(key)
        return entry.value if entry is not None else default

    def entry(self, key: str) -> CacheEntry | None:
        """Return the full entry for ``key``, or None when absent."""
        return self._entries.get(key)

    def put(self, key: str, value: Any) -> CacheEntry:
        """Store ``value`` under ``key``, replacing any previous entry."""
        entry = CacheEntry(key=key, value=value, fetched_at=self._clock())
        self._entries[key] = entry
        return entry

    def age(self, key: str) -> float | None:
        """Seconds since ``key`` was stored, or None when absent."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        return self._clock() - entry.fetched_at

    def is_fresh(self, key: str) -> bool:
        """True iff an entry exists and is younger than the TTL."""
        age = self.age(key)
        return age is not None and age < self._ttl.total_seconds()

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
