"""Time-boxed key/value storage used by the provider clients."""

from weatherbridge.cache.store import CacheEntry, CacheStore

__all__ = ["CacheEntry", "CacheStore"]
