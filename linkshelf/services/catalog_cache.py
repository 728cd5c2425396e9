"""
In-process cache for public catalog pages

The catalog is identical for every visitor and read far more often
than it changes, so whole response pages are memoized for a short TTL.

Cache Keys:
- public_catalog:{hash} -> CatalogResponse (60s TTL by default)

Bounds:
- At most PUBLIC_CATALOG_CACHE_MAX_ENTRIES entries; the least recently
  used entry is evicted first
- Expired entries are swept on every read and write

Limitations:
- Per process. Invalidation on one replica does not reach the others,
  so replicas can serve up to one TTL of stale pages after a write.
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional
import hashlib
import json
import logging
import time

from linkshelf.config import settings
from linkshelf.schemas.catalog import CatalogQuery, CatalogResponse

logger = logging.getLogger(__name__)


def get_public_catalog_cache_key(query: CatalogQuery) -> str:
    """
    Build a deterministic cache key for a catalog query

    The query is normalized first (missing search text and cursor become
    empty strings) and serialized with a fixed field order, so semantically
    identical queries always share a key.

    Args:
        query: Catalog query

    Returns:
        Cache key string
    """
    normalized = {
        "q": (query.q or "").strip(),
        "limit": query.limit,
        "cursor": query.cursor or "",
        "link_limit": query.link_limit,
        "sort_by": query.sort_by,
        "sort_order": query.sort_order,
    }
    payload = json.dumps(normalized, sort_keys=True, separators=(",", ":"))
    return f"public_catalog:{hashlib.sha256(payload.encode('utf-8')).hexdigest()}"


@dataclass
class _CacheEntry:
    value: CatalogResponse
    expires_at: float


class PublicCatalogCache:
    """
    Bounded TTL cache of catalog pages with LRU-flavored eviction

    Entries live in an OrderedDict whose order is "least recently
    stored or hit first". A hit moves the entry to the end.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        max_entries: Optional[int] = None,
        enabled: Optional[bool] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            ttl_seconds: Entry lifetime (default: PUBLIC_CATALOG_CACHE_TTL)
            max_entries: Capacity (default: PUBLIC_CATALOG_CACHE_MAX_ENTRIES)
            enabled: Force on/off (default: not DISABLE_PUBLIC_CATALOG_CACHE)
            clock: Monotonic seconds source, injectable for tests
        """
        self.ttl_seconds = settings.PUBLIC_CATALOG_CACHE_TTL if ttl_seconds is None else ttl_seconds
        self.max_entries = max(
            1, settings.PUBLIC_CATALOG_CACHE_MAX_ENTRIES if max_entries is None else max_entries
        )
        self.enabled = (not settings.DISABLE_PUBLIC_CATALOG_CACHE) if enabled is None else enabled
        self._clock = clock
        self._entries: "OrderedDict[str, _CacheEntry]" = OrderedDict()
        self.hits = 0
        self.misses = 0

        if not self.enabled:
            logger.warning("Public catalog cache disabled")

    def is_enabled(self) -> bool:
        """Check if caching is on"""
        return self.enabled

    def get(self, query: CatalogQuery) -> Optional[CatalogResponse]:
        """
        Get a cached catalog page

        Args:
            query: Catalog query

        Returns:
            Cached response, or None on miss (or when disabled)
        """
        if not self.enabled:
            return None

        self._prune_expired(self._clock())
        key = get_public_catalog_cache_key(query)
        entry = self._entries.get(key)

        if entry is None:
            self.misses += 1
            logger.debug(f"Catalog cache MISS for key: {key[-8:]}")
            return None

        self._entries.move_to_end(key)
        self.hits += 1
        logger.debug(f"Catalog cache HIT for key: {key[-8:]}")
        return entry.value

    def set(self, query: CatalogQuery, response: CatalogResponse) -> None:
        """
        Cache a catalog page

        Evicts the single oldest entry first when at capacity.

        Args:
            query: Catalog query the page answers
            response: Page to cache
        """
        if not self.enabled:
            return

        now = self._clock()
        self._prune_expired(now)
        key = get_public_catalog_cache_key(query)

        if key not in self._entries and len(self._entries) >= self.max_entries:
            oldest_key, _ = self._entries.popitem(last=False)
            logger.debug(f"Catalog cache evicted key: {oldest_key[-8:]}")

        self._entries[key] = _CacheEntry(
            value=response,
            expires_at=now + self.ttl_seconds,
        )
        self._entries.move_to_end(key)

    def invalidate(self) -> int:
        """
        Drop every cached page

        Called after any write that can change public data.

        Returns:
            Number of entries removed
        """
        removed = len(self._entries)
        self._entries.clear()
        if removed:
            logger.info(f"Invalidated {removed} public catalog cache entries")
        return removed

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics"""
        return {
            "enabled": self.enabled,
            "entries": len(self._entries),
            "max_entries": self.max_entries,
            "ttl_seconds": self.ttl_seconds,
            "hits": self.hits,
            "misses": self.misses,
        }

    def __len__(self) -> int:
        return len(self._entries)

    def _prune_expired(self, now: float) -> None:
        """Drop every entry whose expires_at is at or before now"""
        expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            del self._entries[key]
