"""
Unit tests for PublicCatalogCache

Tests cover:
- Deterministic key generation
- Hits, misses and invalidation
- TTL expiry driven by an injected clock
- Capacity eviction and hit recency
- Disabled cache behavior
"""

import pytest
from unittest.mock import patch

from linkshelf.schemas.catalog import CatalogQuery, CatalogResponse
from linkshelf.services.catalog_cache import PublicCatalogCache, get_public_catalog_cache_key


def _page(total: int = 0) -> CatalogResponse:
    return CatalogResponse(items=[], next_cursor=None, total_count=total)


@pytest.mark.unit
class TestCacheKey:
    """Test cache key generation"""

    def test_key_is_deterministic(self):
        """Identical queries produce identical keys"""
        first = get_public_catalog_cache_key(CatalogQuery(q="python", limit=5))
        second = get_public_catalog_cache_key(CatalogQuery(q="python", limit=5))

        assert first == second
        assert first.startswith("public_catalog:")

    def test_missing_and_empty_search_share_key(self):
        """None, empty and blank search text are the same query"""
        missing = get_public_catalog_cache_key(CatalogQuery(q=None))
        blank = get_public_catalog_cache_key(CatalogQuery(q="   "))
        raw_empty = get_public_catalog_cache_key(CatalogQuery.model_construct(
            q="", limit=12, cursor=None, link_limit=10, sort_by="updated_at", sort_order="desc"
        ))

        assert missing == blank == raw_empty

    def test_missing_and_empty_cursor_share_key(self):
        """None and empty cursor are the same query"""
        missing = get_public_catalog_cache_key(CatalogQuery(cursor=None))
        empty = get_public_catalog_cache_key(CatalogQuery(cursor=""))

        assert missing == empty

    @pytest.mark.parametrize("changes", [
        {"q": "rust"},
        {"limit": 3},
        {"cursor": "abc"},
        {"link_limit": 2},
        {"sort_by": "name"},
        {"sort_order": "asc"},
    ])
    def test_each_field_changes_key(self, changes):
        """Every query field participates in the key"""
        base = get_public_catalog_cache_key(CatalogQuery())
        changed = get_public_catalog_cache_key(CatalogQuery(**changes))

        assert base != changed


@pytest.mark.unit
class TestCacheReadWrite:
    """Test get/set/invalidate"""

    def test_miss_then_hit(self, catalog_cache):
        """A stored page is returned for the same query"""
        query = CatalogQuery(q="python")
        page = _page(3)

        assert catalog_cache.get(query) is None
        catalog_cache.set(query, page)

        assert catalog_cache.get(query) is page
        assert catalog_cache.hits == 1
        assert catalog_cache.misses == 1

    def test_semantically_identical_query_hits(self, catalog_cache):
        """Blank search text reads the page stored for no search text"""
        catalog_cache.set(CatalogQuery(q=None), _page(1))

        assert catalog_cache.get(CatalogQuery(q="  ")) is not None

    def test_invalidate_clears_everything(self, catalog_cache):
        """Invalidation empties the cache and reports the count"""
        catalog_cache.set(CatalogQuery(q="a"), _page())
        catalog_cache.set(CatalogQuery(q="b"), _page())

        removed = catalog_cache.invalidate()

        assert removed == 2
        assert len(catalog_cache) == 0
        assert catalog_cache.get(CatalogQuery(q="a")) is None

    def test_overwrite_same_key(self, catalog_cache):
        """Setting an existing key replaces the value without growing"""
        query = CatalogQuery()
        catalog_cache.set(query, _page(1))
        catalog_cache.set(query, _page(2))

        assert len(catalog_cache) == 1
        assert catalog_cache.get(query).total_count == 2

    def test_get_stats(self, catalog_cache):
        """Stats expose configuration and counters"""
        catalog_cache.set(CatalogQuery(), _page())
        catalog_cache.get(CatalogQuery())

        stats = catalog_cache.get_stats()

        assert stats["enabled"] is True
        assert stats["entries"] == 1
        assert stats["max_entries"] == 500
        assert stats["ttl_seconds"] == 60
        assert stats["hits"] == 1


@pytest.mark.unit
class TestCacheExpiry:
    """Test TTL handling"""

    def test_entry_alive_before_ttl(self, catalog_cache, fake_clock):
        """Entries are served until the TTL elapses"""
        query = CatalogQuery()
        catalog_cache.set(query, _page())

        fake_clock.advance(59.9)

        assert catalog_cache.get(query) is not None

    def test_entry_expires_at_ttl(self, catalog_cache, fake_clock):
        """An entry is gone once the TTL has fully elapsed"""
        query = CatalogQuery()
        catalog_cache.set(query, _page())

        fake_clock.advance(60)

        assert catalog_cache.get(query) is None

    def test_expired_read_counts_as_miss(self, catalog_cache, fake_clock):
        """Reading an expired key removes it and records a miss"""
        query = CatalogQuery()
        catalog_cache.set(query, _page())
        fake_clock.advance(61)

        assert catalog_cache.get(query) is None
        assert catalog_cache.misses == 1
        assert catalog_cache.hits == 0
        assert len(catalog_cache) == 0

    def test_expired_entries_swept_on_read(self, catalog_cache, fake_clock):
        """Reading any key removes every expired entry"""
        catalog_cache.set(CatalogQuery(q="old"), _page())
        fake_clock.advance(30)
        catalog_cache.set(CatalogQuery(q="new"), _page())
        fake_clock.advance(31)

        catalog_cache.get(CatalogQuery(q="other"))

        assert len(catalog_cache) == 1
        assert catalog_cache.get(CatalogQuery(q="new")) is not None


@pytest.mark.unit
class TestCacheCapacity:
    """Test bounded size"""

    def test_oldest_entry_evicted(self, fake_clock):
        """Inserting past capacity evicts exactly the oldest entry"""
        cache = PublicCatalogCache(ttl_seconds=60, max_entries=3, enabled=True, clock=fake_clock)
        queries = [CatalogQuery(q=f"query-{i}") for i in range(4)]

        for query in queries:
            cache.set(query, _page())

        assert len(cache) == 3
        assert cache.get(queries[0]) is None
        for query in queries[1:]:
            assert cache.get(query) is not None

    def test_hit_refreshes_recency(self, fake_clock):
        """A recently read entry outlives an older untouched one"""
        cache = PublicCatalogCache(ttl_seconds=60, max_entries=2, enabled=True, clock=fake_clock)
        first, second, third = CatalogQuery(q="a"), CatalogQuery(q="b"), CatalogQuery(q="c")

        cache.set(first, _page())
        cache.set(second, _page())
        cache.get(first)
        cache.set(third, _page())

        assert cache.get(second) is None
        assert cache.get(first) is not None
        assert cache.get(third) is not None

    def test_overwrite_at_capacity_does_not_evict(self, fake_clock):
        """Replacing an existing key never evicts another"""
        cache = PublicCatalogCache(ttl_seconds=60, max_entries=2, enabled=True, clock=fake_clock)
        first, second = CatalogQuery(q="a"), CatalogQuery(q="b")

        cache.set(first, _page())
        cache.set(second, _page())
        cache.set(second, _page(5))

        assert cache.get(first) is not None
        assert len(cache) == 2


@pytest.mark.unit
class TestCacheDisabled:
    """Test the disable switch"""

    def test_disabled_cache_never_stores(self, fake_clock):
        """A disabled cache misses every read"""
        cache = PublicCatalogCache(enabled=False, clock=fake_clock)
        query = CatalogQuery()

        cache.set(query, _page())

        assert cache.get(query) is None
        assert len(cache) == 0
        assert cache.is_enabled() is False

    @patch('linkshelf.services.catalog_cache.settings')
    def test_disabled_from_settings(self, mock_settings):
        """DISABLE_PUBLIC_CATALOG_CACHE turns the cache off"""
        mock_settings.DISABLE_PUBLIC_CATALOG_CACHE = True
        mock_settings.PUBLIC_CATALOG_CACHE_TTL = 60
        mock_settings.PUBLIC_CATALOG_CACHE_MAX_ENTRIES = 500

        cache = PublicCatalogCache()

        assert cache.is_enabled() is False

    @patch('linkshelf.services.catalog_cache.settings')
    def test_defaults_from_settings(self, mock_settings):
        """TTL and capacity come from settings when not given"""
        mock_settings.DISABLE_PUBLIC_CATALOG_CACHE = False
        mock_settings.PUBLIC_CATALOG_CACHE_TTL = 15
        mock_settings.PUBLIC_CATALOG_CACHE_MAX_ENTRIES = 7

        cache = PublicCatalogCache()

        assert cache.is_enabled() is True
        assert cache.ttl_seconds == 15
        assert cache.max_entries == 7
