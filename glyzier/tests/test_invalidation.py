import pytest
from ..core import config, cache, invalidation_helpers
from ..core.invalidation_helpers import (
    invalidate_dashboard_cache,
    invalidate_pattern,
    invalidate_product_cache,
    invalidate_specific_cache,
    DASHBOARD_STATS_KEY,
)


class FakeRedis:
    """Dict-backed stand-in for the async Redis client."""

    def __init__(self):
        self.store = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = value

    async def delete(self, *keys):
        for key in keys:
            self.store.pop(key, None)

    async def scan(self, cursor=0, match=None, count=None):
        prefix = match.rstrip("*")
        return 0, [key for key in self.store if key.startswith(prefix)]


@pytest.fixture
def fake_redis(monkeypatch):
    client = FakeRedis()
    monkeypatch.setattr(config, "CACHE_ENABLED", True)
    monkeypatch.setattr(cache, "redis_client", client)
    monkeypatch.setattr(invalidation_helpers, "redis_client", client)
    return client


@pytest.mark.asyncio
async def test_helpers_are_noops_when_cache_disabled(monkeypatch):
    monkeypatch.setattr(config, "CACHE_ENABLED", False)
    assert await cache.get_cache("anything") is None
    assert await cache.set_cache("anything", "value") is False
    assert await invalidate_product_cache() is True
    assert await invalidate_specific_cache(["a", "b"]) is True


@pytest.mark.asyncio
async def test_invalidate_product_cache(fake_redis):
    await cache.set_cache("products:page:0:size:20", "[]")
    await cache.set_cache("products:page:1:size:20", "[]")
    await cache.set_cache(DASHBOARD_STATS_KEY, "{}")
    await cache.set_cache("unrelated:key", "keep")

    assert await invalidate_product_cache() is True

    assert await cache.get_cache("products:page:0:size:20") is None
    assert await cache.get_cache("products:page:1:size:20") is None
    assert await cache.get_cache(DASHBOARD_STATS_KEY) is None
    assert await cache.get_cache("unrelated:key") == "keep"


@pytest.mark.asyncio
async def test_invalidate_dashboard_and_specific_keys(fake_redis):
    await cache.set_cache(DASHBOARD_STATS_KEY, "{}")
    await cache.set_cache("test:key1", "value1")
    await cache.set_cache("test:key2", "value2")

    assert await invalidate_dashboard_cache() is True
    assert await cache.get_cache(DASHBOARD_STATS_KEY) is None

    assert await invalidate_specific_cache(["test:key1"]) is True
    assert await cache.get_cache("test:key1") is None
    assert await cache.get_cache("test:key2") == "value2"


@pytest.mark.asyncio
async def test_cache_errors_are_reported_not_raised(monkeypatch):
    class BrokenRedis(FakeRedis):
        async def scan(self, cursor=0, match=None, count=None):
            raise ConnectionError("redis down")

        async def get(self, key):
            raise ConnectionError("redis down")

    broken = BrokenRedis()
    monkeypatch.setattr(config, "CACHE_ENABLED", True)
    monkeypatch.setattr(cache, "redis_client", broken)
    monkeypatch.setattr(invalidation_helpers, "redis_client", broken)

    assert await invalidate_pattern("products:page:*") is False
    assert await cache.get_cache("products:page:0:size:20") is None


def test_product_listing_is_served_from_cache(client, fake_redis, make_seller, make_product):
    _, headers, _ = make_seller("cache-seller@glyzier.io")
    make_product(headers, name="Cached Print")

    first = client.get("/api/products").json()
    assert first["total_items"] == 1
    assert "products:page:0:size:20" in fake_redis.store

    # A new product invalidates the cached pages
    make_product(headers, name="Second Print")
    assert "products:page:0:size:20" not in fake_redis.store
    assert client.get("/api/products").json()["total_items"] == 2
