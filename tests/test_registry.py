"""
Tests for the per-shop client cache.
"""

import asyncio

import pytest

from yookassa_connector.registry import ClientRegistry, default_registry, get_client


class TestClientRegistry:
    @pytest.mark.asyncio
    async def test_same_shop_shares_one_client(self):
        registry = ClientRegistry()

        first = registry.get("shop-1", "secret")
        second = registry.get("shop-1", "secret", max_rps=50)

        assert first is second
        assert first.connector.rate_limiter is second.connector.rate_limiter
        assert len(registry) == 1
        await registry.aclose()

    @pytest.mark.asyncio
    async def test_different_shops_get_separate_clients(self):
        registry = ClientRegistry()

        first = registry.get("shop-1", "secret")
        second = registry.get("shop-2", "secret")

        assert first is not second
        assert first.connector.rate_limiter is not second.connector.rate_limiter
        await registry.aclose()

    @pytest.mark.asyncio
    async def test_evict_closes_and_allows_reconfiguration(self):
        registry = ClientRegistry()
        old = registry.get("shop-1", "secret", max_rps=5)

        evicted = await registry.evict("shop-1")
        new = registry.get("shop-1", "secret", max_rps=20)

        assert evicted is old
        assert old.connector.transport.is_closed
        assert new is not old
        assert new.connector.rate_limiter.max_requests == 20
        await registry.aclose()

    @pytest.mark.asyncio
    async def test_evict_unknown_shop_is_noop(self):
        registry = ClientRegistry()

        assert await registry.evict("missing") is None

    @pytest.mark.asyncio
    async def test_aclose_clears_everything(self):
        registry = ClientRegistry()
        client = registry.get("shop-1", "secret")

        await registry.aclose()

        assert "shop-1" not in registry
        assert client.connector.transport.is_closed

    @pytest.mark.asyncio
    async def test_module_level_accessor_uses_default_registry(self):
        client = get_client("shop-default", "secret")

        assert "shop-default" in default_registry
        assert get_client("shop-default", "secret") is client
        await default_registry.evict("shop-default")


class TestEventLoopBinding:
    def test_new_event_loop_gets_fresh_client(self):
        registry = ClientRegistry()

        async def fetch():
            return registry.get("shop-1", "secret")

        first = asyncio.run(fetch())
        second = asyncio.run(fetch())

        assert first is not second
        assert registry.get("shop-1", "secret") is second
        asyncio.run(registry.aclose())

    @pytest.mark.asyncio
    async def test_client_created_outside_loop_is_reused_inside(self):
        registry = ClientRegistry()
        client = await asyncio.to_thread(registry.get, "shop-1", "secret")

        assert registry.get("shop-1", "secret") is client
        assert registry.get("shop-1", "secret") is client
        await registry.aclose()
