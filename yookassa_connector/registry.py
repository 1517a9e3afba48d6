"""Process-wide cache of clients keyed by shop id."""

import asyncio
import logging
from typing import Any, Dict, Optional, Tuple

from .client import YooKassa, build_settings

logger = logging.getLogger(__name__)


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class ClientRegistry:
    """Shares one ``YooKassa`` client, and so one rate limiter and connection
    pool, between all callers using the same shop id.

    A client is bound to the event loop it was first requested from. Asking
    for it from another running loop, such as a later ``asyncio.run``,
    replaces the cached client with a fresh one.
    """

    def __init__(self) -> None:
        self._clients: Dict[str, Tuple[YooKassa, Optional[asyncio.AbstractEventLoop]]] = {}

    def __contains__(self, shop_id: str) -> bool:
        return shop_id in self._clients

    def __len__(self) -> int:
        return len(self._clients)

    def get(self, shop_id: str, secret_key: str, **options: Any) -> YooKassa:
        """Return the cached client for ``shop_id``, creating it on first use.

        Options only apply when the client is created; evict the shop to
        reconfigure it.
        """
        loop = _running_loop()
        entry = self._clients.get(shop_id)
        if entry is not None:
            client, bound_loop = entry
            if bound_loop is None or loop is None or bound_loop is loop:
                if bound_loop is None and loop is not None:
                    self._clients[shop_id] = (client, loop)
                return client
            # The old loop's pool and lock cannot be awaited from here
            logger.info("Replacing YooKassa client for shop %s bound to another event loop", shop_id)

        client = YooKassa(settings=build_settings(shop_id, secret_key, **options))
        self._clients[shop_id] = (client, loop)
        logger.info("Cached YooKassa client for shop %s", shop_id)
        return client

    async def evict(self, shop_id: str) -> Optional[YooKassa]:
        """Drop and close the client for ``shop_id``; returns it if present."""
        entry = self._clients.pop(shop_id, None)
        if entry is None:
            return None
        client = entry[0]
        await client.aclose()
        logger.info("Evicted YooKassa client for shop %s", shop_id)
        return client

    async def aclose(self) -> None:
        entries, self._clients = list(self._clients.values()), {}
        for client, _ in entries:
            await client.aclose()


default_registry = ClientRegistry()


def get_client(shop_id: str, secret_key: str, **options: Any) -> YooKassa:
    """Get the shared client for a shop from the default registry.

    Clients are reused only within one event loop; see ``ClientRegistry``.
    """
    return default_registry.get(shop_id, secret_key, **options)
