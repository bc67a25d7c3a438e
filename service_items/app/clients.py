"""
Client construction and wiring for item lookups.
"""

from typing import Optional

import httpx
import redis.asyncio as redis

from shared.config import ItemsConfig, get_config
from shared.logging import configure_logging, get_logger
from .lookups import CacheItemLookup, FallbackItemLookup, ItemLookup, OriginItemLookup

logger = get_logger("items.clients")


def build_http_client(config: ItemsConfig) -> httpx.AsyncClient:
    """Create the origin HTTP client."""
    return httpx.AsyncClient(
        base_url=config.origin_url,
        timeout=httpx.Timeout(config.origin_timeout_seconds),
    )


def build_redis_client(config: ItemsConfig) -> redis.Redis:
    """Create the cache client."""
    return redis.from_url(
        config.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=config.redis_socket_timeout_seconds,
        socket_timeout=config.redis_socket_timeout_seconds,
    )


class ItemLookupResources:
    """Cache-first item lookup together with the clients it owns."""

    def __init__(self, http_client: httpx.AsyncClient, redis_client: redis.Redis):
        self.http_client = http_client
        self.redis_client = redis_client
        self.lookup: ItemLookup = FallbackItemLookup(
            CacheItemLookup(redis_client),
            OriginItemLookup(http_client),
        )

    async def aclose(self):
        """Close the HTTP and Redis clients."""
        try:
            await self.http_client.aclose()
        finally:
            await self.redis_client.aclose()
        logger.info("Item lookup clients closed")

    async def __aenter__(self) -> "ItemLookupResources":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()


def build_item_lookup(config: Optional[ItemsConfig] = None) -> ItemLookupResources:
    """Wire the Redis cache in front of the HTTP origin."""
    config = config or get_config()
    configure_logging("items", config.log_level)
    resources = ItemLookupResources(build_http_client(config), build_redis_client(config))
    logger.info(
        "Item lookup configured",
        origin_url=config.origin_url,
        env=config.env
    )
    return resources
