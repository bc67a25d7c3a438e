"""
Item lookup against the Redis cache.
"""

from typing import Union

import redis.asyncio as redis

from shared.logging import get_logger
from shared.errors import ItemNotFoundError
from ..models import Item


class CacheItemLookup:
    """Read items cached as JSON under ``items:<id>``.

    Entries are written and expired by an external producer; this lookup only
    reads them.
    """

    KEY_PREFIX = "items:"

    def __init__(self, redis_client: redis.Redis):
        self.redis = redis_client
        self.logger = get_logger("items.cache_lookup")

    @classmethod
    def key_for(cls, item_id: str) -> str:
        """Cache key holding the item."""
        return f"{cls.KEY_PREFIX}{item_id}"

    async def find_by_id(self, item_id: str) -> Item:
        """Get a cached item, raising ItemNotFoundError on a miss."""
        cache_key = self.key_for(item_id)

        cached_data: Union[str, bytes, None] = await self.redis.get(cache_key)
        if cached_data is None:
            self.logger.debug("Cache miss for item", cache_key=cache_key)
            raise ItemNotFoundError(item_id, details={"cache_key": cache_key})

        self.logger.debug("Cache hit for item", cache_key=cache_key)
        return Item.model_validate_json(cached_data)
