"""
Composite lookup that falls back from a primary to a secondary backend.
"""

from shared.logging import get_logger, item_context
from ..models import Item
from .base import ItemLookup


class FallbackItemLookup:
    """Try ``primary`` first and use ``secondary`` when it fails.

    Any exception from the primary triggers the fallback. The secondary is
    awaited once, only after the primary has failed, and its exception is the
    one raised when both fail. Results from the secondary are not written back
    to the primary.
    """

    def __init__(self, primary: ItemLookup, secondary: ItemLookup):
        self.primary = primary
        self.secondary = secondary
        self.logger = get_logger("items.fallback_lookup")

    async def find_by_id(self, item_id: str) -> Item:
        with item_context(item_id):
            try:
                return await self.primary.find_by_id(item_id)
            except Exception as e:
                self.logger.info(
                    "Primary lookup failed, falling back",
                    primary=type(self.primary).__name__,
                    secondary=type(self.secondary).__name__,
                    error=str(e)
                )

            return await self.secondary.find_by_id(item_id)
