"""
Lookup contract shared by every item backend.
"""

from typing import Protocol, runtime_checkable

from ..models import Item


@runtime_checkable
class ItemLookup(Protocol):
    """Retrieve an item by identifier.

    Implementations raise when the item cannot be produced; they never return
    ``None``.
    """

    async def find_by_id(self, item_id: str) -> Item:
        ...
