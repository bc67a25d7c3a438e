"""
Item lookups.

Every backend implements the single ``ItemLookup`` contract so that callers can
compose them freely:

- OriginItemLookup: authoritative HTTP origin
- CacheItemLookup: Redis key-value cache
- FallbackItemLookup: tries a primary lookup, falls back to a secondary
"""

from .base import ItemLookup
from .cache import CacheItemLookup
from .fallback import FallbackItemLookup
from .origin import OriginItemLookup

__all__ = [
    "ItemLookup",
    "CacheItemLookup",
    "FallbackItemLookup",
    "OriginItemLookup",
]
