"""
Item data model.
"""

from pydantic import BaseModel, ConfigDict


class Item(BaseModel):
    """Priced item, immutable once retrieved."""

    model_config = ConfigDict(frozen=True)

    id: str
    price: float
