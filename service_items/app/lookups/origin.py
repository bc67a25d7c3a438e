"""
Item lookup against the authoritative HTTP origin.
"""

import httpx

from shared.logging import get_logger
from shared.errors import OriginRequestError
from ..models import Item


class OriginItemLookup:
    """Fetch items from the origin's ``/items/<id>`` endpoint.

    The HTTP client is injected with its base URL and timeouts already set.
    The origin is authoritative: its body is returned as sent, without type
    checks or coercion. Failures are not retried.
    """

    def __init__(self, http_client: httpx.AsyncClient):
        self.http_client = http_client
        self.logger = get_logger("items.origin_lookup")

    async def find_by_id(self, item_id: str) -> Item:
        """Fetch an item from the origin."""
        path = f"/items/{item_id}"

        try:
            response = await self.http_client.get(path)
        except httpx.HTTPError as e:
            self.logger.warning("Origin request error", path=path, error=str(e))
            raise OriginRequestError(str(e), details={"path": path}) from e

        if not response.is_success:
            self.logger.warning(
                "Origin request failed",
                path=path,
                status_code=response.status_code
            )
            raise OriginRequestError(
                f"Request failed with status code {response.status_code}",
                details={"path": path, "status_code": response.status_code}
            )

        body = response.json()
        if not isinstance(body, dict):
            raise ValueError(f"Expected a JSON object from {path}, got {type(body).__name__}")

        self.logger.debug("Origin item retrieved", path=path)
        return Item.model_construct(**body)
