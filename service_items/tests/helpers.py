"""
Test data and doubles for item lookup tests.
"""

from typing import Dict, List

import httpx

MOCK_ITEM_ID = "cca12a3a-8f34-11ea-8d58-a3e15677259a"
MOCK_ITEM = {"id": MOCK_ITEM_ID, "price": 3.5}


class OriginStub:
    """In-memory origin serving ``/items/<id>`` through httpx.MockTransport."""

    def __init__(self, base_url: str = "http://origin.test"):
        self.base_url = base_url
        self.items: Dict[str, dict] = {}
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        prefix = httpx.URL(self.base_url).path.rstrip("/") + "/items/"
        if request.method == "GET" and request.url.path.startswith(prefix):
            item = self.items.get(request.url.path[len(prefix):])
            if item is not None:
                return httpx.Response(200, json=item)
        return httpx.Response(404, json={"detail": "Not Found"})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            transport=httpx.MockTransport(self.handler)
        )
