"""USDA FoodData Central API client."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

# Only the best match is used, so searches ask for a single hit.
SEARCH_PAGE_SIZE = 1

_logger = logging.getLogger(__name__)


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(
        self,
        query: str,
        page_size: int = SEARCH_PAGE_SIZE,
        data_types: list[str] | None = None,
    ) -> dict[str, object]:
        """Search foods by query and return raw API data."""

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food with its portions by FDC id and return raw API data."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout: float = 15
    ) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def search_foods(
        self,
        query: str,
        page_size: int = SEARCH_PAGE_SIZE,
        data_types: list[str] | None = None,
    ) -> dict[str, object]:
        """Search foods by query, optionally limited to FDC data types."""
        body: dict[str, object] = {"query": query, "pageSize": page_size}
        if data_types:
            body["dataType"] = data_types
        return await self._request("POST", "/foods/search", json=body)

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id, including its foodPortions."""
        return await self._request("GET", f"/food/{fdc_id}")

    async def _request(
        self, method: str, path: str, json: dict[str, object] | None = None
    ) -> dict[str, object]:
        response = await self.http_client.request(
            method,
            f"{self.base_url}{path}",
            params={"api_key": self.api_key},
            json=json,
            timeout=self.timeout,
        )
        _logger.debug("FDC %s %s -> %s", method, path, response.status_code)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
